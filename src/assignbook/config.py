"""User preferences for assignbook.

Preferences live in a small YAML file::

    data_file: data/assignbook.json
    clean_grace_days: 0
    log_level: WARNING

A missing file yields the defaults.  Unknown keys and ill-typed values
raise ``ConfigError``.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path

import yaml

from assignbook.errors import AssignbookError

logger = logging.getLogger(__name__)

DEFAULT_PREFS_FILE = Path("preferences.yaml")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(AssignbookError):
    """Raised when a preferences file cannot be read or is malformed."""


@dataclass(frozen=True)
class UserPrefs:
    """Immutable user preferences.

    Parameters
    ----------
    data_file:
        Path of the address book file.
    clean_grace_days:
        Assignments due more than this many days before today are removed
        by ``clean``.  ``0`` removes everything due before today.
    log_level:
        Name of the standard logging level for the CLI.
    """

    data_file: Path = Path("data") / "assignbook.json"
    clean_grace_days: int = 0
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(self.data_file, (str, Path)):
            raise ConfigError(f"data_file must be a path, got {self.data_file!r}")
        object.__setattr__(self, "data_file", Path(self.data_file))
        if isinstance(self.clean_grace_days, bool) or not isinstance(self.clean_grace_days, int):
            raise ConfigError(f"clean_grace_days must be an integer, got {self.clean_grace_days!r}")
        if self.clean_grace_days < 0:
            raise ConfigError(f"clean_grace_days must be >= 0, got {self.clean_grace_days}")
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    def clean_cutoff(self, today: date | None = None) -> date:
        """Return the date before which ``clean`` removes assignments."""
        return (today or date.today()) - timedelta(days=self.clean_grace_days)

    def with_data_file(self, data_file: Path | str) -> "UserPrefs":
        return dataclasses.replace(self, data_file=Path(data_file))

    # ------------------------------------------------------------------
    # YAML round-trip
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, object]:
        return {
            "data_file": self.data_file.as_posix(),
            "clean_grace_days": self.clean_grace_days,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "UserPrefs":
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown preference key(s): {', '.join(unknown)}")
        return cls(**data)  # type: ignore[arg-type]

    @classmethod
    def load(cls, path: Path | str = DEFAULT_PREFS_FILE) -> "UserPrefs":
        """Load preferences from ``path``, falling back to defaults if absent."""
        path = Path(path)
        if not path.exists():
            logger.info("Preferences file %s not found; using defaults", path)
            return cls()
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read preferences from {path}: {exc}") from exc
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Preferences file {path} must contain a mapping")
        return cls.from_dict(data)

    def save(self, path: Path | str = DEFAULT_PREFS_FILE) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False),
            encoding="utf-8",
        )
