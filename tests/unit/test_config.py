"""Unit tests for assignbook.config — UserPrefs loading and validation."""
from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from assignbook.config import ConfigError, UserPrefs
from assignbook.errors import AssignbookError


class TestUserPrefsDefaults:
    def test_defaults(self) -> None:
        prefs = UserPrefs()
        assert prefs.data_file == Path("data") / "assignbook.json"
        assert prefs.clean_grace_days == 0
        assert prefs.log_level == "WARNING"

    def test_clean_cutoff_default_is_today(self) -> None:
        assert UserPrefs().clean_cutoff(date(2024, 2, 1)) == date(2024, 2, 1)

    def test_clean_cutoff_with_grace(self) -> None:
        assert UserPrefs(clean_grace_days=3).clean_cutoff(date(2024, 2, 1)) == date(2024, 1, 29)

    def test_with_data_file(self) -> None:
        prefs = UserPrefs().with_data_file("other.yaml")
        assert prefs.data_file == Path("other.yaml")


class TestUserPrefsValidation:
    @pytest.mark.parametrize("value", [-1, "3", 1.5, True])
    def test_bad_grace_days(self, value: object) -> None:
        with pytest.raises(ConfigError):
            UserPrefs(clean_grace_days=value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [5, None, ["a.json"]])
    def test_bad_data_file(self, value: object) -> None:
        with pytest.raises(ConfigError, match="data_file"):
            UserPrefs(data_file=value)  # type: ignore[arg-type]

    def test_log_level_normalized(self) -> None:
        assert UserPrefs(log_level="debug").log_level == "DEBUG"

    def test_bad_log_level(self) -> None:
        with pytest.raises(ConfigError, match="log_level"):
            UserPrefs(log_level="LOUD")

    def test_config_error_is_assignbook_error(self) -> None:
        assert issubclass(ConfigError, AssignbookError)

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(ConfigError, match="colour"):
            UserPrefs.from_dict({"colour": "blue"})


class TestUserPrefsFiles:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert UserPrefs.load(tmp_path / "absent.yaml") == UserPrefs()

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.yaml"
        path.write_text("", encoding="utf-8")
        assert UserPrefs.load(path) == UserPrefs()

    def test_save_then_load(self, tmp_path: Path) -> None:
        prefs = UserPrefs(data_file=Path("books") / "mine.yaml", clean_grace_days=5, log_level="INFO")
        path = tmp_path / "conf" / "prefs.yaml"
        prefs.save(path)
        assert UserPrefs.load(path) == prefs

    def test_partial_file(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.yaml"
        path.write_text("clean_grace_days: 2\n", encoding="utf-8")
        prefs = UserPrefs.load(path)
        assert prefs.clean_grace_days == 2
        assert prefs.log_level == "WARNING"

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            UserPrefs.load(path)

    def test_ill_typed_data_file(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.yaml"
        path.write_text("data_file: 5\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="data_file"):
            UserPrefs.load(path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.yaml"
        path.write_text("log_level: [oops", encoding="utf-8")
        with pytest.raises(ConfigError):
            UserPrefs.load(path)
