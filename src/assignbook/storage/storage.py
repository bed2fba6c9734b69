"""File-backed persistence for the address book.

The file format is chosen from the path suffix: ``.yaml`` and ``.yml``
files are written as YAML, everything else as JSON.
"""
from __future__ import annotations

import logging
from pathlib import Path

from assignbook.model.address_book import AddressBook
from assignbook.storage.errors import DataLoadError
from assignbook.storage.serializer import AddressBookSerializer

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class AddressBookStorage:
    """Reads and writes one address book file.

    Parameters
    ----------
    path:
        Location of the data file.
    serializer:
        Serializer to use; a default ``AddressBookSerializer`` if omitted.
    """

    def __init__(self, path: Path | str, serializer: AddressBookSerializer | None = None) -> None:
        self._path = Path(path)
        self._serializer = serializer or AddressBookSerializer()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_yaml(self) -> bool:
        return self._path.suffix.lower() in _YAML_SUFFIXES

    def read(self) -> AddressBook | None:
        """Load the address book, or return ``None`` if the file does not exist.

        Raises
        ------
        DataLoadError
            If the file exists but cannot be read or parsed.
        ValidationError
            If the file parses but holds invalid data.
        """
        if not self._path.exists():
            logger.info("Data file %s not found", self._path)
            return None
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DataLoadError(f"Cannot read {self._path}: {exc}") from exc
        if self.is_yaml:
            book = self._serializer.from_yaml(text)
        else:
            book = self._serializer.from_json(text)
        logger.debug("Loaded %d person(s) from %s", len(book), self._path)
        return book

    def save(self, book: AddressBook) -> None:
        """Write ``book`` to the data file, creating parent directories."""
        text = self._serializer.to_yaml(book) if self.is_yaml else self._serializer.to_json(book)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(text, encoding="utf-8")
        logger.debug("Saved %d person(s) to %s", len(book), self._path)
