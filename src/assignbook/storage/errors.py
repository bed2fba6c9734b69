"""Errors raised while reading or writing address book files."""
from __future__ import annotations

from assignbook.errors import AssignbookError


class DataLoadError(AssignbookError):
    """Raised when an address book file cannot be read or parsed."""
