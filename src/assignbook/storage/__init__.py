"""Persistence for address book snapshots.

The model core defines no file format; this package maps snapshots to
JSON or YAML files and back.
"""
from __future__ import annotations

from assignbook.storage.errors import DataLoadError
from assignbook.storage.sample_data import sample_address_book
from assignbook.storage.serializer import MISSING_FIELD_MESSAGE_FORMAT, AddressBookSerializer
from assignbook.storage.storage import AddressBookStorage

__all__ = [
    "AddressBookSerializer",
    "AddressBookStorage",
    "DataLoadError",
    "MISSING_FIELD_MESSAGE_FORMAT",
    "sample_address_book",
]
