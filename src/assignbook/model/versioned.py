"""Undo/redo history for the address book.

``VersionedAddressBook`` is a live ``AddressBook`` plus a list of
committed snapshots and a pointer into that list.  The pointer always
indexes the snapshot that matches the live state as of the last
commit, undo or redo.

State machine
-------------
- initial: ``history == [copy(initial)]``, ``pointer == 0``
- ``commit()``: drop ``history[pointer + 1:]``, append a copy of the
  live state, advance the pointer
- ``undo()``: step the pointer back and restore that snapshot
- ``redo()``: step the pointer forward and restore that snapshot

Committing is the only way redo-able snapshots are discarded.
"""
from __future__ import annotations

import logging

from assignbook.model.address_book import AddressBook
from assignbook.model.errors import NoRedoableStateError, NoUndoableStateError

logger = logging.getLogger(__name__)


class VersionedAddressBook(AddressBook):
    """An ``AddressBook`` that can undo and redo committed states.

    Parameters
    ----------
    initial:
        The starting content.  It is copied; later changes to ``initial``
        do not affect this book.
    """

    def __init__(self, initial: AddressBook | None = None) -> None:
        super().__init__()
        if initial is not None:
            self.reset_data(initial)
        self._history: list[AddressBook] = [self.copy()]
        self._pointer: int = 0

    def commit(self) -> None:
        """Snapshot the live state, discarding any redo-able snapshots."""
        del self._history[self._pointer + 1 :]
        self._history.append(self.copy())
        self._pointer += 1
        logger.debug("Committed address book state %d", self._pointer)

    def undo(self) -> None:
        """Restore the previous committed state.

        Raises
        ------
        NoUndoableStateError
            If the pointer is already at the oldest snapshot.
        """
        if not self.can_undo:
            raise NoUndoableStateError()
        self._pointer -= 1
        self.reset_data(self._history[self._pointer])
        logger.debug("Undo: restored address book state %d", self._pointer)

    def redo(self) -> None:
        """Restore the next committed state.

        Raises
        ------
        NoRedoableStateError
            If the pointer is already at the newest snapshot.
        """
        if not self.can_redo:
            raise NoRedoableStateError()
        self._pointer += 1
        self.reset_data(self._history[self._pointer])
        logger.debug("Redo: restored address book state %d", self._pointer)

    @property
    def can_undo(self) -> bool:
        return self._pointer > 0

    @property
    def can_redo(self) -> bool:
        return self._pointer < len(self._history) - 1

    @property
    def current_pointer(self) -> int:
        return self._pointer

    @property
    def history_size(self) -> int:
        return len(self._history)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VersionedAddressBook):
            return (
                super().__eq__(other) is True
                and self._history == other._history
                and self._pointer == other._pointer
            )
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]
