"""Assignments and the per-person ``UniqueAssignmentList``.

An ``Assignment`` is identified by its description and due date; the
done-state is carried along but does not take part in equality, so a
completed and a pending copy of the same assignment are duplicates.
"""
from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import ClassVar

from assignbook.model.errors import (
    AssignmentNotFoundError,
    DuplicateAssignmentError,
    ValidationError,
)

DATE_FORMATS: tuple[str, ...] = ("%d/%m/%Y", "%Y-%m-%d")


def parse_due_date(raw: str | date) -> date:
    """Parse a due date from ``dd/mm/yyyy`` or ISO ``yyyy-mm-dd`` text.

    ``date`` instances are returned unchanged.

    Raises
    ------
    ValidationError
        If ``raw`` matches none of the accepted formats.
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
    raise ValidationError("DueDate", raw, Assignment.MESSAGE_DATE_CONSTRAINTS)


@dataclass(frozen=True, slots=True)
class Assignment:
    """A single assignment owned by a person.

    Parameters
    ----------
    description:
        Non-blank text; may not contain ``|``.
    due_date:
        The day the assignment is due.  Strings are parsed with
        ``parse_due_date``.
    is_done:
        Completion flag.  Excluded from equality and hashing.
    """

    description: str
    due_date: date
    is_done: bool = field(default=False, compare=False)

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Assignment descriptions should not be blank and should not contain '|'"
    )
    MESSAGE_DATE_CONSTRAINTS: ClassVar[str] = (
        "Due dates should be valid dates in the format dd/mm/yyyy or yyyy-mm-dd"
    )
    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^|\s][^|]*")

    def __post_init__(self) -> None:
        if not isinstance(self.description, str):
            raise ValidationError("Assignment", self.description, self.MESSAGE_CONSTRAINTS)
        description = " ".join(self.description.split())
        if not self._PATTERN.fullmatch(description):
            raise ValidationError("Assignment", self.description, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "description", description)
        object.__setattr__(self, "due_date", parse_due_date(self.due_date))
        object.__setattr__(self, "is_done", bool(self.is_done))

    def with_done(self, done: bool) -> "Assignment":
        """Return a copy of this assignment with the given done-state."""
        return dataclasses.replace(self, is_done=done)

    def is_due_before(self, cutoff: date) -> bool:
        return self.due_date < cutoff

    def __str__(self) -> str:
        status = "X" if self.is_done else " "
        return f"[{status}] {self.description} (due {self.due_date:%d/%m/%Y})"


class UniqueAssignmentList:
    """Ordered, duplicate-free list of assignments.

    Uniqueness follows ``Assignment`` equality (description and due
    date).  Lookups are linear scans; per-person lists are small.

    Parameters
    ----------
    assignments:
        Optional initial contents.  Duplicates among them raise
        ``DuplicateAssignmentError``.
    """

    def __init__(self, assignments: Iterable[Assignment] = ()) -> None:
        self._items: list[Assignment] = []
        for assignment in assignments:
            self.add(assignment)

    def contains(self, assignment: Assignment) -> bool:
        return any(existing == assignment for existing in self._items)

    def add(self, assignment: Assignment) -> None:
        """Append ``assignment``.

        Raises
        ------
        DuplicateAssignmentError
            If an equal assignment is already present.
        """
        if self.contains(assignment):
            raise DuplicateAssignmentError(assignment)
        self._items.append(assignment)

    def remove(self, assignment: Assignment) -> None:
        """Remove the first element equal to ``assignment``.

        Raises
        ------
        AssignmentNotFoundError
            If no equal element exists.
        """
        self._items.pop(self._index_of(assignment))

    def mark(self, assignment: Assignment, done: bool | None = True) -> Assignment:
        """Set the done-state of the element equal to ``assignment``.

        ``done=None`` flips the current state.  The element is replaced
        at the same position by an updated copy, which is returned.

        Raises
        ------
        AssignmentNotFoundError
            If no equal element exists.
        """
        index = self._index_of(assignment)
        current = self._items[index]
        new_state = (not current.is_done) if done is None else done
        updated = current.with_done(new_state)
        self._items[index] = updated
        return updated

    def sort(self) -> None:
        """Stable in-place sort by due date, earliest first."""
        self._items.sort(key=lambda a: a.due_date)

    def remove_due_before(self, cutoff: date) -> list[Assignment]:
        """Drop every assignment due strictly before ``cutoff``.

        Returns the removed assignments in their original order.
        """
        removed = [a for a in self._items if a.is_due_before(cutoff)]
        if removed:
            self._items = [a for a in self._items if not a.is_due_before(cutoff)]
        return removed

    def as_list(self) -> tuple[Assignment, ...]:
        """Return a read-only snapshot of the current contents."""
        return tuple(self._items)

    def _index_of(self, assignment: Assignment) -> int:
        for index, existing in enumerate(self._items):
            if existing == assignment:
                return index
        raise AssignmentNotFoundError(assignment)

    def __iter__(self) -> Iterator[Assignment]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Assignment) and self.contains(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueAssignmentList):
            return NotImplemented
        return _full_state(self._items) == _full_state(other._items)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UniqueAssignmentList({list(self._items)!r})"


def _full_state(items: Iterable[Assignment]) -> list[tuple[str, date, bool]]:
    return [(a.description, a.due_date, a.is_done) for a in items]
