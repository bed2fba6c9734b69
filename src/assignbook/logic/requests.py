"""Request variants accepted by the ``Dispatcher``.

Every user-visible command is a frozen dataclass.  ``Request`` is the
closed union of all variants; the dispatcher switches on the concrete
type with ``isinstance``.  Indices are one-based, as shown to users.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Union

from assignbook.model.assignment import Assignment
from assignbook.model.person import Person
from assignbook.model.values import Email, Module, Name, Tag


# ---------------------------------------------------------------------------
# Person requests
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AddPerson:
    """Add a new person to the roster."""

    person: Person


@dataclass(frozen=True, slots=True)
class DeletePerson:
    """Delete the person at ``index`` in the displayed person list."""

    index: int


@dataclass(frozen=True, slots=True)
class EditPerson:
    """Edit the person at ``index`` in the displayed person list.

    Fields left as ``None`` keep their current value.  ``tags`` replaces
    the whole tag set when given.
    """

    index: int
    name: Name | None = None
    email: Email | None = None
    module: Module | None = None
    tags: frozenset[Tag] | None = None

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.email is None and self.module is None and self.tags is None


@dataclass(frozen=True, slots=True)
class ListPersons:
    """Show every person."""


@dataclass(frozen=True, slots=True)
class FindPersons:
    """Show persons whose name contains any of ``keywords``."""

    keywords: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FilterModule:
    """Show persons enrolled in ``module``."""

    module: Module


@dataclass(frozen=True, slots=True)
class ViewPerson:
    """Make the person at ``index`` the active person."""

    index: int


# ---------------------------------------------------------------------------
# Assignment requests
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AddAssignment:
    """Add ``assignment`` to the person called ``name``."""

    name: Name
    assignment: Assignment


@dataclass(frozen=True, slots=True)
class AddModuleAssignment:
    """Add ``assignment`` to every person enrolled in ``module``."""

    module: Module
    assignment: Assignment


@dataclass(frozen=True, slots=True)
class DeleteAssignment:
    """Delete the assignment at ``index`` in the displayed assignment list."""

    index: int


@dataclass(frozen=True, slots=True)
class MarkAssignment:
    """Mark the assignment at ``index`` in the displayed assignment list.

    ``done=None`` toggles the current state.
    """

    index: int
    done: bool | None = True


@dataclass(frozen=True, slots=True)
class CleanAssignments:
    """Remove every assignment due before ``cutoff`` (default: from prefs)."""

    cutoff: date | None = field(default=None)


# ---------------------------------------------------------------------------
# Whole-book requests
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ClearAddressBook:
    """Remove every person."""


@dataclass(frozen=True, slots=True)
class Undo:
    """Restore the state before the last committed command."""


@dataclass(frozen=True, slots=True)
class Redo:
    """Re-apply the last undone command."""


Request = Union[
    AddPerson,
    DeletePerson,
    EditPerson,
    ListPersons,
    FindPersons,
    FilterModule,
    ViewPerson,
    AddAssignment,
    AddModuleAssignment,
    DeleteAssignment,
    MarkAssignment,
    CleanAssignments,
    ClearAddressBook,
    Undo,
    Redo,
]

MUTATING_REQUESTS: tuple[type, ...] = (
    AddPerson,
    DeletePerson,
    EditPerson,
    AddAssignment,
    AddModuleAssignment,
    DeleteAssignment,
    MarkAssignment,
    CleanAssignments,
    ClearAddressBook,
)
