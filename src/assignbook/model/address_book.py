"""The ``AddressBook`` aggregate: the roster plus the active-person view.

The address book owns a ``UniquePersonList`` and remembers one *active*
person whose assignments are projected into ``assignment_list``.  Every
operation that adds, replaces or removes a person keeps the active
reference pointing at a person that is actually in the roster.

Usage
-----
::

    book = AddressBook()
    book.add_person(alice)
    book.add_assignment(alice, Assignment("HW1", date(2024, 1, 10)))
    book.change_active_person(alice)
    book.assignment_list   # (Assignment('HW1', ...),)
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from assignbook.model.assignment import Assignment
from assignbook.model.person import Person, UniquePersonList
from assignbook.model.values import Name

logger = logging.getLogger(__name__)


class AddressBook:
    """Aggregate root holding the unique person roster.

    Parameters
    ----------
    persons:
        Optional initial roster.  Names must be unique.
    """

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons = UniquePersonList(persons)
        self._active_person: Person | None = None
        self._active_assignments: list[Assignment] = []

    # ------------------------------------------------------------------
    # Whole-book operations
    # ------------------------------------------------------------------

    def copy(self) -> "AddressBook":
        """Return an independent copy of the roster and active selection.

        Persons are immutable, so the copy shares them with ``self``.
        """
        clone = AddressBook()
        clone._restore_from(self)
        return clone

    def reset_data(self, other: "AddressBook") -> None:
        """Replace the roster and active selection with those of ``other``."""
        self._restore_from(other)

    def _restore_from(self, other: "AddressBook") -> None:
        self._persons = other._persons.copy()
        self._active_person = other._active_person
        self._active_assignments = list(other._active_assignments)

    # ------------------------------------------------------------------
    # Persons
    # ------------------------------------------------------------------

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def has_email(self, person: Person, exclude: Person | None = None) -> bool:
        """Return True if another roster entry already uses ``person.email``.

        ``exclude`` names a person (by ``is_same_person``) to ignore, so an
        edit does not collide with the entry being edited.
        """
        return any(
            existing.email == person.email
            for existing in self._persons
            if exclude is None or not existing.is_same_person(exclude)
        )

    def find_person(self, name: Name) -> Person | None:
        """Return the roster entry named ``name``, or ``None`` if absent."""
        for person in self._persons:
            if person.has_name(name):
                return person
        return None

    def add_person(self, person: Person) -> None:
        """Append ``person``.

        Raises
        ------
        DuplicatePersonError
            If a person with the same name exists.
        """
        self._persons.add(person)
        logger.debug("Added person %s", person.name)

    def remove_person(self, person: Person) -> None:
        """Remove ``person``; clears the active view if it was active.

        Raises
        ------
        PersonNotFoundError
            If ``person`` is not in the roster.
        """
        removed = self._persons.remove(person)
        if self.is_active_person(removed):
            self._clear_active()
        logger.debug("Removed person %s", removed.name)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited``, keeping its roster position.

        Raises
        ------
        PersonNotFoundError
            If ``target`` is not in the roster.
        DuplicatePersonError
            If ``edited`` collides with a different roster entry.
        """
        was_active = self.is_active_person(target)
        self._persons.set_person(target, edited)
        if was_active:
            self._active_person = edited
            self.update_assignment_list(edited)
        logger.debug("Replaced person %s with %s", target.name, edited.name)

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the whole roster and drop the active selection."""
        self._persons.set_persons(persons)
        self._clear_active()

    @property
    def person_list(self) -> tuple[Person, ...]:
        """Read-only snapshot of the roster in insertion order."""
        return self._persons.as_list()

    # ------------------------------------------------------------------
    # Assignments
    # ------------------------------------------------------------------

    def has_assignment(self, person: Person, assignment: Assignment) -> bool:
        """Return True if the roster entry for ``person`` holds ``assignment``.

        Raises
        ------
        PersonNotFoundError
            If ``person`` is not in the roster.
        """
        return self._persons.get(person).has_assignment(assignment)

    def add_assignment(self, person: Person, assignment: Assignment) -> None:
        """Add ``assignment`` to the roster entry for ``person``.

        Raises
        ------
        PersonNotFoundError
            If ``person`` is not in the roster.
        DuplicateAssignmentError
            If the person already holds an equal assignment.
        """
        stored = self._persons.get(person)
        assignments = stored.assignment_list()
        assignments.add(assignment)
        self.set_person(stored, stored.with_assignments(assignments))

    def remove_assignment(self, person: Person, assignment: Assignment) -> None:
        """Remove ``assignment`` from the roster entry for ``person``.

        Raises
        ------
        PersonNotFoundError
            If ``person`` is not in the roster.
        AssignmentNotFoundError
            If the person holds no equal assignment.
        """
        stored = self._persons.get(person)
        assignments = stored.assignment_list()
        assignments.remove(assignment)
        self.set_person(stored, stored.with_assignments(assignments))

    def mark_assignment(
        self, person: Person, assignment: Assignment, done: bool | None = True
    ) -> Assignment:
        """Set the done-state of one of ``person``'s assignments.

        Returns the updated assignment.

        Raises
        ------
        PersonNotFoundError
            If ``person`` is not in the roster.
        AssignmentNotFoundError
            If the person holds no equal assignment.
        """
        stored = self._persons.get(person)
        assignments = stored.assignment_list()
        updated = assignments.mark(assignment, done)
        self.set_person(stored, stored.with_assignments(assignments))
        return updated

    def clean_assignments(self, cutoff: date) -> int:
        """Remove every assignment due strictly before ``cutoff``.

        Returns the number of assignments removed across the roster.
        """
        removed_total = 0
        for person in self._persons:
            assignments = person.assignment_list()
            removed = assignments.remove_due_before(cutoff)
            if removed:
                removed_total += len(removed)
                self.set_person(person, person.with_assignments(assignments))
        logger.debug("Cleaned %d assignment(s) due before %s", removed_total, cutoff)
        return removed_total

    def person_assignment_list(self, person: Person) -> tuple[Assignment, ...]:
        """Return the sorted assignments of the roster entry for ``person``."""
        return self._persons.get(person).assignments

    # ------------------------------------------------------------------
    # Active person
    # ------------------------------------------------------------------

    @property
    def active_person(self) -> Person | None:
        return self._active_person

    @property
    def has_active_person(self) -> bool:
        return self._active_person is not None

    def is_active_person(self, person: Person) -> bool:
        return self._active_person is not None and self._active_person.is_same_person(person)

    def change_active_person(self, person: Person) -> None:
        """Select ``person`` for assignment display.

        Raises
        ------
        PersonNotFoundError
            If ``person`` is not in the roster.
        """
        stored = self._persons.get(person)
        self._active_person = stored
        self.update_assignment_list(stored)

    def update_assignment_list(self, person: Person) -> None:
        """Recompute the active assignment projection from ``person``."""
        self._active_assignments = list(self._persons.get(person).assignments)

    @property
    def assignment_list(self) -> tuple[Assignment, ...]:
        """Read-only snapshot of the active person's assignments."""
        return tuple(self._active_assignments)

    def _clear_active(self) -> None:
        self._active_person = None
        self._active_assignments = []

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(persons={len(self._persons)})"
