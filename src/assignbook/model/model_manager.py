"""``ModelManager``: the single mutation entry point for the address book.

The manager owns a ``VersionedAddressBook`` and two ``FilteredView``
objects, one over the roster and one over the active person's
assignments.  Mutations delegate to the book and then refresh the
views.  They never commit: the command layer calls
``commit_address_book`` once a command has succeeded, so failed
commands leave the undo history untouched.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date

from assignbook.config import UserPrefs
from assignbook.logic.errors import CommandError
from assignbook.model.address_book import AddressBook
from assignbook.model.assignment import Assignment
from assignbook.model.errors import NoRedoableStateError, NoUndoableStateError
from assignbook.model.filtered import FilteredView
from assignbook.model.person import Person
from assignbook.model.predicates import (
    AssignmentPredicate,
    PersonPredicate,
    show_all_assignments,
    show_all_persons,
)
from assignbook.model.values import Name
from assignbook.model.versioned import VersionedAddressBook

_module_logger = logging.getLogger(__name__)


class ModelManager:
    """In-memory model of the address book data.

    Parameters
    ----------
    address_book:
        Initial content; copied into a fresh ``VersionedAddressBook``.
    user_prefs:
        Preferences used for defaults such as the ``clean`` cutoff.
    logger:
        Logger to report mutations to.  Defaults to this module's logger.
    clock:
        Returns today's date; injectable for tests.
    """

    def __init__(
        self,
        address_book: AddressBook | None = None,
        user_prefs: UserPrefs | None = None,
        *,
        logger: logging.Logger | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._logger = logger or _module_logger
        self._user_prefs = user_prefs or UserPrefs()
        self._clock = clock
        self._book = VersionedAddressBook(address_book)
        self._filtered_persons: FilteredView[Person] = FilteredView(
            lambda: self._book.person_list, show_all_persons
        )
        self._filtered_assignments: FilteredView[Assignment] = FilteredView(
            lambda: self._book.assignment_list, show_all_assignments
        )
        self._logger.debug(
            "Initializing with %d person(s) and prefs %s", len(self._book), self._user_prefs
        )

    # ------------------------------------------------------------------
    # User prefs
    # ------------------------------------------------------------------

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        self._user_prefs = user_prefs

    # ------------------------------------------------------------------
    # Address book
    # ------------------------------------------------------------------

    def get_address_book(self) -> AddressBook:
        """Return a snapshot of the live address book for persistence."""
        return self._book.copy()

    def set_address_book(self, address_book: AddressBook) -> None:
        """Replace the live content without touching the undo history."""
        self._book.reset_data(address_book)
        self._refresh_views()

    # ------------------------------------------------------------------
    # Persons
    # ------------------------------------------------------------------

    def has_person(self, person: Person) -> bool:
        return self._book.has_person(person)

    def has_existing_email(self, person: Person, exclude: Person | None = None) -> bool:
        return self._book.has_email(person, exclude=exclude)

    def find_person(self, name: Name) -> Person | None:
        return self._book.find_person(name)

    def add_person(self, person: Person) -> None:
        self._book.add_person(person)
        self.update_filtered_person_list(show_all_persons)
        self._logger.debug("Model: added person %s", person.name)

    def delete_person(self, target: Person) -> None:
        self._book.remove_person(target)
        self._refresh_views()
        self._logger.debug("Model: deleted person %s", target.name)

    def set_person(self, target: Person, edited: Person) -> None:
        self._book.set_person(target, edited)
        self._refresh_views()
        self._logger.debug("Model: edited person %s", target.name)

    # ------------------------------------------------------------------
    # Assignments
    # ------------------------------------------------------------------

    def has_assignment(self, person: Person, assignment: Assignment) -> bool:
        return self._book.has_assignment(person, assignment)

    def add_assignment(self, person: Person, assignment: Assignment) -> None:
        """Add ``assignment`` to ``person`` and show that person's assignments."""
        self._book.add_assignment(person, assignment)
        self._show_assignments_of(person)
        self._logger.debug("Model: added assignment %r to %s", assignment.description, person.name)

    def add_assignment_to_all(self, persons: Iterable[Person], assignment: Assignment) -> int:
        """Add ``assignment`` to every person in ``persons`` who lacks it.

        Returns the number of persons that received the assignment.
        Repeated entries in ``persons`` are added to once.
        """
        targets: list[Person] = []
        for person in persons:
            if any(t.is_same_person(person) for t in targets):
                continue
            if not self._book.has_assignment(person, assignment):
                targets.append(person)
        for person in targets:
            self._book.add_assignment(person, assignment)
        self._refresh_views()
        self._logger.debug(
            "Model: added assignment %r to %d person(s)", assignment.description, len(targets)
        )
        return len(targets)

    def delete_assignment(self, person: Person, assignment: Assignment) -> None:
        self._book.remove_assignment(person, assignment)
        self._show_assignments_of(person)
        self._logger.debug(
            "Model: deleted assignment %r from %s", assignment.description, person.name
        )

    def mark_assignment(
        self, person: Person, assignment: Assignment, done: bool | None = True
    ) -> Assignment:
        updated = self._book.mark_assignment(person, assignment, done)
        self._show_assignments_of(person)
        self._logger.debug(
            "Model: marked assignment %r of %s as %s",
            assignment.description,
            person.name,
            "done" if updated.is_done else "not done",
        )
        return updated

    def clean_assignments(self, cutoff: date | None = None) -> int:
        """Remove assignments due before ``cutoff``.

        ``cutoff`` defaults to ``user_prefs.clean_cutoff(today)``.
        Returns the number of assignments removed.
        """
        effective = cutoff or self._user_prefs.clean_cutoff(self._clock())
        removed = self._book.clean_assignments(effective)
        self._refresh_views()
        self._logger.debug("Model: cleaned %d assignment(s) due before %s", removed, effective)
        return removed

    def person_assignment_list(self, person: Person) -> tuple[Assignment, ...]:
        return self._book.person_assignment_list(person)

    # ------------------------------------------------------------------
    # Active person
    # ------------------------------------------------------------------

    @property
    def active_person(self) -> Person | None:
        return self._book.active_person

    @property
    def has_active_person(self) -> bool:
        return self._book.has_active_person

    def change_active_person(self, person: Person) -> None:
        """Show ``person``'s assignments in the assignment view.

        Raises
        ------
        PersonNotFoundError
            If ``person`` is not in the roster.
        """
        self._show_assignments_of(person)

    def _show_assignments_of(self, person: Person) -> None:
        self._book.change_active_person(person)
        self._refresh_views()

    # ------------------------------------------------------------------
    # Filtered views
    # ------------------------------------------------------------------

    @property
    def filtered_person_list(self) -> FilteredView[Person]:
        """Read-only view of the roster under the current person predicate."""
        return self._filtered_persons

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._filtered_persons.set_predicate(predicate)

    @property
    def filtered_assignment_list(self) -> FilteredView[Assignment]:
        """Read-only view of the active person's assignments."""
        return self._filtered_assignments

    def update_filtered_assignment_list(self, predicate: AssignmentPredicate) -> None:
        self._filtered_assignments.set_predicate(predicate)

    def _refresh_views(self) -> None:
        self._filtered_persons.refresh()
        self._filtered_assignments.refresh()

    # ------------------------------------------------------------------
    # Versioning
    # ------------------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        return self._book.can_undo

    @property
    def can_redo(self) -> bool:
        return self._book.can_redo

    def commit_address_book(self) -> None:
        """Record the live state as a new undo step."""
        self._book.commit()

    def undo_address_book(self) -> None:
        """Restore the previously committed state.

        Raises
        ------
        CommandError
            If there is nothing to undo.
        """
        try:
            self._book.undo()
        except NoUndoableStateError as exc:
            raise CommandError(str(exc)) from exc
        self._refresh_views()

    def redo_address_book(self) -> None:
        """Re-apply the most recently undone state.

        Raises
        ------
        CommandError
            If there is nothing to redo.
        """
        try:
            self._book.redo()
        except NoRedoableStateError as exc:
            raise CommandError(str(exc)) from exc
        self._refresh_views()

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._book == other._book
            and self._user_prefs == other._user_prefs
            and self._filtered_persons == other._filtered_persons
        )

    __hash__ = None  # type: ignore[assignment]
