"""Single dispatch entry point for command requests.

The ``Dispatcher`` turns a ``Request`` into calls on a ``ModelManager``,
then commits the new state exactly once when a mutating request changed
something.  Any failure is raised as ``CommandError`` before the commit,
so failed commands never appear in the undo history.

Usage
-----
::

    model = ModelManager(address_book)
    dispatcher = Dispatcher(model)
    result = dispatcher.execute(AddPerson(alice))
    print(result.feedback)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from assignbook.errors import AssignbookError
from assignbook.logic.errors import CommandError
from assignbook.logic.requests import (
    MUTATING_REQUESTS,
    AddAssignment,
    AddModuleAssignment,
    AddPerson,
    CleanAssignments,
    ClearAddressBook,
    DeleteAssignment,
    DeletePerson,
    EditPerson,
    FilterModule,
    FindPersons,
    ListPersons,
    MarkAssignment,
    Redo,
    Request,
    Undo,
    ViewPerson,
)
from assignbook.model.address_book import AddressBook
from assignbook.model.assignment import Assignment
from assignbook.model.person import Person
from assignbook.model.predicates import (
    ModuleMatchesPredicate,
    NameContainsKeywordsPredicate,
    show_all_persons,
)

if TYPE_CHECKING:
    from assignbook.model.model_manager import ModelManager

_module_logger = logging.getLogger(__name__)

MESSAGE_INVALID_PERSON_INDEX = "The person index provided is invalid"
MESSAGE_INVALID_ASSIGNMENT_INDEX = "The assignment index provided is invalid"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"
MESSAGE_DUPLICATE_EMAIL = "This email is already used by another person in the address book"
MESSAGE_DUPLICATE_ASSIGNMENT = "This assignment already exists in the assignment list"
MESSAGE_NO_ACTIVE_PERSON = "No person is being viewed; use view INDEX first"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful request.

    Parameters
    ----------
    feedback:
        Message to show the user.
    changed:
        True if the address book content changed.  Mutating requests
        are committed only when this is set.
    """

    feedback: str
    changed: bool = False


class Dispatcher:
    """Executes requests against a ``ModelManager``.

    Parameters
    ----------
    model:
        The model to mutate.
    logger:
        Logger for command outcomes.  Defaults to this module's logger.
    """

    def __init__(self, model: "ModelManager", logger: logging.Logger | None = None) -> None:
        self._model = model
        self._logger = logger or _module_logger

    @property
    def model(self) -> "ModelManager":
        return self._model

    def execute(self, request: Request) -> CommandResult:
        """Run ``request`` and commit if it changed the address book.

        Raises
        ------
        CommandError
            If the request cannot be carried out.  The model is left as
            it was before the call.
        """
        self._logger.debug("Executing %r", request)
        try:
            result = self._dispatch(request)
        except CommandError as exc:
            self._logger.warning("Command %s failed: %s", type(request).__name__, exc)
            raise
        except AssignbookError as exc:
            self._logger.warning("Command %s failed: %s", type(request).__name__, exc)
            raise CommandError(str(exc)) from exc

        if result.changed and isinstance(request, MUTATING_REQUESTS):
            self._model.commit_address_book()
        return result

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, request: Request) -> CommandResult:
        if isinstance(request, AddPerson):
            return self._add_person(request)
        if isinstance(request, DeletePerson):
            person = self._person_at(request.index)
            self._model.delete_person(person)
            return CommandResult(f"Deleted Person: {person}", changed=True)
        if isinstance(request, EditPerson):
            return self._edit_person(request)
        if isinstance(request, ListPersons):
            self._model.update_filtered_person_list(show_all_persons)
            return CommandResult("Listed all persons")
        if isinstance(request, FindPersons):
            self._model.update_filtered_person_list(NameContainsKeywordsPredicate(request.keywords))
            return CommandResult(self._persons_listed())
        if isinstance(request, FilterModule):
            self._model.update_filtered_person_list(ModuleMatchesPredicate(request.module))
            return CommandResult(self._persons_listed())
        if isinstance(request, ViewPerson):
            person = self._person_at(request.index)
            self._model.change_active_person(person)
            return CommandResult(f"Viewing assignments of {person.name}")
        if isinstance(request, AddAssignment):
            return self._add_assignment(request)
        if isinstance(request, AddModuleAssignment):
            return self._add_module_assignment(request)
        if isinstance(request, DeleteAssignment):
            person, assignment = self._assignment_at(request.index)
            self._model.delete_assignment(person, assignment)
            return CommandResult(f"Deleted Assignment: {assignment}", changed=True)
        if isinstance(request, MarkAssignment):
            person, assignment = self._assignment_at(request.index)
            updated = self._model.mark_assignment(person, assignment, request.done)
            return CommandResult(f"Marked Assignment: {updated}", changed=True)
        if isinstance(request, CleanAssignments):
            removed = self._model.clean_assignments(request.cutoff)
            return CommandResult(f"Removed {removed} overdue assignment(s)", changed=removed > 0)
        if isinstance(request, ClearAddressBook):
            self._model.set_address_book(AddressBook())
            return CommandResult("Address book has been cleared!", changed=True)
        if isinstance(request, Undo):
            self._model.undo_address_book()
            return CommandResult("Undo success!", changed=True)
        if isinstance(request, Redo):
            self._model.redo_address_book()
            return CommandResult("Redo success!", changed=True)
        raise TypeError(f"Unknown request type: {type(request)}")

    # ------------------------------------------------------------------
    # Person handlers
    # ------------------------------------------------------------------

    def _add_person(self, request: AddPerson) -> CommandResult:
        person = request.person
        if self._model.has_person(person):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        if self._model.has_existing_email(person):
            raise CommandError(MESSAGE_DUPLICATE_EMAIL)
        self._model.add_person(person)
        return CommandResult(f"New person added: {person}", changed=True)

    def _edit_person(self, request: EditPerson) -> CommandResult:
        if request.is_empty:
            raise CommandError(MESSAGE_NOT_EDITED)
        target = self._person_at(request.index)
        edited = target.edited(
            name=request.name, email=request.email, module=request.module, tags=request.tags
        )
        if not target.is_same_person(edited) and self._model.has_person(edited):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        if self._model.has_existing_email(edited, exclude=target):
            raise CommandError(MESSAGE_DUPLICATE_EMAIL)
        self._model.set_person(target, edited)
        self._model.update_filtered_person_list(show_all_persons)
        return CommandResult(f"Edited Person: {edited}", changed=edited != target)

    def _person_at(self, index: int) -> Person:
        persons = self._model.filtered_person_list
        if not 1 <= index <= len(persons):
            raise CommandError(MESSAGE_INVALID_PERSON_INDEX)
        return persons[index - 1]

    def _persons_listed(self) -> str:
        return f"{len(self._model.filtered_person_list)} persons listed!"

    # ------------------------------------------------------------------
    # Assignment handlers
    # ------------------------------------------------------------------

    def _add_assignment(self, request: AddAssignment) -> CommandResult:
        person = self._model.find_person(request.name)
        if person is None:
            raise CommandError(f"No person named {request.name} in the address book")
        if self._model.has_assignment(person, request.assignment):
            raise CommandError(MESSAGE_DUPLICATE_ASSIGNMENT)
        self._model.add_assignment(person, request.assignment)
        return CommandResult(f"New assignment added: {request.assignment}", changed=True)

    def _add_module_assignment(self, request: AddModuleAssignment) -> CommandResult:
        persons = [p for p in self._model.get_address_book().person_list if p.has_module(request.module)]
        if not persons:
            raise CommandError(f"No person is enrolled in module {request.module}")
        added = self._model.add_assignment_to_all(persons, request.assignment)
        return CommandResult(
            f"Assignment {request.assignment.description} added to {added} person(s) in {request.module}",
            changed=added > 0,
        )

    def _assignment_at(self, index: int) -> tuple[Person, Assignment]:
        person = self._model.active_person
        if person is None:
            raise CommandError(MESSAGE_NO_ACTIVE_PERSON)
        assignments = self._model.filtered_assignment_list
        if not 1 <= index <= len(assignments):
            raise CommandError(MESSAGE_INVALID_ASSIGNMENT_INDEX)
        return person, assignments[index - 1]
