"""Command layer: request variants and the dispatcher that executes them."""
from __future__ import annotations

from assignbook.logic.errors import CommandError
from assignbook.logic.requests import (
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
from assignbook.logic.dispatcher import CommandResult, Dispatcher

__all__ = [
    "CommandError",
    "CommandResult",
    "Dispatcher",
    "Request",
    "AddPerson",
    "DeletePerson",
    "EditPerson",
    "ListPersons",
    "FindPersons",
    "FilterModule",
    "ViewPerson",
    "AddAssignment",
    "AddModuleAssignment",
    "DeleteAssignment",
    "MarkAssignment",
    "CleanAssignments",
    "ClearAddressBook",
    "Undo",
    "Redo",
]
