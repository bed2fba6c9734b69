"""assignbook model layer.

Exports the value types, entities, the ``AddressBook`` aggregate, its
versioned wrapper and the ``ModelManager`` facade.
"""
from __future__ import annotations

from assignbook.model.address_book import AddressBook
from assignbook.model.assignment import Assignment, UniqueAssignmentList, parse_due_date
from assignbook.model.errors import (
    AssignbookError,
    AssignmentNotFoundError,
    DuplicateAssignmentError,
    DuplicateError,
    DuplicatePersonError,
    NoRedoableStateError,
    NoUndoableStateError,
    NotFoundError,
    PersonNotFoundError,
    UndoRedoBoundaryError,
    ValidationError,
)
from assignbook.model.filtered import FilteredView
from assignbook.model.model_manager import ModelManager
from assignbook.model.person import Person, UniquePersonList
from assignbook.model.predicates import (
    ModuleMatchesPredicate,
    NameContainsKeywordsPredicate,
    PendingAssignmentPredicate,
    show_all_assignments,
    show_all_persons,
)
from assignbook.model.values import Email, Module, Name, Tag
from assignbook.model.versioned import VersionedAddressBook

__all__ = [
    # Value types
    "Name",
    "Email",
    "Module",
    "Tag",
    # Entities
    "Assignment",
    "UniqueAssignmentList",
    "parse_due_date",
    "Person",
    "UniquePersonList",
    # Aggregate and versioning
    "AddressBook",
    "VersionedAddressBook",
    "ModelManager",
    "FilteredView",
    # Predicates
    "show_all_persons",
    "show_all_assignments",
    "NameContainsKeywordsPredicate",
    "ModuleMatchesPredicate",
    "PendingAssignmentPredicate",
    # Errors
    "AssignbookError",
    "ValidationError",
    "DuplicateError",
    "DuplicatePersonError",
    "DuplicateAssignmentError",
    "NotFoundError",
    "PersonNotFoundError",
    "AssignmentNotFoundError",
    "UndoRedoBoundaryError",
    "NoUndoableStateError",
    "NoRedoableStateError",
]
