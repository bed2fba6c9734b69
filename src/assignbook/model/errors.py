"""Error types raised by the assignbook model layer.

Every error is recoverable: the command layer catches them and turns
them into user-facing failures.  No model operation applies a partial
mutation before raising.
"""
from __future__ import annotations

from assignbook.errors import AssignbookError


class ValidationError(AssignbookError, ValueError):
    """Raised when a value object is constructed from malformed input.

    Parameters
    ----------
    field:
        The name of the value type or field that rejected the input.
    value:
        The offending raw value.
    message:
        Human-readable constraint description.
    """

    def __init__(self, field: str, value: object, message: str) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


# ---------------------------------------------------------------------------
# Uniqueness violations
# ---------------------------------------------------------------------------


class DuplicateError(AssignbookError, ValueError):
    """Raised when an insert would violate a uniqueness invariant."""


class DuplicatePersonError(DuplicateError):
    """Raised when a person with the same name is already in the roster."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Person {str(name)!r} already exists in the address book")


class DuplicateAssignmentError(DuplicateError):
    """Raised when an equal assignment already exists for the person."""

    def __init__(self, assignment: object) -> None:
        self.assignment = assignment
        super().__init__(f"Assignment {assignment} already exists in the assignment list")


# ---------------------------------------------------------------------------
# Missing references
# ---------------------------------------------------------------------------


class NotFoundError(AssignbookError, LookupError):
    """Raised when a referenced entity is absent."""


class PersonNotFoundError(NotFoundError):
    """Raised when the referenced person is not in the roster."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Person {str(name)!r} is not in the address book")


class AssignmentNotFoundError(NotFoundError):
    """Raised when the referenced assignment is not in the person's list."""

    def __init__(self, assignment: object) -> None:
        self.assignment = assignment
        super().__init__(f"Assignment {assignment} is not in the assignment list")


# ---------------------------------------------------------------------------
# Undo / redo boundaries
# ---------------------------------------------------------------------------


class UndoRedoBoundaryError(AssignbookError):
    """Raised when undo or redo runs past the end of the history."""


class NoUndoableStateError(UndoRedoBoundaryError):
    def __init__(self) -> None:
        super().__init__("No more commands to undo")


class NoRedoableStateError(UndoRedoBoundaryError):
    def __init__(self) -> None:
        super().__init__("No more commands to redo")
