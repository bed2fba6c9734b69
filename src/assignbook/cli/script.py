"""Request scripts for ``assignbook run``.

A script is a YAML list.  Each step is either a bare command word or a
single-key mapping from the command word to its arguments::

    - add: {name: Alice Tan, email: alice@example.com, module: CS101}
    - a-add: {name: Alice Tan, description: HW1, due: 10/01/2024}
    - view: 1
    - a-mark: 1
    - undo
    - redo
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import yaml

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
from assignbook.model.assignment import Assignment, parse_due_date
from assignbook.model.errors import ValidationError
from assignbook.model.person import Person
from assignbook.model.values import Email, Module, Name, Tag


class ScriptError(ValueError):
    """Raised when a script step is not a recognised request."""

    def __init__(self, step_number: int, message: str) -> None:
        self.step_number = step_number
        super().__init__(f"Step {step_number}: {message}")


def _tags(raw: Any) -> frozenset[Tag]:
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        raw = [raw]
    return frozenset(Tag(str(t)) for t in raw)


def _assignment(args: dict[str, Any]) -> Assignment:
    return Assignment(str(args["description"]), parse_due_date(args["due"]))


def _add(args: dict[str, Any]) -> Request:
    return AddPerson(
        Person(
            Name(str(args["name"])),
            Email(str(args["email"])),
            Module(str(args["module"])),
            _tags(args.get("tags")),
        )
    )


def _edit(args: dict[str, Any]) -> Request:
    return EditPerson(
        index=int(args["index"]),
        name=Name(str(args["name"])) if "name" in args else None,
        email=Email(str(args["email"])) if "email" in args else None,
        module=Module(str(args["module"])) if "module" in args else None,
        tags=_tags(args["tags"]) if "tags" in args else None,
    )


def _find(args: Any) -> Request:
    keywords = args.split() if isinstance(args, str) else [str(k) for k in args]
    return FindPersons(tuple(keywords))


def _clean(args: Any) -> Request:
    if args is None:
        return CleanAssignments()
    before = args.get("before") if isinstance(args, dict) else args
    return CleanAssignments(parse_due_date(before) if before is not None else None)


def _mark(args: Any) -> Request:
    if isinstance(args, dict):
        return MarkAssignment(int(args["index"]), args.get("done", True))
    return MarkAssignment(int(args))


_BUILDERS: dict[str, Callable[[Any], Request]] = {
    "add": _add,
    "delete": lambda a: DeletePerson(int(a)),
    "edit": _edit,
    "list": lambda a: ListPersons(),
    "find": _find,
    "filter": lambda a: FilterModule(Module(str(a))),
    "view": lambda a: ViewPerson(int(a)),
    "a-add": lambda a: AddAssignment(Name(str(a["name"])), _assignment(a)),
    "a-addall": lambda a: AddModuleAssignment(Module(str(a["module"])), _assignment(a)),
    "a-delete": lambda a: DeleteAssignment(int(a)),
    "a-mark": _mark,
    "clean": _clean,
    "clear": lambda a: ClearAddressBook(),
    "undo": lambda a: Undo(),
    "redo": lambda a: Redo(),
}


def build_request(step: Any, step_number: int = 1) -> Request:
    """Convert one script step into a ``Request``.

    Raises
    ------
    ScriptError
        If the step is malformed or names an unknown command.
    ValidationError
        If an argument fails value validation.
    """
    if isinstance(step, str):
        word, args = step, None
    elif isinstance(step, dict) and len(step) == 1:
        ((word, args),) = step.items()
    else:
        raise ScriptError(step_number, f"expected a command word or a one-key mapping, got {step!r}")
    builder = _BUILDERS.get(word)
    if builder is None:
        raise ScriptError(step_number, f"unknown command {word!r}")
    try:
        return builder(args)
    except ValidationError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise ScriptError(step_number, f"bad arguments for {word!r}: {exc}") from exc


def load_script(text: str) -> list[Request]:
    """Parse a YAML script into a list of requests."""
    try:
        steps = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ScriptError(0, f"malformed YAML: {exc}") from exc
    if steps is None:
        return []
    if not isinstance(steps, list):
        raise ScriptError(0, "a script must be a YAML list of steps")
    return [build_request(step, number) for number, step in enumerate(steps, start=1)]


def command_words() -> list[str]:
    return sorted(_BUILDERS)
