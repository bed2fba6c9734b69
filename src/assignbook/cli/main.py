"""CLI entry point for assignbook.

Invoked as::

    assignbook [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m assignbook.cli.main

Commands
--------
list        Show persons, optionally filtered
add         Add a person
edit        Edit a person
delete      Delete a person
view        Show a person's assignments
a-add       Add an assignment to a person
a-addall    Add an assignment to everyone in a module
a-delete    Delete an assignment
a-mark      Mark an assignment as done (or not done)
clean       Remove overdue assignments
clear       Remove every person
run         Execute a YAML script of commands in one session
version     Show version information

Every command loads the data file, executes one or more requests and,
if anything changed, writes the file back.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from assignbook.config import UserPrefs
    from assignbook.logic.dispatcher import Dispatcher
    from assignbook.logic.requests import Request
    from assignbook.model.model_manager import ModelManager

console = Console()
err_console = Console(stderr=True)


@dataclass
class _Session:
    """Per-invocation state shared by all commands."""

    prefs: "UserPrefs"
    data_file: Path


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    sys.exit(1)


def _open(session: _Session) -> tuple["ModelManager", "Dispatcher"]:
    """Load the data file, exiting on error."""
    import assignbook
    from assignbook.errors import AssignbookError

    try:
        model = assignbook.open_model(session.data_file, session.prefs)
    except AssignbookError as exc:
        _fail(f"Cannot load {session.data_file}: {exc}")
    return model, assignbook.dispatcher(model)


def _execute(session: _Session, requests: list["Request"], keep_going: bool = False) -> "ModelManager":
    """Run ``requests`` in one session and save if anything changed."""
    import assignbook
    from assignbook.logic.errors import CommandError

    model, dispatcher = _open(session)
    changed = False
    failed = False
    for request in requests:
        try:
            result = dispatcher.execute(request)
        except CommandError as exc:
            err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
            failed = True
            if keep_going:
                continue
            break
        changed = changed or result.changed
        console.print(result.feedback, markup=False, highlight=False)

    if changed:
        assignbook.save_model(model, session.data_file)
    if failed:
        sys.exit(1)
    return model


def _value(factory: type, raw: str) -> object:
    """Build a value object from CLI input, exiting on validation errors."""
    from assignbook.model.errors import ValidationError

    try:
        return factory(raw)
    except ValidationError as exc:
        _fail(str(exc))


def _due(raw: str) -> date:
    from assignbook.model.assignment import parse_due_date
    from assignbook.model.errors import ValidationError

    try:
        return parse_due_date(raw)
    except ValidationError as exc:
        _fail(str(exc))


def _print_persons(model: "ModelManager") -> None:
    persons = model.filtered_person_list
    if not persons:
        console.print("[dim]No persons to show.[/dim]")
        return
    table = Table(title="Persons", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Email")
    table.add_column("Module")
    table.add_column("Tags")
    table.add_column("Pending", justify="right")
    for index, person in enumerate(persons, start=1):
        pending = sum(1 for a in person.assignments if not a.is_done)
        table.add_row(
            str(index),
            str(person.name),
            str(person.email),
            str(person.module),
            ", ".join(sorted(t.value for t in person.tags)),
            str(pending),
        )
    console.print(table)


def _print_assignments(model: "ModelManager") -> None:
    person = model.active_person
    if person is None:
        return
    assignments = model.filtered_assignment_list
    if not assignments:
        console.print(f"[dim]{person.name} has no assignments.[/dim]")
        return
    table = Table(title=f"Assignments: {person.name}")
    table.add_column("#", justify="right")
    table.add_column("Description")
    table.add_column("Due")
    table.add_column("Done", justify="center")
    for index, assignment in enumerate(assignments, start=1):
        table.add_row(
            str(index),
            escape(assignment.description),
            f"{assignment.due_date:%d/%m/%Y}",
            "[green]✓[/green]" if assignment.is_done else "",
        )
    console.print(table)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="assignbook")
@click.option(
    "--data",
    "data_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Address book file (.json, .yaml or .yml). Defaults to the preferences value.",
)
@click.option(
    "--prefs",
    "prefs_file",
    type=click.Path(dir_okay=False),
    default="preferences.yaml",
    show_default=True,
    help="Preferences file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level (overrides the preferences value).",
)
@click.pass_context
def cli(ctx: click.Context, data_file: str | None, prefs_file: str, log_level: str | None) -> None:
    """Track contacts, their modules and their assignments."""
    from assignbook.config import ConfigError, UserPrefs

    try:
        prefs = UserPrefs.load(prefs_file)
    except ConfigError as exc:
        _fail(str(exc))

    logging.basicConfig(
        level=(log_level or prefs.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    path = Path(data_file) if data_file is not None else prefs.data_file
    ctx.obj = _Session(prefs=prefs.with_data_file(path), data_file=path)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from assignbook import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]assignbook[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# person commands
# ---------------------------------------------------------------------------


@cli.command(name="list")
@click.option("--module", "module", default=None, help="Only show persons in this module")
@click.pass_obj
def list_command(session: _Session, module: str | None) -> None:
    """Show all persons, or those enrolled in MODULE."""
    from assignbook.logic.requests import FilterModule, ListPersons
    from assignbook.model.values import Module

    request = FilterModule(_value(Module, module)) if module else ListPersons()
    _print_persons(_execute(session, [request]))


@cli.command(name="find")
@click.argument("keywords", nargs=-1, required=True)
@click.pass_obj
def find_command(session: _Session, keywords: tuple[str, ...]) -> None:
    """Show persons whose name contains any of KEYWORDS."""
    from assignbook.logic.requests import FindPersons

    _print_persons(_execute(session, [FindPersons(keywords)]))


@cli.command(name="add")
@click.argument("name")
@click.option("--email", "-e", required=True, help="Email address")
@click.option("--module", "-m", required=True, help="Module code, e.g. CS2103T")
@click.option("--tag", "-t", "tags", multiple=True, help="Tag (repeatable)")
@click.pass_obj
def add_command(session: _Session, name: str, email: str, module: str, tags: tuple[str, ...]) -> None:
    """Add a person called NAME."""
    from assignbook.logic.requests import AddPerson
    from assignbook.model.errors import ValidationError
    from assignbook.model.person import Person
    from assignbook.model.values import Email, Module, Name, Tag

    try:
        person = Person(Name(name), Email(email), Module(module), frozenset(Tag(t) for t in tags))
    except ValidationError as exc:
        _fail(str(exc))
    _execute(session, [AddPerson(person)])


@cli.command(name="edit")
@click.argument("index", type=int)
@click.option("--name", "-n", default=None, help="New name")
@click.option("--email", "-e", default=None, help="New email address")
@click.option("--module", "-m", default=None, help="New module code")
@click.option("--tag", "-t", "tags", multiple=True, help="Replacement tag (repeatable)")
@click.option("--clear-tags", is_flag=True, default=False, help="Remove all tags")
@click.pass_obj
def edit_command(
    session: _Session,
    index: int,
    name: str | None,
    email: str | None,
    module: str | None,
    tags: tuple[str, ...],
    clear_tags: bool,
) -> None:
    """Edit the person at INDEX in the person list."""
    from assignbook.logic.requests import EditPerson
    from assignbook.model.values import Email, Module, Name, Tag

    new_tags = None
    if clear_tags:
        new_tags = frozenset()
    elif tags:
        new_tags = frozenset(_value(Tag, t) for t in tags)
    request = EditPerson(
        index=index,
        name=_value(Name, name) if name is not None else None,
        email=_value(Email, email) if email is not None else None,
        module=_value(Module, module) if module is not None else None,
        tags=new_tags,
    )
    _execute(session, [request])


@cli.command(name="delete")
@click.argument("index", type=int)
@click.pass_obj
def delete_command(session: _Session, index: int) -> None:
    """Delete the person at INDEX in the person list."""
    from assignbook.logic.requests import DeletePerson

    _execute(session, [DeletePerson(index)])


@cli.command(name="view")
@click.argument("index", type=int)
@click.option("--pending", is_flag=True, default=False, help="Only show assignments not yet done")
@click.pass_obj
def view_command(session: _Session, index: int, pending: bool) -> None:
    """Show the assignments of the person at INDEX."""
    from assignbook.logic.requests import ViewPerson
    from assignbook.model.predicates import PendingAssignmentPredicate

    model = _execute(session, [ViewPerson(index)])
    if pending:
        model.update_filtered_assignment_list(PendingAssignmentPredicate())
    _print_assignments(model)


# ---------------------------------------------------------------------------
# assignment commands
# ---------------------------------------------------------------------------


@cli.command(name="a-add")
@click.argument("name")
@click.argument("description")
@click.argument("due")
@click.pass_obj
def assignment_add_command(session: _Session, name: str, description: str, due: str) -> None:
    """Add an assignment to the person called NAME.

    DUE is a date in dd/mm/yyyy or yyyy-mm-dd form.
    """
    from assignbook.logic.requests import AddAssignment
    from assignbook.model.assignment import Assignment
    from assignbook.model.errors import ValidationError
    from assignbook.model.values import Name

    try:
        assignment = Assignment(description, _due(due))
    except ValidationError as exc:
        _fail(str(exc))
    _print_assignments(_execute(session, [AddAssignment(_value(Name, name), assignment)]))


@cli.command(name="a-addall")
@click.argument("module")
@click.argument("description")
@click.argument("due")
@click.pass_obj
def assignment_add_all_command(session: _Session, module: str, description: str, due: str) -> None:
    """Add an assignment to every person enrolled in MODULE."""
    from assignbook.logic.requests import AddModuleAssignment
    from assignbook.model.assignment import Assignment
    from assignbook.model.errors import ValidationError
    from assignbook.model.values import Module

    try:
        assignment = Assignment(description, _due(due))
    except ValidationError as exc:
        _fail(str(exc))
    _execute(session, [AddModuleAssignment(_value(Module, module), assignment)])


@cli.command(name="a-delete")
@click.argument("person_index", type=int)
@click.argument("assignment_index", type=int)
@click.pass_obj
def assignment_delete_command(session: _Session, person_index: int, assignment_index: int) -> None:
    """Delete assignment ASSIGNMENT_INDEX of the person at PERSON_INDEX."""
    from assignbook.logic.requests import DeleteAssignment, ViewPerson

    model = _execute(session, [ViewPerson(person_index), DeleteAssignment(assignment_index)])
    _print_assignments(model)


@cli.command(name="a-mark")
@click.argument("person_index", type=int)
@click.argument("assignment_index", type=int)
@click.option("--undone", is_flag=True, default=False, help="Mark as not done instead")
@click.option("--toggle", is_flag=True, default=False, help="Flip the current state")
@click.pass_obj
def assignment_mark_command(
    session: _Session, person_index: int, assignment_index: int, undone: bool, toggle: bool
) -> None:
    """Mark assignment ASSIGNMENT_INDEX of the person at PERSON_INDEX as done."""
    from assignbook.logic.requests import MarkAssignment, ViewPerson

    done: bool | None = None if toggle else not undone
    model = _execute(session, [ViewPerson(person_index), MarkAssignment(assignment_index, done)])
    _print_assignments(model)


@cli.command(name="clean")
@click.option("--before", default=None, help="Cutoff date (default: today minus the grace period)")
@click.pass_obj
def clean_command(session: _Session, before: str | None) -> None:
    """Remove every assignment due before the cutoff date."""
    from assignbook.logic.requests import CleanAssignments

    _execute(session, [CleanAssignments(_due(before) if before else None)])


@cli.command(name="clear")
@click.confirmation_option(prompt="Remove every person from the address book?")
@click.pass_obj
def clear_command(session: _Session) -> None:
    """Remove every person from the address book."""
    from assignbook.logic.requests import ClearAddressBook

    _execute(session, [ClearAddressBook()])


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
@click.argument("script", type=click.Path(exists=True, dir_okay=False))
@click.option("--keep-going", is_flag=True, default=False, help="Continue after a failed step")
@click.pass_obj
def run_command(session: _Session, script: str, keep_going: bool) -> None:
    """Execute a YAML SCRIPT of commands in a single session.

    Because all steps share one session, undo and redo apply to the
    steps before them.

    \b
    Example script:
        - add: {name: Alice Tan, email: alice@example.com, module: CS101}
        - a-add: {name: Alice Tan, description: HW1, due: 10/01/2024}
        - undo
    """
    from assignbook.cli.script import ScriptError, command_words, load_script
    from assignbook.model.errors import ValidationError

    try:
        requests = load_script(Path(script).read_text(encoding="utf-8"))
    except ScriptError as exc:
        _fail(f"{exc}. Known commands: {', '.join(command_words())}")
    except ValidationError as exc:
        _fail(str(exc))

    model = _execute(session, requests, keep_going=keep_going)
    _print_persons(model)


if __name__ == "__main__":
    cli()
