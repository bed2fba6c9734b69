#!/usr/bin/env python3
"""Example: Quickstart — assignbook

Minimal working example: open an address book, add a person and an
assignment, mark it done, then undo and redo the change.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install assignbook
"""
from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import assignbook
from assignbook.logic import AddAssignment, AddPerson, MarkAssignment, Redo, Undo
from assignbook.model import Assignment, Email, Module, Name, Person


def main() -> None:
    print(f"assignbook version: {assignbook.__version__}")

    data_file = Path(tempfile.mkdtemp()) / "assignbook.json"
    model = assignbook.open_model(data_file, use_sample=False)
    dispatcher = assignbook.dispatcher(model)

    # Step 1: Add a person and give them an assignment
    amy = Person(Name("Amy Bee"), Email("amy@example.com"), Module("CS2103T"))
    print(dispatcher.execute(AddPerson(amy)).feedback)
    print(dispatcher.execute(AddAssignment(Name("Amy Bee"), Assignment("Tutorial 1", date(2024, 1, 15)))).feedback)

    # Step 2: The assignment view now shows Amy's assignments; mark the first one
    print(dispatcher.execute(MarkAssignment(1)).feedback)

    # Step 3: Undo and redo the mark
    dispatcher.execute(Undo())
    print(f"After undo:  {model.filtered_assignment_list[0]}")
    dispatcher.execute(Redo())
    print(f"After redo:  {model.filtered_assignment_list[0]}")

    # Step 4: Persist
    assignbook.save_model(model)
    print(f"\nSaved to {data_file}")
    print(data_file.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
