"""Predicates used to filter the person and assignment views."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from assignbook.model.assignment import Assignment
from assignbook.model.person import Person
from assignbook.model.values import Module

PersonPredicate = Callable[[Person], bool]
AssignmentPredicate = Callable[[Assignment], bool]


def show_all_persons(person: Person) -> bool:
    return True


def show_all_assignments(assignment: Assignment) -> bool:
    return True


@dataclass(frozen=True, slots=True)
class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any keyword as a whole word.

    Matching is case-insensitive.
    """

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {word.lower() for word in person.name.value.split()}
        return any(keyword.lower() in words for keyword in self.keywords)


@dataclass(frozen=True, slots=True)
class ModuleMatchesPredicate:
    """Matches persons enrolled in ``module``."""

    module: Module

    def __call__(self, person: Person) -> bool:
        return person.has_module(self.module)


@dataclass(frozen=True, slots=True)
class PendingAssignmentPredicate:
    """Matches assignments that are not yet done."""

    def __call__(self, assignment: Assignment) -> bool:
        return not assignment.is_done
