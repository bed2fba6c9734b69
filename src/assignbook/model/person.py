"""The ``Person`` entity and the roster list that keeps persons unique.

Persons are immutable.  Edits, including changes to a person's
assignments, produce a new ``Person`` that replaces the old one in the
roster.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from assignbook.model.assignment import Assignment, UniqueAssignmentList
from assignbook.model.errors import (
    DuplicatePersonError,
    PersonNotFoundError,
    ValidationError,
)
from assignbook.model.values import Email, Module, Name, Tag


@dataclass(frozen=True, eq=False)
class Person:
    """A contact in the address book.

    Parameters
    ----------
    name:
        Identity field; two persons with equal names are the same person.
    email:
        Contact email address.
    module:
        The course module the person belongs to.
    tags:
        Any iterable of ``Tag``; stored as a ``frozenset``.
    assignments:
        Any iterable of ``Assignment``; duplicates are rejected and the
        stored tuple is kept in due-date order.
    """

    name: Name
    email: Email
    module: Module
    tags: frozenset[Tag] = field(default_factory=frozenset)
    assignments: tuple[Assignment, ...] = ()

    def __post_init__(self) -> None:
        for attr, expected in (("name", Name), ("email", Email), ("module", Module)):
            value = getattr(self, attr)
            if not isinstance(value, expected):
                raise ValidationError(
                    expected.__name__, value, f"{attr} must be a {expected.__name__}, got {value!r}"
                )
        tags = frozenset(self.tags)
        for tag in tags:
            if not isinstance(tag, Tag):
                raise ValidationError("Tag", tag, f"tags must contain Tag objects, got {tag!r}")
        assignments = UniqueAssignmentList(self.assignments)
        assignments.sort()
        object.__setattr__(self, "tags", tags)
        object.__setattr__(self, "assignments", assignments.as_list())

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def is_same_person(self, other: "Person | None") -> bool:
        """Return True if ``other`` has the same name.

        This is the weak notion of identity used for roster uniqueness.
        """
        if other is self:
            return True
        return other is not None and self.has_name(other.name)

    def has_name(self, name: Name) -> bool:
        return self.name == name

    def has_module(self, module: Module) -> bool:
        return self.module == module

    # ------------------------------------------------------------------
    # Assignment helpers
    # ------------------------------------------------------------------

    def assignment_list(self) -> UniqueAssignmentList:
        """Return a fresh, mutable working copy of this person's assignments."""
        return UniqueAssignmentList(self.assignments)

    def has_assignment(self, assignment: Assignment) -> bool:
        return assignment in self.assignments

    def with_assignments(self, assignments: Iterable[Assignment]) -> "Person":
        """Return a copy of this person holding ``assignments`` instead."""
        return dataclasses.replace(self, assignments=tuple(assignments))

    def edited(
        self,
        *,
        name: Name | None = None,
        email: Email | None = None,
        module: Module | None = None,
        tags: Iterable[Tag] | None = None,
    ) -> "Person":
        """Return a copy with the given fields replaced.  Assignments are kept."""
        return Person(
            name=name if name is not None else self.name,
            email=email if email is not None else self.email,
            module=module if module is not None else self.module,
            tags=frozenset(tags) if tags is not None else self.tags,
            assignments=self.assignments,
        )

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        return (
            self.name == other.name
            and self.email == other.email
            and self.module == other.module
            and _assignment_state(self.assignments) == _assignment_state(other.assignments)
            and self.tags == other.tags
        )

    def __hash__(self) -> int:
        return hash((self.name, self.email, self.module, self.tags))

    def __str__(self) -> str:
        parts = [f"{self.name}; Email: {self.email}; Module: {self.module}"]
        if self.assignments:
            parts.append("; Assignments: " + "".join(str(a) for a in self.assignments))
        if self.tags:
            parts.append("; Tags: " + "".join(str(t) for t in sorted(self.tags, key=lambda t: t.value)))
        return "".join(parts)


def _assignment_state(assignments: Iterable[Assignment]) -> list[tuple[object, ...]]:
    return [(a.description, a.due_date, a.is_done) for a in assignments]


class UniquePersonList:
    """Ordered roster in which no two persons satisfy ``is_same_person``."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._items: list[Person] = []
        for person in persons:
            self.add(person)

    def contains(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self._items)

    def add(self, person: Person) -> None:
        if self.contains(person):
            raise DuplicatePersonError(person.name)
        self._items.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited`` at the same position.

        Raises
        ------
        PersonNotFoundError
            If ``target`` is not in the roster.
        DuplicatePersonError
            If ``edited`` has the name of a different person in the roster.
        """
        index = self.index_of(target)
        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError(edited.name)
        self._items[index] = edited

    def remove(self, person: Person) -> Person:
        """Remove and return the stored person matching ``person``."""
        return self._items.pop(self.index_of(person))

    def index_of(self, person: Person) -> int:
        for index, existing in enumerate(self._items):
            if existing.is_same_person(person):
                return index
        raise PersonNotFoundError(person.name)

    def get(self, person: Person) -> Person:
        """Return the stored person matching ``person`` by name."""
        return self._items[self.index_of(person)]

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the whole roster.  The replacement must be unique."""
        self._items = UniquePersonList(persons)._items

    def copy(self) -> "UniquePersonList":
        """Return a shallow copy; the contents are already known to be unique."""
        clone = UniquePersonList()
        clone._items = list(self._items)
        return clone

    def as_list(self) -> tuple[Person, ...]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[Person]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniquePersonList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UniquePersonList({[str(p.name) for p in self._items]!r})"
