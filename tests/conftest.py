"""Shared test fixtures for assignbook.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from datetime import date

import pytest

from assignbook.model.address_book import AddressBook
from assignbook.model.assignment import Assignment
from assignbook.model.person import Person
from assignbook.model.values import Email, Module, Name, Tag


def make_person(
    name: str,
    email: str | None = None,
    module: str = "CS101",
    tags: tuple[str, ...] = (),
    assignments: tuple[Assignment, ...] = (),
) -> Person:
    """Build a valid ``Person`` with sensible defaults."""
    local = name.lower().replace(" ", "")
    return Person(
        Name(name),
        Email(email or f"{local}@example.com"),
        Module(module),
        frozenset(Tag(t) for t in tags),
        assignments,
    )


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def hw1() -> Assignment:
    return Assignment("HW1", date(2024, 1, 10))


@pytest.fixture()
def alice() -> Person:
    return make_person("Alice Pauline", module="CS101", tags=("friends",))


@pytest.fixture()
def bob() -> Person:
    return make_person("Bob Choo", module="CS101")


@pytest.fixture()
def carl() -> Person:
    return make_person("Carl Kurz", module="CS2103T")


@pytest.fixture()
def typical_book(alice: Person, bob: Person, carl: Person) -> AddressBook:
    return AddressBook([alice, bob, carl])


@pytest.fixture()
def person_factory():
    """Return ``make_person`` so tests can build extra persons."""
    return make_person
