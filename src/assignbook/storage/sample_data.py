"""Seed data used when no address book file exists yet."""
from __future__ import annotations

from datetime import date

from assignbook.model.address_book import AddressBook
from assignbook.model.assignment import Assignment
from assignbook.model.person import Person
from assignbook.model.values import Email, Module, Name, Tag


def sample_persons() -> list[Person]:
    return [
        Person(
            Name("Alex Yeoh"),
            Email("alexyeoh@example.com"),
            Module("CS2103T"),
            frozenset({Tag("friends")}),
            (Assignment("Tutorial 3", date(2024, 2, 1)),),
        ),
        Person(
            Name("Bernice Yu"),
            Email("berniceyu@example.com"),
            Module("CS2103T"),
            frozenset({Tag("colleagues"), Tag("friends")}),
        ),
        Person(
            Name("Charlotte Oliveiro"),
            Email("charlotte@example.com"),
            Module("CS2101"),
            frozenset({Tag("neighbours")}),
            (
                Assignment("Oral presentation", date(2024, 3, 15)),
                Assignment("Reflection essay", date(2024, 3, 1), is_done=True),
            ),
        ),
        Person(
            Name("David Li"),
            Email("lidavid@example.com"),
            Module("CS2101"),
            frozenset({Tag("family")}),
        ),
    ]


def sample_address_book() -> AddressBook:
    return AddressBook(sample_persons())
