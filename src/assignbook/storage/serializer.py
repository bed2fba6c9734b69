"""Address book serialization to and from JSON and YAML.

The serialized form is a plain dict/list structure that maps naturally
to both formats::

    {
      "persons": [
        {
          "name": "Alex Yeoh",
          "email": "alexyeoh@example.com",
          "module": "CS2103T",
          "tags": ["friends"],
          "assignments": [
            {"description": "Tutorial 3", "due_date": "2024-02-01", "is_done": false}
          ]
        }
      ]
    }

Usage
-----
::

    serializer = AddressBookSerializer()
    text = serializer.to_json(book)
    book2 = serializer.from_json(text)
    assert book == book2
"""
from __future__ import annotations

import json

import yaml

from assignbook.model.address_book import AddressBook
from assignbook.model.assignment import Assignment
from assignbook.model.errors import ValidationError
from assignbook.model.person import Person
from assignbook.model.values import Email, Module, Name, Tag
from assignbook.storage.errors import DataLoadError

MISSING_FIELD_MESSAGE_FORMAT = "{} field is missing!"


class AddressBookSerializer:
    """Converts between ``AddressBook`` objects and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (model → dict)
    # ------------------------------------------------------------------

    def to_dict(self, book: AddressBook) -> dict[str, object]:
        """Serialize ``book`` to a JSON-compatible dict."""
        return {"persons": [self.person_to_dict(p) for p in book.person_list]}

    def person_to_dict(self, person: Person) -> dict[str, object]:
        return {
            "name": person.name.value,
            "email": person.email.value,
            "module": person.module.value,
            "tags": sorted(t.value for t in person.tags),
            "assignments": [self.assignment_to_dict(a) for a in person.assignments],
        }

    def assignment_to_dict(self, assignment: Assignment) -> dict[str, object]:
        return {
            "description": assignment.description,
            "due_date": assignment.due_date.isoformat(),
            "is_done": assignment.is_done,
        }

    # ------------------------------------------------------------------
    # Deserialization (dict → model)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> AddressBook:
        """Deserialize an ``AddressBook`` from a plain dict.

        Raises
        ------
        ValidationError
            If a field is missing or holds an invalid value.
        DuplicatePersonError
            If two persons share a name.
        """
        persons = data.get("persons", [])
        if not isinstance(persons, list):
            raise ValidationError("persons", persons, "persons must be a list")
        return AddressBook(self.person_from_dict(p) for p in persons)

    def person_from_dict(self, data: dict[str, object]) -> Person:
        if not isinstance(data, dict):
            raise ValidationError("Person", data, f"Person entries must be mappings, got {data!r}")
        name = Name(_require(data, "name", Name))
        email = Email(_require(data, "email", Email))
        module = Module(_require(data, "module", Module))
        tags = frozenset(Tag(t) for t in _as_list(data.get("tags"), "tags"))
        assignments = tuple(
            self.assignment_from_dict(a) for a in _as_list(data.get("assignments"), "assignments")
        )
        return Person(name=name, email=email, module=module, tags=tags, assignments=assignments)

    def assignment_from_dict(self, data: dict[str, object]) -> Assignment:
        if not isinstance(data, dict):
            raise ValidationError(
                "Assignment", data, f"Assignment entries must be mappings, got {data!r}"
            )
        description = _require(data, "description", Assignment)
        due_date = data.get("due_date")
        if due_date is None:
            raise ValidationError("DueDate", None, MISSING_FIELD_MESSAGE_FORMAT.format("DueDate"))
        is_done = data.get("is_done", False)
        if not isinstance(is_done, bool):
            raise ValidationError("IsDone", is_done, f"is_done must be true or false, got {is_done!r}")
        return Assignment(
            description=description,  # type: ignore[arg-type]
            due_date=due_date,  # type: ignore[arg-type]
            is_done=is_done,
        )

    # ------------------------------------------------------------------
    # Text formats
    # ------------------------------------------------------------------

    def to_json(self, book: AddressBook, indent: int | None = 2) -> str:
        """Serialize ``book`` to a JSON string."""
        return json.dumps(self.to_dict(book), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> AddressBook:
        """Deserialize an ``AddressBook`` from a JSON string.

        Raises
        ------
        DataLoadError
            If ``text`` is not valid JSON or not a JSON object.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DataLoadError(f"Malformed JSON: {exc}") from exc
        return self.from_dict(_require_mapping(data))

    def to_yaml(self, book: AddressBook) -> str:
        """Serialize ``book`` to a YAML string."""
        return yaml.dump(self.to_dict(book), default_flow_style=False, allow_unicode=True, sort_keys=False)

    def from_yaml(self, text: str) -> AddressBook:
        """Deserialize an ``AddressBook`` from a YAML string.

        Raises
        ------
        DataLoadError
            If ``text`` is not valid YAML or not a mapping.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DataLoadError(f"Malformed YAML: {exc}") from exc
        if data is None:
            return AddressBook()
        return self.from_dict(_require_mapping(data))


def _require(data: dict[str, object], key: str, value_type: type) -> object:
    value = data.get(key)
    if value is None:
        field = value_type.__name__
        raise ValidationError(field, None, MISSING_FIELD_MESSAGE_FORMAT.format(field))
    return value


def _as_list(value: object, key: str) -> list[object]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(key, value, f"{key} must be a list, got {value!r}")
    return value


def _require_mapping(data: object) -> dict[str, object]:
    if not isinstance(data, dict):
        raise DataLoadError(f"Address book data must be a mapping, got {type(data).__name__}")
    return data
