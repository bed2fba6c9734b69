"""String-backed value types for person fields.

Each value type is a frozen dataclass that validates and normalizes its
input in ``__post_init__``.  Equality and hashing use the normalized
value, so ``Name("Alex  Yeoh")`` equals ``Name("Alex Yeoh")``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from assignbook.model.errors import ValidationError


def _require_str(field: str, value: object) -> str:
    if not isinstance(value, str):
        raise ValidationError(field, value, f"{field} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class Name:
    """A person's name: alphanumeric words separated by spaces."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^\W_]+( [^\W_]+)*")

    def __post_init__(self) -> None:
        raw = _require_str("Name", self.value)
        normalized = " ".join(raw.split())
        if not self._PATTERN.fullmatch(normalized):
            raise ValidationError("Name", raw, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Email:
    """An email address of the form ``local-part@domain``.

    The local part may contain alphanumerics and ``+_.-`` but must not
    start or end with a special character.  The domain is made of
    dot-separated labels; the last label is at least two characters.
    Emails compare case-insensitively.
    """

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain, where the local part contains "
        "alphanumerics and the special characters +_.- (not at either end), and the domain "
        "is made of labels separated by periods, ending with a label of at least 2 characters"
    )
    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"[a-z0-9]([a-z0-9+_.-]*[a-z0-9])?"
        r"@"
        r"([a-z0-9]([a-z0-9-]*[a-z0-9])?\.)*[a-z0-9]([a-z0-9-]*[a-z0-9])"
    )

    def __post_init__(self) -> None:
        raw = _require_str("Email", self.value)
        normalized = raw.strip().lower()
        if not self._PATTERN.fullmatch(normalized):
            raise ValidationError("Email", raw, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Module:
    """A course module code such as ``CS2103T``.  Stored upper-case."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Modules should only contain alphanumeric characters and hyphens, and it should not be blank"
    )
    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Z0-9][A-Z0-9-]*")

    def __post_init__(self) -> None:
        raw = _require_str("Module", self.value)
        normalized = raw.strip().upper()
        if not self._PATTERN.fullmatch(normalized):
            raise ValidationError("Module", raw, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Tag:
    """A single alphanumeric tag."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tag names should be alphanumeric"
    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^\W_]+")

    def __post_init__(self) -> None:
        raw = _require_str("Tag", self.value)
        normalized = raw.strip()
        if not self._PATTERN.fullmatch(normalized):
            raise ValidationError("Tag", raw, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return f"[{self.value}]"
