"""Unit tests for assignbook.model.values — Name, Email, Module, Tag."""
from __future__ import annotations

import pytest

from assignbook.model.errors import ValidationError
from assignbook.model.values import Email, Module, Name, Tag


class TestName:
    def test_valid_name_keeps_value(self) -> None:
        assert Name("Alex Yeoh").value == "Alex Yeoh"

    def test_whitespace_is_collapsed(self) -> None:
        assert Name("  Alex   Yeoh ") == Name("Alex Yeoh")

    def test_digits_allowed(self) -> None:
        assert Name("Capital Tan 2nd").value == "Capital Tan 2nd"

    @pytest.mark.parametrize("raw", ["", "   ", "R@chel", "peter*", "^"])
    def test_invalid_names_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError) as info:
            Name(raw)
        assert str(info.value) == Name.MESSAGE_CONSTRAINTS

    def test_non_string_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Name(42)  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        name = Name("Alex")
        with pytest.raises((AttributeError, TypeError)):
            name.value = "Bob"  # type: ignore[misc]

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Name("R@chel")

    def test_str_is_value(self) -> None:
        assert str(Name("Alex Yeoh")) == "Alex Yeoh"


class TestEmail:
    @pytest.mark.parametrize(
        "raw",
        ["alice@example.com", "a.b-c_d+e@example.com", "peter@example", "x1@sub.domain.org"],
    )
    def test_valid_emails(self, raw: str) -> None:
        assert Email(raw).value == raw

    @pytest.mark.parametrize(
        "raw",
        ["example.com", "@example.com", "peter@", ".peter@example.com", "peter.@example.com", "a@b.c"],
    )
    def test_invalid_emails_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError) as info:
            Email(raw)
        assert info.value.field == "Email"

    def test_case_insensitive_equality(self) -> None:
        assert Email("Alice@Example.COM") == Email("alice@example.com")


class TestModule:
    def test_normalized_to_upper_case(self) -> None:
        assert Module("cs2103t").value == "CS2103T"

    def test_hyphen_allowed(self) -> None:
        assert Module("GE-1000").value == "GE-1000"

    @pytest.mark.parametrize("raw", ["", " ", "CS 101", "CS_101"])
    def test_invalid_modules_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            Module(raw)


class TestTag:
    def test_valid_tag(self) -> None:
        assert Tag("friends").value == "friends"

    @pytest.mark.parametrize("raw", ["#friend", "", "two words"])
    def test_invalid_tags_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            Tag(raw)

    def test_tags_have_set_semantics(self) -> None:
        assert len({Tag("friends"), Tag("friends"), Tag("family")}) == 2

    def test_str_is_bracketed(self) -> None:
        assert str(Tag("friends")) == "[friends]"
