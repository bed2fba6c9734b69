"""Unit tests for assignbook.model.assignment — Assignment and UniqueAssignmentList."""
from __future__ import annotations

from datetime import date

import pytest

from assignbook.model.assignment import Assignment, UniqueAssignmentList, parse_due_date
from assignbook.model.errors import (
    AssignmentNotFoundError,
    DuplicateAssignmentError,
    ValidationError,
)


def _a(description: str, day: int, done: bool = False) -> Assignment:
    return Assignment(description, date(2024, 1, day), done)


# ---------------------------------------------------------------------------
# parse_due_date
# ---------------------------------------------------------------------------


class TestParseDueDate:
    def test_day_month_year(self) -> None:
        assert parse_due_date("11/11/2021") == date(2021, 11, 11)

    def test_iso(self) -> None:
        assert parse_due_date("2024-01-10") == date(2024, 1, 10)

    def test_date_passthrough(self) -> None:
        d = date(2024, 5, 1)
        assert parse_due_date(d) is d

    @pytest.mark.parametrize("raw", ["", "31/02/2024", "2024/01/10", "tomorrow", " "])
    def test_invalid_dates_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError) as info:
            parse_due_date(raw)
        assert info.value.field == "DueDate"


# ---------------------------------------------------------------------------
# Assignment
# ---------------------------------------------------------------------------


class TestAssignment:
    def test_string_due_date_is_parsed(self) -> None:
        assert Assignment("HW1", "10/01/2024").due_date == date(2024, 1, 10)  # type: ignore[arg-type]

    def test_default_not_done(self) -> None:
        assert _a("HW1", 10).is_done is False

    def test_equality_ignores_done_state(self) -> None:
        assert _a("HW1", 10, done=True) == _a("HW1", 10)
        assert hash(_a("HW1", 10, done=True)) == hash(_a("HW1", 10))

    def test_different_date_is_different(self) -> None:
        assert _a("HW1", 10) != _a("HW1", 11)

    def test_description_whitespace_collapsed(self) -> None:
        assert Assignment("  Lab   report ", date(2024, 1, 1)).description == "Lab report"

    @pytest.mark.parametrize("description", ["", "   ", "Assignment 2| |"])
    def test_invalid_description_rejected(self, description: str) -> None:
        with pytest.raises(ValidationError):
            Assignment(description, date(2024, 1, 1))

    def test_with_done_returns_copy(self) -> None:
        original = _a("HW1", 10)
        done = original.with_done(True)
        assert done.is_done is True
        assert original.is_done is False

    def test_is_due_before(self) -> None:
        assert _a("HW1", 10).is_due_before(date(2024, 1, 11))
        assert not _a("HW1", 10).is_due_before(date(2024, 1, 10))

    def test_str_shows_status(self) -> None:
        assert str(_a("HW1", 10, done=True)) == "[X] HW1 (due 10/01/2024)"


# ---------------------------------------------------------------------------
# UniqueAssignmentList
# ---------------------------------------------------------------------------


class TestUniqueAssignmentListAdd:
    def test_add_appends(self) -> None:
        items = UniqueAssignmentList()
        items.add(_a("HW1", 10))
        assert items.as_list() == (_a("HW1", 10),)

    def test_add_duplicate_raises(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10)])
        with pytest.raises(DuplicateAssignmentError):
            items.add(_a("HW1", 10, done=True))

    def test_duplicate_in_constructor_raises(self) -> None:
        with pytest.raises(DuplicateAssignmentError):
            UniqueAssignmentList([_a("HW1", 10), _a("HW1", 10)])

    def test_same_description_other_date_allowed(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10), _a("HW1", 11)])
        assert len(items) == 2

    def test_contains(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10)])
        assert items.contains(_a("HW1", 10))
        assert _a("HW1", 10) in items
        assert "HW1" not in items


class TestUniqueAssignmentListRemove:
    def test_remove_existing(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10), _a("HW2", 11)])
        items.remove(_a("HW1", 10))
        assert items.as_list() == (_a("HW2", 11),)

    def test_remove_missing_raises(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10)])
        with pytest.raises(AssignmentNotFoundError):
            items.remove(_a("HW2", 11))

    def test_remove_due_before(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 5), _a("HW2", 20), _a("HW3", 9)])
        removed = items.remove_due_before(date(2024, 1, 10))
        assert [a.description for a in removed] == ["HW1", "HW3"]
        assert [a.description for a in items] == ["HW2"]

    def test_remove_due_before_nothing_due(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 20)])
        assert items.remove_due_before(date(2024, 1, 10)) == []
        assert len(items) == 1


class TestUniqueAssignmentListMark:
    def test_mark_sets_done(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10)])
        updated = items.mark(_a("HW1", 10))
        assert updated.is_done is True
        assert items.as_list()[0].is_done is True

    def test_mark_not_done(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10, done=True)])
        items.mark(_a("HW1", 10), done=False)
        assert items.as_list()[0].is_done is False

    def test_mark_toggle(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10)])
        items.mark(_a("HW1", 10), done=None)
        items.mark(_a("HW1", 10), done=None)
        assert items.as_list()[0].is_done is False

    def test_mark_keeps_position(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10), _a("HW2", 11), _a("HW3", 12)])
        items.mark(_a("HW2", 11))
        assert [a.description for a in items] == ["HW1", "HW2", "HW3"]

    def test_mark_missing_raises(self) -> None:
        items = UniqueAssignmentList()
        with pytest.raises(AssignmentNotFoundError):
            items.mark(_a("HW1", 10))


class TestUniqueAssignmentListSort:
    def test_sort_by_due_date(self) -> None:
        items = UniqueAssignmentList([_a("C", 12), _a("A", 10), _a("B", 11)])
        items.sort()
        assert [a.description for a in items] == ["A", "B", "C"]

    def test_sort_is_stable_for_equal_dates(self) -> None:
        items = UniqueAssignmentList([_a("Zeta", 10), _a("Early", 1), _a("Alpha", 10)])
        items.sort()
        assert [a.description for a in items] == ["Early", "Zeta", "Alpha"]

    def test_sort_is_idempotent(self) -> None:
        items = UniqueAssignmentList([_a("C", 12), _a("B", 10), _a("A", 10), _a("D", 3)])
        items.sort()
        once = items.as_list()
        items.sort()
        assert items.as_list() == once
        assert [a.description for a in items] == [a.description for a in once]


class TestUniqueAssignmentListViews:
    def test_as_list_is_read_only(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10)])
        snapshot = items.as_list()
        with pytest.raises((AttributeError, TypeError)):
            snapshot.append(_a("HW2", 11))  # type: ignore[attr-defined]
        with pytest.raises(TypeError):
            snapshot[0] = _a("HW2", 11)  # type: ignore[index]

    def test_snapshot_not_affected_by_later_changes(self) -> None:
        items = UniqueAssignmentList([_a("HW1", 10)])
        snapshot = items.as_list()
        items.add(_a("HW2", 11))
        assert len(snapshot) == 1

    def test_equality_includes_done_state(self) -> None:
        assert UniqueAssignmentList([_a("HW1", 10)]) == UniqueAssignmentList([_a("HW1", 10)])
        assert UniqueAssignmentList([_a("HW1", 10)]) != UniqueAssignmentList([_a("HW1", 10, True)])

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(UniqueAssignmentList())
