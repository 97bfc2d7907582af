"""
Tests for the ClipboardList core: promotion, eviction, removal, capacity changes and
hydration from persisted state.
"""

import pytest
from pydantic import ValidationError

from clipboard_manager.exceptions import (
    EmptyInputError,
    IndexOutOfRangeError,
    InvalidCapacityError,
)
from clipboard_manager.models import ClipboardEntry, ClipboardList, ClipboardListState


@pytest.fixture
def xyz() -> ClipboardList:
    """A list holding ["x", "y", "z"], most recent first."""
    items = ClipboardList()
    for text in ("z", "y", "x"):
        items.insert(text)
    return items


# region Insert


class TestInsert:
    def test_insert_puts_newest_first(self):
        items = ClipboardList()
        items.insert("a")
        assert items.insert("b") == ["b", "a"]
        assert items.texts == ["b", "a"]

    def test_reinsert_promotes_instead_of_duplicating(self):
        items = ClipboardList(capacity=5)
        items.insert("a")
        items.insert("b")
        assert items.insert("a") == ["a", "b"]
        assert len(items) == 2

    def test_reinsert_from_the_tail_does_not_grow(self):
        items = ClipboardList(capacity=3)
        for text in ("a", "b", "c"):
            items.insert(text)
        items.insert("a")
        assert items.texts == ["a", "c", "b"]
        assert len(items) == 3

    def test_capacity_evicts_oldest(self):
        items = ClipboardList(capacity=2)
        items.insert("a")
        items.insert("b")
        items.insert("c")
        assert items.texts == ["c", "b"]

    def test_promotion_at_full_capacity_evicts_nothing(self):
        items = ClipboardList(capacity=2)
        items.insert("a")
        items.insert("b")
        items.insert("a")
        assert items.texts == ["a", "b"]

    def test_capacity_one_keeps_only_latest(self):
        items = ClipboardList(capacity=1)
        items.insert("a")
        items.insert("b")
        assert items.texts == ["b"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_is_rejected(self, text):
        items = ClipboardList()
        items.insert("keep")
        with pytest.raises(EmptyInputError):
            items.insert(text)
        assert items.texts == ["keep"]

    def test_text_is_stored_exactly(self):
        items = ClipboardList()
        text = "  padded\nmultiline " + "x" * 200
        items.insert(text)
        assert items.get(0).text == text

    def test_dedup_is_exact_match(self):
        items = ClipboardList()
        items.insert("Hello")
        items.insert("hello")
        items.insert("hello ")
        assert items.texts == ["hello ", "hello", "Hello"]

    def test_invariants_hold_for_any_insert_sequence(self):
        items = ClipboardList(capacity=4)
        sequence = ["a", "b", "a", "c", "d", "e", "b", "b", "f", "a", "g", "c"]
        for text in sequence:
            items.insert(text)
            assert len(set(items.texts)) == len(items)
            assert len(items) <= items.capacity
            assert items.texts[0] == text
        assert items.texts == ["c", "g", "a", "f"]


# endregion
# region Remove


class TestRemoveAt:
    def test_remove_first(self, xyz: ClipboardList):
        removed = xyz.remove_at(0)
        assert removed == ClipboardEntry(text="x")
        assert xyz.texts == ["y", "z"]

    def test_remove_shifts_later_entries(self, xyz: ClipboardList):
        xyz.remove_at(1)
        assert xyz.texts == ["x", "z"]
        assert xyz.get(1).text == "z"

    def test_out_of_range_leaves_list_unchanged(self, xyz: ClipboardList):
        xyz.remove_at(0)
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            xyz.remove_at(5)
        assert exc_info.value.index == 5
        assert exc_info.value.length == 2
        assert xyz.texts == ["y", "z"]

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_invalid_indices_are_not_clamped(self, xyz: ClipboardList, index):
        with pytest.raises(IndexOutOfRangeError):
            xyz.remove_at(index)
        assert xyz.texts == ["x", "y", "z"]

    def test_index_error_is_an_index_error(self):
        with pytest.raises(IndexError):
            ClipboardList().remove_at(0)


# endregion
# region Capacity / Clear


class TestCapacity:
    def test_lowering_capacity_keeps_most_recent(self, xyz: ClipboardList):
        assert xyz.set_capacity(1) == ["x"]
        assert xyz.capacity == 1

    def test_raising_capacity_keeps_entries(self, xyz: ClipboardList):
        xyz.set_capacity(20)
        assert xyz.texts == ["x", "y", "z"]
        assert xyz.capacity == 20

    @pytest.mark.parametrize("capacity", [0, -3, 2.5, True, "4"])
    def test_invalid_capacity_is_rejected(self, xyz: ClipboardList, capacity):
        with pytest.raises(InvalidCapacityError):
            xyz.set_capacity(capacity)
        assert xyz.capacity == 10
        assert len(xyz) == 3

    def test_constructor_rejects_zero_capacity(self):
        with pytest.raises(ValueError):
            ClipboardList(capacity=0)

    def test_clear(self, xyz: ClipboardList):
        xyz.clear()
        assert xyz.texts == []
        assert len(xyz) == 0
        assert xyz.capacity == 10


# endregion
# region State


class TestState:
    def test_to_state(self, xyz: ClipboardList):
        assert xyz.to_state().model_dump() == {"entries": ["x", "y", "z"], "capacity": 10}

    def test_from_state_restores_order_and_capacity(self):
        items = ClipboardList.from_state({"entries": ["b", "a"], "capacity": 3})
        assert items.texts == ["b", "a"]
        assert items.capacity == 3

    def test_from_state_repairs_stored_data(self):
        items = ClipboardList.from_state(
            {"entries": ["a", "", "b", "a", 7, "  ", "c", "d"], "capacity": 0}
        )
        assert items.capacity == 1
        assert items.texts == ["a"]

    def test_from_state_trims_to_capacity(self):
        items = ClipboardList.from_state({"entries": ["a", "b", "c"], "capacity": 2})
        assert items.texts == ["a", "b"]

    def test_from_state_none_is_empty(self):
        items = ClipboardList.from_state(None)
        assert len(items) == 0
        assert items.capacity == 10

    def test_unrepairable_state_raises(self):
        with pytest.raises(ValidationError):
            ClipboardListState.model_validate({"entries": "abc", "capacity": 3})
        with pytest.raises(ValidationError):
            ClipboardListState.model_validate({"entries": [], "capacity": "many"})

    def test_contains_and_iteration(self, xyz: ClipboardList):
        assert "y" in xyz
        assert "w" not in xyz
        assert [entry.text for entry in xyz] == ["x", "y", "z"]


# endregion
