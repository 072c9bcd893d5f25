"""
todotree Test Suite - Action Engine
====================================
Tests for act_on_item_at and move_item.

Usage:
    python -m pytest tests/test_engine.py -v
"""

import pytest

from todotree.domain.item import (
    Add,
    AlterHidden,
    AlterStatus,
    Edit,
    ItemAction,
    ItemStatus,
    ItemType,
    Put,
    Remove,
    act_on_item_at,
    move_item,
    walk,
)
from todotree.domain.shared import Err, ErrorKind, Ok
from todotree.domain.types import Coordinate
from tests.conftest import dump, make_item, shape


# ─────────────────────────────────────────────
#  Add
# ─────────────────────────────────────────────


class TestAdd:
    def test_add_to_empty_list(self):
        items = []
        result = act_on_item_at(items, Coordinate(), Add(message="x"))
        assert result == Ok(None)
        assert [i.message for i in items] == ["x"]

        act_on_item_at(items, Coordinate(), Add(message="y"))
        assert [i.message for i in items] == ["x", "y"]

    def test_new_item_defaults(self):
        items = []
        act_on_item_at(items, Coordinate(), Add(message="x"))
        item = items[0]
        assert item.item_type == ItemType.TODO
        assert item.status == ItemStatus.INCOMPLETE
        assert item.hidden is False
        assert item.children == []

    def test_add_nested_appends_last_child(self, items):
        before = len(items[0].children)
        act_on_item_at(items, Coordinate((0,)), Add(message="Bread"))
        assert len(items[0].children) == before + 1
        assert items[0].children[-1].message == "Bread"

    def test_add_under_invalid_parent_leaves_tree_unchanged(self, items):
        before = dump(items)
        result = act_on_item_at(items, Coordinate((0, 9)), Add(message="Bread"))
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.INVALID_LOCATION
        assert dump(items) == before


# ─────────────────────────────────────────────
#  Remove / Put
# ─────────────────────────────────────────────


class TestRemoveAndPut:
    def test_check_remove_put_scenario(self):
        items = [make_item("A"), make_item("B")]

        act_on_item_at(items, Coordinate((0,)), AlterStatus(status=ItemStatus.COMPLETE))
        assert [(i.message, i.status) for i in items] == [
            ("A", ItemStatus.COMPLETE),
            ("B", ItemStatus.INCOMPLETE),
        ]

        removed = act_on_item_at(items, Coordinate((1,)), Remove())
        assert isinstance(removed, Ok)
        assert removed.value.message == "B"
        assert [i.message for i in items] == ["A"]

        act_on_item_at(items, Coordinate(), Put(item=removed.value))
        assert [(i.message, i.status) for i in items] == [
            ("A", ItemStatus.COMPLETE),
            ("B", ItemStatus.INCOMPLETE),
        ]

    def test_remove_shifts_later_siblings(self, items):
        act_on_item_at(items, Coordinate((0,)), Remove())
        assert [i.message for i in items] == ["Secret", "Laundry"]

    def test_remove_takes_subtree(self, items):
        result = act_on_item_at(items, Coordinate((0, 1)), Remove())
        assert result.value.children[0].message == "Free range"
        assert shape(items[0].children) == [("Milk", [])]

    def test_remove_then_put_at_parent_restores_last_child(self, items):
        before = dump(items)
        coordinate = Coordinate((0, 1))
        removed = act_on_item_at(items, coordinate, Remove())
        act_on_item_at(items, coordinate.parent(), Put(item=removed.value))
        assert dump(items) == before

    def test_remove_top_level_fails(self, items):
        before = dump(items)
        result = act_on_item_at(items, Coordinate(), Remove())
        assert isinstance(result, Err)
        assert dump(items) == before

    def test_remove_out_of_range_fails(self):
        items = [make_item("A"), make_item("B")]
        result = act_on_item_at(items, Coordinate((5,)), Remove())
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.INVALID_LOCATION
        assert [i.message for i in items] == ["A", "B"]


# ─────────────────────────────────────────────
#  In-place edits
# ─────────────────────────────────────────────


class TestAlter:
    @pytest.mark.parametrize(
        "action",
        [
            AlterStatus(status=ItemStatus.DISABLED),
            AlterHidden(hidden=True),
            Edit(message="Changed"),
        ],
    )
    def test_only_addressed_item_changes(self, items, action):
        before = {str(v.coordinate): v.item.model_dump(exclude={"children"}) for v in walk(items)}
        tree_shape = [str(v.coordinate) for v in walk(items)]

        assert act_on_item_at(items, Coordinate((0, 1)), action) == Ok(None)

        assert [str(v.coordinate) for v in walk(items)] == tree_shape
        after = {str(v.coordinate): v.item.model_dump(exclude={"children"}) for v in walk(items)}
        changed = [key for key in before if before[key] != after[key]]
        assert changed == ["0.1"]

    def test_status_does_not_cascade(self, items):
        act_on_item_at(items, Coordinate((0,)), AlterStatus(status=ItemStatus.COMPLETE))
        assert items[0].children[1].status == ItemStatus.INCOMPLETE

    def test_uncheck_clears_disabled(self, items):
        coordinate = Coordinate((0, 1, 0))
        act_on_item_at(items, coordinate, AlterStatus(status=ItemStatus.INCOMPLETE))
        assert items[0].children[1].children[0].status == ItemStatus.INCOMPLETE

    def test_hidden_is_independent_of_status(self, items):
        act_on_item_at(items, Coordinate((2,)), AlterHidden(hidden=True))
        act_on_item_at(items, Coordinate((2,)), AlterStatus(status=ItemStatus.INCOMPLETE))
        assert items[2].hidden is True
        act_on_item_at(items, Coordinate((2,)), AlterHidden(hidden=False))
        assert items[2].status == ItemStatus.INCOMPLETE

    def test_edit_replaces_message(self, items):
        act_on_item_at(items, Coordinate((2,)), Edit(message="Ironing"))
        assert items[2].message == "Ironing"

    def test_edit_top_level_fails(self, items):
        result = act_on_item_at(items, Coordinate(), Edit(message="x"))
        assert isinstance(result, Err)

    def test_unknown_action_raises(self, items):
        class Frobnicate(ItemAction):
            pass

        with pytest.raises(TypeError):
            act_on_item_at(items, Coordinate((0,)), Frobnicate())


# ─────────────────────────────────────────────
#  Move
# ─────────────────────────────────────────────


class TestMove:
    def test_move_under_other_item(self, items):
        result = move_item(items, Coordinate((0, 0)), Coordinate((2,)))
        assert isinstance(result, Ok)
        assert result.value.message == "Milk"
        assert shape(items[0].children) == [("Eggs", [("Free range", [])])]
        assert shape(items[2].children) == [("Milk", [])]

    def test_destination_read_before_move(self, items):
        # Laundry is 2 before Groceries (0) is detached.
        move_item(items, Coordinate((0,)), Coordinate((2,)))
        assert [i.message for i in items] == ["Secret", "Laundry"]
        assert items[1].children[0].message == "Groceries"

    def test_move_to_top_level(self, items):
        move_item(items, Coordinate((0, 1)), Coordinate())
        assert items[-1].message == "Eggs"
        assert items[-1].children[0].message == "Free range"

    def test_move_within_same_parent_goes_last(self):
        items = [make_item("A"), make_item("B"), make_item("C")]
        move_item(items, Coordinate((0,)), Coordinate())
        assert [i.message for i in items] == ["B", "C", "A"]

    def test_move_into_own_subtree_is_rejected(self, items):
        before = dump(items)
        result = move_item(items, Coordinate((0,)), Coordinate((0, 1)))
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.INVALID_LOCATION
        assert dump(items) == before

    def test_move_into_itself_is_rejected(self, items):
        before = dump(items)
        assert isinstance(move_item(items, Coordinate((2,)), Coordinate((2,))), Err)
        assert dump(items) == before

    def test_invalid_source(self, items):
        before = dump(items)
        assert isinstance(move_item(items, Coordinate((9,)), Coordinate()), Err)
        assert dump(items) == before

    def test_invalid_destination_detaches_nothing(self, items):
        before = dump(items)
        result = move_item(items, Coordinate((2,)), Coordinate((0, 5)))
        assert isinstance(result, Err)
        assert dump(items) == before
