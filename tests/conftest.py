"""Shared fixtures for the todotree test suite."""

import pytest

from todotree.domain.item import Item, ItemStatus


def make_item(
    message: str,
    status: ItemStatus = ItemStatus.INCOMPLETE,
    hidden: bool = False,
    children: list[Item] | None = None,
) -> Item:
    return Item(message=message, status=status, hidden=hidden, children=children or [])


@pytest.fixture
def items() -> list[Item]:
    """A small tree exercising every status and the hidden flag.

    0 Groceries
      0 Milk            (complete)
      1 Eggs
        0 Free range    (disabled)
    1 Secret            (hidden)
      0 Visible child
    2 Laundry           (complete)
    """
    return [
        make_item(
            "Groceries",
            children=[
                make_item("Milk", ItemStatus.COMPLETE),
                make_item("Eggs", children=[make_item("Free range", ItemStatus.DISABLED)]),
            ],
        ),
        make_item("Secret", hidden=True, children=[make_item("Visible child")]),
        make_item("Laundry", ItemStatus.COMPLETE),
    ]


def shape(items: list[Item]) -> list:
    """Messages and nesting only, for comparing tree structure."""
    return [(item.message, shape(item.children)) for item in items]


def dump(items: list[Item]) -> list[dict]:
    return [item.model_dump(mode="json") for item in items]
