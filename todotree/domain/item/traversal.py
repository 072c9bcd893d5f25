"""Pure tree traversal.

All functions in this module are pure - no I/O, no side effects.
They take data in, return data out.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TypeVar

from todotree.domain.types import Coordinate

from .models import Item, ItemStatus, PrintWhich

T = TypeVar("T")


@dataclass(frozen=True)
class ItemWithCoordinate:
    """An item together with its location in the tree.

    ``depth`` is 0 for top-level items.
    """

    item: Item
    coordinate: Coordinate

    @property
    def depth(self) -> int:
        return len(self.coordinate) - 1


def walk(items: list[Item], parent: Coordinate = Coordinate()) -> Iterator[ItemWithCoordinate]:
    """Yield every item depth-first, pre-order, with its coordinate."""
    for index, item in enumerate(items):
        coordinate = parent.child(index)
        yield ItemWithCoordinate(item=item, coordinate=coordinate)
        yield from walk(item.children, coordinate)


def walk_visible(
    items: list[Item],
    which: PrintWhich = PrintWhich.ALL,
    depth_limit: int | None = None,
    show_hidden: bool = False,
    parent: Coordinate = Coordinate(),
) -> Iterator[ItemWithCoordinate]:
    """Yield the items a render pass would display, in display order.

    Two different cuts apply:

    - A hidden item (when ``show_hidden`` is False) prunes its whole
      subtree, whatever its descendants' own flags say.
    - The status filter skips only the item itself; its children are
      still visited.

    Items deeper than ``depth_limit`` are never yielded; shallower
    ancestors are unaffected.
    """
    for index, item in enumerate(items):
        coordinate = parent.child(index)
        if item.hidden and not show_hidden:
            continue
        if depth_limit is not None and len(coordinate) - 1 > depth_limit:
            continue
        if which.matches(item.status):
            yield ItemWithCoordinate(item=item, coordinate=coordinate)
        yield from walk_visible(item.children, which, depth_limit, show_hidden, coordinate)


def fold_items(
    visits: Iterator[ItemWithCoordinate],
    initial: T,
    f: Callable[[T, ItemWithCoordinate], T],
) -> T:
    """Fold over a stream of visited items.

    Args:
        visits: Items to fold over, e.g. from ``walk`` or ``walk_visible``
        initial: Starting accumulator value
        f: Function (accumulator, visit) -> new_accumulator

    Returns:
        Final accumulated value
    """
    acc = initial
    for visit in visits:
        acc = f(acc, visit)
    return acc


def count_by_status(visits: Iterator[ItemWithCoordinate]) -> dict[ItemStatus, int]:
    """Count visited items by status.

    Returns:
        Dict mapping every status to its count (zero included)
    """

    def count(acc: dict[ItemStatus, int], visit: ItemWithCoordinate) -> dict[ItemStatus, int]:
        acc[visit.item.status] += 1
        return acc

    return fold_items(visits, {status: 0 for status in ItemStatus}, count)
