"""Coordinate resolution.

Translates a Coordinate into a location inside an item tree. All
functions are pure lookups: they never mutate the tree and never
clamp an out-of-range index.
"""

from todotree.domain.shared import Err, Ok, Result, TodoError
from todotree.domain.types import Coordinate

from .models import Item


def _walk(items: list[Item], coordinate: Coordinate) -> Result[Item, TodoError]:
    """Follow every index of a non-empty coordinate down to an item."""
    siblings = items
    last = len(coordinate) - 1
    for depth, index in enumerate(coordinate.indices):
        if not 0 <= index < len(siblings):
            return Err(
                TodoError.invalid_location(
                    coordinate,
                    f"no item {index} at depth {depth}, {len(siblings)} available",
                )
            )
        if depth == last:
            return Ok(siblings[index])
        siblings = siblings[index].children
    return Err(TodoError.invalid_location(coordinate, "top level is not an item"))


def resolve_item(items: list[Item], coordinate: Coordinate) -> Result[Item, TodoError]:
    """Resolve a coordinate to the exact item it names.

    Args:
        items: Top-level items of the tree
        coordinate: Location of the item

    Returns:
        Ok(Item), or Err(TodoError) if any index is out of range or the
        coordinate is empty (the top level is not an item)
    """
    if not coordinate:
        return Err(TodoError.invalid_location(coordinate, "top level is not an item"))
    return _walk(items, coordinate)


def resolve_children(items: list[Item], coordinate: Coordinate) -> Result[list[Item], TodoError]:
    """Resolve a parent coordinate to the child list new items go into.

    The empty coordinate resolves to the top-level list itself.
    """
    if not coordinate:
        return Ok(items)
    result = _walk(items, coordinate)
    if isinstance(result, Err):
        return result
    return Ok(result.value.children)


def resolve_slot(
    items: list[Item], coordinate: Coordinate
) -> Result[tuple[list[Item], int], TodoError]:
    """Resolve a coordinate to its containing list and position.

    Returns:
        Ok((siblings, index)) such that ``siblings[index]`` is the
        addressed item, or Err(TodoError) if it does not exist
    """
    if not coordinate:
        return Err(TodoError.invalid_location(coordinate, "top level is not an item"))
    result = resolve_children(items, coordinate.parent())
    if isinstance(result, Err):
        return result
    siblings = result.value
    index = coordinate.index
    if not 0 <= index < len(siblings):
        return Err(
            TodoError.invalid_location(
                coordinate,
                f"no item {index} at depth {len(coordinate) - 1}, {len(siblings)} available",
            )
        )
    return Ok((siblings, index))
