"""Action engine.

Applies a single ItemAction at a Coordinate, mutating the tree in
place. Resolution always happens before any change, so a failed
call leaves the tree exactly as it was.
"""

from todotree.domain.shared import Err, Ok, Result, TodoError
from todotree.domain.types import Coordinate

from .actions import Add, AlterHidden, AlterStatus, Edit, ItemAction, Put, Remove
from .models import Item
from .resolver import resolve_children, resolve_item, resolve_slot


def act_on_item_at(
    items: list[Item],
    coordinate: Coordinate,
    action: ItemAction,
) -> Result[Item | None, TodoError]:
    """Apply an action at a coordinate.

    ``Add`` and ``Put`` treat the coordinate as a parent location and
    append a new last child there (the empty coordinate means the top
    level). Every other action addresses the exact item.

    Args:
        items: Top-level items of the tree (mutated in place)
        coordinate: Where to act
        action: What to do

    Returns:
        Ok(removed item) for Remove, Ok(None) for everything else, or
        Err(TodoError) if the coordinate does not resolve
    """
    if isinstance(action, (Add, Put)):
        parent = resolve_children(items, coordinate)
        if isinstance(parent, Err):
            return parent
        if isinstance(action, Add):
            parent.value.append(Item(item_type=action.item_type, message=action.message))
        else:
            parent.value.append(action.item)
        return Ok(None)

    if isinstance(action, Remove):
        slot = resolve_slot(items, coordinate)
        if isinstance(slot, Err):
            return slot
        siblings, index = slot.value
        return Ok(siblings.pop(index))

    target = resolve_item(items, coordinate)
    if isinstance(target, Err):
        return target
    item = target.value

    if isinstance(action, AlterStatus):
        item.status = action.status
    elif isinstance(action, AlterHidden):
        item.hidden = action.hidden
    elif isinstance(action, Edit):
        item.message = action.message
    else:
        raise TypeError(f"Unsupported action: {type(action).__name__}")
    return Ok(None)


def move_item(
    items: list[Item],
    source: Coordinate,
    destination: Coordinate,
) -> Result[Item, TodoError]:
    """Move an item under a new parent in one step.

    Both coordinates are read against the tree as it is before the
    move. ``destination`` is a parent location; the item becomes its
    last child. A destination inside the moved subtree (or the item
    itself) is rejected.

    Returns:
        Ok(moved item), or Err(TodoError) with the tree unchanged
    """
    slot = resolve_slot(items, source)
    if isinstance(slot, Err):
        return slot
    if destination.is_within(source):
        return Err(
            TodoError.invalid_location(destination, f"inside the item being moved ({source})")
        )
    target = resolve_children(items, destination)
    if isinstance(target, Err):
        return target

    siblings, index = slot.value
    item = siblings.pop(index)
    target.value.append(item)
    return Ok(item)
