"""Item domain - the item tree and its coordinate-addressed mutations.

All exports are pure (no I/O, no side effects).

Key Types:
    ItemType - Kind of list-item
    ItemStatus - incomplete / complete / disabled
    Item - Tree node
    ItemList - Root of a tree (the persisted document)
    PrintWhich - Per-item status filter for rendering

Actions:
    Add, Remove, Put, AlterStatus, AlterHidden, Edit

Engine:
    act_on_item_at - Apply one action at a coordinate
    move_item - Detach and re-home an item in one step

Resolution:
    resolve_item - Coordinate -> exact item
    resolve_children - Coordinate -> child list for insertion
    resolve_slot - Coordinate -> (siblings, index)

Rendering:
    render - Tree -> indented text
    summarize - Tree -> StatusSummary
"""

from .actions import Add, AlterHidden, AlterStatus, Edit, ItemAction, Put, Remove
from .engine import act_on_item_at, move_item
from .models import Item, ItemList, ItemStatus, ItemType, PrintWhich
from .rendering import StatusSummary, render, summarize
from .resolver import resolve_children, resolve_item, resolve_slot
from .traversal import (
    ItemWithCoordinate,
    count_by_status,
    fold_items,
    walk,
    walk_visible,
)

__all__ = [
    # Models
    "ItemType",
    "ItemStatus",
    "Item",
    "ItemList",
    "PrintWhich",
    # Actions
    "ItemAction",
    "Add",
    "Remove",
    "Put",
    "AlterStatus",
    "AlterHidden",
    "Edit",
    # Engine
    "act_on_item_at",
    "move_item",
    # Resolution
    "resolve_item",
    "resolve_children",
    "resolve_slot",
    # Traversal
    "ItemWithCoordinate",
    "walk",
    "walk_visible",
    "fold_items",
    "count_by_status",
    # Rendering
    "StatusSummary",
    "render",
    "summarize",
]
