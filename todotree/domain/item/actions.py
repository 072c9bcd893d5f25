"""Mutation intents applied at a coordinate.

Each action is an immutable value; the engine decides how the
coordinate is interpreted (an exact item, or a parent location).
"""

from pydantic import BaseModel

from .models import Item, ItemStatus, ItemType


class ItemAction(BaseModel):
    """Base class for all actions."""

    model_config = {"frozen": True}


class Add(ItemAction):
    """Append a new item under the parent location."""

    item_type: ItemType = ItemType.TODO
    message: str


class Remove(ItemAction):
    """Detach the addressed item and return it."""


class Put(ItemAction):
    """Append an existing item under the parent location."""

    item: Item


class AlterStatus(ItemAction):
    """Set the status of the addressed item."""

    status: ItemStatus


class AlterHidden(ItemAction):
    """Set the hidden flag of the addressed item."""

    hidden: bool


class Edit(ItemAction):
    """Replace the message of the addressed item."""

    message: str
