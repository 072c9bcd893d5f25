"""Item domain models.

Pure domain models for the item tree. Uses Pydantic for
serialization to and from the persisted list document.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ItemType(str, Enum):
    """Kind of list-item.

    New kinds are added here; resolution and actions never inspect it.
    """

    TODO = "todo"


class ItemStatus(str, Enum):
    """Status of an item.

    Any status can be set from any other; ``incomplete`` is the
    initial status of a newly added item.
    """

    INCOMPLETE = "incomplete"
    COMPLETE = "complete"
    DISABLED = "disabled"


class PrintWhich(str, Enum):
    """Status filter applied per item when rendering."""

    ALL = "all"
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    DISABLED = "disabled"

    def matches(self, status: ItemStatus) -> bool:
        if self is PrintWhich.ALL:
            return True
        return self.value == status.value


class Item(BaseModel):
    """A node in the item tree.

    Children are owned exclusively by their parent; their order is
    both the display order and the addressing order. ``hidden`` and
    ``status`` are independent of each other.
    """

    item_type: ItemType = ItemType.TODO
    message: str
    status: ItemStatus = ItemStatus.INCOMPLETE
    hidden: bool = False
    children: list["Item"] = Field(default_factory=list)


class ItemList(BaseModel):
    """The root of an item tree.

    The root is not an item itself; it only holds the top-level
    items. This is the shape written to and read from disk.
    """

    items: list[Item] = Field(default_factory=list)
