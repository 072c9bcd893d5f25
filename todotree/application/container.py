"""Container - the root aggregate of a todo list.

Owns the top-level items and the backing path, and is the single
façade the CLI talks to: create/load/save for persistence,
act_on_item_at/move for mutation, render/status for display.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from todotree.domain.item import (
    Item,
    ItemAction,
    ItemList,
    PrintWhich,
    StatusSummary,
    act_on_item_at,
    move_item,
    render,
    summarize,
)
from todotree.domain.shared import Err, Ok, Result, TodoError
from todotree.domain.types import Coordinate
from todotree.infrastructure.storage import ListRepository

logger = logging.getLogger(__name__)


def _as_coordinate(coordinate: Coordinate | Sequence[int]) -> Coordinate:
    if isinstance(coordinate, Coordinate):
        return coordinate
    return Coordinate.from_list(list(coordinate))


class Container:
    """A todo list bound to its file.

    The tree is held in memory and mutated in place; nothing reaches
    disk until ``save`` rewrites the whole document.

    Example:
        result = Container.load(Path("groceries.json"))
        if isinstance(result, Ok):
            container = result.value
            container.act_on_item_at([0], AlterStatus(status=ItemStatus.COMPLETE))
            container.save()
    """

    def __init__(
        self,
        path: Path,
        items: list[Item] | None = None,
        repository: ListRepository | None = None,
    ) -> None:
        self.path = path
        self.items: list[Item] = items if items is not None else []
        self._repository = repository or ListRepository()

    @classmethod
    def create(
        cls, path: Path, repository: ListRepository | None = None
    ) -> Result["Container", TodoError]:
        """Create an empty list for ``path``.

        The file is not written until ``save`` is called.

        Returns:
            Ok(Container), or Err(ALREADY_EXISTS) if the file is present
        """
        repository = repository or ListRepository()
        if repository.exists(path):
            return Err(TodoError.already_exists(path))
        return Ok(cls(path, repository=repository))

    @classmethod
    def load(
        cls, path: Path, repository: ListRepository | None = None
    ) -> Result["Container", TodoError]:
        """Load the list stored at ``path``.

        Returns:
            Ok(Container), or Err(TodoError) with NOT_FOUND, PARSE_ERROR
            or IO_ERROR
        """
        repository = repository or ListRepository()
        result = repository.load(path)
        if isinstance(result, Err):
            return result
        return Ok(cls(path, items=result.value.items, repository=repository))

    def save(self) -> Result[None, TodoError]:
        """Write the whole list back to its file."""
        logger.debug(f"Saving {len(self.items)} top-level items to {self.path}")
        return self._repository.save(self.path, self.to_item_list())

    def to_item_list(self) -> ItemList:
        return ItemList(items=self.items)

    def act_on_item_at(
        self,
        coordinate: Coordinate | Sequence[int],
        action: ItemAction,
    ) -> Result[Item | None, TodoError]:
        """Apply one action at a coordinate.

        Returns:
            Ok(removed item) for Remove, Ok(None) otherwise, or
            Err(INVALID_LOCATION) with the list unchanged
        """
        coordinate = _as_coordinate(coordinate)
        result = act_on_item_at(self.items, coordinate, action)
        if isinstance(result, Err):
            logger.info(f"{type(action).__name__} rejected: {result.error}")
        else:
            logger.info(f"{type(action).__name__} applied at {coordinate}")
        return result

    def move(
        self,
        source: Coordinate | Sequence[int],
        destination: Coordinate | Sequence[int],
    ) -> Result[Item, TodoError]:
        """Move the item at ``source`` to be the last child of ``destination``."""
        source = _as_coordinate(source)
        destination = _as_coordinate(destination)
        result = move_item(self.items, source, destination)
        if isinstance(result, Ok):
            logger.info(f"Moved {source} under {destination}")
        return result

    def render(
        self,
        which: PrintWhich = PrintWhich.ALL,
        plain: bool = False,
        depth_limit: int | None = None,
        show_hidden: bool = False,
    ) -> str:
        """Render the list as indented text."""
        return render(self.items, which, plain, depth_limit, show_hidden)

    def summary(
        self,
        which: PrintWhich = PrintWhich.ALL,
        depth_limit: int | None = None,
        show_hidden: bool = False,
    ) -> StatusSummary:
        """Count the items ``render`` would show, by status."""
        return summarize(self.items, which, depth_limit, show_hidden)

    def status(
        self,
        which: PrintWhich = PrintWhich.ALL,
        depth_limit: int | None = None,
        show_hidden: bool = False,
    ) -> str:
        """Return the one-line status summary."""
        return str(self.summary(which, depth_limit, show_hidden))
