"""Repository for persisted item lists.

Wraps JsonStorage with conversion to and from the ItemList model.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from todotree.domain.item import ItemList
from todotree.domain.shared import Err, Ok, Result, TodoError, flat_map
from todotree.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)


class ListRepository:
    """Repository for item list persistence.

    Each list lives in its own JSON file; the path is supplied by the
    caller on every operation.
    """

    def __init__(self, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self._storage = storage or JsonStorage()

    def load(self, path: Path) -> Result[ItemList, TodoError]:
        """Load an item list.

        Args:
            path: Location of the list file.

        Returns:
            Ok(ItemList) if successful, Err(TodoError) with NOT_FOUND,
            PARSE_ERROR or IO_ERROR otherwise.
        """

        def parse(data: object) -> Result[ItemList, TodoError]:
            try:
                return Ok(ItemList.model_validate(data))
            except ValidationError as e:
                return Err(TodoError.parse_error(path, e))

        result = flat_map(self._storage.load_json(path), parse)
        if isinstance(result, Ok):
            logger.debug(f"Loaded {len(result.value.items)} top-level items from {path}")
        return result

    def save(self, path: Path, item_list: ItemList) -> Result[None, TodoError]:
        """Write the whole item list to ``path``."""
        return self._storage.save_json(path, item_list.model_dump(mode="json"))

    def exists(self, path: Path) -> bool:
        """Check if a list file exists at ``path``."""
        return path.exists()

    def digest(self, path: Path) -> Result[str, TodoError]:
        """Return the content hash of the list file."""
        return self._storage.digest(path)
