"""JSON file storage with Result-based error handling.

Provides a thin wrapper around file I/O operations for JSON data,
returning Result types instead of raising exceptions.
"""

import hashlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from todotree.domain.shared import Err, Ok, Result, TodoError

logger = logging.getLogger(__name__)


class JsonStorage:
    """Low-level JSON file I/O with Result-based error handling.

    This class wraps basic JSON operations (load/save) and returns
    Result types for explicit error handling. It does not contain
    any domain logic - just file I/O.

    Example:
        storage = JsonStorage()
        result = storage.load_json(Path("groceries.json"))
        if isinstance(result, Ok):
            data = result.value
        else:
            print(f"Error: {result.error}")
    """

    def read_bytes(self, path: Path) -> Result[bytes, TodoError]:
        """Read the raw contents of a file.

        Returns:
            Ok(bytes), Err(NOT_FOUND) if the file is missing, or
            Err(IO_ERROR) if it cannot be read.
        """
        try:
            return Ok(path.read_bytes())
        except FileNotFoundError:
            return Err(TodoError.not_found(path))
        except PermissionError:
            return Err(TodoError.io_error(f"Permission denied reading {path}"))
        except OSError as e:
            return Err(TodoError.io_error(f"Error reading {path}: {e}"))

    def load_json(self, path: Path) -> Result[Any, TodoError]:
        """Load JSON data from a file.

        Args:
            path: Path to the JSON file to read.

        Returns:
            Ok(data) if successful, Err(TodoError) if the file is missing,
            unreadable, or not valid JSON.
        """
        raw = self.read_bytes(path)
        if isinstance(raw, Err):
            return raw

        try:
            return Ok(json.loads(raw.value.decode("utf-8")))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(TodoError.parse_error(path, e))

    def save_json(
        self,
        path: Path,
        data: dict[str, Any],
        indent: int = 2,
    ) -> Result[None, TodoError]:
        """Save JSON data to a file, replacing it as a whole.

        The document is written to a temporary sibling first and then
        moved over the target, so readers never see a partial file.

        Args:
            path: Path to the JSON file to write.
            data: Dictionary to serialize as JSON.
            indent: JSON indentation level (default 2).

        Returns:
            Ok(None) if successful, Err(TodoError) if failed.
        """
        temp_path = path.with_name(f"{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            content = json.dumps(data, indent=indent, ensure_ascii=False)
            # Encode up front so unencodable text fails before any file exists
            encoded = (content + "\n").encode("utf-8")
            temp_path.write_bytes(encoded)
            os.replace(temp_path, path)
            logger.debug(f"Wrote {len(encoded)} bytes to {path}")
            return Ok(None)

        except TypeError as e:
            return Err(TodoError.io_error(f"Data not JSON serializable: {e}"))
        except UnicodeEncodeError as e:
            return Err(TodoError.io_error(f"Data not encodable as UTF-8: {e}"))
        except PermissionError:
            self._discard(temp_path)
            return Err(TodoError.io_error(f"Permission denied writing {path}"))
        except OSError as e:
            self._discard(temp_path)
            return Err(TodoError.io_error(f"Error writing {path}: {e}"))

    def _discard(self, temp_path: Path) -> None:
        """Remove a leftover temporary file after a failed save."""
        try:
            temp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove {temp_path}: {e}")

    def digest(self, path: Path) -> Result[str, TodoError]:
        """Return the md5 hex digest of a file's raw bytes."""
        raw = self.read_bytes(path)
        if isinstance(raw, Err):
            return raw
        return Ok(hashlib.md5(raw.value).hexdigest())
