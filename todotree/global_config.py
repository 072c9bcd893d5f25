"""Global configuration storage for todotree.

Stores user preferences in ~/.todotree/config.json (the directory can
be moved with the TODOTREE_HOME environment variable).
"""

import json
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

LIST_EXTENSION = ".json"


class TodoConfig(BaseModel):
    """User preferences.

    Attributes:
        default_list: List path used when neither --list-path nor
            TODO_LIST is given.
        monitor_interval: Seconds between monitor checks.
        plain: Render without glyphs by default.
    """

    default_list: Optional[str] = None
    monitor_interval: float = 1.0
    plain: bool = False


def get_config_dir() -> Path:
    """Get the todotree config directory."""
    override = os.environ.get("TODOTREE_HOME")
    config_dir = Path(override) if override else Path.home() / ".todotree"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_global_config() -> TodoConfig:
    """Load global configuration, falling back to defaults."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return TodoConfig(**data)
        except (json.JSONDecodeError, ValidationError, TypeError):
            pass
    return TodoConfig()  # defaults


def save_global_config(config: TodoConfig) -> None:
    """Save global configuration."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(config.model_dump(), indent=2),
        encoding="utf-8",
    )


def resolve_list_path(list_path: str) -> Path:
    """Turn a user-supplied list name into the file path it refers to.

    ``.json`` is appended unless the name already carries it:
    ``groceries`` -> ``groceries.json``, ``notes.txt`` -> ``notes.txt.json``.
    """
    if list_path.endswith(LIST_EXTENSION):
        return Path(list_path)
    return Path(f"{list_path}{LIST_EXTENSION}")
