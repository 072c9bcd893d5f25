"""Storage infrastructure for todotree.

Provides the persistence layer for item lists, using Result types
for explicit error handling.
"""

from todotree.infrastructure.storage.json_storage import JsonStorage
from todotree.infrastructure.storage.repositories import ListRepository

__all__ = [
    "JsonStorage",
    "ListRepository",
]
