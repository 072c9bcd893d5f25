"""Infrastructure layer for todotree.

This module provides the I/O side of the application, wrapping file
access with Result types for explicit error handling.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O (atomic replace, digest)
        - ListRepository: Item list persistence
"""

from todotree.infrastructure.storage import JsonStorage, ListRepository

__all__ = [
    # Storage
    "JsonStorage",
    "ListRepository",
]
