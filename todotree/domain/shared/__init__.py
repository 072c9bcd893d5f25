"""Shared domain utilities.

This package provides the building blocks used across the domain and
storage layers:

- Result type for explicit error handling
- TodoError / ErrorKind failure taxonomy

Example usage:
    >>> from todotree.domain.shared import Err, Ok, TodoError
    >>> Err(TodoError.not_found("groceries.json"))
"""

from todotree.domain.shared.errors import ErrorKind, TodoError
from todotree.domain.shared.result import (
    Err,
    Ok,
    Result,
    flat_map,
)

__all__ = [
    # Result
    "Ok",
    "Err",
    "Result",
    "flat_map",
    # Errors
    "ErrorKind",
    "TodoError",
]
