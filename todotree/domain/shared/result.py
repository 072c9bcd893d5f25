"""Result type for explicit error handling in domain operations.

Operations that can fail in an expected way (an out-of-range coordinate,
a missing list file) return ``Ok(value)`` or ``Err(error)`` instead of
raising. Callers branch with ``isinstance``.

Example usage:
    >>> def first_index(items: list) -> Result[int, str]:
    ...     if not items:
    ...         return Err("List is empty")
    ...     return Ok(0)
    ...
    >>> result = first_index(["a"])
    >>> if isinstance(result, Ok):
    ...     print(result.value)
    0
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Chain operations that return Results.

    If the result is Ok, applies fn to the value and returns its Result.
    If the result is Err, returns the Err unchanged. Used to sequence
    read-then-parse steps where either may fail.

    Args:
        result: The result to chain from.
        fn: Function that takes the Ok value and returns a new Result.

    Returns:
        The Result from applying fn, or the original Err.
    """
    if isinstance(result, Ok):
        return fn(result.value)
    return result
