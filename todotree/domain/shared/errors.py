"""Error taxonomy shared by the domain and storage layers.

Every expected failure is carried as a ``TodoError`` inside an ``Err``.
The CLI maps ``ErrorKind`` to a process exit code.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed operation."""

    INVALID_LOCATION = "invalid-location"
    NOT_FOUND = "not-found"
    ALREADY_EXISTS = "already-exists"
    PARSE_ERROR = "parse-error"
    IO_ERROR = "io-error"


@dataclass(frozen=True)
class TodoError:
    """A reported failure.

    Attributes:
        kind: Category used for exit-code mapping.
        message: Human-readable description.
    """

    kind: ErrorKind
    message: str

    @classmethod
    def invalid_location(cls, coordinate: object, detail: str = "") -> "TodoError":
        msg = f"Invalid location: {coordinate}"
        if detail:
            msg = f"{msg} ({detail})"
        return cls(ErrorKind.INVALID_LOCATION, msg)

    @classmethod
    def not_found(cls, path: object) -> "TodoError":
        return cls(ErrorKind.NOT_FOUND, f"List not found: {path}")

    @classmethod
    def already_exists(cls, path: object) -> "TodoError":
        return cls(ErrorKind.ALREADY_EXISTS, f"List already exists: {path}")

    @classmethod
    def parse_error(cls, path: object, detail: object) -> "TodoError":
        return cls(ErrorKind.PARSE_ERROR, f"Invalid list data in {path}: {detail}")

    @classmethod
    def io_error(cls, detail: str) -> "TodoError":
        return cls(ErrorKind.IO_ERROR, detail)

    def __str__(self) -> str:
        return self.message
