"""Domain value objects for todotree.

Immutable value objects representing core domain concepts.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """Immutable positional address inside an item tree.

    Holds zero-based sibling indices read outer-to-inner: ``(1, 0)`` is
    the first child of the second top-level item. The empty coordinate
    denotes the top-level item list itself.

    Example:
        coord = Coordinate((1, 0))
        parent = coord.parent()  # 1
        child = coord.child(3)  # 1.0.3
    """

    indices: tuple[int, ...] = ()

    @classmethod
    def from_list(cls, indices: list[int] | None) -> "Coordinate":
        """Create a Coordinate from a list of indices (None means top level)."""
        return cls(indices=tuple(indices or ()))

    def __str__(self) -> str:
        """Return the coordinate as a dot-separated string."""
        if not self.indices:
            return "<top>"
        return ".".join(str(i) for i in self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __bool__(self) -> bool:
        """Return True if the coordinate addresses an item (not the top level)."""
        return len(self.indices) > 0

    def parent(self) -> "Coordinate":
        """Return the coordinate without its last index.

        Returns:
            Coordinate of the enclosing item, or the empty coordinate
            if already at top level
        """
        return Coordinate(indices=self.indices[:-1])

    def child(self, index: int) -> "Coordinate":
        """Return a new Coordinate with an appended index."""
        return Coordinate(indices=self.indices + (index,))

    @property
    def index(self) -> int | None:
        """The last index (position among siblings), or None at top level."""
        if not self.indices:
            return None
        return self.indices[-1]

    def is_within(self, other: "Coordinate") -> bool:
        """Check whether this coordinate equals or lies below ``other``.

        Example:
            Coordinate((1, 0, 2)).is_within(Coordinate((1, 0)))  # True
            Coordinate((1,)).is_within(Coordinate((1, 0)))  # False
        """
        return self.indices[: len(other.indices)] == other.indices
