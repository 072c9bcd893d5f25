"""Text rendering of an item tree.

Rendering is read-only: it walks the tree with ``walk_visible`` and
produces text, never touching the items themselves.
"""

from pydantic import BaseModel

from .models import Item, ItemStatus, PrintWhich
from .traversal import ItemWithCoordinate, count_by_status, walk_visible

INDENT = "  "
STRIKE = "\u0336"

DECORATED_GLYPHS: dict[ItemStatus, str] = {
    ItemStatus.INCOMPLETE: "☐",
    ItemStatus.COMPLETE: "☑",
    ItemStatus.DISABLED: "☒",
}

PLAIN_GLYPHS: dict[ItemStatus, str] = {
    ItemStatus.INCOMPLETE: "[ ]",
    ItemStatus.COMPLETE: "[x]",
    ItemStatus.DISABLED: "[-]",
}


class StatusSummary(BaseModel):
    """Counts of rendered items by status."""

    complete: int = 0
    incomplete: int = 0
    disabled: int = 0

    @property
    def total(self) -> int:
        return self.complete + self.incomplete + self.disabled

    def __str__(self) -> str:
        return (
            f"Complete: {self.complete} | Incomplete: {self.incomplete} | "
            f"Disabled: {self.disabled} | Total: {self.total}"
        )


def strike_through(text: str) -> str:
    """Overlay a combining long stroke on every character."""
    return "".join(f"{char}{STRIKE}" for char in text)


def format_line(visit: ItemWithCoordinate, plain: bool = False) -> str:
    """Format one visited item as an indented line.

    Decorated:  ``  1. ☑ Buy milk``
    Plain:      ``  1. [x] Buy milk``
    """
    item = visit.item
    prefix = INDENT * visit.depth
    if plain:
        glyph = PLAIN_GLYPHS[item.status]
        message = item.message
    else:
        glyph = DECORATED_GLYPHS[item.status]
        message = item.message
        if item.status == ItemStatus.DISABLED:
            message = strike_through(message)

    line = f"{prefix}{visit.coordinate.index}. {glyph} {message}"
    if item.hidden:
        line += " (hidden)"
    return line


def render(
    items: list[Item],
    which: PrintWhich = PrintWhich.ALL,
    plain: bool = False,
    depth_limit: int | None = None,
    show_hidden: bool = False,
) -> str:
    """Render the tree as indented text, one item per line.

    Args:
        items: Top-level items of the tree
        which: Status filter; items failing it are skipped but their
            children are still rendered
        plain: Use ASCII status markers instead of glyphs
        depth_limit: Deepest level to render (top level is 0)
        show_hidden: Render hidden items and their subtrees

    Returns:
        Rendered text without a trailing newline (empty if nothing shows)
    """
    visits = walk_visible(items, which, depth_limit, show_hidden)
    return "\n".join(format_line(visit, plain) for visit in visits)


def summarize(
    items: list[Item],
    which: PrintWhich = PrintWhich.ALL,
    depth_limit: int | None = None,
    show_hidden: bool = False,
) -> StatusSummary:
    """Count the items ``render`` would show with the same arguments."""
    counts = count_by_status(walk_visible(items, which, depth_limit, show_hidden))
    return StatusSummary(
        complete=counts[ItemStatus.COMPLETE],
        incomplete=counts[ItemStatus.INCOMPLETE],
        disabled=counts[ItemStatus.DISABLED],
    )
