"""Item mutation CLI commands.

Each command loads the list, applies one action at a coordinate and
saves the list back. Coordinates are zero-based sibling indices given
outer-to-inner, exactly as shown by ``todo show``: ``todo check 1 0``
checks the first child of the second top-level item.
"""

from typing import Optional

import typer

from todotree.domain.item import (
    Add,
    AlterHidden,
    AlterStatus,
    Edit,
    ItemAction,
    ItemStatus,
    ItemType,
    Remove,
    resolve_children,
)
from todotree.domain.types import Coordinate
from todotree.interfaces.cli.common import (
    get_state,
    load_container,
    print_detail,
    print_success,
    unwrap,
)

LOCATION_HELP = "Item coordinate, outer-to-inner (e.g. 1 0)"
PARENT_HELP = "Parent coordinate, outer-to-inner; omit for top level"


def _apply(ctx: typer.Context, location: list[int], action: ItemAction, verb: str) -> None:
    """Load, act at ``location``, save, and report."""
    state = get_state(ctx)
    container = load_container(state)
    coordinate = Coordinate.from_list(location)
    unwrap(container.act_on_item_at(coordinate, action))
    unwrap(container.save())
    print_success(state, f"{verb} item {coordinate}")
    print_detail(state, f"List: {container.path}")


# =============================================================================
# Commands
# =============================================================================


def add(
    ctx: typer.Context,
    location: Optional[list[int]] = typer.Argument(None, help=PARENT_HELP),
    message: str = typer.Option(..., "--item-message", "-m", help="Item text"),
    item_type: ItemType = typer.Option(ItemType.TODO, "--item-type", "-t", help="Item type"),
) -> None:
    """Add a new list-item as the last child of a location."""
    state = get_state(ctx)
    container = load_container(state)
    parent = Coordinate.from_list(location)
    unwrap(container.act_on_item_at(parent, Add(item_type=item_type, message=message)))
    unwrap(container.save())

    siblings = unwrap(resolve_children(container.items, parent))
    print_success(state, f"Added item {parent.child(len(siblings) - 1)}")
    print_detail(state, f"List: {container.path}")


def check(
    ctx: typer.Context,
    location: list[int] = typer.Argument(..., help=LOCATION_HELP),
) -> None:
    """Check-off an existing list-item."""
    _apply(ctx, location, AlterStatus(status=ItemStatus.COMPLETE), "Checked")


def uncheck(
    ctx: typer.Context,
    location: list[int] = typer.Argument(..., help=LOCATION_HELP),
) -> None:
    """Uncheck an existing list-item (also re-enables a disabled one)."""
    _apply(ctx, location, AlterStatus(status=ItemStatus.INCOMPLETE), "Unchecked")


def disable(
    ctx: typer.Context,
    location: list[int] = typer.Argument(..., help=LOCATION_HELP),
) -> None:
    """Disable an existing list-item."""
    _apply(ctx, location, AlterStatus(status=ItemStatus.DISABLED), "Disabled")


def edit(
    ctx: typer.Context,
    location: list[int] = typer.Argument(..., help=LOCATION_HELP),
    message: str = typer.Option(..., "--item-message", "-m", help="New item text"),
) -> None:
    """Edit the item-text of an existing list-item."""
    _apply(ctx, location, Edit(message=message), "Edited")


def hide(
    ctx: typer.Context,
    location: list[int] = typer.Argument(..., help=LOCATION_HELP),
) -> None:
    """Hide a list-item and everything below it."""
    _apply(ctx, location, AlterHidden(hidden=True), "Hid")


def unhide(
    ctx: typer.Context,
    location: list[int] = typer.Argument(..., help=LOCATION_HELP),
) -> None:
    """Unhide a list-item."""
    _apply(ctx, location, AlterHidden(hidden=False), "Unhid")


def remove(
    ctx: typer.Context,
    location: list[int] = typer.Argument(..., help=LOCATION_HELP),
) -> None:
    """Remove an existing list-item (with its sub-items)."""
    state = get_state(ctx)
    container = load_container(state)
    coordinate = Coordinate.from_list(location)
    removed = unwrap(container.act_on_item_at(coordinate, Remove()))
    unwrap(container.save())
    print_success(state, f"Removed item {coordinate}: {removed.message}")


def move(
    ctx: typer.Context,
    location: list[int] = typer.Argument(..., help=LOCATION_HELP),
    output_location: Optional[list[int]] = typer.Option(
        None,
        "--output-location",
        "-o",
        help="New parent coordinate; repeat per index (-o 2 -o 0); omit for top level",
    ),
) -> None:
    """Move an existing list-item under a new parent.

    Both coordinates refer to the list as shown before the move. The
    item becomes the last child of the new parent.
    """
    state = get_state(ctx)
    container = load_container(state)
    source = Coordinate.from_list(location)
    destination = Coordinate.from_list(output_location)
    moved = unwrap(container.move(source, destination))
    unwrap(container.save())
    print_success(state, f"Moved item {source} under {destination}")
    print_detail(state, f"Item: {moved.message}")
