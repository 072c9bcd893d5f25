"""CLI interface for todotree using Typer.

This module provides the command-line interface for todotree,
a hierarchical todo-list manager.

Usage:
    todo -l groceries new               # Create a list
    todo -l groceries add -m "Milk"     # Add a top-level item
    todo -l groceries add 0 -m "2%"     # Add a sub-item under item 0
    todo -l groceries check 0 0         # Check it off
    todo -l groceries show              # Show the list

The CLI is structured as:
- app: Main Typer application; global options live on its callback
- commands/: Command functions (items, lists)
- common.py: Shared state, output helpers and exit codes
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer

from todotree import __version__
from todotree.global_config import get_global_config
from todotree.interfaces.cli.commands import items, lists
from todotree.interfaces.cli.common import CliState, configure_logging

# Create the main Typer application
app = typer.Typer(
    name="todo",
    help="A hierarchical todo-list manager",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"todo version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    list_path: Optional[str] = typer.Option(
        None,
        "--list-path",
        "-l",
        help="Path to the list, without extension (or set TODO_LIST env var)",
        envvar="TODO_LIST",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Silence all messages (overrides --verbose)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print verbose messages"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """todo - a hierarchical todo-list manager.

    Items are addressed by zero-based coordinates read outer-to-inner,
    as printed by 'todo show'.
    """
    configure_logging(verbose and not quiet)
    ctx.obj = CliState(
        list_name=list_path,
        quiet=quiet,
        verbose=verbose,
        config=get_global_config(),
    )


# =============================================================================
# Register Commands
# =============================================================================

app.command("new")(lists.new)
app.command("show")(lists.show)
app.command("monitor")(lists.monitor)
app.command("config")(lists.config)

app.command("add")(items.add)
app.command("check")(items.check)
app.command("uncheck")(items.uncheck)
app.command("disable")(items.disable)
app.command("edit")(items.edit)
app.command("hide")(items.hide)
app.command("unhide")(items.unhide)
app.command("remove")(items.remove)
app.command("move")(items.move)


__all__ = ["app"]
