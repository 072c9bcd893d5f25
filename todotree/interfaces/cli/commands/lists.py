"""List-level CLI commands.

Commands for creating a list, displaying it once or continuously, and
editing user configuration.
"""

from typing import Optional

import typer
from rich.console import Console

from todotree.application import Container, monitor as monitor_list
from todotree.domain.item import PrintWhich, walk
from todotree.global_config import save_global_config
from todotree.interfaces.cli.common import (
    get_state,
    load_container,
    print_detail,
    print_info,
    print_success,
    unwrap,
)


def new(ctx: typer.Context) -> None:
    """Create a new, empty list."""
    state = get_state(ctx)
    container = unwrap(Container.create(state.list_path()))
    unwrap(container.save())
    print_success(state, f"Created list {container.path}")


def show(
    ctx: typer.Context,
    print_which: PrintWhich = typer.Option(
        PrintWhich.ALL, "--print-which", "-p", help="Only show items with this status"
    ),
    status: bool = typer.Option(
        False, "--status", "-s", help="Show status counts instead of items"
    ),
    plain: Optional[bool] = typer.Option(
        None, "--plain/--fancy", help="ASCII status markers (default from config)"
    ),
    level: Optional[int] = typer.Option(
        None, "--level", "-l", min=0, help="Deepest level to show (top level is 0)"
    ),
    display_hidden: bool = typer.Option(
        False, "--display-hidden", help="Also show hidden items and their sub-items"
    ),
) -> None:
    """Show an existing list."""
    state = get_state(ctx)
    container = load_container(state)
    print_detail(state, f"List: {container.path} ({sum(1 for _ in walk(container.items))} items)")

    if status:
        typer.echo(container.status(print_which, level, display_hidden))
        return

    use_plain = state.config.plain if plain is None else plain
    text = container.render(print_which, use_plain, level, display_hidden)
    if text:
        typer.echo(text)
    else:
        print_info(state, "Nothing to show.")


def monitor(
    ctx: typer.Context,
    print_which: PrintWhich = typer.Option(
        PrintWhich.ALL, "--print-which", "-p", help="Only show items with this status"
    ),
    plain: Optional[bool] = typer.Option(
        None, "--plain/--fancy", help="ASCII status markers (default from config)"
    ),
    level: Optional[int] = typer.Option(
        None, "--level", "-l", min=0, help="Deepest level to show (top level is 0)"
    ),
    display_hidden: bool = typer.Option(
        False, "--display-hidden", help="Also show hidden items and their sub-items"
    ),
    interval: Optional[float] = typer.Option(
        None, "--interval", min=0.1, help="Seconds between checks (default from config)"
    ),
) -> None:
    """Redisplay a list whenever its file changes (Ctrl-C to stop)."""
    state = get_state(ctx)
    path = state.list_path()
    use_plain = state.config.plain if plain is None else plain
    console = Console()

    def redraw(text: str) -> None:
        console.clear()
        console.print(text, markup=False, highlight=False)

    try:
        unwrap(
            monitor_list(
                path,
                redraw,
                render=lambda c: c.render(print_which, use_plain, level, display_hidden),
                interval=interval or state.config.monitor_interval,
            )
        )
    except KeyboardInterrupt:
        print_detail(state, "Monitor stopped.")


def config(
    ctx: typer.Context,
    default_list: Optional[str] = typer.Option(
        None, "--default-list", help="List used when no --list-path/TODO_LIST is given"
    ),
    monitor_interval: Optional[float] = typer.Option(
        None, "--monitor-interval", min=0.1, help="Seconds between monitor checks"
    ),
    plain: Optional[bool] = typer.Option(
        None, "--plain/--fancy", help="Render with ASCII markers by default"
    ),
) -> None:
    """Show or update user configuration."""
    state = get_state(ctx)
    updates = {
        key: value
        for key, value in {
            "default_list": default_list,
            "monitor_interval": monitor_interval,
            "plain": plain,
        }.items()
        if value is not None
    }
    if updates:
        state.config = state.config.model_copy(update=updates)
        save_global_config(state.config)
        print_success(state, "Configuration saved.")

    for key, value in state.config.model_dump().items():
        typer.echo(f"{key}: {value}")
