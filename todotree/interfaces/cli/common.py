"""Shared utilities for todotree CLI commands.

This module provides common utilities used across CLI commands:
- Per-invocation state (list path, verbosity) threaded via typer.Context
- Formatted output helpers (error, success, info, detail)
- Mapping of TodoError kinds to process exit codes
- Logging setup
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

import typer

from todotree.application import Container
from todotree.domain.shared import Err, ErrorKind, Result, TodoError
from todotree.global_config import TodoConfig, resolve_list_path

T = TypeVar("T")

logger = logging.getLogger(__name__)

EXIT_NO_LIST = 2

EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.ALREADY_EXISTS: 3,
    ErrorKind.NOT_FOUND: 4,
    ErrorKind.PARSE_ERROR: 5,
    ErrorKind.IO_ERROR: 6,
    ErrorKind.INVALID_LOCATION: 7,
}

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass
class CliState:
    """Options given before the subcommand, shared by every command.

    Attributes:
        list_name: Raw --list-path / TODO_LIST value, if any.
        quiet: Suppress all non-error messages.
        verbose: Print extra detail lines.
        config: Loaded user configuration.
    """

    list_name: str | None = None
    quiet: bool = False
    verbose: bool = False
    config: TodoConfig = field(default_factory=TodoConfig)

    def list_path(self) -> Path:
        """Resolve the list file path.

        Resolution order:
        1. --list-path option (or TODO_LIST env var, via typer)
        2. default_list from the user config

        Raises:
            typer.Exit: If no list can be determined.
        """
        name = self.list_name or self.config.default_list
        if not name:
            print_error("No list specified.")
            typer.echo("", err=True)
            typer.echo("Specify a list using one of:", err=True)
            typer.echo("  1. Use -l/--list-path option: todo -l groceries show", err=True)
            typer.echo("  2. Set TODO_LIST env var: export TODO_LIST=groceries", err=True)
            typer.echo("  3. Set a default: todo config --default-list groceries", err=True)
            raise typer.Exit(EXIT_NO_LIST)
        return resolve_list_path(name)


def get_state(ctx: typer.Context) -> CliState:
    """Return the CliState stored by the app callback."""
    if isinstance(ctx.obj, CliState):
        return ctx.obj
    return CliState()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(state: CliState, msg: str) -> None:
    """Print a success message unless --quiet is set."""
    if not state.quiet:
        typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(state: CliState, msg: str) -> None:
    """Print an info message unless --quiet is set."""
    if not state.quiet:
        typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_detail(state: CliState, msg: str) -> None:
    """Print a detail line only under --verbose (and never with --quiet)."""
    if state.verbose and not state.quiet:
        typer.echo(msg)


def exit_with(error: TodoError) -> None:
    """Report an error and exit with its mapped code.

    Raises:
        typer.Exit: Always.
    """
    code = EXIT_CODES[error.kind]
    logger.debug(f"Exiting with code {code} ({error.kind.value})")
    print_error(error.message)
    raise typer.Exit(code)


def unwrap(result: Result[T, TodoError]) -> T:
    """Return the Ok value of a result, or exit on Err."""
    if isinstance(result, Err):
        exit_with(result.error)
    return result.value


def load_container(state: CliState) -> Container:
    """Load the list selected by the global options, or exit."""
    return unwrap(Container.load(state.list_path()))


__all__ = [
    "CliState",
    "EXIT_CODES",
    "EXIT_NO_LIST",
    "configure_logging",
    "exit_with",
    "get_state",
    "load_container",
    "print_detail",
    "print_error",
    "print_info",
    "print_success",
    "unwrap",
]
