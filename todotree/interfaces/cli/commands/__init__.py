"""CLI commands for todotree.

Command modules provide plain functions that are registered on the
main Typer app in ``todotree.interfaces.cli``.

Command modules:
- items: Item mutations (add, check, uncheck, disable, edit, hide,
  unhide, remove, move)
- lists: List-level commands (new, show, monitor, config)
"""

from todotree.interfaces.cli.commands import items, lists

__all__ = ["items", "lists"]
