"""Entry point for the todotree CLI.

Usage:
    python -m todotree.interfaces.cli.main

Or via installed entry point:
    todo <command>
"""

from todotree.interfaces.cli import app


def main() -> None:
    """Run the todotree CLI application."""
    app()


if __name__ == "__main__":
    main()
