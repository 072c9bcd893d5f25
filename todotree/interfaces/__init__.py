"""Interface layer for todotree (the Typer CLI)."""
