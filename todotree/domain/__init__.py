"""Domain layer for todotree: pure models and tree operations."""
