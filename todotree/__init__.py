"""todotree - a hierarchical todo-list manager.

Lists are persisted trees of items addressed by positional coordinates,
mutated by single-shot CLI actions and rendered as indented text.
"""

__version__ = "0.3.0"
