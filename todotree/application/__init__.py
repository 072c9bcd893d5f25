"""Application layer for todotree.

Services that combine the pure domain with storage:

    Container - list façade (create/load/save, act/move, render/status)
    monitor - re-render a list whenever its file changes

Example usage:
    >>> from todotree.application import Container
    >>> from todotree.domain.item import Add
    >>> result = Container.create(Path("groceries.json"))
    >>> container = result.value
    >>> container.act_on_item_at([], Add(message="Milk"))
    >>> container.save()
"""

from todotree.application.container import Container
from todotree.application.monitor import DEFAULT_INTERVAL, monitor

__all__ = [
    "Container",
    "monitor",
    "DEFAULT_INTERVAL",
]
