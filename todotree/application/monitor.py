"""Polling monitor for a list file.

Re-renders a list whenever the file's content hash changes, checking
on a fixed cadence. There is no locking; a read racing an external
write may see a torn file, which surfaces as a parse error.
"""

import logging
import time
from collections.abc import Callable
from pathlib import Path

from todotree.application.container import Container
from todotree.domain.shared import Err, Ok, Result, TodoError
from todotree.infrastructure.storage import ListRepository

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1.0


def monitor(
    path: Path,
    on_change: Callable[[str], None],
    render: Callable[[Container], str] | None = None,
    interval: float = DEFAULT_INTERVAL,
    repository: ListRepository | None = None,
    max_ticks: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> Result[None, TodoError]:
    """Watch ``path`` and report a fresh rendering after each change.

    Each tick hashes the raw file bytes; if the digest differs from the
    previous tick the list is loaded, rendered and handed to
    ``on_change``. The tick then sleeps out the rest of ``interval``.

    Args:
        path: List file to watch.
        on_change: Receives the rendered text after every change
            (including the first tick).
        render: Turns a loaded Container into text. Defaults to
            ``Container.render`` with default options.
        interval: Seconds per tick.
        repository: Repository to read through.
        max_ticks: Stop after this many ticks; None runs until the
            process is terminated.
        sleep: Sleep function (injectable for tests).
        clock: Monotonic clock (injectable for tests).

    Returns:
        Ok(None) after ``max_ticks`` ticks, or the first Err raised by
        reading or parsing the file.
    """
    repository = repository or ListRepository()
    render = render or Container.render
    last_digest: str | None = None
    ticks = 0

    while max_ticks is None or ticks < max_ticks:
        start = clock()
        ticks += 1

        digest = repository.digest(path)
        if isinstance(digest, Err):
            return digest

        if digest.value != last_digest:
            loaded = Container.load(path, repository)
            if isinstance(loaded, Err):
                return loaded
            logger.debug(f"{path} changed (md5 {digest.value})")
            last_digest = digest.value
            on_change(render(loaded.value))

        elapsed = clock() - start
        if elapsed < interval:
            sleep(interval - elapsed)

    return Ok(None)
