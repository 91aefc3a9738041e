"""Polling file watcher used by ``ormond --watch``."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path


logger = logging.getLogger(__name__)

Snapshot = dict[Path, int]


def snapshot(roots: Sequence[Path | str], exclude_dirs: Sequence[str] = ()) -> Snapshot:
    """Map every file under ``roots`` to its modification time in ns."""
    result: Snapshot = {}
    pending = [Path(root) for root in roots]
    while pending:
        path = pending.pop()
        try:
            if path.is_dir():
                if path.name in exclude_dirs:
                    continue
                pending.extend(path.iterdir())
            elif path.is_file():
                result[path.resolve()] = path.stat().st_mtime_ns
        except OSError:
            # Deleted between listing and stat.
            continue
    return result


def changed_paths(before: Snapshot, after: Snapshot) -> list[Path]:
    """Paths added, removed or modified between two snapshots."""
    keys = before.keys() | after.keys()
    return sorted(path for path in keys if before.get(path) != after.get(path))


async def watch(
    roots: Sequence[Path | str],
    on_change: Callable[[Path], Awaitable[None]],
    *,
    exclude_dirs: Sequence[str] = (),
    interval: float = 0.5,
    max_events: int | None = None,
) -> None:
    """Poll ``roots`` and await ``on_change`` once per detected change batch.

    Runs until cancelled, or until ``max_events`` batches have been handled.
    """
    previous = snapshot(roots, exclude_dirs)
    handled = 0
    while max_events is None or handled < max_events:
        await asyncio.sleep(interval)
        current = snapshot(roots, exclude_dirs)
        changes = changed_paths(previous, current)
        if not changes:
            continue
        logger.debug("Detected %d changed file(s)", len(changes))
        await on_change(changes[0])
        handled += 1
        # Changes made while the run was in progress count as the next batch.
        previous = current


__all__ = ["Snapshot", "changed_paths", "snapshot", "watch"]
