"""Run coordinator: load and execute test files one after another."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path

from ormond.errors import OrmondError
from ormond.reports import ConsoleReporter, Reporter
from ormond.testing.loader import load_and_collect
from ormond.testing.runner import Runner, RunStatistics


logger = logging.getLogger(__name__)


async def orchestrate(
    paths: Sequence[Path | str],
    reporters: Sequence[Reporter] | None = None,
) -> RunStatistics:
    """Load and run each file in order and return the aggregated statistics.

    Files never overlap: each one is fully loaded, settled and executed before
    the next is loaded. A file that fails to load is still listed in
    ``stats.files`` and contributes no tests. Errors raised by test files never
    escape this function.
    """
    stats = RunStatistics()
    active: list[Reporter] = list(reporters) if reporters is not None else [ConsoleReporter()]
    runner = Runner(active)

    if not paths:
        for reporter in active:
            await reporter.on_no_tests_found()

    for file in paths:
        path = Path(file)
        for reporter in active:
            await reporter.on_file_start(path)

        try:
            model = await load_and_collect(path)
        except OrmondError as exc:
            logger.debug("Skipping %s: %s", path, exc)
            stats.load_errors += 1
            for reporter in active:
                await reporter.on_load_error(path, exc)
        else:
            for failure in model.failures:
                stats.load_errors += 1
                for reporter in active:
                    await reporter.on_registration_error(path, failure.description, failure.error)
            await runner.run(model.suites, stats, file=path)

        stats.files.append(str(file))

    stats.end_time = time.time()
    for reporter in active:
        await reporter.on_run_complete(stats)
    return stats


__all__ = ["orchestrate"]
