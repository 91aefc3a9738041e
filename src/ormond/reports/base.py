"""Base reporter protocol for ormond test output."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ormond.testing.runner import RunStatistics, TestResult
    from ormond.testing.suite import Suite


class Reporter(Protocol):
    """Protocol defining the interface for test reporters.

    All methods are async to support I/O-bound reporters.
    Sync reporters can implement these as regular methods that don't await anything.
    """

    async def on_no_tests_found(self) -> None:
        """Called when discovery or the caller supplies no test files."""
        ...

    async def on_file_start(self, path: Path) -> None:
        """Called before a test file is loaded."""
        ...

    async def on_load_error(self, path: Path, error: BaseException) -> None:
        """Called when a test file fails to load and contributes no tests."""
        ...

    async def on_registration_error(
        self, path: Path, description: str, error: BaseException
    ) -> None:
        """Called when an async describe callback raised and its suite was dropped."""
        ...

    async def on_suite_start(self, suite: Suite) -> None:
        """Called before the first hook of a suite runs."""
        ...

    async def on_test_complete(self, result: TestResult) -> None:
        """Called after each test body completes."""
        ...

    async def on_hook_error(self, suite: Suite, kind: str, error: BaseException) -> None:
        """Called when a lifecycle hook raises."""
        ...

    async def on_run_complete(self, stats: RunStatistics) -> None:
        """Called after all files have been processed."""
        ...
