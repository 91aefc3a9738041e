"""Rich console reporter."""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from ormond.reports._format import describe_error, summary_lines
from ormond.testing.runner import TestStatus

if TYPE_CHECKING:
    from ormond.testing.runner import RunStatistics, TestResult
    from ormond.testing.suite import Suite


class ConsoleReporter:
    """Print file and suite headers, one line per test, and a final summary.

    ``verbosity < 0`` hides passing tests; ``verbosity > 0`` adds tracebacks
    for failures and errors.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    def _traceback(self, error: BaseException) -> None:
        if self.verbosity > 0:
            text = "".join(traceback.format_exception(error))
            self.console.print(escape(text.rstrip()), style="dim")

    async def on_no_tests_found(self) -> None:
        self.console.print("[yellow]No test files found.[/yellow]")

    async def on_file_start(self, path: Path) -> None:
        self.console.print()
        self.console.print(f"[bold]Running tests in:[/bold] {escape(str(path))}")

    async def on_load_error(self, path: Path, error: BaseException) -> None:
        self.console.print(
            f"[red]✗ Failed to load {escape(str(path))}:[/red] {escape(describe_error(error))}"
        )
        self._traceback(error)

    async def on_registration_error(
        self, path: Path, description: str, error: BaseException
    ) -> None:
        self.console.print(
            f"[red]✗ Error in async describe({escape(repr(description))}):[/red] "
            f"{escape(describe_error(error))}"
        )
        self._traceback(error)

    async def on_suite_start(self, suite: Suite) -> None:
        self.console.print()
        self.console.print(f"[bold cyan]Suite:[/bold cyan] {escape(suite.description)}")

    async def on_test_complete(self, result: TestResult) -> None:
        if result.status is TestStatus.PASSED:
            if self.verbosity >= 0:
                self.console.print(f"  [green]✓[/green] {escape(result.description)}")
            return

        self.console.print(f"  [red]✗ {escape(result.full_name)}[/red]")
        if result.error is not None:
            self.console.print(f"    [red]{escape(describe_error(result.error))}[/red]")
            self._traceback(result.error)

    async def on_hook_error(self, suite: Suite, kind: str, error: BaseException) -> None:
        self.console.print(
            f"  [yellow]! Error in {kind} of {escape(suite.description)}:[/yellow] "
            f"{escape(describe_error(error))}"
        )
        self._traceback(error)

    async def on_run_complete(self, stats: RunStatistics) -> None:
        self.console.print()
        style = "green" if stats.ok else "red"
        for line in summary_lines(stats):
            self.console.print(escape(line), style=style, highlight=False)
