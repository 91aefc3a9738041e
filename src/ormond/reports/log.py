"""JSON run log written under ``test-logs/YYYY-MM-DD/HH-MM-SS/summary.json``."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from ormond.reports._format import describe_error, summary_lines
from ormond.testing.runner import TestStatus

if TYPE_CHECKING:
    from ormond.testing.runner import RunStatistics, TestResult
    from ormond.testing.suite import Suite


logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = "test-logs"


class Summary(BaseModel):
    total: int = 0
    passed: int = 0
    failed: int = 0


class FileLog(BaseModel):
    """Per-file record handed to the log sink."""

    file: str
    summary: Summary = Field(default_factory=Summary)
    logs: list[str] = Field(default_factory=list)


class RunLog(BaseModel):
    """Whole-run record written as ``summary.json``."""

    timestamp: datetime
    duration_s: float
    summary: Summary
    files: list[FileLog] = Field(default_factory=list)
    logs: list[str] = Field(default_factory=list)


class LogReporter:
    """Buffer every reported line and persist the run when it completes.

    Writing is best effort: failures are logged and never affect the run.
    """

    def __init__(self, log_dir: Path | str = DEFAULT_LOG_DIR) -> None:
        self.log_dir = Path(log_dir)
        self.started_at = datetime.now()
        self.logs: list[str] = []
        self.files: list[FileLog] = []
        self.written_path: Path | None = None

    @property
    def _current(self) -> FileLog | None:
        return self.files[-1] if self.files else None

    def log(self, line: str) -> None:
        self.logs.append(line)
        if self._current is not None:
            self._current.logs.append(line)

    async def on_no_tests_found(self) -> None:
        self.log("No test files found.")

    async def on_file_start(self, path: Path) -> None:
        self.files.append(FileLog(file=str(path)))
        self.log(f"Running tests in: {path}")

    async def on_load_error(self, path: Path, error: BaseException) -> None:
        self.log(f"✗ Failed to load {path}: {describe_error(error)}")

    async def on_registration_error(
        self, path: Path, description: str, error: BaseException
    ) -> None:
        self.log(f"✗ Error in async describe({description!r}): {describe_error(error)}")

    async def on_suite_start(self, suite: Suite) -> None:
        self.log(f"Suite: {suite.description}")

    async def on_test_complete(self, result: TestResult) -> None:
        current = self._current
        if current is not None:
            current.summary.total += 1
            if result.status is TestStatus.PASSED:
                current.summary.passed += 1
            else:
                current.summary.failed += 1

        if result.status is TestStatus.PASSED:
            self.log(f"✓ {result.description}")
        else:
            detail = f": {describe_error(result.error)}" if result.error is not None else ""
            self.log(f"✗ {result.full_name}{detail}")

    async def on_hook_error(self, suite: Suite, kind: str, error: BaseException) -> None:
        self.log(f"! Error in {kind} of {suite.description}: {describe_error(error)}")

    async def on_run_complete(self, stats: RunStatistics) -> None:
        for line in summary_lines(stats):
            self.log(line)

        record = RunLog(
            timestamp=self.started_at,
            duration_s=round(stats.duration_s, 3),
            summary=Summary(**stats.summary()),
            files=self.files,
            logs=self.logs,
        )
        self.written_path = self.write(record)

    def write(self, record: RunLog) -> Path | None:
        run_dir = (
            self.log_dir
            / self.started_at.strftime("%Y-%m-%d")
            / self.started_at.strftime("%H-%M-%S")
        )
        target = run_dir / "summary.json"
        try:
            run_dir.mkdir(parents=True, exist_ok=True)
            target.write_text(record.model_dump_json(indent=2), encoding="utf-8")
        except OSError:
            logger.exception("Failed to write test log to %s", target)
            return None
        logger.debug("Wrote test log to %s", target)
        return target


__all__ = ["DEFAULT_LOG_DIR", "FileLog", "LogReporter", "RunLog", "Summary"]
