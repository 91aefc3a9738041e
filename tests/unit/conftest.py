"""Shared fixtures for unit tests."""

import textwrap
from pathlib import Path

import pytest

from ormond.reports.base import Reporter


class NullReporter(Reporter):
    """Silent reporter for testing."""

    async def on_no_tests_found(self) -> None:
        pass

    async def on_file_start(self, path) -> None:
        pass

    async def on_load_error(self, path, error) -> None:
        pass

    async def on_registration_error(self, path, description, error) -> None:
        pass

    async def on_suite_start(self, suite) -> None:
        pass

    async def on_test_complete(self, result) -> None:
        pass

    async def on_hook_error(self, suite, kind, error) -> None:
        pass

    async def on_run_complete(self, stats) -> None:
        pass


class RecordingReporter(NullReporter):
    """Reporter that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[tuple] = []
        self.results = []

    async def on_no_tests_found(self) -> None:
        self.events.append(("no_tests",))

    async def on_file_start(self, path) -> None:
        self.events.append(("file", path))

    async def on_load_error(self, path, error) -> None:
        self.events.append(("load_error", path, error))

    async def on_registration_error(self, path, description, error) -> None:
        self.events.append(("registration_error", description, error))

    async def on_suite_start(self, suite) -> None:
        self.events.append(("suite", suite.description))

    async def on_test_complete(self, result) -> None:
        self.results.append(result)
        self.events.append(("test", result.description, result.status))

    async def on_hook_error(self, suite, kind, error) -> None:
        self.events.append(("hook_error", kind, error))

    async def on_run_complete(self, stats) -> None:
        self.events.append(("done", stats.total))

    def of_kind(self, kind: str) -> list[tuple]:
        return [event for event in self.events if event[0] == kind]


@pytest.fixture
def null_reporter() -> NullReporter:
    """Provide a silent reporter for tests."""
    return NullReporter()


@pytest.fixture
def recorder() -> RecordingReporter:
    """Provide a reporter that records events."""
    return RecordingReporter()


@pytest.fixture
def write_test_file(tmp_path: Path):
    """Write a dedented test file under tmp_path and return its path."""

    def write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return write
