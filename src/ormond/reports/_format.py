"""Plain-text line formatting shared by reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ormond.testing.runner import RunStatistics


LABEL_PAD = 14
VALUE_PAD = 6


def describe_error(error: BaseException) -> str:
    message = str(error)
    name = type(error).__name__
    return f"{name}: {message}" if message else name


def summary_lines(stats: RunStatistics) -> list[str]:
    """Right-aligned summary block printed at the end of a run."""

    def line(label: str, value: object) -> str:
        return f"{str(value).rjust(VALUE_PAD)} {label.ljust(LABEL_PAD)}".rstrip()

    lines = [
        line("Total Tests", stats.total),
        line("Passed Tests", stats.passed),
        line("Failed Tests", stats.failed),
    ]
    if stats.load_errors:
        lines.append(line("Load Errors", stats.load_errors))
    lines.append(line("Duration (s)", f"{stats.duration_s:.2f}"))
    return lines
