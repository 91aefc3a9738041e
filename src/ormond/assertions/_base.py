"""Assertion result model and failure type."""

from typing import Any

from pydantic import BaseModel


def _truncate(value: Any, max_len: int = 60) -> str:
    """Truncate a repr string if too long."""
    s = repr(value)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


class AssertionResult(BaseModel):
    """Result of evaluating one matcher against a subject.

    Attributes:
    ----------
    assertion_name : str
        Name of the matcher call, e.g. ``is_lt(3)`` or ``not_.is_eq(2)``
    passed : bool
        Whether the assertion passed
    message : str | None
        Expected-vs-actual explanation when the assertion failed
    """

    assertion_name: str
    passed: bool
    message: str | None = None


class AssertionFailedError(AssertionError):
    """AssertionError with attached AssertionResult."""

    def __init__(self, result: AssertionResult):
        self.assertion_result = result
        message = f"{result.assertion_name} failed"
        if result.message:
            message += f": {result.message}"
        super().__init__(message)
