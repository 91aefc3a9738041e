"""Matcher library for test bodies."""

from ._base import AssertionFailedError, AssertionResult
from .expect import Expectation, expect

__all__ = [
    "AssertionFailedError",
    "AssertionResult",
    "Expectation",
    "expect",
]
