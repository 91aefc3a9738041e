"""Suite registration, loading and execution engine."""

from .discovery import discover
from .loader import load_and_collect
from .registration import (
    after_all,
    after_each,
    before_all,
    before_each,
    describe,
    it,
    registration_scope,
)
from .runner import Runner, RunStatistics, TestResult, TestStatus
from .suite import Suite, SuiteModel, TestCase


__all__ = [
    "Runner",
    "RunStatistics",
    "Suite",
    "SuiteModel",
    "TestCase",
    "TestResult",
    "TestStatus",
    "after_all",
    "after_each",
    "before_all",
    "before_each",
    "describe",
    "discover",
    "it",
    "load_and_collect",
    "registration_scope",
]
