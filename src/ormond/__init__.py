"""Ormond - describe/it style test runner."""

from .assertions import AssertionFailedError, expect
from .errors import LoadError, OrmondError, RegistrationError
from .orchestrator import orchestrate
from .testing import (
    RunStatistics,
    after_all,
    after_each,
    before_all,
    before_each,
    describe,
    discover,
    it,
)
from .version import __version__


__all__ = [
    # Registration
    "describe",
    "it",
    "before_all",
    "after_all",
    "before_each",
    "after_each",
    # Assertions
    "expect",
    "AssertionFailedError",
    # Running
    "discover",
    "orchestrate",
    "RunStatistics",
    # Errors
    "OrmondError",
    "RegistrationError",
    "LoadError",
]
