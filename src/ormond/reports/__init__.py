"""Reporting module for ormond test output."""

from ormond.reports.base import Reporter
from ormond.reports.console import ConsoleReporter
from ormond.reports.log import LogReporter


__all__ = [
    "ConsoleReporter",
    "LogReporter",
    "Reporter",
]
