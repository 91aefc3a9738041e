"""Fluent matchers for test bodies.

``expect(value)`` wraps a subject and exposes chainable matchers. Each matcher
returns the same chain on success and raises
:class:`~ormond.assertions._base.AssertionFailedError` on failure::

    expect(10).is_type(int).is_lt(20).is_le(20)
    expect("hello world").is_substr("world").not_.is_match(r"^bye")

``not_`` flips every matcher: a negated matcher passes exactly when the
positive one would have failed.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from ormond.assertions._base import AssertionFailedError, AssertionResult, _truncate


def _format_args(args: tuple[Any, ...]) -> str:
    return ", ".join(_truncate(arg) for arg in args)


class Expectation:
    """Matcher chain around a single subject value."""

    def __init__(self, value: Any, *, negated: bool = False) -> None:
        self.value = value
        self.negated = negated

    def __repr__(self) -> str:
        prefix = "not_." if self.negated else ""
        return f"expect({_truncate(self.value)}).{prefix}"

    @property
    def not_(self) -> Expectation:
        """View of this chain with every matcher inverted."""
        return Expectation(self.value, negated=not self.negated)

    def _check(self, name: str, args: tuple[Any, ...], passed: bool, message: str) -> Expectation:
        call = f"{name}({_format_args(args)})"
        if self.negated:
            if passed:
                result = AssertionResult(
                    assertion_name=f"not_.{call}",
                    passed=False,
                    message=f"Negated assertion failed: {call} passed for {_truncate(self.value)}",
                )
                raise AssertionFailedError(result)
            return self

        if not passed:
            raise AssertionFailedError(
                AssertionResult(assertion_name=call, passed=False, message=message)
            )
        return self

    def _compare(
        self,
        name: str,
        other: Any,
        op: Callable[[Any, Any], bool],
        phrase: str,
    ) -> Expectation:
        try:
            passed = bool(op(self.value, other))
        except TypeError:
            passed = False
        return self._check(
            name,
            (other,),
            passed,
            f"Expected {_truncate(self.value)} to be {phrase} {_truncate(other)}",
        )

    def is_type(self, expected: type | tuple[type, ...] | str) -> Expectation:
        """Assert the subject's exact type.

        ``expected`` may be a type, a tuple of types, or a type name such as
        ``"int"``. Subclasses do not match: ``expect(True).is_type(int)`` fails.
        """
        actual_name = type(self.value).__name__
        if isinstance(expected, str):
            passed = actual_name == expected
            expected_name = expected
        else:
            types = expected if isinstance(expected, tuple) else (expected,)
            if not all(isinstance(t, type) for t in types):
                return self._check(
                    "is_type",
                    (expected,),
                    False,
                    f"is_type expects a type, a tuple of types or a type name, got {_truncate(expected)}",
                )
            passed = type(self.value) in types
            expected_name = " | ".join(t.__name__ for t in types)
        return self._check(
            "is_type",
            (expected,),
            passed,
            f"Expected type '{expected_name}', but got '{actual_name}'",
        )

    def is_eq(self, other: Any) -> Expectation:
        """Assert strict equality: same type and equal value."""
        passed = type(self.value) is type(other) and self.value == other
        return self._check(
            "is_eq",
            (other,),
            passed,
            f"Expected {_truncate(self.value)} to equal {_truncate(other)}",
        )

    def is_deep_eq(self, other: Any) -> Expectation:
        """Assert structural equality of containers and values."""
        return self._check(
            "is_deep_eq",
            (other,),
            self.value == other,
            f"Expected {_truncate(self.value)} to deeply equal {_truncate(other)}",
        )

    def is_lt(self, other: Any) -> Expectation:
        return self._compare("is_lt", other, lambda a, b: a < b, "less than")

    def is_le(self, other: Any) -> Expectation:
        return self._compare("is_le", other, lambda a, b: a <= b, "less than or equal to")

    def is_gt(self, other: Any) -> Expectation:
        return self._compare("is_gt", other, lambda a, b: a > b, "greater than")

    def is_ge(self, other: Any) -> Expectation:
        return self._compare("is_ge", other, lambda a, b: a >= b, "greater than or equal to")

    def is_between(self, low: Any, high: Any) -> Expectation:
        """Assert ``low <= value <= high``."""
        try:
            passed = bool(low <= self.value <= high)
        except TypeError:
            passed = False
        return self._check(
            "is_between",
            (low, high),
            passed,
            f"Expected {_truncate(self.value)} to be between "
            f"{_truncate(low)} and {_truncate(high)} (inclusive)",
        )

    def is_match(self, pattern: str | re.Pattern[str]) -> Expectation:
        """Assert the subject is a string matched anywhere by ``pattern``."""
        if not isinstance(self.value, str):
            return self._check(
                "is_match",
                (pattern,),
                False,
                f"is_match expected a string, got {type(self.value).__name__}",
            )
        try:
            regex = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
            passed = regex.search(self.value) is not None
        except (TypeError, re.error) as exc:
            return self._check(
                "is_match",
                (pattern,),
                False,
                f"is_match got an invalid pattern {_truncate(pattern)}: {exc}",
            )
        return self._check(
            "is_match",
            (pattern,),
            passed,
            f"Expected {self.value!r} to match {regex.pattern!r}",
        )

    def is_substr(self, substring: str) -> Expectation:
        """Assert the subject is a string containing ``substring``."""
        if not isinstance(self.value, str):
            return self._check(
                "is_substr",
                (substring,),
                False,
                f"is_substr expected a string, got {type(self.value).__name__}",
            )
        if not isinstance(substring, str):
            return self._check(
                "is_substr",
                (substring,),
                False,
                f"is_substr expects a string argument, got {type(substring).__name__}",
            )
        return self._check(
            "is_substr",
            (substring,),
            substring in self.value,
            f"Expected {_truncate(self.value)} to contain {substring!r}",
        )

    def raises(
        self,
        expected: str | re.Pattern[str] | type[BaseException] | None = None,
    ) -> Expectation:
        """Assert that calling the subject raises.

        ``expected`` narrows the accepted error: an exception class, a
        substring of the message, or a compiled regex searched in the message.
        """
        args = () if expected is None else (expected,)
        if not callable(self.value):
            return self._check("raises", args, False, "raises requires a callable as the subject")
        if expected is not None and not (
            isinstance(expected, (str, re.Pattern))
            or (isinstance(expected, type) and issubclass(expected, BaseException))
        ):
            return self._check(
                "raises",
                args,
                False,
                "raises only accepts str, re.Pattern or an exception class, "
                f"got {type(expected).__name__}",
            )

        try:
            self.value()
        except Exception as exc:
            error: Exception | None = exc
        else:
            error = None

        if error is None:
            return self._check("raises", args, False, "Expected function to raise, but it did not")

        text = str(error)
        if isinstance(expected, type):
            passed = isinstance(error, expected)
            message = f"Expected {expected.__name__} to be raised, but got {type(error).__name__}: {text}"
        elif isinstance(expected, re.Pattern):
            passed = expected.search(text) is not None
            message = f"Expected error message to match {expected.pattern!r}, but got {text!r}"
        elif isinstance(expected, str):
            passed = expected in text
            message = f"Expected error message to contain {expected!r}, but got {text!r}"
        else:
            passed = True
            message = ""
        return self._check("raises", args, passed, message)


def expect(value: Any) -> Expectation:
    """Start a matcher chain for ``value``."""
    return Expectation(value)
