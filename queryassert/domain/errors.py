"""
Exception hierarchy for queryassert.

Harness-level verdicts are `AssertionError`s so pytest reports them as test
failures. Everything else derives from `QueryAssertError`.
"""

from __future__ import annotations

from typing import Any


class QueryAssertError(Exception):
    """Base class for harness errors that are not assertion verdicts."""


class QuerySetupError(QueryAssertError):
    """
    Raised when acquiring a connection or preparing a statement fails.

    The query under test never ran; `sql` identifies which assertion was
    being set up.
    """

    def __init__(self, sql: str) -> None:
        super().__init__(f"exception while executing [{sql}]")
        self.sql = sql


class UnknownConfigError(QueryAssertError):
    """Raised when a backend selector has no acquisition routine. Never retried."""

    def __init__(self, selector: Any) -> None:
        super().__init__(f"unexpected configuration selector: {selector!r}")
        self.selector = selector


class UnexpectedQueryError(AssertionError):
    """The query under test failed although success was expected."""

    def __init__(self, sql: str, cause: BaseException) -> None:
        super().__init__(
            f"query [{sql}] failed unexpectedly: {type(cause).__name__}: {cause}"
        )
        self.sql = sql


__all__ = [
    "QueryAssertError",
    "QuerySetupError",
    "UnknownConfigError",
    "UnexpectedQueryError",
]
