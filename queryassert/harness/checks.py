"""
Outcome checks: what a terminal assertion expects from one execution.

Exactly one policy is active per terminal call:

- `NoCheck`: only require that the query does not fail (`runs`);
- `ResultCheck`: compare the canonical row text for equality (`returns`);
- `ExceptionCheck`: require a failure whose trace contains a substring
  (`throws_`).

Only `ExceptionCheck` handles failures. Under the other two a failure
propagates to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from queryassert.domain.models import render_trace


class OutcomeCheck:
    """Base of the closed set of outcome policies."""

    #: Whether a query failure is handed to `check_failure` instead of propagating.
    handles_failure: bool = False

    def check_result(self, sql: str, text: str) -> None:
        """Validate the canonical serialization of a successful query."""

    def check_failure(self, sql: str, failure: Optional[BaseException]) -> None:
        """Validate a captured failure; `None` means the query succeeded."""
        raise NotImplementedError


@dataclass(frozen=True)
class NoCheck(OutcomeCheck):
    """Accept any successful result."""


@dataclass(frozen=True)
class ResultCheck(OutcomeCheck):
    expected: str

    def check_result(self, sql: str, text: str) -> None:
        if text != self.expected:
            raise AssertionError(
                f"query [{sql}] returned unexpected rows\n"
                f"expected: {self.expected!r}\n"
                f"actual:   {text!r}"
            )


@dataclass(frozen=True)
class ExceptionCheck(OutcomeCheck):
    expected: str

    handles_failure = True

    def check_failure(self, sql: str, failure: Optional[BaseException]) -> None:
        if failure is None:
            raise AssertionError(
                f"query [{sql}] was expected to fail with {self.expected!r} "
                "but succeeded"
            )
        trace = render_trace(failure)
        if self.expected not in trace:
            raise AssertionError(
                f"query [{sql}] failed, but the trace does not contain "
                f"{self.expected!r}:\n{trace}"
            )


NO_CHECK = NoCheck()

__all__ = ["OutcomeCheck", "NoCheck", "ResultCheck", "ExceptionCheck", "NO_CHECK"]
