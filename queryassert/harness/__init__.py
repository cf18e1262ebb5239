"""
Harness package for queryassert.

Re-exports the fluent DSL, the connection factory interfaces, the outcome
checks and the executor so tests can import from `queryassert.harness`.
"""

from queryassert.harness.abstract import Connection, ConnectionFactory, Cursor
from queryassert.harness.checks import (
    NO_CHECK,
    ExceptionCheck,
    NoCheck,
    OutcomeCheck,
    ResultCheck,
)
from queryassert.harness.executor import assert_query, capture_outcome, serialize_rows
from queryassert.harness.factories import (
    ConfigConnectionFactory,
    available_configs,
    resolve_config,
)
from queryassert.harness.fluent import AssertQuery, AssertThat, assert_that

__all__ = [
    # Fluent DSL
    "AssertQuery",
    "AssertThat",
    "assert_that",
    # Connection factories
    "Connection",
    "ConnectionFactory",
    "Cursor",
    "ConfigConnectionFactory",
    "available_configs",
    "resolve_config",
    # Outcome checks
    "NO_CHECK",
    "ExceptionCheck",
    "NoCheck",
    "OutcomeCheck",
    "ResultCheck",
    # Executor
    "assert_query",
    "capture_outcome",
    "serialize_rows",
]
