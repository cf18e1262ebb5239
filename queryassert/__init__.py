"""
queryassert - fluent assertions for SQL backends.

Issue one query against a configured backend and check either the canonical
text of its rows, a substring of its failure trace, or only that it runs:

    from queryassert import Config, assert_that

    assert_that().query("select 1 as x").returns("x=1\\n")
    assert_that().with_(Config.FOODMART_CLONE).query("select * from foodmart.product").runs()

Backends are selected through the closed `Config` enumeration or any custom
object implementing `ConnectionFactory`.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from queryassert.config import Settings, get_settings
from queryassert.domain import (
    Config,
    Outcome,
    QueryAssertError,
    QuerySetupError,
    UnexpectedQueryError,
    UnknownConfigError,
)
from queryassert.harness import (
    AssertQuery,
    AssertThat,
    ConfigConnectionFactory,
    ConnectionFactory,
    assert_that,
    capture_outcome,
)
from queryassert.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Fluent DSL
    "assert_that",
    "AssertThat",
    "AssertQuery",
    # Backends
    "Config",
    "ConfigConnectionFactory",
    "ConnectionFactory",
    # Outcomes and errors
    "Outcome",
    "capture_outcome",
    "QueryAssertError",
    "QuerySetupError",
    "UnexpectedQueryError",
    "UnknownConfigError",
    # Logging
    "configure_logging",
    "get_logger",
]
