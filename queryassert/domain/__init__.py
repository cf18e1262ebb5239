"""
Domain package for queryassert.

Exports the backend selectors, the execution outcome and the error
hierarchy. Keep this package free of I/O.
"""

from queryassert.domain.errors import (
    QueryAssertError,
    QuerySetupError,
    UnexpectedQueryError,
    UnknownConfigError,
)
from queryassert.domain.models import Config, Outcome, render_trace

__all__ = [
    "Config",
    "Outcome",
    "render_trace",
    "QueryAssertError",
    "QuerySetupError",
    "UnexpectedQueryError",
    "UnknownConfigError",
]
