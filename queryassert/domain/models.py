"""
Domain models for queryassert.

`Config` is the closed set of backend selectors exposed to test authors;
`Outcome` is the result of one query execution.
"""

from __future__ import annotations

import enum
import traceback
from dataclasses import dataclass
from typing import Optional


class Config(enum.Enum):
    """Named backend configurations. A selector, never a connection itself."""

    #: In-memory SQLite with the `hr` and `foodmart` fixture schemas attached.
    REGULAR = "regular"

    #: External PostgreSQL FoodMart; statements are composed client-side by
    #: psycopg's ClientCursor before being sent.
    POSTGRES_FOODMART = "postgres_foodmart"

    #: External PostgreSQL FoodMart executed natively (server-side binding).
    POSTGRES_FOODMART_NATIVE = "postgres_foodmart_native"

    #: In-memory SQLite holding a local clone of the external FoodMart tables.
    FOODMART_CLONE = "foodmart_clone"


def render_trace(failure: BaseException) -> str:
    """Render type, message, stack and chained causes of `failure` as text."""
    return "".join(traceback.format_exception(type(failure), failure, failure.__traceback__))


@dataclass(frozen=True)
class Outcome:
    """
    Result of one query execution: serialized rows or a captured failure.
    """

    text: Optional[str] = None
    failure: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.failure is None):
            raise ValueError("Outcome requires exactly one of text or failure")

    @property
    def succeeded(self) -> bool:
        return self.failure is None

    @property
    def trace(self) -> Optional[str]:
        if self.failure is None:
            return None
        return render_trace(self.failure)


__all__ = ["Config", "Outcome", "render_trace"]
