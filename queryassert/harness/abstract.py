"""
Structural interfaces the harness depends on.

Any DB-API 2.0 (PEP 249) connection satisfies `Connection`; sqlite3 and
psycopg both do. Custom factories only need a `create_connection` method.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, runtime_checkable


class Cursor(Protocol):
    """The subset of a DB-API cursor the executor uses."""

    description: Optional[Sequence[Sequence[Any]]]

    def execute(self, operation: str) -> Any:
        ...

    def fetchone(self) -> Optional[Sequence[Any]]:
        ...

    def close(self) -> None:
        ...


class Connection(Protocol):
    """The subset of a DB-API connection the executor uses."""

    def cursor(self) -> Cursor:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class ConnectionFactory(Protocol):
    """
    Produces a ready-to-use connection, or raises.

    Callers must not assume idempotence, pooling or thread safety beyond
    "safe to invoke once per execution".
    """

    def create_connection(self) -> Connection:
        """Return a new connection owned by the caller."""
        ...


__all__ = ["Connection", "ConnectionFactory", "Cursor"]
