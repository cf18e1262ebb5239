"""
Connection acquisition routines for queryassert.

One routine per backend configuration:

- the in-memory SQLite fixture connection (`hr` + `foodmart` schemas),
- a read-only psycopg connection to the external FoodMart database, either
  with client-side statement composition (ClientCursor) or native
  server-side binding,
- an in-memory SQLite clone of the external FoodMart tables.

External connects retry transient failures using tenacity. Retries apply to
acquiring a connection only; a query is never re-run.
"""

from __future__ import annotations

import datetime
import decimal
import sqlite3
import uuid
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Mapping

import psycopg
from psycopg import Connection, sql
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from queryassert.config import get_settings
from queryassert.infrastructure.fixtures import (
    FOODMART_TABLES,
    HR_TABLES,
    TableData,
    load_tables,
)
from queryassert.utils.logging import get_logger

log = get_logger(__name__)


def build_dsn() -> str:
    """Compose a DSN string from settings."""
    settings = get_settings()
    return (
        f"postgresql://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
    )


def get_fixture_connection() -> sqlite3.Connection:
    """
    Return a fresh in-memory SQLite connection with the `hr` and `foodmart`
    fixture schemas attached.
    """
    connection = sqlite3.connect(":memory:")
    load_tables(connection, "hr", HR_TABLES)
    load_tables(connection, "foodmart", FOODMART_TABLES)
    return connection


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type((psycopg.OperationalError, psycopg.InterfaceError)),
    reraise=True,
)
def get_foodmart_connection(client_side: bool = False) -> Connection:
    """
    Acquire a read-only connection to the external FoodMart database.

    Parameters
    ----------
    client_side : bool
        If True, statements go through psycopg's ClientCursor, which
        composes the final query text in Python before sending it.
        Otherwise the server-side binding Cursor executes them natively.

    Returns
    -------
    Connection
        A new psycopg connection with the FoodMart schema first on the
        search path.

    Raises
    ------
    psycopg.OperationalError
        If connection fails after all retry attempts.
    """
    settings = get_settings()
    cursor_factory = psycopg.ClientCursor if client_side else psycopg.Cursor
    connection = psycopg.connect(
        build_dsn(),
        cursor_factory=cursor_factory,
        options=f"-c search_path={settings.foodmart_schema},public",
    )
    connection.read_only = True
    return connection


def _sqlite_value(value: Any) -> Any:
    """Coerce a PostgreSQL value into something sqlite3 can bind."""
    if value is None or isinstance(value, (int, float, str, bytes)):
        return value
    if isinstance(value, decimal.Decimal):
        return float(value)
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (uuid.UUID, datetime.timedelta)):
        return str(value)
    if isinstance(value, memoryview):
        return value.tobytes()
    return str(value)


@lru_cache(maxsize=1)
def _foodmart_snapshot() -> Mapping[str, TableData]:
    settings = get_settings()
    snapshot: Dict[str, TableData] = {}
    log.info(
        "Cloning FoodMart tables",
        extra={"schema": settings.foodmart_schema, "tables": settings.clone_tables},
    )
    with get_foodmart_connection() as source:
        with source.cursor() as cur:
            for table in settings.clone_tables:
                cur.execute(
                    sql.SQL("SELECT * FROM {}").format(
                        sql.Identifier(settings.foodmart_schema, table)
                    )
                )
                columns = tuple(column.name for column in cur.description)
                rows = tuple(tuple(_sqlite_value(v) for v in row) for row in cur.fetchall())
                snapshot[table] = TableData(columns=columns, rows=rows)
    return MappingProxyType(snapshot)


def clear_clone_cache() -> None:
    """Forget the cached FoodMart snapshot so the next clone re-reads it."""
    _foodmart_snapshot.cache_clear()


def get_foodmart_clone_connection() -> sqlite3.Connection:
    """
    Return an in-memory SQLite connection holding a copy of the external
    FoodMart tables under the `foodmart` schema.

    The external tables are read once per process; every call gets its own
    private in-memory copy.
    """
    connection = sqlite3.connect(":memory:")
    try:
        load_tables(connection, "foodmart", _foodmart_snapshot())
    except Exception:
        connection.close()
        raise
    return connection


__all__ = [
    "build_dsn",
    "clear_clone_cache",
    "get_fixture_connection",
    "get_foodmart_clone_connection",
    "get_foodmart_connection",
]
