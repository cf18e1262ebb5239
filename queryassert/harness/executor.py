"""
Query executor and canonical result serialization.

`assert_query` runs one query on a connection it takes ownership of, hands
the outcome to an `OutcomeCheck`, and releases the cursor and then the
connection on every exit path.

Canonical serialization: one line per row, in backend order, each column
rendered as `label=value` with `str(value)`, columns joined by "; ", every
row terminated by "\n". Zero rows serialize to "".
"""

from __future__ import annotations

import time
from contextlib import closing

from queryassert.domain.errors import QuerySetupError
from queryassert.domain.models import Outcome
from queryassert.harness.abstract import Connection, ConnectionFactory, Cursor
from queryassert.harness.checks import NO_CHECK, OutcomeCheck
from queryassert.utils.logging import get_logger

log = get_logger(__name__)


def serialize_rows(cursor: Cursor) -> str:
    """
    Drain `cursor` into the canonical `label=value; ...\\n` text.

    A statement that produced no result set (no description) yields "".
    """
    if cursor.description is None:
        return ""
    labels = [column[0] for column in cursor.description]
    lines = []
    for row in iter(cursor.fetchone, None):
        lines.append(
            "; ".join(f"{label}={value}" for label, value in zip(labels, row)) + "\n"
        )
    return "".join(lines)


def _open_cursor(connection: Connection, sql: str) -> Cursor:
    try:
        return connection.cursor()
    except Exception as exc:
        raise QuerySetupError(sql) from exc


def assert_query(connection: Connection, sql: str, check: OutcomeCheck = NO_CHECK) -> None:
    """
    Execute `sql` on `connection` and apply `check` to the outcome.

    Parameters
    ----------
    connection : Connection
        A fresh connection; closed by this function.
    sql : str
        The query under test, executed as-is.
    check : OutcomeCheck
        The expectation for this execution.

    Raises
    ------
    AssertionError
        If the check rejects the outcome.
    QuerySetupError
        If a cursor cannot be opened.
    Exception
        The query's own failure, unchanged, when the check does not
        handle failures.
    """
    start = time.perf_counter()
    with closing(connection):
        with closing(_open_cursor(connection, sql)) as cursor:
            try:
                cursor.execute(sql)
            except Exception as exc:
                log.debug("Query failed", extra={"sql": sql, "error": repr(exc)})
                if not check.handles_failure:
                    raise
                check.check_failure(sql, exc)
                return
            if check.handles_failure:
                check.check_failure(sql, None)
                return
            text = serialize_rows(cursor)
    log.debug(
        "Query succeeded",
        extra={
            "sql": sql,
            "rows": text.count("\n"),
            "duration_seconds": round(time.perf_counter() - start, 4),
        },
    )
    check.check_result(sql, text)


def capture_outcome(factory: ConnectionFactory, sql: str) -> Outcome:
    """
    Run `sql` once and return its `Outcome` without asserting anything.

    Connection and cursor setup failures propagate; only the query's own
    failure is captured.
    """
    connection = factory.create_connection()
    with closing(connection):
        with closing(_open_cursor(connection, sql)) as cursor:
            try:
                cursor.execute(sql)
                text = serialize_rows(cursor)
            except Exception as exc:
                return Outcome(failure=exc)
    return Outcome(text=text)


__all__ = ["assert_query", "capture_outcome", "serialize_rows"]
