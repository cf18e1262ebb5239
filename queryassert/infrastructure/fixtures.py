"""
In-memory fixture datasets and a loader for SQLite connections.

The REGULAR configuration attaches two schemas: `hr` (employees and
departments) and `foodmart` (a two-row sales fact table). The loader is also
used to materialize the local FoodMart clone.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Mapping, NamedTuple, Sequence


class TableData(NamedTuple):
    columns: Sequence[str]
    rows: Sequence[Sequence[Any]]


HR_TABLES: Mapping[str, TableData] = {
    "emps": TableData(
        columns=("empid", "deptno", "name", "salary", "commission"),
        rows=(
            (100, 10, "Bill", 10000.0, 1000),
            (200, 20, "Eric", 8000.0, 500),
            (150, 10, "Sebastian", 7000.0, None),
            (110, 10, "Theodore", 11500.0, 250),
        ),
    ),
    "depts": TableData(
        columns=("deptno", "name"),
        rows=(
            (10, "Sales"),
            (30, "Marketing"),
            (40, "HR"),
        ),
    ),
}

FOODMART_TABLES: Mapping[str, TableData] = {
    "sales_fact_1997": TableData(
        columns=("cust_id", "prod_id"),
        rows=(
            (100, 10),
            (150, 20),
        ),
    ),
}


def quote_identifier(name: str) -> str:
    """Quote an SQLite identifier."""
    return '"' + name.replace('"', '""') + '"'


def _attached_schemas(connection: sqlite3.Connection) -> set[str]:
    return {row[1] for row in connection.execute("PRAGMA database_list")}


def load_tables(
    connection: sqlite3.Connection,
    schema: str,
    tables: Mapping[str, TableData],
) -> None:
    """
    Create and populate `tables` inside `schema` on an SQLite connection.

    The schema is attached as a fresh in-memory database when it is not
    already present. Columns are declared without a type so that values keep
    the storage class they were inserted with.
    """
    if schema not in _attached_schemas(connection):
        connection.execute(f"ATTACH DATABASE ':memory:' AS {quote_identifier(schema)}")

    for table, data in tables.items():
        qualified = f"{quote_identifier(schema)}.{quote_identifier(table)}"
        column_list = ", ".join(quote_identifier(c) for c in data.columns)
        placeholders = ", ".join("?" for _ in data.columns)
        connection.execute(f"CREATE TABLE {qualified} ({column_list})")
        connection.executemany(
            f"INSERT INTO {qualified} ({column_list}) VALUES ({placeholders})",
            data.rows,
        )
    connection.commit()


__all__ = [
    "TableData",
    "HR_TABLES",
    "FOODMART_TABLES",
    "quote_identifier",
    "load_tables",
]
