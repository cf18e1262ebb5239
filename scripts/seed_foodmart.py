"""
Seed script for the external FoodMart database used by the PostgreSQL and
clone configurations.

Creates the FoodMart schema and loads a small deterministic sample of the
`customer`, `product` and `sales_fact_1997` tables using Postgres COPY.
"""

from __future__ import annotations

import sys
import time
from typing import Any, Mapping, Sequence, Tuple

import psycopg
import typer
from psycopg import sql

from queryassert.config import get_settings
from queryassert.infrastructure.db_factory import build_dsn

app = typer.Typer(help="Create and load the FoodMart sample schema in Postgres.")

# table -> ((column, type) pairs, rows)
SEED_TABLES: Mapping[str, Tuple[Sequence[Tuple[str, str]], Sequence[Sequence[Any]]]] = {
    "customer": (
        (
            ("customer_id", "INTEGER PRIMARY KEY"),
            ("fname", "TEXT NOT NULL"),
            ("lname", "TEXT NOT NULL"),
            ("city", "TEXT NOT NULL"),
        ),
        (
            (1, "Sheri", "Nowmer", "Albany"),
            (2, "Derrick", "Whelply", "Sooke"),
            (3, "Jeanne", "Derry", "Issaquah"),
        ),
    ),
    "product": (
        (
            ("product_id", "INTEGER PRIMARY KEY"),
            ("brand_name", "TEXT NOT NULL"),
            ("product_name", "TEXT NOT NULL"),
        ),
        (
            (1, "Washington", "Washington Berry Juice"),
            (2, "Washington", "Washington Mango Drink"),
            (3, "Red Wing", "Red Wing 100 Watt Lightbulb"),
        ),
    ),
    "sales_fact_1997": (
        (
            ("product_id", "INTEGER NOT NULL"),
            ("customer_id", "INTEGER NOT NULL"),
            ("unit_sales", "INTEGER NOT NULL"),
        ),
        (
            (1, 1, 3),
            (2, 1, 2),
            (3, 2, 4),
            (1, 3, 1),
        ),
    ),
}


def _build_dsn(dsn_override: str | None) -> str:
    if dsn_override:
        return dsn_override
    return build_dsn()


def seed_foodmart(dsn: str, schema: str) -> int:
    """
    Drop and recreate `schema`, then COPY every seed table into it.

    Returns the number of rows loaded.
    """
    loaded = 0
    with psycopg.connect(dsn) as conn:
        with conn.cursor() as cur:
            cur.execute(
                sql.SQL("DROP SCHEMA IF EXISTS {} CASCADE").format(sql.Identifier(schema))
            )
            cur.execute(sql.SQL("CREATE SCHEMA {}").format(sql.Identifier(schema)))
            for table, (columns, rows) in SEED_TABLES.items():
                qualified = sql.Identifier(schema, table)
                cur.execute(
                    sql.SQL("CREATE TABLE {} ({})").format(
                        qualified,
                        sql.SQL(", ").join(
                            sql.SQL("{} {}").format(sql.Identifier(name), sql.SQL(ddl))
                            for name, ddl in columns
                        ),
                    )
                )
                with cur.copy(
                    sql.SQL("COPY {} ({}) FROM STDIN").format(
                        qualified,
                        sql.SQL(", ").join(sql.Identifier(name) for name, _ in columns),
                    )
                ) as copy:
                    for row in rows:
                        copy.write_row(row)
                loaded += len(rows)
        conn.commit()
    return loaded


@app.command()
def main(
    dsn: str | None = typer.Option(
        None,
        "--dsn",
        help="Override DSN; defaults to settings (DB_HOST/DB_PORT/DB_USER/DB_PASSWORD/DB_NAME).",
    ),
    schema: str | None = typer.Option(
        None,
        "--schema",
        help="Target schema; defaults to FOODMART_SCHEMA.",
    ),
) -> None:
    """
    Create the FoodMart sample schema and load it.
    """
    target_schema = schema or get_settings().foodmart_schema
    start = time.perf_counter()
    typer.echo(f"Seeding schema '{target_schema}' ({', '.join(SEED_TABLES)})...")
    loaded = seed_foodmart(_build_dsn(dsn), target_schema)
    typer.echo(f"Loaded {loaded} rows in {time.perf_counter() - start:.2f}s.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
