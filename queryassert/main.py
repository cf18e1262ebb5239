from __future__ import annotations

import sys
from typing import Optional

import typer

from queryassert.config import get_settings
from queryassert.domain.errors import QueryAssertError, UnknownConfigError
from queryassert.domain.models import Config
from queryassert.harness.executor import capture_outcome
from queryassert.harness.factories import (
    ConfigConnectionFactory,
    available_configs,
    resolve_config,
)
from queryassert.harness.fluent import assert_that
from queryassert.utils.logging import configure_logging

app = typer.Typer(help="queryassert CLI: run and check queries against configured backends.")

CONFIG_OPTION_HELP = "Backend configuration (see `configs`)."


def _config(name: str) -> Config:
    try:
        return resolve_config(name)
    except UnknownConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"DB={settings.db_user}@{settings.db_host}:{settings.db_port}/{settings.db_name} | "
        f"schema={settings.foodmart_schema} clone_tables={','.join(settings.clone_tables)} "
        f"log_level={settings.log_level}"
    )


@app.command()
def configs() -> None:
    """
    List available backend configurations.
    """
    for name in available_configs():
        typer.echo(name)


@app.command()
def run(
    sql: str = typer.Argument(..., help="Query text to execute."),
    config: str = typer.Option("regular", "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """
    Execute a query and print its canonical rows, or its failure trace.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    factory = ConfigConnectionFactory(_config(config))
    outcome = capture_outcome(factory, sql)
    if outcome.succeeded:
        typer.echo(outcome.text, nl=False)
        return
    typer.echo(outcome.trace, err=True, nl=False)
    raise typer.Exit(code=1)


@app.command()
def check(
    sql: str = typer.Argument(..., help="Query text to execute."),
    expect: Optional[str] = typer.Option(
        None, "--expect", "-e", help="Expected canonical rows (use \\n between rows)."
    ),
    error: Optional[str] = typer.Option(
        None, "--error", help="Substring expected in the failure trace."
    ),
    config: str = typer.Option("regular", "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """
    Run one assertion; exit 0 if it holds, 1 otherwise.

    With neither --expect nor --error, only require that the query runs.
    """
    if expect is not None and error is not None:
        raise typer.BadParameter("use either --expect or --error, not both")

    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    query = assert_that().with_(_config(config)).query(sql)
    try:
        if expect is not None:
            query.returns(expect.replace("\\n", "\n"))
        elif error is not None:
            query.throws_(error)
        else:
            query.runs()
    except (AssertionError, QueryAssertError) as exc:
        typer.echo(f"FAIL: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo("OK")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
