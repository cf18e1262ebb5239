from __future__ import annotations

import pytest
from typer.testing import CliRunner

from queryassert import main

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    # The CLI installs a root handler bound to the runner's captured stderr.
    monkeypatch.setattr(main, "configure_logging", lambda **kwargs: None)


def test_configs_lists_every_config():
    result = runner.invoke(main.app, ["configs"])
    assert result.exit_code == 0
    assert result.output.split() == [
        "REGULAR",
        "POSTGRES_FOODMART",
        "POSTGRES_FOODMART_NATIVE",
        "FOODMART_CLONE",
    ]


def test_info_shows_database_target():
    result = runner.invoke(main.app, ["info"])
    assert result.exit_code == 0
    assert "DB=" in result.output
    assert "schema=" in result.output


def test_run_prints_canonical_rows():
    result = runner.invoke(main.app, ["run", "select 1 as a, 2 as b"])
    assert result.exit_code == 0
    assert result.output == "a=1; b=2\n"


def test_run_prints_trace_on_failure():
    result = runner.invoke(main.app, ["run", "select * from nonexistent_table"])
    assert result.exit_code == 1
    assert "no such table: nonexistent_table" in result.output


def test_run_rejects_unknown_config():
    result = runner.invoke(main.app, ["run", "select 1", "--config", "oracle"])
    assert result.exit_code == 2


def test_check_expect_passes():
    result = runner.invoke(
        main.app, ["check", "select 1 as x union all select 2", "--expect", "x=1\\nx=2\\n"]
    )
    assert result.exit_code == 0
    assert "OK" in result.output


def test_check_error_substring():
    result = runner.invoke(
        main.app, ["check", "select * from nonexistent_table", "--error", "no such table"]
    )
    assert result.exit_code == 0


def test_check_runs_fails_on_syntax_error():
    result = runner.invoke(main.app, ["check", "selec 1"])
    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_check_rejects_both_expectations():
    result = runner.invoke(main.app, ["check", "select 1", "--expect", "", "--error", "x"])
    assert result.exit_code == 2
