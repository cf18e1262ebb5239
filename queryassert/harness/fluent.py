"""
Fluent assertion DSL for queries against a configured backend.

    assert_that().query("select 1 as x").returns("x=1\\n")
    assert_that().with_(Config.FOODMART_CLONE).query(sql).runs()
    assert_that().query("select * from nope").throws_("no such table")

Builders are immutable: `with_` and `query` return new objects, so a base
builder can be shared by many derived assertions. Nothing executes until a
terminal method (`returns`, `throws_`, `runs`) is called, and each terminal
call performs its own connection cycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from queryassert.domain.errors import QuerySetupError, UnexpectedQueryError, UnknownConfigError
from queryassert.domain.models import Config
from queryassert.harness.abstract import Connection, ConnectionFactory
from queryassert.harness.checks import NO_CHECK, ExceptionCheck, OutcomeCheck, ResultCheck
from queryassert.harness.executor import assert_query
from queryassert.harness.factories import ConfigConnectionFactory
from queryassert.utils.logging import get_logger

log = get_logger(__name__)


def assert_that() -> AssertThat:
    """Return a builder bound to the default in-memory fixture configuration."""
    return AssertThat(ConfigConnectionFactory(Config.REGULAR))


@dataclass(frozen=True)
class AssertThat:
    """Result of calling `assert_that`. Holds the selected connection factory."""

    connection_factory: ConnectionFactory

    def with_(self, target: Union[Config, ConnectionFactory]) -> AssertThat:
        """
        Return a new builder bound to `target`.

        A `Config` selects the config-backed factory; any object with a
        `create_connection` method is used directly.
        """
        if isinstance(target, Config):
            return AssertThat(ConfigConnectionFactory(target))
        if isinstance(target, ConnectionFactory):
            return AssertThat(target)
        raise UnknownConfigError(target)

    def query(self, sql: str) -> AssertQuery:
        return AssertQuery(self.connection_factory, sql)


@dataclass(frozen=True)
class AssertQuery:
    """A query bound to a connection factory, awaiting a terminal assertion."""

    connection_factory: ConnectionFactory
    sql: str

    def create_connection(self) -> Connection:
        return self.connection_factory.create_connection()

    def returns(self, expected: str) -> None:
        """Assert the canonical serialization of the rows equals `expected`."""
        self._assert(ResultCheck(expected))

    def throws_(self, message: str) -> None:
        """Assert the query fails and its trace contains `message`."""
        self._assert(ExceptionCheck(message))

    def runs(self) -> None:
        """Assert the query completes without failure."""
        self._assert(NO_CHECK)

    def _assert(self, check: OutcomeCheck) -> None:
        log.debug(
            "Asserting query",
            extra={"sql": self.sql, "check": type(check).__name__},
        )
        try:
            connection = self.create_connection()
        except UnknownConfigError:
            raise
        except Exception as exc:
            raise QuerySetupError(self.sql) from exc

        try:
            assert_query(connection, self.sql, check)
        except (AssertionError, QuerySetupError):
            raise
        except Exception as exc:
            raise UnexpectedQueryError(self.sql, exc) from exc


__all__ = ["AssertQuery", "AssertThat", "assert_that"]
