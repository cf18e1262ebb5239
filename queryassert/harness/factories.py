"""
Config-backed connection factory.

Dispatches each `Config` value to exactly one acquisition routine in
`queryassert.infrastructure.db_factory`. The mapping is closed: a selector
without a routine raises `UnknownConfigError` instead of falling back to a
default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from queryassert.domain.errors import UnknownConfigError
from queryassert.domain.models import Config
from queryassert.harness.abstract import Connection
from queryassert.infrastructure import db_factory


def _connection_routines() -> Dict[Config, Callable[[], Connection]]:
    """Registry of acquisition routines, one per configuration."""
    return {
        Config.REGULAR: lambda: db_factory.get_fixture_connection(),
        Config.POSTGRES_FOODMART: lambda: db_factory.get_foodmart_connection(client_side=True),
        Config.POSTGRES_FOODMART_NATIVE: lambda: db_factory.get_foodmart_connection(
            client_side=False
        ),
        Config.FOODMART_CLONE: lambda: db_factory.get_foodmart_clone_connection(),
    }


def available_configs() -> List[str]:
    """List configuration names that have an acquisition routine."""
    return [config.name for config in _connection_routines()]


def resolve_config(selector: object) -> Config:
    """
    Map a `Config` or a config name (case-insensitive) to a `Config`.

    Raises UnknownConfigError for anything else.
    """
    if isinstance(selector, Config):
        return selector
    if isinstance(selector, str):
        try:
            return Config[selector.upper()]
        except KeyError:
            pass
    raise UnknownConfigError(selector)


@dataclass(frozen=True)
class ConfigConnectionFactory:
    """Connection factory selected by a `Config` value."""

    config: Config

    def create_connection(self) -> Connection:
        routines = _connection_routines()
        if self.config not in routines:
            raise UnknownConfigError(self.config)
        return routines[self.config]()


__all__ = ["ConfigConnectionFactory", "available_configs", "resolve_config"]
