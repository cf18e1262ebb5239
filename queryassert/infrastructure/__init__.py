"""
Infrastructure package for queryassert.

Centralizes connection acquisition for every backend configuration. Keep
this layer focused on I/O and resource management, decoupled from the
assertion logic.
"""

from queryassert.infrastructure.db_factory import (
    build_dsn,
    clear_clone_cache,
    get_fixture_connection,
    get_foodmart_clone_connection,
    get_foodmart_connection,
)

__all__ = [
    "build_dsn",
    "clear_clone_cache",
    "get_fixture_connection",
    "get_foodmart_clone_connection",
    "get_foodmart_connection",
]
