"""
Pytest configuration for queryassert.

Provides fixtures for:
- Settings and DSN for the external FoodMart database
- Seeding the FoodMart schema for integration tests
- Resetting cached settings and clone snapshots
"""

from __future__ import annotations

import os

import psycopg
import pytest

from queryassert.config import Settings, get_settings
from queryassert.infrastructure.db_factory import clear_clone_cache


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        db_host=os.getenv("DB_HOST", "localhost"),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_user=os.getenv("DB_USER", "postgres"),
        db_password=os.getenv("DB_PASSWORD", "postgres"),
        db_name=os.getenv("DB_NAME", "foodmart"),
        foodmart_schema=os.getenv("FOODMART_SCHEMA", "foodmart"),
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def test_dsn(test_settings: Settings) -> str:
    """
    Database connection string for tests.
    """
    return (
        f"postgresql://{test_settings.db_user}:{test_settings.db_password}"
        f"@{test_settings.db_host}:{test_settings.db_port}/{test_settings.db_name}"
    )


@pytest.fixture(scope="session")
def db_connection_available(test_dsn: str) -> bool:
    """
    Check if database is reachable.

    Used to conditionally skip integration tests when DB is not available.
    """
    try:
        with psycopg.connect(test_dsn, connect_timeout=5) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1;")
                cur.fetchone()
        return True
    except psycopg.Error:
        return False


@pytest.fixture(scope="session")
def seeded_foodmart(test_settings: Settings, test_dsn: str, db_connection_available: bool) -> int:
    """
    Create and load the FoodMart sample schema once per session.

    Skips tests if database is not available. Returns the number of rows seeded.
    """
    if not db_connection_available:
        pytest.skip("Database not available for integration tests")

    from scripts.seed_foodmart import seed_foodmart

    loaded = seed_foodmart(test_dsn, test_settings.foodmart_schema)
    get_settings.cache_clear()
    clear_clone_cache()
    return loaded


@pytest.fixture(autouse=True)
def _reset_caches():
    """Drop cached settings and clone snapshots after every test."""
    yield
    get_settings.cache_clear()
    clear_clone_cache()
