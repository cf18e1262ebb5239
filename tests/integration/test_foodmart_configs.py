"""
Integration tests for the PostgreSQL-backed configurations.

These tests run against a real PostgreSQL instance seeded by
`scripts/seed_foodmart.py` and verify that:
1. Both execution modes and the local clone serialize rows identically
2. Backend diagnostics reach `throws_`
3. External connections are read-only

Run with: RUN_INTEGRATION_TESTS=1 pytest tests/integration/
"""

from __future__ import annotations

import os

import pytest

from queryassert import Config, UnexpectedQueryError, assert_that

ALL_FOODMART_CONFIGS = [
    Config.POSTGRES_FOODMART,
    Config.POSTGRES_FOODMART_NATIVE,
    Config.FOODMART_CLONE,
]
POSTGRES_CONFIGS = [Config.POSTGRES_FOODMART, Config.POSTGRES_FOODMART_NATIVE]
EXPECTED_SEEDED_ROWS = 10

pytestmark = pytest.mark.skipif(
    os.getenv("RUN_INTEGRATION_TESTS", "0") != "1",
    reason="Integration tests require RUN_INTEGRATION_TESTS=1 and reachable Postgres",
)


def test_seed_loaded_every_table(seeded_foodmart: int):
    assert seeded_foodmart == EXPECTED_SEEDED_ROWS


@pytest.mark.parametrize("config", ALL_FOODMART_CONFIGS)
class TestRowsAcrossConfigs:
    def test_ordered_customers(self, seeded_foodmart, config):
        assert_that().with_(config).query(
            "select customer_id, fname from foodmart.customer order by customer_id"
        ).returns(
            "customer_id=1; fname=Sheri\ncustomer_id=2; fname=Derrick\ncustomer_id=3; fname=Jeanne\n"
        )

    def test_aggregate_join(self, seeded_foodmart, config):
        assert_that().with_(config).query(
            "select p.brand_name, sum(s.unit_sales) as units "
            "from foodmart.sales_fact_1997 s "
            "join foodmart.product p on p.product_id = s.product_id "
            "group by p.brand_name order by p.brand_name"
        ).returns("brand_name=Red Wing; units=4\nbrand_name=Washington; units=6\n")

    def test_zero_rows(self, seeded_foodmart, config):
        assert_that().with_(config).query(
            "select * from foodmart.customer where customer_id < 0"
        ).returns("")

    def test_runs(self, seeded_foodmart, config):
        assert_that().with_(config).query("select * from foodmart.sales_fact_1997").runs()


@pytest.mark.parametrize("config", POSTGRES_CONFIGS)
class TestPostgresDiagnostics:
    def test_missing_relation(self, seeded_foodmart, config):
        assert_that().with_(config).query("select * from nonexistent_table").throws_(
            'relation "nonexistent_table" does not exist'
        )

    def test_connection_is_read_only(self, seeded_foodmart, config):
        assert_that().with_(config).query(
            "create table foodmart.scratch (x integer)"
        ).throws_("read-only transaction")

    def test_syntax_error_fails_runs(self, seeded_foodmart, config):
        with pytest.raises(UnexpectedQueryError):
            assert_that().with_(config).query("selec 1").runs()


def test_unqualified_names_resolve_through_search_path(seeded_foodmart):
    assert_that().with_(Config.POSTGRES_FOODMART_NATIVE).query(
        "select count(*) as n from customer"
    ).returns("n=3\n")
