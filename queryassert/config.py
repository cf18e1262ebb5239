"""
Configuration settings for queryassert.

Uses Pydantic Settings to load environment variables for the external
FoodMart database, the local clone, and logging.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # External FoodMart database
    db_host: str = Field("localhost", alias="DB_HOST")
    db_port: int = Field(5432, alias="DB_PORT")
    db_user: str = Field("postgres", alias="DB_USER")
    db_password: str = Field("postgres", alias="DB_PASSWORD")
    db_name: str = Field("foodmart", alias="DB_NAME")
    foodmart_schema: str = Field("foodmart", alias="FOODMART_SCHEMA")

    # Tables copied into the in-memory clone
    clone_tables: List[str] = Field(
        default_factory=lambda: ["customer", "product", "sales_fact_1997"],
        alias="CLONE_TABLES",
    )

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
