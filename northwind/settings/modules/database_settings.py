from __future__ import annotations

from pydantic_settings import SettingsConfigDict

from northwind.settings.base import NorthwindBaseSettings


class DatabaseSettings(NorthwindBaseSettings):
    """
    Database configuration settings.

    Loaded from environment variables (DB_ prefix) or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        extra="ignore",
    )

    # Database URL
    database_url: str = "sqlite+aiosqlite:///./northwind.db"  # DB_DATABASE_URL

    # Connection pool
    pool_pre_ping: bool = True

    # Echo SQL (for debugging)
    echo_sql: bool = False

    # remove_order deletes the order's detail rows first. When disabled the
    # foreign key rejects removing an order that still has detail rows.
    cascade_order_details: bool = True  # DB_CASCADE_ORDER_DETAILS

    # Create missing tables on startup
    create_tables: bool = True
