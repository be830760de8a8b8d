from __future__ import annotations

from typing import List

from pydantic_settings import SettingsConfigDict

from northwind.settings.base import NorthwindBaseSettings


class ApiSettings(NorthwindBaseSettings):
    """HTTP layer settings (API_ prefix)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        extra="ignore",
    )

    title: str = "Northwind Orders API"
    version: str = "1.0.0"
    prefix: str = "/api"
    default_page_size: int = 10  # API_DEFAULT_PAGE_SIZE
    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
