from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from northwind.settings.modules.api_settings import ApiSettings
from northwind.settings.modules.database_settings import DatabaseSettings
from northwind.settings.modules.logging_settings import LoggingSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    database: DatabaseSettings
    api: ApiSettings
    logging: LoggingSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings(
        database=DatabaseSettings(),
        api=ApiSettings(),
        logging=LoggingSettings(),
    )
