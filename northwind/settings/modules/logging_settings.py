from __future__ import annotations

from pydantic_settings import SettingsConfigDict

from northwind.settings.base import NorthwindBaseSettings


class LoggingSettings(NorthwindBaseSettings):
    """Logging settings (LOG_ prefix)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOG_",
        extra="ignore",
    )

    level: str = "INFO"  # LOG_LEVEL
    format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
