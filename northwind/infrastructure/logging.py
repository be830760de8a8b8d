"""
Logging infrastructure.

Provides logging utilities for the service.
"""
import logging
from typing import Optional

from northwind.settings import LoggingSettings, get_app_settings


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure the root logger once for the whole process.

    Args:
        settings: Logging settings; defaults to the application settings
    """
    settings = settings or get_app_settings().logging
    logging.basicConfig(
        level=settings.level.upper(),
        format=settings.format,
    )

