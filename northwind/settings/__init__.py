# Settings package
from northwind.settings.modules import (
    ApiSettings,
    AppSettings,
    DatabaseSettings,
    LoggingSettings,
    get_app_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "DatabaseSettings",
    "get_app_settings",
    "LoggingSettings",
]
