"""Configuration module."""

from .settings import (
    HostDiffSettings,
    StorageSettings,
    ServerSettings,
    ReportSettings,
    DEFAULT_SETTINGS,
    LOG_FORMAT
)

__all__ = [
    "HostDiffSettings",
    "StorageSettings",
    "ServerSettings",
    "ReportSettings",
    "DEFAULT_SETTINGS",
    "LOG_FORMAT"
]
