"""Configuration module."""

from src.config.logging import configure_logging, get_logger, log_context
from src.config.settings import (
    APISettings,
    LedgerSettings,
    Settings,
    StorageSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "LedgerSettings",
    "StorageSettings",
    "APISettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
    "log_context",
]
