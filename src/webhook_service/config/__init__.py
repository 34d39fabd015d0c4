"""Dispatcher configuration."""

from webhook_service.config.loader import load_settings
from webhook_service.config.settings import BaseConfig, DispatcherSettings

__all__ = [
    "BaseConfig",
    "DispatcherSettings",
    "load_settings",
]
