"""Configuration package for runtime settings, logging and startup validation."""

from .log_setup import config_configure_logging
from .settings import DEFAULT_APPLICATION_PORT, AppSettings, SettingsLoadError, config_load_settings

__all__ = [
    "AppSettings",
    "DEFAULT_APPLICATION_PORT",
    "SettingsLoadError",
    "config_configure_logging",
    "config_load_settings",
]
