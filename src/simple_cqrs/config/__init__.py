"""Config – 12-factor settings and loaders."""

from simple_cqrs.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from simple_cqrs.config.settings import (
    EnvSettingsLoader,
    LoggingSettings,
    Settings,
    SettingsLoader,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
