"""Config settings – 12-factor env-based configuration."""
from simple_cqrs.config.settings.base import LoggingSettings, Settings
from simple_cqrs.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
