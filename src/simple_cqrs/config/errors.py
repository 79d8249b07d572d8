"""Config errors."""
from __future__ import annotations

from typing import Any

from simple_cqrs.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be loaded or is invalid."""

    default_code = "config_error"

    def __init__(self, message: str, *, setting_name: str | None = None, **kwargs: Any) -> None:
        detail = {"setting": setting_name} if setting_name else None
        super().__init__(message, detail=detail, **kwargs)
        self.setting_name = setting_name


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", setting_name=setting_name)


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            setting_name=setting_name,
        )
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
