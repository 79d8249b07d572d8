"""Config settings – Settings base class and the library's own settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from simple_cqrs.config.errors import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging configuration, read from ``SIMPLE_CQRS_*`` variables.

    ``log_level`` is a stdlib level name; ``log_json`` switches between the
    JSON renderer and structlog's console renderer.
    """

    _prefix: ClassVar[str] = "SIMPLE_CQRS"

    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LEVELS)}"
            )

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["LoggingSettings", "Settings"]
