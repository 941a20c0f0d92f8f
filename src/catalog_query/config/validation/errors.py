"""Config validation errors.

Both concrete errors carry the offending setting under ``detail["setting"]``
so log lines and health endpoints can report it without parsing messages.
"""
from __future__ import annotations

from catalog_query.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or built."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"No value for required setting {setting_name!r}",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """The value is present (and parsed) but outside what the catalog accepts."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
