"""Errors raised while loading or validating generator settings."""
from __future__ import annotations

from log_taxonomy.kernel.errors import BaseError


class ConfigError(BaseError):
    """Generator settings could not be loaded or are inconsistent."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, env_key: str, settings_name: str) -> None:
        super().__init__(
            f"{settings_name} needs environment variable {env_key}",
            detail={"env_key": env_key, "settings": settings_name},
        )
        self.env_key = env_key
        self.settings_name = settings_name


class InvalidSettingValueError(ConfigError):
    """A settings field received a value it cannot use."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
