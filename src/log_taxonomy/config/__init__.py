"""Config – 12-factor generator settings and loaders."""

from log_taxonomy.config.settings import EnvSettingsLoader, GeneratorSettings, Settings, SettingsLoader
from log_taxonomy.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "GeneratorSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
