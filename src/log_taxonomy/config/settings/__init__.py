"""Config settings – env-based generator configuration."""
from log_taxonomy.config.settings.base import GeneratorSettings, Settings
from log_taxonomy.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "GeneratorSettings", "Settings", "SettingsLoader"]
