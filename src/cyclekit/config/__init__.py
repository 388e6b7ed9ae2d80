"""Config – env-based settings and their validation errors."""

from cyclekit.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from cyclekit.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
