"""Config settings – 12-factor env-based configuration."""
from cyclekit.config.settings.base import Settings
from cyclekit.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
