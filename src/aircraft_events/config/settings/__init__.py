"""Config settings – 12-factor env-based configuration."""
from aircraft_events.config.settings.base import Settings
from aircraft_events.config.settings.factory import SettingsFactory
from aircraft_events.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
