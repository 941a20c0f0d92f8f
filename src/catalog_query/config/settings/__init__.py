"""Config settings – env-based configuration."""
from catalog_query.config.settings.base import Settings
from catalog_query.config.settings.factory import SettingsFactory
from catalog_query.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
