"""Config – 12-factor settings and loaders."""

from catalog_query.config.catalog import CatalogSettings
from catalog_query.config.settings import EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from catalog_query.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "CatalogSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
