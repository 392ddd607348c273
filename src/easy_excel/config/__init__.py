"""Config – export settings, loaders and validation errors."""

from easy_excel.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ExportSettings,
    Settings,
    SettingsLoader,
)
from easy_excel.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
