"""Config settings – env-based export configuration."""
from easy_excel.config.settings.base import Settings
from easy_excel.config.settings.export import ExportSettings
from easy_excel.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ExportSettings", "Settings", "SettingsLoader"]
