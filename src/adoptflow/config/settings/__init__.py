"""Config settings – 12-factor env-based configuration."""
from adoptflow.config.settings.base import Settings
from adoptflow.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from adoptflow.config.settings.pipeline import PipelineSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PipelineSettings",
    "Settings",
    "SettingsLoader",
]
