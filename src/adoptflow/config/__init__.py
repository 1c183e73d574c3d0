"""Config – 12-factor settings and loaders."""

from adoptflow.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    PipelineSettings,
    Settings,
    SettingsLoader,
)
from adoptflow.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PipelineSettings",
    "Settings",
    "SettingsLoader",
]
