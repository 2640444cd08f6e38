"""Config – 12-factor settings and loaders."""

from response_commons.config.settings import (
    DEFAULT_MAX_LIMIT,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    PaginationSettings,
    Settings,
    SettingsLoader,
    get_max_limit,
)
from response_commons.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DEFAULT_MAX_LIMIT",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PaginationSettings",
    "Settings",
    "SettingsLoader",
    "get_max_limit",
]
