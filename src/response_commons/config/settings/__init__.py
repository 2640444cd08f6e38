"""Config settings – 12-factor env-based configuration."""
from response_commons.config.settings.base import Settings
from response_commons.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from response_commons.config.settings.pagination import DEFAULT_MAX_LIMIT, PaginationSettings, get_max_limit

__all__ = [
    "DEFAULT_MAX_LIMIT",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PaginationSettings",
    "Settings",
    "SettingsLoader",
    "get_max_limit",
]
