"""Config settings – PaginationSettings (``MAX_LIMIT_PAGINATE``)."""
from __future__ import annotations

import dataclasses

from response_commons.config.settings.base import Settings
from response_commons.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from response_commons.config.validation import ConfigError
from response_commons.observability.logging import get_logger

DEFAULT_MAX_LIMIT = 100

_log = get_logger(__name__)


@dataclasses.dataclass
class PaginationSettings(Settings):
    """Upper bound for the page size accepted by ``FilterOptions.validate``."""

    max_limit_paginate: int = DEFAULT_MAX_LIMIT

    def _validate(self) -> None:
        if self.max_limit_paginate < 1:
            self.max_limit_paginate = DEFAULT_MAX_LIMIT

    @classmethod
    def from_env(cls, loader: SettingsLoader | None = None) -> "PaginationSettings":
        """Read ``MAX_LIMIT_PAGINATE``; unusable values fall back to the default."""
        try:
            return (loader or EnvSettingsLoader()).load(cls)
        except ConfigError as exc:
            _log.warning("pagination.settings_fallback", error=exc.message, max_limit=DEFAULT_MAX_LIMIT)
            return cls()


def get_max_limit(loader: SettingsLoader | None = None) -> int:
    return PaginationSettings.from_env(loader).max_limit_paginate


__all__ = ["DEFAULT_MAX_LIMIT", "PaginationSettings", "get_max_limit"]
