"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import re
import typing
from typing import Any, Mapping, TypeVar

from response_commons.config.settings.base import Settings
from response_commons.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})
# plain base-10 digits: no whitespace, no "_" separators
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _coerce(raw: str, type_hint: Any) -> Any:
    """Convert *raw* to *type_hint*; raises ``ValueError`` when it cannot."""
    if type_hint is bool:
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"not a boolean: {raw!r}")
    if type_hint is int:
        if not _INT_RE.fullmatch(raw):
            raise ValueError(f"not an integer: {raw!r}")
        return int(raw)
    if type_hint is float:
        return float(raw.strip())
    if typing.get_origin(type_hint) is list:
        return [part.strip() for part in raw.split(",") if part.strip()]
    return raw


def _has_default(field: dataclasses.Field[Any]) -> bool:
    return field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read each dataclass field from ``<PREFIX>_<FIELD>``, upper-cased.

    Fields without a variable keep their default. ``int``, ``float``,
    ``bool`` and ``list[str]`` (comma separated) are converted; anything
    else is passed through as the raw string. *environ* defaults to
    :data:`os.environ`, read at :meth:`load` time.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    @staticmethod
    def env_key(settings_class: type[Settings], field_name: str) -> str:
        prefix = getattr(settings_class, "_prefix", "")
        return "_".join(part for part in (prefix, field_name) if part).upper()

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = self.env_key(settings_class, field.name)
            raw = environ.get(key)
            if raw is None:
                if not _has_default(field):
                    raise MissingRequiredSettingError(key)
                continue
            try:
                kwargs[field.name] = _coerce(raw, hints.get(field.name, str))
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Layer a ``.env`` file under the process environment.

    Real environment variables win unless *override* is set. The process
    environment itself is never modified.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import dotenv_values  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError("Install 'response-commons[dotenv]' to use DotenvSettingsLoader") from exc

        from_file = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            environ = {**os.environ, **from_file}
        else:
            environ = {**from_file, **os.environ}
        return EnvSettingsLoader(environ).load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
