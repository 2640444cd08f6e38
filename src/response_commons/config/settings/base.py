"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses declare one dataclass field per variable; ``_prefix`` is
    prepended to the upper-cased field name to form the environment key.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to normalise or cross-check fields."""


__all__ = ["Settings"]
