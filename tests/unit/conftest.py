"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clear_max_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests start without ``MAX_LIMIT_PAGINATE`` so the default (100) applies."""
    monkeypatch.delenv("MAX_LIMIT_PAGINATE", raising=False)
