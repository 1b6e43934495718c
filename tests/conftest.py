"""Shared test fixtures: isolated settings and loguru sinks.

Every test starts from a fresh settings cache and no ``VIEWDECK_*``
variables inherited from the developer's shell, so tests only see the
configuration they set themselves via ``monkeypatch``.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from loguru import logger

from viewdeck.workspace.settings import _get_settings_cached


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop inherited VIEWDECK_* env vars and invalidate the settings cache."""
    for key in list(os.environ):
        if key.startswith("VIEWDECK_"):
            monkeypatch.delenv(key)
    _get_settings_cached.cache_clear()
    yield
    _get_settings_cached.cache_clear()


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Remove sinks added during a test (e.g. by ``setup_logging``)."""
    yield
    logger.remove()
