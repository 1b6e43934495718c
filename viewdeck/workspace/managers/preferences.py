"""User-preferences persistence (``user-preferences`` key)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger
from pydantic import ValidationError

from viewdeck.workspace.models.state import UserPreferences
from viewdeck.workspace.store.base import USER_PREFERENCES

if TYPE_CHECKING:
    from viewdeck.workspace.store.base import KeyValueStore


def load_user_preferences(store: KeyValueStore) -> UserPreferences:
    """Return persisted preferences, or defaults when absent or unreadable."""
    raw = store.get(USER_PREFERENCES)
    if not raw:
        return UserPreferences()
    try:
        return UserPreferences.model_validate(raw)
    except ValidationError:
        logger.warning("Ignoring unreadable user preferences: {!r}", raw)
        return UserPreferences()


def save_user_preferences(store: KeyValueStore, preferences: UserPreferences) -> None:
    store.set(USER_PREFERENCES, preferences.model_dump(mode="json"))
