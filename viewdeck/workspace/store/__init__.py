"""Key-value store implementations for persisted workspace settings."""

from viewdeck.workspace.store.base import KeyValueStore, StoreCorruptedError, StoreError
from viewdeck.workspace.store.local import LocalSettingsStore
from viewdeck.workspace.store.memory import MemoryStore

__all__ = ["KeyValueStore", "LocalSettingsStore", "MemoryStore", "StoreCorruptedError", "StoreError"]
