"""Key-value store interface for persisted workspace settings.

The store is the durable source of truth across restarts.  Values are plain
JSON-compatible data (strings, numbers, lists, dicts).  The interface is
synchronous: the reducer runs serially and every call is expected to complete
immediately.

Keys used by the workspace core:
    active-devices    ordered list of active device names
    user-preferences  preferences object
    custom-devices    ordered list of user-defined device descriptors
    homepage          homepage URL
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

ACTIVE_DEVICES = "active-devices"
USER_PREFERENCES = "user-preferences"
CUSTOM_DEVICES = "custom-devices"
HOMEPAGE = "homepage"

PERSISTED_KEYS = (ACTIVE_DEVICES, USER_PREFERENCES, CUSTOM_DEVICES, HOMEPAGE)


class StoreError(OSError):
    """Raised when the backing storage cannot be read or written."""


class StoreCorruptedError(StoreError):
    """Raised when persisted data exists but cannot be decoded."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Synchronous protocol for reading and writing settings by key."""

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under *key*, or *default* if absent."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...

    def has(self, key: str) -> bool:
        """Check whether a value exists for *key*."""
        ...

    def delete(self, key: str) -> None:
        """Remove *key*.  No-op if not found."""
        ...
