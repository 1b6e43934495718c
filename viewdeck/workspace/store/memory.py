"""In-memory settings store.

Nothing survives the process.  Used for ephemeral sessions
(``VIEWDECK_STORE=memory``) and as the test double for the store protocol.
"""

from __future__ import annotations

import copy
from typing import Any


class MemoryStore:
    """Dict-backed implementation of the KeyValueStore protocol.

    Values are deep-copied on the way in and out so callers can never mutate
    stored data through a shared reference.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def has(self, key: str) -> bool:
        return key in self._data

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
