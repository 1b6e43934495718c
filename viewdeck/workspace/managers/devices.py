"""Active-device cache.

Memoizes the list of currently active devices so the store is not re-read on
every access, while keeping the store (``active-devices`` key, a list of
device names) as the durable source of truth across restarts.

Resolution on a cache miss:

1. Read the stored names and resolve each against the catalog, preserving
   stored order and silently dropping names the catalog no longer knows.
2. If nothing resolves (key absent, empty, or corrupt), fall back to every
   catalog device flagged ``added``, persist that fallback, and memoize it.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING

from loguru import logger

from viewdeck.workspace.store.base import ACTIVE_DEVICES

if TYPE_CHECKING:
    from viewdeck.workspace.catalog import DeviceCatalog
    from viewdeck.workspace.models.device import Device
    from viewdeck.workspace.store.base import KeyValueStore


class ActiveDeviceCache:
    """Store-backed, memoized list of active devices.

    One instance is owned by each workspace context.  Reads and writes are
    serialized with a re-entrant lock so the memoized value and the store
    never disagree for a concurrent reader.
    """

    def __init__(self, store: KeyValueStore, catalog: DeviceCatalog) -> None:
        self._store = store
        self._catalog = catalog
        self._devices: list[Device] | None = None
        self._lock = threading.RLock()

    # -- Query -----------------------------------------------------------------

    def get_active_devices(self) -> list[Device]:
        """Return the active devices, resolving from the store on a miss."""
        with self._lock:
            if self._devices:
                return list(self._devices)

            devices = self._resolve_stored()
            if not devices:
                devices = self._catalog.default_devices()
                logger.debug("No stored active devices, falling back to {} catalog defaults", len(devices))
                self.save_active_devices(devices)
            else:
                self._devices = devices
            return list(devices)

    # -- Mutation --------------------------------------------------------------

    def save_active_devices(self, devices: Sequence[Device]) -> None:
        """Persist device names in order, then update the memoized value.

        If the store write raises, the memoized value is left untouched.
        """
        with self._lock:
            self._store.set(ACTIVE_DEVICES, [device.name for device in devices])
            self._devices = list(devices)

    def invalidate(self) -> None:
        """Forget the memoized value; the next read goes to the store."""
        with self._lock:
            self._devices = None

    # -- Internals -------------------------------------------------------------

    def _resolve_stored(self) -> list[Device]:
        names = self._store.get(ACTIVE_DEVICES)
        if not isinstance(names, list) or not names:
            return []

        by_name: dict[str, Device] = {}
        for device in self._catalog.list_all_devices():
            by_name.setdefault(device.name, device)

        resolved = []
        for name in names:
            device = by_name.get(name) if isinstance(name, str) else None
            if device is None:
                logger.debug("Dropping stale active device {!r}", name)
                continue
            resolved.append(device)
        return resolved
