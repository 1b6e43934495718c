"""Custom-device list operations.

User-defined devices are persisted as raw descriptors under the
``custom-devices`` key, newest first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger
from pydantic import ValidationError

from viewdeck.workspace.models.device import Device
from viewdeck.workspace.models.enums import DeviceSource
from viewdeck.workspace.store.base import CUSTOM_DEVICES

if TYPE_CHECKING:
    from viewdeck.workspace.store.base import KeyValueStore


def _raw_custom_devices(store: KeyValueStore) -> list[Any]:
    raw = store.get(CUSTOM_DEVICES)
    if not isinstance(raw, list):
        return []
    return raw


def load_custom_devices(store: KeyValueStore) -> list[Device]:
    """Parse persisted custom devices.  Entries that fail to parse are skipped."""
    devices = []
    for entry in _raw_custom_devices(store):
        try:
            device = Device.model_validate(entry)
        except ValidationError as exc:
            logger.warning("Skipping unreadable custom device {!r}: {} errors", entry, exc.error_count())
            continue
        devices.append(device)
    return devices


def add_custom_device(store: KeyValueStore, device: Device) -> None:
    """Prepend *device* to the persisted custom-device list."""
    descriptor = device.model_copy(update={"source": DeviceSource.CUSTOM}).model_dump(mode="json")
    store.set(CUSTOM_DEVICES, [descriptor, *_raw_custom_devices(store)])
    logger.debug("Custom device added: {} ({})", device.name, device.id)


def delete_custom_device(store: KeyValueStore, device_id: str) -> None:
    """Remove every persisted custom device whose id matches *device_id*."""
    remaining = [
        entry
        for entry in _raw_custom_devices(store)
        if not (isinstance(entry, dict) and str(entry.get("id")) == str(device_id))
    ]
    store.set(CUSTOM_DEVICES, remaining)
    logger.debug("Custom device removed: {}", device_id)
