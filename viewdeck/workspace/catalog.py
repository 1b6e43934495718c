"""Device catalog.

The catalog is the full set of known device profiles: user-defined devices
from the ``custom-devices`` store key (newest first), followed by the fixed
built-in table below.  It is recomputed on every call so custom-device
mutations are visible immediately.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from viewdeck.workspace.managers.custom_devices import load_custom_devices
from viewdeck.workspace.models.device import Device
from viewdeck.workspace.models.enums import DeviceCapability, DeviceOS, DeviceType, FilterField

if TYPE_CHECKING:
    from viewdeck.workspace.store.base import KeyValueStore

_TOUCH_MOBILE = [DeviceCapability.TOUCH, DeviceCapability.MOBILE]
_RESPONSIVE = [DeviceCapability.RESPONSIVE]

_IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 13_2_3 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/13.0.3 Mobile/15E148 Safari/604.1"
)
_IPAD_UA = (
    "Mozilla/5.0 (iPad; CPU OS 11_0 like Mac OS X) AppleWebKit/604.1.34 "
    "(KHTML, like Gecko) Version/11.0 Mobile/15A5341f Safari/604.1"
)
_ANDROID_UA = (
    "Mozilla/5.0 (Linux; Android 8.0.0; Pixel 2 Build/OPD3.170816.012) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/80.0.3987.87 Mobile Safari/537.36"
)
_ANDROID_TABLET_UA = (
    "Mozilla/5.0 (Linux; Android 6.0.1; Nexus 10 Build/MOB31T) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/80.0.3987.87 Safari/537.36"
)
_LUMIA_UA = (
    "Mozilla/5.0 (Windows Phone 10.0; Android 4.2.1; Microsoft; Lumia 950) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/46.0.2486.0 Mobile Safari/537.36 Edge/13.10586"
)

BUILTIN_DEVICES: tuple[Device, ...] = (
    Device(id="1", name="iPhone X", width=375, height=812, added=True, user_agent=_IPHONE_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.IOS, type=DeviceType.PHONE),
    Device(id="2", name="iPhone 6/7/8", width=375, height=667, user_agent=_IPHONE_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.IOS, type=DeviceType.PHONE),
    Device(id="3", name="iPhone 6/7/8 Plus", width=414, height=736, user_agent=_IPHONE_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.IOS, type=DeviceType.PHONE),
    Device(id="4", name="iPhone 5/SE", width=320, height=568, user_agent=_IPHONE_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.IOS, type=DeviceType.PHONE),
    Device(id="5", name="iPad", width=768, height=1024, added=True, user_agent=_IPAD_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.IOS, type=DeviceType.TABLET),
    Device(id="6", name="iPad Pro", width=1024, height=1366, user_agent=_IPAD_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.IOS, type=DeviceType.TABLET),
    Device(id="7", name="Pixel 2", width=411, height=731, user_agent=_ANDROID_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.ANDROID, type=DeviceType.PHONE),
    Device(id="8", name="Pixel 2 XL", width=411, height=823, user_agent=_ANDROID_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.ANDROID, type=DeviceType.PHONE),
    Device(id="9", name="Galaxy S9/S9+", width=360, height=740, added=True, user_agent=_ANDROID_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.ANDROID, type=DeviceType.PHONE),
    Device(id="10", name="Nexus 10", width=800, height=1280, user_agent=_ANDROID_TABLET_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.ANDROID, type=DeviceType.TABLET),
    Device(id="11", name="Microsoft Lumia 950", width=360, height=640, user_agent=_LUMIA_UA,
           capabilities=_TOUCH_MOBILE, os=DeviceOS.WINDOWS_PHONE, type=DeviceType.PHONE),
    Device(id="12", name="Laptop with touch", width=1280, height=950, added=True,
           capabilities=[DeviceCapability.TOUCH, *_RESPONSIVE], type=DeviceType.NOTEBOOK),
    Device(id="13", name="Laptop with HiDPI screen", width=1440, height=900,
           capabilities=_RESPONSIVE, type=DeviceType.NOTEBOOK),
    Device(id="14", name="Laptop with MDPI screen", width=1280, height=800,
           capabilities=_RESPONSIVE, type=DeviceType.NOTEBOOK),
    Device(id="15", name="Desktop 1080p", width=1920, height=1080,
           capabilities=_RESPONSIVE, type=DeviceType.DESKTOP),
)  # fmt: skip


class DeviceCatalog:
    """Store-backed catalog: custom devices first, then built-ins."""

    def __init__(self, store: KeyValueStore, builtins: Iterable[Device] = BUILTIN_DEVICES) -> None:
        self._store = store
        self._builtins = tuple(builtins)

    def list_all_devices(self) -> list[Device]:
        return [*load_custom_devices(self._store), *self._builtins]

    def find(self, name: str) -> Device | None:
        """Return the first device with *name*, or None."""
        return next((d for d in self.list_all_devices() if d.name == name), None)

    def default_devices(self) -> list[Device]:
        """Devices flagged ``added`` (the default active set)."""
        return [d for d in self.list_all_devices() if d.added]


def filter_devices(devices: Iterable[Device], filters: Mapping[FilterField, list[str]]) -> list[Device]:
    """Keep devices matching every non-empty filter field.

    An empty (or missing) value list places no restriction on that field.
    """
    os_values = set(filters.get(FilterField.OS) or [])
    type_values = set(filters.get(FilterField.DEVICE_TYPE) or [])
    return [
        d
        for d in devices
        if (not os_values or d.os in os_values) and (not type_values or d.type in type_values)
    ]
