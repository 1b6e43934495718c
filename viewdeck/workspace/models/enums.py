"""Shared enumerations used across the workspace core."""

from __future__ import annotations

from enum import StrEnum

# -- Inspector ---------------------------------------------------------------


class DisplayMode(StrEnum):
    """Where the inspector window is docked."""

    BOTTOM = "BOTTOM"
    RIGHT = "RIGHT"
    UNDOCKED = "UNDOCKED"


# -- Previewer ---------------------------------------------------------------


class Layout(StrEnum):
    """Arrangement of device previews.

    Only INDIVIDUAL is special-cased by the reducer (zoom transfer).
    """

    FLEXIGRID = "FLEXIGRID"
    HORIZONTAL = "HORIZONTAL"
    INDIVIDUAL = "INDIVIDUAL"


class DrawerContent(StrEnum):
    DEVICE_MANAGER = "DEVICE_MANAGER"
    USER_PREFERENCES = "USER_PREFERENCES"


# -- Devices -----------------------------------------------------------------


class FilterField(StrEnum):
    OS = "OS"
    DEVICE_TYPE = "DEVICE_TYPE"


class DeviceOS(StrEnum):
    IOS = "iOS"
    ANDROID = "Android"
    WINDOWS_PHONE = "Windows Phone"
    PC = "PC"


class DeviceType(StrEnum):
    PHONE = "phone"
    TABLET = "tablet"
    NOTEBOOK = "notebook"
    DESKTOP = "desktop"


class DeviceCapability(StrEnum):
    TOUCH = "touch"
    MOBILE = "mobile"
    RESPONSIVE = "responsive"


class DeviceSource(StrEnum):
    BUILT_IN = "built_in"
    CUSTOM = "custom"


# -- Events ------------------------------------------------------------------


class EventKind(StrEnum):
    """Kinds of events understood by the workspace reducer."""

    # Navigation
    SET_ADDRESS = "set_address"
    SET_HOMEPAGE = "set_homepage"
    SET_ZOOM_LEVEL = "set_zoom_level"
    SET_SCROLL_POSITION = "set_scroll_position"
    SET_NAVIGATOR_STATUS = "set_navigator_status"

    # Panels
    SET_DRAWER_CONTENT = "set_drawer_content"
    SET_PREVIEWER_CONFIG = "set_previewer_config"

    # Devices
    SET_ACTIVE_DEVICES = "set_active_devices"
    ADD_CUSTOM_DEVICE = "add_custom_device"
    DELETE_CUSTOM_DEVICE = "delete_custom_device"
    SET_FILTERS = "set_filters"

    # Preferences
    SET_USER_PREFERENCES = "set_user_preferences"

    # Inspector
    SET_INSPECTOR_CONFIG = "set_inspector_config"
    SET_INSPECTING_STATUS = "set_inspecting_status"
