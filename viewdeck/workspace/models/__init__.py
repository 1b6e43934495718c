"""Data models for the workspace core."""

from viewdeck.workspace.models.device import Device
from viewdeck.workspace.models.enums import (
    DeviceCapability,
    DeviceOS,
    DeviceSource,
    DeviceType,
    DisplayMode,
    DrawerContent,
    EventKind,
    FilterField,
    Layout,
)
from viewdeck.workspace.models.events import (
    AddCustomDevice,
    DeleteCustomDevice,
    SetActiveDevices,
    SetAddress,
    SetDrawerContent,
    SetFilters,
    SetHomepage,
    SetInspectingStatus,
    SetInspectorConfig,
    SetNavigatorStatus,
    SetPreviewerConfig,
    SetScrollPosition,
    SetUserPreferences,
    SetZoomLevel,
    WorkspaceEvent,
    parse_event,
)
from viewdeck.workspace.models.state import (
    DrawerState,
    InspectorConfig,
    NavigatorStatus,
    PreviewerConfig,
    ScrollPosition,
    UserPreferences,
    WindowBounds,
    WindowSize,
    WorkspaceState,
)

__all__ = [
    # Events
    "AddCustomDevice",
    "DeleteCustomDevice",
    # Devices
    "Device",
    "DeviceCapability",
    "DeviceOS",
    "DeviceSource",
    "DeviceType",
    # Enums
    "DisplayMode",
    "DrawerContent",
    # State
    "DrawerState",
    "EventKind",
    "FilterField",
    "InspectorConfig",
    "Layout",
    "NavigatorStatus",
    "PreviewerConfig",
    "ScrollPosition",
    "SetActiveDevices",
    "SetAddress",
    "SetDrawerContent",
    "SetFilters",
    "SetHomepage",
    "SetInspectingStatus",
    "SetInspectorConfig",
    "SetNavigatorStatus",
    "SetPreviewerConfig",
    "SetScrollPosition",
    "SetUserPreferences",
    "SetZoomLevel",
    "UserPreferences",
    "WindowBounds",
    "WindowSize",
    "WorkspaceEvent",
    "WorkspaceState",
    "parse_event",
]
