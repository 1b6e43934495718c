"""Workspace event models.

Events form a closed set: one frozen model per :class:`EventKind`, each
carrying the state fragment it replaces.  Raw mappings (CLI input, IPC
payloads) are turned into typed events with :func:`parse_event`::

    {"kind": "set_address", "address": "https://example.com"}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from viewdeck.workspace.models.device import Device
from viewdeck.workspace.models.enums import EventKind, FilterField
from viewdeck.workspace.models.state import (
    DrawerState,
    InspectorConfig,
    NavigatorStatus,
    PreviewerConfig,
    ScrollPosition,
    UserPreferences,
)


class WorkspaceEvent(BaseModel):
    """Base class of all reducer events."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[EventKind]

    def to_payload(self) -> dict[str, Any]:
        """Serialize back to the raw ``{"kind": ..., **payload}`` form."""
        return {"kind": str(self.kind), **self.model_dump(mode="json")}


# -- Navigation --------------------------------------------------------------


class SetAddress(WorkspaceEvent):
    kind = EventKind.SET_ADDRESS

    address: str


class SetHomepage(WorkspaceEvent):
    kind = EventKind.SET_HOMEPAGE

    homepage: str


class SetZoomLevel(WorkspaceEvent):
    kind = EventKind.SET_ZOOM_LEVEL

    zoom_level: float


class SetScrollPosition(WorkspaceEvent):
    kind = EventKind.SET_SCROLL_POSITION

    scroll_position: ScrollPosition


class SetNavigatorStatus(WorkspaceEvent):
    kind = EventKind.SET_NAVIGATOR_STATUS

    navigator_status: NavigatorStatus


# -- Panels ------------------------------------------------------------------


class SetDrawerContent(WorkspaceEvent):
    kind = EventKind.SET_DRAWER_CONTENT

    drawer: DrawerState


class SetPreviewerConfig(WorkspaceEvent):
    kind = EventKind.SET_PREVIEWER_CONFIG

    previewer: PreviewerConfig


# -- Devices -----------------------------------------------------------------


class SetActiveDevices(WorkspaceEvent):
    kind = EventKind.SET_ACTIVE_DEVICES

    devices: list[Device]


class AddCustomDevice(WorkspaceEvent):
    kind = EventKind.ADD_CUSTOM_DEVICE

    device: Device


class DeleteCustomDevice(WorkspaceEvent):
    kind = EventKind.DELETE_CUSTOM_DEVICE

    device_id: str


class SetFilters(WorkspaceEvent):
    kind = EventKind.SET_FILTERS

    filters: dict[FilterField, list[str]]


# -- Preferences -------------------------------------------------------------


class SetUserPreferences(WorkspaceEvent):
    kind = EventKind.SET_USER_PREFERENCES

    user_preferences: UserPreferences


# -- Inspector ---------------------------------------------------------------


class SetInspectorConfig(WorkspaceEvent):
    kind = EventKind.SET_INSPECTOR_CONFIG

    config: InspectorConfig


class SetInspectingStatus(WorkspaceEvent):
    kind = EventKind.SET_INSPECTING_STATUS

    status: bool


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

EVENT_TYPES: dict[EventKind, type[WorkspaceEvent]] = {
    cls.kind: cls
    for cls in (
        SetAddress,
        SetHomepage,
        SetZoomLevel,
        SetScrollPosition,
        SetNavigatorStatus,
        SetDrawerContent,
        SetPreviewerConfig,
        SetActiveDevices,
        AddCustomDevice,
        DeleteCustomDevice,
        SetFilters,
        SetUserPreferences,
        SetInspectorConfig,
        SetInspectingStatus,
    )
}


def parse_event(raw: Mapping[str, Any]) -> WorkspaceEvent | None:
    """Build a typed event from a raw mapping.

    Returns ``None`` when ``kind`` is missing or unknown -- callers treat that
    as a no-op.  A known kind with a malformed payload raises pydantic's
    ``ValidationError``.
    """
    payload = dict(raw)
    kind = payload.pop("kind", None)
    try:
        event_type = EVENT_TYPES[EventKind(kind)]
    except ValueError:
        return None
    return event_type.model_validate(payload)
