"""Workspace state snapshot models.

Every model here is frozen.  The reducer never mutates a snapshot; it builds
the next one with ``model_copy(update=...)`` so untouched sub-models are
shared between consecutive snapshots.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from viewdeck.workspace.models.device import Device
from viewdeck.workspace.models.enums import DisplayMode, DrawerContent, FilterField, Layout

_FROZEN = ConfigDict(frozen=True)

# -- Geometry ----------------------------------------------------------------


class WindowSize(BaseModel):
    model_config = _FROZEN

    width: float
    height: float


class WindowBounds(BaseModel):
    """Absolute pixel rectangle of the inspector window."""

    model_config = _FROZEN

    x: float
    y: float
    width: float
    height: float


# -- Navigation --------------------------------------------------------------


class ScrollPosition(BaseModel):
    model_config = _FROZEN

    x: float = 0
    y: float = 0


class NavigatorStatus(BaseModel):
    model_config = _FROZEN

    back_enabled: bool = False
    forward_enabled: bool = False


# -- Panels ------------------------------------------------------------------


class DrawerState(BaseModel):
    model_config = _FROZEN

    open: bool = True
    content: DrawerContent = DrawerContent.DEVICE_MANAGER


class PreviewerConfig(BaseModel):
    model_config = _FROZEN

    layout: Layout = Layout.FLEXIGRID


class UserPreferences(BaseModel):
    """Preferences persisted as one object under ``user-preferences``."""

    model_config = _FROZEN

    disable_ssl_validation: bool = False
    drawer_state: bool | None = Field(default=None, description="Last drawer open flag; None = never set")


class InspectorConfig(BaseModel):
    """Dock mode and geometry of the inspector window.

    ``bounds`` reflects ``mode``/``size`` at the time it was computed and is
    never recomputed implicitly.
    """

    model_config = _FROZEN

    size: WindowSize
    open: bool = False
    device_id: str | None = None
    web_view_id: int | None = None
    mode: DisplayMode = DisplayMode.BOTTOM
    bounds: WindowBounds


def empty_filters() -> dict[FilterField, list[str]]:
    return {FilterField.OS: [], FilterField.DEVICE_TYPE: []}


# -- Root snapshot -----------------------------------------------------------


class WorkspaceState(BaseModel):
    """One immutable snapshot of the whole workspace."""

    model_config = _FROZEN

    devices: list[Device] = Field(description="Active devices, in display order")
    all_devices: list[Device] = Field(description="Full catalog: custom devices first, then built-ins")
    homepage: str
    address: str
    zoom_level: float = 0.6
    previous_zoom_level: float | None = None
    scroll_position: ScrollPosition = Field(default_factory=ScrollPosition)
    navigator_status: NavigatorStatus = Field(default_factory=NavigatorStatus)
    drawer: DrawerState = Field(default_factory=DrawerState)
    previewer: PreviewerConfig = Field(default_factory=PreviewerConfig)
    filters: dict[FilterField, list[str]] = Field(default_factory=empty_filters)
    user_preferences: UserPreferences = Field(default_factory=UserPreferences)
    inspector_config: InspectorConfig
    is_inspecting: bool = False
