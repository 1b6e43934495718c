"""Workspace state reducer.

``reduce(state, event, ctx)`` maps one event and the prior snapshot to the
next snapshot.  Each event kind replaces one state fragment; a few also write
through to the store (homepage, drawer flag, preferences, active and custom
devices).  Unrecognized events return the prior snapshot object unchanged.

Persistence always happens *before* the new snapshot is built.  If a store
write raises, the exception propagates and no new snapshot exists, so the
caller's current snapshot and the store never diverge.

Zoom transfer for the INDIVIDUAL layout:

- entering INDIVIDUAL: ``zoom_level = 1``, prior zoom saved in
  ``previous_zoom_level``;
- leaving INDIVIDUAL: ``zoom_level`` restored from ``previous_zoom_level``,
  which is then cleared.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

from viewdeck.workspace.managers.custom_devices import add_custom_device, delete_custom_device
from viewdeck.workspace.managers.preferences import load_user_preferences, save_user_preferences
from viewdeck.workspace.models.enums import DisplayMode, Layout
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
)
from viewdeck.workspace.models.state import (
    DrawerState,
    InspectorConfig,
    PreviewerConfig,
    WorkspaceState,
)

if TYPE_CHECKING:
    from viewdeck.workspace.context import WorkspaceContext

INDIVIDUAL_ZOOM_LEVEL = 1.0


# ---------------------------------------------------------------------------
# Initial snapshot
# ---------------------------------------------------------------------------


def initial_state(ctx: WorkspaceContext) -> WorkspaceState:
    """Build the first snapshot from store-backed defaults and catalog queries."""
    preferences = load_user_preferences(ctx.store)
    homepage = ctx.homepage.get_homepage()
    mode = DisplayMode.BOTTOM

    return WorkspaceState(
        devices=ctx.active_devices.get_active_devices(),
        all_devices=ctx.catalog.list_all_devices(),
        homepage=homepage,
        address=homepage,
        zoom_level=ctx.default_zoom_level,
        drawer=DrawerState(open=True if preferences.drawer_state is None else preferences.drawer_state),
        previewer=PreviewerConfig(layout=Layout.FLEXIGRID),
        user_preferences=preferences,
        inspector_config=InspectorConfig(
            size=ctx.geometry.default_size(mode),
            open=False,
            mode=mode,
            bounds=ctx.geometry.bounds(mode),
        ),
    )


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def reduce(state: WorkspaceState, event: Any, ctx: WorkspaceContext) -> WorkspaceState:
    """Apply *event* to *state* and return the next snapshot."""
    match event:
        case SetAddress(address=address):
            return state.model_copy(update={"address": address})

        case SetHomepage(homepage=homepage):
            ctx.homepage.save_homepage(homepage)
            return state.model_copy(update={"homepage": homepage})

        case SetZoomLevel(zoom_level=zoom_level):
            return state.model_copy(update={"zoom_level": zoom_level})

        case SetScrollPosition(scroll_position=scroll_position):
            return state.model_copy(update={"scroll_position": scroll_position})

        case SetNavigatorStatus(navigator_status=navigator_status):
            return state.model_copy(update={"navigator_status": navigator_status})

        case SetDrawerContent(drawer=drawer):
            # Only the persisted preferences learn the drawer flag; the
            # snapshot's user_preferences is left as-is.
            save_user_preferences(ctx.store, state.user_preferences.model_copy(update={"drawer_state": drawer.open}))
            return state.model_copy(update={"drawer": drawer})

        case SetPreviewerConfig(previewer=previewer):
            return state.model_copy(update=_previewer_update(state, previewer))

        case SetActiveDevices(devices=devices):
            ctx.active_devices.save_active_devices(devices)
            # Read back so an empty selection resolves to the catalog defaults.
            return state.model_copy(update={"devices": ctx.active_devices.get_active_devices()})

        case AddCustomDevice(device=device):
            add_custom_device(ctx.store, device)
            return state.model_copy(update={"all_devices": ctx.catalog.list_all_devices()})

        case DeleteCustomDevice(device_id=device_id):
            delete_custom_device(ctx.store, device_id)
            return state.model_copy(update={"all_devices": ctx.catalog.list_all_devices()})

        case SetFilters(filters=filters):
            return state.model_copy(update={"filters": filters})

        case SetUserPreferences(user_preferences=preferences):
            save_user_preferences(ctx.store, preferences)
            return state.model_copy(update={"user_preferences": preferences})

        case SetInspectorConfig(config=config):
            return state.model_copy(update={"inspector_config": config})

        case SetInspectingStatus(status=status):
            return state.model_copy(update={"is_inspecting": status})

        case _:
            logger.debug("Ignoring unrecognized event {!r}", event)
            return state


def _previewer_update(state: WorkspaceState, previewer: PreviewerConfig) -> dict[str, Any]:
    """Build the update for a previewer change, including the zoom transfer."""
    update: dict[str, Any] = {"previewer": previewer}
    was_individual = state.previewer.layout == Layout.INDIVIDUAL
    is_individual = previewer.layout == Layout.INDIVIDUAL

    if not was_individual and is_individual:
        update["zoom_level"] = INDIVIDUAL_ZOOM_LEVEL
        update["previous_zoom_level"] = state.zoom_level
    elif was_individual and not is_individual:
        # A snapshot that started in INDIVIDUAL has nothing saved; keep the zoom.
        if state.previous_zoom_level is not None:
            update["zoom_level"] = state.previous_zoom_level
        update["previous_zoom_level"] = None
    return update
