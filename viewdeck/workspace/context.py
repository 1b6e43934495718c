"""Workspace context.

Bundles the collaborators the reducer needs -- store, device catalog,
active-device cache, homepage persistence and inspector geometry -- into one
explicit object.  The reducer receives it as an argument instead of reaching
for module-level globals, so tests and multiple windows can each own an
isolated context.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from viewdeck.workspace.catalog import DeviceCatalog
from viewdeck.workspace.geometry import InspectorGeometry
from viewdeck.workspace.managers.devices import ActiveDeviceCache
from viewdeck.workspace.managers.homepage import DEFAULT_HOMEPAGE, StoreHomepage

if TYPE_CHECKING:
    from viewdeck.workspace.managers.homepage import HomepagePersistence
    from viewdeck.workspace.screen import ScreenMetricsProvider
    from viewdeck.workspace.store.base import KeyValueStore

DEFAULT_ZOOM_LEVEL = 0.6


@dataclass
class WorkspaceContext:
    """Collaborators shared by every reducer call of one workspace."""

    store: KeyValueStore
    catalog: DeviceCatalog
    active_devices: ActiveDeviceCache
    homepage: HomepagePersistence
    geometry: InspectorGeometry
    default_zoom_level: float = DEFAULT_ZOOM_LEVEL

    @classmethod
    def create(
        cls,
        store: KeyValueStore,
        screen: ScreenMetricsProvider,
        *,
        catalog: DeviceCatalog | None = None,
        homepage: HomepagePersistence | None = None,
        default_homepage: str = DEFAULT_HOMEPAGE,
        default_zoom_level: float = DEFAULT_ZOOM_LEVEL,
    ) -> WorkspaceContext:
        """Wire the default store-backed collaborators around *store*.

        The screen work area is queried exactly once, here.
        """
        catalog = catalog or DeviceCatalog(store)
        return cls(
            store=store,
            catalog=catalog,
            active_devices=ActiveDeviceCache(store, catalog),
            homepage=homepage or StoreHomepage(store, default=default_homepage),
            geometry=InspectorGeometry(screen.primary_work_area_size()),
            default_zoom_level=default_zoom_level,
        )
