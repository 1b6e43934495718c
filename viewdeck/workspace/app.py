"""Workspace bootstrap: build the store, context and session from settings."""

from __future__ import annotations

from loguru import logger

from viewdeck.workspace.context import WorkspaceContext
from viewdeck.workspace.screen import StaticScreenMetrics
from viewdeck.workspace.session import WorkspaceSession
from viewdeck.workspace.settings import ViewdeckSettings, get_settings
from viewdeck.workspace.store.base import KeyValueStore
from viewdeck.workspace.store.local import LocalSettingsStore
from viewdeck.workspace.store.memory import MemoryStore


def create_store(settings: ViewdeckSettings) -> KeyValueStore:
    """Create the store backend selected by configuration."""
    if settings.store == "memory":
        logger.info("Settings store: memory (nothing will be persisted)")
        return MemoryStore()
    logger.info("Settings store: {}", settings.settings_path)
    return LocalSettingsStore(settings.data_root, prefix=settings.data_prefix, filename=settings.settings_file)


def create_context(settings: ViewdeckSettings | None = None, store: KeyValueStore | None = None) -> WorkspaceContext:
    settings = settings or get_settings()
    return WorkspaceContext.create(
        store if store is not None else create_store(settings),
        StaticScreenMetrics(settings.screen_width, settings.screen_height),
        default_homepage=settings.default_homepage,
        default_zoom_level=settings.default_zoom_level,
    )


def create_session(settings: ViewdeckSettings | None = None, store: KeyValueStore | None = None) -> WorkspaceSession:
    """Build a ready-to-use session with its initial snapshot."""
    session = WorkspaceSession(create_context(settings, store))
    screen = session.context.geometry.screen
    logger.debug(
        "Workspace ready: {} active of {} devices, screen {:g}x{:g}",
        len(session.state.devices),
        len(session.state.all_devices),
        screen.width,
        screen.height,
    )
    return session
