"""Tests for WorkspaceSession and the settings-driven bootstrap."""

from __future__ import annotations

import pytest
from loguru import logger

from viewdeck.workspace.app import create_session, create_store
from viewdeck.workspace.context import WorkspaceContext
from viewdeck.workspace.models.enums import Layout
from viewdeck.workspace.models.events import SetAddress, SetHomepage, SetUserPreferences
from viewdeck.workspace.models.state import UserPreferences
from viewdeck.workspace.session import WorkspaceSession
from viewdeck.workspace.settings import ViewdeckSettings
from viewdeck.workspace.store.base import StoreError
from viewdeck.workspace.store.local import LocalSettingsStore
from viewdeck.workspace.store.memory import MemoryStore


def test_dispatch_typed_event(session: WorkspaceSession) -> None:
    new = session.dispatch(SetAddress(address="https://example.com/"))
    assert new.address == "https://example.com/"
    assert session.state is new


def test_dispatch_raw_mapping(session: WorkspaceSession) -> None:
    session.dispatch({"kind": "set_zoom_level", "zoom_level": 0.45})
    session.dispatch({"kind": "set_previewer_config", "previewer": {"layout": "INDIVIDUAL"}})

    assert session.state.previewer.layout == Layout.INDIVIDUAL
    assert session.state.zoom_level == 1
    assert session.state.previous_zoom_level == 0.45


def test_unknown_raw_kind_is_ignored(session: WorkspaceSession) -> None:
    before = session.state
    assert session.dispatch({"kind": "set_theme", "theme": "dark"}) is before
    assert session.state is before


def test_explicit_initial_state_is_used(ctx: WorkspaceContext, session: WorkspaceSession) -> None:
    seeded = session.state.model_copy(update={"address": "https://seeded.example/"})
    assert WorkspaceSession(ctx, seeded).state is seeded


def test_failed_write_keeps_snapshot(flaky_store, screen) -> None:
    session = WorkspaceSession(WorkspaceContext.create(flaky_store, screen))
    before = session.state
    flaky_store.fail_writes = True

    with pytest.raises(StoreError):
        session.dispatch(SetUserPreferences(user_preferences=UserPreferences(disable_ssl_validation=True)))

    assert session.state is before

    # The session keeps working once the store recovers.
    flaky_store.fail_writes = False
    session.dispatch(SetUserPreferences(user_preferences=UserPreferences(disable_ssl_validation=True)))
    assert session.state.user_preferences.disable_ssl_validation is True


# ---------------------------------------------------------------------------
# Bootstrap
# ---------------------------------------------------------------------------


def test_create_store_selects_backend(tmp_path) -> None:
    assert isinstance(create_store(ViewdeckSettings(store="memory")), MemoryStore)

    local = create_store(ViewdeckSettings(data_root=str(tmp_path), data_prefix="alice"))
    assert isinstance(local, LocalSettingsStore)
    assert local.path == tmp_path / "alice" / "settings.json"


def test_session_state_survives_restart(tmp_path) -> None:
    settings = ViewdeckSettings(data_root=str(tmp_path))
    first = create_session(settings)
    first.dispatch({"kind": "set_homepage", "homepage": "https://example.com/"})
    first.dispatch({"kind": "set_active_devices", "devices": [first.state.all_devices[2].model_dump()]})

    second = create_session(settings)
    assert second.state.homepage == "https://example.com/"
    assert second.state.address == "https://example.com/"
    assert [d.name for d in second.state.devices] == [first.state.all_devices[2].name]


def test_memory_sessions_do_not_share_state() -> None:
    settings = ViewdeckSettings(store="memory")
    create_session(settings).dispatch({"kind": "set_homepage", "homepage": "https://example.com/"})
    assert create_session(settings).state.homepage == "https://www.google.com/"


def test_settings_drive_context_defaults(tmp_path) -> None:
    settings = ViewdeckSettings(
        data_root=str(tmp_path),
        default_homepage="https://start.example/",
        default_zoom_level=0.75,
        screen_width=1280,
        screen_height=720,
    )
    state = create_session(settings).state

    assert state.homepage == "https://start.example/"
    assert state.zoom_level == 0.75
    assert state.inspector_config.size.width == 1280


def test_sessions_sharing_a_data_root_keep_both_writes(tmp_path) -> None:
    settings = ViewdeckSettings(data_root=str(tmp_path))
    first = create_session(settings)
    second = create_session(settings)

    first.dispatch(SetHomepage(homepage="https://a.example/"))
    second.dispatch(SetUserPreferences(user_preferences=UserPreferences(disable_ssl_validation=True)))

    restarted = create_session(settings).state
    assert restarted.homepage == "https://a.example/"
    assert restarted.user_preferences.disable_ssl_validation is True


def test_applied_events_are_logged_as_payloads(session: WorkspaceSession) -> None:
    messages = []
    logger.add(messages.append, level="DEBUG", format="{message}")

    session.dispatch(SetAddress(address="https://example.com/"))

    assert any("'kind': 'set_address'" in m and "https://example.com/" in m for m in messages)
