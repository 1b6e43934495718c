"""Shared fixtures for workspace-core tests.

Everything runs against ``MemoryStore`` and a fixed 1920x1080 work area; no
filesystem access unless a test asks for ``tmp_path`` itself.
"""

from __future__ import annotations

from typing import Any

import pytest

from viewdeck.workspace.context import WorkspaceContext
from viewdeck.workspace.models.device import Device
from viewdeck.workspace.models.enums import DeviceCapability, DeviceOS, DeviceType
from viewdeck.workspace.reducer import initial_state
from viewdeck.workspace.screen import StaticScreenMetrics
from viewdeck.workspace.session import WorkspaceSession
from viewdeck.workspace.store.base import StoreError
from viewdeck.workspace.store.memory import MemoryStore


class FlakyStore(MemoryStore):
    """MemoryStore whose writes can be switched to fail."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        super().__init__(initial)
        self.fail_writes = False

    def set(self, key: str, value: Any) -> None:
        if self.fail_writes:
            msg = f"disk full while writing {key}"
            raise StoreError(msg)
        super().set(key, value)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def flaky_store() -> FlakyStore:
    return FlakyStore()


@pytest.fixture
def default_active_names() -> list[str]:
    """Built-in devices flagged `added`, in catalog order."""
    return ["iPhone X", "iPad", "Galaxy S9/S9+", "Laptop with touch"]


@pytest.fixture
def screen() -> StaticScreenMetrics:
    return StaticScreenMetrics(1920, 1080)


@pytest.fixture
def ctx(store: MemoryStore, screen: StaticScreenMetrics) -> WorkspaceContext:
    return WorkspaceContext.create(store, screen)


@pytest.fixture
def state(ctx: WorkspaceContext):
    return initial_state(ctx)


@pytest.fixture
def session(ctx: WorkspaceContext) -> WorkspaceSession:
    return WorkspaceSession(ctx)


@pytest.fixture
def custom_device() -> Device:
    return Device(
        id="custom-1",
        name="Kiosk Portrait",
        width=1080,
        height=1920,
        capabilities=[DeviceCapability.TOUCH],
        os=DeviceOS.ANDROID,
        type=DeviceType.TABLET,
    )
