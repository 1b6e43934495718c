"""Workspace session -- owns the current snapshot and applies events.

The reducer is pure apart from its store writes; something still has to hold
"the current state" and feed events to it one at a time.  ``WorkspaceSession``
is that holder: it serializes ``dispatch`` calls with a lock, swaps in the
new snapshot only after the reducer returned, and accepts either typed events
or raw ``{"kind": ..., **payload}`` mappings.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from loguru import logger

from viewdeck.workspace.models.events import WorkspaceEvent, parse_event
from viewdeck.workspace.reducer import initial_state, reduce

if TYPE_CHECKING:
    from viewdeck.workspace.context import WorkspaceContext
    from viewdeck.workspace.models.state import WorkspaceState


class WorkspaceSession:
    """Serial event dispatcher around one :class:`WorkspaceContext`."""

    def __init__(self, ctx: WorkspaceContext, state: WorkspaceState | None = None) -> None:
        self._ctx = ctx
        self._state = state if state is not None else initial_state(ctx)
        self._lock = threading.Lock()

    @property
    def context(self) -> WorkspaceContext:
        return self._ctx

    @property
    def state(self) -> WorkspaceState:
        return self._state

    def dispatch(self, event: WorkspaceEvent | Mapping[str, Any]) -> WorkspaceState:
        """Apply one event and return the new current snapshot.

        Raw mappings with an unknown ``kind`` are ignored.  If the reducer
        raises (e.g. a ``StoreError`` from a write-through), the current
        snapshot is left untouched and the error propagates.
        """
        if isinstance(event, Mapping):
            parsed = parse_event(event)
            if parsed is None:
                logger.debug("Ignoring event with unknown kind {!r}", event.get("kind"))
                return self._state
            event = parsed

        with self._lock:
            new_state = reduce(self._state, event, self._ctx)
            if new_state is not self._state:
                logger.opt(lazy=True).debug("Applied {}", event.to_payload)
            self._state = new_state
            return new_state
