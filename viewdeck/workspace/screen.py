"""Screen metrics provider.

The geometry calculator needs the primary display's work area.  Where that
comes from (a GUI toolkit, a window manager, configuration) is outside the
core; :class:`StaticScreenMetrics` serves a fixed size from settings.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from viewdeck.workspace.models.state import WindowSize


@runtime_checkable
class ScreenMetricsProvider(Protocol):
    def primary_work_area_size(self) -> WindowSize:
        """Return the usable area (excluding task bars/docks) of the primary display."""
        ...


class StaticScreenMetrics:
    def __init__(self, width: float, height: float) -> None:
        self._size = WindowSize(width=width, height=height)

    def primary_work_area_size(self) -> WindowSize:
        return self._size
