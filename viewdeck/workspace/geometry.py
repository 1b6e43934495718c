"""Inspector window geometry.

Derives the inspector window's default size and absolute bounds from the
primary display's work area ``(W, H)`` and a display mode:

- RIGHT docks along the right edge: default size ``(0.33 * W, H)``; the
  bounds reserve 84 px (64 px toolbar + 20 px status bar) of height and are
  anchored to the bottom-right corner.
- BOTTOM and UNDOCKED share the bottom dock: default size ``(W, 0.33 * H)``;
  the bounds span the full width, reserve 20 px of height and are anchored to
  the bottom edge.

Results are not clamped; a size smaller than the chrome reservation yields a
degenerate rectangle.
"""

from __future__ import annotations

import math

from viewdeck.workspace.models.enums import DisplayMode
from viewdeck.workspace.models.state import WindowBounds, WindowSize

DOCK_RATIO = 0.33
TOOLBAR_HEIGHT = 64
STATUS_BAR_HEIGHT = 20


def _round_half_up(value: float) -> int:
    """Round like JavaScript's ``Math.round`` (ties go towards +inf)."""
    return math.floor(value + 0.5)


def get_default_size(mode: DisplayMode, screen: WindowSize) -> WindowSize:
    if mode == DisplayMode.RIGHT:
        return WindowSize(width=screen.width * DOCK_RATIO, height=screen.height)
    return WindowSize(width=screen.width, height=screen.height * DOCK_RATIO)


def get_bounds(mode: DisplayMode, screen: WindowSize, size: WindowSize | None = None) -> WindowBounds:
    """Compute absolute inspector bounds.  *size* defaults to the mode's default size."""
    if size is None:
        size = get_default_size(mode, screen)

    if mode == DisplayMode.RIGHT:
        view_width = _round_half_up(size.width)
        view_height = size.height - TOOLBAR_HEIGHT - STATUS_BAR_HEIGHT
        return WindowBounds(
            x=screen.width - view_width,
            y=screen.height - view_height,
            width=view_width,
            height=view_height,
        )

    view_height = _round_half_up(size.height) - STATUS_BAR_HEIGHT
    return WindowBounds(
        x=0,
        y=screen.height - view_height,
        width=screen.width,
        height=view_height,
    )


class InspectorGeometry:
    """Geometry calculator bound to a work area captured once at construction.

    Display changes after construction are not picked up; build a new
    instance (or a new workspace context) to re-read the screen.
    """

    def __init__(self, screen: WindowSize) -> None:
        self._screen = screen

    @property
    def screen(self) -> WindowSize:
        return self._screen

    def default_size(self, mode: DisplayMode) -> WindowSize:
        return get_default_size(mode, self._screen)

    def bounds(self, mode: DisplayMode, size: WindowSize | None = None) -> WindowBounds:
        return get_bounds(mode, self._screen, size)
