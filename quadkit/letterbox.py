"""Fit a fixed-size virtual screen into a window, keeping its aspect ratio."""

from __future__ import annotations

from collections.abc import Iterable

from quadkit.geometry import Rect, Vec2

VIRTUAL_WIDTH = 1280.0
VIRTUAL_HEIGHT = 720.0


def letterbox_scale(
    screen_width: float,
    screen_height: float,
    virtual_width: float = VIRTUAL_WIDTH,
    virtual_height: float = VIRTUAL_HEIGHT,
) -> float:
    """Largest uniform scale at which the virtual screen fits the window."""
    if virtual_width <= 0 or virtual_height <= 0:
        raise ValueError("virtual screen dimensions must be positive")
    return min(screen_width / virtual_width, screen_height / virtual_height)


def letterbox_viewport(
    screen_width: float,
    screen_height: float,
    virtual_width: float = VIRTUAL_WIDTH,
    virtual_height: float = VIRTUAL_HEIGHT,
) -> Rect:
    """Window rectangle the scaled virtual screen occupies, centred."""
    scale = letterbox_scale(screen_width, screen_height, virtual_width, virtual_height)
    width = virtual_width * scale
    height = virtual_height * scale
    return Rect(
        (screen_width - width) * 0.5,
        (screen_height - height) * 0.5,
        width,
        height,
    )


def virtual_mouse(
    mouse: Iterable[float],
    screen_width: float,
    screen_height: float,
    virtual_width: float = VIRTUAL_WIDTH,
    virtual_height: float = VIRTUAL_HEIGHT,
) -> Vec2:
    """Map a window position to virtual screen coordinates."""
    mx, my = mouse
    scale = letterbox_scale(screen_width, screen_height, virtual_width, virtual_height)
    if scale <= 0:
        raise ValueError("window is too small to show the virtual screen")
    return Vec2(
        (mx - (screen_width - virtual_width * scale) * 0.5) / scale,
        (my - (screen_height - virtual_height * scale) * 0.5) / scale,
    )