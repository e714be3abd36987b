"""Drawing surface protocol and current-surface acquisition."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Protocol, Sequence, runtime_checkable

from bubble_overlay._color import RGBA
from bubble_overlay.geometry import Rect


class SurfaceStateError(RuntimeError):
    """Raised when a surface primitive is used out of order."""


@runtime_checkable
class DrawingSurface(Protocol):
    """Primitive 2D operations a rendering backend provides.

    Coordinates are y-down. Angles are radians; positive rotation turns +x
    towards +y.
    """

    def save_state(self) -> None: ...

    def restore_state(self) -> None: ...

    def fill_ellipse(self, rect: Rect, color: RGBA) -> None: ...

    def begin_clip_path(self) -> None: ...

    def add_arc(
        self,
        center: Sequence[float],
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool,
    ) -> None: ...

    def clip(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_stroke_color(self, color: RGBA) -> None: ...

    def move_to(self, point: Sequence[float]) -> None: ...

    def line_to(self, point: Sequence[float]) -> None: ...

    def stroke_path(self) -> None: ...


_CURRENT_SURFACE: ContextVar[DrawingSurface | None] = ContextVar("bubble_overlay_surface", default=None)


def current_surface() -> DrawingSurface | None:
    """Return the surface bound by the innermost ``using_surface`` block, if any."""
    return _CURRENT_SURFACE.get()


@contextmanager
def using_surface(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    """Make ``surface`` the current surface for the duration of the block."""
    token = _CURRENT_SURFACE.set(surface)
    try:
        yield surface
    finally:
        _CURRENT_SURFACE.reset(token)


@contextmanager
def saved_state(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    """Save the surface's graphics state and restore it when the block exits."""
    surface.save_state()
    try:
        yield surface
    finally:
        surface.restore_state()


def resolve_surface(surface: DrawingSurface | None = None) -> DrawingSurface | None:
    return surface if surface is not None else current_surface()
