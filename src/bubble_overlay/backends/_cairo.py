from __future__ import annotations

import math
from typing import List, Sequence

import cairo

from bubble_overlay._color import RGBA, ColorLike, normalize_color
from bubble_overlay.geometry import Rect, as_point
from bubble_overlay.surface import SurfaceStateError


class CairoSurface:
    """Drawing surface backed by a ``cairo.Context``.

    Cairo keeps the CTM, clip and line width on its own save stack. It has a
    single source for fills and strokes, so the stroke color is stacked here
    and set again before every stroke.
    """

    def __init__(self, target: cairo.Surface, background: ColorLike | None = None) -> None:
        self.target = target
        self.ctx = cairo.Context(target)
        if background is not None:
            self.ctx.set_source_rgba(*normalize_color(background))
            self.ctx.paint()
        self.stroke_color: RGBA = (0.0, 0.0, 0.0, 1.0)
        self._colors: List[RGBA] = []

    @property
    def depth(self) -> int:
        return len(self._colors)

    def save_state(self) -> None:
        self.ctx.save()
        self._colors.append(self.stroke_color)

    def restore_state(self) -> None:
        if not self._colors:
            raise SurfaceStateError("restore_state called without a matching save_state.")
        self.ctx.restore()
        self.stroke_color = self._colors.pop()

    def fill_ellipse(self, rect: Rect, color: RGBA) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return
        ctx = self.ctx
        ctx.new_path()
        ctx.save()
        ctx.translate(rect.mid_x, rect.mid_y)
        ctx.scale(rect.width / 2.0, rect.height / 2.0)
        ctx.arc(0.0, 0.0, 1.0, 0.0, 2 * math.pi)
        ctx.restore()
        ctx.set_source_rgba(*color)
        ctx.fill()

    def begin_clip_path(self) -> None:
        self.ctx.new_path()

    def add_arc(
        self,
        center: Sequence[float],
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool,
    ) -> None:
        cx, cy = as_point(center, "center")
        # In y-down space increasing angles already turn clockwise on screen.
        if clockwise:
            self.ctx.arc(cx, cy, radius, start_angle, end_angle)
        else:
            self.ctx.arc_negative(cx, cy, radius, start_angle, end_angle)

    def clip(self) -> None:
        if not self.ctx.has_current_point():
            raise SurfaceStateError("clip called without a clip path.")
        self.ctx.close_path()
        self.ctx.clip()

    def translate(self, dx: float, dy: float) -> None:
        self.ctx.translate(dx, dy)

    def rotate(self, angle: float) -> None:
        self.ctx.rotate(angle)

    def set_line_width(self, width: float) -> None:
        self.ctx.set_line_width(width)

    def set_stroke_color(self, color: RGBA) -> None:
        self.stroke_color = color

    def move_to(self, point: Sequence[float]) -> None:
        self.ctx.move_to(*as_point(point))

    def line_to(self, point: Sequence[float]) -> None:
        if not self.ctx.has_current_point():
            raise SurfaceStateError("line_to called without a current point.")
        self.ctx.line_to(*as_point(point))

    def stroke_path(self) -> None:
        if not self.ctx.has_current_point():
            raise SurfaceStateError("stroke_path called without a current path.")
        self.ctx.set_source_rgba(*self.stroke_color)
        self.ctx.stroke()
