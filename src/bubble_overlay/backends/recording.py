from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple

import cairo
import numpy as np

from bubble_overlay._color import RGBA
from bubble_overlay.geometry import Rect, as_point
from bubble_overlay.surface import SurfaceStateError


@dataclass(frozen=True)
class StrokedSegment:
    """A stroked line in user space, with the CTM and pen in effect at stroke time."""

    start: Tuple[float, float]
    end: Tuple[float, float]
    transform: cairo.Matrix
    line_width: float
    color: RGBA | None

    def device_points(self) -> np.ndarray:
        return np.array([self.transform.transform_point(*self.start), self.transform.transform_point(*self.end)])


@dataclass
class _State:
    transform: cairo.Matrix
    line_width: float
    stroke_color: RGBA | None
    clips: int


@dataclass
class RecordingSurface:
    """Surface that records every primitive call and tracks graphics state."""

    calls: List[Tuple[str, Tuple[Any, ...]]] = field(default_factory=list)
    segments: List[StrokedSegment] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.transform = cairo.Matrix()
        self.line_width = 1.0
        self.stroke_color: RGBA | None = None
        self.clips = 0
        self._stack: List[_State] = []
        self._path: List[List[Tuple[float, float]]] = []
        self._in_clip_path = False

    @property
    def depth(self) -> int:
        return len(self._stack)

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def save_state(self) -> None:
        self._record("save_state")
        self._stack.append(_State(self.transform, self.line_width, self.stroke_color, self.clips))

    def restore_state(self) -> None:
        self._record("restore_state")
        if not self._stack:
            raise SurfaceStateError("restore_state called without a matching save_state.")
        state = self._stack.pop()
        self.transform = state.transform
        self.line_width = state.line_width
        self.stroke_color = state.stroke_color
        self.clips = state.clips

    def fill_ellipse(self, rect: Rect, color: RGBA) -> None:
        self._record("fill_ellipse", rect, color)

    def begin_clip_path(self) -> None:
        self._record("begin_clip_path")
        self._path = []
        self._in_clip_path = True

    def add_arc(
        self,
        center: Sequence[float],
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool,
    ) -> None:
        self._record("add_arc", as_point(center, "center"), radius, start_angle, end_angle, clockwise)
        self._path.append([as_point(center, "center")])

    def clip(self) -> None:
        self._record("clip")
        if not self._in_clip_path or not self._path:
            raise SurfaceStateError("clip called without a clip path.")
        self.clips += 1
        self._path = []
        self._in_clip_path = False

    def translate(self, dx: float, dy: float) -> None:
        self._record("translate", dx, dy)
        self.transform = cairo.Matrix(x0=dx, y0=dy).multiply(self.transform)

    def rotate(self, angle: float) -> None:
        self._record("rotate", angle)
        self.transform = cairo.Matrix.init_rotate(angle).multiply(self.transform)

    def set_line_width(self, width: float) -> None:
        self._record("set_line_width", width)
        self.line_width = float(width)

    def set_stroke_color(self, color: RGBA) -> None:
        self._record("set_stroke_color", color)
        self.stroke_color = color

    def move_to(self, point: Sequence[float]) -> None:
        self._record("move_to", as_point(point))
        self._path.append([as_point(point)])

    def line_to(self, point: Sequence[float]) -> None:
        self._record("line_to", as_point(point))
        if not self._path:
            raise SurfaceStateError("line_to called without a current point.")
        self._path[-1].append(as_point(point))

    def stroke_path(self) -> None:
        self._record("stroke_path")
        if not self._path:
            raise SurfaceStateError("stroke_path called without a current path.")
        for subpath in self._path:
            for start, end in zip(subpath, subpath[1:]):
                self.segments.append(
                    StrokedSegment(start, end, self.transform, self.line_width, self.stroke_color)
                )
        self._path = []

    @property
    def mutations(self) -> int:
        return len(self.calls)
