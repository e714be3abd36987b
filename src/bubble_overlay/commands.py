"""Draw commands emitted by the bubble plan and replayed onto surfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from bubble_overlay._color import RGBA
from bubble_overlay.geometry import Rect
from bubble_overlay.surface import DrawingSurface


@dataclass(frozen=True)
class SaveState:
    def apply(self, surface: DrawingSurface) -> None:
        surface.save_state()


@dataclass(frozen=True)
class RestoreState:
    def apply(self, surface: DrawingSurface) -> None:
        surface.restore_state()


@dataclass(frozen=True)
class FillEllipse:
    rect: Rect
    color: RGBA

    def apply(self, surface: DrawingSurface) -> None:
        surface.fill_ellipse(self.rect, self.color)


@dataclass(frozen=True)
class BeginClipPath:
    def apply(self, surface: DrawingSurface) -> None:
        surface.begin_clip_path()


@dataclass(frozen=True)
class AddArc:
    center: tuple[float, float]
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool = True

    def apply(self, surface: DrawingSurface) -> None:
        surface.add_arc(self.center, self.radius, self.start_angle, self.end_angle, self.clockwise)


@dataclass(frozen=True)
class Clip:
    def apply(self, surface: DrawingSurface) -> None:
        surface.clip()


@dataclass(frozen=True)
class Translate:
    dx: float
    dy: float

    def apply(self, surface: DrawingSurface) -> None:
        surface.translate(self.dx, self.dy)


@dataclass(frozen=True)
class Rotate:
    angle: float

    def apply(self, surface: DrawingSurface) -> None:
        surface.rotate(self.angle)


@dataclass(frozen=True)
class SetLineWidth:
    width: float

    def apply(self, surface: DrawingSurface) -> None:
        surface.set_line_width(self.width)


@dataclass(frozen=True)
class SetStrokeColor:
    color: RGBA

    def apply(self, surface: DrawingSurface) -> None:
        surface.set_stroke_color(self.color)


@dataclass(frozen=True)
class MoveTo:
    point: tuple[float, float]

    def apply(self, surface: DrawingSurface) -> None:
        surface.move_to(self.point)


@dataclass(frozen=True)
class LineTo:
    point: tuple[float, float]

    def apply(self, surface: DrawingSurface) -> None:
        surface.line_to(self.point)


@dataclass(frozen=True)
class StrokePath:
    def apply(self, surface: DrawingSurface) -> None:
        surface.stroke_path()


DrawCommand = (
    SaveState
    | RestoreState
    | FillEllipse
    | BeginClipPath
    | AddArc
    | Clip
    | Translate
    | Rotate
    | SetLineWidth
    | SetStrokeColor
    | MoveTo
    | LineTo
    | StrokePath
)


def replay(commands: Iterable[DrawCommand], surface: DrawingSurface) -> None:
    """Apply ``commands`` to ``surface`` in order.

    If a command raises, any state saved by the replay is restored before the
    exception propagates.
    """
    depth = 0
    try:
        for command in commands:
            command.apply(surface)
            if isinstance(command, SaveState):
                depth += 1
            elif isinstance(command, RestoreState):
                depth -= 1
    except BaseException:
        while depth > 0:
            surface.restore_state()
            depth -= 1
        raise


def count_strokes(commands: Sequence[DrawCommand]) -> int:
    return sum(1 for command in commands if isinstance(command, StrokePath))


def describe(command: DrawCommand) -> tuple[str, str]:
    """Return ``(name, arguments)`` strings for display."""
    name = type(command).__name__
    fields = getattr(command, "__dataclass_fields__", {})
    parts = []
    for key in fields:
        value = getattr(command, key)
        if isinstance(value, float):
            parts.append(f"{key}={value:.4g}")
        elif isinstance(value, tuple):
            parts.append(f"{key}=(" + ", ".join(f"{v:.4g}" for v in value) + ")")
        elif isinstance(value, Rect):
            parts.append(f"{key}=Rect({value.x:.4g}, {value.y:.4g}, {value.width:.4g}, {value.height:.4g})")
        else:
            parts.append(f"{key}={value!r}")
    return name, ", ".join(parts)
