"""Striped bubble: a filled disc overlaid with 45 degree stripes clipped to the disc."""

from __future__ import annotations

import math
from typing import List

from bubble_overlay._color import ColorLike, normalize_color
from bubble_overlay.commands import (
    AddArc,
    BeginClipPath,
    Clip,
    DrawCommand,
    FillEllipse,
    LineTo,
    MoveTo,
    RestoreState,
    Rotate,
    SaveState,
    SetLineWidth,
    SetStrokeColor,
    StrokePath,
    Translate,
    replay,
)
from bubble_overlay.geometry import Rect
from bubble_overlay.surface import DrawingSurface, resolve_surface
from bubble_overlay.validation import (
    ValidationError,
    validate_bubble_rect,
    validate_stripe_density,
    validate_stripe_width,
)

STRIPE_ANGLE = math.pi * -45.0 / 180.0
DEFAULT_STRIPE_RATIO = 0.1


def bubble_radius(rect: Rect) -> float:
    return rect.width / 2.0


def max_path_length(rect: Rect) -> float:
    """Length of the rectangle's diagonal; any stripe this long spans the rotated bounds."""
    return math.sqrt(rect.width**2 + rect.height**2)


def default_stripe_width(rect: Rect, ratio: float = DEFAULT_STRIPE_RATIO) -> float:
    """One tenth of the bubble radius unless another ``ratio`` is given."""
    return bubble_radius(rect) * ratio


def stripe_offsets(radius: float, stripe_width: float) -> List[float]:
    """Offsets of the mirrored stripe pairs on either side of the centre stripe.

    A pair at ``index * stripe_width * 2`` is kept while its inner edge is still
    inside ``radius``; it may be mostly clipped away. Widths that would need
    more than ``MAX_STRIPE_PAIRS`` pairs are rejected.
    """
    stripe_width = validate_stripe_width(stripe_width)
    validate_stripe_density(radius, stripe_width)
    offsets: List[float] = []
    index = 1
    while index * stripe_width * 2 - stripe_width / 2.0 < radius:
        offsets.append(index * stripe_width * 2)
        index += 1
    return offsets


def stripe_count(radius: float, stripe_width: float) -> int:
    return 1 + 2 * len(stripe_offsets(radius, stripe_width))


def _stroke_line(y: float, length: float) -> List[DrawCommand]:
    return [MoveTo((0.0, y)), LineTo((length, y)), StrokePath()]


def _fill_plan(rect: Rect, bubble_color: ColorLike) -> List[DrawCommand]:
    return [FillEllipse(rect, normalize_color(bubble_color))]


def _stripe_plan(rect: Rect, stripe_color: ColorLike, stripe_width: float) -> List[DrawCommand]:
    stripe_width = validate_stripe_width(stripe_width)
    color = normalize_color(stripe_color)
    radius = bubble_radius(rect)
    length = max_path_length(rect)
    offsets = stripe_offsets(radius, stripe_width)

    commands: List[DrawCommand] = [
        SaveState(),
        BeginClipPath(),
        AddArc(rect.center, radius, 0.0, 2 * math.pi, clockwise=True),
        Clip(),
        # Origin moves to the bottom-left corner so +x runs bottom-left to top-right.
        Translate(rect.x, rect.max_y),
        Rotate(STRIPE_ANGLE),
        SetLineWidth(stripe_width),
        SetStrokeColor(color),
    ]
    commands.extend(_stroke_line(0.0, length))
    for offset in offsets:
        commands.extend(_stroke_line(offset, length))
        commands.extend(_stroke_line(-offset, length))
    commands.append(RestoreState())
    return commands


def _bubble_plan(
    rect: Rect,
    bubble_color: ColorLike,
    stripe_color: ColorLike,
    stripe_width: float | None,
    stacklevel: int,
) -> List[DrawCommand]:
    validate_bubble_rect(rect, stacklevel=stacklevel)
    if stripe_width is None:
        stripe_width = default_stripe_width(rect)
        if stripe_width <= 0:
            raise ValidationError("Bubble bounds must have a positive width to derive a stripe width.")
    return _fill_plan(rect, bubble_color) + _stripe_plan(rect, stripe_color, stripe_width)


def fill_commands(rect: Rect, bubble_color: ColorLike) -> List[DrawCommand]:
    validate_bubble_rect(rect)
    return _fill_plan(rect, bubble_color)


def stripe_commands(rect: Rect, stripe_color: ColorLike, stripe_width: float) -> List[DrawCommand]:
    validate_bubble_rect(rect)
    return _stripe_plan(rect, stripe_color, stripe_width)


def bubble_commands(
    rect: Rect,
    bubble_color: ColorLike,
    stripe_color: ColorLike,
    stripe_width: float | None = None,
) -> List[DrawCommand]:
    """Return the full draw plan: the disc, then the clipped stripes."""
    return _bubble_plan(rect, bubble_color, stripe_color, stripe_width, stacklevel=4)


def draw_bubble(rect: Rect, bubble_color: ColorLike, surface: DrawingSurface | None = None) -> None:
    target = resolve_surface(surface)
    if target is None:
        return
    validate_bubble_rect(rect)
    replay(_fill_plan(rect, bubble_color), target)


def draw_stripes(
    rect: Rect,
    stripe_color: ColorLike,
    stripe_width: float,
    surface: DrawingSurface | None = None,
) -> None:
    target = resolve_surface(surface)
    if target is None:
        return
    validate_bubble_rect(rect)
    replay(_stripe_plan(rect, stripe_color, stripe_width), target)


def draw(
    rect: Rect,
    bubble_color: ColorLike,
    stripe_color: ColorLike,
    stripe_width: float | None = None,
    surface: DrawingSurface | None = None,
) -> None:
    """Draw the striped bubble onto ``surface`` or the current surface.

    Does nothing when no surface is available.
    """
    target = resolve_surface(surface)
    if target is None:
        return
    replay(_bubble_plan(rect, bubble_color, stripe_color, stripe_width, stacklevel=4), target)
