"""Bubble Overlay – striped bubble drawing as replayable draw commands."""

from __future__ import annotations

from .bubble import (
    bubble_commands,
    bubble_radius,
    default_stripe_width,
    draw,
    draw_bubble,
    draw_stripes,
    fill_commands,
    max_path_length,
    stripe_commands,
    stripe_count,
    stripe_offsets,
)
from .commands import replay
from .geometry import Rect
from .surface import DrawingSurface, SurfaceStateError, current_surface, saved_state, using_surface
from .validation import ValidationError

__all__ = [
    "__version__",
    "DrawingSurface",
    "Rect",
    "SurfaceStateError",
    "ValidationError",
    "bubble_commands",
    "bubble_radius",
    "current_surface",
    "default_stripe_width",
    "draw",
    "draw_bubble",
    "draw_stripes",
    "fill_commands",
    "max_path_length",
    "replay",
    "saved_state",
    "stripe_commands",
    "stripe_count",
    "stripe_offsets",
    "using_surface",
]

__version__ = "0.1.0"
