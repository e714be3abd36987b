"""Drawing surfaces: a recording surface plus cairo raster and SVG surfaces."""

from __future__ import annotations

from .raster import RasterSurface
from .recording import RecordingSurface, StrokedSegment
from .svg import SvgSurface

__all__ = [
    "RasterSurface",
    "RecordingSurface",
    "StrokedSegment",
    "SvgSurface",
]
