from __future__ import annotations

from pathlib import Path

import cairo
import numpy as np
from PIL import Image

from bubble_overlay._color import ColorLike

from ._cairo import CairoSurface


class RasterSurface(CairoSurface):
    """Anti-aliased ARGB32 image surface."""

    def __init__(self, width: int, height: int, background: ColorLike | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Raster size must be positive.")
        self.size = (int(width), int(height))
        super().__init__(cairo.ImageSurface(cairo.FORMAT_ARGB32, *self.size), background=background)

    def to_image(self) -> Image.Image:
        """Return the pixels as a straight-alpha RGBA Pillow image."""
        self.target.flush()
        # Cairo stores premultiplied native-endian ARGB; "BGRa" unpremultiplies on little-endian hosts.
        return Image.frombuffer(
            "RGBA", self.size, bytes(self.target.get_data()), "raw", "BGRa", self.target.get_stride(), 1
        )

    def to_array(self) -> np.ndarray:
        return np.asarray(self.to_image())

    def save(self, path: Path) -> Path:
        path = Path(path)
        self.to_image().save(path)
        return path
