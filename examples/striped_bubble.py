"""Render a row of striped bubbles into a single PNG and SVG."""

from __future__ import annotations

from pathlib import Path

from bubble_overlay import Rect, draw, using_surface
from bubble_overlay.backends import RasterSurface, SvgSurface

BUBBLES = [
    ("orange", 0.1),
    ("#3a86ff", 0.15),
    ("seagreen", 0.25),
]


def build(surface) -> None:
    """Draw each bubble in its own cell of a horizontal strip."""

    size = 160.0
    with using_surface(surface):
        for idx, (color, ratio) in enumerate(BUBBLES):
            rect = Rect(idx * size, 0.0, size, size)
            draw(rect, color, (0, 0, 0, 0.3), stripe_width=size / 2.0 * ratio)


def main() -> None:
    out_dir = Path(__file__).resolve().parent
    width, height = 160 * len(BUBBLES), 160

    raster = RasterSurface(width, height, background="white")
    build(raster)
    raster.save(out_dir / "striped_bubbles.png")

    vector = SvgSurface(width, height, background="white")
    build(vector)
    vector.save(out_dir / "striped_bubbles.svg")


if __name__ == "__main__":
    main()
