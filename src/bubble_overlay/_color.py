from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from PIL import ImageColor

RGBA = Tuple[float, float, float, float]
ColorLike = Sequence[float] | str


def normalize_color(color: ColorLike) -> RGBA:
    """Return ``color`` as an RGBA tuple of floats in [0, 1]."""
    if isinstance(color, str):
        try:
            rgba = ImageColor.getcolor(color.strip(), "RGBA")
        except ValueError as exc:
            raise ValueError(f"Unknown color {color!r}.") from exc
        r, g, b, a = (c / 255.0 for c in rgba)
        return r, g, b, a

    try:
        arr = np.asarray(color, dtype=float).flatten()
    except (TypeError, ValueError) as exc:
        raise ValueError("Color must be a name or an RGB/RGBA sequence.") from exc
    if arr.size not in (3, 4):
        raise ValueError("Color must be RGB or RGBA.")
    if not np.all(np.isfinite(arr)) or arr.min() < 0.0:
        raise ValueError("Color components must be finite and non-negative.")
    rgb = arr[:3] / 255.0 if arr[:3].max() > 1.0 else arr[:3]
    alpha = float(arr[3]) if arr.size == 4 else 1.0
    # 8-bit alpha may accompany either channel scale.
    if alpha > 1.0:
        alpha /= 255.0
    if rgb.max() > 1.0 or alpha > 1.0:
        raise ValueError("Color components must be within [0, 1] or [0, 255].")
    return float(rgb[0]), float(rgb[1]), float(rgb[2]), float(alpha)

