from __future__ import annotations

import numpy as np


def painted_outside_circle(
    pixels: np.ndarray,
    background: tuple[int, int, int, int],
    center: tuple[float, float],
    radius: float,
    margin: float = 1.5,
) -> int:
    """Count pixels farther than ``radius + margin`` from ``center`` that differ from ``background``."""
    height, width = pixels.shape[:2]
    ys, xs = np.mgrid[0:height, 0:width]
    dist = np.hypot(xs + 0.5 - center[0], ys + 0.5 - center[1])
    outside = dist > radius + margin
    changed = np.any(pixels != np.asarray(background, dtype=pixels.dtype), axis=-1)
    return int(np.count_nonzero(changed & outside))
