from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


def _require_vec2(value: Sequence[float], label: str) -> np.ndarray:
    try:
        arr = np.asarray(value, dtype=float).reshape(2)
    except Exception as exc:
        raise ValueError(f"{label} must be a 2D coordinate.") from exc
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{label} must be finite.")
    return arr


def as_point(value: Sequence[float], label: str = "point") -> tuple[float, float]:
    """Return a validated ``(x, y)`` tuple of floats."""
    arr = _require_vec2(value, label)
    return float(arr[0]), float(arr[1])


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with its origin at the top-left corner (y grows down)."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for label in ("x", "y", "width", "height"):
            value = float(getattr(self, label))
            if not math.isfinite(value):
                raise ValueError(f"{label} must be finite.")
            object.__setattr__(self, label, value)
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be non-negative.")

    @classmethod
    def square(cls, size: float, origin: Sequence[float] = (0.0, 0.0)) -> "Rect":
        ox, oy = as_point(origin, "origin")
        return cls(ox, oy, size, size)

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2.0

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return self.mid_x, self.mid_y

    @property
    def is_square(self) -> bool:
        return math.isclose(self.width, self.height, rel_tol=1e-9, abs_tol=1e-9)


__all__ = [
    "Rect",
    "as_point",
]
