from __future__ import annotations

import math
import warnings

from bubble_overlay.geometry import Rect

MAX_STRIPE_PAIRS = 10_000


class ValidationError(ValueError):
    """Raised when drawing parameters are violated."""


def validate_bubble_rect(rect: Rect, stacklevel: int = 3) -> None:
    """Reject non-Rect bounds and warn when they are not square.

    ``stacklevel`` is counted from this function, so the default points at
    the caller of whoever called it.
    """
    if not isinstance(rect, Rect):
        raise ValidationError("Bubble bounds must be a Rect.")
    if not rect.is_square:
        warnings.warn(
            f"Bubble bounds {rect.width:g}x{rect.height:g} are not square; "
            "the bubble diameter follows the width.",
            RuntimeWarning,
            stacklevel=stacklevel,
        )


def validate_stripe_width(stripe_width: float) -> float:
    try:
        value = float(stripe_width)
    except (TypeError, ValueError) as exc:
        raise ValidationError("stripe_width must be a number.") from exc
    if not math.isfinite(value) or value <= 0:
        raise ValidationError("stripe_width must be positive and finite.")
    return value


def validate_stripe_density(radius: float, stripe_width: float) -> None:
    pairs = (radius + stripe_width / 2.0) / (2.0 * stripe_width)
    if pairs > MAX_STRIPE_PAIRS:
        raise ValidationError(
            f"stripe_width {stripe_width:g} is too small for radius {radius:g} "
            f"(more than {MAX_STRIPE_PAIRS} stripe pairs)."
        )
