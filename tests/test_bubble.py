from __future__ import annotations

import math
import warnings

import cairo
import numpy as np
import pytest

from bubble_overlay.backends import RecordingSurface
from bubble_overlay.bubble import (
    STRIPE_ANGLE,
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
from bubble_overlay.commands import (
    AddArc,
    Clip,
    FillEllipse,
    RestoreState,
    Rotate,
    SaveState,
    StrokePath,
    Translate,
    count_strokes,
)
from bubble_overlay.geometry import Rect
from bubble_overlay.surface import using_surface
from bubble_overlay.validation import ValidationError

ORANGE = (1.0, 165 / 255.0, 0.0, 1.0)
STRIPE = (0.0, 0.0, 0.0, 0.3)


def test_radius_and_diagonal():
    rect = Rect(0, 0, 200, 200)
    assert bubble_radius(rect) == pytest.approx(100.0)
    assert max_path_length(rect) == pytest.approx(200 * math.sqrt(2))


def test_default_stripe_width_is_tenth_of_radius():
    assert default_stripe_width(Rect.square(200)) == pytest.approx(10.0)
    assert default_stripe_width(Rect.square(200), ratio=0.25) == pytest.approx(25.0)


@pytest.mark.parametrize(
    ("radius", "stripe_width", "expected"),
    [
        (100.0, 10.0, 11),
        (10.0, 10.0, 1),
        (100.0, 40.0, 3),
        (55.0, 10.0, 5),
        (0.0, 5.0, 1),
    ],
)
def test_stripe_count(radius, stripe_width, expected):
    assert stripe_count(radius, stripe_width) == expected


def test_stripe_offsets_use_inner_edge():
    assert stripe_offsets(100.0, 10.0) == pytest.approx([20.0, 40.0, 60.0, 80.0, 100.0])
    # 3 * 20 - 5 == 55 sits exactly on the radius and is excluded.
    assert stripe_offsets(55.0, 10.0) == pytest.approx([20.0, 40.0])


@pytest.mark.parametrize("stripe_width", [0.0, -1.0, float("nan"), float("inf"), "wide"])
def test_stripe_offsets_invalid_width(stripe_width):
    with pytest.raises(ValidationError):
        stripe_offsets(100.0, stripe_width)


def test_fill_commands_single_ellipse():
    rect = Rect(10, 20, 50, 50)
    commands = fill_commands(rect, "orange")
    assert commands == [FillEllipse(rect, ORANGE)]


def test_stripe_commands_structure(bubble_rect):
    commands = stripe_commands(bubble_rect, STRIPE, 10.0)
    assert isinstance(commands[0], SaveState)
    assert isinstance(commands[-1], RestoreState)
    assert commands[2] == AddArc((100.0, 100.0), 100.0, 0.0, 2 * math.pi, clockwise=True)
    assert isinstance(commands[3], Clip)
    assert commands[4] == Translate(0.0, 200.0)
    assert commands[5] == Rotate(STRIPE_ANGLE)
    assert STRIPE_ANGLE == pytest.approx(-math.pi / 4)
    assert count_strokes(commands) == 11


def test_bubble_commands_fill_before_stripes(bubble_rect):
    commands = bubble_commands(bubble_rect, "orange", STRIPE)
    assert isinstance(commands[0], FillEllipse)
    assert isinstance(commands[1], SaveState)
    assert count_strokes(commands) == 11
    assert sum(isinstance(c, StrokePath) for c in commands) == 11


def test_bubble_commands_small_radius_only_centre_stripe():
    commands = bubble_commands(Rect.square(20), "orange", STRIPE, stripe_width=10.0)
    assert count_strokes(commands) == 1


def test_bubble_commands_are_deterministic(bubble_rect):
    first = bubble_commands(bubble_rect, "orange", STRIPE, 7.5)
    second = bubble_commands(bubble_rect, "orange", STRIPE, 7.5)
    assert first == second


def test_bubble_commands_zero_width_needs_explicit_stripe():
    with pytest.raises(ValidationError):
        bubble_commands(Rect(0, 0, 0, 0), "orange", STRIPE)


def test_bubble_commands_invalid_color(bubble_rect):
    with pytest.raises(ValueError):
        bubble_commands(bubble_rect, "not-a-color", STRIPE)


def test_non_square_bounds_warn():
    with pytest.warns(RuntimeWarning):
        commands = stripe_commands(Rect(0, 0, 100, 60), STRIPE, 10.0)
    assert commands[2] == AddArc((50.0, 30.0), 50.0, 0.0, 2 * math.pi, clockwise=True)
    assert commands[4] == Translate(0.0, 60.0)


@pytest.mark.parametrize(
    "render",
    [
        lambda rect: bubble_commands(rect, "orange", STRIPE, 10.0),
        lambda rect: draw(rect, "orange", STRIPE, 10.0, surface=RecordingSurface()),
        lambda rect: draw_bubble(rect, "orange", surface=RecordingSurface()),
        lambda rect: draw_stripes(rect, STRIPE, 10.0, surface=RecordingSurface()),
        lambda rect: fill_commands(rect, "orange"),
    ],
    ids=["bubble_commands", "draw", "draw_bubble", "draw_stripes", "fill_commands"],
)
def test_non_square_bounds_warn_once_at_caller(render):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        render(Rect(0, 0, 100, 60))
    assert len(caught) == 1
    assert caught[0].category is RuntimeWarning
    assert caught[0].filename == __file__


def test_stripe_width_too_small_for_radius():
    with pytest.raises(ValidationError, match="too small"):
        stripe_offsets(100.0, 1e-9)
    with pytest.raises(ValidationError):
        bubble_commands(Rect.square(200), "orange", STRIPE, 1e-9)


def test_stripe_pair_limit_boundary():
    assert len(stripe_offsets(19_999.0, 1.0)) == 9_999
    with pytest.raises(ValidationError):
        stripe_offsets(20_000.0, 1.0)


def test_stroked_lines_lie_on_stripe_grid(bubble_rect):
    surface = RecordingSurface()
    draw(bubble_rect, "orange", STRIPE, 10.0, surface=surface)
    length = max_path_length(bubble_rect)
    assert len(surface.segments) == 11
    for segment in surface.segments:
        (x0, y0), (x1, y1) = segment.start, segment.end
        assert y0 == y1
        assert (y0 / 20.0) == pytest.approx(round(y0 / 20.0))
        assert (x0, x1) == pytest.approx((0.0, length))
        assert segment.line_width == pytest.approx(10.0)
        assert segment.color == STRIPE
    offsets = sorted(segment.start[1] for segment in surface.segments)
    assert offsets == pytest.approx([-100, -80, -60, -40, -20, 0, 20, 40, 60, 80, 100])


def test_centre_stripe_runs_bottom_left_to_top_right(bubble_rect):
    surface = RecordingSurface()
    draw(bubble_rect, "orange", STRIPE, 10.0, surface=surface)
    centre = next(s for s in surface.segments if s.start[1] == 0.0)
    device = centre.device_points()
    assert np.allclose(device[0], [0.0, 200.0])
    assert np.allclose(device[1], [200.0, 0.0], atol=1e-9)


def test_offset_rect_keeps_stripes_aligned_with_clip():
    rect = Rect(50, 30, 100, 100)
    surface = RecordingSurface()
    draw(rect, "orange", STRIPE, 5.0, surface=surface)
    centre = next(s for s in surface.segments if s.start[1] == 0.0)
    device = centre.device_points()
    assert np.allclose(device[0], [50.0, 130.0])
    assert np.allclose(device[1], [150.0, 30.0], atol=1e-9)


def test_draw_restores_transform(bubble_rect):
    surface = RecordingSurface()
    draw(bubble_rect, "orange", STRIPE, surface=surface)
    assert surface.depth == 0
    assert surface.transform == cairo.Matrix()
    assert surface.clips == 0
    assert surface.call_names()[:2] == ["fill_ellipse", "save_state"]
    assert surface.call_names()[-1] == "restore_state"


def test_draw_without_surface_is_noop(bubble_rect):
    surface = RecordingSurface()
    assert draw(bubble_rect, "orange", STRIPE) is None
    assert draw_bubble(bubble_rect, "orange") is None
    assert draw_stripes(bubble_rect, STRIPE, 10.0) is None
    assert surface.mutations == 0


def test_draw_without_surface_skips_validation():
    draw(Rect(0, 0, 0, 0), "not-a-color", STRIPE, -1.0)


def test_draw_uses_current_surface(bubble_rect):
    surface = RecordingSurface()
    with using_surface(surface):
        draw_bubble(bubble_rect, "orange")
        draw_stripes(bubble_rect, STRIPE, 10.0)
    assert surface.calls[0] == ("fill_ellipse", (bubble_rect, ORANGE))
    assert len(surface.segments) == 11
    draw(bubble_rect, "orange", STRIPE)
    assert len(surface.segments) == 11


def test_invalid_input_draws_nothing(bubble_rect):
    surface = RecordingSurface()
    with pytest.raises(ValidationError):
        draw(bubble_rect, "orange", STRIPE, 0.0, surface=surface)
    assert surface.mutations == 0
