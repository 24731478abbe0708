"""Heart curve and force helper checks."""

import math

import numpy as np
import pytest

from heartfield.geometry import (
    CANVAS_CENTER_X,
    CANVAS_CENTER_Y,
    IMAGE_ENLARGE,
    heart_curve_point,
    periodic_pulse,
    radial_contract,
    radial_pulse_displace,
    scatter_toward,
)


def test_curve_extremes():
    """pi/2 and 3pi/2 are the side lobes, pi the bottom cusp, 0 the top notch."""
    right = heart_curve_point(math.pi / 2)
    left = heart_curve_point(3 * math.pi / 2)
    assert right.x == CANVAS_CENTER_X + 17 * IMAGE_ENLARGE, f"right lobe x: {right.x}"
    assert left.x == CANVAS_CENTER_X - 17 * IMAGE_ENLARGE, f"left lobe x: {left.x}"
    assert abs(right.y - (CANVAS_CENTER_Y - 5 * IMAGE_ENLARGE)) <= 1
    assert abs(left.y - right.y) <= 1, "curve should be mirror symmetric"

    cusp = heart_curve_point(math.pi)
    assert (cusp.x, cusp.y) == (420, 538), f"bottom cusp: {cusp}"

    notch = heart_curve_point(0.0)
    assert (notch.x, notch.y) == (420, 252), f"top notch: {notch}"


def test_curve_is_bounded_and_integral():
    t = np.linspace(0, 2 * math.pi, 20000, endpoint=False)
    x, y = heart_curve_point(t)
    assert np.all(np.isfinite(x)) and np.all(np.isfinite(y))
    assert np.array_equal(x, np.floor(x)) and np.array_equal(y, np.floor(y)), "coords must be floored"
    assert x.min() >= 233 and x.max() <= 607, f"x range {x.min()}..{x.max()}"
    assert y.min() >= 186 and y.max() <= 538, f"y range {y.min()}..{y.max()}"
    # Bottom cusp is the lowest point on screen
    assert y.max() == 538


def test_scatter_moves_toward_center():
    rng = np.random.default_rng(0)
    n = 20000
    x = np.full(n, CANVAS_CENTER_X + 100.0)
    y = np.full(n, CANVAS_CENTER_Y - 100.0)
    sx, sy = scatter_toward(x, y, 0.27, rng)

    frac_x = (x - sx) / 100.0
    frac_y = (sy - y) / 100.0
    assert np.all(frac_x >= 0) and np.all(frac_y >= 0), "scatter must only pull inward"
    assert np.all(np.isfinite(sx)) and np.all(np.isfinite(sy))
    assert abs(frac_x.mean() - 0.27) < 0.02, f"mean pull should match spread: {frac_x.mean()}"
    assert abs(frac_y.mean() - 0.27) < 0.02
    # Axes are drawn independently
    assert not np.allclose(frac_x, frac_y)


def test_scatter_spread_controls_dispersion():
    rng = np.random.default_rng(1)
    x = np.full(5000, CANVAS_CENTER_X + 150.0)
    y = np.full(5000, CANVAS_CENTER_Y)
    tight, _ = scatter_toward(x, y, 0.05, rng)
    loose, _ = scatter_toward(x, y, 0.27, rng)
    assert tight.std() < loose.std()


def test_scatter_scalar_and_center():
    rng = np.random.default_rng(2)
    p = scatter_toward(CANVAS_CENTER_X, CANVAS_CENTER_Y, 0.27, rng)
    assert p.x == CANVAS_CENTER_X and p.y == CANVAS_CENTER_Y


def test_radial_contract_matches_force_law():
    ratio = 4.0
    p = radial_contract(CANVAS_CENTER_X + 100.0, CANVAS_CENTER_Y, ratio)
    expected_shift = ratio * 100.0 / (100.0 ** 2) ** 0.6
    assert float(p.x) == pytest.approx(CANVAS_CENTER_X + 100.0 + expected_shift)
    assert float(p.y) == pytest.approx(CANVAS_CENTER_Y)


def test_forces_defined_at_center():
    """Zero distance means zero force: no exception, no inf/nan."""
    rng = np.random.default_rng(3)

    p = radial_contract(CANVAS_CENTER_X, CANVAS_CENTER_Y, 10)
    assert np.isfinite(p.x) and np.isfinite(p.y)
    assert (float(p.x), float(p.y)) == (CANVAS_CENTER_X, CANVAS_CENTER_Y)

    q = radial_pulse_displace(CANVAS_CENTER_X, CANVAS_CENTER_Y, 15, rng)
    assert np.isfinite(q.x) and np.isfinite(q.y)
    assert abs(q.x - CANVAS_CENTER_X) <= 1 and abs(q.y - CANVAS_CENTER_Y) <= 1

    xs = np.array([CANVAS_CENTER_X, CANVAS_CENTER_X + 50])
    ys = np.array([CANVAS_CENTER_Y, CANVAS_CENTER_Y])
    v = radial_contract(xs, ys, 10)
    assert np.all(np.isfinite(v.x))


def test_pulse_displace_noise_only_at_zero_ratio():
    rng = np.random.default_rng(4)
    x = np.full(1000, 500.0)
    y = np.full(1000, 300.0)
    px, py = radial_pulse_displace(x, y, 0.0, rng)
    assert np.all(np.abs(px - x) <= 1) and np.all(np.abs(py - y) <= 1)
    assert np.unique(px).size > 1, "each point gets its own jitter"


def test_pulse_displace_direction_follows_ratio_sign():
    rng = np.random.default_rng(5)
    x = np.full(1000, CANVAS_CENTER_X + 200.0)
    y = np.full(1000, CANVAS_CENTER_Y)
    inward, _ = radial_pulse_displace(x, y, 15.0, rng)
    outward, _ = radial_pulse_displace(x, y, -15.0, rng)
    assert inward.mean() < x[0] < outward.mean()


def test_periodic_pulse():
    assert periodic_pulse(0) == 0
    peak = periodic_pulse(math.pi / 8)
    assert peak == pytest.approx(2 / math.pi)
    for p in (0.1, 0.7, 1.3, 2.9):
        assert periodic_pulse(p + math.pi / 2) == pytest.approx(periodic_pulse(p), abs=1e-12)
    assert periodic_pulse(3 * math.pi / 8) == pytest.approx(-peak)
