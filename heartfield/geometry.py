"""Heart curve and radial force helpers.

Every point helper works on scalars or on numpy arrays of coordinates, so the
generator can push a whole point set through in one call. Helpers that need
randomness take a numpy Generator instead of touching global state.
"""

import math
from typing import NamedTuple

import numpy as np

# --- Canvas ---
CANVAS_WIDTH = 840
CANVAS_HEIGHT = 680
CANVAS_CENTER_X = CANVAS_WIDTH / 2
CANVAS_CENTER_Y = CANVAS_HEIGHT / 2
IMAGE_ENLARGE = 11

# --- Scatter calibration ---
EDGE_SPREAD = 0.05
CENTER_SPREAD = 0.27

# Exponents applied to the squared distance from center
CONTRACT_EXPONENT = 0.6
PULSE_EXPONENT = 0.42


class Point(NamedTuple):
    x: float
    y: float


def _inverse_power(d2, exponent):
    """1 / d2**exponent, defined as 0 where d2 == 0 (point sits on the center)."""
    d2 = np.asarray(d2, dtype=float)
    safe = np.where(d2 > 0, d2, 1.0)
    return np.where(d2 > 0, safe ** -exponent, 0.0)


def heart_curve_point(t) -> Point:
    """Sample the heart boundary at parameter t, in canvas pixels.

    x(t) = 17 sin^3 t, y(t) = -(16 cos t - 5 cos 2t - 3 cos 3t), enlarged and
    centered on the canvas, then floored to whole pixels.
    """
    x = 17 * np.sin(t) ** 3
    y = -(16 * np.cos(t) - 5 * np.cos(2 * t) - 3 * np.cos(3 * t))
    x = x * IMAGE_ENLARGE + CANVAS_CENTER_X
    y = y * IMAGE_ENLARGE + CANVAS_CENTER_Y
    return Point(np.floor(x), np.floor(y))


def scatter_toward(x, y, spread: float, rng: np.random.Generator) -> Point:
    """Pull a point toward the center by an exponentially distributed fraction per axis.

    Args:
        x, y: Point coordinates (scalars or equal-shape arrays).
        spread: Mean pull fraction. Larger spreads scatter points deeper inside.
        rng: Random source.
    """
    size = np.shape(x) or None
    # 1 - random() lies in (0, 1], which keeps log() finite
    ratio_x = -spread * np.log(1.0 - rng.random(size))
    ratio_y = -spread * np.log(1.0 - rng.random(size))
    dx = ratio_x * (x - CANVAS_CENTER_X)
    dy = ratio_y * (y - CANVAS_CENTER_Y)
    return Point(x - dx, y - dy)


def radial_contract(x, y, ratio: float) -> Point:
    """Shift a point along its center ray with force -1 / d2**0.6."""
    ox = x - CANVAS_CENTER_X
    oy = y - CANVAS_CENTER_Y
    force = -_inverse_power(ox * ox + oy * oy, CONTRACT_EXPONENT)
    return Point(x - ratio * force * ox, y - ratio * force * oy)


def periodic_pulse(p: float) -> float:
    """Heartbeat waveform; one full beat every pi/2 of input."""
    return 2 * (2 * math.sin(4 * p)) / (2 * math.pi)


def radial_pulse_displace(x, y, ratio: float, rng: np.random.Generator) -> Point:
    """Breathe a point in or out by ratio / d2**0.42, plus +/-1px jitter per axis."""
    ox = x - CANVAS_CENTER_X
    oy = y - CANVAS_CENTER_Y
    force = _inverse_power(ox * ox + oy * oy, PULSE_EXPONENT)
    size = np.shape(x) or None
    dx = ratio * force * ox + rng.uniform(-1.0, 1.0, size)
    dy = ratio * force * oy + rng.uniform(-1.0, 1.0, size)
    return Point(x - dx, y - dy)
