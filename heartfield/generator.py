"""Precomputed particle frames for the pulsing heart.

All randomness is drawn while the generator is constructed. After that every
frame is a frozen snapshot, so playback is a plain cyclic lookup.
"""

import math
import operator
import time
from typing import Iterator, NamedTuple

import numpy as np

from heartfield.geometry import (
    CENTER_SPREAD,
    EDGE_SPREAD,
    heart_curve_point,
    periodic_pulse,
    radial_contract,
    radial_pulse_displace,
    scatter_toward,
)

# --- Point counts ---
OUTLINE_COUNT = 1000
EDGE_PER_OUTLINE = 3
CENTER_COUNT = 5000

# --- Pulse ---
RATIO_SCALE = 15
HALO_BASE_RADIUS = 4
HALO_RADIUS_SWING = 6
HALO_BASE_COUNT = 1500
HALO_COUNT_SWING = 2000
HALO_JITTER = 60
HALO_SMALL_CHANCE = 0.67  # size 1, otherwise size 2

DEFAULT_FRAME_COUNT = 120


class SizedPoint(NamedTuple):
    x: float
    y: float
    size: int


class BasePointSet(NamedTuple):
    """Point sets built once per generator, each an (n, 2) read-only array."""
    outline: np.ndarray
    edge_diffusion: np.ndarray
    center_diffusion: np.ndarray


class FrameParams(NamedTuple):
    pulse: float
    ratio: float
    halo_radius: int
    halo_count: int


def frame_params(frame: int, frame_count: int) -> FrameParams:
    """Pulse-driven parameters for one frame of a frame_count-long cycle."""
    pulse = periodic_pulse(frame / frame_count * math.pi)
    return FrameParams(
        pulse=pulse,
        ratio=RATIO_SCALE * pulse,
        halo_radius=math.floor(HALO_BASE_RADIUS + HALO_RADIUS_SWING * (1 + pulse)),
        halo_count=math.floor(HALO_BASE_COUNT + HALO_COUNT_SWING * abs(pulse) ** 2),
    )


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def _first_per_pixel(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Indices of the first sample landing on each whole pixel, in sample order."""
    keys = np.column_stack((np.floor(x), np.floor(y)))
    _, first = np.unique(keys, axis=0, return_index=True)
    first.sort()
    return first


class Frame:
    """One immutable snapshot of drawable points, in paint order.

    Stored column-wise (x, y, size arrays) so renderers can paint it in bulk;
    iterating or indexing yields SizedPoint tuples. The first halo_count points
    are halo particles.
    """

    __slots__ = ("x", "y", "size", "halo_count")

    def __init__(self, x: np.ndarray, y: np.ndarray, size: np.ndarray, halo_count: int = 0):
        if not (len(x) == len(y) == len(size)):
            raise ValueError("x, y and size must have the same length")
        # Copies, so freezing never touches the caller's arrays
        object.__setattr__(self, "x", _frozen(np.array(x, dtype=float)))
        object.__setattr__(self, "y", _frozen(np.array(y, dtype=float)))
        object.__setattr__(self, "size", _frozen(np.array(size, dtype=np.int64)))
        object.__setattr__(self, "halo_count", int(halo_count))

    def __setattr__(self, name, value):
        raise AttributeError(f"Frame is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Frame is immutable, cannot delete {name!r}")

    def __len__(self) -> int:
        return len(self.size)

    def __getitem__(self, i: int) -> SizedPoint:
        return SizedPoint(float(self.x[i]), float(self.y[i]), int(self.size[i]))

    def __iter__(self) -> Iterator[SizedPoint]:
        for x, y, s in zip(self.x.tolist(), self.y.tolist(), self.size.tolist()):
            yield SizedPoint(x, y, s)

    def __repr__(self) -> str:
        return f"Frame({len(self)} points, {self.halo_count} halo)"


class HeartGenerator:
    """Builds the heart point sets and precomputes every animation frame.

    Args:
        frame_count: Frames in one pulse cycle (default 120).
        seed: Seed for the random source; None draws fresh entropy.
    """

    def __init__(self, frame_count: int = DEFAULT_FRAME_COUNT, seed: int | None = None):
        if isinstance(frame_count, bool) or not isinstance(frame_count, (int, np.integer)):
            raise TypeError(f"frame_count must be an integer, got {type(frame_count).__name__}")
        if frame_count <= 0:
            raise ValueError(f"frame_count must be positive, got {frame_count}")
        self._frame_count = int(frame_count)
        self._rng = np.random.default_rng(seed)

        start = time.monotonic()
        self._base = self._build(OUTLINE_COUNT)
        self._frames = tuple(self._calc(f) for f in range(self._frame_count))
        # Playback never draws randomness
        self._rng = None

        total = sum(len(f) for f in self._frames)
        print(f"[heart] Precomputed {self._frame_count} frames "
              f"({total // self._frame_count} points/frame avg) in {time.monotonic() - start:.2f}s")

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def base(self) -> BasePointSet:
        return self._base

    def __len__(self) -> int:
        return self._frame_count

    def get_frame(self, frame: int) -> Frame:
        """Return the cached frame for any integer index, wrapping cyclically."""
        return self._frames[operator.index(frame) % self._frame_count]

    def _build(self, count: int) -> BasePointSet:
        rng = self._rng

        # Heart outline
        t = rng.random(count) * 2 * math.pi
        outline = np.column_stack(heart_curve_point(t))

        # Edge diffusion: a tight scatter around each outline point, in outline order
        src = np.repeat(outline, EDGE_PER_OUTLINE, axis=0)
        edge = np.column_stack(scatter_toward(src[:, 0], src[:, 1], EDGE_SPREAD, rng))

        # Center diffusion: resample the outline with replacement, scatter loosely
        src = outline[rng.integers(0, count, CENTER_COUNT)]
        center = np.column_stack(scatter_toward(src[:, 0], src[:, 1], CENTER_SPREAD, rng))

        return BasePointSet(_frozen(outline), _frozen(edge), _frozen(center))

    def _halo(self, radius: int, count: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        rng = self._rng
        t = rng.random(count) * 2 * math.pi
        x, y = heart_curve_point(t)
        x, y = radial_contract(x, y, radius)

        # Dedup is scoped to this frame only
        first = _first_per_pixel(x, y)
        x, y = x[first], y[first]

        n = len(first)
        x = x + rng.uniform(-HALO_JITTER, HALO_JITTER, n)
        y = y + rng.uniform(-HALO_JITTER, HALO_JITTER, n)
        size = np.where(rng.random(n) < HALO_SMALL_CHANCE, 1, 2)
        return x, y, size

    def _calc(self, frame: int) -> Frame:
        rng = self._rng
        params = frame_params(frame, self._frame_count)

        xs, ys, sizes = [], [], []
        hx, hy, hsize = self._halo(params.halo_radius, params.halo_count)
        xs.append(hx)
        ys.append(hy)
        sizes.append(hsize)

        # Outline sizes 1-3, diffusion sizes 1-2
        for points, max_size in ((self._base.outline, 3),
                                 (self._base.edge_diffusion, 2),
                                 (self._base.center_diffusion, 2)):
            x, y = radial_pulse_displace(points[:, 0], points[:, 1], params.ratio, rng)
            xs.append(x)
            ys.append(y)
            sizes.append(rng.integers(1, max_size + 1, len(points)))

        return Frame(np.concatenate(xs), np.concatenate(ys), np.concatenate(sizes),
                     halo_count=len(hx))
