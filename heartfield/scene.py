"""Pulsing heart scene - particle heart over a grid, starfield and scanlines."""

import numpy as np

from heartfield.canvas import Canvas
from heartfield.generator import HeartGenerator
from heartfield.geometry import CANVAS_HEIGHT, CANVAS_WIDTH

# --- Colors ---
BACKGROUND = Canvas.hex(0x0A0A12)
GRID_COLOR = Canvas.hex(0x00FFFF)
STAR_COLOR = Canvas.hex(0x00FFFF)
SCANLINE_COLOR = Canvas.hex(0xFF00FF)
HEART_COLOR = Canvas.hex(0xFFD700)

# --- Layout ---
GRID_SIZE = 40
GRID_ALPHA = 0.05
SCANLINE_STEP = 4
SCANLINE_ALPHA = 0.02

# --- Stars ---
STAR_COUNT = 200
STAR_MAX_SIZE = 2.0
STAR_MIN_OPACITY = 0.2
STAR_ALPHA = 0.5


class Starfield:
    """Fixed stars whose opacity bounces between STAR_MIN_OPACITY and 1."""

    def __init__(self, width: int, height: int, count: int = STAR_COUNT,
                 rng: np.random.Generator | None = None):
        rng = rng if rng is not None else np.random.default_rng()
        self.x = rng.random(count) * width
        self.y = rng.random(count) * height
        self.size = rng.random(count) * STAR_MAX_SIZE
        self.opacity = rng.random(count)
        self.speed = 0.01 + rng.random(count) * 0.03

    def __len__(self) -> int:
        return len(self.x)

    def twinkle(self) -> None:
        """Advance every star one tick, reversing direction at either bound."""
        self.opacity += self.speed
        flip = (self.opacity > 1) | (self.opacity < STAR_MIN_OPACITY)
        self.speed[flip] = -self.speed[flip]

    def draw(self, canvas: Canvas) -> None:
        for x, y, size, opacity in zip(self.x, self.y, self.size, self.opacity):
            # Sub-pixel stars become one faint pixel
            side = max(1, int(round(size)))
            alpha = opacity * STAR_ALPHA * min(1.0, size * size)
            canvas.blend_rect(int(x), int(y), side, side, STAR_COLOR, alpha)


def draw_grid(canvas: Canvas) -> None:
    for x in range(0, canvas.width + 1, GRID_SIZE):
        canvas.blend_rect(x, 0, 1, canvas.height, GRID_COLOR, GRID_ALPHA)
    for y in range(0, canvas.height + 1, GRID_SIZE):
        canvas.blend_rect(0, y, canvas.width, 1, GRID_COLOR, GRID_ALPHA)


def draw_scanlines(canvas: Canvas) -> None:
    for y in range(0, canvas.height, SCANLINE_STEP):
        canvas.blend_rect(0, y, canvas.width, 1, SCANLINE_COLOR, SCANLINE_ALPHA)


class HeartScene:
    """Render callback for run(): one heart frame per tick.

    Args:
        generator: Precomputed heart frames. Built with default settings if omitted.
        seed: Seeds both the generator (when built here) and the starfield.
    """

    def __init__(self, generator: HeartGenerator | None = None, seed: int | None = None,
                 width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
        self.generator = generator if generator is not None else HeartGenerator(seed=seed)
        self.stars = Starfield(width, height, rng=np.random.default_rng(seed))

    def render(self, canvas: Canvas, t: float, frame: int) -> None:
        canvas.clear(BACKGROUND)
        draw_grid(canvas)

        self.stars.twinkle()
        self.stars.draw(canvas)

        draw_scanlines(canvas)

        points = self.generator.get_frame(frame)
        canvas.squares(points.x, points.y, points.size, HEART_COLOR)
