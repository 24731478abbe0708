"""RGB pixel buffer with drawing primitives."""

import numpy as np

from heartfield.geometry import CANVAS_HEIGHT, CANVAS_WIDTH

# Type alias for RGB tuples
Color = tuple[int, int, int]


class Canvas:
    """RGB pixel buffer with drawing primitives.

    Pixels live in a (height, width, 3) uint8 array, so pixel (x, y) is
    pixels[y, x]. Every primitive clips to the surface; out-of-bounds
    writes are silently ignored.
    """

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def clear(self, color: Color = (0, 0, 0)) -> None:
        """Fill entire canvas with a color (default black)."""
        self.pixels[:] = color

    def set(self, x: int, y: int, color: Color) -> None:
        """Set a single pixel."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color

    def get(self, x: int, y: int) -> Color:
        """Get a pixel's color. Returns (0,0,0) for out-of-bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            r, g, b = self.pixels[y, x]
            return (int(r), int(g), int(b))
        return (0, 0, 0)

    def _clip(self, x: int, y: int, w: int, h: int) -> tuple[int, int, int, int]:
        x0, y0 = max(0, x), max(0, y)
        x1, y1 = min(self.width, x + w), min(self.height, y + h)
        return x0, y0, x1, y1

    def rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Draw a filled rectangle."""
        x0, y0, x1, y1 = self._clip(x, y, w, h)
        if x0 < x1 and y0 < y1:
            self.pixels[y0:y1, x0:x1] = color

    def blend_rect(self, x: int, y: int, w: int, h: int, color: Color, alpha: float) -> None:
        """Draw a filled rectangle composited over the existing pixels at the given opacity."""
        alpha = min(1.0, max(0.0, alpha))
        x0, y0, x1, y1 = self._clip(x, y, w, h)
        if alpha == 0.0 or x0 >= x1 or y0 >= y1:
            return
        region = self.pixels[y0:y1, x0:x1].astype(np.float32)
        region += (np.asarray(color, dtype=np.float32) - region) * alpha
        self.pixels[y0:y1, x0:x1] = np.rint(region).astype(np.uint8)

    def squares(self, xs: np.ndarray, ys: np.ndarray, sizes: np.ndarray, color: Color) -> None:
        """Paint a batch of filled squares; square i has its top-left at (xs[i], ys[i])."""
        ix = np.floor(xs).astype(np.int64)
        iy = np.floor(ys).astype(np.int64)
        sizes = np.asarray(sizes)
        if sizes.size == 0:
            return
        for dy in range(int(sizes.max())):
            for dx in range(int(sizes.max())):
                sel = sizes > max(dx, dy)
                px = ix[sel] + dx
                py = iy[sel] + dy
                inside = (px >= 0) & (px < self.width) & (py >= 0) & (py < self.height)
                self.pixels[py[inside], px[inside]] = color

    @staticmethod
    def rgb(r: int, g: int, b: int) -> Color:
        """Convenience: clamp and return an RGB tuple."""
        return (max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b)))

    @staticmethod
    def hex(color: int) -> Color:
        """Convert 0xRRGGBB integer to (R, G, B) tuple."""
        return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as row-major RGB bytes."""
        return self.pixels.tobytes()
