"""Record the heart animation to an animated GIF by rendering frames headlessly.

Usage: python -m heartfield.record [output.gif]
Output: media/heart.gif by default
"""

import sys
from pathlib import Path

from PIL import Image

from heartfield.canvas import Canvas
from heartfield.generator import DEFAULT_FRAME_COUNT, HeartGenerator
from heartfield.scene import HeartScene

# GIF settings
SCALE = 0.5   # Downscale factor (840*0.5 = 420px)
GIF_FPS = 30  # Frames per second in the GIF


def default_output() -> Path:
    """media/heart.gif under the current working directory, resolved at call time."""
    return Path.cwd() / "media" / "heart.gif"


def canvas_to_image(canvas: Canvas, scale: float = SCALE) -> Image.Image:
    """Convert a Canvas buffer to a rescaled PIL Image."""
    img = Image.frombytes("RGB", (canvas.width, canvas.height), canvas.get_buffer())
    if scale != 1:
        img = img.resize(
            (max(1, int(canvas.width * scale)), max(1, int(canvas.height * scale))),
            Image.NEAREST,
        )
    return img


def record_gif(out_path: str | Path, frame_count: int = DEFAULT_FRAME_COUNT,
               fps: float = GIF_FPS, scale: float = SCALE, seed: int | None = None) -> Path:
    """Render one full pulse cycle and save it as a looping GIF.

    Args:
        out_path: Destination file; parent directories are created.
        frame_count: Frames per pulse cycle, and frames in the GIF.
        fps: GIF playback rate.
        scale: Output size relative to the canvas.
        seed: Random seed for a reproducible recording.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    scene = HeartScene(HeartGenerator(frame_count, seed=seed), seed=seed)
    canvas = Canvas()
    dt = 1.0 / fps
    frames = []
    for i in range(frame_count):
        scene.render(canvas, i * dt, i)
        frames.append(canvas_to_image(canvas, scale))

    # Save as GIF (duration in ms per frame)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"[record] Saved {out_path} ({len(frames)} frames, {frame_count / fps:.1f}s)")
    return out_path


if __name__ == "__main__":
    out = Path(sys.argv[1]) if len(sys.argv) > 1 else default_output()
    record_gif(out)
