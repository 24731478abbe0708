"""Main run loop - ties together Canvas and Simulator."""

import time
from typing import Callable

from heartfield.canvas import Canvas
from heartfield.geometry import CANVAS_HEIGHT, CANVAS_WIDTH
from heartfield.simulator import Simulator

# Callback type: fn(canvas, time_seconds, frame_number) -> None
RenderFn = Callable[[Canvas, float, int], None]


def run(render: RenderFn, fps: int = 60, title: str = "Heart",
        scale: float = 1, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> None:
    """Main entry point. Runs the render loop with a simulator preview.

    Args:
        render: Callback called each frame with (canvas, elapsed_time, frame_number).
                Draw to the canvas each frame. Canvas is NOT auto-cleared between frames.
        fps: Target frames per second (default 60, one tick per display refresh).
        title: Window title.
        scale: Window scale factor relative to the canvas (default 1).
        width: Canvas width in pixels (default 840).
        height: Canvas height in pixels (default 680).
    """
    canvas = Canvas(width, height)
    sim = Simulator(canvas, scale=scale, title=title)

    start = time.monotonic()
    frame = 0

    try:
        while True:
            t = time.monotonic() - start
            render(canvas, t, frame)

            if not sim.update():
                break

            sim.tick(fps)
            frame += 1
    except KeyboardInterrupt:
        pass
    finally:
        sim.close()
        elapsed = time.monotonic() - start
        print(f"[run] {title} stopped after {frame} frames ({elapsed:.1f}s)")
