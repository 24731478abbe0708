"""Pulsing particle heart - gold heart over a neon grid and starfield."""

import os

from heartfield import HeartScene, run

# Set HEART_SEED to replay the same animation
_seed = os.environ.get("HEART_SEED")
scene = HeartScene(seed=int(_seed) if _seed else None)


if __name__ == "__main__":
    run(scene.render, fps=60, title="Heart")
