"""Pulsing particle heart: precomputed frames plus a small canvas toolkit to play them."""

from heartfield.canvas import Canvas
from heartfield.generator import Frame, HeartGenerator, SizedPoint
from heartfield.run import run
from heartfield.scene import HeartScene

__all__ = ["Canvas", "Frame", "HeartGenerator", "HeartScene", "SizedPoint", "run"]
