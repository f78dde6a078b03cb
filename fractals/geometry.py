"""Point/angle/length helpers shared by every fractal generator.

Angles are in degrees, 0 along +x, growing clockwise because screen y grows
downward.
"""
import math
import random
from typing import NamedTuple, Tuple

DEGS_TO_RADS = math.pi / 180.0
RADS_TO_DEGS = 180.0 / math.pi

# all starting layouts are written against this canvas side and scaled
REFERENCE_CANVAS = 640.0

Color = Tuple[int, int, int]
Size = Tuple[float, float]


class Point(NamedTuple):
    x: float
    y: float


def next_point(origin: Tuple[float, float], angle: float, length: float) -> Point:
    """Project ``length`` units from ``origin`` along heading ``angle``."""
    rads = angle * DEGS_TO_RADS
    return Point(origin[0] + math.cos(rads) * length, origin[1] + math.sin(rads) * length)


def heading(start: Tuple[float, float], end: Tuple[float, float]) -> float:
    """Heading in degrees of the segment start -> end."""
    return math.atan2(end[1] - start[1], end[0] - start[0]) * RADS_TO_DEGS


def distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def scale_for(canvas_size: float) -> float:
    return canvas_size / REFERENCE_CANVAS


def rand_colour(rng: random.Random, lo: int = 15, hi: int = 230) -> Color:
    """Random colour with every channel in [lo, hi), so never pure white or black."""
    return (rng.randrange(lo, hi), rng.randrange(lo, hi), rng.randrange(lo, hi))
