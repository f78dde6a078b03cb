"""
Random source for the randomised fractals.

Tree draws its branch bend offsets from it and KochSnowflake its line
colours; the other kinds take one but never draw from it. Seeding it makes a
drawing repeat command for command.
"""
import random
from typing import Optional


class RNG(random.Random):
    pass


def new_rng(seed: Optional[int] = None) -> RNG:
    """Generator stream for one fractal run; ``seed=None`` gives a different drawing each time."""
    return RNG(seed)
