"""Fractal generators and the factory that selects them."""

from .builder import FractalBase, Tree, KochSnowflake, SierpinskiGasket, Vicsek, AltVicsek, Dragon
from .library import FractalKind, SUGGESTED_DEPTHS, create_fractal, suggested_depth

__all__ = [
    "FractalBase",
    "Tree",
    "KochSnowflake",
    "SierpinskiGasket",
    "Vicsek",
    "AltVicsek",
    "Dragon",
    "FractalKind",
    "SUGGESTED_DEPTHS",
    "create_fractal",
    "suggested_depth",
]
