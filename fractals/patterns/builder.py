"""Recursive fractal generators producing ordered draw commands."""
import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from fractals.config import FractalConfig
from fractals.errors import InvalidArgument, ResourceLimitExceeded
from fractals.geometry import Point, next_point, heading, rand_colour, scale_for
from fractals.patterns import colors
from fractals.patterns.colors import shade_by_depth
from fractals.rng import RNG, new_rng
from fractals.state.commands import DrawCommand, Drawing, Ellipse, Line, Rectangle

log = logging.getLogger(__name__)


def check_depth(depth: int) -> None:
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise InvalidArgument(f"depth must be an integer, got {depth!r}")
    if depth < 0:
        raise InvalidArgument(f"depth must be >= 0, got {depth}")


def check_canvas(canvas_size: float) -> None:
    if isinstance(canvas_size, bool) or not isinstance(canvas_size, (int, float)):
        raise InvalidArgument(f"canvas size must be a number, got {canvas_size!r}")
    if not canvas_size > 0:
        raise InvalidArgument(f"canvas size must be > 0, got {canvas_size!r}")


def check_colour_range(lo: int, hi: int) -> None:
    """Random colour channels are drawn from [lo, hi), which must sit inside 0..255."""
    for value in (lo, hi):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"colour range bounds must be integers, got {value!r}")
    if not 0 <= lo < hi <= 256:
        raise InvalidArgument(f"colour range must satisfy 0 <= min < max <= 256, got [{lo}, {hi})")


@dataclass
class FractalBase:
    name: str
    rng: Optional[RNG] = None
    antialias: bool = True

    def command_count(self, depth: int) -> int:
        """Exact number of commands ``run(depth)`` emits."""
        raise NotImplementedError

    def fits(self, depth: int, limit: int) -> bool:
        """
        True when ``run(depth)`` stays within ``limit`` commands.

        Counts never shrink as depth grows, so this walks up from depth 0 and
        stops at the first level over the limit instead of evaluating a huge
        power for an absurd depth.
        """
        for level in range(depth + 1):
            if self.command_count(level) > limit:
                return False
        return True

    def generate(self, out: List[DrawCommand], depth: int, cfg: FractalConfig) -> None:
        raise NotImplementedError

    def run(self, depth: int, config: Optional[FractalConfig] = None) -> Drawing:
        """
        Validate inputs, then recurse and collect commands in emission order.

        Nothing is generated when validation fails.
        """
        cfg = config if config is not None else FractalConfig()
        check_depth(depth)
        check_canvas(cfg.canvas_size)
        check_colour_range(cfg.color_min, cfg.color_max)
        if not self.fits(depth, cfg.max_commands):
            raise ResourceLimitExceeded(self.name, depth, cfg.max_commands)

        out: List[DrawCommand] = []
        self.generate(out, depth, cfg)
        log.debug("%s depth=%d emitted %d commands", self.name, depth, len(out))
        return Drawing(kind=self.name, depth=depth, commands=out, antialias=self.antialias)


@dataclass
class Tree(FractalBase):
    """
    Binary tree. Each branch is ``depth * length_modifier`` long, so branches
    shrink toward the tips; pen width shrinks by ``pen_reduce`` per level.
    The two child branches are bent by independent random offsets.
    """

    start_angle: float = -90.0  # straight up
    pen_start: float = 17.0
    pen_reduce: float = 1.8
    pen_min: float = 1.0
    length_modifier: float = 4.6
    jitter_min: int = 10
    jitter_max: int = 30

    def __init__(self, rng: Optional[RNG] = None) -> None:
        super().__init__(name="Tree", rng=rng if rng is not None else new_rng())

    def command_count(self, depth: int) -> int:
        return 2 ** depth - 1

    def generate(self, out: List[DrawCommand], depth: int, cfg: FractalConfig) -> None:
        size = cfg.canvas_size
        start = Point(size / 2, size - size / 6)
        modifier = self.length_modifier * scale_for(size)
        self._grow(out, depth, start, self.start_angle, self.pen_start, modifier)

    def _grow(self, out: List[DrawCommand], depth: int, pos: Point, angle: float, pen: float, modifier: float) -> None:
        if depth < 1:
            return
        end = next_point(pos, angle, depth * modifier)
        out.append(Line(pos, end, shade_by_depth(depth), max(self.pen_min, pen)))
        right = self.rng.randrange(self.jitter_min, self.jitter_max)
        self._grow(out, depth - 1, end, angle + right, pen - self.pen_reduce, modifier)
        left = self.rng.randrange(self.jitter_min, self.jitter_max)
        self._grow(out, depth - 1, end, angle - left, pen - self.pen_reduce, modifier)


@dataclass
class KochSnowflake(FractalBase):
    """Three Koch curves on the sides of an equilateral triangle, each line a random colour."""

    start_length: float = 500.0
    spacing_top: float = 90.0
    bump_angle: float = 60.0
    side_rotations: tuple = (0.0, 120.0, 240.0)
    pen: float = 2.0

    def __init__(self, rng: Optional[RNG] = None) -> None:
        super().__init__(name="KochSnowflake", rng=rng if rng is not None else new_rng())

    def command_count(self, depth: int) -> int:
        return len(self.side_rotations) * 4 ** depth

    def generate(self, out: List[DrawCommand], depth: int, cfg: FractalConfig) -> None:
        size = cfg.canvas_size
        scale = scale_for(size)
        length = self.start_length * scale
        start = Point(size / 8, size / 8 + self.spacing_top * scale)
        # each side starts where the previous one ends
        for rotation in self.side_rotations:
            self._curve(out, depth, start, rotation, length, cfg)
            start = next_point(start, rotation, length)

    def _curve(self, out: List[DrawCommand], depth: int, start: Point, angle: float, length: float, cfg: FractalConfig) -> None:
        if depth == 0:
            end = next_point(start, angle, length)
            color = rand_colour(self.rng, cfg.color_min, cfg.color_max)
            out.append(Line(start, end, color, self.pen))
            return
        third = length / 3.0
        # corners of the bump, left to right: 1__2/3\4__5
        p2 = next_point(start, angle, third)
        p3 = next_point(p2, angle - self.bump_angle, third)
        p4 = next_point(p3, angle + self.bump_angle, third)
        self._curve(out, depth - 1, start, angle, third, cfg)
        self._curve(out, depth - 1, p2, angle - self.bump_angle, third, cfg)
        self._curve(out, depth - 1, p3, angle + self.bump_angle, third, cfg)
        self._curve(out, depth - 1, p4, angle, third, cfg)


@dataclass
class SierpinskiGasket(FractalBase):
    """Square gasket: recurse into three quadrants, leave the lower-left one empty."""

    start_xy: float = 64.0
    start_length: float = 512.0
    pen: float = 2.0
    fill: tuple = colors.MEDIUM_SEA_GREEN
    outline: tuple = colors.BLACK

    def __init__(self, rng: Optional[RNG] = None) -> None:
        super().__init__(name="SierpinskiGasket", rng=rng if rng is not None else new_rng(), antialias=False)

    def command_count(self, depth: int) -> int:
        return 3 ** depth + 1

    def generate(self, out: List[DrawCommand], depth: int, cfg: FractalConfig) -> None:
        scale = scale_for(cfg.canvas_size)
        origin = Point(self.start_xy * scale, self.start_xy * scale)
        length = self.start_length * scale
        self._subdivide(out, depth, origin, length)
        # frame around the whole gasket
        out.append(Rectangle(origin, (length, length), self.outline, self.pen))

    def _subdivide(self, out: List[DrawCommand], depth: int, origin: Point, length: float) -> None:
        if depth == 0:
            out.append(Rectangle(origin, (length, length), self.outline, self.pen, filled=True, fill_color=self.fill))
            return
        half = length / 2.0
        x, y = origin
        self._subdivide(out, depth - 1, Point(x + half, y), half)         # upper right
        self._subdivide(out, depth - 1, Point(x + half, y + half), half)  # lower right
        self._subdivide(out, depth - 1, Point(x, y), half)                # upper left


def cross_cells(origin: Point, length: float) -> List[Point]:
    """Origins of the five cross cells (top, left, centre, right, bottom) of a 3x3 grid."""
    third = length / 3.0
    x, y = origin
    return [
        Point(x + third, y),
        Point(x, y + third),
        Point(x + third, y + third),
        Point(x + 2 * third, y + third),
        Point(x + third, y + 2 * third),
    ]


@dataclass
class Vicsek(FractalBase):
    """Box fractal: only the terminal cells are drawn."""

    pen: float = 1.0
    fill: tuple = colors.ORANGE_RED
    outline: tuple = colors.BLACK

    def __init__(self, rng: Optional[RNG] = None) -> None:
        super().__init__(name="Vicsek", rng=rng if rng is not None else new_rng(), antialias=False)

    def command_count(self, depth: int) -> int:
        return 5 ** depth

    def generate(self, out: List[DrawCommand], depth: int, cfg: FractalConfig) -> None:
        self._subdivide(out, depth, Point(0.0, 0.0), cfg.canvas_size - 1)

    def _subdivide(self, out: List[DrawCommand], depth: int, origin: Point, length: float) -> None:
        if depth == 0:
            out.append(Rectangle(origin, (length, length), self.outline, self.pen, filled=True, fill_color=self.fill))
            return
        for cell in cross_cells(origin, length):
            self._subdivide(out, depth - 1, cell, length / 3.0)


@dataclass
class AltVicsek(FractalBase):
    """Vicsek variant that draws an inscribed ellipse at every level, not just the last."""

    pen: float = 1.0
    outline: tuple = colors.BLACK

    def __init__(self, rng: Optional[RNG] = None) -> None:
        super().__init__(name="AltVicsek", rng=rng if rng is not None else new_rng())

    def command_count(self, depth: int) -> int:
        return (5 ** (depth + 1) - 1) // 4

    def generate(self, out: List[DrawCommand], depth: int, cfg: FractalConfig) -> None:
        self._subdivide(out, depth, Point(0.0, 0.0), cfg.canvas_size - 1)

    def _subdivide(self, out: List[DrawCommand], depth: int, origin: Point, length: float) -> None:
        if depth < 0:
            return
        out.append(Ellipse(origin, (length, length), self.outline, self.pen))
        for cell in cross_cells(origin, length):
            self._subdivide(out, depth - 1, cell, length / 3.0)


@dataclass
class Dragon(FractalBase):
    """
    Dragon curve. Each segment is the hypotenuse of an isosceles right
    triangle whose two legs replace it at the next level.
    """

    start_x: float = 150.0
    start_y: float = 256.0
    start_length: float = 384.0
    rotate: float = 45.0
    pen: float = 1.0
    color: tuple = colors.INDIGO

    def __init__(self, rng: Optional[RNG] = None) -> None:
        super().__init__(name="Dragon", rng=rng if rng is not None else new_rng())

    def command_count(self, depth: int) -> int:
        return 2 ** depth

    def generate(self, out: List[DrawCommand], depth: int, cfg: FractalConfig) -> None:
        scale = scale_for(cfg.canvas_size)
        start = Point(self.start_x * scale, self.start_y * scale)
        length = self.start_length * scale
        self._subdivide(out, depth, start, Point(start.x + length, start.y), length)

    def _subdivide(self, out: List[DrawCommand], depth: int, start: Point, end: Point, length: float) -> None:
        if depth == 0:
            out.append(Line(start, end, self.color, self.pen))
            return
        new_len = math.sqrt(length * length / 2.0)
        corner = next_point(start, heading(start, end) + self.rotate, new_len)
        self._subdivide(out, depth - 1, start, corner, new_len)
        self._subdivide(out, depth - 1, end, corner, new_len)
