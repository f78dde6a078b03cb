from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

from fractals.geometry import Color, Point, Size


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: Color
    width: float = 1.0


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned square/rectangle; filled ones are outlined too."""

    origin: Point
    size: Size
    outline_color: Color
    outline_width: float = 1.0
    filled: bool = False
    fill_color: Optional[Color] = None


@dataclass(frozen=True)
class Ellipse:
    """Ellipse inscribed in the bounding box origin/size."""

    origin: Point
    size: Size
    outline_color: Color
    outline_width: float = 1.0


DrawCommand = Union[Line, Rectangle, Ellipse]


@dataclass
class Drawing:
    """Ordered output of one fractal run.

    Later commands paint over earlier ones. ``antialias`` is a hint for the
    renderer; square fractals turn it off to keep fills seam-free.
    """

    kind: str
    depth: int
    commands: List[DrawCommand] = field(default_factory=list)
    antialias: bool = True

    def __iter__(self) -> Iterator[DrawCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __getitem__(self, idx):
        return self.commands[idx]

    def of_type(self, cls) -> List[DrawCommand]:
        return [c for c in self.commands if isinstance(c, cls)]
