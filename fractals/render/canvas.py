"""Renderers that consume a Drawing. The pygame one rasterizes onto a Surface."""
from typing import Optional, Tuple

import pygame

from fractals.state.commands import Drawing, Ellipse, Line, Rectangle


class Renderer:
    """Applies draw commands in the order received."""

    antialias: bool = True

    def render(self, drawing: Drawing) -> None:
        self.antialias = drawing.antialias
        for cmd in drawing:
            if isinstance(cmd, Line):
                self.draw_line(cmd)
            elif isinstance(cmd, Rectangle):
                self.draw_rectangle(cmd)
            elif isinstance(cmd, Ellipse):
                self.draw_ellipse(cmd)
            else:
                raise TypeError(f"Unsupported draw command {cmd!r}")

    def draw_line(self, cmd: Line) -> None:
        raise NotImplementedError

    def draw_rectangle(self, cmd: Rectangle) -> None:
        raise NotImplementedError

    def draw_ellipse(self, cmd: Ellipse) -> None:
        raise NotImplementedError


def _rect(origin, size) -> pygame.Rect:
    return pygame.Rect(round(origin[0]), round(origin[1]), max(1, round(size[0])), max(1, round(size[1])))


def _width(w: float) -> int:
    return max(1, round(w))


class PygameRenderer(Renderer):
    def __init__(
        self,
        size: int = 640,
        surface: Optional[pygame.Surface] = None,
        background: Tuple[int, int, int] = (255, 255, 255),
    ) -> None:
        # off-screen surface unless the caller hands us a display surface
        self.surface = surface if surface is not None else pygame.Surface((size, size), 0, 32)
        self.background = background
        self.clear()

    def clear(self) -> None:
        self.surface.fill(self.background)

    def draw_line(self, cmd: Line) -> None:
        width = _width(cmd.width)
        # aaline only draws 1px lines
        if self.antialias and width == 1:
            pygame.draw.aaline(self.surface, cmd.color, cmd.start, cmd.end)
        else:
            pygame.draw.line(self.surface, cmd.color, cmd.start, cmd.end, width)

    def draw_rectangle(self, cmd: Rectangle) -> None:
        rect = _rect(cmd.origin, cmd.size)
        if cmd.filled:
            pygame.draw.rect(self.surface, cmd.fill_color or cmd.outline_color, rect)
        pygame.draw.rect(self.surface, cmd.outline_color, rect, _width(cmd.outline_width))

    def draw_ellipse(self, cmd: Ellipse) -> None:
        pygame.draw.ellipse(self.surface, cmd.outline_color, _rect(cmd.origin, cmd.size), _width(cmd.outline_width))

    def save(self, path: str) -> None:
        pygame.image.save(self.surface, path)
