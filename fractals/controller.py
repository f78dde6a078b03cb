"""
Display controller: one place that wires the factory, a generator and a
renderer together for a single run.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from fractals.config import FractalConfig
from fractals.patterns.builder import check_depth
from fractals.patterns.library import FractalKind, create_fractal
from fractals.render.canvas import Renderer
from fractals.state.commands import Drawing

log = logging.getLogger(__name__)


class FractalDisplayController:
    def __init__(
        self,
        renderer: Renderer,
        kind: Union[str, FractalKind],
        cfg: Optional[FractalConfig] = None,
    ) -> None:
        self.renderer = renderer
        self.kind = FractalKind.parse(kind)
        self.cfg = cfg if cfg is not None else FractalConfig()

    def run(self, depth: int) -> Drawing:
        """Generate ``kind`` at ``depth`` with a fresh generator and hand it to the renderer."""
        check_depth(depth)
        fractal = create_fractal(self.kind, seed=self.cfg.seed)
        drawing = fractal.run(depth, self.cfg)
        log.info("%s depth=%d -> %d commands", self.kind.value, depth, len(drawing))
        self.renderer.render(drawing)
        return drawing
