import argparse
import sys
from typing import List, Optional

import pygame

from fractals import config
from fractals.controller import FractalDisplayController
from fractals.errors import FractalError
from fractals.log import setup_logger
from fractals.patterns.library import FractalKind
from fractals.render.canvas import PygameRenderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fractals", description="Render a classic fractal to an image.")
    parser.add_argument("kind", nargs="?", help="fractal kind, e.g. Tree, KochSnowflake, dragon")
    parser.add_argument("--depth", type=int, default=None, help="recursion depth (default: the kind's suggested depth)")
    parser.add_argument("--seed", type=int, default=None, help="seed for branch jitter / line colours")
    parser.add_argument("--size", type=float, default=None, help="canvas side in pixels")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--out", default=None, help="write the rendered image here (png/bmp/tga)")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--list", action="store_true", help="list fractal kinds and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list:
        for kind in FractalKind:
            print(f"{kind.value:<18} suggested depth {kind.suggested_depth}")
        return 0

    logger = setup_logger("fractals", args.log_level or "INFO", args.log_file)
    try:
        cfg = config.load_config(args.config) if args.config else config.FractalConfig()
    except (FractalError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 2
    cfg = cfg.with_overrides(seed=args.seed, canvas_size=args.size, log_level=args.log_level, log_file=args.log_file)
    setup_logger("fractals", cfg.log_level, cfg.log_file)

    if not args.kind:
        logger.error("no fractal kind given (use --list to see them)")
        return 2

    try:
        kind = FractalKind.parse(args.kind)
        pygame.init()
        depth = args.depth if args.depth is not None else kind.suggested_depth
        renderer = PygameRenderer(size=max(1, round(cfg.canvas_size)), background=cfg.background)
        drawing = FractalDisplayController(renderer, kind, cfg).run(depth)
    except FractalError as e:
        logger.error("%s", e)
        return 2

    if args.out:
        renderer.save(args.out)
        logger.info("saved %s (%d commands) to %s", kind.value, len(drawing), args.out)
    else:
        print(f"{kind.value} depth {depth}: {len(drawing)} commands")
    return 0


if __name__ == "__main__":
    sys.exit(main())
