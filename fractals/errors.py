"""Error types raised by the fractal engine.

Everything here is raised before recursion starts, so a failed run never
emits a partial drawing.
"""


class FractalError(Exception):
    """Base class for engine errors."""


class InvalidArgument(FractalError, ValueError):
    """Negative depth, unknown fractal kind, a non-positive canvas or a bad colour range."""


class ResourceLimitExceeded(FractalError):
    """The requested depth would emit more commands than the configured ceiling."""

    def __init__(self, kind: str, depth: int, limit: int) -> None:
        super().__init__(f"{kind} at depth {depth} would emit more than {limit} commands")
        self.kind = kind
        self.depth = depth
        self.limit = limit


class ConfigError(FractalError):
    """Malformed configuration file."""
