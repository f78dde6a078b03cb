from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Tuple

import yaml

from fractals.errors import ConfigError


default_canvas_size = 640


@dataclass
class FractalConfig:
    canvas_size: float = default_canvas_size  # square side, pixels
    seed: Optional[int] = None                # None = time-seeded jitter/colours
    max_commands: int = 1 << 20               # reject runs that would emit more
    color_min: int = 15                       # random colour channel range [min, max)
    color_max: int = 230
    background: Tuple[int, int, int] = (255, 255, 255)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def with_overrides(self, **overrides) -> "FractalConfig":
        """Copy of this config with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return _is_int(value) or isinstance(value, float)


def _is_rgb(value) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) == 3
        and all(_is_int(c) and 0 <= c <= 255 for c in value)
    )


# key -> (check, what the value should be)
_value_checks = {
    "canvas_size": (_is_number, "a number"),
    "seed": (lambda v: v is None or _is_int(v), "an integer or null"),
    "max_commands": (_is_int, "an integer"),
    "color_min": (_is_int, "an integer"),
    "color_max": (_is_int, "an integer"),
    "background": (_is_rgb, "a list of three integers 0-255"),
    "log_level": (lambda v: isinstance(v, str), "a level name"),
    "log_file": (lambda v: v is None or isinstance(v, str), "a path or null"),
}


def load_config(path: Path | str) -> FractalConfig:
    """Load a FractalConfig from a YAML mapping; missing keys keep defaults."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}: {e}") from e
    if data is None:
        return FractalConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file malformed (expected a mapping): {path}")

    known = {f.name for f in fields(FractalConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {unknown}")
    for key, value in data.items():
        check, expected = _value_checks[key]
        if not check(value):
            raise ConfigError(f"Config key {key!r} in {path} must be {expected}, got {value!r}")
    if "background" in data:
        data["background"] = tuple(data["background"])
    return FractalConfig(**data)
