from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
import tomllib
from typing import Any, Mapping

from rasterplot.errors import ConfigError
from rasterplot.raster.canvas import BOUNDS_POLICIES


DEFAULT_PADDING = 5
DEFAULT_PLOT_SIZE = (1280, 720)


@dataclass(frozen=True)
class RenderConfig:
    """Rendering constants shared by bar images and function plots."""

    padding: int = DEFAULT_PADDING
    nominal_step: float = 0.12
    min_step: float = 0.001
    steep_threshold: float = 1.0
    domain_skip_ratio: float = 0.1
    units_per_height: int = 15
    plot_width: int = DEFAULT_PLOT_SIZE[0]
    plot_height: int = DEFAULT_PLOT_SIZE[1]
    bounds_policy: str = "clip"
    interlace: bool = True


DEFAULT_CONFIG = RenderConfig()


def validate_render_config(overrides: Mapping[str, Any] | None = None) -> RenderConfig:
    """Merge overrides onto the defaults and check every field."""

    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ConfigError(f"Unknown render option: {key}")
            raw[key] = value

    for key in ("padding", "units_per_height", "plot_width", "plot_height"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"Option `{key}` must be an integer")
    if raw["padding"] < 0:
        raise ConfigError("Option `padding` must be >= 0")
    for key in ("units_per_height", "plot_width", "plot_height"):
        if raw[key] <= 0:
            raise ConfigError(f"Option `{key}` must be > 0")

    for key in ("nominal_step", "min_step", "steep_threshold", "domain_skip_ratio"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or float(value) <= 0:
            raise ConfigError(f"Option `{key}` must be a positive number")
        raw[key] = float(value)
    if raw["nominal_step"] < raw["min_step"]:
        raise ConfigError("Option `nominal_step` must be >= `min_step`")

    if raw["bounds_policy"] not in BOUNDS_POLICIES:
        raise ConfigError(f"Option `bounds_policy` must be one of {', '.join(BOUNDS_POLICIES)}")
    if not isinstance(raw["interlace"], bool):
        raise ConfigError("Option `interlace` must be a boolean")

    return RenderConfig(**raw)


def load_render_config(path: str | Path) -> RenderConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"render config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    table = raw.get("render", {})
    if not isinstance(table, dict):
        raise ConfigError("`render` must be a table")
    return validate_render_config(table)
