from __future__ import annotations

from pathlib import Path

from rasterplot.colors import TRANSPARENT, ColorLike
from rasterplot.config import DEFAULT_CONFIG, RenderConfig, load_render_config
from rasterplot.function_plot import Plot
from rasterplot.image import Image


def resolve_config(config: RenderConfig | str | Path | None = None) -> RenderConfig:
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, RenderConfig):
        return config
    return load_render_config(config)


def bar_image(
    width: int,
    height: int,
    *,
    background: ColorLike = TRANSPARENT,
    config: RenderConfig | str | Path | None = None,
) -> Image:
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")
    return Image(width, height, background, config=resolve_config(config))


def function_plot(
    width: int | None = None,
    height: int | None = None,
    *,
    background: ColorLike = TRANSPARENT,
    config: RenderConfig | str | Path | None = None,
) -> Plot:
    """Function plot sized from the config's ``plot_width``/``plot_height`` unless given."""
    return Plot(width, height, background, config=resolve_config(config))
