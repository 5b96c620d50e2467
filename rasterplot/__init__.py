from rasterplot.api import bar_image, function_plot
from rasterplot.bar_chart import BarChartGeometry, BarChartLayout
from rasterplot.colors import BLACK, RED, TRANSPARENT, WHITE, Hex, Named, Packed, Rgb, Rgba, resolve_color
from rasterplot.config import RenderConfig, load_render_config, validate_render_config
from rasterplot.errors import (
    BoundaryViolationError,
    ConfigError,
    DomainEvaluationError,
    InsufficientCanvasWidthError,
    PlotDataError,
    UnrecognizedColorError,
)
from rasterplot.export import ExportOptions, write_image
from rasterplot.function_plot import Plot
from rasterplot.image import Image
from rasterplot.raster import PixelBuffer
from rasterplot.sampler import AdaptiveFunctionSampler, reset_step

__all__ = [
    "AdaptiveFunctionSampler",
    "BLACK",
    "BarChartGeometry",
    "BarChartLayout",
    "BoundaryViolationError",
    "ConfigError",
    "DomainEvaluationError",
    "ExportOptions",
    "Hex",
    "Image",
    "InsufficientCanvasWidthError",
    "Named",
    "Packed",
    "PixelBuffer",
    "Plot",
    "PlotDataError",
    "RED",
    "RenderConfig",
    "Rgb",
    "Rgba",
    "TRANSPARENT",
    "UnrecognizedColorError",
    "WHITE",
    "bar_image",
    "function_plot",
    "load_render_config",
    "reset_step",
    "resolve_color",
    "validate_render_config",
    "write_image",
]
