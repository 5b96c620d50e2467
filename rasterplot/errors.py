from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when chart input data cannot be plotted."""


class InsufficientCanvasWidthError(PlotDataError):
    def __init__(self, bar_count: int, bar_width: int, canvas_width: int) -> None:
        super().__init__(
            f"canvas width {canvas_width}px cannot hold {bar_count} bars of width {bar_width}px"
        )
        self.bar_count = bar_count
        self.bar_width = bar_width
        self.canvas_width = canvas_width


class UnrecognizedColorError(ValueError):
    pass


class BoundaryViolationError(IndexError):
    def __init__(self, x: float, y: float, width: int, height: int, canvas_size: tuple[int, int]) -> None:
        cw, ch = canvas_size
        super().__init__(f"write at ({x}, {y}) size {width}x{height} exceeds canvas {cw}x{ch}")
        self.rect = (x, y, width, height)
        self.canvas_size = canvas_size


class DomainEvaluationError(ArithmeticError):
    """A plotted function is undefined at the requested argument."""


class ConfigError(ValueError):
    pass
