from .normalize import normalize_bars

__all__ = ["normalize_bars"]
