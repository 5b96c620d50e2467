from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any

from PIL import Image

from rasterplot.raster.canvas import PixelBuffer


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportOptions:
    interlace: bool = True
    format: str | None = None


def to_pil_image(buffer: PixelBuffer) -> Image.Image:
    return Image.fromarray(buffer.to_rgba_array())


def write_image(buffer: PixelBuffer, destination: str | Path, options: ExportOptions | None = None) -> Path:
    """Encode ``buffer`` with Pillow. Codec and I/O errors propagate unchanged."""
    opts = options or ExportOptions()
    path = Path(destination)
    image = to_pil_image(buffer)
    fmt = opts.format or Image.registered_extensions().get(path.suffix.lower())
    if fmt is None:
        raise ValueError(f"unsupported image format: {path.suffix!r}")
    fmt = fmt.upper()

    save_kwargs: dict[str, Any] = {}
    if fmt == "GIF":
        save_kwargs["interlace"] = opts.interlace
    elif fmt == "JPEG":
        # JPEG has no alpha channel.
        image = image.convert("RGB")
        save_kwargs["progressive"] = opts.interlace
    elif opts.interlace:
        LOGGER.debug("Pillow cannot write interlaced %s; writing %s non-interlaced", fmt, path)

    image.save(path, format=fmt, **save_kwargs)
    LOGGER.info("wrote %dx%d %s image to %s", buffer.width, buffer.height, fmt, path)
    return path
