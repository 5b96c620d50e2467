from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

import numpy as np
from PIL import Image as PILImage

from rasterplot.colors import RED, WHITE
from rasterplot.export import ExportOptions, to_pil_image, write_image
from rasterplot.image import Image
from rasterplot.raster.canvas import PixelBuffer


class ExportTests(unittest.TestCase):
    def _buffer(self) -> PixelBuffer:
        buf = PixelBuffer(width=4, height=3, background=WHITE)
        buf.set_pixel(1, 2, RED)
        buf.set_pixel(3, 0, 0x10203040)
        return buf

    def test_png_round_trips_rgba_pixels(self) -> None:
        buf = self._buffer()
        with tempfile.TemporaryDirectory() as tmp:
            out = write_image(buf, Path(tmp) / "chart.png")
            with PILImage.open(out) as img:
                self.assertEqual(img.format, "PNG")
                pixels = np.asarray(img.convert("RGBA"))
        self.assertTrue(np.array_equal(pixels, buf.to_rgba_array()))

    def test_pil_image_conversion(self) -> None:
        img = to_pil_image(self._buffer())
        self.assertEqual(img.mode, "RGBA")
        self.assertEqual(img.getpixel((1, 2)), (255, 0, 0, 255))

    def test_gif_and_jpeg_honor_interlace_flag(self) -> None:
        buf = self._buffer()
        with tempfile.TemporaryDirectory() as tmp:
            gif = write_image(buf, Path(tmp) / "chart.gif", ExportOptions(interlace=True))
            jpg = write_image(buf, Path(tmp) / "chart.jpg", ExportOptions(interlace=True))
            with PILImage.open(gif) as img:
                self.assertEqual(img.format, "GIF")
            with PILImage.open(jpg) as img:
                self.assertEqual(img.format, "JPEG")
                self.assertEqual(img.mode, "RGB")
                self.assertTrue(img.info.get("progressive") or img.info.get("progression"))

    def test_explicit_format_overrides_suffix(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = write_image(self._buffer(), Path(tmp) / "chart.bin", ExportOptions(format="png"))
            with PILImage.open(out) as img:
                self.assertEqual(img.format, "PNG")

    def test_unwritable_destination_propagates_os_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                write_image(self._buffer(), Path(tmp) / "missing" / "chart.png")

    def test_unknown_format_propagates(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises((KeyError, ValueError)):
                write_image(self._buffer(), Path(tmp) / "chart.png", ExportOptions(format="NOPE"))

    def test_unregistered_suffix_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "chart.nope"
            with self.assertRaises(ValueError):
                write_image(self._buffer(), out)
            self.assertFalse(out.exists())

    def test_image_export_uses_config_interlace(self) -> None:
        img = Image(20, 10)
        img.bar_chart([(1, 1)], 2)
        with tempfile.TemporaryDirectory() as tmp:
            out = img.export(Path(tmp) / "bars.png")
            self.assertTrue(out.exists())


if __name__ == "__main__":
    unittest.main()
