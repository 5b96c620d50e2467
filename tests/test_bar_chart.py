from __future__ import annotations

import unittest

import numpy as np

from rasterplot.bar_chart import BarChartLayout
from rasterplot.colors import BLACK, RED, TRANSPARENT
from rasterplot.config import RenderConfig
from rasterplot.errors import BoundaryViolationError, InsufficientCanvasWidthError, PlotDataError
from rasterplot.image import Image
from rasterplot.raster.canvas import PixelBuffer


BLUE = 0x0000FFFF


class BarChartLayoutTests(unittest.TestCase):
    def test_geometry_matches_hand_computed_formulas(self) -> None:
        # W=40, H=30, padding=5: dpux = 30 / (1 - (-1) + 2) = 7.5, dpuy = 20 / (5 - (-3)) = 2.5
        geometry = BarChartLayout(40, 30).compute([(1.0, 5.0), (-1.0, -3.0)], 2)
        self.assertEqual(geometry.scale.dpux, 7.5)
        self.assertEqual(geometry.scale.dpuy, 2.5)
        # x axis row: 30 - 5 - round(3 * 2.5) = 17; y axis column: 5 + round(1 * 7.5) = 13
        self.assertEqual(geometry.x_axis, (5, 17, 30, 1))
        self.assertEqual(geometry.y_axis, (13, 5, 1, 20))
        # (1, 5): left 5 + floor(2 * 7.5), top 30 - 5 - ceil(8 * 2.5), height ceil(12.5)
        # (-1, -3): left 5 + floor(0), top 30 - 5 - ceil(7.5) + 1, height ceil(7.5)
        self.assertEqual(geometry.bars, ((20, 5, 2, 13), (5, 18, 2, 8)))

    def test_draw_matches_geometry_pixel_for_pixel(self) -> None:
        buf = PixelBuffer(width=40, height=30)
        BarChartLayout(40, 30).draw(buf, [(1.0, 5.0), (-1.0, -3.0)], 2, bar_color=RED, axis_color=BLACK)

        expected = np.full((30, 40), TRANSPARENT, dtype=np.uint32)
        expected[17, 5:35] = BLACK
        expected[5:25, 13] = BLACK
        expected[5:18, 20:22] = RED
        expected[18:26, 5:7] = RED
        self.assertTrue(np.array_equal(buf.pixels, expected))
        # Bars are drawn after the axes and win where they overlap.
        self.assertEqual(buf.get_pixel(20, 17), RED)

    def test_bars_do_not_overlap_each_other(self) -> None:
        geometry = BarChartLayout(40, 30).compute([(1.0, 5.0), (-1.0, -3.0)], 2)
        (lx0, _, w0, _), (lx1, _, w1, _) = geometry.bars
        self.assertTrue(lx1 + w1 <= lx0 or lx0 + w0 <= lx1)

    def test_bar_heights_are_ceil_of_scaled_values(self) -> None:
        bars = [(0.0, 1.3), (1.0, -2.2), (2.0, 0.4)]
        geometry = BarChartLayout(64, 48).compute(bars, 3)
        heights = [h for _, _, _, h in geometry.bars]
        expected = [int(np.ceil(abs(y) * geometry.scale.dpuy)) for _, y in bars]
        self.assertEqual(heights, expected)

    def test_insufficient_width_raises_before_drawing(self) -> None:
        buf = PixelBuffer(width=10, height=30, background=TRANSPARENT)
        before = buf.pixels.copy()
        with self.assertRaises(InsufficientCanvasWidthError) as ctx:
            BarChartLayout(10, 30).draw(buf, [(1.0, 1.0), (2.0, 2.0), (3.0, 3.0)], 4, bar_color=RED, axis_color=BLACK)
        self.assertEqual((ctx.exception.bar_count, ctx.exception.bar_width, ctx.exception.canvas_width), (3, 4, 10))
        self.assertTrue(np.array_equal(buf.pixels, before))

    def test_insufficient_width_checked_even_on_tiny_canvas(self) -> None:
        with self.assertRaises(InsufficientCanvasWidthError):
            BarChartLayout(3, 3).compute([(1.0, 1.0), (2.0, 1.0)], 2)

    def test_exact_fit_is_allowed(self) -> None:
        geometry = BarChartLayout(20, 20).compute([(float(i), 1.0) for i in range(5)], 4)
        self.assertEqual(len(geometry.bars), 5)

    def test_zero_y_extent_draws_axes_and_flat_bars(self) -> None:
        buf = PixelBuffer(width=40, height=30)
        geometry = BarChartLayout(40, 30).draw(buf, [(1.0, 0.0), (2.0, 0.0)], 2, bar_color=RED, axis_color=BLACK)
        self.assertEqual(geometry.scale.dpuy, 0.0)
        self.assertEqual(geometry.x_axis, (5, 25, 30, 1))
        self.assertEqual(buf.count(RED), 0)
        self.assertEqual(buf.count(BLACK), 30 + 20)

    def test_invalid_bar_width_rejected(self) -> None:
        layout = BarChartLayout(40, 30)
        for width in (0, -2, 1.5, True):
            with self.assertRaises(PlotDataError, msg=repr(width)):
                layout.compute([(1.0, 1.0)], width)  # type: ignore[arg-type]

    def test_padding_must_leave_plot_area(self) -> None:
        with self.assertRaises(PlotDataError):
            BarChartLayout(10, 10, padding=5).compute([(1.0, 1.0)], 1)

    def test_reject_policy_fails_atomically(self) -> None:
        # dpux = 30 / 110, so the bar at x=100 starts at column 32 and ends past column 39.
        bars = [(0.0, 1.0), (100.0, 1.0)]
        buf = PixelBuffer(width=40, height=30, bounds_policy="reject")
        with self.assertRaises(BoundaryViolationError):
            BarChartLayout(40, 30).draw(buf, bars, 10, bar_color=RED, axis_color=BLACK)
        self.assertEqual(buf.count(TRANSPARENT), 40 * 30)

    def test_clip_policy_draws_visible_part(self) -> None:
        bars = [(0.0, 1.0), (100.0, 1.0)]
        buf = PixelBuffer(width=40, height=30)
        geometry = BarChartLayout(40, 30).draw(buf, bars, 10, bar_color=RED, axis_color=BLACK)
        self.assertEqual(geometry.bars[1][0], 32)
        self.assertEqual(buf.get_pixel(39, 10), RED)

    def test_layout_size_must_match_buffer(self) -> None:
        with self.assertRaises(ValueError):
            BarChartLayout(40, 30).draw(PixelBuffer(width=30, height=30), [(1.0, 1.0)], 1, RED, BLACK)


class ImageBarChartTests(unittest.TestCase):
    def test_image_accepts_mapping_and_color_specs(self) -> None:
        img = Image(40, 30)
        geometry = img.bar_chart({1: 5, -1: -3}, 2)
        self.assertEqual(geometry.bars, ((20, 5, 2, 13), (5, 18, 2, 8)))
        self.assertEqual(img.buffer.get_pixel(20, 5), RED)
        self.assertEqual(img.buffer.get_pixel(13, 5), BLACK)

    def test_image_custom_colors(self) -> None:
        img = Image(40, 30, BLUE)
        img.bar_chart([(1, 5)], 2, bars_color=0x00FF00FF, axis_color=RED)
        self.assertEqual(img.buffer.get_pixel(0, 0), BLUE)
        self.assertGreater(img.buffer.count(0x00FF00FF), 0)

    def test_image_padding_comes_from_config(self) -> None:
        img = Image(40, 30, config=RenderConfig(padding=0))
        geometry = img.bar_chart([(1.0, 1.0)], 2)
        self.assertEqual(geometry.x_axis, (0, 30, 40, 1))

    def test_rectangle_primitive(self) -> None:
        img = Image(10, 10)
        img.rectangle(1, 1, 3, 2, RED)
        self.assertEqual(img.buffer.count(RED), 6)

    def test_duplicate_x_rejected_before_drawing(self) -> None:
        img = Image(40, 30)
        with self.assertRaises(PlotDataError):
            img.bar_chart([(1, 1), (1, 2)], 2)
        self.assertEqual(img.buffer.count(TRANSPARENT), 40 * 30)

    def test_overflowing_extent_rejected_before_drawing(self) -> None:
        img = Image(40, 30)
        for bars in ([(-1e308, 1), (1e308, 2)], [(1, -1e308), (2, 1e308)]):
            with self.assertRaises(PlotDataError):
                img.bar_chart(bars, 2)
        self.assertEqual(img.buffer.count(TRANSPARENT), 40 * 30)

    def test_huge_finite_values_still_scale(self) -> None:
        geometry = BarChartLayout(40, 30).compute([(1, 2.0**1000)], 2)
        self.assertEqual(geometry.bars[0][1:], (5, 2, 20))


if __name__ == "__main__":
    unittest.main()
