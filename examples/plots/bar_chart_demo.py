from __future__ import annotations

from pathlib import Path
import sys

from rasterplot import BLACK, Hex, Named, bar_image


# Monthly balance deltas; negative months hang below the x axis.
BALANCE = {1: 4.0, 2: 2.5, 3: -1.5, 4: 0.0, 5: 3.2, 6: -2.8, 7: 5.1, 8: 1.4}


def render(out_path: str | Path, config: str | Path | None = None) -> Path:
    img = bar_image(320, 180, background=Hex("#f8fafc"), config=config)
    img.bar_chart(BALANCE, 12, bars_color=Named("steelblue @ 0.9"), axis_color=BLACK)
    return img.export(out_path)


if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else "bar_chart_demo.png"
    config_path = Path(__file__).with_name("render.toml")
    print(render(target, config=config_path))
