"""Sample screen: a character, a string, wide characters and a number."""

from __future__ import annotations

import argparse
from typing import Sequence

from oledgfx.canvas import Canvas
from oledgfx.fonts import FontSize
from oledgfx.text import show_char, show_num, show_string

__all__ = ["draw_demo", "main"]


def draw_demo(canvas: Canvas) -> None:
    """Draw the sample screen onto ``canvas``."""
    show_char(canvas, 0, 0, "B", FontSize.F8X16)
    show_string(canvas, 0, 16, "Hello World", FontSize.F8X16)
    show_string(canvas, 0, 32, "中国，你好。", FontSize.F8X16)
    show_num(canvas, 0, 48, 12345, 5, FontSize.F8X16)


def main(argv: Sequence[str] | None = None) -> int:
    """Render the sample screen as text on standard output."""
    parser = argparse.ArgumentParser(
        prog="oledgfx-demo", description="Print the sample 128x64 screen as text."
    )
    parser.add_argument("--on", default="#", help="character for a lit pixel")
    parser.add_argument("--off", default=".", help="character for a dark pixel")
    args = parser.parse_args(argv)

    canvas = Canvas()
    draw_demo(canvas)
    print(canvas.render(args.on, args.off))
    return 0