"""Text and number rendering onto a :class:`~oledgfx.canvas.Canvas`."""

from __future__ import annotations

import math

from oledgfx.canvas import Canvas
from oledgfx.fonts import FontSize, ascii_glyph, chinese_glyph

__all__ = [
    "show_char",
    "show_string",
    "show_num",
    "show_signed_num",
    "show_hex_num",
    "show_bin_num",
    "show_float_num",
    "printf",
]

_WIDE_GLYPH_SIZE = 16
_UINT32_MAX = 0xFFFFFFFF
_INT32_MIN = -0x80000000
_INT32_MAX = 0x7FFFFFFF
_FORMATS = {10: "d", 16: "X", 2: "b"}


def show_char(canvas: Canvas, x: int, y: int, char: str, font_size: FontSize | int) -> None:
    """Draw one printable ASCII character with its top-left corner at (x, y)."""
    size = FontSize(font_size)
    canvas.show_image(x, y, size.width, size.height, ascii_glyph(char, size))


def show_string(canvas: Canvas, x: int, y: int, text: str, font_size: FontSize | int) -> None:
    """Draw a string that may mix ASCII and wide (16x16) characters.

    Wide characters are drawn from the 16x16 table in the large font, with
    a fallback glyph for unknown ones; in the small font each is shown as
    ``'?'``. Drawing stops at a NUL character.
    """
    size = FontSize(font_size)
    offset = 0
    for char in text.split("\0", 1)[0]:
        if ord(char) < 0x80:
            show_char(canvas, x + offset, y, char, size)
            offset += size.width
        elif size is FontSize.F8X16:
            canvas.show_image(
                x + offset, y, _WIDE_GLYPH_SIZE, _WIDE_GLYPH_SIZE, chinese_glyph(char)
            )
            offset += _WIDE_GLYPH_SIZE
        else:
            show_char(canvas, x + offset, y, "?", size)
            offset += size.width


def _digits(number: int, length: int, base: int) -> str:
    """The lowest ``length`` digits of ``number`` in ``base``, zero padded."""
    if not 0 <= number <= _UINT32_MAX:
        raise ValueError(f"number {number} out of range 0..{_UINT32_MAX}")
    if length <= 0:
        return ""
    return format(number % base**length, f"0{length}{_FORMATS[base]}")


def _show_digits(canvas: Canvas, x: int, y: int, digits: str, size: FontSize) -> None:
    for i, digit in enumerate(digits):
        show_char(canvas, x + i * size.width, y, digit, size)


def show_num(
    canvas: Canvas, x: int, y: int, number: int, length: int, font_size: FontSize | int
) -> None:
    """Draw the last ``length`` decimal digits of a non-negative number."""
    size = FontSize(font_size)
    _show_digits(canvas, x, y, _digits(number, length, 10), size)


def show_signed_num(
    canvas: Canvas, x: int, y: int, number: int, length: int, font_size: FontSize | int
) -> None:
    """Draw a sign followed by the last ``length`` decimal digits of ``number``."""
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise ValueError(f"number {number} out of range {_INT32_MIN}..{_INT32_MAX}")
    size = FontSize(font_size)
    show_char(canvas, x, y, "+" if number >= 0 else "-", size)
    _show_digits(canvas, x + size.width, y, _digits(abs(number), length, 10), size)


def show_hex_num(
    canvas: Canvas, x: int, y: int, number: int, length: int, font_size: FontSize | int
) -> None:
    """Draw the last ``length`` upper-case hexadecimal digits of ``number``."""
    size = FontSize(font_size)
    _show_digits(canvas, x, y, _digits(number, length, 16), size)


def show_bin_num(
    canvas: Canvas, x: int, y: int, number: int, length: int, font_size: FontSize | int
) -> None:
    """Draw the last ``length`` binary digits of ``number``."""
    size = FontSize(font_size)
    _show_digits(canvas, x, y, _digits(number, length, 2), size)


def show_float_num(
    canvas: Canvas,
    x: int,
    y: int,
    number: float,
    int_length: int,
    fra_length: int,
    font_size: FontSize | int,
) -> None:
    """Draw a signed decimal with fixed integer and fraction widths.

    The fraction is rounded half away from zero; a carry from rounding is
    added to the integer part.
    """
    size = FontSize(font_size)
    show_char(canvas, x, y, "+" if number >= 0 else "-", size)
    number = abs(number)

    int_num = int(number)
    fraction = number - int_num
    scale = 10**fra_length
    fra_num = math.floor(fraction * scale + 0.5)
    int_num += fra_num // scale

    show_num(canvas, x + size.width, y, int_num, int_length, size)
    show_char(canvas, x + (int_length + 1) * size.width, y, ".", size)
    show_num(canvas, x + (int_length + 2) * size.width, y, fra_num, fra_length, size)


def printf(canvas: Canvas, x: int, y: int, font_size: FontSize | int, fmt: str, *args: object) -> None:
    """Format ``fmt % args`` and draw the result with :func:`show_string`."""
    show_string(canvas, x, y, fmt % args, font_size)