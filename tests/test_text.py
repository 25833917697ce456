import pytest

from oledgfx.canvas import Canvas
from oledgfx.fonts import CHINESE_GLYPHS, FALLBACK_GLYPH, FontSize, ascii_glyph
from oledgfx.text import (
    printf,
    show_bin_num,
    show_char,
    show_float_num,
    show_hex_num,
    show_num,
    show_signed_num,
    show_string,
)


def _pages(canvas):
    return [canvas.page(i) for i in range(8)]


def _string_canvas(x, y, text, size):
    canvas = Canvas()
    show_string(canvas, x, y, text, size)
    return _pages(canvas)


def test_show_char_large_font_fills_two_pages():
    canvas = Canvas()
    show_char(canvas, 0, 0, "A", FontSize.F8X16)
    glyph = ascii_glyph("A", FontSize.F8X16)
    assert canvas.page(0)[:8] == glyph[:8]
    assert canvas.page(1)[:8] == glyph[8:]
    assert canvas.page(0)[8:] == bytes(120)


def test_show_char_small_font():
    canvas = Canvas()
    show_char(canvas, 10, 8, "k", FontSize.F6X8)
    assert canvas.page(1)[10:16] == ascii_glyph("k", FontSize.F6X8)


def test_show_char_matches_image_when_unaligned():
    canvas = Canvas()
    show_char(canvas, 3, 5, "Q", FontSize.F8X16)
    reference = Canvas()
    reference.show_image(3, 5, 8, 16, ascii_glyph("Q", FontSize.F8X16))
    assert _pages(canvas) == _pages(reference)


def test_show_char_rejects_control_character():
    with pytest.raises(ValueError):
        show_char(Canvas(), 0, 0, "\n", FontSize.F6X8)


def test_show_string_advances_by_font_width():
    canvas = Canvas()
    show_char(canvas, 2, 0, "A", FontSize.F6X8)
    show_char(canvas, 8, 0, "B", FontSize.F6X8)
    assert _string_canvas(2, 0, "AB", FontSize.F6X8) == _pages(canvas)


def test_show_string_wide_character_in_large_font():
    canvas = Canvas()
    show_string(canvas, 0, 0, "中A", FontSize.F8X16)
    glyph = CHINESE_GLYPHS["中"]
    assert canvas.page(0)[:16] == glyph[:16]
    assert canvas.page(1)[:16] == glyph[16:]
    assert canvas.page(0)[16:24] == ascii_glyph("A", FontSize.F8X16)[:8]


def test_show_string_unknown_wide_character_uses_fallback():
    canvas = Canvas()
    show_string(canvas, 0, 0, "龙", FontSize.F8X16)
    assert canvas.page(0)[:16] == FALLBACK_GLYPH[:16]
    assert canvas.page(1)[:16] == FALLBACK_GLYPH[16:]


def test_show_string_wide_character_in_small_font_is_question_mark():
    assert _string_canvas(0, 0, "中A", FontSize.F6X8) == _string_canvas(0, 0, "?A", FontSize.F6X8)


def test_show_string_stops_at_nul():
    assert _string_canvas(0, 0, "AB\0CD", FontSize.F6X8) == _string_canvas(0, 0, "AB", FontSize.F6X8)


def test_show_num_matches_string_of_digits():
    canvas = Canvas()
    show_num(canvas, 0, 48, 12345, 5, FontSize.F8X16)
    assert _pages(canvas) == _string_canvas(0, 48, "12345", FontSize.F8X16)


def test_show_num_keeps_lowest_digits():
    truncated = Canvas()
    show_num(truncated, 0, 0, 12345, 3, FontSize.F6X8)
    exact = Canvas()
    show_num(exact, 0, 0, 345, 3, FontSize.F6X8)
    assert _pages(truncated) == _pages(exact)


def test_show_num_pads_with_zeros():
    padded = Canvas()
    show_num(padded, 0, 0, 12345, 7, FontSize.F6X8)
    pieces = Canvas()
    show_num(pieces, 0, 0, 0, 2, FontSize.F6X8)
    show_num(pieces, 12, 0, 12345, 5, FontSize.F6X8)
    assert _pages(padded) == _pages(pieces)


def test_show_num_zero_length_draws_nothing():
    canvas = Canvas()
    show_num(canvas, 0, 0, 987, 0, FontSize.F8X16)
    assert _pages(canvas) == _pages(Canvas())


def test_show_num_rejects_negative():
    with pytest.raises(ValueError):
        show_num(Canvas(), 0, 0, -1, 3, FontSize.F6X8)


def test_show_signed_num_negative():
    canvas = Canvas()
    show_signed_num(canvas, 0, 0, -42, 3, FontSize.F6X8)
    expected = Canvas()
    show_char(expected, 0, 0, "-", FontSize.F6X8)
    show_num(expected, 6, 0, 42, 3, FontSize.F6X8)
    assert _pages(canvas) == _pages(expected)


def test_show_signed_num_zero_has_plus_sign():
    canvas = Canvas()
    show_signed_num(canvas, 0, 0, 0, 1, FontSize.F6X8)
    assert _pages(canvas) == _string_canvas(0, 0, "+0", FontSize.F6X8)


def test_show_hex_num_upper_case():
    canvas = Canvas()
    show_hex_num(canvas, 0, 0, 0xBEEF, 4, FontSize.F8X16)
    assert _pages(canvas) == _string_canvas(0, 0, "BEEF", FontSize.F8X16)


def test_show_bin_num():
    canvas = Canvas()
    show_bin_num(canvas, 0, 0, 0b1011, 4, FontSize.F6X8)
    assert _pages(canvas) == _string_canvas(0, 0, "1011", FontSize.F6X8)


def test_show_float_num_rounds_fraction():
    canvas = Canvas()
    show_float_num(canvas, 0, 0, 3.14159, 1, 2, FontSize.F6X8)
    assert _pages(canvas) == _string_canvas(0, 0, "+3.14", FontSize.F6X8)


def test_show_float_num_carries_into_integer():
    canvas = Canvas()
    show_float_num(canvas, 0, 0, 0.999, 1, 2, FontSize.F6X8)
    assert _pages(canvas) == _string_canvas(0, 0, "+1.00", FontSize.F6X8)


def test_show_float_num_negative():
    canvas = Canvas()
    show_float_num(canvas, 0, 16, -2.5, 1, 2, FontSize.F8X16)
    assert _pages(canvas) == _string_canvas(0, 16, "-2.50", FontSize.F8X16)


def test_printf_formats_then_draws():
    canvas = Canvas()
    printf(canvas, 4, 8, FontSize.F6X8, "T=%d %s", 5, "ok")
    assert _pages(canvas) == _string_canvas(4, 8, "T=5 ok", FontSize.F6X8)