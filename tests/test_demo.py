from oledgfx.canvas import Canvas
from oledgfx.demo import draw_demo, main
from oledgfx.fonts import CHINESE_GLYPHS, FontSize, ascii_glyph


def _demo_canvas():
    canvas = Canvas()
    draw_demo(canvas)
    return canvas


def test_first_character_is_b():
    canvas = _demo_canvas()
    glyph = ascii_glyph("B", FontSize.F8X16)
    assert canvas.page(0)[:8] == glyph[:8]
    assert canvas.page(1)[:8] == glyph[8:]


def test_hello_world_row():
    canvas = _demo_canvas()
    assert canvas.page(2)[:8] == ascii_glyph("H", FontSize.F8X16)[:8]
    assert canvas.page(2)[8:16] == ascii_glyph("e", FontSize.F8X16)[:8]


def test_wide_characters_row():
    canvas = _demo_canvas()
    zhong = CHINESE_GLYPHS["中"]
    guo = CHINESE_GLYPHS["国"]
    assert canvas.page(4)[:16] == zhong[:16]
    assert canvas.page(5)[:16] == zhong[16:]
    assert canvas.page(4)[16:32] == guo[:16]


def test_number_row():
    canvas = _demo_canvas()
    assert canvas.page(6)[:8] == ascii_glyph("1", FontSize.F8X16)[:8]
    assert canvas.page(7)[32:40] == ascii_glyph("5", FontSize.F8X16)[8:]
    assert canvas.page(6)[40:] == bytes(88)


def test_main_prints_rendered_canvas(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.rstrip("\n") == _demo_canvas().render()
    lines = out.rstrip("\n").split("\n")
    assert len(lines) == 64
    assert all(len(line) == 128 for line in lines)


def test_main_custom_pixel_characters(capsys):
    assert main(["--on", "x", "--off", "-"]) == 0
    out = capsys.readouterr().out
    assert "x" in out
    assert set(out) <= {"x", "-", "\n"}