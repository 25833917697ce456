# oledgfx

oledgfx is a pure-Python drawing library for 128×64 monochrome OLED panels,
such as SSD1306-based modules wired over I2C.

Everything you draw goes into an in-memory frame buffer. This is a `Canvas` of
8 pages × 128 columns. Each byte holds 8 vertical pixels, with the least
significant bit at the top. The panel only changes when you send the buffer to
it, so you can build a whole frame first and then send it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Coordinates

- `(0, 0)` is the top-left pixel.
- X runs to the right, from 0 to 127.
- Y runs downwards, from 0 to 63.

Drawing calls accept coordinates that are off the screen and clip them. A
shape that lies partly outside the panel is drawn partly.

## Drawing on a canvas

```python
from oledgfx.canvas import Canvas
from oledgfx.fonts import FontSize
from oledgfx.shapes import draw_line, draw_rectangle, draw_circle, draw_arc
from oledgfx.text import show_string, show_num, show_float_num, printf

canvas = Canvas()
show_string(canvas, 0, 0, "Hello World", FontSize.F8X16)
show_string(canvas, 0, 16, "中国，你好。", FontSize.F8X16)
show_num(canvas, 0, 32, 12345, 5, FontSize.F6X8)
show_float_num(canvas, 64, 32, -3.14159, 1, 3, FontSize.F6X8)
printf(canvas, 0, 40, FontSize.F6X8, "T=%d C", 21)

draw_line(canvas, 0, 63, 127, 48)
draw_rectangle(canvas, 100, 0, 28, 16, filled=False)
draw_circle(canvas, 110, 40, 8, filled=True)
draw_arc(canvas, 80, 50, 10, -90, 0, filled=True)

print(canvas.render("#", "."))
```

`Canvas.render(on, off)` returns the buffer as 64 lines of 128 characters. You
can use it to look at a frame without any hardware.

### Canvas methods

- `clear()` and `clear_area(x, y, width, height)` turn pixels off.
- `reverse()` and `reverse_area(x, y, width, height)` invert pixels.
- `draw_point(x, y)` turns one pixel on.
- `get_point(x, y)` reads one pixel. A pixel off the screen reads as off.
- `show_image(x, y, width, height, image)` draws a page-ordered bitmap.
  - It first clears the area the bitmap covers.
  - It raises `ValueError` if `image` is too short.
- `page(index)` returns a copy of the 128 bytes of one page. It raises
  `IndexError` outside 0–7.

### Shapes (`oledgfx.shapes`)

| Function | What it draws |
| --- | --- |
| `draw_line(canvas, x0, y0, x1, y1)` | A line. Both end points are included. |
| `draw_rectangle(canvas, x, y, width, height, filled)` | A rectangle. |
| `draw_triangle(canvas, x0, y0, x1, y1, x2, y2, filled)` | A triangle. |
| `draw_circle(canvas, x, y, radius, filled)` | A circle. |
| `draw_ellipse(canvas, x, y, a, b, filled)` | An ellipse. `a` is the horizontal half-axis and `b` the vertical one. |
| `draw_arc(canvas, x, y, radius, start_angle, end_angle, filled)` | An arc. When `filled` is true, a sector. |

Angles for `draw_arc` are in degrees:

- 0 points right, and 180 or -180 points left.
- Angles grow clockwise, so points below the centre have positive angles.
- When `start_angle` is not less than `end_angle`, the range wraps through
  180.

There are two helpers:

- `pnpoly(vertx, verty, testx, testy)` tests whether a point is inside a
  polygon.
- `is_in_angle(x, y, start_angle, end_angle)` tests whether a direction falls
  inside an angle range.

### Text (`oledgfx.text`)

| Function | What it draws |
| --- | --- |
| `show_char(canvas, x, y, char, font_size)` | One printable ASCII character. |
| `show_string(canvas, x, y, text, font_size)` | ASCII mixed with wide characters. It stops at a NUL character. |
| `show_num(canvas, x, y, number, length, font_size)` | The last `length` decimal digits, zero padded. |
| `show_hex_num(canvas, x, y, number, length, font_size)` | The last `length` upper-case hexadecimal digits, zero padded. |
| `show_bin_num(canvas, x, y, number, length, font_size)` | The last `length` binary digits, zero padded. |
| `show_signed_num(canvas, x, y, number, length, font_size)` | A `+` or `-` sign, then the digits. |
| `show_float_num(canvas, x, y, number, int_length, fra_length, font_size)` | A sign, then the integer digits, a point and the fraction digits. |
| `printf(canvas, x, y, font_size, fmt, *args)` | The string `fmt % args`, drawn with `show_string`. |

Notes on numbers:

- `show_num`, `show_hex_num` and `show_bin_num` need a value in the range
  0..2³²−1. Otherwise they raise `ValueError`.
- `show_signed_num` needs a value in the 32-bit signed range. Otherwise it
  raises `ValueError`.
- `show_float_num` rounds the fraction half away from zero. A carry from that
  rounding goes into the integer part.

## Fonts (`oledgfx.fonts`)

There are two fonts for printable ASCII characters:

- `FontSize.F8X16` is 8×16 pixels.
- `FontSize.F6X8` is 6×8 pixels.

The value of a `FontSize` is how far the text position advances for each
glyph.

`ascii_glyph(char, font_size)` returns the bitmap for one character. It
raises `ValueError` for characters outside the space to `~` range.

Strings can mix ASCII and wide characters:

- In the 8×16 font, a wide character is drawn from a 16×16 table.
  `chinese_glyph(char)` looks it up.
- `CHINESE_GLYPHS` is the table itself. It holds：，。你好世界中国这是文.
- A character that is not in the table is drawn as `FALLBACK_GLYPH`, a box
  with a question mark.
- In the 6×8 font, every non-ASCII character is drawn as `?`.

`DIODE` is a sample 16×16 image that you can pass to `show_image`.

## Sending to a panel (`oledgfx.device`)

`BitBangBus(write_scl, write_sda)` is a write-only I2C master. You give it two
callables, one that sets the SCL line and one that sets the SDA line. Each
callable receives 0 or 1. The bus clocks out bytes most significant bit first.
Acknowledge bits are clocked but never checked.

`Display(canvas, bus)` sends to the panel through any object that has a
`transmit(payload)` method.

```python
from oledgfx.canvas import Canvas
from oledgfx.device import BitBangBus, Display

def write_scl(level): ...   # set the SCL pin
def write_sda(level): ...   # set the SDA pin

canvas = Canvas()
display = Display(canvas, BitBangBus(write_scl, write_sda))
display.init()                     # configure the panel, switch it on, blank it
# ... draw on canvas ...
display.update()                   # send all 8 pages
display.update_area(0, 0, 64, 16)  # send only the pages this rectangle touches
```

`Display` methods:

- `update_area` always sends whole pages vertically.
  - It sends nothing when `x` is outside 0–127.
  - It sends no columns past the right edge.
- `write_command(command)` sends one command byte.
- `write_data(data)` sends a run of display RAM bytes.
- `set_cursor(page, x)` sets the RAM address.

## What it does not do

oledgfx does not access GPIO pins, I2C adapters or any other hardware by
itself. You must supply the line setters, or a bus object with a `transmit`
method. Communication is write-only: nothing is read back from the panel, and
missing acknowledgements are not detected.

## Demo

```
oledgfx-demo [--on CHAR] [--off CHAR]
```

This draws the sample frame and prints it to the terminal as text. The frame
holds the character "B", "Hello World", a Chinese greeting and the number
12345. `--on` and `--off` choose the characters for lit and dark pixels. The
defaults are `#` and `.`.

`draw_demo(canvas)` from `oledgfx.demo` draws the same frame onto any canvas.