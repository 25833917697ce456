"""Transfer of a canvas to an SSD1306-style controller over a bit-banged I2C bus."""

from __future__ import annotations

from typing import Callable, Iterable, Protocol

from oledgfx.canvas import PAGES, WIDTH, Canvas

__all__ = ["BitBangBus", "Display", "Bus", "ADDRESS", "CONTROL_COMMAND", "CONTROL_DATA"]

ADDRESS = 0x78
CONTROL_COMMAND = 0x00
CONTROL_DATA = 0x40

_INIT_SEQUENCE = (
    0xAE,        # display off
    0xD5, 0x80,  # clock divide ratio / oscillator frequency
    0xA8, 0x3F,  # multiplex ratio
    0xD3, 0x00,  # display offset
    0x40,        # display start line
    0xA1,        # segment remap: normal left-right
    0xC8,        # COM scan direction: normal top-bottom
    0xDA, 0x12,  # COM pins hardware configuration
    0x81, 0xCF,  # contrast
    0xD9, 0xF1,  # pre-charge period
    0xDB, 0x30,  # VCOMH deselect level
    0xA4,        # display follows RAM content
    0xA6,        # normal (not inverted) display
    0x8D, 0x14,  # charge pump
    0xAF,        # display on
)


class Bus(Protocol):
    """Anything that can send one addressed write transaction."""

    def transmit(self, payload: Iterable[int]) -> None: ...


class BitBangBus:
    """Write-only I2C master driving SCL and SDA through two line setters.

    Each setter receives 0 or 1. Acknowledge bits are clocked but ignored.
    """

    def __init__(self, write_scl: Callable[[int], None], write_sda: Callable[[int], None]) -> None:
        self._scl = write_scl
        self._sda = write_sda
        self._scl(1)
        self._sda(1)

    def start(self) -> None:
        """Generate a start condition and hold the clock low."""
        self._sda(1)
        self._scl(1)
        self._sda(0)
        self._scl(0)

    def stop(self) -> None:
        """Generate a stop condition."""
        self._sda(0)
        self._scl(1)
        self._sda(1)

    def send_byte(self, byte: int) -> None:
        """Clock out one byte, most significant bit first, plus an ignored ACK clock."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte {byte} out of range 0..255")
        for shift in range(7, -1, -1):
            self._sda((byte >> shift) & 1)
            self._scl(1)
            self._scl(0)
        self._scl(1)
        self._scl(0)

    def transmit(self, payload: Iterable[int]) -> None:
        """Send a whole transaction: start, every byte, stop."""
        data = bytes(payload)
        self.start()
        for byte in data:
            self.send_byte(byte)
        self.stop()


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class Display:
    """A 128x64 page-addressed OLED controller fed from a :class:`Canvas`."""

    def __init__(self, canvas: Canvas, bus: Bus) -> None:
        self.canvas = canvas
        self.bus = bus

    def init(self) -> None:
        """Configure the controller, switch it on and blank the screen."""
        for command in _INIT_SEQUENCE:
            self.write_command(command)
        self.canvas.clear()
        self.update()

    def write_command(self, command: int) -> None:
        """Send one command byte."""
        self.bus.transmit(bytes((ADDRESS, CONTROL_COMMAND, command)))

    def write_data(self, data: Iterable[int]) -> None:
        """Send a run of display RAM bytes."""
        self.bus.transmit(bytes((ADDRESS, CONTROL_DATA)) + bytes(data))

    def set_cursor(self, page: int, x: int) -> None:
        """Point the controller's RAM address at a page and column."""
        self.write_command(0xB0 | page)
        self.write_command(0x10 | ((x & 0xF0) >> 4))
        self.write_command(x & 0x0F)

    def update(self) -> None:
        """Send the whole canvas to the screen."""
        for index in range(PAGES):
            self.set_cursor(index, 0)
            self.write_data(self.canvas.page(index))

    def update_area(self, x: int, y: int, width: int, height: int) -> None:
        """Send the pages touched by a rectangle; whole pages vertically.

        Columns beyond the right edge of the screen are not sent.
        """
        first = _trunc_div(y, 8)
        last = _trunc_div(y + height - 1, 8) + 1
        if y < 0:
            first -= 1
            last -= 1
        if not 0 <= x < WIDTH:
            return
        for index in range(max(first, 0), min(last, PAGES)):
            self.set_cursor(index, x)
            self.write_data(self.canvas.page(index)[x:x + width])