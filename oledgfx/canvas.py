"""In-memory frame buffer for a 128x64 monochrome page-addressed display.

The buffer is organised as 8 pages of 128 columns. Each byte holds eight
vertical pixels of one column, the least significant bit at the top.
Coordinates start at the top-left corner; X grows to the right, Y downwards.
Anything drawn outside the screen is silently clipped.
"""

from __future__ import annotations

from typing import Iterable

__all__ = ["Canvas", "WIDTH", "HEIGHT", "PAGES"]

WIDTH = 128
HEIGHT = 64
PAGES = HEIGHT // 8


def _visible(start: int, length: int, limit: int) -> range:
    """Indices of ``start .. start + length - 1`` that fall inside ``0 .. limit - 1``."""
    return range(max(start, 0), min(start + length, limit))


class Canvas:
    """A page-organised monochrome frame buffer."""

    def __init__(self) -> None:
        self._pages = [bytearray(WIDTH) for _ in range(PAGES)]

    def page(self, index: int) -> bytes:
        """Return a copy of the 128 bytes of one page."""
        if not 0 <= index < PAGES:
            raise IndexError(f"page index {index} out of range 0..{PAGES - 1}")
        return bytes(self._pages[index])

    def clear(self) -> None:
        """Turn every pixel off."""
        for page in self._pages:
            page[:] = bytes(WIDTH)

    def clear_area(self, x: int, y: int, width: int, height: int) -> None:
        """Turn off every pixel of a rectangle."""
        columns = _visible(x, width, WIDTH)
        for row in _visible(y, height, HEIGHT):
            mask = ~(1 << (row % 8)) & 0xFF
            page = self._pages[row // 8]
            for column in columns:
                page[column] &= mask

    def reverse(self) -> None:
        """Invert every pixel."""
        for page in self._pages:
            page[:] = bytes(value ^ 0xFF for value in page)

    def reverse_area(self, x: int, y: int, width: int, height: int) -> None:
        """Invert every pixel of a rectangle."""
        columns = _visible(x, width, WIDTH)
        for row in _visible(y, height, HEIGHT):
            bit = 1 << (row % 8)
            page = self._pages[row // 8]
            for column in columns:
                page[column] ^= bit

    def draw_point(self, x: int, y: int) -> None:
        """Turn one pixel on."""
        if 0 <= x < WIDTH and 0 <= y < HEIGHT:
            self._pages[y // 8][x] |= 1 << (y % 8)

    def get_point(self, x: int, y: int) -> bool:
        """Whether a pixel is on; pixels off the screen read as off."""
        if 0 <= x < WIDTH and 0 <= y < HEIGHT:
            return bool(self._pages[y // 8][x] & (1 << (y % 8)))
        return False

    def show_image(self, x: int, y: int, width: int, height: int, image: Iterable[int]) -> None:
        """Draw a page-organised bitmap with its top-left corner at (x, y).

        The area the image covers is cleared first, then the image's set
        bits are drawn.
        """
        data = bytes(image)
        pages = (height + 7) // 8 if height > 0 else 1
        needed = pages * max(width, 0)
        if len(data) < needed:
            raise ValueError(f"image needs {needed} bytes, got {len(data)}")

        self.clear_area(x, y, width, height)

        first_page, shift = divmod(y, 8)
        columns = _visible(x, width, WIDTH)
        for j in range(pages):
            upper = first_page + j
            lower = upper + 1
            row = data[j * width:(j + 1) * width]
            for column in columns:
                value = row[column - x]
                if 0 <= upper < PAGES:
                    self._pages[upper][column] |= (value << shift) & 0xFF
                if 0 <= lower < PAGES:
                    self._pages[lower][column] |= value >> (8 - shift)

    def render(self, on: str = "#", off: str = ".") -> str:
        """Return the buffer as 64 text lines of 128 characters each."""
        return "\n".join(
            "".join(on if self.get_point(column, row) else off for column in range(WIDTH))
            for row in range(HEIGHT)
        )