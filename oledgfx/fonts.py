"""Bitmap fonts and glyph lookup for a 128x64 monochrome page display.

Glyph data is stored column by column in groups of eight vertical pixels
(least significant bit at the top), first left to right, then page by page
from top to bottom.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

__all__ = [
    "FontSize",
    "ascii_glyph",
    "chinese_glyph",
    "CHINESE_GLYPHS",
    "FALLBACK_GLYPH",
    "DIODE",
    "FIRST_CHAR",
    "LAST_CHAR",
]

FIRST_CHAR = " "
LAST_CHAR = "~"


class FontSize(IntEnum):
    """Font selector; the value is the horizontal advance of one glyph."""

    F8X16 = 8
    F6X8 = 6

    @property
    def width(self) -> int:
        return int(self)

    @property
    def height(self) -> int:
        return 16 if self is FontSize.F8X16 else 8


def _table(rows: tuple[str, ...]) -> tuple[bytes, ...]:
    return tuple(bytes.fromhex(row) for row in rows)


_F8X16 = _table((
    "00 00 00 00 00 00 00 00  00 00 00 00 00 00 00 00",  # ' '
    "00 00 00 F8 00 00 00 00  00 00 00 33 30 00 00 00",  # !
    "00 16 0E 00 16 0E 00 00  00 00 00 00 00 00 00 00",  # "
    "40 C0 78 40 C0 78 40 00  04 3F 04 04 3F 04 04 00",  # #
    "00 70 88 FC 08 30 00 00  00 18 20 FF 21 1E 00 00",  # $
    "F0 08 F0 00 E0 18 00 00  00 21 1C 03 1E 21 1E 00",  # %
    "00 F0 08 88 70 00 00 00  1E 21 23 24 19 27 21 10",  # &
    "00 00 00 16 0E 00 00 00  00 00 00 00 00 00 00 00",  # '
    "00 00 00 E0 18 04 02 00  00 00 00 07 18 20 40 00",  # (
    "00 02 04 18 E0 00 00 00  00 40 20 18 07 00 00 00",  # )
    "40 40 80 F0 80 40 40 00  02 02 01 0F 01 02 02 00",  # *
    "00 00 00 F0 00 00 00 00  01 01 01 1F 01 01 01 00",  # +
    "00 00 00 00 00 00 00 00  00 B0 70 00 00 00 00 00",  # ,
    "00 00 00 00 00 00 00 00  00 01 01 01 01 01 01 01",  # -
    "00 00 00 00 00 00 00 00  00 30 30 00 00 00 00 00",  # .
    "00 00 00 00 80 60 18 04  00 60 18 06 01 00 00 00",  # /
    "00 E0 10 08 08 10 E0 00  00 0F 10 20 20 10 0F 00",  # 0
    "00 10 10 F8 00 00 00 00  00 20 20 3F 20 20 00 00",  # 1
    "00 70 08 08 08 88 70 00  00 30 28 24 22 21 30 00",  # 2
    "00 30 08 88 88 48 30 00  00 18 20 20 20 11 0E 00",  # 3
    "00 00 C0 20 10 F8 00 00  00 07 04 24 24 3F 24 00",  # 4
    "00 F8 08 88 88 08 08 00  00 19 21 20 20 11 0E 00",  # 5
    "00 E0 10 88 88 18 00 00  00 0F 11 20 20 11 0E 00",  # 6
    "00 38 08 08 C8 38 08 00  00 00 00 3F 00 00 00 00",  # 7
    "00 70 88 08 08 88 70 00  00 1C 22 21 21 22 1C 00",  # 8
    "00 E0 10 08 08 10 E0 00  00 00 31 22 22 11 0F 00",  # 9
    "00 00 00 C0 C0 00 00 00  00 00 00 30 30 00 00 00",  # :
    "00 00 00 C0 C0 00 00 00  00 00 80 B0 70 00 00 00",  # ;
    "00 00 80 40 20 10 08 00  00 01 02 04 08 10 20 00",  # <
    "40 40 40 40 40 40 40 00  04 04 04 04 04 04 04 00",  # =
    "00 08 10 20 40 80 00 00  00 20 10 08 04 02 01 00",  # >
    "00 70 48 08 08 08 F0 00  00 00 00 30 36 01 00 00",  # ?
    "C0 30 C8 28 E8 10 E0 00  07 18 27 24 23 14 0B 00",  # @
    "00 00 C0 38 E0 00 00 00  20 3C 23 02 02 27 38 20",  # A
    "08 F8 88 88 88 70 00 00  20 3F 20 20 20 11 0E 00",  # B
    "C0 30 08 08 08 08 38 00  07 18 20 20 20 10 08 00",  # C
    "08 F8 08 08 08 10 E0 00  20 3F 20 20 20 10 0F 00",  # D
    "08 F8 88 88 E8 08 10 00  20 3F 20 20 23 20 18 00",  # E
    "08 F8 88 88 E8 08 10 00  20 3F 20 00 03 00 00 00",  # F
    "C0 30 08 08 08 38 00 00  07 18 20 20 22 1E 02 00",  # G
    "08 F8 08 00 00 08 F8 08  20 3F 21 01 01 21 3F 20",  # H
    "00 08 08 F8 08 08 00 00  00 20 20 3F 20 20 00 00",  # I
    "00 00 08 08 F8 08 08 00  C0 80 80 80 7F 00 00 00",  # J
    "08 F8 88 C0 28 18 08 00  20 3F 20 01 26 38 20 00",  # K
    "08 F8 08 00 00 00 00 00  20 3F 20 20 20 20 30 00",  # L
    "08 F8 F8 00 F8 F8 08 00  20 3F 00 3F 00 3F 20 00",  # M
    "08 F8 30 C0 00 08 F8 08  20 3F 20 00 07 18 3F 00",  # N
    "E0 10 08 08 08 10 E0 00  0F 10 20 20 20 10 0F 00",  # O
    "08 F8 08 08 08 08 F0 00  20 3F 21 01 01 01 00 00",  # P
    "E0 10 08 08 08 10 E0 00  0F 18 24 24 38 50 4F 00",  # Q
    "08 F8 88 88 88 88 70 00  20 3F 20 00 03 0C 30 20",  # R
    "00 70 88 08 08 08 38 00  00 38 20 21 21 22 1C 00",  # S
    "18 08 08 F8 08 08 18 00  00 00 20 3F 20 00 00 00",  # T
    "08 F8 08 00 00 08 F8 08  00 1F 20 20 20 20 1F 00",  # U
    "08 78 88 00 00 C8 38 08  00 00 07 38 0E 01 00 00",  # V
    "F8 08 00 F8 00 08 F8 00  03 3C 07 00 07 3C 03 00",  # W
    "08 18 68 80 80 68 18 08  20 30 2C 03 03 2C 30 20",  # X
    "08 38 C8 00 C8 38 08 00  00 00 20 3F 20 00 00 00",  # Y
    "10 08 08 08 C8 38 08 00  20 38 26 21 20 20 18 00",  # Z
    "00 00 00 FE 02 02 02 00  00 00 00 7F 40 40 40 00",  # [
    "00 0C 30 C0 00 00 00 00  00 00 00 01 06 38 C0 00",  # backslash
    "00 02 02 02 FE 00 00 00  00 40 40 40 7F 00 00 00",  # ]
    "00 20 10 08 04 08 10 20  00 00 00 00 00 00 00 00",  # ^
    "00 00 00 00 00 00 00 00  80 80 80 80 80 80 80 80",  # _
    "00 02 04 08 00 00 00 00  00 00 00 00 00 00 00 00",  # `
    "00 00 80 80 80 80 00 00  00 19 24 22 22 22 3F 20",  # a
    "08 F8 00 80 80 00 00 00  00 3F 11 20 20 11 0E 00",  # b
    "00 00 00 80 80 80 00 00  00 0E 11 20 20 20 11 00",  # c
    "00 00 00 80 80 88 F8 00  00 0E 11 20 20 10 3F 20",  # d
    "00 00 80 80 80 80 00 00  00 1F 22 22 22 22 13 00",  # e
    "00 80 80 F0 88 88 88 18  00 20 20 3F 20 20 00 00",  # f
    "00 00 80 80 80 80 80 00  00 6B 94 94 94 93 60 00",  # g
    "08 F8 00 80 80 80 00 00  20 3F 21 00 00 20 3F 20",  # h
    "00 80 98 98 00 00 00 00  00 20 20 3F 20 20 00 00",  # i
    "00 00 00 80 98 98 00 00  00 C0 80 80 80 7F 00 00",  # j
    "08 F8 00 00 80 80 80 00  20 3F 24 02 2D 30 20 00",  # k
    "00 08 08 F8 00 00 00 00  00 20 20 3F 20 20 00 00",  # l
    "80 80 80 80 80 80 80 00  20 3F 20 00 3F 20 00 3F",  # m
    "00 80 80 00 80 80 00 00  00 20 3F 21 00 20 3F 20",  # n
    "00 00 80 80 80 80 00 00  00 1F 20 20 20 20 1F 00",  # o
    "80 80 00 80 80 00 00 00  80 FF A1 20 20 11 0E 00",  # p
    "00 00 00 80 80 80 80 00  00 0E 11 20 20 A0 FF 80",  # q
    "80 80 80 00 80 80 80 00  20 20 3F 21 20 00 01 00",  # r
    "00 00 80 80 80 80 80 00  00 33 24 24 24 24 19 00",  # s
    "00 80 80 E0 80 80 00 00  00 00 00 1F 20 20 00 00",  # t
    "80 80 00 00 00 80 80 00  00 1F 20 20 20 10 3F 20",  # u
    "80 80 80 00 00 80 80 80  00 01 0E 30 08 06 01 00",  # v
    "80 80 00 80 00 80 80 80  0F 30 0C 03 0C 30 0F 00",  # w
    "00 80 80 00 80 80 80 00  00 20 31 2E 0E 31 20 00",  # x
    "80 80 80 00 00 80 80 80  80 81 8E 70 18 06 01 00",  # y
    "00 80 80 80 80 80 80 00  00 21 30 2C 22 21 30 00",  # z
    "00 00 00 00 80 7C 02 02  00 00 00 00 00 3F 40 40",  # {
    "00 00 00 00 FF 00 00 00  00 00 00 00 FF 00 00 00",  # |
    "00 02 02 7C 80 00 00 00  00 40 40 3F 00 00 00 00",  # }
    "00 80 40 40 80 00 00 80  00 00 00 00 00 01 01 00",  # ~
))

_F6X8 = _table((
    "00 00 00 00 00 00",  # ' '
    "00 00 00 2F 00 00",  # !
    "00 00 07 00 07 00",  # "
    "00 14 7F 14 7F 14",  # #
    "00 24 2A 7F 2A 12",  # $
    "00 23 13 08 64 62",  # %
    "00 36 49 55 22 50",  # &
    "00 00 00 07 00 00",  # '
    "00 00 1C 22 41 00",  # (
    "00 00 41 22 1C 00",  # )
    "00 14 08 3E 08 14",  # *
    "00 08 08 3E 08 08",  # +
    "00 00 00 A0 60 00",  # ,
    "00 08 08 08 08 08",  # -
    "00 00 60 60 00 00",  # .
    "00 20 10 08 04 02",  # /
    "00 3E 51 49 45 3E",  # 0
    "00 00 42 7F 40 00",  # 1
    "00 42 61 51 49 46",  # 2
    "00 21 41 45 4B 31",  # 3
    "00 18 14 12 7F 10",  # 4
    "00 27 45 45 45 39",  # 5
    "00 3C 4A 49 49 30",  # 6
    "00 01 71 09 05 03",  # 7
    "00 36 49 49 49 36",  # 8
    "00 06 49 49 29 1E",  # 9
    "00 00 36 36 00 00",  # :
    "00 00 56 36 00 00",  # ;
    "00 08 14 22 41 00",  # <
    "00 14 14 14 14 14",  # =
    "00 00 41 22 14 08",  # >
    "00 02 01 51 09 06",  # ?
    "00 3E 49 55 59 2E",  # @
    "00 7C 12 11 12 7C",  # A
    "00 7F 49 49 49 36",  # B
    "00 3E 41 41 41 22",  # C
    "00 7F 41 41 22 1C",  # D
    "00 7F 49 49 49 41",  # E
    "00 7F 09 09 09 01",  # F
    "00 3E 41 49 49 7A",  # G
    "00 7F 08 08 08 7F",  # H
    "00 00 41 7F 41 00",  # I
    "00 20 40 41 3F 01",  # J
    "00 7F 08 14 22 41",  # K
    "00 7F 40 40 40 40",  # L
    "00 7F 02 0C 02 7F",  # M
    "00 7F 04 08 10 7F",  # N
    "00 3E 41 41 41 3E",  # O
    "00 7F 09 09 09 06",  # P
    "00 3E 41 51 21 5E",  # Q
    "00 7F 09 19 29 46",  # R
    "00 46 49 49 49 31",  # S
    "00 01 01 7F 01 01",  # T
    "00 3F 40 40 40 3F",  # U
    "00 1F 20 40 20 1F",  # V
    "00 3F 40 38 40 3F",  # W
    "00 63 14 08 14 63",  # X
    "00 07 08 70 08 07",  # Y
    "00 61 51 49 45 43",  # Z
    "00 00 7F 41 41 00",  # [
    "00 02 04 08 10 20",  # backslash
    "00 00 41 41 7F 00",  # ]
    "00 04 02 01 02 04",  # ^
    "00 40 40 40 40 40",  # _
    "00 00 01 02 04 00",  # `
    "00 20 54 54 54 78",  # a
    "00 7F 48 44 44 38",  # b
    "00 38 44 44 44 20",  # c
    "00 38 44 44 48 7F",  # d
    "00 38 54 54 54 18",  # e
    "00 08 7E 09 01 02",  # f
    "00 18 A4 A4 A4 7C",  # g
    "00 7F 08 04 04 78",  # h
    "00 00 44 7D 40 00",  # i
    "00 40 80 84 7D 00",  # j
    "00 7F 10 28 44 00",  # k
    "00 00 41 7F 40 00",  # l
    "00 7C 04 18 04 78",  # m
    "00 7C 08 04 04 78",  # n
    "00 38 44 44 44 38",  # o
    "00 FC 24 24 24 18",  # p
    "00 18 24 24 18 FC",  # q
    "00 7C 08 04 04 08",  # r
    "00 48 54 54 54 20",  # s
    "00 04 3F 44 40 20",  # t
    "00 3C 40 40 20 7C",  # u
    "00 1C 20 40 20 1C",  # v
    "00 3C 40 30 40 3C",  # w
    "00 44 28 10 28 44",  # x
    "00 1C A0 A0 A0 7C",  # y
    "00 44 64 54 4C 44",  # z
    "00 00 08 7F 41 00",  # {
    "00 00 00 7F 00 00",  # |
    "00 00 41 7F 08 00",  # }
    "00 08 04 08 10 08",  # ~
))

_CHINESE_HEX = {
    "，": "00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00"
         " 00 00 58 38 00 00 00 00 00 00 00 00 00 00 00 00",
    "。": "00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00"
         " 00 00 18 24 24 18 00 00 00 00 00 00 00 00 00 00",
    "你": "00 80 60 F8 07 40 20 18 0F 08 C8 08 08 28 18 00"
         " 01 00 00 FF 00 10 0C 03 40 80 7F 00 01 06 18 00",
    "好": "10 10 F0 1F 10 F0 00 80 82 82 E2 92 8A 86 80 00"
         " 40 22 15 08 16 61 00 00 40 80 7F 00 00 00 00 00",
    "世": "20 20 20 FE 20 20 FF 20 20 20 FF 20 20 20 20 00"
         " 00 00 00 7F 40 40 47 44 44 44 47 40 40 40 00 00",
    "界": "00 00 00 FE 92 92 92 FE 92 92 92 FE 00 00 00 00"
         " 08 08 04 84 62 1E 01 00 01 FE 02 04 04 08 08 00",
    "中": "00 00 F0 10 10 10 10 FF 10 10 10 10 F0 00 00 00"
         " 00 00 0F 04 04 04 04 FF 04 04 04 04 0F 00 00 00",
    "国": "00 FE 02 12 92 92 92 F2 92 92 92 12 02 FE 00 00"
         " 00 FF 40 48 48 48 48 4F 48 4A 4C 48 40 FF 00 00",
    "这": "40 40 42 CC 00 08 28 48 89 0E C8 38 08 08 00 00"
         " 00 40 20 1F 20 50 48 44 42 41 42 44 58 40 40 00",
    "是": "00 00 00 7F 49 49 49 49 49 49 49 7F 00 00 00 00"
         " 81 41 21 1D 21 41 81 FF 89 89 89 89 89 81 81 00",
    "文": "08 08 08 38 C8 08 09 0E 08 08 C8 38 08 08 08 00"
         " 80 80 40 40 20 11 0A 04 0A 11 20 40 40 80 80 00",
}

CHINESE_GLYPHS: Mapping[str, bytes] = MappingProxyType(
    {char: bytes.fromhex(data) for char, data in _CHINESE_HEX.items()}
)
"""16x16 glyphs for wide characters, keyed by the character."""

FALLBACK_GLYPH = bytes.fromhex(
    "FF 01 01 01 31 09 09 09 09 89 71 01 01 01 01 FF"
    " FF 80 80 80 80 80 80 96 81 80 80 80 80 80 80 FF"
)
"""16x16 glyph (a box with a question mark) shown for unknown wide characters."""

DIODE = bytes.fromhex(
    "FF 01 81 81 81 FD 89 91 A1 C1 FD 81 81 81 01 FF"
    " FF 80 80 80 80 9F 88 84 82 81 9F 80 80 80 80 FF"
)
"""Sample 16x16 image: a box holding a diode symbol."""


def ascii_glyph(char: str, font_size: FontSize | int) -> bytes:
    """Return the glyph bytes of a printable ASCII character in the given font."""
    size = FontSize(font_size)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if not FIRST_CHAR <= char <= LAST_CHAR:
        raise ValueError(f"no glyph for character {char!r}")
    table = _F8X16 if size is FontSize.F8X16 else _F6X8
    return table[ord(char) - ord(FIRST_CHAR)]


def chinese_glyph(char: str) -> bytes:
    """Return the 16x16 glyph of a wide character, or the fallback glyph."""
    if not char:
        raise ValueError("expected a character, got an empty string")
    return CHINESE_GLYPHS.get(char, FALLBACK_GLYPH)