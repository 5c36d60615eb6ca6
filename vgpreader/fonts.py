"""Built-in ASCII bitmap fonts."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from vgpreader.bmfont import BitmapFont

ASCII_CHAR_START = 0x21
ASCII_CHAR_END = 0x7E
ASCII_CHAR_COUNT = ASCII_CHAR_END - ASCII_CHAR_START + 1


class AsciiFont(BitmapFont):
    """A bitmap font holding glyphs for the printable ASCII range '!'..'~'.

    ``data`` is the concatenation of the glyph images in character order.
    """

    def __init__(
        self,
        char_width: int,
        char_height: int,
        data: bytes,
        ascii_width: Sequence[int] | None = None,
    ) -> None:
        super().__init__(char_width, char_height, ascii_width)
        needed = ASCII_CHAR_COUNT * self.glyph_size
        if len(data) < needed:
            raise ValueError(f"font data holds {len(data)} bytes, {needed} needed")
        self._data = bytes(data)

    def glyph(self, codepoint: int) -> bytes | None:
        """Return the glyph image for a printable ASCII character, else None."""
        if not ASCII_CHAR_START <= codepoint <= ASCII_CHAR_END:
            return None
        size = self.glyph_size
        start = (codepoint - ASCII_CHAR_START) * size
        return self._data[start:start + size]


_QUAN_8X8 = bytes.fromhex(
    """
    80 80 80 80 80 00 80 00 A0 A0 00 00 00 00 00 00
    50 F8 50 50 F8 50 50 00 20 78 A0 70 28 F0 20 00
    40 A8 50 20 50 A8 10 00 40 A0 A0 40 A8 90 68 00
    80 80 00 00 00 00 00 00 40 80 80 80 80 80 40 00
    80 40 40 40 40 40 80 00 20 A8 70 20 70 A8 20 00
    00 20 20 F8 20 20 00 00 00 00 00 00 00 00 40 80
    00 00 00 F8 00 00 00 00 00 00 00 00 00 00 40 00
    20 20 40 40 40 80 80 00 60 90 B0 D0 90 90 60 00
    C0 40 40 40 40 40 40 00 E0 10 10 60 80 80 F0 00
    E0 10 10 60 10 10 E0 00 90 90 90 90 70 10 10 00
    F0 80 80 E0 10 10 E0 00 60 80 80 E0 90 90 60 00
    F0 10 10 20 40 40 40 00 60 90 90 60 90 90 60 00
    60 90 90 70 10 10 60 00 00 40 00 00 00 40 00 00
    00 40 00 00 00 40 80 00 10 20 40 80 40 20 10 00
    00 00 F8 00 F8 00 00 00 80 40 20 10 20 40 80 00
    E0 10 20 40 40 00 40 00 38 44 9A AA BA 44 30 00
    60 90 90 F0 90 90 90 00 E0 90 90 E0 90 90 E0 00
    70 80 80 80 80 80 70 00 E0 90 90 90 90 90 E0 00
    E0 80 80 E0 80 80 E0 00 E0 80 80 E0 80 80 80 00
    70 80 80 B0 90 90 60 00 90 90 90 F0 90 90 90 00
    80 80 80 80 80 80 80 00 20 20 20 20 20 20 C0 00
    90 A0 A0 C0 A0 A0 90 00 80 80 80 80 80 80 E0 00
    88 D8 D8 A8 A8 88 88 00 90 D0 D0 B0 B0 90 90 00
    60 90 90 90 90 90 60 00 E0 90 90 E0 80 80 80 00
    60 90 90 90 90 A0 50 00 E0 90 90 E0 A0 90 90 00
    70 80 80 60 10 10 E0 00 F8 20 20 20 20 20 20 00
    90 90 90 90 90 90 60 00 88 88 50 50 50 20 20 00
    88 A8 A8 A8 50 50 50 00 88 50 50 20 50 50 88 00
    88 50 50 20 20 20 20 00 F0 10 20 60 40 80 F0 00
    C0 80 80 80 80 80 C0 00 80 80 40 40 40 20 20 00
    C0 40 40 40 40 40 C0 00 40 A0 00 00 00 00 00 00
    00 00 00 00 00 00 F0 00 80 40 00 00 00 00 00 00
    00 00 E0 10 70 90 70 00 80 80 E0 90 90 90 E0 00
    00 00 70 80 80 80 70 00 10 10 70 90 90 90 70 00
    00 00 60 90 F0 80 70 00 20 40 E0 40 40 40 40 00
    00 00 70 90 90 70 10 E0 80 80 E0 90 90 90 90 00
    80 00 80 80 80 80 80 00 20 00 20 20 20 20 20 C0
    80 80 90 A0 C0 A0 90 00 80 80 80 80 80 80 40 00
    00 00 F0 A8 A8 A8 A8 00 00 00 E0 90 90 90 90 00
    00 00 60 90 90 90 60 00 00 00 E0 90 90 E0 80 80
    00 00 70 90 90 70 10 10 00 00 A0 C0 80 80 80 00
    00 00 70 80 60 10 E0 00 00 40 E0 40 40 40 20 00
    00 00 90 90 90 90 70 00 00 00 88 88 50 50 20 00
    00 00 88 A8 A8 50 50 00 00 00 88 50 20 50 88 00
    00 00 90 90 90 70 10 E0 00 00 F0 10 60 80 F0 00
    20 40 40 80 40 40 20 00 80 80 80 80 80 80 80 00
    80 40 40 20 40 40 80 00 00 00 64 98 00 00 00 00
    """
)

_QUAN_ASCII_WIDTH_8X8 = bytes.fromhex(
    """
    02 04 06 06 06 06 02 03 03 06 06 03 06 03 04 05
    04 05 05 05 05 05 05 05 05 03 03 05 06 05 05 08
    05 05 05 05 04 04 05 05 02 04 05 04 06 05 05 05
    05 05 05 06 05 06 06 06 06 05 03 04 03 04 05 03
    05 05 05 05 05 04 05 05 02 04 05 03 06 05 05 05
    05 04 05 04 05 06 06 06 05 05 04 02 04 07
    """
)

_UNIFONT_8X16 = bytes.fromhex(
    """
    00 00 00 00 08 08 08 08 08 08 08 00 00 08 00 00
    00 00 22 22 22 22 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 12 12 12 7E 24 24 7E 48 48 48 00 00
    00 00 00 00 08 3E 49 48 38 0E 09 49 3E 08 00 00
    00 00 00 00 31 4A 4C 34 08 18 16 29 49 46 00 00
    00 00 00 00 1C 22 22 14 18 29 45 42 46 39 00 00
    00 00 08 08 08 08 00 00 00 00 00 00 00 00 00 00
    00 00 00 04 08 10 10 10 10 10 10 10 10 08 04 00
    00 00 00 20 10 08 08 08 08 08 08 08 08 10 20 00
    00 00 00 00 00 00 08 49 2A 1C 2A 49 08 00 00 00
    00 00 00 00 00 00 08 08 08 7F 08 08 08 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 18 08 08 10
    00 00 00 00 00 00 00 00 00 3C 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 18 00 00 00
    00 00 00 00 02 04 04 08 08 10 10 20 20 40 00 00
    00 00 00 00 18 24 42 46 4A 52 62 42 24 18 00 00
    00 00 00 00 08 18 28 08 08 08 08 08 08 3E 00 00
    00 00 00 00 3C 42 02 02 0C 10 20 40 40 7E 00 00
    00 00 00 00 3C 42 02 02 1E 02 02 02 42 3C 00 00
    00 00 00 00 04 0C 14 24 44 44 7E 04 04 04 00 00
    00 00 00 00 7E 40 40 40 7C 02 02 02 42 3C 00 00
    00 00 00 00 1C 20 40 40 7C 42 42 42 42 3C 00 00
    00 00 00 00 7E 02 02 04 04 04 08 08 08 08 00 00
    00 00 00 00 3C 42 42 42 3C 42 42 42 42 3C 00 00
    00 00 00 00 3C 42 42 42 3E 02 02 02 04 38 00 00
    00 00 00 00 00 00 18 00 00 00 18 00 00 00 00 00
    00 00 00 00 00 00 18 00 00 00 00 18 08 08 10 00
    00 00 00 00 00 02 04 08 10 20 10 08 04 02 00 00
    00 00 00 00 00 00 00 7E 00 00 00 7E 00 00 00 00
    00 00 00 00 00 40 20 10 08 04 08 10 20 40 00 00
    00 00 00 00 3C 42 02 02 04 08 08 00 00 08 00 00
    00 00 00 00 1C 22 4A 56 52 52 52 4E 20 1E 00 00
    00 00 00 00 18 24 24 42 42 7E 42 42 42 42 00 00
    00 00 00 00 7C 42 42 42 7C 42 42 42 42 7C 00 00
    00 00 00 00 3C 42 40 40 40 40 40 40 42 3C 00 00
    00 00 00 00 78 44 42 42 42 42 42 42 44 78 00 00
    00 00 00 00 7E 40 40 40 7C 40 40 40 40 7E 00 00
    00 00 00 00 7E 40 40 40 7C 40 40 40 40 40 00 00
    00 00 00 00 3C 42 40 40 40 4E 42 42 46 3A 00 00
    00 00 00 00 42 42 42 42 7E 42 42 42 42 42 00 00
    00 00 00 00 3E 08 08 08 08 08 08 08 08 3E 00 00
    00 00 00 00 1F 04 04 04 04 04 04 44 44 38 00 00
    00 00 00 00 42 44 48 50 60 60 50 48 44 42 00 00
    00 00 00 00 40 40 40 40 40 40 40 40 40 7E 00 00
    00 00 00 00 42 42 66 66 5A 42 42 42 42 42 00 00
    00 00 00 00 42 62 62 52 52 4A 4A 46 42 42 00 00
    00 00 00 00 3C 42 42 42 42 42 42 42 42 3C 00 00
    00 00 00 00 7C 42 42 42 7C 40 40 40 40 40 00 00
    00 00 00 00 3C 42 42 42 42 42 42 5A 66 3C 03 00
    00 00 00 00 7C 42 42 42 7C 48 44 44 44 42 00 00
    00 00 00 00 3C 42 40 40 30 0C 02 02 42 3C 00 00
    00 00 00 00 7F 08 08 08 08 08 08 08 08 08 00 00
    00 00 00 00 42 42 42 42 42 42 42 42 42 3C 00 00
    00 00 00 00 41 41 41 22 22 22 14 14 08 08 00 00
    00 00 00 00 42 42 42 42 5A 66 66 42 42 42 00 00
    00 00 00 00 42 42 24 24 18 24 24 42 42 42 00 00
    00 00 00 00 41 41 22 22 14 08 08 08 08 08 00 00
    00 00 00 00 7E 02 02 04 08 10 20 40 40 7E 00 00
    00 00 00 0E 08 08 08 08 08 08 08 08 08 08 0E 00
    00 00 00 00 40 20 20 10 10 08 08 04 04 02 00 00
    00 00 00 70 10 10 10 10 10 10 10 10 10 10 70 00
    00 00 18 24 42 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 7F 00
    00 20 10 08 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 3C 42 02 3E 42 42 46 3A 00 00
    00 00 00 40 40 40 5C 62 42 42 42 42 62 5C 00 00
    00 00 00 00 00 00 3C 42 40 40 40 40 42 3C 00 00
    00 00 00 02 02 02 3A 46 42 42 42 42 46 3A 00 00
    00 00 00 00 00 00 3C 42 42 7E 40 40 42 3C 00 00
    00 00 00 0C 10 10 10 7C 10 10 10 10 10 10 00 00
    00 00 00 00 00 3A 44 44 44 38 20 3C 42 42 3C 00
    00 00 00 40 40 40 5C 62 42 42 42 42 42 42 00 00
    00 00 00 08 00 00 18 08 08 08 08 08 08 3E 00 00
    00 00 00 04 00 00 0C 04 04 04 04 04 04 04 48 30
    00 00 00 40 40 40 44 48 50 60 50 48 44 42 00 00
    00 00 00 18 08 08 08 08 08 08 08 08 08 3E 00 00
    00 00 00 00 00 00 76 49 49 49 49 49 49 49 00 00
    00 00 00 00 00 00 5C 62 42 42 42 42 42 42 00 00
    00 00 00 00 00 00 3C 42 42 42 42 42 42 3C 00 00
    00 00 00 00 00 00 5C 62 42 42 42 42 62 5C 40 40
    00 00 00 00 00 00 3A 46 42 42 42 42 46 3A 02 02
    00 00 00 00 00 00 5C 62 40 40 40 40 40 40 00 00
    00 00 00 00 00 00 3C 42 40 30 0C 02 42 3C 00 00
    00 00 00 00 10 10 10 7C 10 10 10 10 10 0C 00 00
    00 00 00 00 00 00 42 42 42 42 42 42 46 3A 00 00
    00 00 00 00 00 00 42 42 42 24 24 24 24 18 00 00
    00 00 00 00 00 00 41 49 49 49 49 49 49 36 00 00
    00 00 00 00 00 00 42 42 24 18 24 24 42 42 00 00
    00 00 00 00 00 00 42 42 42 42 42 26 1A 02 02 3C
    00 00 00 00 00 00 7E 02 04 08 10 20 40 7E 00 00
    00 00 00 0C 10 10 10 10 10 20 10 10 10 10 10 0C
    00 00 08 08 08 08 08 08 08 08 08 08 08 08 08 08
    00 00 00 30 08 08 08 08 08 04 08 08 08 08 08 30
    00 00 00 31 49 46 00 00 00 00 00 00 00 00 00 00
    """
)

_UNIFONT_ASCII_WIDTH_8X16 = bytes([8] * ASCII_CHAR_COUNT)


@lru_cache(maxsize=None)
def quan_8x8() -> AsciiFont:
    """Return the proportional 8x8 ASCII font."""
    return AsciiFont(8, 8, _QUAN_8X8, _QUAN_ASCII_WIDTH_8X8)


@lru_cache(maxsize=None)
def unifont_8x16() -> AsciiFont:
    """Return the fixed-width 8x16 ASCII font."""
    return AsciiFont(8, 16, _UNIFONT_8X16, _UNIFONT_ASCII_WIDTH_8X16)