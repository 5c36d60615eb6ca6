"""Bitmap fonts: glyph lookup, text layout and rendering onto frames."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from vgpreader.framebuf import FrameBuffer

TAB_SIZE = 2
GLYPH_BUFFER_SIZE = 32

_EOF = 0
_TAB = 9
_LF = 10
_CR = 13
_SPACE = 32
_ASCII_START = 33
_ASCII_END = 126

_INVISIBLE = frozenset({_CR, _LF, _TAB, _SPACE})


def _as_bytes(text: bytes | bytearray | str) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def _decode(data: bytes, pos: int, limit: int) -> tuple[int, int]:
    """Decode one UTF-8 sequence leniently; return (codepoint, next position)."""
    lead = data[pos]
    pos += 1
    size = 0
    codepoint = 0
    while pos < limit and (data[pos] & 0xC0) == 0x80:
        codepoint = ((codepoint << 6) | (data[pos] & 0x3F)) & 0xFFFFFFFF
        pos += 1
        size += 1
    if size == 0:
        return lead, pos
    lead &= 0x3F >> size
    return (codepoint | (lead << (size * 6))) & 0xFFFFFFFF, pos


class _Layout:
    """Places characters one after another inside optional width/height limits.

    Iterating yields (codepoint, x, y) for every placed character; once
    iteration stops, ``offset`` holds the number of bytes consumed.
    """

    def __init__(
        self,
        font: BitmapFont,
        data: bytes,
        x: int,
        y: int,
        width_limit: int,
        height_limit: int,
    ) -> None:
        self.font = font
        self.data = data
        self.start_x = x
        self.start_y = y
        self.width_limit = width_limit
        self.height_limit = height_limit
        self.offset = 0

    def __iter__(self) -> Iterator[tuple[int, int, int]]:
        font = self.font
        data = self.data
        limit = len(data)
        char_h = font.char_height
        char_x, char_y = self.start_x, self.start_y
        last_width = 0
        while True:
            char_x += last_width
            last_width = 0
            if self.offset >= limit:
                return
            codepoint, next_pos = _decode(data, self.offset, limit)
            if codepoint == _EOF:
                return
            width = font.advance(codepoint)
            if codepoint == _LF or (
                self.width_limit > 0
                and char_x + width - self.start_x > self.width_limit
            ):
                char_y += char_h
                char_x = self.start_x
            if self.height_limit > 0 and char_y + char_h - self.start_y > self.height_limit:
                if codepoint == _LF:
                    self.offset = next_pos
                return
            self.offset = next_pos
            last_width = width
            yield codepoint, char_x, char_y


class BitmapFont:
    """A fixed-cell bitmap font with optional per-character ASCII widths.

    Glyph images are row-major, most significant bit first, each row
    padded to whole bytes. ``ascii_width`` holds the advance of the 94
    printable ASCII characters from '!' to '~'.
    """

    def __init__(
        self,
        char_width: int,
        char_height: int,
        ascii_width: Sequence[int] | None = None,
        glyphs: Mapping[int, bytes] | None = None,
    ) -> None:
        self.char_width = char_width
        self.char_height = char_height
        self.ascii_width = ascii_width
        self._glyphs = dict(glyphs or {})

    @property
    def glyph_size(self) -> int:
        """Number of bytes in one glyph image."""
        return ((self.char_width + 7) // 8) * self.char_height

    def glyph(self, codepoint: int) -> bytes | None:
        """Return the glyph image for ``codepoint``, or None if absent."""
        return self._glyphs.get(codepoint)

    def advance(self, codepoint: int) -> int:
        """Return the horizontal advance of ``codepoint`` in pixels."""
        if codepoint == _SPACE:
            width = self.char_width // 2
        elif codepoint == _TAB:
            width = self.char_width * TAB_SIZE
        elif codepoint in (_CR, _LF):
            width = 0
        elif _ASCII_START <= codepoint <= _ASCII_END and self.ascii_width:
            width = self.ascii_width[codepoint - _ASCII_START]
        else:
            width = self.char_width
        return width & 0xFF

    def draw_text(
        self,
        text: bytes | str,
        frame: FrameBuffer,
        x: int,
        y: int,
        width_limit: int,
        height_limit: int,
        color: int,
    ) -> int:
        """Draw as much of ``text`` as fits; return the bytes consumed.

        A limit of 0 means no limit in that direction. Raises ValueError
        if a glyph image would exceed the glyph buffer size.
        """
        size = self.glyph_size
        if size > GLYPH_BUFFER_SIZE:
            raise ValueError(f"glyph of {size} bytes exceeds {GLYPH_BUFFER_SIZE}")
        layout = _Layout(self, _as_bytes(text), x, y, width_limit, height_limit)
        for codepoint, char_x, char_y in layout:
            if codepoint in _INVISIBLE:
                continue
            image = self.glyph(codepoint)
            if not image:
                continue
            self._blit_glyph(image[:size], frame, char_x, char_y, color)
        return layout.offset

    def _blit_glyph(
        self, image: bytes, frame: FrameBuffer, char_x: int, char_y: int, color: int
    ) -> None:
        px, py = char_x, char_y
        x_end = char_x + self.char_width
        for row_byte in image:
            for bit in range(8):
                if row_byte & (0x80 >> bit):
                    frame.set_pixel(px, py, color)
                px += 1
            if px >= x_end:
                px = char_x
                py += 1

    def text_width(self, text: bytes | str) -> int:
        """Return the total advance of ``text`` up to its end or a NUL byte."""
        data = _as_bytes(text)
        limit = len(data)
        total = 0
        pos = 0
        while pos < limit:
            codepoint, pos = _decode(data, pos, limit)
            if codepoint == _EOF:
                break
            total += self.advance(codepoint)
        return total & 0xFFFF

    def text_offset(self, text: bytes | str, width_limit: int, height_limit: int) -> int:
        """Return how many bytes of ``text`` fit within the given limits."""
        layout = _Layout(self, _as_bytes(text), 0, 0, width_limit, height_limit)
        for _ in layout:
            pass
        return layout.offset


def last_char_start(data: bytes | str, pos: int, start: int) -> int | None:
    """Return the index where the character before ``pos`` begins.

    Searching does not go below ``start``; None is returned when no
    character start is found.
    """
    raw = _as_bytes(data)
    while pos > start:
        pos -= 1
        ch = raw[pos]
        if ch < 0x80 or (ch & 0xC0) == 0xC0:
            return pos
    return None