"""In-memory frame buffers with simple drawing primitives."""

from __future__ import annotations

from abc import ABC, abstractmethod

COLOR_CLEAR = 0x00
COLOR_SET = 0xFF


class FrameBuffer(ABC):
    """A rectangular pixel surface; subclasses define the storage format."""

    def __init__(self, width: int, height: int, buffer: bytearray) -> None:
        if width < 0 or height < 0:
            raise ValueError("frame size must not be negative")
        self.width = width
        self.height = height
        self.buffer = buffer

    @abstractmethod
    def _get_unchecked(self, x: int, y: int) -> int:
        """Read a pixel that is known to be inside the frame."""

    @abstractmethod
    def _set_unchecked(self, x: int, y: int, color: int) -> None:
        """Write a pixel that is known to be inside the frame."""

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self, color: int) -> None:
        """Fill the whole frame with one color."""
        for y in range(self.height):
            for x in range(self.width):
                self._set_unchecked(x, y, color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel color, or COLOR_CLEAR outside the frame."""
        if self._contains(x, y):
            return self._get_unchecked(x, y)
        return COLOR_CLEAR

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; coordinates outside the frame are ignored."""
        if self._contains(x, y):
            self._set_unchecked(x, y, color)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Fill a rectangle, clipped to the frame."""
        if (
            h < 1
            or w < 1
            or x + w <= 0
            or y + h <= 0
            or y >= self.height
            or x >= self.width
        ):
            return
        x_end = min(self.width, x + w)
        y_end = min(self.height, y + h)
        for row in range(max(y, 0), y_end):
            for col in range(max(x, 0), x_end):
                self._set_unchecked(col, row, color)

    def draw_hline(self, x: int, y: int, length: int, color: int) -> None:
        """Draw a horizontal line of the given length."""
        self.fill_rect(x, y, length, 1, color)

    def draw_vline(self, x: int, y: int, length: int, color: int) -> None:
        """Draw a vertical line of the given length."""
        self.fill_rect(x, y, 1, length, color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Draw a line between two points with Bresenham's algorithm."""
        dx = x2 - x1
        sx = 1 if dx > 0 else -1
        dx = abs(dx)
        dy = y2 - y1
        sy = 1 if dy > 0 else -1
        dy = abs(dy)
        steep = dy > dx
        if steep:
            x1, y1 = y1, x1
            dx, dy = dy, dx
            sx, sy = sy, sx
        e = 2 * dy - dx
        for _ in range(dx):
            if steep:
                if self._contains(y1, x1):
                    self._set_unchecked(y1, x1, color)
            elif self._contains(x1, y1):
                self._set_unchecked(x1, y1, color)
            while e >= 0:
                y1 += sy
                e -= 2 * dx
            x1 += sx
            e += 2 * dy
        if self._contains(x2, y2):
            self._set_unchecked(x2, y2, color)

    def blit(self, source: FrameBuffer | None, x: int, y: int, ignore_color: int) -> None:
        """Draw ``source`` onto this frame at (x, y).

        Pixels of ``source`` equal to ``ignore_color`` are treated as
        transparent and are not copied.
        """
        if source is None:
            return
        if (
            x >= self.width
            or y >= self.height
            or -x >= source.width
            or -y >= source.height
        ):
            return
        x0_start = max(0, x)
        x1_start = max(0, -x)
        y1 = max(0, -y)
        x0_end = min(self.width, x + source.width)
        y0_end = min(self.height, y + source.height)
        for y0 in range(max(0, y), y0_end):
            for offset, x0 in enumerate(range(x0_start, x0_end)):
                col = source._get_unchecked(x1_start + offset, y1) & 0xFF
                if col != ignore_color:
                    self._set_unchecked(x0, y0, col)
            y1 += 1


class GrayFrameBuffer(FrameBuffer):
    """An 8-bit grayscale frame, one byte per pixel, row by row."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height, bytearray(width * height))

    def _get_unchecked(self, x: int, y: int) -> int:
        return self.buffer[y * self.width + x]

    def _set_unchecked(self, x: int, y: int, color: int) -> None:
        self.buffer[y * self.width + x] = color & 0xFF


class MonoFrameBuffer(FrameBuffer):
    """A one-bit frame in vertical LSB-first byte layout.

    The first two bytes of ``buffer`` hold the color reported for set
    pixels (big-endian); the pixel data follows.
    """

    def __init__(self, width: int, height: int, color: int) -> None:
        pages = (height + 7) // 8
        buffer = bytearray(width * pages + 2)
        buffer[0] = (color >> 8) & 0xFF
        buffer[1] = color & 0xFF
        super().__init__(width, height, buffer)

    @property
    def color(self) -> int:
        """The color returned for set pixels."""
        return (self.buffer[0] << 8) | self.buffer[1]

    @property
    def pixels(self) -> bytes:
        """The pixel data without the color header."""
        return bytes(self.buffer[2:])

    def _index(self, x: int, y: int) -> int:
        return (y >> 3) * self.width + x + 2

    def _get_unchecked(self, x: int, y: int) -> int:
        bit = (self.buffer[self._index(x, y)] >> (y & 0x07)) & 0x01
        return self.color if bit else COLOR_CLEAR

    def _set_unchecked(self, x: int, y: int, color: int) -> None:
        index = self._index(x, y)
        mask = 0x01 << (y & 0x07)
        if color != COLOR_CLEAR:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF