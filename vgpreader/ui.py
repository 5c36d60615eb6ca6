"""Simple text layout widgets drawn onto frame buffers."""

from __future__ import annotations

import enum

from vgpreader.bmfont import BitmapFont
from vgpreader.framebuf import FrameBuffer

MAX_LINES = 32


class Align(enum.IntFlag):
    """Horizontal and vertical alignment flags; combine with ``|``."""

    LEFT = 0
    TOP = 0
    HCENTER = 1
    HRIGHT = 2
    VCENTER = 4
    VBOTTOM = 8


def _text_bytes(text: bytes | str | None) -> bytes:
    if text is None:
        return b""
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    nul = raw.find(b"\0")
    return raw if nul == -1 else raw[:nul]


def text_area(
    font: BitmapFont,
    text: bytes | str | None,
    frame: FrameBuffer,
    x: int,
    y: int,
    w: int,
    h: int,
    align: int,
    color: int,
    bg_color: int,
) -> None:
    """Fill a box with ``bg_color`` and draw wrapped, aligned text in it."""
    data = _text_bytes(text)
    length = len(data) & 0xFFFF
    char_h = font.char_height
    lines: list[tuple[int, int]] = []
    offset = 0
    while offset < length and (len(lines) + 1) * char_h <= h and len(lines) < MAX_LINES:
        fit = font.text_offset(data[offset:length], w, char_h)
        if fit == 0:
            break
        lines.append((fit, font.text_width(data[offset:offset + fit])))
        offset += fit

    frame.fill_rect(x, y, w, h, bg_color)
    used_height = len(lines) * char_h
    if align & Align.VBOTTOM:
        off_y = y + (h - used_height)
    elif align & Align.VCENTER:
        off_y = y + (h - used_height) // 2 + h % 2
    else:
        off_y = y

    offset = 0
    for nbytes, width in lines:
        if align & Align.HRIGHT:
            off_x = x + (w - width)
        elif align & Align.HCENTER:
            off_x = x + (w - width) // 2 + w % 2
        else:
            off_x = x
        font.draw_text(data[offset:offset + nbytes], frame, off_x, off_y, width, char_h, color)
        off_y += char_h
        offset += nbytes