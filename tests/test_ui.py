from vgpreader.bmfont import BitmapFont
from vgpreader.framebuf import GrayFrameBuffer
from vgpreader.ui import Align, text_area

DOT = bytes([0x80] + [0] * 7)


def make_font():
    return BitmapFont(8, 8, glyphs={ord("A"): DOT})


def set_pixels(frame):
    return {
        (x, y)
        for y in range(frame.height)
        for x in range(frame.width)
        if frame.get_pixel(x, y) == 0xFF
    }


def test_background_fill():
    frame = GrayFrameBuffer(20, 20)
    text_area(make_font(), "", frame, 2, 3, 5, 4, Align.LEFT, 0xFF, 0x10)
    inside = {(x, y) for x in range(2, 7) for y in range(3, 7)}
    for y in range(20):
        for x in range(20):
            expected = 0x10 if (x, y) in inside else 0
            assert frame.get_pixel(x, y) == expected


def test_left_top_alignment():
    frame = GrayFrameBuffer(40, 40)
    text_area(make_font(), "A", frame, 2, 3, 20, 20, Align.LEFT | Align.TOP, 0xFF, 0)
    assert set_pixels(frame) == {(2, 3)}


def test_right_bottom_alignment():
    font = make_font()
    frame = GrayFrameBuffer(40, 40)
    text_area(font, "A", frame, 2, 3, 20, 20, Align.HRIGHT | Align.VBOTTOM, 0xFF, 0)
    assert set_pixels(frame) == {(2 + 20 - font.advance(ord("A")), 3 + 20 - font.char_height)}


def test_center_alignment():
    frame = GrayFrameBuffer(40, 40)
    text_area(make_font(), "A", frame, 0, 0, 20, 20, Align.HCENTER | Align.VCENTER, 0xFF, 0)
    assert set_pixels(frame) == {(6, 6)}


def test_wraps_to_second_line():
    frame = GrayFrameBuffer(40, 40)
    text_area(make_font(), "AAA", frame, 0, 0, 16, 16, Align.LEFT, 0xFF, 0)
    assert set_pixels(frame) == {(0, 0), (8, 0), (0, 8)}


def test_lines_limited_by_height():
    frame = GrayFrameBuffer(40, 40)
    text_area(make_font(), "AAA", frame, 0, 0, 8, 8, Align.LEFT, 0xFF, 0)
    assert set_pixels(frame) == {(0, 0)}


def test_text_stops_at_nul():
    frame = GrayFrameBuffer(40, 40)
    text_area(make_font(), b"A\0A", frame, 0, 0, 32, 8, Align.LEFT, 0xFF, 0)
    assert set_pixels(frame) == {(0, 0)}