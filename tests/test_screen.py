from vgpreader.env import ColorFormat, Environment, Feature, Function, Host
from vgpreader.framebuf import COLOR_SET, GrayFrameBuffer, MonoFrameBuffer
from vgpreader.screen import Screen


class FakeHost(Host):
    def __init__(self, fmt, width, height):
        self.features = {
            Feature.SCREEN_COLOR_FORMAT: fmt,
            Feature.SCREEN_SIZE: (width << 12) | height,
        }
        self.frames = []

    def get_feature(self, feature_id):
        return self.features.get(feature_id, 0)

    def call(self, function_id, *args):
        if function_id == Function.UPDATE_SCREEN_BUFFER:
            self.frames.append(args[0])
        return 0


def make_screen(fmt, width=16, height=10):
    host = FakeHost(fmt, width, height)
    screen = Screen(Environment(host))
    screen.init()
    return host, screen


def test_mono_screen_frame_and_flush_without_header():
    host, screen = make_screen(ColorFormat.MVLSB)
    assert isinstance(screen.frame, MonoFrameBuffer)
    assert (screen.frame.width, screen.frame.height) == (16, 10)
    assert screen.frame.color == COLOR_SET
    screen.frame.set_pixel(3, 9, COLOR_SET)
    screen.flush()
    assert host.frames == [screen.frame.pixels]
    assert len(host.frames[0]) == len(screen.frame.buffer) - 2


def test_gray_screen_flushes_whole_buffer():
    host, screen = make_screen(ColorFormat.GS8, 4, 3)
    assert isinstance(screen.frame, GrayFrameBuffer)
    screen.frame.set_pixel(1, 1, 0x80)
    screen.flush()
    assert host.frames == [bytes(screen.frame.buffer)]
    assert host.frames[0][1 * 4 + 1] == 0x80


def test_unknown_format_has_no_frame_and_flush_is_silent():
    host, screen = make_screen(99)
    assert screen.frame is None
    screen.flush()
    assert host.frames == []


def test_deinit_releases_frame():
    host, screen = make_screen(ColorFormat.MVLSB)
    screen.deinit()
    assert screen.frame is None
    screen.flush()
    assert host.frames == []


def test_reinit_replaces_frame():
    host, screen = make_screen(ColorFormat.MVLSB)
    first = screen.frame
    host.features[Feature.SCREEN_COLOR_FORMAT] = ColorFormat.GS8
    screen.init()
    assert screen.frame is not first
    assert isinstance(screen.frame, GrayFrameBuffer)
    assert screen.mode == ColorFormat.GS8