import pytest

from vgpreader.env import ColorFormat, Environment, Feature, Function, Host


class FakeHost(Host):
    def __init__(self, features=None, results=None):
        self.features = dict(features or {})
        self.results = dict(results or {})
        self.calls = []

    def get_feature(self, feature_id):
        return self.features.get(feature_id, 0)

    def call(self, function_id, *args):
        self.calls.append((function_id, args))
        return self.results.get(function_id, 0)


def test_host_is_abstract():
    with pytest.raises(TypeError):
        Host()


def test_screen_size_decoding():
    host = FakeHost({Feature.SCREEN_SIZE: (256 << 12) | 127})
    env = Environment(host)
    assert env.screen_width == 256
    assert env.screen_height == 127


def test_screen_format():
    env = Environment(FakeHost({Feature.SCREEN_COLOR_FORMAT: ColorFormat.GS8}))
    assert env.screen_format == ColorFormat.GS8


def test_save_capacity_positive_and_negative():
    env = Environment(FakeHost({Feature.SAVE_CAPACITY: 4096}))
    assert env.save_capacity == 4096
    assert env.save_supported is True
    env = Environment(FakeHost({Feature.SAVE_CAPACITY: -5}))
    assert env.save_capacity == 0
    assert env.save_supported is False


def test_support_flags():
    env = Environment(FakeHost({Feature.GAMEPAD_SUPPORT: 1, Feature.RTC_SUPPORT: 0}))
    assert env.gamepad_supported is True
    assert env.rtc_supported is False


def test_update_screen_buffer_passes_data():
    host = FakeHost()
    Environment(host).update_screen_buffer(bytearray(b"\x01\x02"))
    assert host.calls == [(Function.UPDATE_SCREEN_BUFFER, (b"\x01\x02",))]
    assert host.calls[0][0] == 0x000100


def test_trace_put_char_accepts_str():
    host = FakeHost()
    env = Environment(host)
    env.trace_put_char("A")
    env.trace_put_char(ord("b"))
    assert host.calls == [
        (Function.TRACE_PUT_CHAR, (ord("A"),)),
        (Function.TRACE_PUT_CHAR, (ord("b"),)),
    ]


def test_save_read_is_a_byte():
    host = FakeHost(results={Function.SAVE_READ: 0x1FF})
    value = Environment(host).save_read(3)
    assert value == 0xFF
    assert host.calls == [(Function.SAVE_READ, (3,))]


def test_save_write_and_flush():
    host = FakeHost()
    env = Environment(host)
    env.save_write(10, 0x42)
    env.save_flush()
    assert host.calls == [(Function.SAVE_WRITE, (10, 0x42)), (Function.SAVE_FLUSH, ())]


def test_rtc_roundtrip_through_host():
    host = FakeHost(results={Function.RTC_GET_H32: -1, Function.RTC_GET_L32: 1234})
    env = Environment(host)
    assert env.rtc_get_h32() == 0xFFFFFFFF
    assert env.rtc_get_l32() == 1234
    env.rtc_set_h32(7)
    env.rtc_set_l32(8)
    assert host.calls[-2:] == [(Function.RTC_SET_H32, (7,)), (Function.RTC_SET_L32, (8,))]


def test_ticks_and_gamepad_status_and_exit():
    host = FakeHost(results={Function.CPU_TICKS_MS: 555, Function.GAMEPAD_STATUS: 0b101})
    env = Environment(host)
    assert env.cpu_ticks_ms() == 555
    assert env.gamepad_status() == 0b101
    env.system_exit()
    assert host.calls[-1] == (Function.SYSTEM_EXIT, ())