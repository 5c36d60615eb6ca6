"""Access to the host that runs the reader: feature queries and host calls."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any


class Feature(enum.IntEnum):
    """Identifiers of the features a host can report."""

    SCREEN_SIZE = 0x0000
    SCREEN_COLOR_FORMAT = 0x0001
    GAMEPAD_SUPPORT = 0x0002
    SAVE_CAPACITY = 0x0003
    RTC_SUPPORT = 0x0004


class Function(enum.IntEnum):
    """Identifiers of the functions a host provides."""

    UPDATE_SCREEN_BUFFER = 0x000100
    CPU_TICKS_MS = 0x000101
    TRACE_PUT_CHAR = 0x000102
    SYSTEM_EXIT = 0x000103
    GAMEPAD_STATUS = 0x000200
    SAVE_WRITE = 0x000300
    SAVE_FLUSH = 0x000301
    SAVE_READ = 0x000302
    RTC_GET_H32 = 0x000400
    RTC_SET_H32 = 0x000401
    RTC_GET_L32 = 0x000402
    RTC_SET_L32 = 0x000403


class ColorFormat(enum.IntEnum):
    """Screen pixel formats."""

    MVLSB = 1
    GS8 = 2


def _u32(value: int) -> int:
    return value & 0xFFFFFFFF


class Host(ABC):
    """The interface a host environment implements."""

    @abstractmethod
    def get_feature(self, feature_id: int) -> int:
        """Return the value of a feature; values above zero mean supported."""

    @abstractmethod
    def call(self, function_id: int, *args: Any) -> int:
        """Invoke a host function and return its result."""


class Environment:
    """Typed helpers over a :class:`Host`."""

    def __init__(self, host: Host) -> None:
        self.host = host

    @property
    def screen_format(self) -> int:
        """The screen's color format identifier."""
        return self.host.get_feature(Feature.SCREEN_COLOR_FORMAT)

    @property
    def screen_width(self) -> int:
        """Screen width in pixels."""
        return (self.host.get_feature(Feature.SCREEN_SIZE) >> 12) & 0xFFF

    @property
    def screen_height(self) -> int:
        """Screen height in pixels."""
        return self.host.get_feature(Feature.SCREEN_SIZE) & 0xFFF

    @property
    def gamepad_supported(self) -> bool:
        """Whether the host has a gamepad."""
        return self.host.get_feature(Feature.GAMEPAD_SUPPORT) > 0

    @property
    def save_supported(self) -> bool:
        """Whether the host offers save storage."""
        return self.host.get_feature(Feature.SAVE_CAPACITY) > 0

    @property
    def save_capacity(self) -> int:
        """Save storage capacity in bytes, 0 if unsupported."""
        return max(self.host.get_feature(Feature.SAVE_CAPACITY), 0)

    @property
    def rtc_supported(self) -> bool:
        """Whether the host has a real-time clock."""
        return self.host.get_feature(Feature.RTC_SUPPORT) > 0

    def update_screen_buffer(self, data: bytes) -> None:
        """Hand a complete screen image to the host."""
        self.host.call(Function.UPDATE_SCREEN_BUFFER, bytes(data))

    def cpu_ticks_ms(self) -> int:
        """Return the host's millisecond tick counter."""
        return self.host.call(Function.CPU_TICKS_MS)

    def trace_put_char(self, ch: str | int) -> None:
        """Write one character to the host's trace output."""
        code = ord(ch) if isinstance(ch, str) else ch
        self.host.call(Function.TRACE_PUT_CHAR, code)

    def system_exit(self) -> None:
        """Ask the host to stop the program."""
        self.host.call(Function.SYSTEM_EXIT)

    def gamepad_status(self) -> int:
        """Return the bit mask of currently pressed keys."""
        return _u32(self.host.call(Function.GAMEPAD_STATUS))

    def save_write(self, offset: int, byte: int) -> None:
        """Write one byte to save storage."""
        self.host.call(Function.SAVE_WRITE, _u32(offset), byte & 0xFF)

    def save_flush(self) -> None:
        """Commit pending save writes."""
        self.host.call(Function.SAVE_FLUSH)

    def save_read(self, offset: int) -> int:
        """Read one byte from save storage."""
        return self.host.call(Function.SAVE_READ, _u32(offset)) & 0xFF

    def rtc_get_h32(self) -> int:
        """Return the high 32 bits of the real-time clock."""
        return _u32(self.host.call(Function.RTC_GET_H32))

    def rtc_set_h32(self, value: int) -> None:
        """Set the high 32 bits of the real-time clock."""
        self.host.call(Function.RTC_SET_H32, _u32(value))

    def rtc_get_l32(self) -> int:
        """Return the low 32 bits of the real-time clock."""
        return _u32(self.host.call(Function.RTC_GET_L32))

    def rtc_set_l32(self, value: int) -> None:
        """Set the low 32 bits of the real-time clock."""
        self.host.call(Function.RTC_SET_L32, _u32(value))