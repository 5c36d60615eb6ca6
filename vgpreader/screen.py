"""The host screen backed by an in-memory frame buffer."""

from __future__ import annotations

from vgpreader.env import ColorFormat, Environment
from vgpreader.framebuf import COLOR_SET, FrameBuffer, GrayFrameBuffer, MonoFrameBuffer


class Screen:
    """Owns the frame buffer matching the host's screen and pushes it out."""

    def __init__(self, env: Environment) -> None:
        self.env = env
        self.mode: int = ColorFormat.MVLSB
        self.frame: FrameBuffer | None = None

    def init(self) -> None:
        """Create a frame buffer for the host's current screen format."""
        self.mode = self.env.screen_format
        width = self.env.screen_width
        height = self.env.screen_height
        self.deinit()
        if self.mode == ColorFormat.MVLSB:
            self.frame = MonoFrameBuffer(width, height, COLOR_SET)
        elif self.mode == ColorFormat.GS8:
            self.frame = GrayFrameBuffer(width, height)

    def deinit(self) -> None:
        """Release the frame buffer."""
        self.frame = None

    def flush(self) -> None:
        """Send the frame buffer contents to the host, if there is one."""
        if self.frame is None:
            return
        if self.mode == ColorFormat.MVLSB:
            self.env.update_screen_buffer(bytes(self.frame.buffer[2:]))
        elif self.mode == ColorFormat.GS8:
            self.env.update_screen_buffer(bytes(self.frame.buffer))