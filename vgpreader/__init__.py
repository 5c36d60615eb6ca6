"""Framebuffers, bitmap fonts, text layout and a host screen interface for a paged text reader."""

__version__ = "0.1.0"