"""Macintosh 128K emulator parts: memory bus, VIA, IWM and display."""

__version__ = "0.1.0"
__all__ = ["iwm", "memory", "via", "video"]