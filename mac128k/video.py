"""Rendering of the 512x342 monochrome framebuffer."""

from __future__ import annotations

from itertools import product
from typing import Callable

from .memory import VIDEO_BASE, MemoryBus

WIDTH = 512
HEIGHT = 342
BYTES_PER_ROW = WIDTH // 8
FRAMEBUFFER_SIZE = BYTES_PER_ROW * HEIGHT
TARGET_FPS = 60
WINDOW_TITLE = "Mac 128K Emulator"
TEST_PATTERN_BASE = 0x1A700

_BLACK = bytes((0x00, 0x00, 0x00, 0xFF))
_WHITE = bytes((0xFF, 0xFF, 0xFF, 0xFF))

_EXPANDED = [
    b"".join(_BLACK if (value >> bit) & 1 else _WHITE for bit in range(7, -1, -1))
    for value in range(256)
]


def framebuffer_to_rgba(ram) -> bytes:
    """Convert the 1-bit framebuffer in ``ram`` to RGBA bytes; set bits are black."""
    data = bytes(ram[VIDEO_BASE:VIDEO_BASE + FRAMEBUFFER_SIZE])
    data = data.ljust(FRAMEBUFFER_SIZE, b"\x00")
    return b"".join(_EXPANDED[value] for value in data)


def write_test_pattern(bus: MemoryBus) -> None:
    """Fill video memory with a checkerboard of 64x8-pixel squares."""
    for y, x in product(range(HEIGHT), range(BYTES_PER_ROW)):
        value = 0xFF if ((x // 8) + (y // 8)) % 2 == 0 else 0x00
        bus.write_u8(TEST_PATTERN_BASE + y * BYTES_PER_ROW + x, value)


class MacVideo:
    """A window showing the contents of the bus's video memory."""

    def __init__(self, bus: MemoryBus) -> None:
        import pygame

        self._pygame = pygame
        self.bus = bus
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self._clock = pygame.time.Clock()

    def update(self) -> None:
        """Redraw the window from video memory."""
        pygame = self._pygame
        frame = framebuffer_to_rgba(self.bus.ram)
        image = pygame.image.frombuffer(frame, (WIDTH, HEIGHT), "RGBA")
        self.screen.blit(image, (0, 0))
        pygame.display.flip()

    def _should_exit(self) -> bool:
        pygame = self._pygame
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return True
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return True
        return False

    def run(self, emulation_step: Callable[[], None]) -> None:
        """Run ``emulation_step`` and redraw once per frame until closed or Escape."""
        while not self._should_exit():
            emulation_step()
            self.update()
            self._clock.tick(TARGET_FPS)

    def close(self) -> None:
        """Close the window."""
        self._pygame.quit()