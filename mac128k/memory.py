"""The Macintosh 128K address space: RAM, ROM overlay and I/O devices."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from .iwm import Iwm
from .via import Via

logger = logging.getLogger(__name__)

RAM_SIZE = 0x1000000
ROM_SIZE = 0x10000
VIDEO_BASE = 0x1A700
ROM_BASE = 0x400000
ROM_END = ROM_BASE + ROM_SIZE - 1

_IWM_START = 0xDFE1FF
_IWM_END = _IWM_START + 0x2000

PauseHook = Callable[[str, int], bool]


class RomSizeError(ValueError):
    """Raised when a ROM image does not have the expected size."""


class MemoryBus:
    """Byte-addressed big-endian bus routing accesses to memory and devices.

    ``pause`` is called as ``pause(label, addr)`` whenever a hardware access
    should stop the machine for inspection; it returns True to continue or
    False to enter single-step mode.
    """

    def __init__(self, via: Optional[Via] = None, pause: Optional[PauseHook] = None) -> None:
        self.ram = bytearray(RAM_SIZE)
        self.rom = bytearray(ROM_SIZE)
        self.rom_mapped_at_zero = True
        self.via = via
        self.iwm = Iwm()
        self.pause = pause
        self.single_step = False

    def load_rom(self, path: str | os.PathLike) -> None:
        """Load a ROM image and map it at address zero."""
        with open(path, "rb") as fh:
            data = fh.read()
        if len(data) != ROM_SIZE:
            raise RomSizeError(
                f"Invalid ROM size: expected {ROM_SIZE} bytes, got {len(data)} bytes"
            )
        self.rom[:] = data
        self.rom_mapped_at_zero = True

    def remap_rom(self) -> None:
        """Remove the ROM overlay so RAM appears at address zero."""
        self.rom_mapped_at_zero = False

    def _hardware_pause(self, label: str, addr: int) -> bool:
        if self.pause is None:
            return True
        cont = self.pause(label, addr)
        self.single_step = not cont
        return cont

    def _check_scc(self, kind: str, addr: int) -> None:
        high = addr & 0xF00000
        if high == 0x900000:
            self._hardware_pause(f"SCC_RD hardware {kind}", addr)
        if high == 0xB00000:
            self._hardware_pause(f"SCC_WR hardware {kind}", addr)

    @staticmethod
    def _is_iwm(addr: int) -> bool:
        return _IWM_START <= (addr & 0xFFFFFF) < _IWM_END

    @staticmethod
    def _is_via(addr: int) -> bool:
        return (addr & 0xE80000) == 0xE80000

    def _in_low_rom(self, addr: int) -> bool:
        return self.rom_mapped_at_zero and addr < ROM_SIZE

    def read_u8(self, addr: int) -> int:
        """Read one byte."""
        addr &= 0xFFFFFFFF
        if self._is_iwm(addr):
            logger.warning("IWM hardware read at 0x%X", addr)
            self._hardware_pause("IWM hardware read", addr)
            return self.iwm.read(addr)
        self._check_scc("read", addr)
        if self._is_via(addr):
            if self.via is None:
                logger.warning("VIA not initialized for read at 0x%X", addr)
                return 0xFF
            return self.via.read(addr)
        if self._in_low_rom(addr):
            return self.rom[addr]
        if ROM_BASE <= addr <= ROM_END:
            return self.rom[addr - ROM_BASE]
        if addr < RAM_SIZE:
            return self.ram[addr]
        logger.warning("read_u8 unmapped address: 0x%X", addr)
        return 0xFF

    def write_u8(self, addr: int, value: int) -> None:
        """Write one byte; writes to ROM are refused."""
        addr &= 0xFFFFFFFF
        value &= 0xFF
        if self._is_iwm(addr):
            logger.warning("IWM hardware write at 0x%X = 0x%X", addr, value)
            self._hardware_pause("IWM hardware write", addr)
            self.iwm.write(addr, value)
            return
        self._check_scc("write", addr)
        if self._is_via(addr):
            if self.via is None:
                logger.warning("VIA not initialized for write at 0x%X", addr)
            else:
                self.via.write(addr, value)
            return
        if self._in_low_rom(addr):
            self._hardware_pause("write_u8 attempt to write to ROM@0", addr)
            logger.warning("write_u8 attempt to write to ROM@0: 0x%X", addr)
        elif ROM_BASE <= addr <= ROM_END:
            self._hardware_pause("write_u8 attempt to write to ROM@400000", addr)
            logger.warning("write_u8 attempt to write to ROM@400000: 0x%X", addr)
        elif addr < RAM_SIZE:
            logger.info("write_u8 (RAM): 0x%X = 0x%X", addr, value)
            self.ram[addr] = value
        else:
            logger.warning("write_u8 unmapped address: 0x%X", addr)

    def read_u16(self, addr: int) -> int:
        """Read a big-endian 16-bit word."""
        high = self.read_u8(addr)
        low = self.read_u8((addr + 1) & 0xFFFFFFFF)
        return (high << 8) | low

    def write_u16(self, addr: int, value: int) -> None:
        """Write a big-endian 16-bit word."""
        self.write_u8(addr, (value >> 8) & 0xFF)
        self.write_u8((addr + 1) & 0xFFFFFFFF, value & 0xFF)

    def read_u32(self, addr: int) -> int:
        """Read a big-endian 32-bit long word."""
        high = self.read_u16(addr)
        low = self.read_u16((addr + 2) & 0xFFFFFFFF)
        return (high << 16) | low

    def write_u32(self, addr: int, value: int) -> None:
        """Write a big-endian 32-bit long word."""
        self.write_u16(addr, (value >> 16) & 0xFFFF)
        self.write_u16((addr + 2) & 0xFFFFFFFF, value & 0xFFFF)