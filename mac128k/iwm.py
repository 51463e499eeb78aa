"""Minimal IWM (Integrated Woz Machine) floppy controller register model."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_REGISTER_COUNT = 16


def _register_index(addr: int) -> int:
    return (addr >> 9) & 0xF


class Iwm:
    """IWM register file: latches writes, returns fixed values for some reads."""

    def __init__(self) -> None:
        self._regs = bytearray(_REGISTER_COUNT)

    def write(self, addr: int, val: int) -> None:
        """Store ``val`` in the register selected by ``addr``."""
        reg = _register_index(addr)
        val &= 0xFF
        logger.info("[IWM: WR %02x -> %d]", val, reg)
        logger.warning("[IWM: unhandled WR %02x to reg %d]", val, reg)
        self._regs[reg] = val

    def read(self, addr: int) -> int:
        """Return the value of the register selected by ``addr``."""
        reg = _register_index(addr)
        if reg == 8:
            data = 0xFF
        elif reg == 14:
            data = 0x1F
        else:
            data = self._regs[reg]
            logger.warning("[IWM: unhandled RD of reg %d]", reg)
        logger.info("[IWM: RD %d <- %02x]", reg, data)
        return data