"""Minimal 6522 VIA emulation: ports A/B, shift register and interrupts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

VIA_RB = 0
VIA_RA = 1
VIA_DDRB = 2
VIA_DDRA = 3
VIA_SR = 10
VIA_ACR = 11
VIA_IFR = 13
VIA_IER = 14
VIA_RA_ALT = 15

VIA_IRQ_CA = 0x01
VIA_IRQ_CB = 0x02
VIA_IRQ_SR = 0x04


@dataclass
class ViaCallbacks:
    """Hooks through which the VIA talks to the rest of the machine."""

    ra_change: Optional[Callable[[int], None]] = None
    rb_change: Optional[Callable[[int], None]] = None
    ra_in: Optional[Callable[[], int]] = None
    rb_in: Optional[Callable[[], int]] = None
    sr_tx: Optional[Callable[[int], None]] = None
    irq_set: Optional[Callable[[bool], None]] = None


class Via:
    """A 6522 VIA with just enough behaviour for the Macintosh."""

    def __init__(self, callbacks: Optional[ViaCallbacks] = None) -> None:
        self.callbacks = callbacks if callbacks is not None else ViaCallbacks()
        self._regs = bytearray(16)
        self._regs[VIA_RA] = 0x10  # overlay bit
        self._irq_active = 0
        self._irq_enable = 0
        self._irq_status = False
        self._sr_tx_pending: Optional[int] = None
        self.time_us = 0

    def _update_rega(self, data: int) -> None:
        if self._regs[VIA_RA] != data and self.callbacks.ra_change is not None:
            self.callbacks.ra_change(data)

    def _update_regb(self, data: int) -> None:
        if self._regs[VIA_RB] != data and self.callbacks.rb_change is not None:
            self.callbacks.rb_change(data)

    def _update_sr(self, data: int) -> None:
        mode = self._regs[VIA_ACR] & 0x1C
        if mode == 0x1C:
            self._sr_tx_pending = data
            self._irq_active |= VIA_IRQ_SR
        elif mode == 0x18:
            self._regs[VIA_SR] = 0

    def _sr_done(self) -> None:
        data, self._sr_tx_pending = self._sr_tx_pending, None
        if data is not None and self.callbacks.sr_tx is not None:
            self.callbacks.sr_tx(data)

    def _assess_irq(self) -> None:
        irq = (self._irq_enable & self._irq_active & 0x7F) != 0
        if irq != self._irq_status:
            if self.callbacks.irq_set is not None:
                self.callbacks.irq_set(irq)
            self._irq_status = irq

    def write(self, addr: int, data: int) -> None:
        """Write ``data`` to the register selected by address bits 9-12."""
        data &= 0xFF
        reg = (addr >> 9) & 0xF
        store = True
        if reg in (VIA_RA, VIA_RA_ALT):
            self._update_rega(data)
            reg = VIA_RA
        elif reg == VIA_RB:
            self._update_regb(data)
        elif reg == VIA_SR:
            self._update_sr(data)
            store = False
        elif reg == VIA_IER:
            if data & 0x80:
                self._irq_enable |= data & 0x7F
            else:
                self._irq_enable &= ~(data & 0x7F) & 0xFF
        elif reg == VIA_IFR:
            acked = self._irq_active & data
            self._irq_active &= ~data & 0xFF
            if acked & VIA_IRQ_SR:
                self._sr_done()
        if store:
            self._regs[reg] = data
        self._assess_irq()

    def _read_ifr(self) -> int:
        active = self._irq_enable & self._irq_active & 0x7F
        return self._irq_active | (0x80 if active else 0)

    def _read_reg(self, reg: int) -> int:
        if reg in (VIA_RA, VIA_RA_ALT):
            pins = self.callbacks.ra_in() if self.callbacks.ra_in else 0
            ddr = self._regs[VIA_DDRA]
            return ((ddr & self._regs[VIA_RA]) | (~ddr & pins)) & 0xFF
        if reg == VIA_RB:
            pins = self.callbacks.rb_in() if self.callbacks.rb_in else 0
            ddr = self._regs[VIA_DDRB]
            return ((ddr & self._regs[VIA_RB]) | (~ddr & pins)) & 0xFF
        if reg == VIA_IER:
            return 0x80 | self._irq_enable
        if reg == VIA_IFR:
            return self._read_ifr()
        return self._regs[reg]

    def read(self, addr: int) -> int:
        """Read the register selected by address bits 9-12."""
        value = self._read_reg((addr >> 9) & 0xF)
        self._assess_irq()
        return value

    def tick(self, time_us: int) -> None:
        """Record the current time; timers are not modelled."""
        self.time_us = time_us

    def ca_event(self, ca: int) -> None:
        """Signal an edge on CA1 (``ca == 1``) or CB (``ca == 2``)."""
        if ca == 1:
            self._irq_active |= VIA_IRQ_CA
        elif ca == 2:
            self._irq_active |= VIA_IRQ_CB
        self._assess_irq()

    def sr_rx(self, val: int) -> None:
        """Receive a byte into the shift register when in shift-in mode."""
        if (self._regs[VIA_ACR] & 0x1C) == 0x0C:
            self._regs[VIA_SR] = val & 0xFF
            self._irq_active |= VIA_IRQ_SR
            self._assess_irq()