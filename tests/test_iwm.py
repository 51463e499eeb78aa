import pytest

from mac128k.iwm import Iwm


def reg_addr(reg, extra=0):
    return (reg << 9) | extra


def test_register_8_reads_ff():
    assert Iwm().read(reg_addr(8)) == 0xFF


def test_register_14_reads_1f():
    assert Iwm().read(reg_addr(14)) == 0x1F


def test_unwritten_register_reads_zero():
    assert Iwm().read(reg_addr(3)) == 0


@pytest.mark.parametrize("reg", [0, 1, 5, 7, 9, 15])
def test_write_read_round_trip(reg):
    iwm = Iwm()
    iwm.write(reg_addr(reg), 0x5A)
    assert iwm.read(reg_addr(reg)) == 0x5A


def test_fixed_registers_ignore_writes():
    iwm = Iwm()
    iwm.write(reg_addr(8), 0x12)
    iwm.write(reg_addr(14), 0x34)
    assert iwm.read(reg_addr(8)) == 0xFF
    assert iwm.read(reg_addr(14)) == 0x1F


def test_address_bits_outside_register_field_are_ignored():
    iwm = Iwm()
    iwm.write(reg_addr(3, 0x1FF), 0x77)
    assert iwm.read(reg_addr(3) | 0xDF0000) == 0x77


def test_registers_are_independent():
    iwm = Iwm()
    iwm.write(reg_addr(2), 0x11)
    iwm.write(reg_addr(4), 0x22)
    assert iwm.read(reg_addr(2)) == 0x11
    assert iwm.read(reg_addr(4)) == 0x22