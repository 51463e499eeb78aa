import pytest

from mac128k.memory import (
    RAM_SIZE,
    ROM_BASE,
    ROM_SIZE,
    MemoryBus,
    RomSizeError,
)
from mac128k.via import VIA_DDRA, VIA_RA, Via


def rom_image():
    return bytes((i * 7 + 3) & 0xFF for i in range(ROM_SIZE))


@pytest.fixture
def rom_path(tmp_path):
    path = tmp_path / "mac.rom"
    path.write_bytes(rom_image())
    return path


@pytest.fixture
def pauses():
    return []


@pytest.fixture
def bus(pauses):
    def record(label, addr):
        pauses.append((label, addr))
        return True

    return MemoryBus(pause=record)


def test_rom_overlay_at_zero(bus, rom_path):
    bus.load_rom(rom_path)
    image = rom_image()
    assert bus.read_u8(0) == image[0]
    assert bus.read_u8(0x1234) == image[0x1234]


def test_rom_visible_at_rom_base(bus, rom_path):
    bus.load_rom(rom_path)
    image = rom_image()
    assert bus.read_u8(ROM_BASE + 0x42) == image[0x42]
    assert bus.read_u16(ROM_BASE) == (image[0] << 8) | image[1]


def test_wrong_rom_size_rejected(bus, tmp_path):
    path = tmp_path / "short.rom"
    path.write_bytes(b"\x00" * 100)
    with pytest.raises(RomSizeError):
        bus.load_rom(path)


def test_missing_rom_file_raises(bus, tmp_path):
    with pytest.raises(FileNotFoundError):
        bus.load_rom(tmp_path / "absent.rom")


def test_remap_exposes_ram_at_zero(bus, rom_path):
    bus.load_rom(rom_path)
    bus.remap_rom()
    bus.write_u8(5, 0xAB)
    assert bus.read_u8(5) == 0xAB


def test_write_to_rom_is_refused(bus, rom_path, pauses):
    bus.load_rom(rom_path)
    image = rom_image()
    bus.write_u8(0, image[0] ^ 0xFF)
    assert bus.read_u8(0) == image[0]
    bus.write_u8(ROM_BASE + 1, image[1] ^ 0xFF)
    assert bus.read_u8(ROM_BASE + 1) == image[1]
    assert [label for label, _ in pauses] == [
        "write_u8 attempt to write to ROM@0",
        "write_u8 attempt to write to ROM@400000",
    ]


def test_big_endian_u32_round_trip(bus):
    bus.write_u32(0x20000, 0x12345678)
    assert bus.read_u32(0x20000) == 0x12345678
    assert bus.read_u8(0x20000) == 0x12
    assert bus.read_u8(0x20003) == 0x78
    assert bus.read_u16(0x20002) == 0x5678


def test_u16_round_trip(bus):
    bus.write_u16(0x30000, 0xBEEF)
    assert bus.read_u16(0x30000) == 0xBEEF
    assert bus.read_u8(0x30000) == 0xBE


def test_unmapped_read_returns_ff(bus):
    assert bus.read_u8(RAM_SIZE) == 0xFF


def test_via_routing(pauses):
    bus = MemoryBus(via=Via())
    bus.write_u8(0xE80000 | (VIA_DDRA << 9), 0xFF)
    assert bus.read_u8(0xE80000 | (VIA_RA << 9)) == 0x10


def test_via_missing_reads_ff(bus):
    assert bus.read_u8(0xEFE1FE) == 0xFF


def test_iwm_read_routing(bus, pauses):
    addr = 0xDFE000 | (8 << 9)
    assert bus.read_u8(addr) == 0xFF
    assert pauses == [("IWM hardware read", addr)]


def test_iwm_write_read_round_trip(bus):
    addr = 0xDFE000 | (3 << 9)
    bus.write_u8(addr, 0x66)
    assert bus.read_u8(addr) == 0x66


def test_scc_access_pauses_and_falls_through(bus, pauses):
    bus.write_u8(0x900000, 0x21)
    assert bus.read_u8(0x900000) == 0x21
    assert [label for label, _ in pauses] == [
        "SCC_RD hardware write",
        "SCC_RD hardware read",
    ]


def test_pause_returning_false_enters_single_step():
    bus = MemoryBus(pause=lambda label, addr: False)
    bus.read_u8(0xB00000)
    assert bus.single_step is True


def test_no_pause_hook_keeps_running():
    bus = MemoryBus()
    bus.read_u8(0xB00000)
    assert bus.single_step is False