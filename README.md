# mac128k

The parts of a Macintosh 128K emulator that sit around the processor: the
memory map, two of the machine's peripheral chips and the 512×342
monochrome display. Anything that can call the memory bus for reads and
writes can drive it.

## What is in the package

| Module            | Contents                                                                 |
|-------------------|--------------------------------------------------------------------------|
| `mac128k.memory`  | `MemoryBus`, the address decoder for ROM, RAM, VIA and IWM; `RomSizeError` |
| `mac128k.via`     | `Via` and `ViaCallbacks`: the 6522 VIA, with ports A/B, shift register and interrupts |
| `mac128k.iwm`     | `Iwm`: a register-level stub of the floppy controller                     |
| `mac128k.video`   | `framebuffer_to_rgba`, `write_test_pattern` and the `MacVideo` window     |

## What it does not do

There is no 68000 processor in the package, and no command to start a
machine: nothing here executes ROM code. The SCC serial chip is not
modelled (accesses to its address ranges only trigger the pause hook and
then fall through to the normal memory map), the VIA has no timers, and the
IWM does not read disks.

## Memory map

`MemoryBus(via=None, pause=None)` decodes 24-bit addresses as follows:

* **ROM**: 64 KiB; `load_rom(path)` requires exactly 65,536 bytes and raises
  `RomSizeError` (a `ValueError`) for any other size. After loading, the ROM
  is visible at `0x000000` as well as at `0x400000`. `remap_rom()` removes
  the low mapping so RAM appears at `0x0`. Writes to ROM are ignored.
* **RAM**: everything else below `0x1000000`, held in `bus.ram`.
* **VIA**: addresses where `addr & 0xE80000 == 0xE80000` go to `bus.via`.
  With no VIA attached, reads return `0xFF` and writes are dropped.
* **IWM**: `0xDFE1FF` up to `0xDFE1FF + 0x2000` go to `bus.iwm`.
* Reads from unmapped addresses return `0xFF`.

Multi-byte accesses are big-endian, as on the 68000: `read_u16`/`read_u32`
and `write_u16`/`write_u32` are built from consecutive byte accesses, high
byte first.

```python
from mac128k.memory import MemoryBus

bus = MemoryBus()
bus.load_rom("mac128k.rom")   # 64 KiB ROM image
bus.remap_rom()               # RAM now visible at address 0

bus.write_u32(0x1000, 0xDEADBEEF)
assert bus.read_u16(0x1000) == 0xDEAD
assert bus.read_u8(0x1003) == 0xEF
```

### Pause hook

`pause` is called as `pause(label, addr)` on IWM accesses, on accesses in
the SCC ranges (`0x9xxxxx` and `0xBxxxxx`) and on attempted writes to ROM.
It returns `True` to carry on or `False` to ask for single-stepping, which
the bus records in `bus.single_step`. Without a hook these accesses simply
proceed.

## VIA

`Via(callbacks)` models ports A and B with their data-direction registers,
the shift register in its send and receive modes, and the interrupt enable
and flag registers. The register is chosen by bits 9–12 of the address;
register 15 is an alias of port A. Port A starts at `0x10` (the ROM overlay
bit).

Everything the chip drives outward is reported through the optional
callables in `ViaCallbacks`: `ra_change` and `rb_change` when a port output
changes, `ra_in` and `rb_in` to sample input pins, `sr_tx` when a shifted-out
byte is acknowledged, and `irq_set` when the interrupt line changes. Other
parts of the machine feed events in with `ca_event(1)` or `ca_event(2)` for
the CA/CB lines and `sr_rx(value)` for a byte arriving at the shift
register. `tick(time_us)` records the time but no timers run.

## IWM

`Iwm` keeps the sixteen register bytes it is written. Register 8 reads as
`0xFF` and register 14 as `0x1F`; every other register reads back what was
last stored.

## Display

The screen is 512×342 pixels, one bit per pixel, 64 bytes per line,
starting at RAM address `0x1A700`. A set bit is a black pixel.

* `framebuffer_to_rgba(ram)` turns that bitmap into RGBA bytes, four per
  pixel.
* `write_test_pattern(bus)` fills the screen memory with a checkerboard of
  squares 64 pixels wide and 8 lines high, useful for checking the display
  path before anything else draws.
* `MacVideo(bus)` opens a window with pygame. `update()` redraws it from
  `bus.ram`; `run(emulation_step)` calls `emulation_step()` and redraws, at
  up to 60 frames a second, until the window is closed or Escape is pressed;
  `close()` shuts pygame down.

## Tests

The test suite uses pytest and is installed with the `test` extra.