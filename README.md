# chipemu

Building blocks for a CHIP-8 machine: the processor's register file, the
64×32 monochrome frame buffer with a pygame window to show it, a table of
keyboard scancodes, and helpers that pack booleans into bytes and back.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `chipemu.cpu`

`CPU` is a dataclass holding the CHIP-8 registers:

- `v` – sixteen general-purpose registers, all `0` at start
- `i` – the index register
- `pc` – the program counter, starting at `0x200` (`PROGRAM_START`)
- `sp` – the stack pointer
- `stack` – 32 stack slots
- `delay_timer`, `sound_timer`

`CPU.reset()` puts every register back to its power-on value.

```python
from chipemu.cpu import CPU

cpu = CPU()
cpu.v[3] = 0x2A
cpu.pc = 0x300
cpu.reset()
assert cpu.pc == 0x200 and cpu.v[3] == 0
```

### `chipemu.display`

`Display` owns the frame buffer `pixels`, a list of `DISPLAY_HEIGHT` (32)
rows of `DISPLAY_WIDTH` (64) booleans, indexed as `pixels[y][x]`.

- `Display.clear()` turns every pixel off.
- `Display.render()` hands the frame buffer to the renderer given to the
  constructor; it raises `RuntimeError` if the display has no renderer.

A renderer is any object with a `draw(pixels)` method. `PygameRenderer`
opens a pygame window of the screen size times `scale` (10 by default),
titled `"CHIP-8 Emulator"` by default, and draws lit pixels in green on a
black background each time `draw` is called.

```python
from chipemu.display import Display, PygameRenderer

display = Display(PygameRenderer())
display.pixels[5][10] = True
display.render()
```

### `chipemu.scancodes`

`Scancode` is an `IntEnum` of physical key positions following the USB HID
keyboard and consumer usage pages (`Scancode.A == 4`,
`Scancode.KEY_1 == 30`, `Scancode.ESCAPE == 41`, …). Digit keys are named
`KEY_0` to `KEY_9`. `NUM_SCANCODES` (512) bounds the range.

### `chipemu.bits`

- `bool_array_to_byte(arr, offset, wrap, limit)` packs up to eight booleans
  from `arr`, starting at `offset`, into a byte with the first boolean as the
  least significant bit.
- `change_bits(arr, offset, b, wrap, limit)` writes the eight bits of `b`,
  least significant first, into `arr` starting at `offset`.

When a position reaches `limit`, both stop there, unless `wrap` is true, in
which case they carry on from the start of `arr`. A position outside `arr`
raises `IndexError`.

```python
from chipemu.bits import bool_array_to_byte, change_bits

row = [False] * 8
change_bits(row, 0, 0b0000_0101, False, 8)
assert row[:3] == [True, False, True]
assert bool_array_to_byte(row, 0, False, 8) == 5
```

## What this package does not do

It does not run CHIP-8 programs. There is no memory or font table, no
instruction decoder, no ROM loading, no keypad handling, no timer ticking or
sound, and no command to start a game. What it offers are the register file,
the frame buffer and its window, the scancode table and the bit helpers, for
use by code that supplies the rest.