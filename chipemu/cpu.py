"""CHIP-8 register file."""

from __future__ import annotations

from dataclasses import dataclass, field

PROGRAM_START = 0x200
REGISTER_COUNT = 16
STACK_DEPTH = 32


@dataclass
class CPU:
    """Registers, stack and timers of the CHIP-8 processor."""

    v: list[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)
    i: int = 0
    pc: int = PROGRAM_START
    sp: int = 0
    stack: list[int] = field(default_factory=lambda: [0] * STACK_DEPTH)
    delay_timer: int = 0
    sound_timer: int = 0

    def reset(self) -> None:
        """Return every register to its power-on value."""
        self.pc = PROGRAM_START
        self.sp = 0
        self.i = 0
        self.v = [0] * REGISTER_COUNT
        self.stack = [0] * STACK_DEPTH
        self.delay_timer = 0
        self.sound_timer = 0