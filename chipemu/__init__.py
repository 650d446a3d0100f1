"""CHIP-8 building blocks: registers, frame buffer and pygame window, scancodes, bit helpers."""

__version__ = "0.1.0"