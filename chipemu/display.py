"""Monochrome 64x32 frame buffer and its on-screen window."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import pygame

DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32
WINDOW_SCALE = 10
WINDOW_TITLE = "CHIP-8 Emulator"

BACKGROUND_COLOR = (0, 0, 0)
PIXEL_COLOR = (0, 255, 0)


class _Renderer(Protocol):
    def draw(self, pixels: Sequence[Sequence[bool]]) -> None: ...


class Display:
    """The frame buffer, indexed as pixels[y][x]."""

    def __init__(self, renderer: _Renderer | None = None) -> None:
        self.pixels = [[False] * DISPLAY_WIDTH for _ in range(DISPLAY_HEIGHT)]
        self.renderer = renderer

    def clear(self) -> None:
        """Turn every pixel off."""
        for row in self.pixels:
            row[:] = [False] * DISPLAY_WIDTH

    def render(self) -> None:
        """Draw the frame buffer through the attached renderer."""
        if self.renderer is None:
            raise RuntimeError("display has no renderer")
        self.renderer.draw(self.pixels)


class PygameRenderer:
    """A scaled window that shows lit pixels in green on black."""

    def __init__(self, scale: int = WINDOW_SCALE, title: str = WINDOW_TITLE) -> None:
        pygame.display.init()
        self.scale = scale
        self.surface = pygame.display.set_mode(
            (DISPLAY_WIDTH * scale, DISPLAY_HEIGHT * scale)
        )
        pygame.display.set_caption(title)

    def draw(self, pixels: Sequence[Sequence[bool]]) -> None:
        """Paint *pixels* to the window and present it."""
        self.surface.fill(BACKGROUND_COLOR)
        for y, row in enumerate(pixels):
            for x, lit in enumerate(row):
                if lit:
                    rect = (x * self.scale, y * self.scale, self.scale, self.scale)
                    pygame.draw.rect(self.surface, PIXEL_COLOR, rect)
        pygame.display.flip()