import pygame
import pytest

from chipemu.display import (
    DISPLAY_HEIGHT,
    DISPLAY_WIDTH,
    WINDOW_SCALE,
    Display,
    PygameRenderer,
)


class _RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, pixels):
        self.frames.append([list(row) for row in pixels])


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    pygame.display.quit()


def test_new_display_is_blank_with_expected_shape():
    display = Display()
    assert len(display.pixels) == DISPLAY_HEIGHT == 32
    assert all(len(row) == DISPLAY_WIDTH == 64 for row in display.pixels)
    assert not any(any(row) for row in display.pixels)


def test_clear_turns_pixels_off():
    display = Display()
    display.pixels[3][7] = True
    display.pixels[31][63] = True
    assert display.pixels[3][7] is True
    display.clear()
    assert display.pixels == [[False] * 64 for _ in range(32)]


def test_render_without_renderer_raises():
    with pytest.raises(RuntimeError):
        Display().render()


def test_render_passes_pixels_to_renderer():
    renderer = _RecordingRenderer()
    display = Display(renderer)
    display.pixels[2][5] = True
    display.render()
    assert len(renderer.frames) == 1
    assert renderer.frames[0] == display.pixels


def test_pygame_renderer_window_size(headless):
    renderer = PygameRenderer()
    assert renderer.surface.get_size() == (
        DISPLAY_WIDTH * WINDOW_SCALE,
        DISPLAY_HEIGHT * WINDOW_SCALE,
    )


def test_pygame_renderer_paints_lit_pixels_green(headless):
    renderer = PygameRenderer()
    display = Display(renderer)
    display.pixels[1][2] = True
    display.render()
    surface = renderer.surface
    lit = (2 * WINDOW_SCALE + 1, 1 * WINDOW_SCALE + 1)
    assert surface.get_at_mapped(lit) == surface.map_rgb((0, 255, 0))
    assert surface.get_at_mapped((0, 0)) == surface.map_rgb((0, 0, 0))