"""Tests for the pygame viewer that don't need a real display."""

import pygame
import pytest

from collisionrects.app import actions
from collisionrects.app.core import AppState
from collisionrects.config import ViewerConfig
from collisionrects.ui.viewer import SurfaceCache, draw_frame, handle_drop, handle_key


@pytest.fixture
def state(half_opaque_png):
    s = AppState(config=ViewerConfig(window_size=(800, 360)))
    actions.load_image(s, half_opaque_png)
    return s


class TestHandleKey:

    def test_escape_quits(self):
        assert handle_key(AppState(), pygame.K_ESCAPE) is False

    def test_space_toggles_theme(self):
        s = AppState()
        assert handle_key(s, pygame.K_SPACE)
        assert s.config.dark

    def test_o_toggles_overlap(self):
        s = AppState()
        handle_key(s, pygame.K_o)
        assert s.config.overlap

    def test_resolution_keys(self, state):
        handle_key(state, pygame.K_UP)
        assert state.config.resolution == 17
        handle_key(state, pygame.K_DOWN)
        handle_key(state, pygame.K_MINUS)
        assert state.config.resolution == 15
        assert state.mask.width == 15


def test_failed_drop_sets_status(state, tmp_path):
    rects = state.rects
    handle_drop(state, str(tmp_path / "missing.png"))
    assert state.status.startswith("Could not load")
    assert state.rects == rects


def test_draw_side_by_side(state):
    screen = pygame.Surface((800, 360))
    draw_frame(screen, state, SurfaceCache())

    # Source image: opaque blue left half inside the padded box
    assert tuple(screen.get_at((40, 100)))[:3] == (0, 0, 255)
    # Rect outline: overlay box starts at x = 800 - 328 - 16
    assert tuple(screen.get_at((456, 16)))[:3] == (255, 0, 0)
    # Translucent fill over the white background
    r, g, b = tuple(screen.get_at((500, 100)))[:3]
    assert r == 255 and g < 255 and g == b
    # Outside the rect: background
    assert tuple(screen.get_at((700, 100)))[:3] == (255, 255, 255)


def test_draw_dark_theme_without_image():
    s = AppState(config=ViewerConfig(dark=True))
    screen = pygame.Surface((100, 100))
    draw_frame(screen, s, SurfaceCache())
    assert tuple(screen.get_at((50, 50)))[:3] == (0, 0, 0)


def test_surface_cache_reuses_scaled_surface(state):
    cache = SurfaceCache()
    first = cache.get(state.image, (50, 50))
    assert cache.get(state.image, (50, 50)) is first
    assert cache.get(state.image, (60, 60)).get_size() == (60, 60)
    assert cache.get(state.image, (0, 10)) is None


def test_oversized_drop_sets_status(huge_header_png):
    s = AppState()
    handle_drop(s, str(huge_header_png))
    assert s.status.startswith("Could not load")
    assert not s.loaded
