"""Minimal pygame viewer: source image beside (or under) its collision rects.

Keys:
    Space       toggle light / dark background
    O           toggle drawing rects over the image
    Up / +      raise mask resolution
    Down / -    lower mask resolution
    Esc         quit

Dropping an image file on the window loads it.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame
from PIL import Image

from collisionrects import defaults
from collisionrects.app import actions
from collisionrects.app.core import AppState
from collisionrects.errors import ImageLoadError
from collisionrects.layout import overlay_dest, scale_rects, source_dest

logger = logging.getLogger(__name__)

STATUS_FONT_SIZE = 14

RESOLUTION_UP_KEYS = (pygame.K_UP, pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS)
RESOLUTION_DOWN_KEYS = (pygame.K_DOWN, pygame.K_MINUS, pygame.K_KP_MINUS)


def image_to_surface(img: Image.Image) -> pygame.Surface:
    """Convert a PIL image to a pygame surface with per-pixel alpha."""
    rgba = img.convert('RGBA')
    return pygame.image.frombytes(rgba.tobytes(), rgba.size, 'RGBA')


class SurfaceCache:
    """Scaled copy of the current source image, rebuilt when image or size changes."""

    def __init__(self):
        self._image: Optional[Image.Image] = None
        self._base: Optional[pygame.Surface] = None
        self._scaled: Optional[pygame.Surface] = None
        self._size: tuple[int, int] = (0, 0)

    def get(self, img: Image.Image, size: tuple[int, int]) -> Optional[pygame.Surface]:
        if size[0] <= 0 or size[1] <= 0:
            return None
        if img is not self._image:
            self._image = img
            self._base = image_to_surface(img)
            self._scaled = None
        if self._scaled is None or size != self._size:
            self._scaled = pygame.transform.smoothscale(self._base, size)
            self._size = size
        return self._scaled


def handle_key(state: AppState, key: int) -> bool:
    """Apply a key press to the state. Returns False when the viewer should quit."""
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_SPACE:
        actions.toggle_theme(state)
    elif key == pygame.K_o:
        actions.toggle_overlap(state)
    elif key in RESOLUTION_UP_KEYS:
        actions.step_resolution(state, defaults.RESOLUTION_STEP)
    elif key in RESOLUTION_DOWN_KEYS:
        actions.step_resolution(state, -defaults.RESOLUTION_STEP)
    return True


def handle_drop(state: AppState, path: str) -> None:
    """Load a dropped file; failures are reported in the status line."""
    try:
        actions.load_image(state, path)
    except (FileNotFoundError, ImageLoadError) as e:
        logger.warning("Could not load %s: %s", path, e)
        state.status = f"Could not load {path}"


def handle_events(state: AppState) -> bool:
    running = True
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            running = handle_key(state, event.key) and running
        elif event.type == pygame.VIDEORESIZE:
            actions.resize_window(state, event.w, event.h)
        elif event.type == pygame.DROPFILE:
            handle_drop(state, event.file)
    return running


def draw_frame(
    screen: pygame.Surface,
    state: AppState,
    cache: SurfaceCache,
    font: Optional[pygame.font.Font] = None,
) -> None:
    """Draw one frame of the viewer onto ``screen``."""
    config = state.config
    bg = config.background
    screen.fill((bg, bg, bg))

    window_w, window_h = screen.get_size()
    if state.image is not None:
        src = source_dest(window_h, state.image.width, state.image.height, config.padding)
        scaled = cache.get(state.image, (round(src.w), round(src.h)))
        if scaled is not None:
            screen.blit(scaled, (round(src.x), round(src.y)))

        dest = overlay_dest(src, window_w, config.padding, config.overlap)
        fill_alpha = defaults.OVERLAY_FILL_ALPHA_OVERLAPPED if config.overlap else defaults.OVERLAY_FILL_ALPHA
        overlay = pygame.Surface((window_w, window_h), pygame.SRCALPHA)
        for r in scale_rects(state.rects, state.mask.width, state.mask.height, dest):
            rect = pygame.Rect(round(r.x), round(r.y), max(round(r.w), 1), max(round(r.h), 1))
            pygame.draw.rect(overlay, (*defaults.OVERLAY_COLOR, fill_alpha), rect)
            pygame.draw.rect(overlay, (*defaults.OVERLAY_COLOR, defaults.OVERLAY_OUTLINE_ALPHA), rect, 1)
        screen.blit(overlay, (0, 0))

    if font is not None:
        fg = 255 - bg
        text = state.status or "Drop an image on the window"
        line = f"res {config.resolution} | {text}"
        label = font.render(line, True, (fg, fg, fg))
        screen.blit(label, (config.padding, window_h - label.get_height() - 2))


def run(state: AppState) -> None:
    """Open the window and run the event loop until the user quits."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(state.config.window_size, pygame.RESIZABLE)
        pygame.display.set_caption(defaults.WINDOW_TITLE)
        font = pygame.font.SysFont(None, STATUS_FONT_SIZE)
        clock = pygame.time.Clock()
        cache = SurfaceCache()

        running = True
        while running:
            running = handle_events(state)
            if not running:
                break
            screen = pygame.display.get_surface()
            draw_frame(screen, state, cache, font)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
