"""High-level mutations on AppState reused across UIs."""

from __future__ import annotations

import logging
from pathlib import Path

from collisionrects.app.core import AppState, CollisionResult, EMPTY_RESULT
from collisionrects.config import check_alpha_threshold, clamp_resolution
from collisionrects.decompose import decompose
from collisionrects.mask_utils import load_rgba, sample_mask
from collisionrects import defaults

logger = logging.getLogger(__name__)


def recompute(state: AppState) -> CollisionResult:
    """Resample the loaded image and decompose it.

    The new mask and rects are fully built before being published with a
    single assignment to ``state.result``.
    """
    if state.image is None:
        state.result = EMPTY_RESULT
        return state.result

    config = state.config
    mask = sample_mask(state.image, config.resolution, config.alpha_threshold)
    result = CollisionResult(mask=mask, rects=tuple(decompose(mask)))
    state.result = result
    state.status = f"{mask.width}x{mask.height} cells, {len(result.rects)} rects"
    logger.info(
        "Resolution %d: %dx%d mask, %d rects",
        config.resolution, mask.width, mask.height, len(result.rects),
    )
    return result


def load_image(state: AppState, path) -> None:
    """Load a new source image and recompute its rectangles.

    On failure the previously loaded image and rects are left untouched.
    """
    path = Path(path)
    image = load_rgba(path)
    previous = (state.image, state.source_path)
    state.image, state.source_path = image, path
    try:
        recompute(state)
    except Exception:
        state.image, state.source_path = previous
        raise
    logger.info("Loaded %s (%dx%d)", path, image.width, image.height)


def _update_config(state: AppState, **changes) -> None:
    """Apply config changes and recompute; on failure the old values are restored."""
    config = state.config
    previous = {name: getattr(config, name) for name in changes}
    for name, value in changes.items():
        setattr(config, name, value)
    try:
        recompute(state)
    except Exception:
        for name, value in previous.items():
            setattr(config, name, value)
        raise


def set_resolution(state: AppState, value: int) -> bool:
    """Set the mask resolution (clamped). Returns True if it changed."""
    config = state.config
    value = clamp_resolution(value, config.min_resolution, config.max_resolution)
    if value == config.resolution:
        return False
    _update_config(state, resolution=value)
    return True


def step_resolution(state: AppState, delta: int = defaults.RESOLUTION_STEP) -> bool:
    return set_resolution(state, state.config.resolution + delta)


def set_alpha_threshold(state: AppState, value: int) -> None:
    """Change which alpha values count as solid and recompute."""
    _update_config(state, alpha_threshold=check_alpha_threshold(value))


def toggle_overlap(state: AppState) -> None:
    state.config.overlap = not state.config.overlap


def toggle_theme(state: AppState) -> None:
    state.config.dark = not state.config.dark


def resize_window(state: AppState, width: int, height: int) -> None:
    state.config.window_size = (max(int(width), 1), max(int(height), 1))
