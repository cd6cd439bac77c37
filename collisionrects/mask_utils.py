"""Image sampling: turn a source image into a downsampled occupancy mask."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from collisionrects import defaults
from collisionrects.errors import ImageLoadError
from collisionrects.types import OccupancyMask

logger = logging.getLogger(__name__)


def load_rgba(path) -> Image.Image:
    """Load an image file as RGBA.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ImageLoadError: If Pillow cannot decode the file or it exceeds
            Pillow's decompression bomb limit
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")
    try:
        with Image.open(path) as img:
            rgba = img.convert('RGBA')
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageLoadError(f"Cannot decode image {path}: {e}") from e
    logger.debug("Loaded %s (%dx%d)", path, rgba.width, rgba.height)
    return rgba


def mask_size(width: int, height: int, resolution: int) -> tuple[int, int]:
    """Downsample target for an image of the given size.

    The longer side becomes ``resolution``; the shorter side keeps the aspect
    ratio, truncated toward zero.
    """
    if width <= 0 or height <= 0:
        return (0, 0)
    if width > height:
        return (resolution, int(resolution * (height / width)))
    if height > width:
        return (int(resolution * (width / height)), resolution)
    return (resolution, resolution)


def downsample(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Nearest-neighbour resize, so every cell keeps one source pixel's alpha."""
    return image.resize(size, Image.Resampling.NEAREST)


def _check_threshold(threshold: int) -> int:
    if isinstance(threshold, bool) or not isinstance(threshold, (int, np.integer)):
        raise ValueError(f"Alpha threshold must be an integer, got {threshold!r}")
    if not 0 <= threshold <= defaults.MAX_ALPHA_THRESHOLD:
        raise ValueError(
            f"Alpha threshold must be in [0, {defaults.MAX_ALPHA_THRESHOLD}], got {threshold}"
        )
    return int(threshold)


def alpha_mask(image: Image.Image, threshold: int = defaults.DEFAULT_ALPHA_THRESHOLD) -> OccupancyMask:
    """Threshold an image's alpha channel: a cell is solid iff alpha > threshold."""
    threshold = _check_threshold(threshold)
    if image.width == 0 or image.height == 0:
        return OccupancyMask(image.width, image.height)
    alpha = np.asarray(image.convert('RGBA'))[..., 3]
    return OccupancyMask.from_array(alpha > threshold)


def sample_mask(
    image: Image.Image,
    resolution: int = defaults.DEFAULT_RESOLUTION,
    threshold: int = defaults.DEFAULT_ALPHA_THRESHOLD,
) -> OccupancyMask:
    """Downsample ``image`` to ``resolution`` and threshold its alpha.

    Args:
        image: Source image (any mode; converted to RGBA)
        resolution: Length of the longer mask side in cells
        threshold: Alpha cutoff in [0, 255]

    Returns:
        Fully built occupancy mask
    """
    if resolution < 1:
        raise ValueError(f"Resolution must be at least 1, got {resolution}")
    size = mask_size(image.width, image.height, resolution)
    if size[0] == 0 or size[1] == 0:
        _check_threshold(threshold)
        return OccupancyMask(*size)
    return alpha_mask(downsample(image, size), threshold)


def load_mask(
    path,
    resolution: int = defaults.DEFAULT_RESOLUTION,
    threshold: int = defaults.DEFAULT_ALPHA_THRESHOLD,
) -> OccupancyMask:
    """Load an image file and sample it into an occupancy mask."""
    return sample_mask(load_rgba(path), resolution, threshold)


def save_mask(mask: OccupancyMask, path) -> None:
    """Save mask as PNG with alpha channel (255 = solid)."""
    rgba = np.zeros((mask.height, mask.width, 4), dtype=np.uint8)
    rgba[..., 3] = mask.to_array().astype(np.uint8) * 255
    Image.fromarray(rgba).save(path)
