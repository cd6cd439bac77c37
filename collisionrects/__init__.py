"""Greedy rectangle decomposition of image alpha masks.

Example:
    from collisionrects import load_mask, decompose

    mask = load_mask("sprite.png", resolution=16)
    rects = decompose(mask)
"""

from .types import Rect, OccupancyMask
from .decompose import decompose, coverage, verify_cover
from .mask_utils import load_mask, sample_mask
from .errors import (
    CollisionRectsError,
    ImageLoadError,
    ConfigError,
    CoverError,
    RectsLoadError,
)

__version__ = "0.1.0"

__all__ = [
    'Rect',
    'OccupancyMask',
    'decompose',
    'coverage',
    'verify_cover',
    'load_mask',
    'sample_mask',
    # Errors
    'CollisionRectsError',
    'ImageLoadError',
    'ConfigError',
    'CoverError',
    'RectsLoadError',
]
