"""Screen-space geometry for drawing the source image and its rectangles.

Pure float math, no toolkit imports. Grid rectangles are mapped into a
destination box by scaling each axis by ``dest / mask`` size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from collisionrects.types import Rect


@dataclass(frozen=True)
class FRect:
    """Float rectangle in display coordinates."""
    x: float
    y: float
    w: float
    h: float


def source_dest(window_height: float, image_width: float, image_height: float, padding: float) -> FRect:
    """Box the source image is drawn into: padded, full height, aspect kept."""
    h = max(float(window_height) - 2 * padding, 0.0)
    if image_height <= 0:
        return FRect(float(padding), float(padding), 0.0, h)
    w = h * (image_width / image_height)
    return FRect(float(padding), float(padding), w, h)


def overlay_dest(source: FRect, window_width: float, padding: float, overlap: bool) -> FRect:
    """Box the rectangles are drawn into.

    Overlapped: exactly on top of the source image. Otherwise the same size,
    right-aligned in the window.
    """
    if overlap:
        return source
    return FRect(float(window_width) - source.w - padding, source.y, source.w, source.h)


def scale_rects(rects: Iterable[Rect], mask_width: int, mask_height: int, dest: FRect) -> list[FRect]:
    """Map grid rectangles into ``dest``."""
    if mask_width <= 0 or mask_height <= 0:
        return []
    sx = dest.w / mask_width
    sy = dest.h / mask_height
    return [
        FRect(dest.x + r.x * sx, dest.y + r.y * sy, r.w * sx, r.h * sy)
        for r in rects
    ]
