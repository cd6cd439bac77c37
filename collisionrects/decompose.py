"""Greedy decomposition of an occupancy mask into non-overlapping rectangles.

Each pass scans the whole grid row-major and, for every free solid cell,
grows the widest run to the right and then extends it downward while the
full width stays free. The largest such rectangle found in the pass is
emitted and its cells marked visited; passes repeat until nothing is left.

This is a greedy approximation, not a minimum rectangle cover. The output is
exact (union equals the solid cells), non-overlapping and deterministic.
Worst case is O((W*H)^2), which is fine for thumbnail-sized masks.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np

from collisionrects.errors import CoverError
from collisionrects.types import OccupancyMask, Rect

logger = logging.getLogger(__name__)


def _grow(free: np.ndarray, width: int, height: int, x: int, y: int) -> tuple[int, int]:
    """Measure the rectangle anchored at (x, y): width first, then height.

    Width is fixed once measured; height stops at the first row that cannot
    support the full width.
    """
    row = y * width
    w = 1
    while x + w < width and free[row + x + w]:
        w += 1

    h = 1
    while y + h < height:
        start = (y + h) * width + x
        if not free[start:start + w].all():
            break
        h += 1
    return w, h


def decompose(mask: Optional[OccupancyMask]) -> list[Rect]:
    """Cover the solid cells of ``mask`` with non-overlapping rectangles.

    Args:
        mask: Occupancy mask to decompose. ``None`` or a zero-sized mask is
            treated as empty.

    Returns:
        Rectangles in emission order: largest area first, ties resolved by
        the topmost, then leftmost anchor.
    """
    if mask is None or mask.is_empty:
        return []

    width, height = mask.width, mask.height
    solid = mask.cells
    visited = np.zeros(width * height, dtype=bool)
    rects: list[Rect] = []

    while True:
        # Visited only changes between passes, so free cells are fixed per scan
        free = solid & ~visited
        best: Rect | None = None
        best_area = 0

        for y in range(height):
            row = y * width
            for x in range(width):
                if not free[row + x]:
                    continue
                w, h = _grow(free, width, height, x, y)
                if w * h > best_area:
                    best = Rect(x, y, w, h)
                    best_area = w * h

        if best is None:
            break

        rects.append(best)
        visited.reshape(height, width)[best.y:best.y + best.h, best.x:best.x + best.w] = True

    logger.debug(
        "Decomposed %dx%d mask (%d solid cells) into %d rects",
        width, height, int(np.count_nonzero(solid)), len(rects),
    )
    return rects


def coverage(rects: Iterable[Rect], width: int, height: int) -> np.ndarray:
    """Count how many rectangles cover each cell.

    Cells of a rectangle falling outside the grid are ignored.

    Returns:
        (height, width) int32 array of per-cell cover counts
    """
    counts = np.zeros((height, width), dtype=np.int32)
    for r in rects:
        x0, y0 = max(r.x, 0), max(r.y, 0)
        x1, y1 = min(r.x + r.w, width), min(r.y + r.h, height)
        if x1 > x0 and y1 > y0:
            counts[y0:y1, x0:x1] += 1
    return counts


def verify_cover(mask: OccupancyMask, rects: Iterable[Rect]) -> None:
    """Check that ``rects`` exactly covers the solid cells of ``mask``.

    Raises:
        CoverError: If a rectangle is degenerate or out of bounds, covers an
            empty cell, overlaps another rectangle, or a solid cell is left
            uncovered.
    """
    rects = list(rects)
    for r in rects:
        if r.w < 1 or r.h < 1:
            raise CoverError(f"Degenerate rectangle {r}")
        if r.x < 0 or r.y < 0 or r.x + r.w > mask.width or r.y + r.h > mask.height:
            raise CoverError(f"Rectangle {r} outside {mask.width}x{mask.height} mask")

    counts = coverage(rects, mask.width, mask.height)
    solid = mask.to_array()

    if (counts > 1).any():
        y, x = np.argwhere(counts > 1)[0]
        raise CoverError(f"Rectangles overlap at cell ({x}, {y})")
    if (counts[~solid] > 0).any():
        y, x = np.argwhere((counts > 0) & ~solid)[0]
        raise CoverError(f"Empty cell ({x}, {y}) is covered")
    if (counts[solid] == 0).any():
        y, x = np.argwhere((counts == 0) & solid)[0]
        raise CoverError(f"Solid cell ({x}, {y}) is not covered")
