"""Core data types for collisionrects - framework-agnostic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

import numpy as np


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in mask-grid coordinates.

    Attributes:
        x: Left column of the rectangle
        y: Top row of the rectangle
        w: Width in cells
        h: Height in cells
    """

    x: int
    y: int
    w: int
    h: int

    @property
    def area(self) -> int:
        return self.w * self.h

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield every (x, y) cell covered by this rectangle, row-major."""
        for cy in range(self.y, self.y + self.h):
            for cx in range(self.x, self.x + self.w):
                yield cx, cy

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)


class OccupancyMask:
    """Binary occupancy grid of solid / empty cells.

    Cells are stored flat and row-major in a numpy bool array, indexed as
    ``y * width + x``. Coordinates outside ``[0, width) x [0, height)`` are
    never solid.

    Attributes:
        width: Number of columns
        height: Number of rows
        cells: Flat bool array of length ``width * height``
    """

    def __init__(self, width: int, height: int, cells: np.ndarray | None = None):
        if width < 0 or height < 0:
            raise ValueError(f"Mask dimensions must be non-negative, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        if cells is None:
            self.cells = np.zeros(self.width * self.height, dtype=bool)
        else:
            flat = np.asarray(cells, dtype=bool).ravel()
            if flat.size != self.width * self.height:
                raise ValueError(
                    f"Mask cell count {flat.size} does not match {self.width}x{self.height}"
                )
            self.cells = flat.copy()

    @classmethod
    def from_array(cls, array) -> OccupancyMask:
        """Build a mask from a 2-D (height, width) array; truthy cells are solid."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {arr.shape}")
        height, width = arr.shape
        return cls(width, height, arr.astype(bool))

    @classmethod
    def from_predicate(
        cls,
        width: int,
        height: int,
        is_solid: Callable[[int, int], bool],
    ) -> OccupancyMask:
        """Build a mask by sampling ``is_solid(x, y)`` once per cell."""
        mask = cls(width, height)
        for y in range(mask.height):
            row = y * mask.width
            for x in range(mask.width):
                mask.cells[row + x] = bool(is_solid(x, y))
        return mask

    def is_solid(self, x: int, y: int) -> bool:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return False
        return bool(self.cells[y * self.width + x])

    @property
    def is_empty(self) -> bool:
        """True when the grid has no cells at all."""
        return self.width == 0 or self.height == 0

    @property
    def solid_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def to_array(self) -> np.ndarray:
        """Return a (height, width) bool copy of the grid."""
        return self.cells.reshape(self.height, self.width).copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, OccupancyMask):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.cells, other.cells)
        )

    def __repr__(self) -> str:
        return f"OccupancyMask({self.width}x{self.height}, solid={self.solid_count})"
