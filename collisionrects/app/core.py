"""Toolkit-neutral application state for the collision viewer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from PIL import Image

from collisionrects.config import ViewerConfig
from collisionrects.types import OccupancyMask, Rect


@dataclass(frozen=True)
class CollisionResult:
    """A mask together with the rectangles decomposed from it.

    Published as one object so readers always see a matching pair.
    """
    mask: OccupancyMask
    rects: tuple[Rect, ...] = ()


EMPTY_RESULT = CollisionResult(mask=OccupancyMask(0, 0))


@dataclass
class AppState:
    """Everything the viewer needs between frames."""

    config: ViewerConfig = field(default_factory=ViewerConfig)
    image: Optional[Image.Image] = None
    source_path: Optional[Path] = None
    result: CollisionResult = EMPTY_RESULT
    status: str = ""

    @property
    def loaded(self) -> bool:
        return self.image is not None

    @property
    def mask(self) -> OccupancyMask:
        return self.result.mask

    @property
    def rects(self) -> tuple[Rect, ...]:
        return self.result.rects
