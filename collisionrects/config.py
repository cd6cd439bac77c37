"""Viewer / sampler configuration."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral

from collisionrects import defaults
from collisionrects.errors import ConfigError


def clamp_resolution(value: int, lo: int = defaults.MIN_RESOLUTION, hi: int = defaults.MAX_RESOLUTION) -> int:
    return max(lo, min(hi, int(value)))


def check_alpha_threshold(value) -> int:
    """Return ``value`` as an int, or raise ConfigError if it is not an integer in [0, 255]."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConfigError(f"alpha_threshold must be an integer, got {value!r}")
    if not 0 <= value <= defaults.MAX_ALPHA_THRESHOLD:
        raise ConfigError(
            f"alpha_threshold must be in [0, {defaults.MAX_ALPHA_THRESHOLD}], got {value}"
        )
    return int(value)


@dataclass
class ViewerConfig:
    """Settings for sampling and displaying one image.

    Attributes:
        window_size: (width, height) of the window in pixels
        padding: Margin around the drawn image in pixels
        alpha_threshold: Pixels with alpha above this are solid
        resolution: Longer side of the downsampled mask, clamped to [min, max]
        min_resolution: Lowest allowed resolution
        max_resolution: Highest allowed resolution
        overlap: Draw rectangles on top of the image instead of beside it
        dark: Dark background
    """

    window_size: tuple[int, int] = defaults.DEFAULT_WINDOW_SIZE
    padding: int = defaults.DEFAULT_PADDING
    alpha_threshold: int = defaults.DEFAULT_ALPHA_THRESHOLD
    resolution: int = defaults.DEFAULT_RESOLUTION
    min_resolution: int = defaults.MIN_RESOLUTION
    max_resolution: int = defaults.MAX_RESOLUTION
    overlap: bool = False
    dark: bool = False

    def __post_init__(self):
        self.alpha_threshold = check_alpha_threshold(self.alpha_threshold)
        if not 1 <= self.min_resolution <= self.max_resolution:
            raise ConfigError(
                f"Invalid resolution range [{self.min_resolution}, {self.max_resolution}]"
            )
        if self.padding < 0:
            raise ConfigError(f"padding must be non-negative, got {self.padding}")
        self.resolution = clamp_resolution(self.resolution, self.min_resolution, self.max_resolution)

    @property
    def background(self) -> int:
        """Grey level of the window background."""
        return defaults.DARK_BACKGROUND if self.dark else defaults.LIGHT_BACKGROUND
