"""Exceptions raised by collisionrects."""


class CollisionRectsError(Exception):
    """Base class for collisionrects errors."""
    pass


class ImageLoadError(CollisionRectsError):
    """Source image exists but could not be decoded."""
    pass


class ConfigError(CollisionRectsError):
    """Invalid viewer or sampler configuration."""
    pass


class CoverError(CollisionRectsError):
    """A rectangle list is not an exact, non-overlapping cover of a mask."""
    pass


class RectsLoadError(CollisionRectsError):
    """Error loading an exported rectangle file."""
    pass
