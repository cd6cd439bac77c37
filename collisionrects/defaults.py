"""Central place for collisionrects default settings."""

# Window / layout
DEFAULT_WINDOW_SIZE: tuple[int, int] = (480, 360)
DEFAULT_PADDING: int = 16
WINDOW_TITLE: str = "Collision Rects"

# Image sampling
DEFAULT_ALPHA_THRESHOLD: int = 0  # Any pixel that is not fully transparent is solid
MAX_ALPHA_THRESHOLD: int = 255
DEFAULT_RESOLUTION: int = 16  # Longer side of the downsampled mask, in cells
MIN_RESOLUTION: int = 1
MAX_RESOLUTION: int = 256
RESOLUTION_STEP: int = 1

# Overlay colours (RGBA)
OVERLAY_COLOR: tuple[int, int, int] = (255, 0, 0)
OVERLAY_FILL_ALPHA: int = 64
OVERLAY_FILL_ALPHA_OVERLAPPED: int = 128
OVERLAY_OUTLINE_ALPHA: int = 255

# Theme
LIGHT_BACKGROUND: int = 0xFF
DARK_BACKGROUND: int = 0x00

# Export
RECTS_SCHEMA_VERSION = "1.0"
