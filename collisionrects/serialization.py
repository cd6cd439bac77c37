"""Export decomposed rectangles as JSON collision data."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from collisionrects import defaults
from collisionrects.app.core import CollisionResult
from collisionrects.errors import RectsLoadError
from collisionrects.types import Rect


def rects_to_dict(
    result: CollisionResult,
    source: Optional[str] = None,
    resolution: Optional[int] = None,
    alpha_threshold: Optional[int] = None,
) -> dict[str, Any]:
    """Convert a decomposition to a JSON-serializable dict.

    Format:
        {
          "schema_version": "1.0",
          "created_at": "...",
          "source": "sprite.png",
          "resolution": 16,
          "alpha_threshold": 0,
          "mask": {"width": 16, "height": 12},
          "rects": [[x, y, w, h], ...]
        }
    """
    return {
        'schema_version': defaults.RECTS_SCHEMA_VERSION,
        'created_at': datetime.now().isoformat(),
        'source': source,
        'resolution': resolution,
        'alpha_threshold': alpha_threshold,
        'mask': {'width': result.mask.width, 'height': result.mask.height},
        'rects': [list(r.as_tuple()) for r in result.rects],
    }


def save_rects(filepath, result: CollisionResult, **meta) -> Path:
    """Write a decomposition to ``filepath`` as JSON.

    Args:
        filepath: Output path (should end with .json)
        result: Mask and rects to export
        **meta: ``source``, ``resolution`` and ``alpha_threshold`` recorded as-is

    Returns:
        The path written
    """
    filepath = Path(filepath)
    filepath.write_text(json.dumps(rects_to_dict(result, **meta), indent=2))
    return filepath


def _parse_rect(entry: Any, index: int) -> Rect:
    if not isinstance(entry, list) or len(entry) != 4 or not all(
        isinstance(v, int) and not isinstance(v, bool) for v in entry
    ):
        raise RectsLoadError(f"Rect {index} must be [x, y, w, h] integers, got {entry!r}")
    x, y, w, h = entry
    if x < 0 or y < 0 or w < 1 or h < 1:
        raise RectsLoadError(f"Rect {index} has invalid geometry {entry!r}")
    return Rect(x, y, w, h)


def load_rects(filepath) -> tuple[tuple[int, int], list[Rect]]:
    """Load rectangles previously written by ``save_rects``.

    Returns:
        ((mask_width, mask_height), rects)

    Raises:
        FileNotFoundError: If file doesn't exist
        RectsLoadError: If file is corrupt, wrong version, or malformed
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Rects file not found: {filepath}")

    try:
        data = json.loads(filepath.read_text())
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RectsLoadError(f"Corrupt rects file {filepath}: {e}")

    if not isinstance(data, dict):
        raise RectsLoadError(f"Expected a JSON object in {filepath}")

    schema_version = data.get('schema_version')
    if schema_version != defaults.RECTS_SCHEMA_VERSION:
        raise RectsLoadError(
            f"Schema version {schema_version} not supported. "
            f"Expected {defaults.RECTS_SCHEMA_VERSION}."
        )

    try:
        size = (int(data['mask']['width']), int(data['mask']['height']))
        entries = data['rects']
    except (KeyError, TypeError, ValueError) as e:
        raise RectsLoadError(f"Missing mask size or rects in {filepath}: {e}")
    if not isinstance(entries, list):
        raise RectsLoadError(f"'rects' must be a list in {filepath}")

    rects = [_parse_rect(entry, i) for i, entry in enumerate(entries)]
    for r in rects:
        if r.x + r.w > size[0] or r.y + r.h > size[1]:
            raise RectsLoadError(f"Rect {r.as_tuple()} outside {size[0]}x{size[1]} mask")
    return size, rects
