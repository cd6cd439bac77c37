"""Test configuration for collisionrects."""

import os
import struct
import zlib

import numpy as np
import pytest
from PIL import Image

from collisionrects.types import OccupancyMask

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


def mask_from_rows(*rows: str) -> OccupancyMask:
    """Build a mask from strings like "110"; '1' or '#' is solid."""
    return OccupancyMask.from_array([[c in "1#" for c in row] for row in rows])


@pytest.fixture
def write_png(tmp_path):
    """Write an (H, W, 4) uint8 RGBA array to a PNG and return its path."""

    def _write(rgba: np.ndarray, name: str = "source.png"):
        path = tmp_path / name
        Image.fromarray(np.asarray(rgba, dtype=np.uint8)).save(path)
        return path

    return _write


@pytest.fixture
def half_opaque_png(write_png):
    """32x32 image: left half opaque blue, right half fully transparent."""
    rgba = np.zeros((32, 32, 4), dtype=np.uint8)
    rgba[:, :16] = (0, 0, 255, 255)
    return write_png(rgba)


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


@pytest.fixture
def huge_header_png(tmp_path):
    """PNG declaring 20000x20000 RGBA with no pixel data, over Pillow's bomb limit."""
    path = tmp_path / "huge.png"
    ihdr = struct.pack(">IIBBBBB", 20000, 20000, 8, 6, 0, 0, 0)
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", ihdr) + _png_chunk(b"IEND", b""))
    return path
