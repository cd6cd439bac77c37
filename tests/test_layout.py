"""Tests for display-space layout of the image and its rectangles."""

import pytest

from collisionrects.layout import FRect, overlay_dest, scale_rects, source_dest
from collisionrects.types import Rect


def test_source_dest_keeps_aspect():
    src = source_dest(360, 100, 200, 16)
    assert src == FRect(16.0, 16.0, 164.0, 328.0)


def test_source_dest_tiny_window_clamps_to_zero():
    src = source_dest(20, 10, 10, 16)
    assert src.h == 0.0 and src.w == 0.0


def test_overlay_side_by_side_is_right_aligned():
    src = FRect(16.0, 16.0, 164.0, 328.0)
    dest = overlay_dest(src, 480, 16, overlap=False)
    assert dest == FRect(300.0, 16.0, 164.0, 328.0)


def test_overlay_overlapped_matches_source():
    src = FRect(16.0, 16.0, 164.0, 328.0)
    assert overlay_dest(src, 480, 16, overlap=True) == src


def test_scale_rects():
    dest = FRect(300.0, 16.0, 164.0, 328.0)
    (r,) = scale_rects([Rect(1, 2, 2, 3)], 4, 8, dest)
    assert r.x == pytest.approx(341.0)
    assert r.y == pytest.approx(98.0)
    assert r.w == pytest.approx(82.0)
    assert r.h == pytest.approx(123.0)


def test_full_mask_rect_fills_dest():
    dest = FRect(10.0, 20.0, 90.0, 45.0)
    (r,) = scale_rects([Rect(0, 0, 6, 3)], 6, 3, dest)
    assert (r.x, r.y) == pytest.approx((10.0, 20.0))
    assert (r.w, r.h) == pytest.approx((90.0, 45.0))


def test_scale_rects_empty_mask():
    assert scale_rects([Rect(0, 0, 1, 1)], 0, 5, FRect(0, 0, 10, 10)) == []
