"""Tests for the command-line entry point."""

import json

import pytest

from collisionrects.cli import build_parser, main


def test_export_writes_json(half_opaque_png, tmp_path, capsys):
    output = tmp_path / "out.json"
    assert main(["export", str(half_opaque_png), "-o", str(output), "--resolution", "16"]) == 0

    data = json.loads(output.read_text())
    assert data['mask'] == {'width': 16, 'height': 16}
    assert data['rects'] == [[0, 0, 8, 16]]
    assert data['resolution'] == 16
    assert data['source'] == "source.png"
    assert "Wrote 1 rects" in capsys.readouterr().out


def test_export_default_output_path(half_opaque_png):
    assert main(["export", str(half_opaque_png)]) == 0
    assert half_opaque_png.with_name("source_rects.json").exists()


def test_missing_image_exits_with_error(tmp_path, capsys):
    assert main(["export", str(tmp_path / "missing.png")]) == 1
    assert "error:" in capsys.readouterr().err


def test_invalid_threshold_exits_with_error(half_opaque_png, capsys):
    assert main(["export", str(half_opaque_png), "--threshold", "400"]) == 1
    assert "alpha_threshold" in capsys.readouterr().err


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_view_flags():
    args = build_parser().parse_args(["view", "a.png", "--dark", "--overlap", "--resolution", "24"])
    assert args.command == "view"
    assert args.dark and args.overlap
    assert args.resolution == 24


def test_oversized_image_exits_with_error(huge_header_png, capsys):
    assert main(["export", str(huge_header_png)]) == 1
    assert "error:" in capsys.readouterr().err
