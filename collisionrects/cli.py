"""Command-line entry point.

Usage:
    python -m collisionrects view sprite.png --resolution 24
    python -m collisionrects export sprite.png -o sprite_rects.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from collisionrects import defaults
from collisionrects.app import actions
from collisionrects.app.core import AppState
from collisionrects.config import ViewerConfig
from collisionrects.decompose import verify_cover
from collisionrects.errors import ConfigError, ImageLoadError
from collisionrects.serialization import save_rects

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="collisionrects",
        description="Decompose an image's alpha mask into collision rectangles.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_sampling(p: argparse.ArgumentParser) -> None:
        p.add_argument("image", type=Path, help="Source image (PNG with alpha).")
        p.add_argument("--resolution", type=int, default=defaults.DEFAULT_RESOLUTION,
                       help="Cells along the longer side of the mask.")
        p.add_argument("--threshold", type=int, default=defaults.DEFAULT_ALPHA_THRESHOLD,
                       help="Alpha values above this count as solid (0-255).")

    view = sub.add_parser("view", help="Open the interactive viewer.")
    add_sampling(view)
    view.add_argument("--dark", action="store_true", help="Start with a dark background.")
    view.add_argument("--overlap", action="store_true", help="Draw rects over the image.")

    export = sub.add_parser("export", help="Write rectangles to a JSON file.")
    add_sampling(export)
    export.add_argument("-o", "--output", type=Path, default=None,
                        help="Output JSON path (default: <image>_rects.json).")
    return parser


def _load_state(args: argparse.Namespace, **config) -> AppState:
    state = AppState(config=ViewerConfig(
        resolution=args.resolution,
        alpha_threshold=args.threshold,
        **config,
    ))
    actions.load_image(state, args.image)
    return state


def cmd_view(args: argparse.Namespace) -> int:
    # Imported lazily so export works without a display stack
    from collisionrects.ui.viewer import run

    state = _load_state(args, dark=args.dark, overlap=args.overlap)
    run(state)
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    state = _load_state(args)
    verify_cover(state.mask, state.rects)
    output = args.output or args.image.with_name(f"{args.image.stem}_rects.json")
    save_rects(
        output,
        state.result,
        source=args.image.name,
        resolution=state.config.resolution,
        alpha_threshold=state.config.alpha_threshold,
    )
    print(f"Wrote {len(state.rects)} rects to {output}")
    return 0


COMMANDS = {
    "view": cmd_view,
    "export": cmd_export,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return COMMANDS[args.command](args)
    except (FileNotFoundError, ImageLoadError, ConfigError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
