"""Command-line entrypoint for previewing a level directory."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from ..config import load_config
from ..errors import LevelError
from ..loader import load_level
from ..logging_config import setup_logging
from ..preview import show_level

logger = logging.getLogger("level_preview.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Preview the collision polygons of a level directory",
    )
    # Collected with nargs="*" so a wrong count prints the short usage
    # line instead of an argparse error.
    parser.add_argument("paths", nargs="*", metavar="path", help="Directory containing collision_info.txt and polygons.txt")
    parser.add_argument("--config", type=str, default=None, help="Optional YAML file with preview settings")
    parser.add_argument("--color", type=str, default=None, help="Outline colour (any matplotlib colour)")
    parser.add_argument("--fps", type=int, default=None, help="Event-loop iterations per second")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=LOG_LEVELS,
        help="Logging level",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also write log output to this file")
    parser.add_argument("--check", action="store_true", help="Load and validate the level without opening a window")
    parser.add_argument("--frames", type=int, default=None, help="Stop after this many frames even if the window stays open")
    return parser


def main(argv: Optional[list[str]] = None, prog: Optional[str] = None) -> int:
    parser = build_parser(prog)
    args = parser.parse_args(argv)

    if len(args.paths) != 1:
        print(f"Usage: {parser.prog} <path>")
        return 0

    setup_logging(args.log_level, args.log_file)

    try:
        config = load_config(args.config).with_overrides(line_color=args.color, fps=args.fps)
    except (OSError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    try:
        level = load_level(args.paths[0], config)
    except LevelError as exc:
        logger.error("%s", exc)
        return 1

    bounds = level.bounds()
    if bounds is not None:
        logger.info("Canvas %dx%d, point bounds x=[%d, %d] y=[%d, %d]",
                    level.size.width, level.size.height, bounds[0], bounds[2], bounds[1], bounds[3])

    if args.check:
        return 0

    frames = show_level(level, config, max_frames=args.frames)
    logger.debug("Preview closed after %d frame(s)", frames)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
