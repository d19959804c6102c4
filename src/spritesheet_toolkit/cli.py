"""
Module: cli

Purpose:
    Command-line entry point.

    spritesheet-toolkit pack IMAGES... -o DIR -n NAME [--grid CxR] ...
    spritesheet-toolkit unpack SHEET --grid CxR -o DIR -n NAME ...
    spritesheet-toolkit solve COUNT WIDTH HEIGHT
    spritesheet-toolkit colors | formats

Key Functions:
    - main(): Parse arguments, configure logging, dispatch

Dependencies:
    - argparse (std)
    - controller: Pack and unpack pipelines

Used By:
    - python -m spritesheet_toolkit
    - `spritesheet-toolkit` console script
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from spritesheet_toolkit import __version__
from spritesheet_toolkit.core.errors import InvalidArgumentError
from spritesheet_toolkit.core.models import GridShape

from .config import DEFAULT_IMAGE_FORMAT, DEFAULT_WRITE_WORKERS
from .controller import create_sprite_sheet, separate_sprite_sheet
from .io.codec import supported_formats
from .io.colors import TRANSPARENT, color_names
from .layout.solver import solve

logger = logging.getLogger(__name__)


def _grid_arg(text: str) -> GridShape:
    try:
        return GridShape.parse(text)
    except InvalidArgumentError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spritesheet-toolkit",
        description="Compose images into sprite sheets and split sheets back into images",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    pack = commands.add_parser("pack", help="Compose images into one sheet")
    pack.add_argument("images", nargs="+", type=Path, help="Input images, in placement order")
    pack.add_argument("-o", "--output-dir", type=Path, required=True, help="Output directory")
    pack.add_argument("-n", "--name", required=True, help="Output base name, without extension")
    pack.add_argument("--grid", type=_grid_arg, help="Columns x rows, e.g. 4x3 (solved if omitted)")
    pack.add_argument("--background", default=TRANSPARENT, help="Background colour name")
    pack.add_argument("--mask", default=TRANSPARENT, help="Colour made transparent after composing")
    pack.add_argument("--format", default=DEFAULT_IMAGE_FORMAT, help="Output format tag (see `formats`)")

    unpack = commands.add_parser("unpack", help="Split a sheet into images")
    unpack.add_argument("sheet", type=Path, help="Sheet image")
    unpack.add_argument("--grid", type=_grid_arg, required=True, help="Columns x rows, e.g. 4x3")
    unpack.add_argument("-o", "--output-dir", type=Path, required=True, help="Output directory")
    unpack.add_argument("-n", "--name", required=True, help="Frame base name, without extension")
    unpack.add_argument("--format", default=DEFAULT_IMAGE_FORMAT, help="Output format tag (see `formats`)")
    unpack.add_argument("--workers", type=int, default=DEFAULT_WRITE_WORKERS, help="Frame writer threads")

    solve_cmd = commands.add_parser("solve", help="Print the grid chosen for a tile count and size")
    solve_cmd.add_argument("count", type=int)
    solve_cmd.add_argument("width", type=int)
    solve_cmd.add_argument("height", type=int)

    commands.add_parser("colors", help="List colour names")
    commands.add_parser("formats", help="List output format tags")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.command == "pack":
        ok = create_sprite_sheet(
            args.images,
            args.grid,
            args.background,
            args.mask,
            args.name,
            args.output_dir,
            args.format,
        )
        return 0 if ok else 1

    if args.command == "unpack":
        ok = separate_sprite_sheet(
            args.sheet,
            args.grid,
            args.name,
            args.output_dir,
            args.format,
            write_workers=args.workers,
        )
        return 0 if ok else 1

    if args.command == "solve":
        try:
            grid = solve(args.count, args.width, args.height)
        except InvalidArgumentError as e:
            logger.error(str(e))
            return 1
        print(grid.label)
        return 0

    if args.command == "colors":
        print("\n".join(color_names()))
        return 0

    print("\n".join(supported_formats()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
