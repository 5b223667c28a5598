"""
Command line entry point.

Reads a pipe map, walks the loop through its start tile and prints the distance
to the farthest point on it.

Run: pipeloop [path] [--json] [--show-loop] [--max-rounds N]
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .config import Config
from .errors import InputReadError, PipeLoopError
from .grid import TileMap
from .logging_utils import log_error, log_info
from .render import render_loop
from .solver import find_loop


def load_input(path: Path) -> str:
    """Read the map text at ``path``, raising InputReadError on failure."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise InputReadError(path=Path(path), underlying=exc) from exc


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pipeloop",
        description="Find the farthest point on the pipe loop through the start tile",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Map file (default: PIPELOOP_INPUT_PATH or input.txt)",
    )
    parser.add_argument("--json", action="store_true", help="Print the loop report as JSON")
    parser.add_argument("--show-loop", action="store_true", help="Draw the discovered loop")
    parser.add_argument("--max-rounds", type=int, help="Stop traversal after this many rounds")
    parser.add_argument("--verbose", action="store_true", help="Log every traversal round")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    path = args.path if args.path is not None else Config.INPUT_PATH

    try:
        Config.validate()
        if args.verbose:
            log_info(Config.display())
        tile_map = TileMap.build(load_input(path))
        result = find_loop(
            tile_map,
            max_rounds=args.max_rounds,
            verbose=True if args.verbose else None,
        )
    except (PipeLoopError, ValueError) as exc:
        log_error(str(exc))
        return 1

    if args.show_loop:
        print(render_loop(tile_map, result))
    if args.json:
        print(result.to_report().model_dump_json(indent=2))
    print(f"Part 1: {result.farthest_distance}")
    return 0
