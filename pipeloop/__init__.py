"""
Pipeloop - find the loop through the start tile of a pipe map.

Parses an ASCII map of connector tiles, walks every branch out of the start
tile in lockstep, and reports how far the farthest loop tile is from the start.
"""

__version__ = "0.1.0"

# Map model
from .grid import (
    CONNECTORS,
    START_SYMBOL,
    Direction,
    Location,
    LocationState,
    Tile,
    TileMap,
    TileMapState,
)

# Traversal engine and driver
from .traversal import Trail, Walker
from .solver import LoopResult, farthest_distance, farthest_tile, find_loop, process

# Reports, rendering and errors
from .schemas import LoopReport
from .render import render_loop
from .errors import InputReadError, MissingStartError, PipeLoopError

__all__ = [
    # Map model
    "CONNECTORS",
    "START_SYMBOL",
    "Direction",
    "Location",
    "LocationState",
    "Tile",
    "TileMap",
    "TileMapState",
    # Traversal
    "Trail",
    "Walker",
    # Driver
    "LoopResult",
    "find_loop",
    "farthest_distance",
    "farthest_tile",
    "process",
    # Output
    "LoopReport",
    "render_loop",
    # Errors
    "PipeLoopError",
    "MissingStartError",
    "InputReadError",
]
