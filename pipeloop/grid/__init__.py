"""Tile map model for pipe loop discovery."""

from .location import Direction, Location
from .tiles import CONNECTORS, GROUND_SYMBOL, START_SYMBOL, Tile, directions_for
from .tilemap import TileMap
from .schemas import LocationState, TileMapState

__all__ = [
    "Direction",
    "Location",
    "CONNECTORS",
    "GROUND_SYMBOL",
    "START_SYMBOL",
    "Tile",
    "directions_for",
    "TileMap",
    "LocationState",
    "TileMapState",
]
