"""Grid coordinates and cardinal directions.

Locations are plain ``(row, col)`` values so trails can refer to tiles by
coordinate instead of holding on to the map's storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Cardinal directions, in the order neighbours are explored."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    WEST = (0, -1)
    EAST = (0, 1)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}


@dataclass(frozen=True, order=True)
class Location:
    """A (row, col) position on the map. Both coordinates are non-negative."""

    row: int
    col: int

    def move(self, direction: Direction) -> Location | None:
        """Step one tile in ``direction``.

        Returns None when the step would leave the map through the top or
        left edge. The bottom and right edges are the map's business, see
        ``TileMap.tile_at``.
        """
        d_row, d_col = direction.offset
        row, col = self.row + d_row, self.col + d_col
        if row < 0 or col < 0:
            return None
        return Location(row, col)

    def direction_to(self, other: Location) -> Direction | None:
        """Return the cardinal direction from this location toward ``other``.

        Rows are compared first, then columns. Identical locations and
        diagonal pairs have no cardinal relation and return None.
        """
        if self.row != other.row:
            if self.col != other.col:
                return None
            return Direction.SOUTH if self.row < other.row else Direction.NORTH
        if self.col != other.col:
            return Direction.EAST if self.col < other.col else Direction.WEST
        return None

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)
