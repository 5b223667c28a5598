"""Connector tiles and the connectivity oracle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet

from .location import Direction, Location

START_SYMBOL = "S"
GROUND_SYMBOL = "."

N, S, W, E = Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST

# Directions each connector symbol opens. The start tile's real shape is never
# worked out, so it is treated as open on every side.
CONNECTORS: Dict[str, FrozenSet[Direction]] = {
    "|": frozenset({N, S}),
    "-": frozenset({E, W}),
    "L": frozenset({N, E}),
    "J": frozenset({N, W}),
    "7": frozenset({S, W}),
    "F": frozenset({S, E}),
    START_SYMBOL: frozenset({N, S, W, E}),
}

_CLOSED: FrozenSet[Direction] = frozenset()


def directions_for(symbol: str) -> FrozenSet[Direction]:
    """Return the directions ``symbol`` opens. Unknown symbols are ground."""
    return CONNECTORS.get(symbol, _CLOSED)


@dataclass(frozen=True)
class Tile:
    """A single map cell: a connector symbol at a fixed location."""

    symbol: str
    location: Location

    @property
    def directions(self) -> FrozenSet[Direction]:
        return directions_for(self.symbol)

    @property
    def is_start(self) -> bool:
        return self.symbol == START_SYMBOL

    @property
    def is_ground(self) -> bool:
        return not self.directions

    def opens(self, direction: Direction) -> bool:
        return direction in self.directions

    def connects(self, other: Tile) -> bool:
        """Return True if this tile and ``other`` are joined by a pipe.

        The tiles must sit in the same row or the same column. This tile has
        to open toward ``other`` and ``other`` has to open back toward this
        tile, which makes the relation symmetric. Tiles sharing a location or
        touching only diagonally never connect.
        """
        toward = self.location.direction_to(other.location)
        if toward is None:
            return False
        return self.opens(toward) and other.opens(toward.opposite)
