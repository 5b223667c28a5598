"""Lockstep multi-trail walk used to discover the loop through the start.

A ``Walker`` holds every live ``Trail`` for the current round. Advancing
the walker advances each trail by one tile and replaces the whole set, so
branches spread out from the start in all open directions at once.

Trails keep their history as a chain of parent links. Each child shares its
parent's history instead of copying it, which keeps a round O(live trails)
regardless of how long the loop is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .grid import Tile, TileMap


@dataclass(frozen=True)
class Trail:
    """A candidate path from the start tile to its current frontier ``tile``."""

    map: TileMap = field(repr=False, compare=False)
    tile: Tile
    parent: Optional["Trail"] = field(default=None, repr=False, compare=False)
    steps: int = 0

    @classmethod
    def new(cls, tile_map: TileMap, start: Tile) -> "Trail":
        return cls(map=tile_map, tile=start)

    @property
    def previous(self) -> Tile | None:
        """The tile visited immediately before the current one."""
        return self.parent.tile if self.parent is not None else None

    def reached(self, tile: Tile) -> bool:
        return self.tile == tile

    def count(self) -> int:
        """Number of previously visited tiles (one per round walked)."""
        return self.steps

    def history(self) -> List[Tile]:
        """Previously visited tiles, oldest first. Excludes the current tile."""
        tiles: List[Tile] = []
        node = self.parent
        while node is not None:
            tiles.append(node.tile)
            node = node.parent
        tiles.reverse()
        return tiles

    def path(self) -> List[Tile]:
        """History plus the current tile."""
        return self.history() + [self.tile]

    def advance(self) -> List["Trail"]:
        """Return one child trail per connected neighbour.

        The neighbour we just came from is skipped, which rules out stepping
        straight back. Longer revisits are not checked.
        """
        previous = self.previous
        return [
            Trail(map=self.map, tile=neighbor, parent=self, steps=self.steps + 1)
            for neighbor in self.map.connections(self.tile)
            if neighbor != previous
        ]


@dataclass(frozen=True)
class Walker:
    """Every live trail at a given traversal round."""

    map: TileMap = field(repr=False)
    trails: Tuple[Trail, ...] = ()
    round: int = 0

    @classmethod
    def new(cls, tile_map: TileMap, start: Tile) -> "Walker":
        return cls(map=tile_map, trails=(Trail.new(tile_map, start),))

    def __len__(self) -> int:
        return len(self.trails)

    def is_dry(self) -> bool:
        """True once every branch has dead-ended."""
        return not self.trails

    def reached(self, tile: Tile) -> Trail | None:
        """Return the first trail whose frontier is ``tile``, if any."""
        return next((trail for trail in self.trails if trail.reached(tile)), None)

    def advance(self) -> "Walker":
        """Advance every trail one step and return the next round's walker."""
        trails = tuple(child for trail in self.trails for child in trail.advance())
        return Walker(map=self.map, trails=trails, round=self.round + 1)
