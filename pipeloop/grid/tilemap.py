"""Immutable tile map built once from puzzle text."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from ..errors import MissingStartError
from .location import Direction, Location
from .schemas import TileMapState
from .tiles import START_SYMBOL, Tile


class TileMap:
    """Row-major grid of tiles with bounds-checked lookups.

    The map is never mutated after construction. Rows are stored as tuples and
    each tile's location matches its (row, col) position, so traversal code
    can move between coordinates and tiles freely.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Sequence[Sequence[Tile]]) -> None:
        self._rows: Tuple[Tuple[Tile, ...], ...] = tuple(tuple(row) for row in rows)

    @classmethod
    def build(cls, text: str) -> "TileMap":
        """Parse ``text`` into a map.

        Every line is trimmed and blank lines are skipped before row numbers
        are assigned, so surrounding padding in fixtures has no effect.
        Ragged rows are accepted as-is.
        """
        lines = [line.strip() for line in text.splitlines()]
        rows: List[List[Tile]] = []
        for row, line in enumerate(line for line in lines if line):
            rows.append([Tile(ch, Location(row, col)) for col, ch in enumerate(line)])
        return cls(rows)

    from_text = build

    @classmethod
    def from_state(cls, state: TileMapState) -> "TileMap":
        return cls.build("\n".join(state.rows))

    def to_state(self) -> TileMapState:
        return TileMapState(rows=["".join(tile.symbol for tile in row) for row in self._rows])

    @property
    def rows(self) -> Tuple[Tuple[Tile, ...], ...]:
        return self._rows

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self._rows), default=0)

    def __len__(self) -> int:
        return sum(len(row) for row in self._rows)

    def __iter__(self) -> Iterator[Tile]:
        for row in self._rows:
            yield from row

    def tile_at(self, location: Location | None) -> Tile | None:
        """Return the tile at ``location`` or None when it lies off the map."""
        if location is None:
            return None
        if not 0 <= location.row < len(self._rows):
            return None
        row = self._rows[location.row]
        if not 0 <= location.col < len(row):
            return None
        return row[location.col]

    def find(self, symbol: str) -> Tile | None:
        """Return the first tile carrying ``symbol`` in row-major order."""
        return next((tile for tile in self if tile.symbol == symbol), None)

    def start(self) -> Tile:
        """Return the start tile, raising MissingStartError if there is none."""
        tile = self.find(START_SYMBOL)
        if tile is None:
            raise MissingStartError(height=self.height, width=self.width)
        return tile

    def connections(self, tile: Tile) -> List[Tile]:
        """Return the neighbours ``tile`` is joined to, explored N, S, W, E."""
        found: List[Tile] = []
        for direction in Direction:
            neighbor = self.tile_at(tile.location.move(direction))
            if neighbor is not None and tile.connects(neighbor):
                found.append(neighbor)
        return found
