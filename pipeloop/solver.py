"""Loop discovery driver.

Seeds a walker at the start tile and advances it round by round until a trail
comes back to the start or every trail has dead-ended. The start is open on all
four sides, so the walk heads around the loop both ways at once. The trail
that closes the loop has walked the whole cycle, and the farthest point is
half that distance.

Usage:
    tile_map = TileMap.build(text)
    result = find_loop(tile_map)
    print(result.farthest_distance)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .config import Config
from .grid import LocationState, Tile, TileMap
from .logging_utils import log_deterministic, log_success, log_warning
from .schemas import LoopReport
from .traversal import Trail, Walker


@dataclass(frozen=True)
class LoopResult:
    """Where the walk stopped and, if the loop closed, the trail that closed it."""

    start: Tile
    trail: Optional[Trail]
    rounds: int

    @property
    def closed(self) -> bool:
        return self.trail is not None

    @property
    def loop_length(self) -> int:
        """Tiles on the loop; 0 when the walker ran dry."""
        return self.trail.count() if self.trail is not None else 0

    @property
    def farthest_distance(self) -> int:
        return self.loop_length // 2

    def loop_tiles(self) -> List[Tile]:
        """Loop tiles in walk order, start first, start not repeated."""
        if self.trail is None:
            return []
        return self.trail.history()

    def to_report(self) -> LoopReport:
        farthest = farthest_tile(self)
        return LoopReport(
            start=_location_state(self.start),
            closed=self.closed,
            loop_length=self.loop_length,
            farthest_distance=self.farthest_distance,
            rounds=self.rounds,
            farthest=_location_state(farthest) if farthest is not None else None,
            path=[_location_state(tile) for tile in self.loop_tiles()],
        )


def _location_state(tile: Tile) -> LocationState:
    return LocationState(row=tile.location.row, col=tile.location.col)


def find_loop(
    tile_map: TileMap,
    *,
    max_rounds: Optional[int] = None,
    verbose: Optional[bool] = None,
) -> LoopResult:
    """Walk the map from its start tile until the loop closes or the walker dries up.

    Args:
        tile_map: Parsed map containing exactly one start tile
        max_rounds: Round limit; defaults to Config.MAX_ROUNDS, then to the
            number of tiles in the map (no simple loop can be longer)
        verbose: Print a line per round; defaults to Config.VERBOSE

    Returns:
        LoopResult with the closing trail, or ``trail=None`` if no trail made it
        back to the start

    Raises:
        MissingStartError: the map has no start tile
    """
    start = tile_map.start()
    if max_rounds is None:
        max_rounds = Config.MAX_ROUNDS if Config.MAX_ROUNDS is not None else len(tile_map)
    if max_rounds <= 0:
        raise ValueError(f"max_rounds must be positive, got {max_rounds}")
    if verbose is None:
        verbose = Config.VERBOSE

    walker = Walker.new(tile_map, start)
    closing: Optional[Trail] = None
    while closing is None and not walker.is_dry():
        if walker.round >= max_rounds:
            log_warning(
                f"Stopped after {walker.round} rounds with {len(walker)} live trails; "
                "treating the map as having no loop"
            )
            return LoopResult(start=start, trail=None, rounds=walker.round)
        walker = walker.advance()
        if verbose:
            log_deterministic(f"Round {walker.round}: {len(walker)} live trails")
        closing = walker.reached(start)

    if closing is not None and verbose:
        log_success(f"Loop closed after {walker.round} rounds")
    # A dry walker gives no closing trail, which reads as a zero-length loop.
    return LoopResult(start=start, trail=closing, rounds=walker.round)


def farthest_tile(result: LoopResult) -> Tile | None:
    """Return the loop tile halfway around from the start, if the loop closed."""
    tiles = result.loop_tiles()
    if not tiles:
        return None
    return tiles[result.farthest_distance]


def farthest_distance(text: str) -> int:
    """Parse ``text`` and return the distance to the loop's farthest point.

    Returns 0 when no trail makes it back to the start.
    """
    return find_loop(TileMap.build(text)).farthest_distance


process = farthest_distance
