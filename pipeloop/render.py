"""ASCII views of a map with its discovered loop."""

from __future__ import annotations

from typing import Dict, List, Optional

from .grid import TileMap
from .solver import LoopResult

_DEFAULT_LOOP_SYMBOLS: Dict[str, str] = {
    "|": "│",
    "-": "─",
    "L": "└",
    "J": "┘",
    "7": "┐",
    "F": "┌",
    "S": "S",
}


def render_loop(
    tile_map: TileMap,
    result: LoopResult,
    *,
    symbols: Optional[Dict[str, str]] = None,
    blank: str = ".",
) -> str:
    """Redraw ``tile_map`` showing only the tiles on the discovered loop.

    Loop tiles use box-drawing glyphs so the cycle stands out; everything else,
    including stray pipe pieces, becomes ``blank``. Unknown symbols on the loop
    are drawn as-is. When the loop did not close every tile is blank.
    """
    mapping = {**_DEFAULT_LOOP_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    on_loop = {tile.location for tile in result.loop_tiles()}

    lines: List[str] = []
    for row in tile_map.rows:
        chars: List[str] = []
        for tile in row:
            if tile.location in on_loop:
                chars.append(mapping.get(tile.symbol, tile.symbol))
            else:
                chars.append(blank)
        lines.append("".join(chars))
    return "\n".join(lines)

