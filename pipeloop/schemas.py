"""Pydantic schemas for loop discovery results.

``LoopResult`` in ``solver.py`` keeps live references into the tile map;
``LoopReport`` is its serializable snapshot for JSON output and tests.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .grid import LocationState


class LoopReport(BaseModel):
    """Outcome of a single loop discovery run."""

    start: LocationState = Field(..., description="Location of the start tile")
    closed: bool = Field(
        ..., description="True when a trail returned to the start; False when the walker ran dry",
    )
    loop_length: int = Field(0, ge=0, description="Tiles on the loop, 0 when not closed")
    farthest_distance: int = Field(0, ge=0, description="loop_length // 2")
    rounds: int = Field(0, ge=0, description="Traversal rounds executed")
    farthest: Optional[LocationState] = Field(
        None, description="Tile reached halfway around the loop",
    )
    path: List[LocationState] = Field(
        default_factory=list,
        description="Closing trail, start first; the start is not repeated at the end",
    )
