"""Pydantic schemas for the tile map.

These models mirror the frozen dataclasses in ``location.py`` and
``tilemap.py`` so map snapshots and loop reports stay serializable.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class LocationState(BaseModel):
    """A (row, col) coordinate."""

    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)


class TileMapState(BaseModel):
    """Row-major symbols of a parsed map, one string per non-blank line."""

    rows: List[str] = Field(
        default_factory=list,
        description="Trimmed map rows; row index equals the tile's row",
    )
