"""Shared fixtures for pipeloop tests."""

from __future__ import annotations

import pytest

SAMPLE = """
    7-F7-
    .FJ|7
    SJLL7
    |F--J
    LJ.LJ
    """

SQUARE = """
    .....
    .S-7.
    .|.|.
    .L-J.
    .....
    """


def rectangle_loop(height: int, width: int) -> str:
    """Return a map whose border is a single loop with the start in the top-left corner."""
    rows = []
    for r in range(height):
        row = []
        for c in range(width):
            top, bottom = r == 0, r == height - 1
            left, right = c == 0, c == width - 1
            if top and left:
                row.append("S")
            elif top and right:
                row.append("7")
            elif bottom and left:
                row.append("L")
            elif bottom and right:
                row.append("J")
            elif top or bottom:
                row.append("-")
            elif left or right:
                row.append("|")
            else:
                row.append(".")
        rows.append("".join(row))
    return "\n".join(rows)


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    # Keep captured output free of ANSI escapes.
    monkeypatch.setenv("PIPELOOP_NO_COLOR", "1")


@pytest.fixture
def sample_text() -> str:
    return SAMPLE


@pytest.fixture
def square_text() -> str:
    return SQUARE
