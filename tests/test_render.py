"""Tests for ASCII loop rendering."""

from pipeloop.grid import TileMap
from pipeloop.render import render_loop
from pipeloop.solver import find_loop


def test_render_loop_keeps_only_loop_tiles(sample_text):
    tile_map = TileMap.build(sample_text)

    rendered = render_loop(tile_map, find_loop(tile_map))

    assert rendered.splitlines() == [
        "..┌┐.",
        ".┌┘│.",
        "S┘.└┐",
        "│┌──┘",
        "└┘...",
    ]


def test_render_loop_custom_symbols(square_text):
    tile_map = TileMap.build(square_text)

    rendered = render_loop(
        tile_map,
        find_loop(tile_map),
        symbols={"-": "=", "|": "!", "S": "@"},
        blank=" ",
    )

    assert rendered.splitlines()[1] == " @=┐ "
    assert rendered.splitlines()[2] == " ! ! "


def test_render_without_loop_is_blank():
    tile_map = TileMap.build("S-.\n...")
    rendered = render_loop(tile_map, find_loop(tile_map))
    assert rendered == "...\n..."
