"""Tests for the command line entry point."""

import json

import pytest

from pipeloop.cli import load_input, main
from pipeloop.config import Config
from pipeloop.errors import InputReadError


def test_main_prints_answer(tmp_path, capsys, sample_text):
    path = tmp_path / "map.txt"
    path.write_text(sample_text)

    assert main([str(path)]) == 0

    assert capsys.readouterr().out.strip() == "Part 1: 8"


def test_main_reads_configured_default_path(tmp_path, monkeypatch, capsys, square_text):
    path = tmp_path / "input.txt"
    path.write_text(square_text)
    monkeypatch.setattr(Config, "INPUT_PATH", path)

    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "Part 1: 4"


def test_main_unreadable_input_aborts(tmp_path, capsys):
    missing = tmp_path / "nope.txt"

    assert main([str(missing)]) == 1

    out = capsys.readouterr().out
    assert "Could not read input map" in out
    assert "Part 1" not in out


def test_main_missing_start_aborts(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text("F7\nLJ\n")

    assert main([str(path)]) == 1

    out = capsys.readouterr().out
    assert "No start tile" in out
    assert "Part 1" not in out


def test_main_json_and_show_loop(tmp_path, capsys, square_text):
    path = tmp_path / "map.txt"
    path.write_text(square_text)

    assert main([str(path), "--json", "--show-loop"]) == 0

    out = capsys.readouterr().out
    drawing, rest = out.split("\n", 5)[:5], out.split("\n", 5)[5]
    assert drawing[1] == ".S─┐."
    report_text, answer = rest.rsplit("Part 1:", 1)
    report = json.loads(report_text)
    assert report["closed"] is True
    assert report["loop_length"] == 8
    assert answer.strip() == "4"


def test_main_rejects_bad_round_limit(tmp_path, capsys, square_text):
    path = tmp_path / "map.txt"
    path.write_text(square_text)

    assert main([str(path), "--max-rounds", "0"]) == 1
    assert "max_rounds must be positive" in capsys.readouterr().out


def test_load_input_wraps_os_errors(tmp_path):
    with pytest.raises(InputReadError) as excinfo:
        load_input(tmp_path)
    assert excinfo.value.path == tmp_path
    assert isinstance(excinfo.value.underlying, OSError)
