"""Tests for serializable map and report schemas."""

import pytest
from pydantic import ValidationError

from pipeloop.grid import LocationState
from pipeloop.schemas import LoopReport


def test_location_state_rejects_negative_coordinates():
    with pytest.raises(ValidationError):
        LocationState(row=-1, col=0)


def test_loop_report_defaults_for_open_walk():
    report = LoopReport(start=LocationState(row=0, col=0), closed=False)

    assert report.loop_length == 0
    assert report.farthest_distance == 0
    assert report.farthest is None
    assert report.path == []
    assert report.model_dump()["start"] == {"row": 0, "col": 0}
