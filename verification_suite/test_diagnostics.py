"""Frame recorder snapshots and force arrows."""
from __future__ import annotations

from pathlib import Path
import sys

BASE = Path(__file__).resolve().parents[1]
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))

from low_level_drawing.diagnostics import FrameRecorder
from low_level_drawing.shapes import Point, Rectangle
from low_level_drawing.vector import XY
from scene_library.forces import Force, force_arrow, force_arrows, grid_origins, vector_field


def test_recorder_counts_calls_per_frame() -> None:
    recorder = FrameRecorder()
    first = recorder.record([Rectangle(XY(0.0, 0.0), XY(1.0, 1.0), fill="red")], tag="boot")
    second = recorder.record([Point(XY(0.0, 0.0), 1.0, None, None)], extra_metadata={"paused": True})
    assert len(recorder) == 2
    assert first.frame == 0 and second.frame == 1
    exported = recorder.export()
    assert exported[0]["call_count"] == 3
    assert exported[0]["tag"] == "boot"
    assert exported[1]["call_count"] == 0
    assert exported[1]["drawables"] == 1
    assert exported[1]["metadata"] == {"paused": True}
    assert "tag" not in exported[1]
    recorder.clear()
    assert len(recorder) == 0


def test_force_arrow_spans_location_plus_vector() -> None:
    arrow = force_arrow(Force("drag", XY(1.0, 1.0), XY(-3.0, 0.0)))
    assert arrow.start == XY(1.0, 1.0)
    assert arrow.end == XY(-2.0, 1.0)
    assert arrow.name == "drag"
    assert arrow.width == 0.5
    assert arrow.head_size == 1.0
    arrows = force_arrows([Force("a", XY(0.0, 0.0), XY(1.0, 0.0))], stroke="blue")
    assert arrows[0].stroke == "blue"


def test_vector_field_samples_each_origin() -> None:
    origins = [XY(0.0, 0.0), XY(5.0, 5.0)]
    arrows = vector_field(origins, lambda p: p.scale(0.5).add(XY(1.0, 0.0)))
    assert [a.end for a in arrows] == [XY(1.0, 0.0), XY(8.5, 7.5)]


def test_grid_origins_span_the_axis_extent() -> None:
    origins = grid_origins(XY(10.0, 5.0), XY(5.0, 5.0))
    assert [o.x for o in origins[::2]] == [-10.0, 0.0, 10.0]
    assert sorted({o.y for o in origins}) == [-5.0, 5.0]
    assert len(origins) == 6


def test_grid_origins_with_non_positive_step_is_empty() -> None:
    assert grid_origins(XY(10.0, 5.0), XY(0.0, 1.0)) == []
    assert grid_origins(XY(10.0, 5.0), XY(1.0, -2.0)) == []
    assert grid_origins(XY(10.0, 5.0), XY(float("nan"), 1.0)) == []
