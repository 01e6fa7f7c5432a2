"""Ship models assemble hull, sail and rudder polygons in draw order."""
from __future__ import annotations

import math
from pathlib import Path
import sys

BASE = Path(__file__).resolve().parents[1]
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))

import pytest

from low_level_drawing.diagnostics import RecordingSurface
from low_level_drawing.errors import ShapeValidationError
from low_level_drawing.vector import XY
from scene_library.ship import (
    SailSpecs,
    ShipDescriptor,
    ShipModel,
    ShipPose,
    ShipSpecs,
    bar,
    centered_rectangle,
    ship_pre_polygons,
)

HULL = [(-2.0, 1.0), (2.0, 1.0), (2.0, -1.0), (-2.0, -1.0)]
RUDDER = [(-2.0, 0.1), (-3.0, 0.1), (-3.0, -0.1), (-2.0, -0.1)]
SAIL_A = [(0.0, 0.1), (-1.0, 0.1), (-1.0, -0.1)]
SAIL_B = [(1.0, 0.1), (0.0, 0.1), (0.0, -0.1)]


def _model() -> ShipModel:
    return ShipModel(XY(0.0, 0.0), HULL, [SAIL_A, SAIL_B], RUDDER, "brown", "white")


def test_parts_are_colored_by_role() -> None:
    model = _model()
    assert model.hull.fill == "brown"
    assert model.rudder.fill == "brown"
    assert [s.fill for s in model.sails] == ["white", "white"]
    assert model.hull.points[0] == XY(-2.0, 1.0)


def test_render_order_is_rudder_hull_sails() -> None:
    surface = RecordingSurface()
    _model().render(surface)
    first_moves = surface.args_of("move_to")
    assert first_moves == [(-2.0, 0.1), (-2.0, 1.0), (0.0, 0.1), (1.0, 0.1)]
    fills = [args[0] for args in surface.args_of("fill")]
    assert fills == ["brown", "brown", "white", "white"]


def test_empty_outline_is_rejected() -> None:
    with pytest.raises(ShapeValidationError):
        ShipModel(XY(0.0, 0.0), [], [], RUDDER, "brown", "white")
    with pytest.raises(ShapeValidationError):
        ShipModel(XY(0.0, 0.0), HULL, [["bad"]], RUDDER, "brown", "white")


def test_centered_rectangle_rotates_about_center() -> None:
    corners = centered_rectangle(4.0, 2.0, math.pi / 2, XY(10.0, 0.0))
    assert corners[0].x == pytest.approx(9.0)
    assert corners[0].y == pytest.approx(-2.0)
    assert corners[2].x == pytest.approx(11.0)
    assert corners[2].y == pytest.approx(2.0)


def test_bar_extends_backwards_from_offset() -> None:
    corners = bar(3.0, 0.5, 0.0, XY(1.0, 0.0), 0.0, XY(0.0, 0.0))
    assert corners == [XY(1.0, 0.25), XY(-2.0, 0.25), XY(-2.0, -0.25), XY(1.0, -0.25)]


def test_pre_polygons_from_pose() -> None:
    specs = ShipSpecs(hull_length=10.0, hull_width=4.0, rudder_length=2.0, sails=(SailSpecs(1.0, 3.0),))
    pose = ShipPose(center=XY(5.0, 5.0), heading=0.0, rudder_angle=0.0, sail_angles=(0.0,))
    descriptor = ship_pre_polygons(specs, pose, hull_color="navy", sail_color="ivory")
    assert descriptor.hull[0] == XY(0.0, 7.0)
    assert descriptor.rudder[0] == XY(0.0, 5.25)
    assert descriptor.rudder[1] == XY(-2.0, 5.25)
    assert descriptor.sails[0][1] == XY(3.0, 5.25)
    model = ShipModel.from_descriptor(descriptor)
    assert model.center == XY(5.0, 5.0)
    assert model.hull.fill == "navy"
    assert model.sails[0].fill == "ivory"


def test_missing_sail_angle_is_rejected() -> None:
    specs = ShipSpecs(10.0, 4.0, 2.0, sails=(SailSpecs(1.0, 3.0), SailSpecs(-2.0, 3.0)))
    with pytest.raises(ShapeValidationError):
        ship_pre_polygons(specs, ShipPose(center=XY(0.0, 0.0), sail_angles=(0.1,)))


def test_descriptor_accepts_plain_points() -> None:
    descriptor = ShipDescriptor(hull=HULL, rudder=RUDDER, sails=[SAIL_A], center=[1.0, 2.0])
    model = ShipModel.from_descriptor(descriptor)
    assert model.center == XY(1.0, 2.0)
    assert len(model.parts()) == 3
