"""Multi-part vehicle model (hull, sails, rudder) built from raw point lists."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, List, Sequence, Tuple, Union, TYPE_CHECKING

from low_level_drawing.errors import ShapeValidationError
from low_level_drawing.shapes import Drawable, Polygon
from low_level_drawing.vector import XY

if TYPE_CHECKING:  # pragma: no cover - only for static analyzers
    from low_level_drawing.surface import DrawingSurface

logger = logging.getLogger(__name__)

RawPoint = Union[XY, Tuple[float, float]]
PrePolygon = Sequence[RawPoint]

BAR_THICKNESS = 0.5


def centered_rectangle(length: float, width: float, heading: float, location: XY) -> List[XY]:
    """Rectangle centered on the origin, rotated by ``heading`` and moved to ``location``."""
    half_length = length * 0.5
    half_width = width * 0.5
    corners = [
        XY(-half_length, half_width),
        XY(half_length, half_width),
        XY(half_length, -half_width),
        XY(-half_length, -half_width),
    ]
    return [corner.transform(heading, location) for corner in corners]


def bar(
    length: float,
    thickness: float,
    angle: float,
    offset: XY,
    heading: float,
    location: XY,
) -> List[XY]:
    """Bar from (0, 0) back to (-length, 0), pivoted at ``offset`` then placed on the hull."""
    half = thickness * 0.5
    corners = [
        XY(0.0, half),
        XY(-length, half),
        XY(-length, -half),
        XY(0.0, -half),
    ]
    return [corner.transform(angle, offset).transform(heading, location) for corner in corners]


@dataclass(frozen=True)
class SailSpecs:
    mast_offset: float
    width: float


@dataclass(frozen=True)
class ShipSpecs:
    hull_length: float
    hull_width: float
    rudder_length: float
    sails: Tuple[SailSpecs, ...] = ()


@dataclass(frozen=True)
class ShipPose:
    """Externally supplied kinematic state; headings and angles in radians."""

    center: XY
    heading: float = 0.0
    rudder_angle: float = 0.0
    sail_angles: Tuple[float, ...] = ()


@dataclass
class ShipDescriptor:
    """Raw point lists for each ship part plus the two part colors."""

    hull: List[Any]
    rudder: List[Any]
    sails: List[List[Any]] = field(default_factory=list)
    hull_color: str = "saddlebrown"
    sail_color: str = "white"
    center: Any = (0.0, 0.0)


def ship_pre_polygons(
    specs: ShipSpecs,
    pose: ShipPose,
    *,
    hull_color: str = "saddlebrown",
    sail_color: str = "white",
) -> ShipDescriptor:
    """Lay out hull, sail and rudder outlines for a ship at ``pose``."""
    if len(pose.sail_angles) < len(specs.sails):
        raise ShapeValidationError(
            f"ship has {len(specs.sails)} sails but only {len(pose.sail_angles)} sail angles"
        )
    hull = centered_rectangle(specs.hull_length, specs.hull_width, pose.heading, pose.center)
    sails = [
        bar(sail.width, BAR_THICKNESS, angle, XY.at_x(sail.mast_offset), pose.heading, pose.center)
        for sail, angle in zip(specs.sails, pose.sail_angles)
    ]
    rudder = bar(
        specs.rudder_length,
        BAR_THICKNESS,
        pose.rudder_angle,
        XY.at_x(-specs.hull_length * 0.5),
        pose.heading,
        pose.center,
    )
    return ShipDescriptor(
        hull=hull,
        rudder=rudder,
        sails=sails,
        hull_color=hull_color,
        sail_color=sail_color,
        center=pose.center,
    )


def _to_polygon(part: str, raw: PrePolygon, color: str) -> Polygon:
    if not raw:
        raise ShapeValidationError(f"{part} outline needs at least one point")
    try:
        points = [XY.coerce(p) for p in raw]
    except (TypeError, KeyError, ValueError) as exc:
        raise ShapeValidationError(f"{part} outline is malformed: {exc}") from exc
    return Polygon(points, fill=color, stroke=color)


class ShipModel(Drawable):
    """Owns its part polygons. Draw order is rudder, hull, then every sail."""

    def __init__(
        self,
        center: XY,
        hull: PrePolygon,
        sails: Sequence[PrePolygon],
        rudder: PrePolygon,
        hull_color: str,
        sail_color: str,
    ) -> None:
        self.center = center
        self.hull = _to_polygon("hull", hull, hull_color)
        self.sails = [_to_polygon(f"sail[{i}]", sail, sail_color) for i, sail in enumerate(sails)]
        self.rudder = _to_polygon("rudder", rudder, hull_color)
        logger.debug("Built ship model at %s with %d sails", center.to_string_fixed(2), len(self.sails))

    @classmethod
    def from_descriptor(cls, descriptor: ShipDescriptor) -> "ShipModel":
        return cls(
            XY.coerce(descriptor.center),
            descriptor.hull,
            descriptor.sails,
            descriptor.rudder,
            descriptor.hull_color,
            descriptor.sail_color,
        )

    @classmethod
    def from_pose(cls, specs: ShipSpecs, pose: ShipPose, **colors: str) -> "ShipModel":
        return cls.from_descriptor(ship_pre_polygons(specs, pose, **colors))

    def parts(self) -> List[Polygon]:
        return [self.rudder, self.hull, *self.sails]

    def render(self, surface: "DrawingSurface") -> None:
        for part in self.parts():
            part.render(surface)


__all__ = [
    "BAR_THICKNESS",
    "centered_rectangle",
    "bar",
    "SailSpecs",
    "ShipSpecs",
    "ShipPose",
    "ShipDescriptor",
    "ship_pre_polygons",
    "ShipModel",
]
