"""Drawable shapes that turn geometry into primitive surface calls."""
from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import List, Optional, Sequence, TYPE_CHECKING, Union

from .errors import ShapeValidationError
from .vector import XY

if TYPE_CHECKING:  # pragma: no cover - only for static analyzers
    from .surface import DrawingSurface

BORDER_WIDTH = 1.0
ARROW_HEAD_ANGLE = math.pi / 8


@dataclass(frozen=True)
class Style:
    """Optional fill and stroke colors. A style with neither paints nothing."""

    fill: Optional[str] = None
    stroke: Optional[str] = None

    @property
    def visible(self) -> bool:
        return self.fill is not None or self.stroke is not None


class Drawable:
    """Base class for anything that can render itself onto a surface."""

    def render(self, surface: "DrawingSurface") -> None:  # pragma: no cover - interface only
        raise NotImplementedError


def _paint(surface: "DrawingSurface", style: Style) -> None:
    if style.fill is not None:
        surface.fill(style.fill)
    if style.stroke is not None:
        surface.stroke(style.stroke, BORDER_WIDTH)


@dataclass
class Rectangle(Drawable):
    loc: XY
    dim: XY
    fill: Optional[str] = None
    stroke: Optional[str] = None

    @property
    def style(self) -> Style:
        return Style(self.fill, self.stroke)

    def render(self, surface: "DrawingSurface") -> None:
        style = self.style
        if not style.visible:
            return
        surface.begin_path()
        surface.rect(self.loc.x, self.loc.y, self.dim.x, self.dim.y)
        _paint(surface, style)


@dataclass
class Point(Drawable):
    """A circle marker centered on ``loc``."""

    loc: XY
    radius: float
    fill: Optional[str]
    stroke: Optional[str]

    @property
    def style(self) -> Style:
        return Style(self.fill, self.stroke)

    def render(self, surface: "DrawingSurface") -> None:
        style = self.style
        if not style.visible:
            return
        surface.begin_path()
        surface.arc(self.loc.x, self.loc.y, self.radius, 0.0, 2 * math.pi)
        _paint(surface, style)


def _stroke_segment(surface: "DrawingSurface", start: XY, end: XY, stroke: str, width: float) -> None:
    surface.begin_path()
    surface.move_to(start.x, start.y)
    surface.line_to(end.x, end.y)
    surface.stroke(stroke, width)


@dataclass
class Line(Drawable):
    start: XY
    end: XY
    width: float
    stroke: str

    def render(self, surface: "DrawingSurface") -> None:
        _stroke_segment(surface, self.start, self.end, self.stroke, self.width)


class AnchoredLine(Drawable):
    """A line whose endpoints are read from two ``Point`` markers at render time.

    The line keeps references to the markers, not copies of their locations,
    so moving a marker moves every line anchored to it.
    """

    def __init__(self, source: Point, target: Point, width: float, stroke: str) -> None:
        self.source = source
        self.target = target
        self.width = width
        self.stroke = stroke

    @property
    def start(self) -> XY:
        return self.source.loc

    @property
    def end(self) -> XY:
        return self.target.loc

    def render(self, surface: "DrawingSurface") -> None:
        _stroke_segment(surface, self.start, self.end, self.stroke, self.width)

    def __repr__(self) -> str:
        return f"AnchoredLine(start={self.start}, end={self.end}, width={self.width}, stroke={self.stroke!r})"


@dataclass
class Polyline(Drawable):
    """Open path through ``points``; always stroked, never filled."""

    points: List[XY]
    width: float
    stroke: str

    def render(self, surface: "DrawingSurface") -> None:
        surface.begin_path()
        for i, point in enumerate(self.points):
            if i == 0:
                surface.move_to(point.x, point.y)
            else:
                surface.line_to(point.x, point.y)
        surface.stroke(self.stroke, self.width)


@dataclass
class Polygon(Drawable):
    """Closed shape through ``points``."""

    points: List[XY]
    fill: Optional[str] = None
    stroke: Optional[str] = None

    def __post_init__(self) -> None:
        self.points = list(self.points)
        if not self.points:
            raise ShapeValidationError("Polygon requires at least one point")

    @property
    def style(self) -> Style:
        return Style(self.fill, self.stroke)

    def render(self, surface: "DrawingSurface") -> None:
        style = self.style
        if not style.visible or not self.points:
            return
        surface.begin_path()
        first, *rest = self.points
        surface.move_to(first.x, first.y)
        for point in rest:
            surface.line_to(point.x, point.y)
        surface.close_path()
        _paint(surface, style)


class Arrow(Drawable):
    """A shaft line plus a two-wing head at ``end``.

    The wings are computed once from the construction-time ``start``/``end``;
    moving the shaft afterwards does not re-aim the head. When ``start`` equals
    ``end`` the line angle is atan2(0, 0) == 0, so the head points along +x.
    """

    def __init__(
        self,
        start: XY,
        end: XY,
        width: float,
        stroke: str,
        head_size: float = 1.0,
        *,
        name: Optional[str] = None,
        head_angle: float = ARROW_HEAD_ANGLE,
    ) -> None:
        self.shaft = Line(start, end, width, stroke)
        self.head_size = head_size
        self.name = name
        line_angle = end.angle_between(start)
        self.head_left = end.sub(XY.from_angle(line_angle - head_angle).scale(head_size))
        self.head_right = end.sub(XY.from_angle(line_angle + head_angle).scale(head_size))

    @property
    def start(self) -> XY:
        return self.shaft.start

    @property
    def end(self) -> XY:
        return self.shaft.end

    @property
    def width(self) -> float:
        return self.shaft.width

    @property
    def stroke(self) -> str:
        return self.shaft.stroke

    def render(self, surface: "DrawingSurface") -> None:
        start, end = self.shaft.start, self.shaft.end
        surface.begin_path()
        surface.move_to(start.x, start.y)
        surface.line_to(end.x, end.y)
        surface.move_to(self.head_left.x, self.head_left.y)
        surface.line_to(end.x, end.y)
        surface.line_to(self.head_right.x, self.head_right.y)
        surface.stroke(self.shaft.stroke, self.shaft.width)

    def __repr__(self) -> str:
        return (
            f"Arrow(name={self.name!r}, start={self.start.to_string_fixed(2)}, "
            f"end={self.end.to_string_fixed(2)}, head_size={self.head_size})"
        )


@dataclass
class Graph(Drawable):
    """Point markers joined by lines. Points render first, lines on top."""

    points: List[Point] = field(default_factory=list)
    lines: List[Union[Line, AnchoredLine]] = field(default_factory=list)

    def render(self, surface: "DrawingSurface") -> None:
        for point in self.points:
            point.render(surface)
        for line in self.lines:
            line.render(surface)


def render_all(drawables: Sequence[Drawable], surface: "DrawingSurface") -> None:
    for drawable in drawables:
        drawable.render(surface)


__all__ = [
    "BORDER_WIDTH",
    "ARROW_HEAD_ANGLE",
    "Style",
    "Drawable",
    "Rectangle",
    "Point",
    "Line",
    "AnchoredLine",
    "Polyline",
    "Polygon",
    "Arrow",
    "Graph",
    "render_all",
]
