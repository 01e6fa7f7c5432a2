"""Coordinate axes with tick marks or a full grid."""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import List, Tuple, TYPE_CHECKING

from low_level_drawing.shapes import BORDER_WIDTH, Drawable
from low_level_drawing.vector import XY

if TYPE_CHECKING:  # pragma: no cover - only for static analyzers
    from low_level_drawing.surface import DrawingSurface

TICK_WIDTH = 1.0
TICK_LENGTH = 2.0

Segment = Tuple[XY, XY]


def _tick_offsets(step: float, extent: float) -> List[float]:
    """Multiples of ``step`` in (0, extent], mirrored to the negative side."""
    if step <= 0 or extent <= 0 or math.isnan(step) or math.isnan(extent):
        return []
    count = int(math.floor(extent / step + 1e-9))
    offsets: List[float] = []
    for i in range(1, count + 1):
        offsets.append(i * step)
        offsets.append(-i * step)
    return offsets


@dataclass
class Axis(Drawable):
    """Axes through the origin spanning +/- ``dimensions``.

    Tick geometry is regenerated on every render from the current
    ``dimensions``, ``steps`` and ``grid`` values.
    """

    dimensions: XY
    steps: XY
    grid: bool = False
    axes_color: str = "gray"
    step_color: str = "dimgray"

    def axis_segments(self) -> List[Segment]:
        dx, dy = self.dimensions.x, self.dimensions.y
        return [(XY(-dx, 0.0), XY(dx, 0.0)), (XY(0.0, -dy), XY(0.0, dy))]

    def tick_segments(self) -> List[Segment]:
        dx, dy = self.dimensions.x, self.dimensions.y
        half = TICK_LENGTH * 0.5
        # Grid lines span the opposite axis; plain ticks are short marks.
        x_span = dy if self.grid else half
        y_span = dx if self.grid else half
        segments: List[Segment] = []
        for x in _tick_offsets(self.steps.x, dx):
            segments.append((XY(x, -x_span), XY(x, x_span)))
        for y in _tick_offsets(self.steps.y, dy):
            segments.append((XY(-y_span, y), XY(y_span, y)))
        return segments

    def render(self, surface: "DrawingSurface") -> None:
        surface.begin_path()
        for start, end in self.axis_segments():
            surface.move_to(start.x, start.y)
            surface.line_to(end.x, end.y)
        surface.stroke(self.axes_color, BORDER_WIDTH)

        surface.begin_path()
        for start, end in self.tick_segments():
            surface.move_to(start.x, start.y)
            surface.line_to(end.x, end.y)
        surface.stroke(self.step_color, TICK_WIDTH)


__all__ = ["Axis", "TICK_WIDTH", "TICK_LENGTH"]
