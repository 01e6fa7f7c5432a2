"""Force vectors and their arrow renderings."""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, List

from low_level_drawing.shapes import Arrow
from low_level_drawing.vector import XY

FORCE_LINE_WIDTH = 0.5
FORCE_HEAD_SIZE = 1.0


@dataclass(frozen=True)
class Force:
    """A named force ``vec`` applied at ``loc``."""

    name: str
    loc: XY
    vec: XY


def force_arrow(
    force: Force,
    *,
    stroke: str = "red",
    width: float = FORCE_LINE_WIDTH,
    head_size: float = FORCE_HEAD_SIZE,
) -> Arrow:
    return Arrow(force.loc, force.loc.add(force.vec), width, stroke, head_size, name=force.name)


def force_arrows(forces: Iterable[Force], **style) -> List[Arrow]:
    return [force_arrow(force, **style) for force in forces]


def grid_origins(dimensions: XY, steps: XY, stride: int = 2) -> List[XY]:
    """Sample points from ``-dimensions`` to ``dimensions`` every ``stride`` steps.

    A non-positive or NaN step on either axis yields no points.
    """
    xs = _samples(steps.x * stride, dimensions.x)
    ys = _samples(steps.y * stride, dimensions.y)
    return [XY(x, y) for x in xs for y in ys]


def _samples(spacing: float, extent: float) -> List[float]:
    if not spacing > 0 or not extent >= 0 or math.isinf(spacing) or math.isinf(extent):
        return []
    count = int(math.floor(2 * extent / spacing + 1e-9))
    return [-extent + i * spacing for i in range(count + 1)]


def vector_field(
    origins: Iterable[XY],
    sample,
    *,
    stroke: str = "steelblue",
    width: float = FORCE_LINE_WIDTH,
    head_size: float = FORCE_HEAD_SIZE,
) -> List[Arrow]:
    """Arrows from each origin along ``sample(origin)``, e.g. a wind field."""
    return [
        Arrow(origin, origin.add(sample(origin)), width, stroke, head_size)
        for origin in origins
    ]


__all__ = ["Force", "force_arrow", "force_arrows", "grid_origins", "vector_field", "FORCE_LINE_WIDTH", "FORCE_HEAD_SIZE"]
