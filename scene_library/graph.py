"""Abstract vertex/edge shapes and their conversion into drawable graphs."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, List, Mapping, Sequence, Tuple, Union

from low_level_drawing.errors import ShapeConversionError, ShapeValidationError
from low_level_drawing.shapes import AnchoredLine, Graph, Point
from low_level_drawing.vector import XY

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]

GRAPH_COLOR = "green"
GRAPH_POINT_RADIUS = 1.0
GRAPH_LINE_WIDTH = 2.0


def _edge_index(value: Any) -> int:
    # JSON numbers may arrive as floats; only whole values name a vertex.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ShapeConversionError(f"edge index {value!r} is not an integer")


@dataclass
class AbstractShape:
    """Any combination of vertices and index-pair edges."""

    vertices: List[XY] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "AbstractShape":
        """Build from a plain ``{"vertices": [...], "edges": [[i, j], ...]}`` payload."""
        if not isinstance(data, Mapping):
            raise ShapeValidationError(f"shape payload must be an object, got {type(data).__name__}")
        try:
            vertices = [XY.coerce(v) for v in data.get("vertices", [])]
            edges = [(_edge_index(a), _edge_index(b)) for a, b in data.get("edges", [])]
        except ShapeConversionError:
            raise
        except (TypeError, ValueError) as exc:
            raise ShapeValidationError(f"malformed shape payload: {exc}") from exc
        return cls(vertices=vertices, edges=edges)

    def add_vertex(self, vertex: XY) -> None:
        self.vertices.append(vertex)

    def add_edge(self, start: int, end: int) -> None:
        # Edges may legitimately be added before their vertices.
        for index in (start, end):
            if index >= len(self.vertices):
                logger.warning("Edge added with vertex index %d, which does not exist yet", index)
        self.edges.append((start, end))

    def dangling_edges(self) -> List[Edge]:
        count = len(self.vertices)
        return [(a, b) for a, b in self.edges if not (0 <= a < count and 0 <= b < count)]


ShapeSource = Union[AbstractShape, Mapping[str, Any]]


def shape_to_graph(
    shape: ShapeSource,
    *,
    color: str = GRAPH_COLOR,
    point_radius: float = GRAPH_POINT_RADIUS,
    line_width: float = GRAPH_LINE_WIDTH,
) -> Graph:
    """Convert an abstract shape into point markers joined by anchored lines.

    Each line references the two ``Point`` objects of its edge, so relocating a
    vertex marker after conversion moves its incident lines too. Out-of-range
    edge indices raise ``ShapeConversionError`` and no graph is returned.
    """
    if not isinstance(shape, AbstractShape):
        shape = AbstractShape.from_data(shape)
    dangling = shape.dangling_edges()
    if dangling:
        raise ShapeConversionError(
            f"edges {dangling} reference vertices outside 0..{len(shape.vertices) - 1}"
        )
    points = [Point(vertex, point_radius, color, color) for vertex in shape.vertices]
    lines = [AnchoredLine(points[a], points[b], line_width, color) for a, b in shape.edges]
    logger.debug("Converted shape into graph with %d points and %d lines", len(points), len(lines))
    return Graph(points=points, lines=lines)


def shapes_to_graphs(shapes: Sequence[ShapeSource], **style: Any) -> List[Graph]:
    return [shape_to_graph(shape, **style) for shape in shapes]


__all__ = ["AbstractShape", "Edge", "shape_to_graph", "shapes_to_graphs"]
