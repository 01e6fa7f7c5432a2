"""Low-level drawing layer: vectors, drawables and surface adapters."""

from .vector import XY
from .errors import CanvasError, ShapeValidationError, ShapeConversionError, ConfigError
from .shapes import (
    BORDER_WIDTH,
    ARROW_HEAD_ANGLE,
    Style,
    Drawable,
    Rectangle,
    Point,
    Line,
    AnchoredLine,
    Polyline,
    Polygon,
    Arrow,
    Graph,
    render_all,
)
from .performance import RollingAverage
from .diagnostics import RecordingSurface, FrameRecorder, FrameSnapshot

__all__ = [
    "XY",
    "CanvasError",
    "ShapeValidationError",
    "ShapeConversionError",
    "ConfigError",
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
    "RollingAverage",
    "RecordingSurface",
    "FrameRecorder",
    "FrameSnapshot",
]
