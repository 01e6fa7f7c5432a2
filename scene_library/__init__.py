"""Composite drawables assembled from the low-level shapes."""

from .axis import Axis
from .forces import Force, force_arrow, force_arrows, grid_origins, vector_field
from .graph import AbstractShape, shape_to_graph, shapes_to_graphs
from .ship import (
    SailSpecs,
    ShipSpecs,
    ShipPose,
    ShipDescriptor,
    ShipModel,
    ship_pre_polygons,
    centered_rectangle,
    bar,
)

__all__ = [
    "Axis",
    "Force",
    "force_arrow",
    "force_arrows",
    "grid_origins",
    "vector_field",
    "AbstractShape",
    "shape_to_graph",
    "shapes_to_graphs",
    "SailSpecs",
    "ShipSpecs",
    "ShipPose",
    "ShipDescriptor",
    "ShipModel",
    "ship_pre_polygons",
    "centered_rectangle",
    "bar",
]
