"""Scene file loading and conversion of a scene config into drawables."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from low_level_drawing.shapes import Drawable
from scene_library.graph import shape_to_graph
from scene_library.ship import ShipModel

from .config import SceneConfig, load_json, save_json

logger = logging.getLogger(__name__)


def load_scene(path: Path) -> SceneConfig:
    scene = load_json(path, SceneConfig)
    logger.info(
        "Loaded scene '%s' from %s (%d ships, %d shapes)",
        scene.name,
        path,
        len(scene.ships),
        len(scene.shapes),
    )
    return scene


def save_scene(path: Path, scene: SceneConfig) -> None:
    """Write ``scene`` with every default spelled out."""
    save_json(path, scene)
    logger.info("Saved scene '%s' to %s", scene.name, path)


def build_scene(scene: SceneConfig) -> List[Drawable]:
    """Static drawables for a scene, bottom layer first: axis, graphs, ships."""
    render = scene.render
    drawables: List[Drawable] = [scene.axis.to_axis()]
    for shape in scene.shapes:
        drawables.append(
            shape_to_graph(
                shape,
                color=render.graph_color,
                point_radius=render.graph_point_radius,
                line_width=render.graph_line_width,
            )
        )
    for descriptor in scene.ships:
        drawables.append(ShipModel.from_descriptor(descriptor))
    return drawables


__all__ = ["load_scene", "save_scene", "build_scene"]
