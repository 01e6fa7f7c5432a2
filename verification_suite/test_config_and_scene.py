"""Settings and scene files load from JSON and build drawables."""
from __future__ import annotations

import json
from pathlib import Path
import sys

BASE = Path(__file__).resolve().parents[1]
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))

import pytest

from core.config import AxisConfig, RenderSettings, SceneConfig, load_json
from core.scene import build_scene, load_scene, save_scene
from low_level_drawing.errors import ConfigError, ShapeValidationError
from low_level_drawing.shapes import Graph
from low_level_drawing.vector import XY
from scene_library.axis import Axis
from scene_library.ship import ShipDescriptor, ShipModel


def test_bundled_scene_builds() -> None:
    scene = load_scene(BASE / "scenes" / "harbor.json")
    assert scene.name == "harbor"
    assert scene.render.window_size == (900, 600)
    drawables = build_scene(scene)
    assert isinstance(drawables[0], Axis)
    assert sum(isinstance(d, Graph) for d in drawables) == 2
    assert isinstance(drawables[-1], ShipModel)


def test_scene_roundtrip(tmp_path: Path) -> None:
    scene = SceneConfig(
        name="roundtrip",
        axis=AxisConfig(dimensions=(10.0, 8.0), steps=(2.0, 2.0), grid=True),
        ships=[
            ShipDescriptor(
                hull=[XY(-1.0, 1.0), XY(1.0, 1.0), XY(1.0, -1.0)],
                rudder=[(-1.0, 0.0)],
                sails=[[(0.0, 0.0), (0.5, 0.0)]],
                hull_color="navy",
                center=XY(0.0, 0.0),
            )
        ],
        shapes=[{"vertices": [[0, 0], [1, 1]], "edges": [[0, 1]]}],
    )
    path = tmp_path / "nested" / "scene.json"
    save_scene(path, scene)
    loaded = load_scene(path)
    assert loaded.name == "roundtrip"
    assert loaded.axis.grid is True
    assert loaded.ships[0].hull_color == "navy"
    model = ShipModel.from_descriptor(loaded.ships[0])
    assert model.hull.points[0] == XY(-1.0, 1.0)
    axis = loaded.axis.to_axis()
    assert axis.dimensions == XY(10.0, 8.0)


def test_defaults_fill_missing_fields(tmp_path: Path) -> None:
    path = tmp_path / "partial.json"
    path.write_text('{"render": {"target_fps": 30}}', encoding="utf-8")
    scene = load_json(path, SceneConfig)
    assert scene.render.target_fps == 30
    assert scene.render.graph_color == RenderSettings().graph_color
    assert scene.ships == []


def test_unknown_field_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"render": {"frames_per_second": 30}}', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_json(path, SceneConfig)


def test_invalid_json_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_json(path, SceneConfig)


def test_invalid_average_window() -> None:
    with pytest.raises(ConfigError):
        RenderSettings(average_window=0)


def test_scalar_in_list_field_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "ships.json"
    path.write_text('{"ships": 5}', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_json(path, SceneConfig)


def test_short_window_size_is_rejected() -> None:
    with pytest.raises(ConfigError):
        RenderSettings(window_size=[1])
    with pytest.raises(ConfigError):
        RenderSettings(zoom_limits=("low", 4.0))


def test_non_object_shape_entry_fails_with_validation_error(tmp_path: Path) -> None:
    path = tmp_path / "shapes.json"
    path.write_text('{"shapes": [[[0, 0], [1, 1]]]}', encoding="utf-8")
    scene = load_scene(path)
    with pytest.raises(ShapeValidationError):
        build_scene(scene)


def test_saved_scene_spells_out_defaults(tmp_path: Path) -> None:
    path = tmp_path / "exported.json"
    save_scene(path, SceneConfig(name="bare"))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["render"]["window_size"] == [900, 600]
    assert data["axis"]["steps"] == [5.0, 5.0]
    assert data["wind"] == [0.0, 0.0]
