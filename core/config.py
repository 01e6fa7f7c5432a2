"""Data models and JSON helpers for viewer settings and scene descriptors."""
from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
import json
from pathlib import Path
from typing import Any, Dict, List, Tuple, get_type_hints, get_origin, get_args

from low_level_drawing.errors import ConfigError
from low_level_drawing.vector import XY
from scene_library.axis import Axis
from scene_library.ship import ShipDescriptor

Point = Tuple[float, float]


def _pair(name: str, value: Any, convert) -> tuple:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(f"{name} must be a pair of numbers, got {value!r}")
    try:
        return (convert(value[0]), convert(value[1]))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be a pair of numbers: {exc}") from exc


@dataclass
class RenderSettings:
    background: str = "#14141a"
    window_size: Tuple[int, int] = (900, 600)
    target_fps: int = 60
    pixels_per_unit: float = 8.0
    zoom_limits: Tuple[float, float] = (1.0, 64.0)
    average_window: int = 50
    graph_color: str = "green"
    graph_point_radius: float = 1.0
    graph_line_width: float = 2.0
    force_color: str = "red"

    def __post_init__(self) -> None:
        self.window_size = _pair("window_size", self.window_size, int)
        self.zoom_limits = _pair("zoom_limits", self.zoom_limits, float)
        if self.average_window < 1:
            raise ConfigError("average_window must be at least 1")


@dataclass
class AxisConfig:
    dimensions: Point = (50.0, 30.0)
    steps: Point = (5.0, 5.0)
    grid: bool = False
    axes_color: str = "gray"
    step_color: str = "dimgray"

    def to_axis(self) -> Axis:
        return Axis(
            dimensions=XY.coerce(self.dimensions),
            steps=XY.coerce(self.steps),
            grid=self.grid,
            axes_color=self.axes_color,
            step_color=self.step_color,
        )


@dataclass
class SceneConfig:
    """Static scene loaded by the viewer: axes, ships and abstract shapes."""

    name: str = "scene"
    render: RenderSettings = field(default_factory=RenderSettings)
    axis: AxisConfig = field(default_factory=AxisConfig)
    ships: List[ShipDescriptor] = field(default_factory=list)
    shapes: List[Dict[str, Any]] = field(default_factory=list)
    wind: Point = (0.0, 0.0)
    metadata: Dict[str, object] = field(default_factory=dict)


def _dataclass_from_dict(cls, data: Dict) -> object:
    if not isinstance(data, dict):
        raise ConfigError(f"expected an object for {cls.__name__}, got {type(data).__name__}")
    field_types = get_type_hints(cls)
    kwargs = {}
    for key, value in data.items():
        if key not in field_types:
            raise ConfigError(f"unknown field '{key}' for {cls.__name__}")
        expected = field_types.get(key)
        origin = get_origin(expected)
        if origin is list:
            if not isinstance(value, list):
                raise ConfigError(f"field '{key}' of {cls.__name__} must be a list, got {type(value).__name__}")
            inner = get_args(expected)[0]
            if hasattr(inner, "__dataclass_fields__"):
                kwargs[key] = [_dataclass_from_dict(inner, v) for v in value]
                continue
        if hasattr(expected, "__dataclass_fields__"):
            kwargs[key] = _dataclass_from_dict(expected, value)
        else:
            kwargs[key] = value
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ConfigError(f"cannot build {cls.__name__}: {exc}") from exc


def load_json(path: Path, cls):
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path} is not valid JSON: {exc}") from exc
    return _dataclass_from_dict(cls, data)


def _to_plain(obj: Any) -> Any:
    """Dataclasses become objects, tuples become lists, everything else stays."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _to_plain(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, (list, tuple)):
        return [_to_plain(v) for v in obj]
    if isinstance(obj, dict):
        return {str(k): _to_plain(v) for k, v in obj.items()}
    return obj


def save_json(path: Path, obj) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(_to_plain(obj), f, indent=2)
    except OSError as exc:
        raise ConfigError(f"cannot write {path}: {exc}") from exc


__all__ = [
    "RenderSettings",
    "AxisConfig",
    "SceneConfig",
    "load_json",
    "save_json",
]
