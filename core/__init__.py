"""Viewer glue: settings, draw buffer, camera and logging."""

from .config import (  # noqa: F401
    RenderSettings,
    AxisConfig,
    SceneConfig,
    load_json,
    save_json,
)
from .draw_buffer import DrawBuffer  # noqa: F401
from .viewport import CanvasSettings, Viewport  # noqa: F401
from .log import setup_logging, get_logger  # noqa: F401
from .scene import build_scene, load_scene, save_scene  # noqa: F401
