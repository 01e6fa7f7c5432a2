"""The pygame surface adapter rasterizes recorded paths headlessly."""
from __future__ import annotations

import logging
import math
import os
from pathlib import Path
import sys

# Allow pygame to run without a real display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

BASE = Path(__file__).resolve().parents[1]
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))

import pygame  # noqa: E402
import pytest  # noqa: E402

from core.viewport import Viewport  # noqa: E402
from low_level_drawing.shapes import Line, Point, Polygon, Polyline, Rectangle  # noqa: E402
from low_level_drawing.surface import PygameSurface  # noqa: E402
from low_level_drawing.vector import XY  # noqa: E402

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLACK = (0, 0, 0, 255)


def _canvas(size: int = 40) -> pygame.Surface:
    target = pygame.Surface((size, size))
    target.fill((0, 0, 0))
    return target


def test_rectangle_fill() -> None:
    target = _canvas()
    Rectangle(XY(5.0, 5.0), XY(10.0, 10.0), fill="#ff0000").render(PygameSurface(target))
    assert tuple(target.get_at((10, 10))) == RED
    assert tuple(target.get_at((30, 30))) == BLACK


def test_point_fill_and_stroke() -> None:
    target = _canvas()
    Point(XY(20.0, 20.0), 5.0, "#00ff00", "#ff0000").render(PygameSurface(target))
    assert tuple(target.get_at((20, 20))) == GREEN
    assert tuple(target.get_at((2, 2))) == BLACK


def test_line_and_polyline_strokes() -> None:
    target = _canvas()
    surface = PygameSurface(target)
    Line(XY(0.0, 10.0), XY(39.0, 10.0), 1.0, "#ff0000").render(surface)
    Polyline([XY(0.0, 30.0), XY(20.0, 30.0), XY(20.0, 39.0)], 1.0, "#00ff00").render(surface)
    assert tuple(target.get_at((15, 10))) == RED
    assert tuple(target.get_at((10, 30))) == GREEN
    assert tuple(target.get_at((20, 35))) == GREEN
    assert tuple(target.get_at((10, 35))) == BLACK


def test_polygon_fill() -> None:
    target = _canvas()
    triangle = [XY(0.0, 0.0), XY(39.0, 0.0), XY(0.0, 39.0)]
    Polygon(triangle, fill="#00ff00").render(PygameSurface(target))
    assert tuple(target.get_at((5, 5))) == GREEN
    assert tuple(target.get_at((35, 35))) == BLACK


def test_partial_arc_becomes_path() -> None:
    target = _canvas()
    surface = PygameSurface(target)
    surface.begin_path()
    surface.move_to(20.0, 20.0)
    surface.arc(20.0, 20.0, 15.0, 0.0, math.pi)
    surface.close_path()
    surface.fill("#ff0000")
    assert tuple(target.get_at((20, 28))) == RED
    assert tuple(target.get_at((20, 12))) == BLACK


def test_unknown_color_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    target = _canvas()
    with caplog.at_level(logging.WARNING, logger="low_level_drawing.surface"):
        Rectangle(XY(0.0, 0.0), XY(40.0, 40.0), fill="not-a-color").render(PygameSurface(target))
    assert tuple(target.get_at((20, 20))) == BLACK
    assert "not-a-color" in caplog.text


def test_viewport_mapping() -> None:
    target = _canvas()
    viewport = Viewport((40, 40), zoom=2.0)
    surface = PygameSurface(target, to_screen=viewport.world_to_screen, scale=viewport.zoom)
    Rectangle(XY(2.0, 2.0), XY(4.0, 4.0), fill="#00ff00").render(surface)
    # Scene (3, 3) sits up and to the right of the window center.
    assert tuple(target.get_at((26, 14))) == GREEN
    assert tuple(target.get_at((14, 26))) == BLACK
