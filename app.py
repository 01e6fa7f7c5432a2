"""Interactive scene viewer with pygame + pygame_gui."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import pygame
import pygame_gui

from core import DrawBuffer, SceneConfig, Viewport, build_scene, load_scene, save_scene, setup_logging
from low_level_drawing.performance import RollingAverage
from low_level_drawing.shapes import Drawable
from low_level_drawing.surface import PygameSurface
from low_level_drawing.vector import XY
from scene_library.axis import Axis
from scene_library.forces import grid_origins, vector_field

ASSET_PATH = Path(__file__).parent
DEFAULT_SCENE = ASSET_PATH / "scenes" / "harbor.json"

ZOOM_STEP = 1.15
PAN_PIXELS = 40

logger = logging.getLogger(__name__)


class ViewerApp:
    """Owns the event loop; the drawing core only decides how shapes are painted."""

    def __init__(self, scene: SceneConfig) -> None:
        pygame.init()
        pygame.display.set_caption(f"Scene Viewer - {scene.name}")
        self.scene = scene
        self.settings = scene.render
        self.window_size = self.settings.window_size
        self.window_surface = pygame.display.set_mode(self.window_size)
        self.manager = pygame_gui.UIManager(self.window_size)
        self.clock = pygame.time.Clock()
        self.running = True
        self.viewport = Viewport(
            self.window_size,
            zoom=self.settings.pixels_per_unit,
            zoom_limits=self.settings.zoom_limits,
        )
        self.draw_buffer = DrawBuffer()
        self.frame_times = RollingAverage(self.settings.average_window)
        self.static_drawables: List[Drawable] = build_scene(scene)
        self.axis: Optional[Axis] = next((d for d in self.static_drawables if isinstance(d, Axis)), None)
        self.wind_arrows = self._build_wind_field()
        self._build_ui()

    def _build_ui(self) -> None:
        self.btn_grid = pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect((10, 10), (90, 28)), text="Grid", manager=self.manager
        )
        self.btn_home = pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect((110, 10), (90, 28)), text="Home", manager=self.manager
        )
        self.btn_tracking = pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect((210, 10), (120, 28)), text="Tracking: off", manager=self.manager
        )
        self.frame_label = pygame_gui.elements.UILabel(
            relative_rect=pygame.Rect((340, 10), (260, 28)), text="frame: --", manager=self.manager
        )

    def _build_wind_field(self) -> List[Drawable]:
        wind = XY.coerce(self.scene.wind)
        if wind.magnitude() == 0.0 or self.axis is None:
            return []
        origins = grid_origins(self.axis.dimensions, self.axis.steps)
        if not origins:
            logger.warning("Wind field skipped: axis steps %s do not sample the scene", self.axis.steps)
        return vector_field(origins, lambda _origin: wind, stroke=self.settings.force_color)

    def run(self) -> None:
        while self.running:
            dt_ms = self.clock.tick(self.settings.target_fps)
            self.frame_times.add(float(dt_ms))
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_key(event.key)
                elif event.type == pygame.MOUSEWHEEL:
                    factor = ZOOM_STEP if event.y > 0 else 1 / ZOOM_STEP
                    self.viewport.adjust_zoom(factor, anchor=pygame.mouse.get_pos())
                self._handle_ui_event(event)
                self.manager.process_events(event)
            self.manager.update(dt_ms / 1000.0)
            self._update_label()
            self._draw()
        pygame.quit()

    def _handle_key(self, key: int) -> None:
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.running = False
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS, pygame.K_LEFTBRACKET):
            self.viewport.adjust_zoom(1 / ZOOM_STEP)
        elif key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS, pygame.K_RIGHTBRACKET):
            self.viewport.adjust_zoom(ZOOM_STEP)
        elif key == pygame.K_g:
            self._toggle_grid()
        elif key in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN):
            dx = {pygame.K_LEFT: -PAN_PIXELS, pygame.K_RIGHT: PAN_PIXELS}.get(key, 0)
            dy = {pygame.K_UP: PAN_PIXELS, pygame.K_DOWN: -PAN_PIXELS}.get(key, 0)
            self.viewport.center_on(self.viewport.center.add(XY(dx, dy).scale(1.0 / self.viewport.zoom)))

    def _handle_ui_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame_gui.UI_BUTTON_PRESSED:
            return
        if event.ui_element == self.btn_grid:
            self._toggle_grid()
        elif event.ui_element == self.btn_home:
            self.viewport.center_on(XY.zeros(), self.settings.pixels_per_unit)
        elif event.ui_element == self.btn_tracking:
            tracking = not self.viewport.settings.tracking
            self.viewport.settings.update(tracking=tracking)
            self.btn_tracking.set_text(f"Tracking: {'on' if tracking else 'off'}")

    def _toggle_grid(self) -> None:
        if self.axis is not None:
            self.axis.grid = not self.axis.grid

    def _update_label(self) -> None:
        average = self.frame_times.get()
        if average is None:
            return
        fps = 1000.0 / average if average > 0 else 0.0
        center = self.viewport.center.to_string_fixed(1)
        self.frame_label.set_text(f"frame: {average:.1f} ms ({fps:.0f} fps) at {center}")

    def _draw(self) -> None:
        self.window_surface.fill(pygame.Color(self.settings.background))
        surface = PygameSurface(
            self.window_surface,
            to_screen=self.viewport.world_to_screen,
            scale=self.viewport.zoom,
        )
        self.draw_buffer.clear()
        self.draw_buffer.extend(self.static_drawables)
        self.draw_buffer.extend(self.wind_arrows)
        self.draw_buffer.render(surface)
        self.manager.draw_ui(self.window_surface)
        pygame.display.update()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="View a scene file.")
    parser.add_argument("scene", nargs="?", type=Path, default=DEFAULT_SCENE)
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--log-dir", type=Path, default=None)
    parser.add_argument(
        "--export",
        type=Path,
        default=None,
        help="write the scene with all defaults filled in to this path and exit",
    )
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_dir)
    scene = load_scene(args.scene)
    if args.export is not None:
        save_scene(args.export, scene)
        return
    app = ViewerApp(scene)
    app.run()


if __name__ == "__main__":
    main()
