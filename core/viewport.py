"""Camera state mapping scene coordinates onto window pixels."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from low_level_drawing.vector import XY


@dataclass
class CanvasSettings:
    tracking: bool = False  # zoom about the view center instead of the cursor
    redraw: bool = False  # redraw right after camera moves, useful while paused

    def update(self, **changes: bool) -> None:
        for key, value in changes.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown canvas setting '{key}'")
            setattr(self, key, value)


class Viewport:
    """Scene y points up, screen y points down; ``zoom`` is pixels per unit."""

    def __init__(
        self,
        size: Tuple[int, int],
        *,
        center: XY = XY(0.0, 0.0),
        zoom: float = 8.0,
        zoom_limits: Optional[Tuple[float, float]] = None,
    ) -> None:
        self.size = size
        self.center = center
        min_zoom, max_zoom = zoom_limits if zoom_limits else (zoom * 0.25, zoom * 4.0)
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.zoom = self._clamp(zoom)
        self.settings = CanvasSettings()

    @property
    def screen_center(self) -> XY:
        return XY(self.size[0] / 2.0, self.size[1] / 2.0)

    def center_on(self, loc: XY, zoom: Optional[float] = None) -> None:
        self.center = loc
        if zoom is not None:
            self.zoom = self._clamp(zoom)

    def adjust_zoom(self, factor: float, anchor: Optional[Tuple[int, int]] = None) -> None:
        """Scale the zoom, keeping ``anchor`` (a screen pixel) fixed unless tracking."""
        new_zoom = self._clamp(self.zoom * factor)
        if anchor is not None and not self.settings.tracking:
            before = self.screen_to_world(anchor)
            self.zoom = new_zoom
            after = self.screen_to_world(anchor)
            self.center = self.center.add(before.sub(after))
            return
        self.zoom = new_zoom

    def world_to_screen(self, point: XY) -> Tuple[int, int]:
        offset = point.sub(self.center).flip_y().scale(self.zoom)
        screen = self.screen_center.add(offset)
        return int(round(screen.x)), int(round(screen.y))

    def screen_to_world(self, pos: Tuple[int, int]) -> XY:
        offset = XY(pos[0], pos[1]).sub(self.screen_center).scale(1.0 / self.zoom)
        return offset.flip_y().add(self.center)

    def _clamp(self, zoom: float) -> float:
        return max(self.min_zoom, min(self.max_zoom, zoom))


__all__ = ["CanvasSettings", "Viewport"]
