"""Drawing surface contract and its pygame implementation."""
from __future__ import annotations

import logging
import math
from typing import Callable, Dict, List, Optional, Protocol, Tuple

try:  # pragma: no cover - pygame import is environment specific
    import pygame
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "Pygame is required to use the low_level_drawing.surface module."
    ) from exc

from .vector import XY

logger = logging.getLogger(__name__)

ScreenPoint = Tuple[int, int]

ARC_SEGMENTS = 32


class DrawingSurface(Protocol):
    """Primitive path operations every drawable renders through."""

    def begin_path(self) -> None:
        ...

    def move_to(self, x: float, y: float) -> None:
        ...

    def line_to(self, x: float, y: float) -> None:
        ...

    def arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None:
        ...

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        ...

    def close_path(self) -> None:
        ...

    def fill(self, color: str) -> None:
        ...

    def stroke(self, color: str, width: float) -> None:
        ...


class _Subpath:
    def __init__(self, start: XY) -> None:
        self.points: List[XY] = [start]
        self.closed = False


class _Circle:
    def __init__(self, center: XY, radius: float) -> None:
        self.center = center
        self.radius = radius


class PygameSurface:
    """Canvas-style path builder that flushes onto a ``pygame.Surface``.

    Path operations only accumulate geometry. ``fill`` and ``stroke`` rasterize
    the current path with ``pygame.draw``; the path stays open until the next
    ``begin_path`` so a shape can be filled and then stroked.
    """

    def __init__(
        self,
        target: pygame.Surface,
        *,
        to_screen: Optional[Callable[[XY], ScreenPoint]] = None,
        scale: float = 1.0,
    ) -> None:
        self.target = target
        self.to_screen = to_screen or (lambda p: (int(round(p.x)), int(round(p.y))))
        self.scale = scale
        self._subpaths: List[_Subpath] = []
        self._circles: List[_Circle] = []
        self._colors: Dict[str, Optional[pygame.Color]] = {}

    # --- Path construction ---------------------------------------------

    def begin_path(self) -> None:
        self._subpaths = []
        self._circles = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(_Subpath(XY(x, y)))

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].points.append(XY(x, y))

    def arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None:
        sweep = end_angle - start_angle
        if abs(sweep) >= 2 * math.pi:
            self._circles.append(_Circle(XY(cx, cy), radius))
            return
        steps = max(2, int(ARC_SEGMENTS * abs(sweep) / (2 * math.pi)) + 1)
        center = XY(cx, cy)
        for i in range(steps + 1):
            angle = start_angle + sweep * i / steps
            point = XY.from_angle(angle).scale(radius).add(center)
            self.line_to(point.x, point.y)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self.move_to(x, y)
        self.line_to(x + width, y)
        self.line_to(x + width, y + height)
        self.line_to(x, y + height)
        self.close_path()

    def close_path(self) -> None:
        if not self._subpaths:
            return
        current = self._subpaths[-1]
        current.closed = True
        # Drawing continues from the start of the closed subpath.
        self._subpaths.append(_Subpath(current.points[0]))

    # --- Rasterization -------------------------------------------------

    def fill(self, color: str) -> None:
        resolved = self._resolve(color)
        if resolved is None:
            return
        for sub in self._subpaths:
            if len(sub.points) >= 3:
                pygame.draw.polygon(self.target, resolved, [self.to_screen(p) for p in sub.points])
        for circle in self._circles:
            pygame.draw.circle(self.target, resolved, self.to_screen(circle.center), self._radius_px(circle))

    def stroke(self, color: str, width: float) -> None:
        resolved = self._resolve(color)
        if resolved is None:
            return
        width_px = max(1, int(round(width * self.scale)))
        for sub in self._subpaths:
            if len(sub.points) >= 2:
                points = [self.to_screen(p) for p in sub.points]
                pygame.draw.lines(self.target, resolved, sub.closed, points, width_px)
        for circle in self._circles:
            pygame.draw.circle(
                self.target, resolved, self.to_screen(circle.center), self._radius_px(circle), width_px
            )

    def _radius_px(self, circle: _Circle) -> int:
        return max(1, int(round(circle.radius * self.scale)))

    def _resolve(self, color: str) -> Optional[pygame.Color]:
        if color not in self._colors:
            try:
                self._colors[color] = pygame.Color(color)
            except ValueError:
                logger.warning("Unknown color %r; skipping paint", color)
                self._colors[color] = None
        return self._colors[color]


__all__ = ["DrawingSurface", "PygameSurface", "ScreenPoint"]
