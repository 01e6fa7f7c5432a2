"""Ordered per-frame collection of drawables."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, TYPE_CHECKING

from low_level_drawing.shapes import Drawable, render_all

if TYPE_CHECKING:  # pragma: no cover - only for static analyzers
    from low_level_drawing.surface import DrawingSurface

logger = logging.getLogger(__name__)


class DrawBuffer:
    """Filled once per frame, then rendered in insertion order.

    Later entries paint over earlier ones.
    """

    def __init__(self, drawables: Iterable[Drawable] = ()) -> None:
        self._drawables: List[Drawable] = list(drawables)

    def add(self, drawable: Drawable) -> None:
        self._drawables.append(drawable)

    def extend(self, drawables: Iterable[Drawable]) -> None:
        self._drawables.extend(drawables)

    def set(self, drawables: Iterable[Drawable]) -> None:
        self._drawables = list(drawables)

    def clear(self) -> None:
        self._drawables = []

    def render(self, surface: "DrawingSurface") -> int:
        render_all(self._drawables, surface)
        logger.debug("Rendered %d drawables", len(self._drawables))
        return len(self._drawables)

    def __len__(self) -> int:
        return len(self._drawables)

    def __iter__(self) -> Iterator[Drawable]:
        return iter(self._drawables)


__all__ = ["DrawBuffer"]
