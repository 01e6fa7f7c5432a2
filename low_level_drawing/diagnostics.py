"""Diagnostics utilities for capturing the primitive calls a frame issues."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .shapes import Drawable

Call = Tuple[str, Tuple[Any, ...]]


class RecordingSurface:
    """Drawing surface that records every primitive call instead of painting."""

    def __init__(self) -> None:
        self.calls: List[Call] = []

    def begin_path(self) -> None:
        self.calls.append(("begin_path", ()))

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", (x, y)))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", (x, y)))

    def arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None:
        self.calls.append(("arc", (cx, cy, radius, start_angle, end_angle)))

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self.calls.append(("rect", (x, y, width, height)))

    def close_path(self) -> None:
        self.calls.append(("close_path", ()))

    def fill(self, color: str) -> None:
        self.calls.append(("fill", (color,)))

    def stroke(self, color: str, width: float) -> None:
        self.calls.append(("stroke", (color, width)))

    def ops(self) -> List[str]:
        return [name for name, _ in self.calls]

    def args_of(self, op: str) -> List[Tuple[Any, ...]]:
        return [args for name, args in self.calls if name == op]

    def clear(self) -> None:
        self.calls.clear()

    def __len__(self) -> int:
        return len(self.calls)


@dataclass
class FrameSnapshot:
    """Serializable record of the calls issued while rendering one frame."""

    frame: int
    calls: List[Call]
    drawables: int
    tag: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        payload = {
            "frame": self.frame,
            "drawables": self.drawables,
            "call_count": len(self.calls),
            "calls": [[name, list(args)] for name, args in self.calls],
            "metadata": dict(self.metadata),
        }
        if self.tag is not None:
            payload["tag"] = self.tag
        return payload


class FrameRecorder:
    """Renders drawables onto a recording surface and keeps one snapshot per frame."""

    def __init__(self) -> None:
        self._snapshots: List[FrameSnapshot] = []

    def record(
        self,
        drawables: Iterable[Drawable],
        *,
        tag: Optional[str] = None,
        extra_metadata: Optional[Dict[str, Any]] = None,
    ) -> FrameSnapshot:
        surface = RecordingSurface()
        count = 0
        for drawable in drawables:
            drawable.render(surface)
            count += 1
        snapshot = FrameSnapshot(
            frame=len(self._snapshots),
            calls=list(surface.calls),
            drawables=count,
            tag=tag,
            metadata=dict(extra_metadata or {}),
        )
        self._snapshots.append(snapshot)
        return snapshot

    def export(self) -> List[Dict[str, Any]]:
        return [snap.as_dict() for snap in self._snapshots]

    def clear(self) -> None:
        self._snapshots.clear()

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self):  # pragma: no cover - trivial delegator
        return iter(self._snapshots)


__all__ = ["RecordingSurface", "FrameSnapshot", "FrameRecorder"]
