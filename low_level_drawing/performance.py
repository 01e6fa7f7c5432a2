"""Streaming mean over a fixed window, used for frame-time telemetry."""
from __future__ import annotations

from typing import List, Optional

DEFAULT_HISTORY_SIZE = 50


class RollingAverage:
    """O(1) running mean of the last ``history_size`` values.

    While the window is filling the mean is updated incrementally; once full,
    the oldest value is evicted from a circular buffer. The mean is never
    resynchronized against the true sum, so long runs accumulate float drift.
    """

    def __init__(self, history_size: int = DEFAULT_HISTORY_SIZE) -> None:
        if history_size < 1:
            raise ValueError("history_size must be at least 1")
        self.history_size = history_size
        self.values: List[float] = []
        self.average: Optional[float] = None
        self.index = 0

    def add(self, value: float) -> None:
        seen = len(self.values)
        if seen < self.history_size:
            if seen == 0:
                self.average = value
            else:
                self.average = (self.average * seen + value) / (seen + 1)
            self.values.append(value)
            self.index = len(self.values) % self.history_size
            return
        old = self.values[self.index]
        self.values[self.index] = value
        self.average = self.average - old / self.history_size + value / self.history_size
        self.index = (self.index + 1) % self.history_size

    def get(self) -> Optional[float]:
        """Current mean, or ``None`` if nothing has been added since the last clear."""
        return self.average

    def clear(self) -> None:
        self.values = []
        self.average = None
        self.index = 0

    @property
    def full(self) -> bool:
        return len(self.values) >= self.history_size

    def __len__(self) -> int:
        return len(self.values)


__all__ = ["RollingAverage", "DEFAULT_HISTORY_SIZE"]
