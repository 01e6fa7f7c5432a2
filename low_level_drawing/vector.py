"""Immutable 2D vector / point value type used by every drawable."""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Dict, Tuple


def _ieee_div(a: float, b: float) -> float:
    """Float division that yields inf/nan for a zero divisor instead of raising."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True)
class XY:
    """A 2D vector or point. Every operation returns a new instance."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zeros(cls) -> "XY":
        return cls(0.0, 0.0)

    @classmethod
    def at_x(cls, x: float) -> "XY":
        return cls(x, 0.0)

    @classmethod
    def from_angle(cls, angle: float) -> "XY":
        """The point on the unit circle for an angle in radians."""
        return cls(math.cos(angle), math.sin(angle))

    @classmethod
    def coerce(cls, value: Any) -> "XY":
        """Accept an XY, an ``(x, y)`` pair or an ``{"x": .., "y": ..}`` mapping."""
        if isinstance(value, XY):
            return value
        if isinstance(value, dict):
            return cls(float(value["x"]), float(value["y"]))
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return cls(float(value[0]), float(value[1]))
        raise TypeError(f"cannot interpret {value!r} as a 2D vector")

    # --- Component-wise arithmetic -----------------------------------------

    def add(self, other: "XY") -> "XY":
        return XY(self.x + other.x, self.y + other.y)

    def sub(self, other: "XY") -> "XY":
        return XY(self.x - other.x, self.y - other.y)

    def mul(self, other: "XY") -> "XY":
        return XY(self.x * other.x, self.y * other.y)

    def div(self, other: "XY") -> "XY":
        # Zero components produce inf/nan, matching IEEE float division.
        return XY(_ieee_div(self.x, other.x), _ieee_div(self.y, other.y))

    def scale(self, s: float) -> "XY":
        return XY(self.x * s, self.y * s)

    def flip_y(self) -> "XY":
        """Negate y only, converting between y-up and y-down conventions."""
        return XY(self.x, -self.y)

    def swap(self) -> "XY":
        return XY(self.y, self.x)

    def __add__(self, other: "XY") -> "XY":
        return self.add(other)

    def __sub__(self, other: "XY") -> "XY":
        return self.sub(other)

    def __mul__(self, other: "XY") -> "XY":
        return self.mul(other)

    def __truediv__(self, other: "XY") -> "XY":
        return self.div(other)

    def __neg__(self) -> "XY":
        return XY(-self.x, -self.y)

    # --- Metrics -----------------------------------------------------------

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def direction(self) -> float:
        """Angle from the positive x axis in radians, in (-pi, pi]."""
        # Adding 0.0 folds -0.0 into 0.0 so a flipped negative x axis gives pi.
        return math.atan2(self.y + 0.0, self.x)

    def unit(self) -> "XY":
        return self.div(XY(self.magnitude(), self.magnitude()))

    def dist(self, other: "XY") -> float:
        return self.sub(other).magnitude()

    def angle_between(self, other: "XY") -> float:
        """Direction of the vector pointing from ``other`` to ``self``."""
        return self.sub(other).direction()

    # --- Transforms --------------------------------------------------------

    def rotate(self, angle: float) -> "XY":
        cos_t = math.cos(angle)
        sin_t = math.sin(angle)
        return XY(
            cos_t * self.x - sin_t * self.y,
            sin_t * self.x + cos_t * self.y,
        )

    def transform(self, angle: float, location: "XY") -> "XY":
        """Rotate about the origin, then translate to ``location``."""
        return self.rotate(angle).add(location)

    # --- Conversion / formatting -------------------------------------------

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def as_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    def to_string(self) -> str:
        return f"({self.x}, {self.y})"

    def to_string_fixed(self, digits: int) -> str:
        return f"({self.x:.{digits}f}, {self.y:.{digits}f})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["XY"]
