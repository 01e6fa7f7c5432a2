"""Typed errors raised by the drawing layers."""
from __future__ import annotations


class CanvasError(Exception):
    """Base error for the drawing core."""


class ShapeValidationError(CanvasError, ValueError):
    """Caller supplied geometry that cannot form the requested shape."""


class ShapeConversionError(ShapeValidationError, IndexError):
    """An abstract shape references a vertex index that does not exist."""


class ConfigError(CanvasError):
    """A settings or descriptor payload is malformed."""


__all__ = ["CanvasError", "ShapeValidationError", "ShapeConversionError", "ConfigError"]
