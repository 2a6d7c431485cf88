"""Value types and errors shared across tick-ballline."""
from __future__ import annotations

from dataclasses import dataclass

ColorRGB = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Circle:
    x: float
    y: float
    radius: float


@dataclass(frozen=True, slots=True)
class MotionBounds:
    """Horizontal travel range of the dynamic circle's center."""

    min_x: float
    max_x: float


@dataclass(frozen=True)
class Layout:
    """Result of one layout pass.

    ``static_balls`` are ordered left to right and share ``y`` and radius.
    """

    static_balls: tuple[Circle, ...]
    dynamic_radius: float
    bounds: MotionBounds

    @property
    def y(self) -> float:
        return self.static_balls[0].y

    @property
    def static_radius(self) -> float:
        return self.static_balls[0].radius


class LayoutError(ValueError):
    """Raised when a configuration cannot produce a layout (e.g. zero diameter count)."""
