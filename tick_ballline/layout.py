"""Static ball layout and dynamic ball travel range."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_ballline.config import BallLineConfig
from tick_ballline.types import Circle, Layout, LayoutError, MotionBounds

if TYPE_CHECKING:
    from tick_ballline.render import HostSurface

logger = logging.getLogger(__name__)

_GeometryKey = tuple[float, float, float, float]


def compute_layout(
    width: float,
    height: float,
    padding_left: float,
    padding_right: float,
    config: BallLineConfig,
) -> Layout:
    """Lay out ``config.ball_count`` balls in a row, centered vertically.

    Horizontal space is measured in static ball diameters: N balls plus
    N + 1 gaps of ``ball_gap_ratio`` diameters each. The radius is the
    smaller of the height-bound and width-bound candidates.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"surface must have a nonzero size, got {width}x{height}")

    count = config.ball_count
    if count < 1:
        raise LayoutError(f"ball_count must be at least 1, got {count}")
    gap = config.ball_gap_ratio
    span = width - padding_left - padding_right
    diameter_count = (count + 1) * gap + count
    if diameter_count <= 0:
        raise LayoutError(
            f"diameter count must be positive, got {diameter_count} "
            f"(ball_count={count}, ball_gap_ratio={gap})"
        )
    if span <= 0:
        raise LayoutError(f"no horizontal room: width {width} minus padding leaves {span}")

    if height * diameter_count < span:
        radius = height / 2
    else:
        radius = span / diameter_count / 2

    y = height / 2
    balls = tuple(
        Circle(
            x=padding_left + radius * (2 * gap * (i + 1) + 2 * i + 1),
            y=y,
            radius=radius,
        )
        for i in range(count)
    )

    dynamic_radius = radius * config.ball_size_ratio
    bounds = MotionBounds(
        min_x=padding_left + dynamic_radius,
        max_x=padding_left + radius * (2 * count + 2 * gap * (count + 1)) - dynamic_radius,
    )
    return Layout(static_balls=balls, dynamic_radius=dynamic_radius, bounds=bounds)


class LayoutCache:
    """Lazily computed layout, reused until the surface geometry changes."""

    def __init__(self, config: BallLineConfig) -> None:
        self._config = config
        self._layout: Layout | None = None
        self._key: _GeometryKey | None = None
        self._dirty = True
        self._computations = 0

    @property
    def config(self) -> BallLineConfig:
        return self._config

    @property
    def layout(self) -> Layout | None:
        return self._layout

    @property
    def computations(self) -> int:
        return self._computations

    def invalidate(self) -> None:
        self._dirty = True

    def get(self, surface: HostSurface) -> Layout | None:
        """Return the layout for ``surface``.

        Returns None while the surface has no size yet, or while its padding
        leaves no horizontal room. Either way the caller draws nothing.
        """
        width = surface.width()
        height = surface.height()
        if width <= 0 or height <= 0:
            return None
        left = surface.padding_left()
        right = surface.padding_right()
        if width - left - right <= 0:
            return None

        key = (width, height, left, right)
        if self._dirty or key != self._key:
            self._layout = compute_layout(width, height, key[2], key[3], self._config)
            self._key = key
            self._dirty = False
            self._computations += 1
            logger.debug(
                "Laid out %d balls for %dx%d: radius=%.2f bounds=(%.2f, %.2f)",
                self._config.ball_count,
                width,
                height,
                self._layout.static_radius,
                self._layout.bounds.min_x,
                self._layout.bounds.max_x,
            )
        return self._layout
