"""Dynamic ball position as a function of animation progress."""
from __future__ import annotations

from tick_ballline.types import Circle, Layout, MotionBounds


def dynamic_x(progress: float, bounds: MotionBounds) -> float:
    """Linear interpolation between the bounds. Easing is the driver's job."""
    t = min(max(progress, 0.0), 1.0)
    x = bounds.min_x + t * (bounds.max_x - bounds.min_x)
    return min(max(x, bounds.min_x), bounds.max_x)


def dynamic_circle(progress: float, layout: Layout) -> Circle:
    return Circle(
        x=dynamic_x(progress, layout.bounds),
        y=layout.y,
        radius=layout.dynamic_radius,
    )
