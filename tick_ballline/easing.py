"""Easing curves mapping linear time in [0, 1] to animation progress."""
from __future__ import annotations

import math
from typing import Callable


def linear(t: float) -> float:
    return t


def accelerate(t: float, factor: float = 1.0) -> float:
    """Starts slow, ends fast. ``factor`` 1.0 is a parabola."""
    return t ** (2 * factor)


def decelerate(t: float, factor: float = 1.0) -> float:
    """Mirror of ``accelerate``: starts fast, ends slow."""
    return 1.0 - (1.0 - t) ** (2 * factor)


def accelerate_decelerate(t: float) -> float:
    """Cosine ease: slow at both ends, fastest through the middle."""
    return math.cos((t + 1) * math.pi) / 2.0 + 0.5


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "accelerate": accelerate,
    "decelerate": decelerate,
    "accelerate_decelerate": accelerate_decelerate,
}
