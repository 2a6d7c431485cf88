"""Pure pairwise predicates over circles on a shared horizontal line."""
from __future__ import annotations

from typing import Callable

from tick_ballline.types import Circle


def is_connect(a: Circle, b: Circle) -> bool:
    """Centers closer than three radii of the bigger ball (the attraction range)."""
    big_radius = max(a.radius, b.radius)
    return abs(a.x - b.x) < 3 * big_radius


def is_intersect(a: Circle, b: Circle) -> bool:
    """Disks overlap at all."""
    return abs(a.x - b.x) < a.radius + b.radius


def is_fully_intersect(a: Circle, b: Circle) -> bool:
    """Smaller disk lies entirely inside the bigger one."""
    return abs(a.x - b.x) < abs(a.radius - b.radius)


MERGE_RULES: dict[str, Callable[[Circle, Circle], bool]] = {
    "intersect": is_intersect,
    "full_intersect": is_fully_intersect,
}


def should_connect(a: Circle, b: Circle, merge_rule: str = "full_intersect") -> bool:
    """Connector is drawn when in attraction range and not yet merged.

    Raises KeyError for an unknown ``merge_rule``.
    """
    merged = MERGE_RULES[merge_rule]
    return is_connect(a, b) and not merged(a, b)
