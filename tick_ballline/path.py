"""Connector path commands and polygon flattening."""
from __future__ import annotations

from dataclasses import dataclass

from tick_ballline.types import Circle

Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Quadratic bezier from the current point to (x, y) through control (cx, cy)."""

    cx: float
    cy: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LineTo:
    x: float
    y: float


PathCommand = MoveTo | QuadTo | LineTo


def connector_path(a: Circle, b: Circle) -> tuple[PathCommand, ...]:
    """Closed shape bridging ``a`` and ``b``, pinched toward their midpoint.

    Both curves share the midpoint of the two centers as control point.
    """
    cx = (a.x + b.x) / 2
    cy = (a.y + b.y) / 2
    return (
        MoveTo(a.x, a.y - a.radius),
        QuadTo(cx, cy, b.x, b.y - b.radius),
        LineTo(b.x, b.y + b.radius),
        QuadTo(cx, cy, a.x, a.y + a.radius),
        LineTo(a.x, a.y - a.radius),
    )


def quad_point(p0: Point, control: Point, p1: Point, t: float) -> Point:
    u = 1.0 - t
    return (
        u * u * p0[0] + 2 * u * t * control[0] + t * t * p1[0],
        u * u * p0[1] + 2 * u * t * control[1] + t * t * p1[1],
    )


def flatten_path(commands: tuple[PathCommand, ...] | list[PathCommand], segments: int = 16) -> list[Point]:
    """Approximate a path as a polygon, sampling each curve ``segments`` times.

    A trailing point equal to the first one is dropped, since polygon
    fills close the outline themselves.
    """
    if segments < 1:
        raise ValueError("segments must be at least 1")

    points: list[Point] = []
    current: Point | None = None
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            current = (cmd.x, cmd.y)
            points.append(current)
        elif isinstance(cmd, LineTo):
            current = (cmd.x, cmd.y)
            points.append(current)
        elif isinstance(cmd, QuadTo):
            if current is None:
                raise ValueError("QuadTo before MoveTo")
            start = current
            end = (cmd.x, cmd.y)
            for i in range(1, segments + 1):
                points.append(quad_point(start, (cmd.cx, cmd.cy), end, i / segments))
            current = end

    if len(points) > 1 and points[-1] == points[0]:
        points.pop()
    return points
