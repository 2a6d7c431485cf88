"""tick-ballline - A row of balls joined to a moving ball by bezier connectors."""
from __future__ import annotations

from tick_ballline.clock import Clock
from tick_ballline.config import DEFAULT_CONFIG, LEGACY_CONFIG, BallLineConfig, from_mapping, parse_color
from tick_ballline.driver import INFINITE, AnimationDriver, AnimationState, ProgressDriver, RepeatMode
from tick_ballline.easing import EASINGS
from tick_ballline.geometry import MERGE_RULES, is_connect, is_fully_intersect, is_intersect, should_connect
from tick_ballline.layout import LayoutCache, compute_layout
from tick_ballline.motion import dynamic_circle, dynamic_x
from tick_ballline.path import LineTo, MoveTo, QuadTo, connector_path, flatten_path
from tick_ballline.render import (
    BallLineView,
    CommandRecorder,
    DrawCircle,
    DrawPath,
    FixedSurface,
    HostSurface,
    RenderBackend,
)
from tick_ballline.types import Circle, Layout, LayoutError, MotionBounds

__all__ = [
    "AnimationDriver",
    "AnimationState",
    "BallLineConfig",
    "BallLineView",
    "Circle",
    "Clock",
    "CommandRecorder",
    "DEFAULT_CONFIG",
    "DrawCircle",
    "DrawPath",
    "EASINGS",
    "FixedSurface",
    "HostSurface",
    "INFINITE",
    "LEGACY_CONFIG",
    "Layout",
    "LayoutCache",
    "LayoutError",
    "LineTo",
    "MERGE_RULES",
    "MotionBounds",
    "MoveTo",
    "ProgressDriver",
    "QuadTo",
    "RenderBackend",
    "RepeatMode",
    "compute_layout",
    "connector_path",
    "dynamic_circle",
    "dynamic_x",
    "flatten_path",
    "from_mapping",
    "is_connect",
    "is_fully_intersect",
    "is_intersect",
    "parse_color",
    "should_connect",
]
