"""Ball line configuration and validate-or-default loading."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping

from tick_ballline.geometry import MERGE_RULES
from tick_ballline.types import ColorRGB

logger = logging.getLogger(__name__)

MIN_SIZE_RATIO = 0.5
MAX_SIZE_RATIO = 1.0
MAX_GAP_RATIO = 1.5

BLUE: ColorRGB = (0, 0, 255)
RED: ColorRGB = (255, 0, 0)

NAMED_COLORS: dict[str, ColorRGB] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": RED,
    "green": (0, 255, 0),
    "blue": BLUE,
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "gray": (136, 136, 136),
}


@dataclass(frozen=True)
class BallLineConfig:
    """Immutable configuration for one ball line.

    Attributes:
        ball_count: Number of static balls.
        ball_color: Fill color for balls and connectors.
        ball_size_ratio: Dynamic ball radius relative to a static ball.
        ball_gap_ratio: Gap between static balls, in static ball diameters.
        merge_rule: Name of the predicate in ``geometry.MERGE_RULES`` that
            suppresses the connector once the balls have merged.
    """

    ball_count: int = 5
    ball_color: ColorRGB = BLUE
    ball_size_ratio: float = 0.75
    ball_gap_ratio: float = 1.0
    merge_rule: str = "full_intersect"


DEFAULT_CONFIG = BallLineConfig()

# First widget revision: 4 red balls, 1.5-diameter gaps, plain overlap merge.
LEGACY_CONFIG = BallLineConfig(
    ball_count=4,
    ball_color=RED,
    ball_gap_ratio=1.5,
    merge_rule="intersect",
)

_KEYS = ("ball_count", "ball_color", "ball_size_ratio", "ball_gap_ratio", "merge_rule")


def parse_color(value: Any) -> ColorRGB | None:
    """Parse an RGB tuple, ``#RRGGBB`` string or color name. Returns None if invalid."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text in NAMED_COLORS:
            return NAMED_COLORS[text]
        if text.startswith("#") and len(text) == 7:
            try:
                return (int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))
            except ValueError:
                return None
        return None
    if isinstance(value, (tuple, list)) and len(value) == 3:
        if all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value):
            return (value[0], value[1], value[2])
    return None


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _fallback(key: str, value: Any, default: Any) -> Any:
    logger.warning("Invalid %s %r, falling back to %r", key, value, default)
    return default


def from_mapping(
    values: Mapping[str, Any],
    defaults: BallLineConfig = DEFAULT_CONFIG,
) -> BallLineConfig:
    """Build a config from flat named values, replacing invalid ones with defaults.

    ``ball_gap_ratio`` is checked against the resolved ``ball_size_ratio``,
    so it must be in ``[ball_size_ratio, 1.5]``.
    """
    for key in values:
        if key not in _KEYS:
            logger.warning("Ignoring unknown ball line setting %r", key)

    count = defaults.ball_count
    if "ball_count" in values:
        raw = values["ball_count"]
        num = _as_int(raw)
        if num is not None and num >= 1:
            count = num
        else:
            count = _fallback("ball_count", raw, defaults.ball_count)

    color = defaults.ball_color
    if "ball_color" in values:
        raw = values["ball_color"]
        parsed = parse_color(raw)
        color = parsed if parsed is not None else _fallback("ball_color", raw, defaults.ball_color)

    size_ratio = defaults.ball_size_ratio
    if "ball_size_ratio" in values:
        raw = values["ball_size_ratio"]
        num = _as_float(raw)
        if num is not None and MIN_SIZE_RATIO <= num <= MAX_SIZE_RATIO:
            size_ratio = num
        else:
            size_ratio = _fallback("ball_size_ratio", raw, defaults.ball_size_ratio)

    gap_ratio = defaults.ball_gap_ratio
    if "ball_gap_ratio" in values:
        raw = values["ball_gap_ratio"]
        num = _as_float(raw)
        if num is not None and size_ratio <= num <= MAX_GAP_RATIO:
            gap_ratio = num
        else:
            gap_ratio = _fallback("ball_gap_ratio", raw, defaults.ball_gap_ratio)

    merge_rule = defaults.merge_rule
    if "merge_rule" in values:
        raw = values["merge_rule"]
        if isinstance(raw, str) and raw in MERGE_RULES:
            merge_rule = raw
        else:
            merge_rule = _fallback("merge_rule", raw, defaults.merge_rule)

    return replace(
        defaults,
        ball_count=count,
        ball_color=color,
        ball_size_ratio=size_ratio,
        ball_gap_ratio=gap_ratio,
        merge_rule=merge_rule,
    )
