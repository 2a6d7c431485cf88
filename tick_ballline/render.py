"""Per-frame draw command generation for a ball line."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from tick_ballline.config import DEFAULT_CONFIG, BallLineConfig
from tick_ballline.geometry import MERGE_RULES, should_connect
from tick_ballline.layout import LayoutCache
from tick_ballline.motion import dynamic_circle
from tick_ballline.path import PathCommand, connector_path
from tick_ballline.types import Circle, ColorRGB, Layout


class HostSurface(Protocol):
    def width(self) -> int: ...

    def height(self) -> int: ...

    def padding_left(self) -> int: ...

    def padding_right(self) -> int: ...

    def request_repaint(self) -> None: ...


class RenderBackend(Protocol):
    def draw_filled_circle(self, x: float, y: float, radius: float, color: ColorRGB) -> None: ...

    def draw_filled_closed_path(self, commands: tuple[PathCommand, ...], color: ColorRGB) -> None: ...


@dataclass(frozen=True, slots=True)
class DrawCircle:
    circle: Circle
    color: ColorRGB


@dataclass(frozen=True, slots=True)
class DrawPath:
    commands: tuple[PathCommand, ...]
    color: ColorRGB


DrawCommand = DrawCircle | DrawPath


class BallLineView:
    """Static balls plus one moving ball, with connectors between close pairs.

    Layout is computed on the first frame the surface has a size and
    reused until the surface geometry changes.
    """

    def __init__(self, config: BallLineConfig = DEFAULT_CONFIG) -> None:
        if config.merge_rule not in MERGE_RULES:
            raise KeyError(f"Unknown merge rule {config.merge_rule!r}")
        self._config = config
        self._cache = LayoutCache(config)

    @property
    def config(self) -> BallLineConfig:
        return self._config

    @property
    def layout(self) -> Layout | None:
        return self._cache.layout

    @property
    def layout_computations(self) -> int:
        return self._cache.computations

    def invalidate(self) -> None:
        self._cache.invalidate()

    def frame(self, surface: HostSurface, progress: float) -> list[DrawCommand]:
        """Draw commands for one frame: dynamic ball, then each static ball and its connector."""
        layout = self._cache.get(surface)
        if layout is None:
            return []

        color = self._config.ball_color
        moving = dynamic_circle(progress, layout)
        commands: list[DrawCommand] = [DrawCircle(moving, color)]
        for ball in layout.static_balls:
            commands.append(DrawCircle(ball, color))
            if should_connect(ball, moving, self._config.merge_rule):
                commands.append(DrawPath(connector_path(ball, moving), color))
        return commands

    def frame_callback(self, surface: HostSurface) -> Callable[[float], list[DrawCommand]]:
        def on_progress(progress: float) -> list[DrawCommand]:
            return self.frame(surface, progress)

        return on_progress

    def render(self, surface: HostSurface, backend: RenderBackend, progress: float) -> int:
        """Emit one frame to ``backend``. Returns the number of draw calls."""
        commands = self.frame(surface, progress)
        for cmd in commands:
            if isinstance(cmd, DrawCircle):
                c = cmd.circle
                backend.draw_filled_circle(c.x, c.y, c.radius, cmd.color)
            else:
                backend.draw_filled_closed_path(cmd.commands, cmd.color)
        return len(commands)


@dataclass
class FixedSurface:
    """Host surface with a settable size. Counts repaint requests."""

    w: int = 0
    h: int = 0
    left: int = 0
    right: int = 0
    repaints: int = 0

    def width(self) -> int:
        return self.w

    def height(self) -> int:
        return self.h

    def padding_left(self) -> int:
        return self.left

    def padding_right(self) -> int:
        return self.right

    def request_repaint(self) -> None:
        self.repaints += 1

    def resize(self, w: int, h: int) -> None:
        self.w = w
        self.h = h


@dataclass
class CommandRecorder:
    """Backend that records draw calls as ``(name, args)`` tuples."""

    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def draw_filled_circle(self, x: float, y: float, radius: float, color: ColorRGB) -> None:
        self.calls.append(("circle", (x, y, radius, color)))

    def draw_filled_closed_path(self, commands: tuple[PathCommand, ...], color: ColorRGB) -> None:
        self.calls.append(("path", (commands, color)))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def clear(self) -> None:
        self.calls.clear()
