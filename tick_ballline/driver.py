"""Progress driver and the start/stop adapter around it.

``ProgressDriver`` turns elapsed time into eased progress in [0, 1] with
optional repetition. ``AnimationDriver`` owns one while the host surface
is attached and visible, and asks the surface to repaint on every tick.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from tick_ballline.clock import Clock
from tick_ballline.easing import EASINGS

if TYPE_CHECKING:
    from tick_ballline.render import HostSurface

logger = logging.getLogger(__name__)

INFINITE = -1
DEFAULT_DURATION_MS = 2500.0


class RepeatMode(Enum):
    RESTART = "restart"
    REVERSE = "reverse"


@dataclass
class ProgressDriver:
    """Eased progress over ``duration`` time units, repeated ``repeat_count`` more times.

    With ``RepeatMode.REVERSE`` every odd cycle plays backwards, so the
    progress bounces between 0 and 1. ``INFINITE`` never finishes.
    """

    duration: float
    easing: str = "accelerate_decelerate"
    repeat_mode: RepeatMode = RepeatMode.REVERSE
    repeat_count: int = INFINITE
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError("duration must be positive")
        if self.easing not in EASINGS:
            raise KeyError(f"Unknown easing {self.easing!r}")
        if self.repeat_count < INFINITE:
            raise ValueError("repeat_count must be INFINITE or >= 0")

    @property
    def finished(self) -> bool:
        if self.repeat_count == INFINITE:
            return False
        return self.elapsed >= self.duration * (self.repeat_count + 1)

    @property
    def progress(self) -> float:
        if self.finished:
            cycle = self.repeat_count
            t = 1.0
        else:
            cycle = int(self.elapsed // self.duration)
            t = (self.elapsed - cycle * self.duration) / self.duration
        if self.repeat_mode is RepeatMode.REVERSE and cycle % 2 == 1:
            t = 1.0 - t
        return EASINGS[self.easing](t)

    def advance(self, dt: float) -> float:
        if dt < 0:
            raise ValueError("dt must not be negative")
        if not self.finished:
            self.elapsed += dt
        return self.progress


class AnimationState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class AnimationDriver:
    """Runs a bouncing progress driver while the surface is attached and visible.

    ``on_transition(old, new)`` fires on every state change. ``on_progress``
    receives each new progress value before the repaint request.
    """

    def __init__(
        self,
        surface: HostSurface,
        duration: float = DEFAULT_DURATION_MS,
        easing: str = "accelerate_decelerate",
        tps: int = 60,
        on_progress: Callable[[float], object] | None = None,
        on_transition: Callable[[AnimationState, AnimationState], None] | None = None,
    ) -> None:
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        if easing not in EASINGS:
            raise KeyError(f"Unknown easing {easing!r}")
        self._surface = surface
        self._duration = duration
        self._easing = easing
        self._clock = Clock(tps)
        self._on_progress = on_progress
        self._on_transition = on_transition
        self._state = AnimationState.STOPPED
        self._driver: ProgressDriver | None = None
        self._progress = 0.0
        self._attached = False
        self._visible = True

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is AnimationState.RUNNING

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def clock(self) -> Clock:
        return self._clock

    # -- host lifecycle ---------------------------------------------------

    def attach(self) -> None:
        self._attached = True
        if self._visible:
            self.start()

    def detach(self) -> None:
        self._attached = False
        self.stop()

    def set_visible(self, visible: bool) -> None:
        self._visible = visible
        if visible and self._attached:
            self.start()
        else:
            self.stop()

    # -- driver control ---------------------------------------------------

    def start(self) -> None:
        if self._state is AnimationState.RUNNING:
            return
        self._driver = ProgressDriver(
            duration=self._duration,
            easing=self._easing,
            repeat_mode=RepeatMode.REVERSE,
            repeat_count=INFINITE,
        )
        self._clock.reset()
        self._progress = self._driver.progress
        self._set_state(AnimationState.RUNNING)

    def stop(self) -> None:
        if self._state is AnimationState.STOPPED:
            return
        self._driver = None
        self._set_state(AnimationState.STOPPED)
        self._surface.request_repaint()

    def tick(self, dt_ms: float) -> bool:
        """Advance one tick. Returns False (and does nothing) while stopped."""
        if self._driver is None:
            return False
        self._progress = self._driver.advance(dt_ms)
        if self._on_progress is not None:
            self._on_progress(self._progress)
        self._surface.request_repaint()
        return True

    def step(self) -> bool:
        """Advance by exactly one clock period."""
        if self._driver is None:
            return False
        self._clock.advance()
        return self.tick(self._clock.dt_ms)

    def update(self, frame_ms: float) -> int:
        """Feed host frame time; runs every fixed tick now due and returns the count."""
        if self._driver is None:
            return 0
        due = self._clock.feed(frame_ms)
        for _ in range(due):
            self.step()
        return due

    def _set_state(self, new: AnimationState) -> None:
        old = self._state
        self._state = new
        logger.debug("Animation %s -> %s", old.value, new.value)
        if self._on_transition is not None:
            self._on_transition(old, new)
