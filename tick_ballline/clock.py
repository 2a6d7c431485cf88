"""Fixed-timestep clock feeding the animation driver.

Hosts repaint at whatever rate they like; the clock turns their frame
times into a whole number of fixed ticks so the animation advances at a
steady rate.
"""


class Clock:
    def __init__(self, tps: int, max_catch_up: int = 5) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        if max_catch_up < 1:
            raise ValueError("max_catch_up must be at least 1")
        self._tps = tps
        self._dt_ms = 1000.0 / tps
        self._max_catch_up = max_catch_up
        self._tick_number = 0
        self._accumulator = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt_ms(self) -> float:
        return self._dt_ms

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed_ms(self) -> float:
        return self._tick_number * self._dt_ms

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def feed(self, frame_ms: float) -> int:
        """Accumulate host frame time, return how many ticks are due.

        At most ``max_catch_up`` ticks are returned per call; any surplus
        backlog is discarded so a stalled host does not fast-forward.
        """
        if frame_ms < 0:
            raise ValueError("frame_ms must not be negative")
        self._accumulator += frame_ms
        due = int(self._accumulator // self._dt_ms)
        if due > self._max_catch_up:
            due = self._max_catch_up
            self._accumulator = 0.0
        else:
            self._accumulator -= due * self._dt_ms
        return due

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._accumulator = 0.0
