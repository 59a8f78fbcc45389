"""Clock and TickContext for the fixed-timestep engine."""

from typing import Callable

from quarry.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError(f"tps must be positive, got {tps}")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def ticks_for(self, seconds: float) -> int:
        """Whole ticks needed to cover *seconds* of simulated time (at least 1)."""
        if seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}")
        return max(1, round(seconds * self._tps))

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=stop_fn,
        )
