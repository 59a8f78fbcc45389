"""Engine - core loop over registered systems."""

from quarry.clock import Clock
from quarry.types import System
from quarry.world import World


class Engine:
    def __init__(self, tps: int = 20) -> None:
        self._clock = Clock(tps)
        self._world = World()
        self._systems: list[System] = []
        self._stop_requested: bool = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break
