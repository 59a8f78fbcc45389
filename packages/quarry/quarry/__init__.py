"""quarry - Fixed-timestep engine and entity arena for the quarry simulation."""

from quarry.clock import Clock
from quarry.engine import Engine
from quarry.types import DeadEntityError, EntityId, TickContext
from quarry.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "TickContext",
    "EntityId",
    "DeadEntityError",
]
