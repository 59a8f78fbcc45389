"""Core data types for resource management."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CapacityViolation(RuntimeError):
    """A resource counter left its valid range. Always a programming error."""


class ResourceType(Enum):
    """Closed set of resource kinds. Used only as a lookup key."""

    STONE_CHUNK = "stone_chunk"
    STONE_BRICK = "stone_brick"

    def __mul__(self, amount: int) -> ResourceStack:
        return ResourceStack(self, amount)


@dataclass(frozen=True)
class ResourceStack:
    """Immutable (type, amount) pair. An amount of 0 is a valid empty stack.

    Attributes:
        type: Kind of resource held.
        amount: Number of units, never negative.
    """

    type: ResourceType
    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"amount must be >= 0, got {self.amount}")

    @property
    def empty(self) -> bool:
        return self.amount == 0
