"""Fixed-slot inventory keyed by ResourceType."""
from __future__ import annotations

from dataclasses import dataclass, field

from quarry_resource.types import CapacityViolation, ResourceType


def _empty_slots() -> dict[ResourceType, int]:
    return {rtype: 0 for rtype in ResourceType}


@dataclass
class Inventory:
    """Mutable counter store with one slot per ResourceType.

    Every enumerated type has a slot from construction on, so ``get`` never
    misses. ``add`` and ``remove`` are the only mutators.

    Attributes:
        slots: Mapping of resource type -> quantity.
    """

    slots: dict[ResourceType, int] = field(default_factory=_empty_slots)

    def get(self, rtype: ResourceType) -> int:
        """Get current quantity of a resource."""
        return self.slots[rtype]

    def add(self, rtype: ResourceType, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        self.slots[rtype] += amount

    def remove(self, rtype: ResourceType, amount: int = 1) -> None:
        """Remove resources. Callers must check ``has`` first."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        current = self.slots[rtype]
        if amount > current:
            raise CapacityViolation(
                f"cannot remove {amount} {rtype.value}, only {current} held"
            )
        self.slots[rtype] = current - amount

    def has(self, rtype: ResourceType, amount: int = 1) -> bool:
        """Check if at least *amount* of resource exists."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        return self.slots[rtype] >= amount

    def total(self) -> int:
        """Get total quantity across all resource types."""
        return sum(self.slots.values())
