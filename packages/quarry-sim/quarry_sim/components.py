"""Components for tiles, items and the two building variants."""
from __future__ import annotations

from dataclasses import dataclass, field

from quarry_resource import Inventory, Recipe, ResourceType

# Building kinds.
CORE = "core"
PRODUCTION = "production"

# Production states.
IDLE = "idle"
PRODUCING = "producing"
CANCELLED = "cancelled"


@dataclass
class Tile:
    """Depletable resource node, despawned by the strike that takes it to 0."""

    resource: ResourceType
    durability: int

    def __post_init__(self) -> None:
        if self.durability <= 0:
            raise ValueError(f"durability must be > 0, got {self.durability}")


@dataclass
class Item:
    """Movable unit stack waiting to be delivered."""

    resource: ResourceType
    amount: int = 1

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"amount must be >= 0, got {self.amount}")


@dataclass
class Building:
    """Tag shared by every building. The variant payload lives in
    ``CoreStore`` or ``Production`` on the same entity."""

    kind: str
    accept_radius: int


@dataclass
class CoreStore:
    inventory: Inventory = field(default_factory=Inventory)


@dataclass
class Production:
    """Counters and loop state of a production building.

    ``pending`` is the single-slot production trigger: setting it twice
    before the loop reads it has the same effect as setting it once.
    ``remaining`` counts the ticks left on the running conversion.
    """

    recipe: Recipe
    input_amount: int = 0
    output_amount: int = 0
    state: str = IDLE
    pending: bool = False
    remaining: int = 0

    @property
    def progress(self) -> float:
        if self.state != PRODUCING:
            return 0.0
        return 1.0 - self.remaining / self.recipe.duration
