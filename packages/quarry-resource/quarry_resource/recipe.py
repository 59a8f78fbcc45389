"""Production recipe definition."""
from __future__ import annotations

from dataclasses import dataclass

from quarry_resource.types import ResourceStack

DEFAULT_DURATION = 10


@dataclass(frozen=True)
class Recipe:
    """Immutable conversion recipe for a production building.

    Attributes:
        input: Stack consumed by one conversion.
        max_input: Cap on input units the building may hold.
        output: Stack granted by one conversion.
        max_output: Cap on output units the building may hold.
        duration: Ticks one conversion takes.
    """

    input: ResourceStack
    max_input: int
    output: ResourceStack
    max_output: int
    duration: int = DEFAULT_DURATION

    def __post_init__(self) -> None:
        if self.input.amount <= 0:
            raise ValueError(f"input amount must be > 0, got {self.input.amount}")
        if self.output.amount <= 0:
            raise ValueError(f"output amount must be > 0, got {self.output.amount}")
        if self.max_input < self.input.amount:
            raise ValueError(
                f"max_input must be >= {self.input.amount}, got {self.max_input}"
            )
        if self.max_output < self.output.amount:
            raise ValueError(
                f"max_output must be >= {self.output.amount}, got {self.max_output}"
            )
        if self.duration < 1:
            raise ValueError(f"duration must be >= 1, got {self.duration}")

    def has_input(self, input_amount: int) -> bool:
        """Gate 1: enough reserved stock for one conversion."""
        return input_amount >= self.input.amount

    def has_output_room(self, output_amount: int) -> bool:
        """Gate 2: enough headroom to store one conversion's output."""
        return self.max_output - output_amount >= self.output.amount

    def input_room(self, input_amount: int) -> int:
        return self.max_input - input_amount
