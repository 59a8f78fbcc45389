"""Error types raised by the simulation."""
from __future__ import annotations


class InvalidStateError(RuntimeError):
    """Operation on a destroyed or unknown entity, or a broken precondition.

    Raised for striking a depleted tile, delivering a consumed item, and
    calling ``accept`` on a building that does not accept the item.
    """

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)
