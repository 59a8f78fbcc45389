"""Signal names published on the simulation bus.

Payloads (keyword data):

- ``tile_struck``: tile, durability
- ``tile_depleted``: tile, resource
- ``item_spawned``: item, resource, x, y
- ``item_delivered``: item, building, resource, amount
- ``production_started``: building, duration
- ``production_completed``: building, amount, output_amount
- ``production_cancelled``: building, lost
- ``building_destroyed``: building, kind
"""
from __future__ import annotations

TILE_STRUCK = "tile_struck"
TILE_DEPLETED = "tile_depleted"
ITEM_SPAWNED = "item_spawned"
ITEM_DELIVERED = "item_delivered"
PRODUCTION_STARTED = "production_started"
PRODUCTION_COMPLETED = "production_completed"
PRODUCTION_CANCELLED = "production_cancelled"
BUILDING_DESTROYED = "building_destroyed"
