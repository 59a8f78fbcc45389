"""Tile depletion and item spawning."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quarry_resource import ResourceType

from quarry_sim.components import Item, Tile
from quarry_sim.errors import InvalidStateError
from quarry_sim.spatial import Pos2D

if TYPE_CHECKING:
    from quarry import EntityId, World

logger = logging.getLogger(__name__)


def spawn_tile(
    world: World, x: float, y: float, resource: ResourceType, durability: int
) -> EntityId:
    tile = Tile(resource=resource, durability=durability)
    eid = world.spawn()
    world.attach(eid, Pos2D(x, y))
    world.attach(eid, tile)
    return eid


def spawn_item(
    world: World, x: float, y: float, resource: ResourceType, amount: int = 1
) -> EntityId:
    item = Item(resource=resource, amount=amount)
    eid = world.spawn()
    world.attach(eid, Pos2D(x, y))
    world.attach(eid, item)
    return eid


def strike(world: World, tile_eid: EntityId) -> EntityId | None:
    """Take one point of durability off a tile.

    On the strike that reaches 0 the tile is despawned and one item of its
    resource is spawned in its place; the new item id is returned.
    Otherwise returns None.
    """
    if not world.has(tile_eid, Tile):
        raise InvalidStateError(tile_eid, f"Entity {tile_eid} is not a live tile")
    tile = world.get(tile_eid, Tile)
    tile.durability -= 1
    if tile.durability > 0:
        return None

    pos = world.get(tile_eid, Pos2D)
    world.despawn(tile_eid)
    item_eid = spawn_item(world, pos.x, pos.y, tile.resource)
    logger.debug(
        "tile %d depleted, item %d (%s) spawned at (%.1f, %.1f)",
        tile_eid, item_eid, tile.resource.value, pos.x, pos.y,
    )
    return item_eid
