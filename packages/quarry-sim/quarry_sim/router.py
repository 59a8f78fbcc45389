"""Delivery routing: pick the building that receives a dropped item."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quarry_sim.buildings import accept, accepts
from quarry_sim.components import Building, Item
from quarry_sim.errors import InvalidStateError
from quarry_sim.spatial import Pos2D, within_radius

if TYPE_CHECKING:
    from quarry import EntityId, World

logger = logging.getLogger(__name__)


def route(world: World, item_eid: EntityId) -> EntityId | None:
    """Return the first building, in registration order, that takes the item.

    A building qualifies when the item lies within its accept radius and it
    accepts the item. First match wins even if a later building is closer.
    """
    item = _live_item(world, item_eid)
    pos = world.get(item_eid, Pos2D)
    for eid, (building, bpos) in world.query(Building, Pos2D):
        if within_radius(bpos, pos, building.accept_radius) and accepts(world, eid, item):
            return eid
    return None


def deliver(world: World, item_eid: EntityId) -> EntityId | None:
    """Route the item and hand it over. Returns the recipient or None.

    The item is despawned only after the recipient accepted it. With no
    recipient the item stays in the world untouched.
    """
    target = route(world, item_eid)
    if target is None:
        logger.debug("item %d found no recipient", item_eid)
        return None
    accept(world, target, world.get(item_eid, Item))
    world.despawn(item_eid)
    logger.debug("item %d delivered to building %d", item_eid, target)
    return target


def _live_item(world: World, item_eid: EntityId) -> Item:
    if not world.has(item_eid, Item):
        raise InvalidStateError(item_eid, f"Entity {item_eid} is not a live item")
    return world.get(item_eid, Item)
