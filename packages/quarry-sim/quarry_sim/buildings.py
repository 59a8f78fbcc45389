"""Acceptance and inventory helpers shared by both building variants."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quarry_resource import CapacityViolation, Recipe, ResourceStack

from quarry_sim.components import (
    CORE,
    PRODUCTION,
    Building,
    CoreStore,
    Item,
    Production,
)
from quarry_sim.errors import InvalidStateError
from quarry_sim.spatial import Pos2D, footprint_radius

if TYPE_CHECKING:
    from quarry import EntityId, World

logger = logging.getLogger(__name__)


def spawn_core(world: World, x: float, y: float, accept_radius: int) -> EntityId:
    if accept_radius < 0:
        raise ValueError(f"accept_radius must be >= 0, got {accept_radius}")
    eid = world.spawn()
    world.attach(eid, Pos2D(x, y))
    world.attach(eid, Building(kind=CORE, accept_radius=accept_radius))
    world.attach(eid, CoreStore())
    logger.info("core building %d registered at (%.1f, %.1f)", eid, x, y)
    return eid


def spawn_production(
    world: World,
    x: float,
    y: float,
    recipe: Recipe,
    footprint: tuple[float, float],
) -> EntityId:
    radius = footprint_radius(*footprint)
    eid = world.spawn()
    world.attach(eid, Pos2D(x, y))
    world.attach(eid, Building(kind=PRODUCTION, accept_radius=radius))
    world.attach(eid, Production(recipe=recipe))
    logger.info(
        "production building %d registered at (%.1f, %.1f): %s x%d -> %s x%d",
        eid, x, y,
        recipe.input.type.value, recipe.input.amount,
        recipe.output.type.value, recipe.output.amount,
    )
    return eid


def building_of(world: World, eid: EntityId) -> Building:
    if not world.has(eid, Building):
        raise InvalidStateError(eid, f"Entity {eid} is not a live building")
    return world.get(eid, Building)


def accepts(world: World, eid: EntityId, item: Item) -> bool:
    """Whether building *eid* would take *item* right now. No side effects."""
    building = building_of(world, eid)
    if building.kind == CORE:
        return True
    prod = world.get(eid, Production)
    recipe = prod.recipe
    return (
        item.resource is recipe.input.type
        and recipe.input_room(prod.input_amount) >= item.amount
    )


def accept(world: World, eid: EntityId, item: Item) -> None:
    """Merge *item* into building *eid*. The caller must check ``accepts`` first."""
    if not accepts(world, eid, item):
        raise InvalidStateError(
            eid,
            f"Building {eid} does not accept {item.amount} {item.resource.value}",
        )
    building = world.get(eid, Building)
    if building.kind == CORE:
        world.get(eid, CoreStore).inventory.add(item.resource, item.amount)
        return

    prod = world.get(eid, Production)
    prod.input_amount += item.amount
    if prod.input_amount > prod.recipe.max_input:
        raise CapacityViolation(
            f"building {eid} input {prod.input_amount} exceeds {prod.recipe.max_input}"
        )
    prod.pending = True


def take_output(world: World, eid: EntityId, amount: int | None = None) -> ResourceStack:
    """Withdraw finished goods from a production building.

    Takes everything when *amount* is None. Freeing output room does not
    wake the production loop; only the next accepted delivery does.
    """
    building = building_of(world, eid)
    if building.kind != PRODUCTION:
        raise InvalidStateError(eid, f"Building {eid} has no output store")
    prod = world.get(eid, Production)
    if amount is None:
        amount = prod.output_amount
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount}")
    if amount > prod.output_amount:
        raise CapacityViolation(
            f"cannot take {amount} from building {eid}, only {prod.output_amount} held"
        )
    prod.output_amount -= amount
    return ResourceStack(prod.recipe.output.type, amount)
