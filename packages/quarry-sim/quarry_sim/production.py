"""Production loop for production buildings.

Every production building runs its own loop, stored in its ``Production``
component and advanced once per tick by the production system:

    idle --(trigger, gates pass)--> producing --(timer done)--> idle

A trigger that finds a failing gate is dropped. The loop does not poll,
so a building that only gains output room keeps waiting until the next
delivery raises the trigger again.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from quarry_resource import CapacityViolation

from quarry_sim.components import CANCELLED, IDLE, PRODUCING, Production

if TYPE_CHECKING:
    from quarry import EntityId, TickContext, World

logger = logging.getLogger(__name__)

ProductionCallback = Callable[["World", "EntityId", Production], None]


def try_start(prod: Production) -> bool:
    """Consume the trigger and start a conversion if both gates pass."""
    prod.pending = False
    recipe = prod.recipe
    if not recipe.has_input(prod.input_amount):
        return False
    if not recipe.has_output_room(prod.output_amount):
        return False
    prod.input_amount -= recipe.input.amount
    prod.state = PRODUCING
    prod.remaining = recipe.duration
    return True


def advance(prod: Production) -> bool:
    """Run one tick of the conversion timer. Returns True on completion."""
    prod.remaining -= 1
    if prod.remaining > 0:
        return False
    prod.output_amount += prod.recipe.output.amount
    if prod.output_amount > prod.recipe.max_output:
        raise CapacityViolation(
            f"output {prod.output_amount} exceeds {prod.recipe.max_output}"
        )
    prod.state = IDLE
    prod.remaining = 0
    return True


def make_production_system(
    on_started: ProductionCallback | None = None,
    on_completed: ProductionCallback | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that steps every production loop once per tick.

    A conversion that completes this tick frees the loop, so a trigger
    left pending while it ran is consumed in the same tick.
    """

    def production_system(world: World, ctx: TickContext) -> None:
        for eid, (prod,) in world.query(Production):
            if prod.state == PRODUCING:
                if not advance(prod):
                    continue
                logger.debug(
                    "building %d finished conversion at tick %d (output %d)",
                    eid, ctx.tick_number, prod.output_amount,
                )
                if on_completed is not None:
                    on_completed(world, eid, prod)
                if not world.alive(eid):
                    continue
            if not prod.pending:
                continue
            if try_start(prod):
                logger.debug(
                    "building %d started conversion at tick %d for %d ticks",
                    eid, ctx.tick_number, prod.remaining,
                )
                if on_started is not None:
                    on_started(world, eid, prod)
            else:
                logger.debug(
                    "building %d woke at tick %d but gates failed (in=%d out=%d)",
                    eid, ctx.tick_number, prod.input_amount, prod.output_amount,
                )

    return production_system


def make_cancel_hook(
    on_cancelled: ProductionCallback | None = None,
) -> Callable[[World, EntityId, Production], None]:
    """Return an on_detach hook that tears down a building's loop.

    The reserved input of an in-flight conversion is lost and no output is
    granted for it.
    """

    def cancel_hook(world: World, eid: EntityId, prod: Production) -> None:
        was_producing = prod.state == PRODUCING
        prod.state = CANCELLED
        prod.pending = False
        prod.remaining = 0
        if was_producing:
            logger.warning(
                "building %d destroyed mid-conversion, %d %s lost",
                eid, prod.recipe.input.amount, prod.recipe.input.type.value,
            )
            if on_cancelled is not None:
                on_cancelled(world, eid, prod)

    return cancel_hook
