"""The default quarry site: a field of stone tiles, a core and a brick works."""
from __future__ import annotations

from dataclasses import dataclass, field

from quarry import EntityId
from quarry_resource import Recipe, ResourceType

from quarry_sim.config import (
    BRICK_WORKS_MAX_INPUT,
    BRICK_WORKS_MAX_OUTPUT,
    BRICK_WORKS_POSITION,
    BRICK_WORKS_SECONDS,
    CORE_POSITION,
    GRID_H,
    GRID_W,
    INITIAL_TILE_DURABILITY,
    TILE_SIZE,
)
from quarry_sim.simulation import Simulation


@dataclass
class Site:
    sim: Simulation
    core: EntityId
    brick_works: EntityId
    tiles: list[EntityId] = field(default_factory=list)


def brick_recipe(duration: int) -> Recipe:
    return Recipe(
        input=ResourceType.STONE_CHUNK * 1,
        max_input=BRICK_WORKS_MAX_INPUT,
        output=ResourceType.STONE_BRICK * 10,
        max_output=BRICK_WORKS_MAX_OUTPUT,
        duration=duration,
    )


def build_default_site(sim: Simulation | None = None) -> Site:
    """Populate *sim* (or a fresh Simulation) with the default layout.

    Buildings are registered before the tiles, core first, so the core
    wins deliveries that land inside both accept radii.
    """
    if sim is None:
        sim = Simulation()
    core = sim.add_core_building(*CORE_POSITION)
    brick_works = sim.add_production_building(
        *BRICK_WORKS_POSITION,
        recipe=brick_recipe(sim.clock.ticks_for(BRICK_WORKS_SECONDS)),
    )
    site = Site(sim=sim, core=core, brick_works=brick_works)
    for gx in range(GRID_W):
        for gy in range(GRID_H):
            site.tiles.append(
                sim.add_tile(
                    gx * TILE_SIZE,
                    gy * TILE_SIZE,
                    ResourceType.STONE_CHUNK,
                    INITIAL_TILE_DURABILITY,
                )
            )
    return site
