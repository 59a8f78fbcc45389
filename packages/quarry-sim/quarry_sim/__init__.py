"""quarry-sim - Tiles, items, buildings and production on the quarry engine."""
from __future__ import annotations

from quarry_sim.buildings import accept, accepts, take_output
from quarry_sim.components import (
    CANCELLED,
    CORE,
    IDLE,
    PRODUCING,
    PRODUCTION,
    Building,
    CoreStore,
    Item,
    Production,
    Tile,
)
from quarry_sim.errors import InvalidStateError
from quarry_sim.production import make_cancel_hook, make_production_system
from quarry_sim.router import deliver, route
from quarry_sim.simulation import Simulation
from quarry_sim.site import Site, brick_recipe, build_default_site
from quarry_sim.spatial import Pos2D, distance_sq, footprint_radius, within_radius
from quarry_sim.tiles import spawn_item, spawn_tile, strike

__all__ = [
    "Building",
    "CANCELLED",
    "CORE",
    "CoreStore",
    "IDLE",
    "InvalidStateError",
    "Item",
    "PRODUCING",
    "PRODUCTION",
    "Pos2D",
    "Production",
    "Simulation",
    "Site",
    "Tile",
    "accept",
    "accepts",
    "brick_recipe",
    "build_default_site",
    "deliver",
    "distance_sq",
    "footprint_radius",
    "make_cancel_hook",
    "make_production_system",
    "route",
    "spawn_item",
    "spawn_tile",
    "strike",
    "take_output",
    "within_radius",
]
