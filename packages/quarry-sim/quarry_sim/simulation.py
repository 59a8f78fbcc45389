"""Simulation - the world driver used by presentation and input layers."""
from __future__ import annotations

import logging

from quarry import Clock, Engine, EntityId, World
from quarry_resource import Inventory, Recipe, ResourceStack, ResourceType
from quarry_signal import SignalBus, make_signal_system

from quarry_sim import signals
from quarry_sim.buildings import (
    accepts,
    building_of,
    spawn_core,
    spawn_production,
    take_output,
)
from quarry_sim.components import CORE, Building, CoreStore, Item, Production, Tile
from quarry_sim.config import (
    CORE_ACCEPT_RADIUS,
    DEFAULT_FOOTPRINT,
    DEFAULT_TPS,
    INITIAL_TILE_DURABILITY,
)
from quarry_sim.errors import InvalidStateError
from quarry_sim.production import make_cancel_hook, make_production_system
from quarry_sim.router import deliver
from quarry_sim.spatial import Pos2D
from quarry_sim.tiles import spawn_tile, strike

logger = logging.getLogger(__name__)


class Simulation:
    """Owns the world and is its only mutator.

    Tiles, items and buildings are addressed by entity id. Signals for the
    presentation layer go out on ``bus`` and are flushed at the end of each
    tick; listening to them is optional.
    """

    def __init__(self, tps: int = DEFAULT_TPS) -> None:
        self._engine = Engine(tps=tps)
        self._bus = SignalBus()
        self._engine.world.on_detach(
            Production, make_cancel_hook(on_cancelled=self._production_cancelled)
        )
        self._engine.add_system(
            make_production_system(
                on_started=self._production_started,
                on_completed=self._production_completed,
            )
        )
        self._engine.add_system(make_signal_system(self._bus))

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def world(self) -> World:
        return self._engine.world

    @property
    def clock(self) -> Clock:
        return self._engine.clock

    @property
    def bus(self) -> SignalBus:
        return self._bus

    # -- Setup --

    def add_tile(
        self,
        x: float,
        y: float,
        resource: ResourceType = ResourceType.STONE_CHUNK,
        durability: int = INITIAL_TILE_DURABILITY,
    ) -> EntityId:
        return spawn_tile(self.world, x, y, resource, durability)

    def add_core_building(
        self, x: float, y: float, accept_radius: int = CORE_ACCEPT_RADIUS
    ) -> EntityId:
        return spawn_core(self.world, x, y, accept_radius)

    def add_production_building(
        self,
        x: float,
        y: float,
        recipe: Recipe,
        footprint: tuple[float, float] = DEFAULT_FOOTPRINT,
    ) -> EntityId:
        return spawn_production(self.world, x, y, recipe, footprint)

    # -- Input events --

    def strike_tile(self, tile_eid: EntityId) -> EntityId | None:
        """Strike a tile once. Returns the spawned item id on depletion."""
        world = self.world
        item_eid = strike(world, tile_eid)
        if item_eid is None:
            durability = world.get(tile_eid, Tile).durability
            self._bus.publish(signals.TILE_STRUCK, tile=tile_eid, durability=durability)
            return None

        item = world.get(item_eid, Item)
        pos = world.get(item_eid, Pos2D)
        self._bus.publish(signals.TILE_STRUCK, tile=tile_eid, durability=0)
        self._bus.publish(signals.TILE_DEPLETED, tile=tile_eid, resource=item.resource)
        self._bus.publish(
            signals.ITEM_SPAWNED,
            item=item_eid, resource=item.resource, x=pos.x, y=pos.y,
        )
        return item_eid

    def attempt_delivery(self, item_eid: EntityId, x: float, y: float) -> bool:
        """Drop an item at (x, y). Returns whether a building took it."""
        world = self.world
        if not world.has(item_eid, Item):
            raise InvalidStateError(item_eid, f"Entity {item_eid} is not a live item")
        pos = world.get(item_eid, Pos2D)
        pos.x = x
        pos.y = y
        item = world.get(item_eid, Item)
        target = deliver(world, item_eid)
        if target is None:
            return False
        self._bus.publish(
            signals.ITEM_DELIVERED,
            item=item_eid, building=target, resource=item.resource, amount=item.amount,
        )
        return True

    def destroy_building(self, eid: EntityId) -> None:
        building = building_of(self.world, eid)
        self.world.despawn(eid)
        logger.info("%s building %d destroyed", building.kind, eid)
        self._bus.publish(signals.BUILDING_DESTROYED, building=eid, kind=building.kind)

    def collect_output(self, eid: EntityId, amount: int | None = None) -> ResourceStack:
        return take_output(self.world, eid, amount)

    # -- Queries --

    def accepts(self, building_eid: EntityId, item_eid: EntityId) -> bool:
        if not self.world.has(item_eid, Item):
            raise InvalidStateError(item_eid, f"Entity {item_eid} is not a live item")
        return accepts(self.world, building_eid, self.world.get(item_eid, Item))

    def inventory(self, eid: EntityId) -> Inventory:
        """The store of a core building."""
        if building_of(self.world, eid).kind != CORE:
            raise InvalidStateError(eid, f"Building {eid} is not a core building")
        return self.world.get(eid, CoreStore).inventory

    def production(self, eid: EntityId) -> Production:
        if not self.world.has(eid, Production):
            raise InvalidStateError(eid, f"Entity {eid} is not a live production building")
        return self.world.get(eid, Production)

    def progress(self, eid: EntityId) -> float:
        return self.production(eid).progress

    def tiles(self) -> list[EntityId]:
        return [eid for eid, _ in self.world.query(Tile)]

    def items(self) -> list[EntityId]:
        return [eid for eid, _ in self.world.query(Item)]

    def buildings(self) -> list[EntityId]:
        """Live buildings in registration order."""
        return [eid for eid, _ in self.world.query(Building)]

    # -- Time --

    def step(self) -> None:
        self._engine.step()

    def run(self, n: int) -> None:
        self._engine.run(n)

    # -- Production callbacks --

    def _production_started(self, world: World, eid: EntityId, prod: Production) -> None:
        self._bus.publish(signals.PRODUCTION_STARTED, building=eid, duration=prod.remaining)

    def _production_completed(self, world: World, eid: EntityId, prod: Production) -> None:
        self._bus.publish(
            signals.PRODUCTION_COMPLETED,
            building=eid,
            amount=prod.recipe.output.amount,
            output_amount=prod.output_amount,
        )

    def _production_cancelled(self, world: World, eid: EntityId, prod: Production) -> None:
        self._bus.publish(
            signals.PRODUCTION_CANCELLED, building=eid, lost=prod.recipe.input.amount
        )
