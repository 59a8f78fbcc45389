"""End-to-end tests through the Simulation facade."""
from __future__ import annotations

import pytest
from quarry_resource import Recipe, ResourceType
from quarry_sim import IDLE, PRODUCING, InvalidStateError, Simulation, signals, spawn_item

CHUNK = ResourceType.STONE_CHUNK
BRICK = ResourceType.STONE_BRICK


def _recipe(**overrides) -> Recipe:
    kwargs = dict(input=CHUNK * 1, max_input=3, output=BRICK * 10, max_output=100, duration=10)
    kwargs.update(overrides)
    return Recipe(**kwargs)


def _record(sim: Simulation) -> list[tuple[str, dict]]:
    events: list[tuple[str, dict]] = []
    sim.bus.subscribe("*", lambda name, data: events.append((name, data)))
    return events


def _mine(sim: Simulation, x: float = 0.0, y: float = 0.0) -> int:
    tile = sim.add_tile(x, y, CHUNK, durability=1)
    item = sim.strike_tile(tile)
    assert item is not None
    return item


class TestTiles:
    def test_scenario_ten_strikes(self) -> None:
        sim = Simulation()
        tile = sim.add_tile(64, 128)
        results = [sim.strike_tile(tile) for _ in range(10)]
        assert all(r is None for r in results[:9])
        assert results[9] is not None
        assert sim.tiles() == []
        assert sim.items() == [results[9]]

    def test_strike_depleted_tile_raises(self) -> None:
        sim = Simulation()
        tile = sim.add_tile(0, 0, durability=1)
        sim.strike_tile(tile)
        with pytest.raises(InvalidStateError):
            sim.strike_tile(tile)

    def test_strike_unknown_tile_publishes_nothing(self) -> None:
        sim = Simulation()
        with pytest.raises(InvalidStateError, match="not a live tile"):
            sim.strike_tile(99)
        assert sim.bus.pending == 0

    def test_strike_signals(self) -> None:
        sim = Simulation()
        events = _record(sim)
        tile = sim.add_tile(64, 0, durability=2)
        sim.strike_tile(tile)
        item = sim.strike_tile(tile)
        sim.step()
        assert [name for name, _ in events] == [
            signals.TILE_STRUCK,
            signals.TILE_STRUCK,
            signals.TILE_DEPLETED,
            signals.ITEM_SPAWNED,
        ]
        assert events[1][1] == {"tile": tile, "durability": 0}
        assert events[3][1] == {"item": item, "resource": CHUNK, "x": 64, "y": 0}


class TestDelivery:
    def test_delivery_to_core(self) -> None:
        sim = Simulation()
        core = sim.add_core_building(900, 300)
        item = _mine(sim)
        assert sim.attempt_delivery(item, 910, 310) is True
        assert sim.inventory(core).get(CHUNK) == 1
        assert sim.items() == []

    def test_missed_delivery_keeps_item_at_drop_point(self) -> None:
        sim = Simulation()
        sim.add_core_building(900, 300)
        item = _mine(sim)
        assert sim.attempt_delivery(item, 500, 500) is False
        assert sim.items() == [item]
        assert sim.attempt_delivery(item, 900, 300) is True

    def test_delivered_item_cannot_be_delivered_again(self) -> None:
        sim = Simulation()
        sim.add_core_building(0, 0)
        item = _mine(sim)
        sim.attempt_delivery(item, 0, 0)
        with pytest.raises(InvalidStateError):
            sim.attempt_delivery(item, 0, 0)

    def test_scenario_two_eligible_buildings(self) -> None:
        sim = Simulation()
        a = sim.add_core_building(0, 0)
        b = sim.add_core_building(20, 0)
        item = _mine(sim, 10, 0)
        assert sim.attempt_delivery(item, 10, 0)
        assert sim.inventory(a).get(CHUNK) == 1
        assert sim.inventory(b).total() == 0

    def test_scenario_input_cap(self) -> None:
        sim = Simulation()
        works = sim.add_production_building(0, 0, _recipe(max_input=3))
        # Keep the loop from consuming input by filling the output store.
        sim.production(works).output_amount = 100
        items = [_mine(sim) for _ in range(4)]
        assert [sim.attempt_delivery(i, 0, 0) for i in items[:3]] == [True] * 3
        assert sim.accepts(works, items[3]) is False
        assert sim.attempt_delivery(items[3], 0, 0) is False
        assert sim.items() == [items[3]]

    def test_delivery_signal(self) -> None:
        sim = Simulation()
        events = _record(sim)
        core = sim.add_core_building(0, 0)
        item = spawn_item(sim.world, 0, 0, CHUNK)
        sim.attempt_delivery(item, 0, 0)
        sim.step()
        assert events == [
            (signals.ITEM_DELIVERED,
             {"item": item, "building": core, "resource": CHUNK, "amount": 1}),
        ]


class TestProduction:
    def test_scenario_single_chunk_to_bricks(self) -> None:
        sim = Simulation()
        works = sim.add_production_building(900, 600, _recipe())
        item = _mine(sim)
        assert sim.attempt_delivery(item, 900, 600)
        prod = sim.production(works)
        assert prod.input_amount == 1

        sim.step()
        assert prod.state == PRODUCING
        assert prod.input_amount == 0

        sim.run(9)
        assert prod.output_amount == 0
        sim.step()
        assert prod.output_amount == 10
        assert prod.state == IDLE

    def test_conservation_over_many_deliveries(self) -> None:
        sim = Simulation()
        events = _record(sim)
        works = sim.add_production_building(0, 0, _recipe(duration=3))
        delivered = 0
        for _ in range(30):
            item = _mine(sim)
            if sim.attempt_delivery(item, 0, 0):
                delivered += 1
            sim.step()
        sim.run(20)
        prod = sim.production(works)
        started = sum(1 for name, _ in events if name == signals.PRODUCTION_STARTED)
        completed = sum(1 for name, _ in events if name == signals.PRODUCTION_COMPLETED)
        assert started == completed
        assert delivered == started * prod.recipe.input.amount + prod.input_amount
        assert prod.output_amount == completed * prod.recipe.output.amount

    def test_production_signals(self) -> None:
        sim = Simulation()
        events = _record(sim)
        works = sim.add_production_building(0, 0, _recipe(duration=4))
        sim.attempt_delivery(_mine(sim), 0, 0)
        sim.run(5)
        production = [(n, d) for n, d in events if n.startswith("production")]
        assert production == [
            (signals.PRODUCTION_STARTED, {"building": works, "duration": 4}),
            (signals.PRODUCTION_COMPLETED,
             {"building": works, "amount": 10, "output_amount": 10}),
        ]

    def test_progress(self) -> None:
        sim = Simulation()
        works = sim.add_production_building(0, 0, _recipe(duration=4))
        assert sim.progress(works) == 0.0
        sim.attempt_delivery(_mine(sim), 0, 0)
        sim.step()
        assert sim.progress(works) == 0.0
        sim.run(2)
        assert sim.progress(works) == pytest.approx(0.5)

    def test_collect_output_does_not_restart(self) -> None:
        sim = Simulation()
        works = sim.add_production_building(0, 0, _recipe(max_output=10, duration=1))
        sim.attempt_delivery(_mine(sim), 0, 0)
        sim.attempt_delivery(_mine(sim), 0, 0)
        sim.run(5)
        prod = sim.production(works)
        assert prod.output_amount == 10
        assert prod.input_amount == 1

        assert sim.collect_output(works) == BRICK * 10
        sim.run(5)
        assert prod.state == IDLE
        assert prod.output_amount == 0

        sim.attempt_delivery(_mine(sim), 0, 0)
        sim.run(2)
        assert prod.output_amount == 10


class TestDestroy:
    def test_scenario_destroy_mid_conversion(self) -> None:
        sim = Simulation()
        events = _record(sim)
        works = sim.add_production_building(0, 0, _recipe())
        sim.attempt_delivery(_mine(sim), 0, 0)
        sim.run(5)
        prod = sim.production(works)
        assert prod.state == PRODUCING

        sim.destroy_building(works)
        sim.run(20)
        assert prod.output_amount == 0
        assert sim.buildings() == []
        names = [name for name, _ in events]
        assert signals.PRODUCTION_COMPLETED not in names
        assert (signals.PRODUCTION_CANCELLED, {"building": works, "lost": 1}) in events
        assert (signals.BUILDING_DESTROYED, {"building": works, "kind": "production"}) in events

        item = _mine(sim)
        assert sim.attempt_delivery(item, 0, 0) is False
        assert sim.items() == [item]

    def test_destroyed_building_queries_raise(self) -> None:
        sim = Simulation()
        core = sim.add_core_building(0, 0)
        sim.destroy_building(core)
        with pytest.raises(InvalidStateError):
            sim.inventory(core)
        with pytest.raises(InvalidStateError):
            sim.destroy_building(core)

    def test_inventory_of_production_building_raises(self) -> None:
        sim = Simulation()
        works = sim.add_production_building(0, 0, _recipe())
        with pytest.raises(InvalidStateError, match="not a core building"):
            sim.inventory(works)

    def test_buildings_in_registration_order(self) -> None:
        sim = Simulation()
        a = sim.add_core_building(0, 0)
        b = sim.add_production_building(0, 0, _recipe())
        c = sim.add_core_building(0, 0)
        sim.destroy_building(b)
        assert sim.buildings() == [a, c]


class TestItemAmounts:
    def test_negative_stack_never_reaches_a_building(self) -> None:
        sim = Simulation()
        works = sim.add_production_building(0, 0, _recipe())
        with pytest.raises(ValueError, match="amount must be >= 0"):
            spawn_item(sim.world, 0, 0, CHUNK, amount=-2)
        assert sim.items() == []
        assert sim.production(works).input_amount == 0
        assert not sim.production(works).pending
