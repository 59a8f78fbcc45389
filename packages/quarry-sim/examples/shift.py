"""One shift at the default quarry site, driven without a renderer.

Demonstrates:
- Building the default site (stone field, core, brick works)
- Striking tiles until they give up a chunk
- Dropping chunks on the brick works and the core
- Listening to production signals the way a renderer would

Run: python -m examples.shift
"""

import argparse
import logging

from quarry_sim import Pos2D, Simulation, build_default_site
from quarry_signal import ANY


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--tps", type=int, default=20)
    parser.add_argument("--chunks", type=int, default=6)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    sim = Simulation(tps=args.tps)
    site = build_default_site(sim)
    works = sim.world.get(site.brick_works, Pos2D)
    core = sim.world.get(site.core, Pos2D)

    def show(name: str, data: dict) -> None:
        if name.startswith("production"):
            print(f"  t={sim.clock.tick_number:>4}  {name:<22} {data}")

    sim.bus.subscribe(ANY, show)

    print(f"=== Shift: {args.chunks} chunks at {args.tps} tps ===\n")
    for tile in site.tiles[: args.chunks]:
        item = None
        while item is None:
            item = sim.strike_tile(tile)
        if not sim.attempt_delivery(item, works.x, works.y):
            # Brick works full: the core takes anything.
            sim.attempt_delivery(item, core.x, core.y)
        sim.run(sim.clock.tps)

    sim.run(sim.clock.ticks_for(30.0))

    prod = sim.production(site.brick_works)
    stored = sim.inventory(site.core)
    print(
        f"\nBrick works: {prod.input_amount} chunks waiting, "
        f"{prod.output_amount} bricks made ({prod.state})"
    )
    print(f"Core store: {stored.total()} units")


if __name__ == "__main__":
    main()
