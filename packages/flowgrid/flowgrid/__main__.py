"""Command line entry point: ``python -m flowgrid``."""
from __future__ import annotations

import argparse
import logging
import sys

from flowgrid.config import FlowConfig
from flowgrid.scenario import SCENARIOS
from flowgrid.world import World


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="flowgrid", description="Grid resource-flow simulation"
    )
    parser.add_argument(
        "--scenario", choices=sorted(SCENARIOS), default="chain",
        help="Entities to seed before the first tick (default: chain)",
    )
    parser.add_argument(
        "--ticks", type=int, default=0,
        help="Number of ticks to run, 0 runs until interrupted (default: 0)",
    )
    parser.add_argument("--tps", type=int, default=4, help="Ticks per second (default: 4)")
    parser.add_argument("--width", type=int, default=64, help="Viewport width (default: 64)")
    parser.add_argument("--height", type=int, default=32, help="Viewport height (default: 32)")
    parser.add_argument("--no-render", action="store_true", help="Skip terminal drawing")
    parser.add_argument("--debug", action="store_true", help="Log every entity each tick")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = FlowConfig(
            width=args.width,
            height=args.height,
            tps=args.tps,
            render=not args.no_render,
        )
    except ValueError as exc:
        print(f"flowgrid: {exc}", file=sys.stderr)
        return 2

    world = World(config)
    SCENARIOS[args.scenario](world.entities)

    try:
        if args.ticks > 0:
            world.run(args.ticks)
        else:
            world.run_forever()
    except KeyboardInterrupt:
        pass
    print(f"Done. Stopped at tick {world.clock.tick_number}.")
    print("Holdings:", world.entities.holdings())
    return 0


if __name__ == "__main__":
    sys.exit(main())
