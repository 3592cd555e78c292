"""Small demonstration: scatter nodes on a plane and wire them into a full network."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from socnetkit.factories import RandomWeightLinkFactory
from socnetkit.filters import ALL_LINKS
from socnetkit.generators import make_full_net
from socnetkit.nodes import Visual2DNodeAsList

DEFAULT_COUNT = 10
DEFAULT_WIDTH = 500.0
DEFAULT_HEIGHT = 500.0
MIN_WEIGHT = -1.0
MAX_WEIGHT = 1.0
LINK_TYPE = 1


def build_demo_network(
    count: int = DEFAULT_COUNT,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    rng: Optional[random.Random] = None,
) -> list[Visual2DNodeAsList]:
    """Place ``count`` nodes at random points and link every pair both ways.

    Link weights are drawn uniformly from [-1, 1] and all links have type 1.
    """
    if count < 0:
        raise ValueError(f"node count must not be negative, got {count}")
    if width < 0 or height < 0:
        raise ValueError(f"area must not be negative, got {width}x{height}")
    rng = rng if rng is not None else random.Random()
    nodes = [
        Visual2DNodeAsList(rng.uniform(0, width), rng.uniform(0, height))
        for _ in range(count)
    ]
    factory = RandomWeightLinkFactory(MIN_WEIGHT, MAX_WEIGHT, LINK_TYPE, rng=rng)
    make_full_net(nodes, factory)
    return nodes


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="socnetkit-demo",
        description="Build a fully connected random network and describe it.",
    )
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT, help="number of nodes")
    parser.add_argument("--width", type=float, default=DEFAULT_WIDTH, help="area width")
    parser.add_argument("--height", type=float, default=DEFAULT_HEIGHT, help="area height")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--links", action="store_true", help="list every link of every node"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration and print a summary of the network."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    try:
        nodes = build_demo_network(args.count, args.width, args.height, rng)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 2

    total = 0
    for node in nodes:
        links = node.get_conns(ALL_LINKS)
        total += len(links)
        print(f"{node.name()}\t{len(links)}")
        if args.links:
            for link in sorted(links):
                print(f"  {link.full_info(' ')}")
    print(f"nodes: {len(nodes)}")
    print(f"links: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())