"""Generators wiring lists and grids of nodes into common network shapes.

One-dimensional generators take a sequence of nodes; the ``_2d`` variants take
a sequence of rows. Empty places are given as ``None`` and are left alone.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from socnetkit.factories import LinkFactory
from socnetkit.nodes import Node

log = logging.getLogger(__name__)

NodeRow = Sequence[Optional[Node]]
NodeGrid = Sequence[NodeRow]

_EPS = 1e-45


def _rng_or_default(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def _grid_cells(nodes: NodeGrid):
    for row in nodes:
        yield from row


def make_ring_net(
    nodes: NodeRow, factory: LinkFactory, neighborhood: int
) -> None:
    """Link every node to ``neighborhood`` neighbours on each side of a ring."""
    n = len(nodes)
    for i, source in enumerate(nodes):
        if source is None:
            continue
        for j in range(1, neighborhood + 1):
            left = nodes[(i - j) % n]
            right = nodes[(i + j) % n]
            if left is not None:
                source.add_conn(factory.make_link(source, left))
            if right is not None:
                source.add_conn(factory.make_link(source, right))


def make_torus_net(
    nodes: NodeRow, factory: LinkFactory, neighborhood: int
) -> None:
    """One-dimensional torus lattice: the same as a ring."""
    make_ring_net(nodes, factory, neighborhood)


def make_torus_net_2d(
    nodes: NodeGrid, factory: LinkFactory, neighborhood: int
) -> None:
    """Link every node to all nodes within a square Moore neighbourhood on a torus."""
    rows = len(nodes)
    for i, row in enumerate(nodes):
        columns = len(row)
        for k, source in enumerate(row):
            if source is None:
                continue
            for dv in range(-neighborhood, neighborhood + 1):
                vert = (i + dv) % rows
                for dh in range(-neighborhood, neighborhood + 1):
                    hor = (k + dh) % columns
                    target = nodes[vert][hor]
                    if target is not None and target is not source:
                        source.add_conn(factory.make_link(source, target))


def _rewire_one(
    source: Node, target: Node, reciprocal: bool, rng: random.Random
) -> None:
    """Point one random link of ``source`` at ``target`` instead."""
    link = source.conn_at(rng.randrange(len(source)) if len(source) else 0)
    if reciprocal:
        old_target = link.target
        back = old_target.conn_to(source)
        if back is not None:
            old_target.del_conn(back)
            back.target = source
            target.add_conn(back)
    link.target = target


def rewire_links_randomly(
    nodes: NodeRow,
    probability: float,
    reciprocal: bool,
    rng: Optional[random.Random] = None,
) -> None:
    """With ``probability`` per node, move one of its links to a random new target.

    A node chosen for rewiring must have at least one link; otherwise
    :class:`IndexError` is raised.
    """
    rng = _rng_or_default(rng)
    n = len(nodes)
    for source in nodes:
        if source is None:
            continue
        if rng.random() < probability:
            target = nodes[rng.randrange(n)]
            if (
                target is None
                or target is source
                or source.conn_to(target) is not None
            ):
                continue
            _rewire_one(source, target, reciprocal, rng)


def rewire_links_randomly_2d(
    nodes: NodeGrid,
    probability: float,
    reciprocal: bool,
    rng: Optional[random.Random] = None,
) -> None:
    """Grid version of :func:`rewire_links_randomly`."""
    rng = _rng_or_default(rng)
    for source in _grid_cells(nodes):
        if source is None:
            continue
        if rng.random() < probability:
            row = nodes[rng.randrange(len(nodes))]
            target = row[rng.randrange(len(row))]
            if (
                target is None
                or target is source
                or source.conn_to(target) is not None
            ):
                continue
            _rewire_one(source, target, reciprocal, rng)


def make_small_world_net(
    nodes: NodeRow,
    factory: LinkFactory,
    neighborhood: int,
    probability: float,
    reciprocal: bool,
    rng: Optional[random.Random] = None,
) -> None:
    """Classic small world: a ring with randomly rewired links."""
    make_torus_net(nodes, factory, neighborhood)
    rewire_links_randomly(nodes, probability, reciprocal, rng)


def make_small_world_net_2d(
    nodes: NodeGrid,
    factory: LinkFactory,
    neighborhood: int,
    probability: float,
    reciprocal: bool,
    rng: Optional[random.Random] = None,
) -> None:
    """Classic small world on a torus grid with randomly rewired links."""
    make_torus_net_2d(nodes, factory, neighborhood)
    rewire_links_randomly_2d(nodes, probability, reciprocal, rng)


def make_improved_small_world_net(
    nodes: NodeRow,
    factory: LinkFactory,
    neighborhood: int,
    probability: float,
    reciprocal: bool,
    rng: Optional[random.Random] = None,
) -> None:
    """Small world made by adding random links on top of a ring."""
    make_torus_net(nodes, factory, neighborhood)
    make_random_net(nodes, factory, probability, reciprocal, rng)


def make_improved_small_world_net_2d(
    nodes: NodeGrid,
    factory: LinkFactory,
    neighborhood: int,
    probability: float,
    reciprocal: bool,
    rng: Optional[random.Random] = None,
) -> None:
    """Small world made by adding random links on top of a torus grid."""
    make_torus_net_2d(nodes, factory, neighborhood)
    make_random_net_2d(nodes, factory, probability, reciprocal, rng)


def make_scale_free(
    nodes: NodeRow,
    factory: LinkFactory,
    size_of_first_cluster: int,
    new_links_per_node: int,
    reciprocal: bool,
    rng: Optional[random.Random] = None,
) -> None:
    """Preferential attachment grown from a fully connected random cluster.

    Each round gives every node one new link to a target chosen with
    probability proportional to the target's number of links. A node that
    cannot gain any new link is passed over.
    """
    rng = _rng_or_default(rng)
    present = [node for node in nodes if node is not None]
    if size_of_first_cluster > len(present):
        raise ValueError(
            f"first cluster of {size_of_first_cluster} nodes needs more than "
            f"{len(present)} available nodes"
        )

    cluster: list[Node] = []
    while len(cluster) < size_of_first_cluster:
        candidate = nodes[rng.randrange(len(nodes))]
        if candidate is None or any(candidate is member for member in cluster):
            continue
        cluster.append(candidate)
    make_full_net(cluster, factory)

    number_of_links = float(sum(len(node) for node in present))
    log.debug("initial number of links is %s", number_of_links)

    for _ in range(new_links_per_node):
        j = 0
        while j < len(nodes):
            source = nodes[j]
            if source is None:
                j += 1
                continue
            reachable = any(
                target is not source
                and len(target) > 0
                and source.conn_to(target) is None
                for target in present
            )
            if not reachable:
                j += 1
                continue

            where = _EPS + rng.random()
            start = 0.0
            for target in present:
                window = len(target) / number_of_links
                if start < where <= start + window:
                    if target is not source and source.add_conn(
                        factory.make_link(source, target)
                    ):
                        number_of_links += 1
                        if reciprocal and target.add_conn(
                            factory.make_link(target, source)
                        ):
                            number_of_links += 1
                        j += 1
                    break
                start += window


def make_full_net(nodes: NodeRow, factory: LinkFactory) -> None:
    """Link every node to every node at another position."""
    for i, source in enumerate(nodes):
        if source is None:
            continue
        for j, target in enumerate(nodes):
            if i != j and target is not None:
                source.add_conn(factory.make_link(source, target))


def make_full_net_2d(nodes: NodeGrid, factory: LinkFactory) -> None:
    """Link every node of a grid to every other node of it."""
    for source in _grid_cells(nodes):
        if source is None:
            continue
        for target in _grid_cells(nodes):
            if target is not None and target is not source:
                source.add_conn(factory.make_link(source, target))


def make_random_net(
    nodes: NodeRow,
    factory: LinkFactory,
    probability: float,
    reciprocal: bool,
    rng: Optional[random.Random] = None,
) -> None:
    """Link each pair of nodes with ``probability``.

    With ``reciprocal`` each unordered pair is drawn once and linked both ways;
    otherwise each ordered pair is drawn separately.
    """
    rng = _rng_or_default(rng)
    n = len(nodes)
    for i, source in enumerate(nodes):
        if source is None:
            continue
        candidates = range(i + 1, n) if reciprocal else range(n)
        for j in candidates:
            target = nodes[j]
            if target is None or target is source or not rng.random() < probability:
                continue
            added = source.add_conn(factory.make_link(source, target))
            if reciprocal and added:
                target.add_conn(factory.make_link(target, source))


def make_random_net_2d(
    nodes: NodeGrid,
    factory: LinkFactory,
    probability: float,
    reciprocal: bool,
    rng: Optional[random.Random] = None,
) -> None:
    """Grid version of :func:`make_random_net`.

    With ``reciprocal`` only targets with both a larger row and a larger
    column index than the source are drawn.
    """
    rng = _rng_or_default(rng)
    for i, row in enumerate(nodes):
        for g, source in enumerate(row):
            if source is None:
                continue
            if reciprocal:
                pairs = (
                    (j, h)
                    for j in range(i + 1, len(nodes))
                    for h in range(g + 1, len(nodes[j]))
                )
            else:
                pairs = (
                    (j, h) for j in range(len(nodes)) for h in range(len(nodes[j]))
                )
            for j, h in pairs:
                target = nodes[j][h]
                if (
                    target is None
                    or target is source
                    or not rng.random() < probability
                ):
                    continue
                added = source.add_conn(factory.make_link(source, target))
                if reciprocal and added:
                    target.add_conn(factory.make_link(target, source))


def make_orphans_adoption(
    nodes: NodeRow,
    factory: LinkFactory,
    reciprocal: bool,
    rng: Optional[random.Random] = None,
) -> None:
    """Give every node without links one link to a randomly chosen node.

    Nodes that already have links are preferred as foster parents; once
    enough orphans have been drawn, any other node is accepted.
    """
    rng = _rng_or_default(rng)
    n = len(nodes)
    for i, source in enumerate(nodes):
        if source is None or len(source) > 0:
            continue
        if not any(
            node is not None for position, node in enumerate(nodes) if position != i
        ):
            raise ValueError(f"no node can adopt the orphan at position {i}")

        tries_left = n
        target: Optional[Node] = None
        while target is None:
            t = rng.randrange(n)
            candidate = nodes[t]
            if t == i or candidate is None:
                continue
            if len(candidate) == 0 and tries_left > 0:
                tries_left -= 1
                continue
            target = candidate

        if not source.add_conn(factory.make_link(source, target)):
            log.warning("orphan at position %d could not be linked", i)
        elif reciprocal:
            target.add_conn(factory.make_link(target, source))