import random

import pytest

from socnetkit.factories import BasicLinkFactory
from socnetkit.generators import (
    make_full_net,
    make_full_net_2d,
    make_improved_small_world_net,
    make_improved_small_world_net_2d,
    make_orphans_adoption,
    make_random_net,
    make_random_net_2d,
    make_ring_net,
    make_scale_free,
    make_small_world_net,
    make_small_world_net_2d,
    make_torus_net,
    make_torus_net_2d,
    rewire_links_randomly,
    rewire_links_randomly_2d,
)
from socnetkit.nodes import Visual2DNodeAsList


def make_nodes(count):
    return [Visual2DNodeAsList(float(i), 0.0) for i in range(count)]


def make_grid(rows, columns):
    return [
        [Visual2DNodeAsList(float(c), float(r)) for c in range(columns)]
        for r in range(rows)
    ]


def targets(node):
    return {id(link.target) for link in node}


def ids(nodes):
    return {id(node) for node in nodes}


@pytest.fixture
def factory():
    return BasicLinkFactory(0.5, 1)


def test_full_net_links_everyone(factory):
    nodes = make_nodes(5)
    make_full_net(nodes, factory)
    for node in nodes:
        assert len(node) == len(nodes) - 1
        assert targets(node) == ids(nodes) - {id(node)}


def test_full_net_skips_empty_places(factory):
    nodes = make_nodes(4)
    nodes[2] = None
    make_full_net(nodes, factory)
    present = [node for node in nodes if node is not None]
    for node in present:
        assert targets(node) == ids(present) - {id(node)}


def test_ring_links_left_and_right(factory):
    nodes = make_nodes(6)
    make_ring_net(nodes, factory, 1)
    for i, node in enumerate(nodes):
        expected = {id(nodes[(i - 1) % 6]), id(nodes[(i + 1) % 6])}
        assert targets(node) == expected


def test_ring_with_gap(factory):
    nodes = make_nodes(5)
    nodes[1] = None
    make_ring_net(nodes, factory, 1)
    assert targets(nodes[0]) == {id(nodes[4])}
    assert targets(nodes[2]) == {id(nodes[3])}


def test_torus_is_ring(factory):
    ring = make_nodes(7)
    torus = make_nodes(7)
    make_ring_net(ring, factory, 2)
    make_torus_net(torus, factory, 2)
    assert [len(node) for node in ring] == [len(node) for node in torus]
    for i, node in enumerate(torus):
        expected = {id(torus[(i + d) % 7]) for d in (-2, -1, 1, 2)}
        assert targets(node) == expected


def test_torus_2d_moore_neighbourhood(factory):
    grid = make_grid(4, 5)
    make_torus_net_2d(grid, factory, 1)
    for r, row in enumerate(grid):
        for c, node in enumerate(row):
            expected = {
                id(grid[(r + dr) % 4][(c + dc) % 5])
                for dr in (-1, 0, 1)
                for dc in (-1, 0, 1)
                if (dr, dc) != (0, 0)
            }
            assert targets(node) == expected


def test_full_net_2d(factory):
    grid = make_grid(2, 3)
    make_full_net_2d(grid, factory)
    everyone = [node for row in grid for node in row]
    for node in everyone:
        assert targets(node) == ids(everyone) - {id(node)}


def test_random_net_probability_zero(factory):
    nodes = make_nodes(6)
    make_random_net(nodes, factory, 0.0, True, random.Random(1))
    assert all(len(node) == 0 for node in nodes)


@pytest.mark.parametrize("reciprocal", [True, False])
def test_random_net_probability_one_is_full(factory, reciprocal):
    nodes = make_nodes(6)
    make_random_net(nodes, factory, 1.0, reciprocal, random.Random(1))
    for node in nodes:
        assert targets(node) == ids(nodes) - {id(node)}


def test_random_net_reciprocal_is_symmetric(factory):
    nodes = make_nodes(10)
    make_random_net(nodes, factory, 0.4, True, random.Random(7))
    total = sum(len(node) for node in nodes)
    assert total > 0
    assert total % 2 == 0
    for node in nodes:
        for link in node:
            assert link.target.conn_to(node).target is node


def test_random_net_2d_probability_zero(factory):
    grid = make_grid(3, 3)
    make_random_net_2d(grid, factory, 0.0, False, random.Random(2))
    assert all(len(node) == 0 for row in grid for node in row)


def test_random_net_2d_non_reciprocal_full(factory):
    grid = make_grid(3, 2)
    make_random_net_2d(grid, factory, 1.0, False, random.Random(2))
    everyone = [node for row in grid for node in row]
    for node in everyone:
        assert targets(node) == ids(everyone) - {id(node)}


def test_random_net_2d_reciprocal_diagonal_only(factory):
    grid = make_grid(2, 2)
    make_random_net_2d(grid, factory, 1.0, True, random.Random(2))
    assert targets(grid[0][0]) == {id(grid[1][1])}
    assert targets(grid[1][1]) == {id(grid[0][0])}
    assert len(grid[0][1]) == 0


def test_orphans_adoption_links_every_node(factory):
    nodes = make_nodes(8)
    make_orphans_adoption(nodes, factory, False, random.Random(3))
    for node in nodes:
        assert len(node) >= 1
        assert all(link.target is not node for link in node)


def test_orphans_adoption_reciprocal(factory):
    nodes = make_nodes(6)
    make_orphans_adoption(nodes, factory, True, random.Random(4))
    for node in nodes:
        assert len(node) >= 1
        for link in node:
            assert link.target.conn_to(node).target is node


def test_orphans_adoption_keeps_linked_nodes(factory):
    nodes = make_nodes(4)
    make_full_net(nodes, factory)
    before = [targets(node) for node in nodes]
    make_orphans_adoption(nodes, factory, True, random.Random(5))
    assert [targets(node) for node in nodes] == before


def test_orphans_adoption_lonely_node_raises(factory):
    nodes = [Visual2DNodeAsList(0.0, 0.0), None]
    with pytest.raises(ValueError):
        make_orphans_adoption(nodes, factory, False, random.Random(5))


def test_rewire_probability_zero_changes_nothing(factory):
    nodes = make_nodes(6)
    make_ring_net(nodes, factory, 1)
    before = [targets(node) for node in nodes]
    rewire_links_randomly(nodes, 0.0, False, random.Random(6))
    assert [targets(node) for node in nodes] == before


def test_rewire_keeps_link_count(factory):
    nodes = make_nodes(12)
    make_ring_net(nodes, factory, 1)
    total = sum(len(node) for node in nodes)
    rewire_links_randomly(nodes, 1.0, False, random.Random(8))
    assert sum(len(node) for node in nodes) == total
    for node in nodes:
        assert all(link.target is not node for link in node)


def test_rewire_node_without_links_raises(factory):
    nodes = make_nodes(3)
    with pytest.raises(IndexError):
        rewire_links_randomly(nodes, 1.0, False, random.Random(0))


def test_rewire_2d_keeps_link_count(factory):
    grid = make_grid(4, 4)
    make_torus_net_2d(grid, factory, 1)
    total = sum(len(node) for row in grid for node in row)
    rewire_links_randomly_2d(grid, 1.0, False, random.Random(9))
    assert sum(len(node) for row in grid for node in row) == total


def test_small_world_probability_zero_is_ring(factory):
    nodes = make_nodes(8)
    make_small_world_net(nodes, factory, 1, 0.0, True, random.Random(1))
    for i, node in enumerate(nodes):
        assert targets(node) == {id(nodes[(i - 1) % 8]), id(nodes[(i + 1) % 8])}


def test_small_world_2d_probability_zero_is_torus(factory):
    grid = make_grid(3, 3)
    make_small_world_net_2d(grid, factory, 1, 0.0, True, random.Random(1))
    everyone = [node for row in grid for node in row]
    for node in everyone:
        assert targets(node) == ids(everyone) - {id(node)}


def test_improved_small_world_full_probability(factory):
    nodes = make_nodes(7)
    make_improved_small_world_net(nodes, factory, 1, 1.0, True, random.Random(2))
    for node in nodes:
        assert targets(node) == ids(nodes) - {id(node)}


def test_improved_small_world_2d_probability_zero(factory):
    grid = make_grid(4, 4)
    make_improved_small_world_net_2d(grid, factory, 1, 0.0, False, random.Random(2))
    assert all(len(node) == 8 for row in grid for node in row)


def test_scale_free_links_every_node(factory):
    nodes = make_nodes(12)
    make_scale_free(nodes, factory, 4, 1, False, random.Random(11))
    for node in nodes:
        assert len(node) >= 1
        assert all(link.target is not node for link in node)
        assert len(targets(node)) == len(node)


def test_scale_free_reciprocal_symmetric(factory):
    nodes = make_nodes(10)
    make_scale_free(nodes, factory, 3, 2, True, random.Random(12))
    for node in nodes:
        assert len(node) >= 1
        for link in node:
            assert link.target.conn_to(node).target is node


def test_scale_free_cluster_too_large(factory):
    nodes = make_nodes(3)
    with pytest.raises(ValueError):
        make_scale_free(nodes, factory, 4, 1, False, random.Random(0))