# socnetkit

socnetkit provides small building blocks for modelling (social) networks. It has no dependencies outside the standard library.

- **Links** (`socnetkit.links`)
  - `Link(target, weight, ltype)` is a directed, weighted and typed connection to a target node.
  - Sorting a list of links puts the heaviest weight first. `compare_to` gives the same ordering as `0`, `1` or `-1`.
  - `full_info(separator)` describes the link as text.
  - `def_color()` returns an `Rgba` colour chosen from the type and the weight.
  - `stroke_style(intensity)` and `scale_stroke_style(weight, max_intensity)` return a `StrokeStyle`, which holds a width and a colour.
- **Link factories** (`socnetkit.factories`)
  - `BasicLinkFactory(weight, ltype)` makes identical links that differ only in their target.
  - `RandomWeightLinkFactory(min_weight, max_weight, ltype, rng=None)` draws each weight uniformly from the range. It can also make self links.
- **Link filters** (`socnetkit.filters`)
  - The filters are `AllLinks` (a shared instance is `ALL_LINKS`), `TypeFilter`, `LowPassFilter`, `HighPassFilter`, `AbsLowPassFilter`, `AbsHighPassFilter` and `TypeAndAbsHighPassFilter`. `TypeAndAbsHighPassFilter` can be reconfigured in place with `reset`.
  - Filters are callables.
  - Combine filters with `&` and `|`, or with `AndFilter` and `OrFilter`.
- **Nodes** (`socnetkit.nodes`)
  - `NodeAsList` keeps its links in insertion order.
  - `NodeAsMap` keys its links by the name of the target. Adding a link to a name that already has one replaces the old link.
  - Both kinds support these methods:
    - `add_conn`
    - `del_conn`
    - `conn_at`
    - `conn_to`
    - `conn_named`
    - `get_conns(filter)`
    - `len()`
    - iteration
  - `Visual2DNodeAsList(x, y)` and `Visual2DNodeAsMap(x, y)` are nodes with a position on a plane.
- **Generators** (`socnetkit.generators`)
  - These functions wire a list of nodes, or a grid given as rows, into a network:
    - ring and torus (`make_ring_net`, `make_torus_net`, `make_torus_net_2d`)
    - full (`make_full_net`, `make_full_net_2d`)
    - random (`make_random_net`, `make_random_net_2d`)
    - small world (`make_small_world_net`, `make_small_world_net_2d`)
    - improved small world (`make_improved_small_world_net`, `make_improved_small_world_net_2d`)
    - scale free (`make_scale_free`)
  - `rewire_links_randomly` and `rewire_links_randomly_2d` move some links to new random targets.
  - `make_orphans_adoption` gives every node that has no links one link.
  - Positions that hold `None` are skipped.
  - Pass a `random.Random` as `rng` to get reproducible results.

## Installation

```
pip install .
```

## Example

```python
import random

from socnetkit.factories import RandomWeightLinkFactory
from socnetkit.filters import AbsHighPassFilter, TypeFilter
from socnetkit.generators import make_ring_net, rewire_links_randomly
from socnetkit.nodes import Visual2DNodeAsList

rng = random.Random(1)
nodes = [Visual2DNodeAsList(rng.uniform(0, 500), rng.uniform(0, 500)) for _ in range(20)]
factory = RandomWeightLinkFactory(-1.0, 1.0, 1, rng=rng)

make_ring_net(nodes, factory, 2)
rewire_links_randomly(nodes, 0.1, True, rng)

strong = AbsHighPassFilter(0.5) & TypeFilter(1)
for node in nodes:
    print(node.name(), [link.weight for link in node.get_conns(strong)])
```

## Demo

The package installs a small command. It places nodes at random points, links every pair both ways with random weights in [-1, 1], and prints each node with its number of links, followed by totals:

```
socnetkit-demo
socnetkit-demo --count 5 --seed 42 --links
```

The command takes these options:

- `--count`: number of nodes (default 10)
- `--width` and `--height`: the area (default 500 × 500)
- `--seed`: random seed
- `--links`: list each node's links, heaviest first

## What it does not do

socnetkit does not draw anything. Colours, stroke styles and node positions are returned as plain data. There is no window, no canvas and no rendering of networks. Drawing is left to whatever graphics library you use.

## Running the tests

```
pip install .[test]
pytest
```