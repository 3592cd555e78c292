"""Factories producing links between network nodes."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any

from socnetkit.links import Link


class LinkFactory(ABC):
    """Something that makes links between nodes."""

    @abstractmethod
    def make_link(self, source: Any, target: Any) -> Link:
        """Make a link from ``source`` to ``target``."""

    def make_self_link(self, node: Any) -> Link:
        """Make a link from ``node`` to itself."""
        raise TypeError(f"{type(self).__name__} does not produce self links")


class BasicLinkFactory(LinkFactory):
    """Makes identical links that differ only in their targets."""

    def __init__(self, default_weight: float, default_type: int) -> None:
        self.default_weight = default_weight
        self.default_type = default_type

    def make_link(self, source: Any, target: Any) -> Link:
        return Link(target, self.default_weight, self.default_type)


class RandomWeightLinkFactory(LinkFactory):
    """Makes links with weights drawn uniformly from ``[min_weight, max_weight]``."""

    def __init__(
        self,
        min_weight: float,
        max_weight: float,
        default_type: int,
        rng: random.Random | None = None,
    ) -> None:
        self.min_weight = min_weight
        self.max_weight = max_weight
        self.default_type = default_type
        self.rng = rng if rng is not None else random.Random()

    def _weight(self) -> float:
        return self.rng.uniform(self.min_weight, self.max_weight)

    def make_link(self, source: Any, target: Any) -> Link:
        """Make a link to ``target``; ``source`` is not used."""
        return Link(target, self._weight(), self.default_type)

    def make_self_link(self, node: Any) -> Link:
        return Link(node, self._weight(), self.default_type)