"""Link filters: predicates selecting links by type and weight."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from socnetkit.links import Link


class LinkFilter(ABC):
    """A predicate on links.

    Filters can be called directly and combined with ``&`` and ``|``.
    """

    @abstractmethod
    def accepts(self, link: Link) -> bool:
        """Return True if ``link`` passes this filter."""

    def __call__(self, link: Link) -> bool:
        return self.accepts(link)

    def __and__(self, other: LinkFilter) -> AndFilter:
        if not isinstance(other, LinkFilter):
            return NotImplemented
        return AndFilter(self, other)

    def __or__(self, other: LinkFilter) -> OrFilter:
        if not isinstance(other, LinkFilter):
            return NotImplemented
        return OrFilter(self, other)


class AllLinks(LinkFilter):
    """Accepts every link."""

    def accepts(self, link: Link) -> bool:
        return True

    def __repr__(self) -> str:
        return "AllLinks()"


ALL_LINKS = AllLinks()
"""Shared filter accepting every link."""


@dataclass
class AndFilter(LinkFilter):
    """Accepts links that both filters accept."""

    a: LinkFilter
    b: LinkFilter

    def accepts(self, link: Link) -> bool:
        return self.a.accepts(link) and self.b.accepts(link)


@dataclass
class OrFilter(LinkFilter):
    """Accepts links that either filter accepts."""

    a: LinkFilter
    b: LinkFilter

    def accepts(self, link: Link) -> bool:
        return self.a.accepts(link) or self.b.accepts(link)


@dataclass
class TypeFilter(LinkFilter):
    """Accepts links of one type marker."""

    ltype: int

    def accepts(self, link: Link) -> bool:
        return link.ltype == self.ltype


@dataclass
class LowPassFilter(LinkFilter):
    """Accepts links with weight strictly below the threshold."""

    threshold: float

    def accepts(self, link: Link) -> bool:
        return link.weight < self.threshold


@dataclass
class HighPassFilter(LinkFilter):
    """Accepts links with weight strictly above the threshold."""

    threshold: float

    def accepts(self, link: Link) -> bool:
        return link.weight > self.threshold


@dataclass
class AbsLowPassFilter(LinkFilter):
    """Accepts links whose absolute weight is below ``abs(threshold)``."""

    threshold: float

    def __post_init__(self) -> None:
        self.threshold = abs(self.threshold)

    def accepts(self, link: Link) -> bool:
        return abs(link.weight) < self.threshold


@dataclass
class AbsHighPassFilter(LinkFilter):
    """Accepts links whose absolute weight is above ``abs(threshold)``."""

    threshold: float

    def __post_init__(self) -> None:
        self.threshold = abs(self.threshold)

    def accepts(self, link: Link) -> bool:
        return abs(link.weight) > self.threshold


@dataclass
class TypeAndAbsHighPassFilter(LinkFilter):
    """Accepts links of one type whose absolute weight exceeds the threshold.

    It can be reconfigured in place with :meth:`reset`, which suits
    repeated use while drawing.
    """

    ltype: int = -1
    threshold: float = 0.0

    def reset(self, ltype: int, threshold: float) -> TypeAndAbsHighPassFilter:
        """Set a new type and threshold and return this filter."""
        self.ltype = ltype
        self.threshold = threshold
        return self

    def accepts(self, link: Link) -> bool:
        return link.ltype == self.ltype and abs(link.weight) > self.threshold