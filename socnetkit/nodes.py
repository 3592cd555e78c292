"""Network nodes holding outgoing links, as a list or keyed by target name."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional

from socnetkit.links import Link, Rgba

log = logging.getLogger(__name__)

LinkPredicate = Callable[[Link], bool]


def _require_link(link: Optional[Link]) -> Link:
    if link is None:
        raise ValueError("empty link cannot be added to a node")
    return link


class Node(ABC):
    """A network node: a named container of outgoing links."""

    @abstractmethod
    def name(self) -> str:
        """Name of the node, used for display and as a lookup key."""

    @abstractmethod
    def add_conn(self, link: Link) -> bool:
        """Add ``link``; return True if it was new."""

    @abstractmethod
    def del_conn(self, link: Link) -> bool:
        """Remove ``link``; return True if it was present."""

    @abstractmethod
    def conn_at(self, index: int) -> Link:
        """Return the link at position ``index``."""

    @abstractmethod
    def conn_to(self, node: Node) -> Optional[Link]:
        """Return the link pointing at ``node``, or None."""

    @abstractmethod
    def conn_named(self, name: str) -> Optional[Link]:
        """Return the link whose target is named ``name``, or None."""

    @abstractmethod
    def get_conns(self, link_filter: Optional[LinkPredicate]) -> list[Link]:
        """Return the links accepted by ``link_filter``."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of outgoing links."""

    @abstractmethod
    def __iter__(self) -> Iterator[Link]:
        """Iterate over outgoing links."""


class NodeAsList(Node):
    """Node keeping its links in insertion order in a list."""

    def __init__(self) -> None:
        self.connections: list[Link] = []

    def add_conn(self, link: Link) -> bool:
        link = _require_link(link)
        if link.target is self:
            log.debug("self connecting of %s", self.name())
        if self.conn_to(link.target) is not None:
            log.debug("link %s -> %s already exists", self.name(), link.name())
            return False
        self.connections.append(link)
        return True

    def del_conn(self, link: Link) -> bool:
        for position, existing in enumerate(self.connections):
            if existing is link:
                del self.connections[position]
                return True
        return False

    def conn_at(self, index: int) -> Link:
        if not 0 <= index < len(self.connections):
            raise IndexError(
                f"index {index} out of range for {len(self.connections)} links"
            )
        return self.connections[index]

    def conn_to(self, node: Node) -> Optional[Link]:
        if node is None:
            raise ValueError("empty node given to conn_to")
        return next((link for link in self.connections if link.target is node), None)

    def conn_named(self, name: str) -> Optional[Link]:
        if not name:
            raise ValueError("empty name given to conn_named")
        return next(
            (link for link in self.connections if link.target.name() == name), None
        )

    def get_conns(self, link_filter: Optional[LinkPredicate]) -> list[Link]:
        if link_filter is None:
            return list(self.connections)
        return [link for link in self.connections if link_filter(link)]

    def def_color(self) -> Rgba:
        """Default node colour: translucent black."""
        return Rgba(0, 0, 0, 128)

    def __len__(self) -> int:
        return len(self.connections)

    def __iter__(self) -> Iterator[Link]:
        return iter(self.connections)


class NodeAsMap(Node):
    """Node keeping its links keyed by the name of their target."""

    def __init__(self) -> None:
        self.connections: dict[str, Link] = {}

    def add_conn(self, link: Link) -> bool:
        """Store ``link`` under its target's name, replacing any previous one.

        Returns True only if no link to that name existed before.
        """
        link = _require_link(link)
        if link.target is self:
            log.debug("self connecting of %s", self.name())
        key = link.target.name()
        old = self.connections.get(key)
        self.connections[key] = link
        return old is None

    def del_conn(self, link: Link) -> bool:
        for key, existing in self.connections.items():
            if existing is link:
                del self.connections[key]
                return True
        return False

    def conn_at(self, index: int) -> Link:
        if not 0 <= index < len(self.connections):
            raise IndexError(
                f"index {index} out of range for {len(self.connections)} links"
            )
        for position, link in enumerate(self.connections.values()):
            if position == index:
                return link
        raise IndexError(index)

    def conn_to(self, node: Node) -> Optional[Link]:
        if node is None:
            raise ValueError("empty node given to conn_to")
        return self.connections.get(node.name())

    def conn_named(self, name: str) -> Optional[Link]:
        if not name:
            raise ValueError("empty name given to conn_named")
        return self.connections.get(name)

    def get_conns(self, link_filter: Optional[LinkPredicate]) -> list[Link]:
        if link_filter is None:
            raise ValueError("a link filter is required")
        return [link for link in self.connections.values() if link_filter(link)]

    def def_color(self) -> Rgba:
        """Default node colour: translucent white."""
        return Rgba(255, 255, 255, 128)

    def __len__(self) -> int:
        return len(self.connections)

    def __iter__(self) -> Iterator[Link]:
        return iter(self.connections.values())


class _Visual2D:
    """Position and colours shared by the drawable 2D nodes."""

    x: float
    y: float
    z: float = 0.0

    def _init_visual(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.fill_color = Rgba(0, 0, 0, 0)
        self.stroke_color = Rgba(0, 0, 0, 0)

    def name(self) -> str:
        return f"({self.x},{self.y}){type(self).__name__}@{id(self):x}"


class Visual2DNodeAsList(_Visual2D, NodeAsList):
    """List-based node placed at a point on a plane."""

    def __init__(self, x: float, y: float) -> None:
        NodeAsList.__init__(self)
        self._init_visual(x, y)

    def name(self) -> str:
        """Coordinates followed by an identity tag unique to this node."""
        return _Visual2D.name(self)


class Visual2DNodeAsMap(_Visual2D, NodeAsMap):
    """Map-based node placed at a point on a plane."""

    def __init__(self, x: float, y: float) -> None:
        NodeAsMap.__init__(self)
        self._init_visual(x, y)

    def name(self) -> str:
        """Coordinates followed by an identity tag unique to this node."""
        return _Visual2D.name(self)