"""Network links: weighted, typed connections pointing at a target node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

LINK_INTENSITY = 128
"""Default alpha used when drawing links."""

MAX_LINK_WEIGHT = 1.0
"""Stroke width used for a link of unit absolute weight."""


class Rgba(NamedTuple):
    """An 8-bit colour with alpha."""

    red: int
    green: int
    blue: int
    alpha: int = 255


@dataclass(frozen=True)
class StrokeStyle:
    """How a link should be stroked: line width and colour."""

    width: float
    color: Rgba


def _channel(value: float) -> int:
    return int(min(255.0, max(0.0, value)))


def _rgba(red: float, green: float, blue: float, alpha: float = 255) -> Rgba:
    return Rgba(_channel(red), _channel(green), _channel(blue), _channel(alpha))


def _type_color(ltype: int, weight: float, alpha: float = 255) -> Rgba:
    """Colour of a link of the given type and weight."""
    if ltype == 0:
        if weight <= 0:
            return _rgba(0, -weight * 255, 0, alpha)
        return _rgba(weight * 255, 0, weight * 255, alpha)
    if ltype == 1:
        if weight <= 0:
            return _rgba(-weight * 255, 0, 0, alpha)
        return _rgba(0, weight * 255, weight * 255, alpha)
    if ltype == 2:
        if weight <= 0:
            return _rgba(0, 0, -weight * 255, alpha)
        return _rgba(weight * 255, weight * 255, 0, alpha)
    if weight >= 0:
        return _rgba(128, 0, weight * 255, alpha)
    return _rgba(-weight * 255, -weight * 255, 128, alpha)


@dataclass(eq=False)
class Link:
    """A directed link to ``target`` with a weight and a type marker.

    Links compare by identity; ordering puts heavier links first.
    """

    target: Any
    weight: float
    ltype: int

    def full_info(self, field_separator: str) -> str:
        """Text with weight, type and target, separated by ``field_separator``."""
        return (
            f"W:{self.weight}{field_separator}"
            f"Tp:{self.ltype}{field_separator}"
            f"->{self.name()}"
        )

    def compare_to(self, other: Link) -> int:
        """Return 0 for equal weights, 1 if ``other`` is heavier, else -1."""
        if other is self or other.weight == self.weight:
            return 0
        if other.weight > self.weight:
            return 1
        return -1

    def __lt__(self, other: Link) -> bool:
        if not isinstance(other, Link):
            return NotImplemented
        return self.compare_to(other) < 0

    def name(self) -> str:
        """Name of the target node."""
        return self.target.name()

    def def_color(self) -> Rgba:
        """Default colour derived from the link type and weight."""
        return _type_color(self.ltype, self.weight)

    def stroke_style(self, intensity: float) -> StrokeStyle:
        """Stroke for drawing this link, with ``intensity`` as alpha."""
        return StrokeStyle(
            width=abs(self.weight) * MAX_LINK_WEIGHT,
            color=_type_color(self.ltype, self.weight, intensity),
        )

    def scale_stroke_style(self, weight: float, max_intensity: float) -> StrokeStyle:
        """Stroke for a weight-scale sample of this link's type at ``weight``."""
        return StrokeStyle(
            width=1 + abs(weight) * MAX_LINK_WEIGHT,
            color=_type_color(self.ltype, weight, max_intensity),
        )