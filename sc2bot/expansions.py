"""Expansion locations: grouping resources into bases and picking townhall spots."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

Point = tuple[float, float]
GridPoint = tuple[int, int]

_OFFSET = 7
_MIN_OFFSET_SQUARED = 16
_MAX_OFFSET_SQUARED = 64
_GEYSER_CLEARANCE_SQUARED = 49.0
_MINERAL_CLEARANCE_SQUARED = 36.0


class Alliance(Enum):
    """Relation of a unit or expansion to the bot; values follow the game protocol."""

    Own = 1
    Ally = 2
    Neutral = 3
    Enemy = 4

    def is_mine(self) -> bool:
        """Return True if this belongs to the bot."""
        return self is Alliance.Own

    def is_ally(self) -> bool:
        """Return True if this belongs to an ally."""
        return self is Alliance.Ally

    def is_neutral(self) -> bool:
        """Return True if this belongs to nobody."""
        return self is Alliance.Neutral

    def is_enemy(self) -> bool:
        """Return True if this belongs to the opponent."""
        return self is Alliance.Enemy


@dataclass(frozen=True)
class Resource:
    """A mineral field or vespene geyser on the map."""

    tag: int
    position: Point
    is_geyser: bool = False


@dataclass
class Expansion:
    """Information about an expansion location."""

    loc: Point
    center: Point
    minerals: list[int] = field(default_factory=list)
    geysers: set[int] = field(default_factory=set)
    alliance: Alliance = Alliance.Neutral
    base: int | None = None


def _distance_squared(a: Point, b: Point) -> float:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def _mean(points: list[Point]) -> Point:
    if not points:
        raise ValueError("cannot take the center of no resources")
    return (
        sum(p[0] for p in points) / len(points),
        sum(p[1] for p in points) / len(points),
    )


def _snap(point: Point) -> Point:
    return (math.floor(point[0]) + 0.5, math.floor(point[1]) + 0.5)


def expansion_offsets() -> list[GridPoint]:
    """Return the offsets from a resource center tried as townhall positions.

    They lie in the square of side 15 around the center, strictly further
    than 4 and at most 8 away, ordered by x, then y.
    """
    return [
        (x, y)
        for x in range(-_OFFSET, _OFFSET + 1)
        for y in range(-_OFFSET, _OFFSET + 1)
        if _MIN_OFFSET_SQUARED < x * x + y * y <= _MAX_OFFSET_SQUARED
    ]


def resources_center(resources: Iterable[Resource]) -> Point:
    """Return the mean position of ``resources`` snapped to the middle of its grid cell."""
    return _snap(_mean([r.position for r in resources]))


def _balanced_center(resources: list[Resource]) -> Point:
    geysers = [r.position for r in resources if r.is_geyser]
    minerals = [r.position for r in resources if not r.is_geyser]
    if geysers and minerals:
        g, m = _mean(geysers), _mean(minerals)
        return _snap(((g[0] + m[0]) / 2, (g[1] + m[1]) / 2))
    return resources_center(resources)


def _grid_cell(point: Point) -> GridPoint:
    return (max(0, int(point[0])), max(0, int(point[1])))


def _candidates(
    center: Point, resources: list[Resource], is_placeable: Callable[[GridPoint], bool]
) -> Iterator[tuple[Point, float]]:
    for dx, dy in expansion_offsets():
        pos = (center[0] + dx, center[1] + dy)
        if not is_placeable(_grid_cell(pos)):
            continue
        max_distance = 0.0
        for r in resources:
            dist = _distance_squared(pos, r.position)
            max_distance = max(max_distance, math.sqrt(dist))
            needed = _GEYSER_CLEARANCE_SQUARED if r.is_geyser else _MINERAL_CLEARANCE_SQUARED
            if dist < needed:
                break
        else:
            yield pos, max_distance


def find_expansion_location(
    resources_center: Point,
    resources: Iterable[Resource],
    is_placeable: Callable[[GridPoint], bool],
) -> Point:
    """Return the townhall position for a resource group.

    Among placeable offsets from ``resources_center`` that keep clear of every
    resource (7 from geysers, 6 from minerals), the one whose furthest
    resource is nearest wins; ties go to the earliest offset.
    Raises ValueError when no position fits.
    """
    found = list(_candidates(resources_center, list(resources), is_placeable))
    if not found:
        raise ValueError("Can't detect right position for expansion")
    return min(found, key=lambda item: item[1])[0]


def sort_minerals(minerals: Iterable[Resource], loc: Point) -> list[int]:
    """Return mineral tags ordered by distance to ``loc``, nearest first."""
    ordered = sorted(minerals, key=lambda m: _distance_squared(m.position, loc))
    return [m.tag for m in ordered]


def build_expansion(
    resources: Iterable[Resource],
    is_placeable: Callable[[GridPoint], bool],
) -> Expansion:
    """Build a free expansion for a resource group."""
    group = list(resources)
    loc = find_expansion_location(resources_center(group), group, is_placeable)
    return Expansion(
        loc=loc,
        center=_balanced_center(group),
        minerals=sort_minerals((r for r in group if not r.is_geyser), loc),
        geysers={r.tag for r in group if r.is_geyser},
    )


def free_expansions(expansions: Iterable[Expansion]) -> Iterator[Expansion]:
    """Yield expansions not taken by anybody."""
    return (exp for exp in expansions if exp.alliance.is_neutral())


def owned_expansions(expansions: Iterable[Expansion]) -> Iterator[Expansion]:
    """Yield expansions taken by the bot."""
    return (exp for exp in expansions if exp.alliance.is_mine())


def enemy_expansions(expansions: Iterable[Expansion]) -> Iterator[Expansion]:
    """Yield expansions taken by the opponent."""
    return (exp for exp in expansions if exp.alliance.is_enemy())


def get_expansion(expansions: Iterable[Expansion]) -> Expansion | None:
    """Return the first free expansion, or None when all are taken."""
    return next(free_expansions(expansions), None)