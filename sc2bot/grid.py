"""Grid helpers: terrain height, visibility and creep checks, placement search and ramps."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass

GridPoint = tuple[int, int]
Point = tuple[float, float]


@dataclass
class PlacementOptions:
    """Options for searching a building placement around a position."""

    max_distance: int = 15
    step: int = 2
    random: bool = False
    addon: bool = False


def z_height_from_raw(value: int) -> float:
    """Convert a raw terrain height byte to a height in world space."""
    return value * 32.0 / 255.0 - 16.0


def _square(pos: GridPoint, radius: int) -> Iterator[tuple[int, int, GridPoint]]:
    cx, cy = pos
    for x in range(-radius, radius + 1):
        for y in range(-radius, radius + 1):
            yield x, y, (cx + x, cy + y)


def is_surround_visible(
    is_visible: Callable[[GridPoint], bool], pos: GridPoint, radius: int
) -> bool:
    """Check that every cell of the square of ``radius`` around ``pos`` is visible."""
    return all(is_visible(point) for _, _, point in _square(pos, radius))


def has_creep_around(
    has_creep: Callable[[GridPoint], bool], pos: GridPoint, radius: int
) -> bool:
    """Check that every cell within the circle of ``radius`` around ``pos`` has creep."""
    limit = radius * radius
    return all(
        has_creep(point) for x, y, point in _square(pos, radius) if x * x + y * y <= limit
    )


def placement_rings(near: Point, options: PlacementOptions | None = None) -> Iterator[list[Point]]:
    """Yield, ring by ring, the candidate positions checked around ``near``.

    Rings grow by ``options.step`` from ``step`` up to, but not including,
    ``options.max_distance``.
    """
    options = options or PlacementOptions()
    step = options.step
    if step <= 0:
        raise ValueError("placement step must be bigger than 0")
    nx, ny = near
    for distance in range(step, options.max_distance, step):
        ring: list[Point] = []
        for offset in range(-distance, distance + 1, step):
            ring.extend(
                (
                    (nx + offset, ny - distance),
                    (nx + offset, ny + distance),
                    (nx - distance, ny + offset),
                    (nx + distance, ny + offset),
                )
            )
        yield ring


def neighbors8(pos: GridPoint) -> list[GridPoint]:
    """Return the eight cells around ``pos``."""
    x, y = pos
    return [
        (x + 1, y),
        (x - 1, y),
        (x, y + 1),
        (x, y - 1),
        (x + 1, y + 1),
        (x - 1, y - 1),
        (x + 1, y - 1),
        (x - 1, y + 1),
    ]


def classify_terrain(
    points: Iterable[GridPoint],
    is_pathable: Callable[[GridPoint], bool],
    is_placeable: Callable[[GridPoint], bool],
    get_height: Callable[[GridPoint], int],
) -> tuple[list[GridPoint], set[GridPoint]]:
    """Split pathable, unplaceable cells into vision blockers and ramp cells.

    A cell whose eight neighbours all share its height is a vision blocker;
    any other such cell belongs to a ramp.
    """
    vision_blockers: list[GridPoint] = []
    ramp_points: set[GridPoint] = set()
    for pos in points:
        if not is_pathable(pos) or is_placeable(pos):
            continue
        height = get_height(pos)
        if all(get_height(n) == height for n in neighbors8(pos)):
            vision_blockers.append(pos)
        else:
            ramp_points.add(pos)
    return vision_blockers, ramp_points


def cluster_points(
    points: Iterable[Hashable], neighbours: Callable[[Hashable], Iterable[Hashable]]
) -> list[list[Hashable]]:
    """Group points into clusters connected through ``neighbours``.

    Only neighbours that are themselves among ``points`` link clusters.
    Clusters come in the order their first point appears.
    """
    members = list(dict.fromkeys(points))
    known = set(members)
    seen: set[Hashable] = set()
    clusters: list[list[Hashable]] = []
    for start in members:
        if start in seen:
            continue
        seen.add(start)
        cluster = [start]
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for other in neighbours(current):
                if other in known and other not in seen:
                    seen.add(other)
                    cluster.append(other)
                    queue.append(other)
        clusters.append(cluster)
    return clusters