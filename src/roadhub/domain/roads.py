"""Road maps and reachability.

A road map is an adjacency list over the cities ``0..N`` built from two
parallel sequences: road ``i`` runs from ``a[i]`` to ``b[i]``.  Successors
keep the order the roads were given in.  Maps are built per call and never
mutated afterward.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from roadhub.domain.errors import InvalidInputError
from roadhub.domain.types import Direction

logger = logging.getLogger(__name__)

type RoadMap = list[list[int]]


def validate_roads(a: Sequence[int], b: Sequence[int]) -> None:
    """Raise :class:`InvalidInputError` unless *a* and *b* describe N roads over ``0..N``."""
    if len(a) != len(b):
        msg = f"Road lists differ in length: {len(a)} sources, {len(b)} destinations"
        raise InvalidInputError(msg, sources=len(a), destinations=len(b))

    highest = len(a)
    for side, values in (("from", a), ("to", b)):
        for index, value in enumerate(values):
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"Road {index} has a non-integer '{side}' city: {value!r}"
                raise InvalidInputError(msg, side=side, index=index, value=repr(value))
            if not 0 <= value <= highest:
                msg = f"Road {index} '{side}' city {value} is outside [0, {highest}]"
                raise InvalidInputError(msg, side=side, index=index, value=value)


def build_road_map(
    a: Sequence[int],
    b: Sequence[int],
    *,
    direction: Direction = Direction.INBOUND,
    validate: bool = True,
) -> RoadMap:
    """Build the adjacency list for N roads over N+1 cities.

    With ``Direction.OUTBOUND`` every road is inserted reversed, so that
    "reaches the capital" on the returned map means "is reached from the
    capital" on the original roads.

    Args:
        a: Source city of each road.
        b: Destination city of each road.
        direction: Orientation to build the map in.
        validate: Check lengths, types and city ranges first. When False,
            a length mismatch raises ``ValueError`` and a city outside
            ``0..N`` raises ``IndexError``.

    Raises:
        IndexError: A negative city, even when *validate* is False, since
            Python indexing would otherwise wrap it around to a real city.
    """
    if validate:
        validate_roads(a, b)

    city_count = len(a) + 1
    road_map: RoadMap = [[] for _ in range(city_count)]
    for index, (src, dst) in enumerate(zip(a, b, strict=True)):
        if src < 0 or dst < 0:
            msg = f"Road {index} has a negative city: {src} -> {dst}"
            raise IndexError(msg)
        if direction is Direction.OUTBOUND:
            src, dst = dst, src
        road_map[src].append(dst)

    logger.debug("Built road map: %d cities, %d roads (%s)", city_count, len(a), direction)
    return road_map


def can_reach(road_map: RoadMap, start: int, target: int) -> bool:
    """Return True if *target* is reachable from *start* by following roads.

    Depth-first with an explicit stack and a visited buffer sized to the map;
    stops at the first sighting of *target*.  A city always reaches itself.
    """
    visited = [False] * len(road_map)
    stack = [start]

    while stack:
        city = stack.pop()
        if city == target:
            return True
        if visited[city]:
            continue
        visited[city] = True
        for neighbor in road_map[city]:
            if not visited[neighbor]:
                stack.append(neighbor)

    return False
