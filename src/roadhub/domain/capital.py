"""Capital election: the city every road leads to.

Two phases over a road map of N+1 cities:

1. Elimination: start with city 0 as the candidate; any city that cannot
   reach the current candidate takes its place.
2. Verification: every other city must reach the surviving candidate.

Elimination never discards a true capital.  If some city ``t`` is reached
from everywhere, then when the pass arrives at ``t`` either ``t`` cannot
reach the candidate and replaces it, or it can, in which case everything
reaches the candidate through ``t``.  A universal candidate is never
replaced.  This holds for any road layout, not only tree-shaped ones; the
verification pass runs regardless and is what decides the answer.

With N roads over N+1 cities a capital is unique when it exists: a sink
cycle of k cities spends k roads, leaving some other city without a way
out.

Both phases call :func:`can_reach` O(N) times, so the election is O(N^2)
in the worst case.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from roadhub.domain.roads import RoadMap, build_road_map, can_reach
from roadhub.domain.types import NO_CAPITAL, Direction, Election

logger = logging.getLogger(__name__)


def eliminate(road_map: RoadMap) -> int:
    """Run the elimination pass and return the surviving candidate."""
    candidate = 0
    for city in range(1, len(road_map)):
        if not can_reach(road_map, city, candidate):
            candidate = city
    return candidate


def stragglers(road_map: RoadMap, candidate: int) -> list[int]:
    """Return every city other than *candidate* that cannot reach it."""
    return [
        city
        for city in range(len(road_map))
        if city != candidate and not can_reach(road_map, city, candidate)
    ]


def conclude(
    road_map: RoadMap,
    candidate: int,
    failed: list[int],
    *,
    road_count: int,
    direction: Direction,
) -> Election:
    """Turn the outcome of both phases into an :class:`Election`.

    The candidate is the capital only when verification left no stragglers.
    """
    capital = NO_CAPITAL if failed else candidate
    logger.debug(
        "Election over %d cities: candidate=%d capital=%d stragglers=%d",
        len(road_map),
        candidate,
        capital,
        len(failed),
    )
    return Election(
        capital=capital,
        candidate=candidate,
        city_count=len(road_map),
        road_count=road_count,
        direction=direction,
        stragglers=failed,
    )


def elect_capital(
    a: Sequence[int],
    b: Sequence[int],
    *,
    direction: Direction = Direction.INBOUND,
    validate: bool = True,
) -> Election:
    """Elect the capital of the roads ``a[i] -> b[i]``.

    Args:
        a: Source city of each road.
        b: Destination city of each road.
        direction: ``INBOUND`` elects a city reached from every city;
            ``OUTBOUND`` elects a city that reaches every city.
        validate: Reject mismatched lengths and out-of-range cities with
            :class:`~roadhub.domain.errors.InvalidInputError`.

    Returns:
        The :class:`Election`, with ``capital == -1`` when no city qualifies.
    """
    road_map = build_road_map(a, b, direction=direction, validate=validate)
    candidate = eliminate(road_map)
    failed = stragglers(road_map, candidate)
    return conclude(road_map, candidate, failed, road_count=len(a), direction=direction)


def find_central_node(
    a: Sequence[int],
    b: Sequence[int],
    *,
    direction: Direction = Direction.INBOUND,
) -> int:
    """Return the city reached from every other city, or -1 if there is none.

    >>> find_central_node([1, 2, 3], [0, 0, 0])
    0
    >>> find_central_node([], [])
    0
    """
    return elect_capital(a, b, direction=direction).capital
