"""CapitalService: capital election and whole-map analysis.

Wraps the domain election in the ServiceResult contract: invalid roads
become an ``INVALID_INPUT`` error, a map without a capital is a successful
result with ``found`` set to False and a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from roadhub.domain.capital import conclude, eliminate, stragglers
from roadhub.domain.errors import InvalidInputError
from roadhub.domain.roads import build_road_map
from roadhub.domain.types import Direction, Election
from roadhub.infrastructure.graph.engine import RoadGraphEngine
from roadhub.services.result import ServiceResult
from roadhub.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from roadhub.config.settings import RoadhubSettings

logger = logging.getLogger(__name__)


def _rejected(op: str, exc: Exception) -> ServiceResult:
    """Convert bad roads into a failed ``INVALID_INPUT`` result.

    Validated input fails with :class:`InvalidInputError` and its detail;
    with ``validate_input`` off, the raw indexing or typing error is reported.
    """
    if isinstance(exc, InvalidInputError):
        logger.debug("Rejected roads: %s", exc.message)
        return ServiceResult.failure(op, exc.code, exc.message, **exc.detail)
    logger.debug("Unchecked roads failed: %r", exc)
    return ServiceResult.failure(
        op,
        InvalidInputError.code,
        f"Invalid roads: {exc}",
        error=type(exc).__name__,
    )


class CapitalService:
    """Elect and analyze capitals for a set of roads."""

    def __init__(self, settings: RoadhubSettings) -> None:
        self._settings = settings

    def _direction(self, direction: Direction | None) -> Direction:
        return direction if direction is not None else self._settings.solver.direction

    # ------------------------------------------------------------------
    # capital: two-phase election
    # ------------------------------------------------------------------

    def _elect(self, a: Sequence[int], b: Sequence[int], direction: Direction) -> Election:
        with trace_span("build_road_map") as span:
            road_map = build_road_map(
                a,
                b,
                direction=direction,
                validate=self._settings.solver.validate_input,
            )
            if span:
                span.annotate("cities", len(road_map))
                span.annotate("roads", len(a))

        with trace_span("elimination") as span:
            candidate = eliminate(road_map)
            if span:
                span.annotate("candidate", candidate)

        with trace_span("verification") as span:
            failed = stragglers(road_map, candidate)
            if span:
                span.annotate("stragglers", len(failed))

        return conclude(road_map, candidate, failed, road_count=len(a), direction=direction)

    @traced
    def find(
        self,
        a: Sequence[int],
        b: Sequence[int],
        *,
        direction: Direction | None = None,
    ) -> ServiceResult:
        """Elect the capital of the roads ``a[i] -> b[i]``.

        Args:
            a: Source city of each road.
            b: Destination city of each road.
            direction: Override the configured ``[solver] direction``.
        """
        direction = self._direction(direction)
        try:
            election = self._elect(a, b, direction)
        except (IndexError, TypeError, ValueError) as exc:
            return _rejected("capital", exc)

        warnings: list[str] = []
        if not election.found:
            count = len(election.stragglers)
            cities = f"{count} {'city' if count == 1 else 'cities'}"
            if direction is Direction.INBOUND:
                warnings.append(f"No capital: {cities} cannot reach {election.candidate}")
            else:
                warnings.append(f"No capital: {election.candidate} cannot reach {cities}")

        data: dict[str, Any] = {
            "capital": election.capital,
            "found": election.found,
            "candidate": election.candidate,
            "direction": str(election.direction),
            "city_count": election.city_count,
            "road_count": election.road_count,
            "stragglers": election.stragglers,
        }
        return ServiceResult(ok=True, op="capital", data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # analyze: election cross-checked against the condensation
    # ------------------------------------------------------------------

    @traced
    def analyze(
        self,
        a: Sequence[int],
        b: Sequence[int],
        *,
        direction: Direction | None = None,
    ) -> ServiceResult:
        """Elect a capital and report every valid capital and per-city reach.

        Runs the election, then builds a NetworkX view of the same roads to
        list all cities that qualify (a whole strongly connected component
        may), the sink components, and how many cities reach each city.
        Fails with ``INCONSISTENT`` if the two disagree.
        """
        direction = self._direction(direction)
        try:
            election = self._elect(a, b, direction)
        except (IndexError, TypeError, ValueError) as exc:
            return _rejected("analyze", exc)

        engine = RoadGraphEngine(a, b, direction=direction)
        with trace_span("condensation") as span:
            sinks = engine.sink_components()
            capitals = engine.capitals()
            if span:
                span.annotate("sink_components", len(sinks))

        with trace_span("reach_counts"):
            counts = engine.reach_counts()

        consistent = election.capital in capitals if election.found else not capitals
        if not consistent:
            logger.error(
                "Election (%d) disagrees with condensation capitals %s",
                election.capital,
                capitals,
            )
            return ServiceResult.failure(
                "analyze",
                "INCONSISTENT",
                f"Elected capital {election.capital} does not match graph capitals {capitals}",
                capital=election.capital,
                capitals=capitals,
            )

        items = [
            {"id": city, "reached_by": reached_by, "capital": city in capitals}
            for city, reached_by in counts.items()
        ]
        warnings: list[str] = []
        if not capitals:
            warnings.append(f"No capital: {len(sinks)} separate sink components")

        return ServiceResult(
            ok=True,
            op="analyze",
            data={
                "capital": election.capital,
                "capitals": capitals,
                "sink_components": sinks,
                "direction": str(direction),
                "city_count": election.city_count,
                "road_count": election.road_count,
                "count": len(items),
                "items": items,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # demo: the two sample road maps
    # ------------------------------------------------------------------

    @traced
    def demo(self) -> ServiceResult:
        """Run the election over the built-in sample road maps."""
        runs: list[dict[str, Any]] = []
        for a, b in DEMO_ROADS:
            result = self.find(a, b)
            runs.append({"from": a, "to": b, "capital": result.data["capital"]})
        return ServiceResult(ok=True, op="demo", data={"count": len(runs), "runs": runs})


DEMO_ROADS: list[tuple[list[int], list[int]]] = [
    ([1, 2, 3], [0, 0, 0]),
    ([0, 1, 2, 4, 5], [2, 3, 3, 3, 2]),
]
