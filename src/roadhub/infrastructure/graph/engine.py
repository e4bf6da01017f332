"""RoadGraphEngine: lazy-built NetworkX graph over a set of roads.

Rebuilt per engine, no cross-call cache.  Every city ``0..N`` is added as a
node so isolated cities are visible to the algorithms.  For
``Direction.OUTBOUND`` the roads are added reversed, matching
:func:`roadhub.domain.roads.build_road_map`.
"""

from __future__ import annotations

from collections.abc import Sequence

import networkx as nx

from roadhub.domain.types import Direction

type _Graph = nx.DiGraph


class RoadGraphEngine:
    """Lazy-loading graph engine for whole-map analysis."""

    def __init__(
        self,
        a: Sequence[int],
        b: Sequence[int],
        *,
        direction: Direction = Direction.INBOUND,
    ) -> None:
        self._a = list(a)
        self._b = list(b)
        self._direction = direction
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the graph, building it on first access."""
        if self._graph is None:
            self._graph = self._build()
        return self._graph

    def _build(self) -> _Graph:
        g: _Graph = nx.DiGraph()
        g.add_nodes_from(range(len(self._a) + 1))
        for index, (src, dst) in enumerate(zip(self._a, self._b, strict=True)):
            if self._direction is Direction.OUTBOUND:
                src, dst = dst, src
            g.add_edge(src, dst, road=index)
        return g

    def sink_components(self) -> list[list[int]]:
        """Strongly connected components that no road leaves, smallest city first.

        Every city reaches at least one of these; a capital exists exactly
        when there is only one.
        """
        dag = nx.condensation(self.graph)
        sinks = [
            sorted(dag.nodes[component]["members"])
            for component in dag.nodes
            if dag.out_degree(component) == 0
        ]
        return sorted(sinks)

    def capitals(self) -> list[int]:
        """Every city reached from all other cities, ascending."""
        sinks = self.sink_components()
        if len(sinks) != 1:
            return []
        return sinks[0]

    def reach_counts(self) -> dict[int, int]:
        """Map each city to the number of other cities that reach it."""
        g = self.graph
        return {city: len(nx.ancestors(g, city)) for city in sorted(g.nodes)}
