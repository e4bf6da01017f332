"""Tests for RoadGraphEngine: NetworkX view of a road map."""

from __future__ import annotations

import random

import pytest

from roadhub.domain.types import Direction
from roadhub.infrastructure.graph.engine import RoadGraphEngine
from tests.conftest import oracle_capitals, random_roads


class TestGraphBuild:
    def test_lazy_build(self) -> None:
        engine = RoadGraphEngine([1, 2, 3], [0, 0, 0])
        assert engine._graph is None
        g = engine.graph
        assert engine._graph is g
        assert engine.graph is g

    def test_all_cities_present(self) -> None:
        engine = RoadGraphEngine([0], [0])
        assert sorted(engine.graph.nodes) == [0, 1]

    def test_edges_carry_road_index(self) -> None:
        g = RoadGraphEngine([1, 2], [0, 1]).graph
        assert g.edges[1, 0]["road"] == 0
        assert g.edges[2, 1]["road"] == 1

    def test_outbound_reverses_edges(self) -> None:
        g = RoadGraphEngine([1], [0], direction=Direction.OUTBOUND).graph
        assert g.has_edge(0, 1)
        assert not g.has_edge(1, 0)


class TestSinkComponents:
    def test_single_sink(self) -> None:
        engine = RoadGraphEngine([0, 1, 2, 4, 5], [2, 3, 3, 3, 2])
        assert engine.sink_components() == [[3]]
        assert engine.capitals() == [3]

    def test_two_sinks_no_capital(self) -> None:
        engine = RoadGraphEngine([0, 1], [1, 1])
        assert engine.sink_components() == [[1], [2]]
        assert engine.capitals() == []

    def test_cycle_is_one_component(self) -> None:
        engine = RoadGraphEngine([0, 1, 2], [1, 0, 0])
        assert engine.sink_components() == [[0, 1], [3]]
        assert engine.capitals() == []

    def test_single_city(self) -> None:
        engine = RoadGraphEngine([], [])
        assert engine.capitals() == [0]

    @pytest.mark.parametrize("direction", list(Direction))
    def test_capitals_match_oracle(self, direction: Direction) -> None:
        rng = random.Random(31)
        for n in range(0, 20):
            a, b = random_roads(rng, n)
            engine = RoadGraphEngine(a, b, direction=direction)
            assert engine.capitals() == oracle_capitals(a, b, direction)


class TestReachCounts:
    def test_star(self) -> None:
        counts = RoadGraphEngine([1, 2, 3], [0, 0, 0]).reach_counts()
        assert counts == {0: 3, 1: 0, 2: 0, 3: 0}

    def test_chain(self) -> None:
        counts = RoadGraphEngine([0, 1], [1, 2]).reach_counts()
        assert counts == {0: 0, 1: 1, 2: 2}
