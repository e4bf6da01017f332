"""Shared pytest fixtures and test helpers for roadhub tests."""

from __future__ import annotations

import logging
import random
from collections.abc import Generator, Sequence
from pathlib import Path

import networkx as nx
import pytest
from click.testing import CliRunner

from roadhub.config.settings import RoadhubSettings
from roadhub.domain.types import Direction
from roadhub.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by the CLI or tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    roadhub_logger = logging.getLogger("roadhub")
    roadhub_level = roadhub_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    roadhub_logger.setLevel(roadhub_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no roadhub env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    for name in ("ROADHUB_CONFIG", "ROADHUB_SOLVER__DIRECTION", "ROADHUB_SOLVER__VALIDATE_INPUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> RoadhubSettings:
    """Default settings, isolated from any roadhub.toml on the host."""
    monkeypatch.delenv("ROADHUB_CONFIG", raising=False)
    return RoadhubSettings.from_cli(start=tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def oracle_capitals(
    a: Sequence[int],
    b: Sequence[int],
    direction: Direction = Direction.INBOUND,
) -> list[int]:
    """Brute force: every city whose reach covers all cities, via NetworkX."""
    g = nx.DiGraph()
    g.add_nodes_from(range(len(a) + 1))
    g.add_edges_from(zip(a, b, strict=True))
    everyone = set(g.nodes)
    capitals = []
    for city in sorted(g.nodes):
        if direction is Direction.INBOUND:
            covered = nx.ancestors(g, city) | {city}
        else:
            covered = nx.descendants(g, city) | {city}
        if covered == everyone:
            capitals.append(city)
    return capitals


def random_tree_roads(rng: random.Random, n: int) -> tuple[list[int], list[int]]:
    """N roads with distinct sources: every city has at most one outgoing road."""
    sources = rng.sample(range(n + 1), n)
    return sources, [rng.randrange(n + 1) for _ in sources]


def random_roads(rng: random.Random, n: int) -> tuple[list[int], list[int]]:
    """N roads with arbitrary endpoints (repeated sources, self-loops allowed)."""
    return (
        [rng.randrange(n + 1) for _ in range(n)],
        [rng.randrange(n + 1) for _ in range(n)],
    )
