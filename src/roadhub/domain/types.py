"""Election direction and the structured election outcome."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

NO_CAPITAL = -1


class Direction(StrEnum):
    """Which way the roads must run relative to the capital."""

    INBOUND = "inbound"  # every city reaches the capital
    OUTBOUND = "outbound"  # the capital reaches every city


class Election(BaseModel):
    """Outcome of a two-phase capital election.

    Attributes:
        capital: The elected city, or ``NO_CAPITAL`` (-1).
        candidate: The city that survived the elimination pass.
        city_count: Number of cities (roads + 1).
        road_count: Number of roads.
        direction: Direction the election was run in.
        stragglers: Cities that failed verification against *candidate*.
    """

    model_config = {"frozen": True}

    capital: int
    candidate: int
    city_count: int
    road_count: int
    direction: Direction = Direction.INBOUND
    stragglers: list[int] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.capital != NO_CAPITAL
