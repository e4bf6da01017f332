"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, roadhub.toml only contains
overrides.  An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from roadhub.domain.types import Direction


class SolverConfig(BaseModel):
    """[solver] section."""

    model_config = {"frozen": True}

    direction: Direction = Direction.INBOUND
    validate_input: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)
    max_listed: int = Field(default=20, ge=1)
