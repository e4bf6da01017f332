"""Output mode dispatch for ServiceResult.

Humans get Rich-rendered text, ``--quiet`` gets the bare answer, and
``--json`` gets the serialized ServiceResult.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from roadhub.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from roadhub.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags resolved from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int = 100
    max_listed: int = 20


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON takes precedence over quiet, quiet over the Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        width=settings.width,
        max_listed=settings.max_listed,
    )
