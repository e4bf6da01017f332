"""Commands: capital election, analysis, and the sample run."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadhub.commands._base import CITY_LIST, RoadCommand
from roadhub.domain.types import Direction
from roadhub.services.capital import CapitalService

if TYPE_CHECKING:
    from roadhub.commands._context import AppContext


def _roads_options(func: click.decorators.FC) -> click.decorators.FC:
    """Shared ``--from`` / ``--to`` / ``--direction`` options."""
    func = click.option(
        "--direction",
        type=click.Choice([d.value for d in Direction]),
        default=None,
        help="inbound: every city reaches the capital; outbound: the capital reaches every city.",
    )(func)
    func = click.option(
        "--to",
        "b",
        type=CITY_LIST,
        default="",
        help="Comma-separated destination city of each road.",
    )(func)
    func = click.option(
        "--from",
        "a",
        type=CITY_LIST,
        default="",
        help="Comma-separated source city of each road.",
    )(func)
    return func


@click.command(
    cls=RoadCommand,
    examples="""\
  roadhub capital --from 1,2,3 --to 0,0,0
  roadhub capital --from 0,1,2,4,5 --to 2,3,3,3,2
  roadhub capital --from 0,1 --to 1,2 --direction outbound
  roadhub --json capital --from 1 --to 0""",
)
@_roads_options
@click.pass_obj
def capital(app: AppContext, a: list[int], b: list[int], direction: str | None) -> None:
    """Elect the city every road leads to (-1 if there is none)."""
    service = CapitalService(app.settings)
    app.emit(service.find(a, b, direction=Direction(direction) if direction else None))


@click.command(
    cls=RoadCommand,
    examples="""\
  roadhub analyze --from 0,1,2,4,5 --to 2,3,3,3,2
  roadhub -v analyze --from 1,0 --to 0,1""",
)
@_roads_options
@click.pass_obj
def analyze(app: AppContext, a: list[int], b: list[int], direction: str | None) -> None:
    """List every valid capital and how many cities reach each city."""
    service = CapitalService(app.settings)
    app.emit(service.analyze(a, b, direction=Direction(direction) if direction else None))


@click.command(
    cls=RoadCommand,
    examples="""\
  roadhub demo
  roadhub -q demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Elect capitals for the two sample road maps."""
    app.emit(CapitalService(app.settings).demo())
