"""Root CLI group for roadhub with global flags and command registration."""

from __future__ import annotations

import click

from roadhub import __version__
from roadhub.commands import register_commands
from roadhub.commands._base import RoadGroup
from roadhub.commands._context import AppContext
from roadhub.config.settings import RoadhubSettings


@click.group(
    cls=RoadGroup,
    invoke_without_command=True,
    examples="""\
  roadhub capital --from 1,2,3 --to 0,0,0
  roadhub --json analyze --from 0,1,2,4,5 --to 2,3,3,3,2
  roadhub -q demo""",
)
@click.version_option(version=__version__, prog_name="roadhub")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the answer.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing telemetry.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """roadhub: find the capital city that every road leads to."""
    settings = RoadhubSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
