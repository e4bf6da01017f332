"""Subcommand modules for roadhub.

Provides register_commands() which uses deferred imports to keep
``roadhub --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from roadhub.commands.capital import analyze, capital, demo

    cli.add_command(capital)
    cli.add_command(analyze)
    cli.add_command(demo)
