"""Subcommand modules for edugraph.

Provides register_commands() which uses deferred imports to keep
``edugraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from edugraph.commands.graph import graph
    from edugraph.commands.node import result, unit
    from edugraph.commands.yields import yields

    cli.add_command(unit)
    cli.add_command(result)
    cli.add_command(yields)
    cli.add_command(graph)
