"""Command group: whole-graph views and integrity audit."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from edugraph.commands._base import EduGroup
from edugraph.services.graph import GraphService

if TYPE_CHECKING:
    from edugraph.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  edugraph graph show
  edugraph --json graph show
  edugraph graph check"""


@click.group(cls=EduGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Inspect the concept graph."""


@graph.command()
@click.pass_obj
def show(app: AppContext) -> None:
    """List all nodes and Yields relations."""
    app.emit(GraphService(app.store).overview())


@graph.command()
@click.pass_obj
def check(app: AppContext) -> None:
    """Audit stored relations for cycles and type-policy violations."""
    app.emit(GraphService(app.store).check())
