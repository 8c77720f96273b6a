"""Command group: Yields relations between nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from edugraph.commands._base import EduGroup
from edugraph.services.yields import YieldsService

if TYPE_CHECKING:
    from edugraph.commands._context import AppContext

_YIELDS_EXAMPLES = """\
  edugraph yields create <unit-id> <result-id>
  edugraph --json yields create <unit-id> <result-id>
  edugraph yields delete <relation-id>"""


@click.group(cls=EduGroup, examples=_YIELDS_EXAMPLES)
def yields() -> None:
    """Add and remove Yields relations."""


@yields.command(
    examples="""\
  edugraph yields create 0b8e6c52-2f7e-4d7a-9c1b-6a1f5d2e3c4b 7d9a1e2f-3b4c-4d5e-8f6a-7b8c9d0e1f2a
  edugraph -v yields create <unit-id> <result-id>"""
)
@click.argument("start")
@click.argument("end")
@click.pass_obj
def create(app: AppContext, start: str, end: str) -> None:
    """Create START -Yields-> END if it keeps the graph valid."""
    app.emit(YieldsService(app.store).create_yields(start, end))


@yields.command()
@click.argument("relation_id")
@click.pass_obj
def delete(app: AppContext, relation_id: str) -> None:
    """Delete a Yields relation by id."""
    app.emit(YieldsService(app.store).delete_yields(relation_id))
