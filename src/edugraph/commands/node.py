"""Command groups: ``unit`` and ``result`` node CRUD.

Both groups share one factory; they differ only in the node type they
manage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from edugraph.commands._base import EduGroup
from edugraph.domain.types import NodeType
from edugraph.services.nodes import NodeService

if TYPE_CHECKING:
    from edugraph.commands._context import AppContext


def _payload(**options: Any) -> dict[str, Any]:
    """Keep only the options the user actually passed."""
    return {k: v for k, v in options.items() if v is not None}


def _node_group(node_type: NodeType) -> click.Group:
    cmd_name = node_type.value.lower()
    examples = f"""\
  edugraph {cmd_name} create --name "Fractions" --description "Parts of a whole"
  edugraph {cmd_name} update 3f0c1a1e-8a4b-4c55-9a57-1f6a5e4f9b21 --name "Fractions II"
  edugraph --json {cmd_name} delete 3f0c1a1e-8a4b-4c55-9a57-1f6a5e4f9b21"""

    @click.group(name=cmd_name, cls=EduGroup, examples=examples)
    def group() -> None:
        pass

    group.help = f"Create, update, and delete {node_type.value} nodes."

    @group.command("create")
    @click.option("--name", default=None, help="Display name (required).")
    @click.option("--description", default=None, help="Optional description.")
    @click.pass_obj
    def create(app: AppContext, name: str | None, description: str | None) -> None:
        """Create a node with a generated id."""
        payload = _payload(name=name, description=description)
        app.emit(NodeService(app.store).create_node(node_type, payload))

    @group.command("update")
    @click.argument("node_id")
    @click.option("--name", default=None, help="New display name.")
    @click.option("--description", default=None, help="New description.")
    @click.pass_obj
    def update(app: AppContext, node_id: str, name: str | None, description: str | None) -> None:
        """Update fields of an existing node."""
        payload = _payload(name=name, description=description)
        app.emit(NodeService(app.store).update_node(node_type, node_id, payload))

    @group.command("delete")
    @click.argument("node_id")
    @click.pass_obj
    def delete(app: AppContext, node_id: str) -> None:
        """Delete a node and its Yields relations."""
        app.emit(NodeService(app.store).delete_node(node_type, node_id))

    return group


unit = _node_group(NodeType.UNIT)
result = _node_group(NodeType.RESULT)
