"""NodeService — create, update, and delete typed concept nodes.

Field validation happens before any store access and reports every
problem at once. Unknown payload keys are ignored. Ids are generated
here, never accepted from the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from edugraph.domain.ids import generate_id
from edugraph.domain.types import NodeType
from edugraph.domain.validation import validate_node_payload, validate_path_id
from edugraph.services._helpers import now_iso
from edugraph.services.base import BaseService
from edugraph.services.contracts import NodeData, dump_validated
from edugraph.services.result import ServiceResult
from edugraph.services.telemetry import traced

logger = logging.getLogger(__name__)


class NodeService(BaseService):
    """Handles node CRUD for every :class:`NodeType`."""

    @traced
    def create_node(self, node_type: NodeType, payload: Mapping[str, Any]) -> ServiceResult:
        """Create a node of *node_type* from *payload* (``name``, ``description``)."""
        op = f"create_{node_type.value.lower()}"
        props, errors = validate_node_payload(payload)
        if errors:
            return ServiceResult.failure(op, "INVALID_INPUT", errors)

        now = now_iso()
        row = {
            "id": generate_id(),
            "type": node_type.value,
            "name": props["name"],
            "description": props.get("description"),
            "created": now,
            "modified": now,
        }
        with self._store.transaction() as txn:
            txn.insert_node(row)

        logger.debug("Created %s node %s", node_type.value, row["id"])
        return ServiceResult(ok=True, op=op, data=dump_validated(NodeData, row))

    @traced
    def update_node(
        self,
        node_type: NodeType,
        node_id: str,
        payload: Mapping[str, Any],
    ) -> ServiceResult:
        """Update ``name``/``description`` of an existing node."""
        op = f"update_{node_type.value.lower()}"
        errors = validate_path_id(node_id)
        if errors:
            return ServiceResult.failure(op, "INVALID_INPUT", errors)
        props, errors = validate_node_payload(payload, partial=True)
        if errors:
            return ServiceResult.failure(op, "INVALID_INPUT", errors)

        node_id = node_id.lower()
        with self._store.transaction() as txn:
            updated = txn.update_node(node_id, node_type.value, {**props, "modified": now_iso()})
            row = txn.get_node(node_id) if updated else None

        if row is None:
            return ServiceResult.failure(
                op, "NOT_FOUND", [f"{node_type.value} node {node_id} does not exist"]
            )
        return ServiceResult(ok=True, op=op, data=dump_validated(NodeData, row))

    @traced
    def delete_node(self, node_type: NodeType, node_id: str) -> ServiceResult:
        """Delete a node together with every Yields relation touching it."""
        op = f"delete_{node_type.value.lower()}"
        errors = validate_path_id(node_id)
        if errors:
            return ServiceResult.failure(op, "INVALID_INPUT", errors)

        node_id = node_id.lower()
        with self._store.transaction() as txn:
            deleted, edges_removed = txn.delete_node(node_id, node_type.value)

        if not deleted:
            return ServiceResult.failure(
                op, "NOT_FOUND", [f"{node_type.value} node {node_id} does not exist"]
            )
        warnings: list[str] = []
        if edges_removed:
            warnings.append(f"removed {edges_removed} Yields relation(s) touching {node_id}")
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": node_id, "edges_removed": edges_removed},
            warnings=warnings,
        )
