"""GraphService — read-only views over the whole concept graph.

``overview`` lists every node and Yields relation. ``check`` audits the
stored graph against the relation invariants (acyclic, allowed type
pairs, no self-loops), which admission enforces for new edges but which
rows written by other tools could still break.
"""

from __future__ import annotations

from typing import Any

import networkx as nx

from edugraph.domain.cycles import build_graph
from edugraph.domain.policy import TypePolicy
from edugraph.services.base import BaseService
from edugraph.services.contracts import GraphOverviewData, dump_validated
from edugraph.services.result import ServiceResult
from edugraph.services.telemetry import trace_span, traced


class GraphService(BaseService):
    """Handles whole-graph queries."""

    @traced
    def overview(self) -> ServiceResult:
        """List all nodes and Yields relations."""
        with self._store.transaction() as txn:
            node_rows = txn.list_nodes()
            edge_refs = txn.fetch_all_edges()

        data = {
            "node_count": len(node_rows),
            "edge_count": len(edge_refs),
            "nodes": node_rows,
            "edges": [{"id": e.id, "start": e.start, "end": e.end} for e in edge_refs],
        }
        return ServiceResult(ok=True, op="overview", data=dump_validated(GraphOverviewData, data))

    @traced
    def check(self) -> ServiceResult:
        """Report every stored relation that violates an admission invariant.

        Findings are data, not errors: the result is ``ok`` with an
        ``issues`` list, which is empty for a healthy graph.
        """
        policy = TypePolicy.with_extra(self._store.settings.policy.allow)
        with self._store.transaction() as txn:
            types = {row["id"]: row["type"] for row in txn.list_nodes()}
            edge_refs = txn.fetch_all_edges()

        issues: list[dict[str, Any]] = []

        with trace_span("type_policy"):
            for edge in edge_refs:
                if edge.start == edge.end:
                    issues.append(
                        {
                            "category": "self_loop",
                            "edge_id": edge.id,
                            "message": f"relation {edge.id} starts and ends at {edge.start}",
                        }
                    )
                    continue
                start_type, end_type = types.get(edge.start), types.get(edge.end)
                if start_type is None or end_type is None:
                    issues.append(
                        {
                            "category": "dangling",
                            "edge_id": edge.id,
                            "message": f"relation {edge.id} references a missing node",
                        }
                    )
                elif not policy.is_allowed(start_type, end_type):
                    issues.append(
                        {
                            "category": "type_policy",
                            "edge_id": edge.id,
                            "message": (
                                f"Yields relation not allowed from {start_type} "
                                f"to {end_type} nodes"
                            ),
                        }
                    )

        with trace_span("cycles"):
            g = build_graph(e for e in edge_refs if e.start != e.end)
            # One finding per strongly connected component, not per cycle.
            for component in nx.strongly_connected_components(g):
                if len(component) < 2:
                    continue
                members = sorted(component)
                issues.append(
                    {
                        "category": "cycle",
                        "nodes": members,
                        "message": "cycle among " + ", ".join(members),
                    }
                )

        return ServiceResult(
            ok=True,
            op="check",
            data={"count": len(issues), "issues": issues},
        )
