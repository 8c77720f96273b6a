"""YieldsService — create and delete Yields relations.

Creation runs the whole admission pipeline and the write inside one store
transaction. The transaction takes SQLite's write lock up front, so two
concurrent admissions that are each acyclic but jointly cyclic (A -> B
alongside B -> A) cannot both pass their cycle checks.
"""

from __future__ import annotations

from edugraph.domain.cycles import CycleDetector
from edugraph.domain.policy import TypePolicy
from edugraph.domain.validation import validate_path_id
from edugraph.services._helpers import now_iso
from edugraph.services.admission import RelationAdmissionService
from edugraph.services.base import BaseService
from edugraph.services.contracts import YieldsData, dump_validated
from edugraph.services.lookup import NodeLookup
from edugraph.services.result import ServiceResult
from edugraph.services.telemetry import trace_span, traced


class YieldsService(BaseService):
    """Handles the Yields relation lifecycle."""

    def _policy(self) -> TypePolicy:
        return TypePolicy.with_extra(self._store.settings.policy.allow)

    @traced
    def create_yields(self, start: str, end: str) -> ServiceResult:
        """Admit ``start -> end`` and persist it if every stage passes."""
        op = "create_yields"
        with self._store.transaction() as txn:
            admission = RelationAdmissionService(
                self._policy(),
                NodeLookup(txn),
                CycleDetector(),
                txn,
            )
            verdict = admission.admit(start, end)
            if not verdict.ok:
                return verdict.model_copy(update={"op": op})

            with trace_span("persist"):
                txn.create_edge(
                    verdict.data["id"],
                    verdict.data["start"],
                    verdict.data["end"],
                    created=now_iso(),
                )

        return ServiceResult(ok=True, op=op, data=dump_validated(YieldsData, verdict.data))

    @traced
    def delete_yields(self, edge_id: str) -> ServiceResult:
        """Delete one Yields relation by id."""
        op = "delete_yields"
        errors = validate_path_id(edge_id)
        if errors:
            return ServiceResult.failure(op, "INVALID_INPUT", errors)

        edge_id = edge_id.lower()
        with self._store.transaction() as txn:
            deleted = txn.delete_edge(edge_id)

        if not deleted:
            return ServiceResult.failure(op, "NOT_FOUND", [f"relation {edge_id} does not exist"])
        return ServiceResult(ok=True, op=op, data={"id": edge_id})
