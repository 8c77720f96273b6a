"""RelationAdmissionService — decides whether a Yields edge may be added.

Four stages run in a fixed order. Each stage collects all of its errors
before returning, and a later stage runs only if every earlier stage
passed, so a rejection never mixes messages from two stages:

1. Shape — both ids are UUIDv4 and differ (``SELF_LOOP``).
2. Existence — both nodes exist (``NOT_FOUND``, one message per id).
3. Policy — the ordered type pair is allowed (``POLICY_VIOLATION``).
4. Cycle — ``start`` is not already reachable from ``end`` (``CYCLE``).

On success the result carries an :class:`EdgeCreationInstruction` with a
freshly generated id. Persisting it is the caller's job; see
:class:`edugraph.services.yields.YieldsService`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from edugraph.domain.cycles import CycleDetector
from edugraph.domain.ids import generate_id
from edugraph.domain.models import EdgeCreationInstruction
from edugraph.domain.policy import TypePolicy
from edugraph.domain.validation import validate_relation_ends
from edugraph.services.contracts import GraphStore
from edugraph.services.lookup import NodeLookup
from edugraph.services.result import ServiceResult
from edugraph.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

CYCLE_MESSAGE = "creating this relation would introduce a cycle"


class RelationAdmissionService:
    """Validates a proposed ``start -> end`` Yields relation.

    Collaborators are passed in explicitly. *store* must be the same
    transactional view *lookup* reads from, so the edge snapshot and the
    node lookup agree.
    """

    op = "admit_yields"

    def __init__(
        self,
        policy: TypePolicy,
        lookup: NodeLookup,
        detector: CycleDetector,
        store: GraphStore,
        *,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        self._policy = policy
        self._lookup = lookup
        self._detector = detector
        self._store = store
        self._id_factory = id_factory

    @traced
    def admit(self, start: str, end: str) -> ServiceResult:
        """Run every admission stage for ``start -> end``."""
        with trace_span("shape"):
            shape_errors = validate_relation_ends(start, end)
            if shape_errors:
                return self._reject("INVALID_INPUT", shape_errors)
            start, end = start.lower(), end.lower()
            if start == end:
                return self._reject(
                    "SELF_LOOP",
                    [f"start and end node cannot have the same id {start}"],
                    detail={"id": start},
                )

        with trace_span("existence") as span:
            resolved = self._lookup.resolve([start, end])
            if span:
                span.annotate("missing", len(resolved.missing))
            if resolved.missing:
                roles = {start: "start", end: "end"}
                return self._reject(
                    "NOT_FOUND",
                    [f"{roles[nid]} node {nid} does not exist" for nid in resolved.missing],
                    detail={"missing": resolved.missing},
                )
            start_type = resolved.found[start].type
            end_type = resolved.found[end].type

        with trace_span("policy"):
            if not self._policy.is_allowed(start_type, end_type):
                return self._reject(
                    "POLICY_VIOLATION",
                    [f"Yields relation not allowed from {start_type} to {end_type} nodes"],
                    detail={"start_type": str(start_type), "end_type": str(end_type)},
                )

        with trace_span("cycle") as span:
            current = self._store.fetch_all_edges()
            if span:
                span.annotate("edges", len(current))
            if self._detector.would_create_cycle(current, start, end):
                return self._reject("CYCLE", [CYCLE_MESSAGE], detail={"start": start, "end": end})

        instruction = EdgeCreationInstruction(id=self._id_factory(), start=start, end=end)
        logger.debug("Admitted Yields %s -> %s as %s", start, end, instruction.id)
        return ServiceResult(ok=True, op=self.op, data=instruction.model_dump())

    def _reject(
        self,
        code: str,
        messages: list[str],
        *,
        detail: dict[str, object] | None = None,
    ) -> ServiceResult:
        logger.debug("Rejected Yields relation (%s): %s", code, "; ".join(messages))
        return ServiceResult.failure(self.op, code, messages, detail=detail)
