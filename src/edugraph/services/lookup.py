"""NodeLookup — resolve relation endpoints to typed node records."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from edugraph.domain.models import NodeRef
from edugraph.services.contracts import GraphStore


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a batched lookup.

    ``missing`` keeps the order the caller asked in (start before end).
    """

    found: dict[str, NodeRef] = field(default_factory=dict)
    missing: list[str] = field(default_factory=list)


class NodeLookup:
    """Batched, read-only resolution of node ids through a GraphStore.

    Store failures propagate unchanged; they are never reported as
    missing nodes.
    """

    def __init__(self, store: GraphStore) -> None:
        self._store = store

    def resolve(self, ids: Sequence[str]) -> LookupResult:
        ordered = list(dict.fromkeys(ids))
        found = {ref.id: ref for ref in self._store.find_nodes_by_ids(ordered)}
        missing = [node_id for node_id in ordered if node_id not in found]
        return LookupResult(found=found, missing=missing)
