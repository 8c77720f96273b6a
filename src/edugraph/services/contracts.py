"""Store protocol and typed payload contracts at the service boundary.

:class:`GraphStore` is the capability set relation admission needs from
persistence. The SQLite :class:`~edugraph.infrastructure.store.StoreTransaction`
implements it; tests substitute an in-memory fake.

The payload models validate operation data before it leaves the service
layer so shape regressions fail fast in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

from edugraph.domain.models import EdgeRef, NodeRef
from edugraph.domain.types import RelationKind

T = TypeVar("T", bound=BaseModel)


class GraphStore(Protocol):
    """Persistence capabilities used by relation admission."""

    def find_nodes_by_ids(self, ids: Sequence[str]) -> list[NodeRef]: ...

    def fetch_all_edges(self) -> list[EdgeRef]: ...

    def create_edge(self, edge_id: str, start: str, end: str, *, created: str) -> None: ...


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class NodeData(BaseModel):
    """Payload contract for node create/update results."""

    model_config = ConfigDict(extra="ignore")

    id: str
    type: str
    name: str
    description: str | None = None
    created: str
    modified: str


class YieldsData(BaseModel):
    """Payload contract for an admitted or persisted Yields relation."""

    id: str
    start: str
    end: str
    kind: str = RelationKind.YIELDS.value


class GraphOverviewData(BaseModel):
    """Payload contract for ``GraphService.overview``."""

    node_count: int
    edge_count: int
    nodes: list[NodeData]
    edges: list[YieldsData]
