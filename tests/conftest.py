"""Shared pytest fixtures and test helpers for edugraph tests."""

from __future__ import annotations

from collections.abc import Generator, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy import insert

from edugraph.config.settings import EduSettings
from edugraph.domain.ids import generate_id
from edugraph.domain.models import EdgeRef, NodeRef
from edugraph.domain.types import NodeType
from edugraph.infrastructure.database.schema import edges, nodes
from edugraph.infrastructure.store import Store

_NOW = datetime.now(UTC).isoformat()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Store]:
    """Store backed by a fresh SQLite database in a temp directory."""
    monkeypatch.delenv("EDUGRAPH_CONFIG", raising=False)
    settings = EduSettings.from_cli(project_root=tmp_path)
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.delenv("EDUGRAPH_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def insert_node(store: Store, node_type: NodeType | str, **kwargs: Any) -> str:
    """Insert a node row directly into the DB and return its id."""
    node_id = kwargs.pop("id", None) or generate_id()
    values: dict[str, Any] = {
        "id": node_id,
        "type": str(node_type),
        "name": kwargs.pop("name", f"{node_type} {node_id[:8]}"),
        "description": None,
        "created": _NOW,
        "modified": _NOW,
    }
    values.update(kwargs)
    with store.engine.begin() as conn:
        conn.execute(insert(nodes).values(**values))
    return node_id


def insert_edge(store: Store, start: str, end: str, *, edge_id: str | None = None) -> str:
    """Insert a Yields edge directly into the DB, bypassing admission."""
    edge_id = edge_id or generate_id()
    with store.engine.begin() as conn:
        conn.execute(
            insert(edges).values(id=edge_id, start_id=start, end_id=end, created=_NOW)
        )
    return edge_id


class FakeGraphStore:
    """In-memory GraphStore for admission tests.

    Records every call so tests can assert on batching and on writes.
    Set ``fail_on`` to a method name to make it raise ``failure``.
    """

    def __init__(
        self,
        nodes: Sequence[NodeRef] = (),
        edges: Sequence[tuple[str, str]] = (),
    ) -> None:
        self.nodes: dict[str, NodeRef] = {n.id: n for n in nodes}
        self.edges: list[EdgeRef] = [EdgeRef(start=s, end=e, id=generate_id()) for s, e in edges]
        self.calls: list[tuple[str, Any]] = []
        self.fail_on: str | None = None
        self.failure: Exception = RuntimeError("store unavailable")

    def _record(self, name: str, arg: Any) -> None:
        self.calls.append((name, arg))
        if self.fail_on == name:
            raise self.failure

    def add_node(self, node_type: NodeType) -> str:
        node_id = generate_id()
        self.nodes[node_id] = NodeRef(id=node_id, type=node_type)
        return node_id

    def find_nodes_by_ids(self, ids: Sequence[str]) -> list[NodeRef]:
        self._record("find_nodes_by_ids", list(ids))
        return [self.nodes[i] for i in ids if i in self.nodes]

    def fetch_all_edges(self) -> list[EdgeRef]:
        self._record("fetch_all_edges", None)
        return list(self.edges)

    def create_edge(self, edge_id: str, start: str, end: str, *, created: str) -> None:
        self._record("create_edge", (edge_id, start, end))
        self.edges.append(EdgeRef(id=edge_id, start=start, end=end))
