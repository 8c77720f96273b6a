"""Tests for Store and StoreTransaction."""

from __future__ import annotations

from pathlib import Path

import pytest

from edugraph.config.settings import EduSettings
from edugraph.domain.types import NodeType
from edugraph.infrastructure.errors import StoreError
from edugraph.infrastructure.store import Store
from tests.conftest import insert_edge, insert_node

_TS = "2026-01-01T00:00:00+00:00"


class TestStoreOpen:
    def test_db_path_under_project_root(self, store: Store, tmp_path: Path) -> None:
        assert store.db_path == tmp_path / ".edugraph" / "edugraph.db"
        assert store.db_path.exists()

    def test_configured_path(self, tmp_path: Path) -> None:
        settings = EduSettings.from_cli(project_root=tmp_path, store={"path": "data/graph.db"})
        s = Store(settings)
        try:
            assert (tmp_path / "data" / "graph.db").exists()
        finally:
            s.close()

    def test_parent_is_regular_file_raises_store_error(self, tmp_path: Path) -> None:
        (tmp_path / "blocker").write_text("not a directory", encoding="utf-8")
        settings = EduSettings.from_cli(
            project_root=tmp_path, store={"path": "blocker/edugraph.db"}
        )
        with pytest.raises(StoreError) as exc_info:
            Store(settings)
        assert exc_info.value.operation == "open"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_unopenable_path_raises_store_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.mkdir()
        settings = EduSettings.from_cli(project_root=tmp_path, store={"path": "blocker"})
        with pytest.raises(StoreError) as exc_info:
            Store(settings)
        assert exc_info.value.operation == "open"


class TestAdmissionProtocol:
    def test_find_nodes_by_ids_returns_only_existing(self, store: Store) -> None:
        unit = insert_node(store, NodeType.UNIT)
        with store.transaction() as txn:
            refs = txn.find_nodes_by_ids([unit, "00000000-0000-4000-8000-000000000000"])
        assert [(r.id, r.type) for r in refs] == [(unit, NodeType.UNIT)]

    def test_find_nodes_by_ids_empty(self, store: Store) -> None:
        with store.transaction() as txn:
            assert txn.find_nodes_by_ids([]) == []

    def test_create_and_fetch_edges(self, store: Store) -> None:
        unit = insert_node(store, NodeType.UNIT)
        res = insert_node(store, NodeType.RESULT)
        with store.transaction() as txn:
            txn.create_edge("e-1", unit, res, created=_TS)
        with store.transaction() as txn:
            edges = txn.fetch_all_edges()
        assert [(e.id, e.start, e.end) for e in edges] == [("e-1", unit, res)]

    def test_rollback_on_exception(self, store: Store) -> None:
        unit = insert_node(store, NodeType.UNIT)
        res = insert_node(store, NodeType.RESULT)
        with pytest.raises(RuntimeError), store.transaction() as txn:
            txn.create_edge("e-1", unit, res, created=_TS)
            raise RuntimeError("abort")
        with store.transaction() as txn:
            assert txn.fetch_all_edges() == []

    def test_constraint_violation_raises_store_error(self, store: Store) -> None:
        unit = insert_node(store, NodeType.UNIT)
        with pytest.raises(StoreError) as exc_info, store.transaction() as txn:
            txn.create_edge("e-1", unit, unit, created=_TS)
        assert exc_info.value.operation == "transaction"


class TestNodeRecords:
    def test_get_node_respects_type(self, store: Store) -> None:
        unit = insert_node(store, NodeType.UNIT, name="Fractions")
        with store.transaction() as txn:
            assert txn.get_node(unit)["name"] == "Fractions"
            assert txn.get_node(unit, node_type="Result") is None

    def test_update_node_missing_returns_false(self, store: Store) -> None:
        with store.transaction() as txn:
            assert txn.update_node("nope", "Unit", {"name": "x"}) is False

    def test_delete_node_removes_incident_edges(self, store: Store) -> None:
        a = insert_node(store, NodeType.UNIT)
        b = insert_node(store, NodeType.RESULT)
        c = insert_node(store, NodeType.RESULT)
        insert_edge(store, a, b)
        insert_edge(store, a, c)
        with store.transaction() as txn:
            deleted, removed = txn.delete_node(a, "Unit")
        assert (deleted, removed) == (True, 2)
        with store.transaction() as txn:
            assert txn.fetch_all_edges() == []
            assert txn.get_node(a) is None

    def test_delete_node_wrong_type(self, store: Store) -> None:
        a = insert_node(store, NodeType.UNIT)
        with store.transaction() as txn:
            assert txn.delete_node(a, "Result") == (False, 0)
