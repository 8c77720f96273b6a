"""Store — repository over the SQLite graph database.

The Store is the single dependency injected into every service. It owns
the database engine and hands out :class:`StoreTransaction` objects via
:meth:`Store.transaction`. A transaction is one ``BEGIN IMMEDIATE`` unit:
all reads and writes inside it see a consistent snapshot, and concurrent
writers wait for it to finish.

Any SQLAlchemy failure leaving a transaction is re-raised as
:class:`StoreError` with the original exception chained.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.exc import SQLAlchemyError

from edugraph.domain.models import EdgeRef, NodeRef
from edugraph.domain.types import RelationKind
from edugraph.infrastructure.database.engine import init_database
from edugraph.infrastructure.database.schema import edges, nodes
from edugraph.infrastructure.errors import StoreError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from edugraph.config.settings import EduSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# StoreTransaction — yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class StoreTransaction:
    """Active transaction bound to one DB connection.

    Implements the graph store protocol used by relation admission
    (``find_nodes_by_ids``, ``fetch_all_edges``, ``create_edge``) plus
    the node and relation CRUD the services need.
    """

    conn: Connection

    # ------------------------------------------------------------------
    # Relation admission protocol
    # ------------------------------------------------------------------

    def find_nodes_by_ids(self, ids: Sequence[str]) -> list[NodeRef]:
        """Return ``{id, type}`` for every id that exists, in one query."""
        if not ids:
            return []
        rows = self.conn.execute(
            select(nodes.c.id, nodes.c.type).where(nodes.c.id.in_(list(ids)))
        ).all()
        return [NodeRef(id=row.id, type=row.type) for row in rows]

    def fetch_all_edges(self) -> list[EdgeRef]:
        """Return every current Yields edge."""
        rows = self.conn.execute(select(edges.c.id, edges.c.start_id, edges.c.end_id)).all()
        return [EdgeRef(id=row.id, start=row.start_id, end=row.end_id) for row in rows]

    def create_edge(self, edge_id: str, start: str, end: str, *, created: str) -> None:
        """Persist a new Yields edge."""
        self.conn.execute(
            insert(edges).values(
                id=edge_id,
                start_id=start,
                end_id=end,
                kind=RelationKind.YIELDS.value,
                created=created,
            )
        )

    def delete_edge(self, edge_id: str) -> bool:
        """Delete one edge by id. Returns False if it did not exist."""
        result = self.conn.execute(delete(edges).where(edges.c.id == edge_id))
        return result.rowcount > 0

    # ------------------------------------------------------------------
    # Node records
    # ------------------------------------------------------------------

    def get_node(self, node_id: str, *, node_type: str | None = None) -> dict[str, Any] | None:
        """Fetch a full node row as a dict, optionally constrained to a type."""
        stmt = select(nodes).where(nodes.c.id == node_id)
        if node_type is not None:
            stmt = stmt.where(nodes.c.type == node_type)
        row = self.conn.execute(stmt).first()
        return dict(row._mapping) if row is not None else None

    def list_nodes(self, *, node_type: str | None = None) -> list[dict[str, Any]]:
        stmt = select(nodes).order_by(nodes.c.type, nodes.c.name, nodes.c.id)
        if node_type is not None:
            stmt = stmt.where(nodes.c.type == node_type)
        return [dict(row._mapping) for row in self.conn.execute(stmt)]

    def insert_node(self, values: dict[str, Any]) -> None:
        self.conn.execute(insert(nodes).values(**values))

    def update_node(self, node_id: str, node_type: str, values: dict[str, Any]) -> bool:
        """Update a node of *node_type*. Returns False if no such node exists."""
        result = self.conn.execute(
            update(nodes)
            .where(nodes.c.id == node_id, nodes.c.type == node_type)
            .values(**values)
        )
        return result.rowcount > 0

    def delete_node(self, node_id: str, node_type: str) -> tuple[bool, int]:
        """Delete a node and every edge touching it.

        Returns ``(node_deleted, edges_removed)``.
        """
        exists = self.conn.execute(
            select(nodes.c.id).where(nodes.c.id == node_id, nodes.c.type == node_type)
        ).first()
        if exists is None:
            return False, 0
        removed = self.conn.execute(
            delete(edges).where(or_(edges.c.start_id == node_id, edges.c.end_id == node_id))
        ).rowcount
        self.conn.execute(delete(nodes).where(nodes.c.id == node_id))
        return True, removed


# ---------------------------------------------------------------------------
# Store — the repository
# ---------------------------------------------------------------------------


class Store:
    """Repository encapsulating database access for the concept graph.

    Constructed once at CLI startup from :class:`EduSettings` and stored
    on the click context. Services receive the Store via their
    :class:`BaseService` constructor.
    """

    def __init__(self, settings: EduSettings) -> None:
        self._settings = settings
        try:
            self._engine: Engine = init_database(
                self.db_path,
                busy_timeout_ms=settings.store.busy_timeout_ms,
            )
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError("open", str(exc)) from exc

    @property
    def root(self) -> Path:
        """The project root directory."""
        return self._settings.project_root

    @property
    def db_path(self) -> Path:
        return self.root / self._settings.store.path

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def settings(self) -> EduSettings:
        """The resolved settings for this store."""
        return self._settings

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Serialized read-check-write unit.

        Commits when the block exits normally and rolls back on any
        exception. SQLAlchemy errors surface as :class:`StoreError`.

        Usage::

            with store.transaction() as txn:
                refs = txn.find_nodes_by_ids([start, end])
                txn.create_edge(edge_id, start, end, created=now)
        """
        try:
            with self._engine.begin() as conn:
                yield StoreTransaction(conn=conn)
        except SQLAlchemyError as exc:
            logger.warning("Store transaction failed: %s", exc)
            raise StoreError("transaction", str(exc)) from exc
