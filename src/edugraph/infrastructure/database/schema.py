"""SQLAlchemy Core table definitions for the edugraph database."""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

nodes = Table(
    "nodes",
    metadata,
    Column("id", Text, primary_key=True),  # UUIDv4
    Column("type", Text, nullable=False),  # Unit | Result
    Column("name", Text, nullable=False),
    Column("description", Text),
    Column("created", Text, nullable=False),
    Column("modified", Text, nullable=False),
)

edges = Table(
    "edges",
    metadata,
    Column("id", Text, primary_key=True),  # UUIDv4
    Column("start_id", Text, ForeignKey("nodes.id"), nullable=False),
    Column("end_id", Text, ForeignKey("nodes.id"), nullable=False),
    Column("kind", Text, nullable=False, default="Yields", server_default="Yields"),
    Column("created", Text, nullable=False),
    UniqueConstraint("start_id", "end_id", "kind"),
    CheckConstraint("start_id != end_id", name="ck_edges_no_self_loop"),
)

Index("ix_nodes_type", nodes.c.type)
Index("ix_edges_start", edges.c.start_id)
Index("ix_edges_end", edges.c.end_id)
