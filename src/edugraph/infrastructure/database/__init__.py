"""SQLite database engine and schema via SQLAlchemy Core."""

from edugraph.infrastructure.database.engine import create_db_engine, init_database
from edugraph.infrastructure.database.schema import edges, metadata, nodes

__all__ = [
    "create_db_engine",
    "edges",
    "init_database",
    "metadata",
    "nodes",
]
