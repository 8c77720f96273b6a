"""Read-only views of graph records exchanged with the store.

The store owns nodes and edges. The core only ever sees these frozen
snapshots, rebuilt per call.
"""

from __future__ import annotations

from pydantic import BaseModel

from edugraph.domain.types import NodeType


class NodeRef(BaseModel):
    """A node as seen by relation admission: identity and type only."""

    model_config = {"frozen": True}

    id: str
    type: NodeType


class EdgeRef(BaseModel):
    """A directed Yields edge ``start -> end``."""

    model_config = {"frozen": True}

    start: str
    end: str
    id: str | None = None


class EdgeCreationInstruction(BaseModel):
    """An admitted relation, ready for the store to persist."""

    model_config = {"frozen": True}

    id: str
    start: str
    end: str
