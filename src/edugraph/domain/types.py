"""Node types and relation kinds of the concept graph."""

from __future__ import annotations

from enum import StrEnum


class NodeType(StrEnum):
    """Primary node types in the concept graph."""

    UNIT = "Unit"
    RESULT = "Result"


class RelationKind(StrEnum):
    """Directed relation kinds. Only ``Yields`` exists today."""

    YIELDS = "Yields"
