"""TypePolicy — which node types a Yields relation may connect.

The policy is a fixed table of directed ``(start_type, end_type)`` pairs.
It performs no existence or cycle checks; adding a node type means
extending the table.
"""

from __future__ import annotations

from collections.abc import Iterable

from edugraph.domain.types import NodeType

DEFAULT_YIELDS_PAIRS: frozenset[tuple[NodeType, NodeType]] = frozenset(
    {
        (NodeType.UNIT, NodeType.RESULT),
    }
)

_ARROW = "->"


def parse_pair(raw: str) -> tuple[NodeType, NodeType]:
    """Parse a ``"Start->End"`` pair string into node types.

    Raises:
        ValueError: If the string is malformed or names an unknown type.
    """
    parts = [p.strip() for p in raw.split(_ARROW)]
    if len(parts) != 2 or not all(parts):
        msg = f"Invalid type pair {raw!r}, expected 'Start->End'"
        raise ValueError(msg)
    known = {t.value: t for t in NodeType}
    for name in parts:
        if name not in known:
            msg = f"Unknown node type {name!r} in pair {raw!r}"
            raise ValueError(msg)
    return known[parts[0]], known[parts[1]]


class TypePolicy:
    """Directed type-pair table for Yields relations."""

    def __init__(
        self,
        pairs: Iterable[tuple[NodeType, NodeType]] = DEFAULT_YIELDS_PAIRS,
    ) -> None:
        self._pairs = frozenset((NodeType(s).value, NodeType(e).value) for s, e in pairs)

    @classmethod
    def with_extra(cls, extra: Iterable[str]) -> TypePolicy:
        """Build the default policy extended by ``"Start->End"`` strings."""
        return cls(DEFAULT_YIELDS_PAIRS | {parse_pair(raw) for raw in extra})

    @property
    def pairs(self) -> frozenset[tuple[NodeType, NodeType]]:
        return frozenset((NodeType(s), NodeType(e)) for s, e in self._pairs)

    def is_allowed(self, start_type: str, end_type: str) -> bool:
        """Return True if a Yields relation may go from *start_type* to *end_type*."""
        return (str(start_type), str(end_type)) in self._pairs
