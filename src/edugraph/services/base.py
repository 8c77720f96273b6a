"""BaseService — foundation for edugraph services.

Every service receives a :class:`Store` at construction time. Services
own their transaction boundaries via ``self._store.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from edugraph.infrastructure.store import Store


class BaseService:
    """Base for service-layer classes backed by the SQLite store.

    Usage::

        class NodeService(BaseService):
            def create_node(self, node_type, payload) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store
