"""Store-level failures.

A StoreError means the store could not answer a read or complete a write
(connectivity, locking timeout, constraint violation). It is an unexpected
failure: services let it propagate and never fold it into a validation
rejection.
"""

from __future__ import annotations


class StoreError(Exception):
    """The graph store failed to complete an operation."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.message = message
