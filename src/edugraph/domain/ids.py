"""UUIDv4 identifiers for nodes and relations.

Every node and every Yields relation is identified by a random UUIDv4
generated by the service layer, never by the caller.

INVARIANT: IDs are permanent. Once generated, an ID never changes.
"""

from __future__ import annotations

import uuid


def generate_id() -> str:
    """Return a fresh UUIDv4 in canonical lowercase hyphenated form."""
    return str(uuid.uuid4())


def is_uuid4(value: object) -> bool:
    """Check whether *value* is a string holding a version-4 UUID.

    Accepts any casing but requires the hyphenated 36-character form.
    """
    if not isinstance(value, str) or len(value) != 36:
        return False
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return False
    return (
        parsed.version == 4
        and parsed.variant == uuid.RFC_4122
        and str(parsed) == value.lower()
    )
