"""Request-shape validation returning ordered, human-readable messages.

Validators never raise for bad input. They return a list of messages in
field order so callers can reject a request with every problem at once.
Unknown payload keys are dropped, never persisted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from edugraph.domain.ids import is_uuid4

UUID_V4_EXPECTED = "Validation failed (uuid v4 is expected)"

# (field, required) in reporting order.
NODE_FIELDS: tuple[tuple[str, bool], ...] = (
    ("name", True),
    ("description", False),
)


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def check_string_field(field: str, value: Any, *, required: bool) -> list[str]:
    """Validate a single string field.

    Required fields report both emptiness and type problems; optional
    fields are skipped when absent but must be non-empty strings otherwise.
    """
    if not required and value is None:
        return []
    errors: list[str] = []
    if _is_empty(value):
        errors.append(f"{field} should not be empty")
    if not isinstance(value, str):
        errors.append(f"{field} must be a string")
    return errors


def validate_node_payload(
    payload: Mapping[str, Any],
    *,
    partial: bool = False,
) -> tuple[dict[str, str], list[str]]:
    """Validate node properties for create (``partial=False``) or update.

    Returns ``(props, errors)`` where *props* holds only known fields that
    were supplied.
    """
    props: dict[str, str] = {}
    errors: list[str] = []
    for field, required in NODE_FIELDS:
        value = payload.get(field)
        errors.extend(check_string_field(field, value, required=required and not partial))
        if field in payload and value is not None:
            props[field] = value
    return props, errors


def validate_relation_ends(start: Any, end: Any) -> list[str]:
    """Validate the endpoint ids of a relation request."""
    errors: list[str] = []
    for field, value in (("start", start), ("end", end)):
        if not is_uuid4(value):
            errors.append(f"{field} must be a UUID")
    return errors


def validate_path_id(value: Any) -> list[str]:
    """Validate an identifier addressed directly (update/delete targets)."""
    return [] if is_uuid4(value) else [UUID_V4_EXPECTED]
