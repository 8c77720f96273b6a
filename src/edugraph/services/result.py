"""ServiceResult and ServiceError, the return type of every service call.

Business-rule rejections (self-loop, missing node, type policy, cycle,
invalid input) are ServiceResults with ``ok=False``; only store failures
are raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``messages`` holds every message produced by the failing stage, in
    order. ``message`` is their single-line summary.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    messages: list[str] = Field(default_factory=list)
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_messages(
        cls,
        code: str,
        messages: list[str],
        *,
        detail: dict[str, Any] | None = None,
    ) -> ServiceError:
        """Build an error carrying a whole stage's message list."""
        return cls(
            code=code,
            message="; ".join(messages),
            messages=list(messages),
            detail=detail or {},
        )


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when a validation stage rejected the request.
        op: Operation name, e.g. ``"create_yields"``.
        data: Payload of an accepted operation.
        warnings: Notes that did not stop the operation.
        error: Why the request was rejected; set only when ``ok`` is False.
        meta: Extras such as the telemetry span tree under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        messages: list[str],
        *,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Shorthand for a rejected operation."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError.from_messages(code, messages, detail=detail),
        )
