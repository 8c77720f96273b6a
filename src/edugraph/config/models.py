"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, edugraph.toml only contains
overrides. A fresh project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from edugraph.domain.policy import parse_pair


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    path: str = ".edugraph/edugraph.db"
    busy_timeout_ms: int = 5000


class PolicyConfig(BaseModel):
    """[policy] section.

    ``allow`` extends the built-in Yields table with ``"Start->End"`` pairs.
    """

    model_config = {"frozen": True}

    allow: list[str] = Field(default_factory=list)

    @field_validator("allow")
    @classmethod
    def _check_pairs(cls, value: list[str]) -> list[str]:
        for raw in value:
            parse_pair(raw)
        return value
