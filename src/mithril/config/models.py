"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, mithril.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class InspectConfig(BaseModel):
    """[inspect] section."""

    model_config = {"frozen": True}

    head_bytes: int = Field(default=32, ge=0)
    bytes_per_row: int = Field(default=16, ge=1)
