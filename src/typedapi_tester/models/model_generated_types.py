# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Generated type definitions model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelGeneratedTypes(BaseModel):
    """Type definitions generated from a contract."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    code: str = Field(description="Generated source code")
    type_names: list[str] = Field(
        default_factory=list, description="Names of the generated types"
    )
    source_path: str = Field(description="Contract file the types came from")


__all__ = ["ModelGeneratedTypes"]
