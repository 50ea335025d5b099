# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mock payload result model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from typedapi_tester.enums import EnumMockPayloadType


class ModelMockResult(BaseModel):
    """A synthesized payload and the label of the shape that produced it."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    success: bool = Field(description="True if a payload was generated")
    data: object = Field(default=None, description="Generated JSON-like payload")
    type: EnumMockPayloadType = Field(description="Shape label of the payload")

    @classmethod
    def error(cls) -> ModelMockResult:
        """Result returned when no payload could be generated."""
        return cls(success=False, data=None, type=EnumMockPayloadType.ERROR)


__all__ = ["ModelMockResult"]
