# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mock generation options for the TypedAPI adapter."""

from __future__ import annotations

import random
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field


def _default_seed() -> int:
    return random.randint(0, 9999)


class ModelMockConfig(BaseModel):
    """Mock generation options.

    ``seed`` and ``custom_generators`` are accepted and exposed but the mock
    synthesizer currently draws from a fresh generator per call; see
    ``MockResponseSynthesizer``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    generate_realistic_data: bool = Field(
        default=True,
        alias="generateRealisticData",
        description="Generate realistic-looking values",
    )
    locale: str = Field(default="en-US", description="Locale for generated data")
    seed: int = Field(
        default_factory=_default_seed,
        description="Seed for consistent mock generation",
    )
    custom_generators: dict[str, Callable[[], object]] = Field(
        default_factory=dict,
        alias="customGenerators",
        description="Generators keyed by field type name",
    )


__all__ = ["ModelMockConfig"]
