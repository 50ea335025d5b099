# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Capability model registered with the host test framework."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from pydantic import BaseModel, ConfigDict, Field


class ModelCapability(BaseModel):
    """A named operation the host framework can resolve test steps to.

    ``descriptions`` and ``examples`` are natural-language hints the host uses
    to match test steps; ``handler`` is the coroutine function it invokes.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(description="Capability identifier")
    descriptions: list[str] = Field(
        default_factory=list, description="What the capability does"
    )
    examples: list[str] = Field(
        default_factory=list, description="Example test steps it handles"
    )
    handler: Callable[..., Awaitable[object]] = Field(
        description="Coroutine function executing the capability"
    )


__all__ = ["ModelCapability"]
