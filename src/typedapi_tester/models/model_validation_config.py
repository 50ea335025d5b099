# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Validation options for the TypedAPI adapter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelValidationConfig(BaseModel):
    """Validation options.

    Attributes:
        strict_mode: Keep the full rule set enabled. Warnings never affect
            ``success`` in either mode.
        allow_extra_properties: When False, supplied path parameters that do
            not correspond to a path placeholder are reported as warnings.
        validate_types: Consult the structural schema checker, when one is
            configured, for params/query/body/response payloads.
        validate_paths: Check ``:name`` path placeholders against params.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    strict_mode: bool = Field(
        default=True,
        alias="strictMode",
        description="Keep the full rule set enabled",
    )
    allow_extra_properties: bool = Field(
        default=False,
        alias="allowExtraProperties",
        description="Allow request parameters not declared by the contract",
    )
    validate_types: bool = Field(
        default=True,
        alias="validateTypes",
        description="Delegate payload shape checks to the schema checker",
    )
    validate_paths: bool = Field(
        default=True,
        alias="validatePaths",
        description="Check path placeholders against params",
    )


__all__ = ["ModelValidationConfig"]
