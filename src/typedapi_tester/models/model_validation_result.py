# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Validation result model shared by every validation operation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ModelValidationResult(BaseModel):
    """Outcome of validating a contract or a payload against a contract.

    Errors are blocking; warnings are advisory and never change ``success``.
    Results are immutable; build them with ``from_findings`` or ``failure``.
    Errors and warnings are tuples. ``details`` is a fresh dict per result
    that callers read but never modify.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    success: bool = Field(description="True if no errors were found")
    errors: tuple[str, ...] = Field(
        default=(),
        description="Blocking problems, empty when success is True",
    )
    warnings: tuple[str, ...] = Field(
        default=(),
        description="Advisory findings that do not affect success",
    )
    details: dict[str, object] = Field(
        default_factory=dict,
        description="Diagnostic metadata about what was validated",
    )

    @model_validator(mode="after")
    def check_success_matches_errors(self) -> ModelValidationResult:
        if self.success == bool(self.errors):
            raise ValueError("success must be True exactly when errors is empty")
        return self

    @classmethod
    def from_findings(
        cls,
        errors: Iterable[str],
        warnings: Iterable[str] = (),
        details: Mapping[str, object] | None = None,
    ) -> ModelValidationResult:
        """Build a result, deriving ``success`` from the collected errors."""
        collected_errors = tuple(errors)
        return cls(
            success=not collected_errors,
            errors=collected_errors,
            warnings=tuple(warnings),
            details=dict(details or {}),
        )

    @classmethod
    def failure(
        cls,
        message: str,
        details: Mapping[str, object] | None = None,
    ) -> ModelValidationResult:
        """Build a failed result carrying a single error message."""
        return cls.from_findings([message], details=details)

    @property
    def error_count(self) -> int:
        """Number of blocking errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of advisory warnings."""
        return len(self.warnings)

    def __str__(self) -> str:
        """Format result summary as human-readable string."""
        status = "PASS" if self.success else "FAIL"
        return f"{status} ({self.error_count} errors, {self.warning_count} warnings)"


__all__ = ["ModelValidationResult"]
