# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Contract Error Context Model.

Bundles the structured fields attached to every TypedAPI error so error
constructors keep a short parameter list.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelContractErrorContext(BaseModel):
    """Structured context for TypedAPI errors.

    Attributes:
        operation: Operation being performed (load_contract, load_config, ...)
        target_name: Contract reference or file the operation targeted
        correlation_id: Correlation ID for tracing one engine call

    Example:
        >>> context = ModelContractErrorContext.with_correlation(
        ...     operation="load_contract",
        ...     target_name="users.get.contract.py",
        ... )
        >>> raise ContractNotFoundError("Contract file not found", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (load_contract, load_config, ...)",
    )
    target_name: str | None = Field(
        default=None,
        description="Contract reference or file the operation targeted",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing one engine call",
    )

    @classmethod
    def with_correlation(
        cls,
        *,
        correlation_id: UUID | None = None,
        operation: str | None = None,
        target_name: str | None = None,
    ) -> ModelContractErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id or uuid4(),
        )


__all__ = ["ModelContractErrorContext"]
