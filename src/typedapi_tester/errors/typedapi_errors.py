# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""TypedAPI Error Classes.

Error Hierarchy:
    TypedAPIError (base error)
    ├── ContractNotFoundError
    ├── ContractReadError
    └── ContractConfigurationError

These errors describe I/O and configuration faults only. Structural problems
in a contract or payload are never raised; they are reported as entries in
``ModelValidationResult.errors``. The adapter converts any ``TypedAPIError``
raised while reading a contract into a failed result at the operation
boundary.

All errors:
    - Support proper error chaining with ``raise ... from e``
    - Accept ModelContractErrorContext for bundled context parameters
    - Keep extra keyword context in ``extra_context`` for logging
"""

from __future__ import annotations

from uuid import UUID

from typedapi_tester.errors.model_contract_error_context import (
    ModelContractErrorContext,
)


class TypedAPIError(Exception):
    """Base error class for the TypedAPI contract tester.

    Example:
        >>> context = ModelContractErrorContext.with_correlation(
        ...     operation="load_contract",
        ...     target_name="/contracts/users.get.contract.py",
        ... )
        >>> raise TypedAPIError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        context: ModelContractErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize TypedAPIError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled context (operation, target_name, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def correlation_id(self) -> UUID | None:
        """Correlation ID from the bundled context, if any."""
        return self.context.correlation_id if self.context is not None else None

    def structured_context(self) -> dict[str, object]:
        """Return a flat mapping suitable for ``logger.*(extra=...)``."""
        result: dict[str, object] = dict(self.extra_context)
        if self.context is not None:
            if self.context.operation is not None:
                result["operation"] = self.context.operation
            if self.context.target_name is not None:
                result["target_name"] = self.context.target_name
            if self.context.correlation_id is not None:
                result["correlation_id"] = str(self.context.correlation_id)
        return result

    def __str__(self) -> str:
        return self.message


class ContractNotFoundError(TypedAPIError):
    """Raised when a contract file does not exist.

    Example:
        >>> raise ContractNotFoundError(
        ...     "Contract file not found: /contracts/missing.py",
        ...     context=ModelContractErrorContext.with_correlation(
        ...         operation="load_contract",
        ...     ),
        ... )
    """


class ContractReadError(TypedAPIError):
    """Raised when a contract file exists but cannot be read or decoded."""


class ContractConfigurationError(TypedAPIError):
    """Raised when adapter configuration cannot be loaded or validated.

    Used for missing config files, YAML syntax errors, non-mapping documents
    and pydantic validation failures.
    """


__all__ = [
    "ContractConfigurationError",
    "ContractNotFoundError",
    "ContractReadError",
    "TypedAPIError",
]
