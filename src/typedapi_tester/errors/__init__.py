# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""TypedAPI Errors Module.

Exports:
    TypedAPIError: Base error
    ContractNotFoundError: Contract file missing
    ContractReadError: Contract file unreadable or undecodable
    ContractConfigurationError: Adapter configuration invalid
    ModelContractErrorContext: Structured error context
"""

from typedapi_tester.errors.model_contract_error_context import (
    ModelContractErrorContext,
)
from typedapi_tester.errors.typedapi_errors import (
    ContractConfigurationError,
    ContractNotFoundError,
    ContractReadError,
    TypedAPIError,
)

__all__: list[str] = [
    "ContractConfigurationError",
    "ContractNotFoundError",
    "ContractReadError",
    "ModelContractErrorContext",
    "TypedAPIError",
]
