# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""TypedAPI contract tester.

Static introspection of Python contract modules: structural validation of
the ``Contract`` description, validation of concrete request and response
payloads against it, and synthesized mock responses.

Exports:
    TypedAPIAdapter: Engine exposing every contract operation
    TypedAPIAddon: Capability bundle for the host test framework
    ModelTypedAPIAdapterConfig: Adapter configuration
    ModelValidationResult: Validation outcome
    ModelMockResult: Synthesized mock payload
    TypedAPIError: Base error for contract I/O and configuration faults
"""

from typedapi_tester.adapter import TypedAPIAdapter
from typedapi_tester.addon import TypedAPIAddon
from typedapi_tester.errors import (
    ContractConfigurationError,
    ContractNotFoundError,
    ContractReadError,
    TypedAPIError,
)
from typedapi_tester.models import (
    ModelCapability,
    ModelGeneratedTypes,
    ModelMockResult,
    ModelTypedAPIAdapterConfig,
    ModelValidationResult,
)

__version__ = "1.0.0"

__all__: list[str] = [
    "ContractConfigurationError",
    "ContractNotFoundError",
    "ContractReadError",
    "ModelCapability",
    "ModelGeneratedTypes",
    "ModelMockResult",
    "ModelTypedAPIAdapterConfig",
    "ModelValidationResult",
    "TypedAPIAdapter",
    "TypedAPIAddon",
    "TypedAPIError",
]
