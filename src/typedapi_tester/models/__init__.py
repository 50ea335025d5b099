# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""TypedAPI Models Module.

Exports:
    ContractDescription: Ordered mapping of resolved contract fields
    LiteralValue: Resolved value of a contract field
    VerbatimExpression: Unresolved expression source text
    ModelCapability: Capability registered with the host framework
    ModelContractSource: Parsed contract file
    ModelGeneratedTypes: Generated type definitions
    ModelMockConfig: Mock generation options
    ModelMockResult: Synthesized mock payload
    ModelTypedAPIAdapterConfig: Adapter configuration
    ModelValidationConfig: Validation options
    ModelValidationResult: Validation outcome
"""

from typedapi_tester.models.model_capability import ModelCapability
from typedapi_tester.models.model_contract_source import ModelContractSource
from typedapi_tester.models.model_generated_types import ModelGeneratedTypes
from typedapi_tester.models.model_literal_value import (
    ContractDescription,
    LiteralValue,
    VerbatimExpression,
    is_verbatim,
)
from typedapi_tester.models.model_mock_config import ModelMockConfig
from typedapi_tester.models.model_mock_result import ModelMockResult
from typedapi_tester.models.model_typedapi_adapter_config import (
    ModelTypedAPIAdapterConfig,
)
from typedapi_tester.models.model_validation_config import ModelValidationConfig
from typedapi_tester.models.model_validation_result import ModelValidationResult

__all__: list[str] = [
    "ContractDescription",
    "LiteralValue",
    "ModelCapability",
    "ModelContractSource",
    "ModelGeneratedTypes",
    "ModelMockConfig",
    "ModelMockResult",
    "ModelTypedAPIAdapterConfig",
    "ModelValidationConfig",
    "ModelValidationResult",
    "VerbatimExpression",
    "is_verbatim",
]
