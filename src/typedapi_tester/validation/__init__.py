# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
TypedAPI Validation Module.

Structural validation of extracted contract descriptions and matching of
concrete payloads against them.

Findings are collected, never raised: structural problems become
``ModelValidationResult.errors`` and advisory findings become
``ModelValidationResult.warnings``. Warnings never change ``success``.
"""

from typedapi_tester.validation.contract_fields import (
    PATH_PARAMETER_PATTERN,
    contract_name_from_reference,
    extract_path_parameters,
    is_present,
    is_valid_status_code,
    parse_status_code,
)
from typedapi_tester.validation.contract_structure_validator import (
    ContractStructureValidator,
    missing_contract_result,
)
from typedapi_tester.validation.payload_matcher import PayloadMatcher

__all__: list[str] = [
    "PATH_PARAMETER_PATTERN",
    "ContractStructureValidator",
    "PayloadMatcher",
    "contract_name_from_reference",
    "extract_path_parameters",
    "is_present",
    "is_valid_status_code",
    "missing_contract_result",
    "parse_status_code",
]
