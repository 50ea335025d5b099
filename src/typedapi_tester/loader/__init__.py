# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Contract loading: path resolution, file reads and AST extraction."""

from typedapi_tester.loader.contract_extractor import (
    CONTRACT_EXPORT_NAME,
    QUERY_SCHEMA_NAME,
    RESPONSE_SCHEMA_NAME,
    RESPONSE_TYPE_NAME,
    ContractExtractor,
    iter_declarations,
    parse_contract_module,
    resolve_literal,
)
from typedapi_tester.loader.contract_source_loader import (
    CONTRACT_FILE_SUFFIX,
    ContractSourceLoader,
)

__all__: list[str] = [
    "CONTRACT_EXPORT_NAME",
    "CONTRACT_FILE_SUFFIX",
    "QUERY_SCHEMA_NAME",
    "RESPONSE_SCHEMA_NAME",
    "RESPONSE_TYPE_NAME",
    "ContractExtractor",
    "ContractSourceLoader",
    "iter_declarations",
    "parse_contract_module",
    "resolve_literal",
]
