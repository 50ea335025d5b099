# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the TypedAPI contract tester.

Exports:
    EnumDeclarationKind: Kind of top-level declaration in a contract module
    EnumHttpMethod: HTTP methods a contract may declare
    EnumMockPayloadType: Type labels for synthesized mock payloads
"""

from typedapi_tester.enums.enum_declaration_kind import EnumDeclarationKind
from typedapi_tester.enums.enum_http_method import EnumHttpMethod, method_expects_body
from typedapi_tester.enums.enum_mock_payload_type import EnumMockPayloadType

__all__: list[str] = [
    "EnumDeclarationKind",
    "EnumHttpMethod",
    "EnumMockPayloadType",
    "method_expects_body",
]
