# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""TypedAPI Protocols Module.

Exports:
    ProtocolCapabilityRegistry: Host framework registration surface
    ProtocolSchemaChecker: External structural schema checker
"""

from typedapi_tester.protocols.protocol_capability_registry import (
    ProtocolCapabilityRegistry,
)
from typedapi_tester.protocols.protocol_schema_checker import ProtocolSchemaChecker

__all__: list[str] = [
    "ProtocolCapabilityRegistry",
    "ProtocolSchemaChecker",
]
