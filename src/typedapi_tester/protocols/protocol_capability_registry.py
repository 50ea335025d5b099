# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the host framework's capability registry.

The host test framework owns capability resolution (matching natural-language
test steps to capabilities) and execution. This package only needs to hand it
an adapter and a list of capabilities, so the interface is kept to those two
calls.

Example:
    >>> class InMemoryRegistry:
    ...     def __init__(self) -> None:
    ...         self.adapters: dict[str, object] = {}
    ...         self.capabilities: list[ModelCapability] = []
    ...
    ...     def register_adapter(self, name: str, adapter: object) -> None:
    ...         self.adapters[name] = adapter
    ...
    ...     def register_capability(self, capability: ModelCapability) -> None:
    ...         self.capabilities.append(capability)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typedapi_tester.models.model_capability import ModelCapability


@runtime_checkable
class ProtocolCapabilityRegistry(Protocol):
    """Registration surface of the host test framework."""

    def register_adapter(self, name: str, adapter: object) -> None:
        """Register an adapter instance under ``name``."""
        ...

    def register_capability(self, capability: ModelCapability) -> None:
        """Register a single capability."""
        ...


__all__ = ["ProtocolCapabilityRegistry"]
