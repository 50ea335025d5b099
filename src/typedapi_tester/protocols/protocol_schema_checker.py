# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the external structural schema checker.

Contract extraction never evaluates code, so a contract description only
holds schema *references* (the source text of ``ParamsSchema``,
``z.object(...)``, ``UserResponse`` ...). Checking a payload's shape against
the schema behind such a reference is delegated to an implementation of this
protocol supplied by the caller, e.g. one that maps reference names to
pydantic models imported by the test suite.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolSchemaChecker(Protocol):
    """Validates a value against the schema named by a contract reference."""

    def check(self, schema_reference: str, value: object) -> list[str]:
        """Validate ``value`` against the schema behind ``schema_reference``.

        Args:
            schema_reference: Source text of the schema reference as written
                in the contract.
            value: Payload part to check.

        Returns:
            Human-readable problems; empty when the value conforms or the
            reference is unknown to the checker.
        """
        ...


__all__ = ["ProtocolSchemaChecker"]
