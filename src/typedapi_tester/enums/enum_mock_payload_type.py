# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type labels attached to synthesized mock payloads."""

from __future__ import annotations

from enum import Enum


class EnumMockPayloadType(str, Enum):
    """Label describing the shape of a generated mock payload.

    Values:
        API_KEY_LIST: List of API key records (``GET`` on an api-key contract).
        API_KEY: Single API key record (``POST`` on an api-key contract).
        GENERIC: Generic ``{id, timestamp, success, message}`` payload.
        ERROR: Generation failed; the payload is ``None``.
    """

    API_KEY_LIST = "Array<APIAuthKey>"
    API_KEY = "APIAuthKey"
    GENERIC = "generic"
    ERROR = "error"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumMockPayloadType"]
