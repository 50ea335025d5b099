# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP method enumeration for contract declarations."""

from __future__ import annotations

from enum import Enum


class EnumHttpMethod(str, Enum):
    """HTTP methods a contract may declare.

    Contracts spell methods in lowercase; comparison is case-sensitive, so
    ``"GET"`` is not a valid contract method.
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    PATCH = "patch"

    @classmethod
    def values(cls) -> list[str]:
        """Return the method values in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Return True if ``value`` is one of the declared method strings."""
        return isinstance(value, str) and value in cls.values()

    def expects_body(self) -> bool:
        """Return True for methods that conventionally carry a request body."""
        return self in (EnumHttpMethod.POST, EnumHttpMethod.PUT, EnumHttpMethod.PATCH)

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


def method_expects_body(value: object) -> bool:
    """Return True if ``value`` names a method that carries a request body."""
    if not EnumHttpMethod.is_valid(value):
        return False
    return EnumHttpMethod(value).expects_body()


__all__: list[str] = ["EnumHttpMethod", "method_expects_body"]
