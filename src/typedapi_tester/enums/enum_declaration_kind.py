# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kinds of top-level declarations recognized in a contract module."""

from __future__ import annotations

from enum import Enum


class EnumDeclarationKind(str, Enum):
    """Kind of a module-level declaration found while scanning a contract.

    Values:
        VARIABLE: ``Name = value`` or ``Name: Annotation = value``.
        CLASS: ``class Name: ...``.
        TYPE_ALIAS: ``type Name = ...`` or ``Name: TypeAlias = ...``.
    """

    VARIABLE = "variable"
    CLASS = "class"
    TYPE_ALIAS = "type_alias"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumDeclarationKind"]
