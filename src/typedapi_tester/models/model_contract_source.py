# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parsed contract source model."""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from pathlib import Path

from typedapi_tester.models.model_literal_value import ContractDescription


@dataclass(frozen=True)
class ModelContractSource:
    """A contract file read from disk and statically extracted.

    Attributes:
        location: Absolute path of the contract file.
        content: Raw source text.
        contract: Literal-resolved ``Contract`` declaration, or None when the
            module declares no ``Contract`` or its value is not a dict display.
        export_name: Name of the contract declaration when one was found,
            even if its value could not be resolved.
        auxiliary_names: Well-known companion declarations found at module
            level (``QuerySchema``, ``ResponseSchema``, ``Response`` alias).
        syntax_errors: Formatted syntax errors; non-empty means the module
            could not be parsed at all.
        tree: Parsed module, None when parsing failed.
    """

    location: Path
    content: str
    contract: ContractDescription | None = None
    export_name: str | None = None
    auxiliary_names: frozenset[str] = frozenset()
    syntax_errors: tuple[str, ...] = ()
    tree: ast.Module | None = field(default=None, repr=False, compare=False)

    @property
    def has_contract(self) -> bool:
        """True when a literal contract description was extracted."""
        return self.contract is not None

    @property
    def is_parsed(self) -> bool:
        """True when the source produced a syntax tree."""
        return self.tree is not None

    def has_auxiliary(self, name: str) -> bool:
        """Return True if the well-known companion declaration was found."""
        return name in self.auxiliary_names


__all__ = ["ModelContractSource"]
