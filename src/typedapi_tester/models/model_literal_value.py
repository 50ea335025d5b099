# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Literal value variant produced by contract extraction.

A contract description is a nested structure of statically resolved literal
values. Anything the extractor cannot resolve without evaluating code is kept
as a ``VerbatimExpression``: a ``str`` subclass holding the expression's exact
source text. Consumers that only need presence (schema references such as
``params: ParamsSchema``) treat it like any other value; consumers that care
can tell it apart from a real string literal with ``isinstance``.
"""

from __future__ import annotations


class VerbatimExpression(str):
    """Source text of an expression that is not a static literal.

    Example:
        >>> ref = VerbatimExpression("ParamsSchema")
        >>> ref == "ParamsSchema"
        True
        >>> isinstance(ref, VerbatimExpression)
        True
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"VerbatimExpression({str.__repr__(self)})"


# Resolved value of a single contract field.
type LiteralValue = (
    str
    | int
    | float
    | bool
    | None
    | VerbatimExpression
    | list[LiteralValue]
    | dict[str, LiteralValue]
)

# Ordered mapping of top-level contract fields (path, method, response, ...).
type ContractDescription = dict[str, LiteralValue]


def is_verbatim(value: object) -> bool:
    """Return True if ``value`` is unresolved source text."""
    return isinstance(value, VerbatimExpression)


__all__ = [
    "ContractDescription",
    "LiteralValue",
    "VerbatimExpression",
    "is_verbatim",
]
