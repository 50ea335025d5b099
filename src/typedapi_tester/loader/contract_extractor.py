# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AST-based contract extraction.

Reconstructs a contract description from a contract module's syntax tree
without importing or executing it. Only module-level statements are
inspected:

- The assignment to ``Contract`` is the canonical contract. Its value must
  be a dict display; otherwise no description is produced and later
  validation reports the contract as missing.
- ``QuerySchema`` / ``ResponseSchema`` assignments or classes and a type
  alias named ``Response`` are recorded by name for cross-checks.

Value resolution is literal-or-verbatim: constants, dicts, lists and tuples
are resolved recursively; every other expression is kept as its exact source
text in a ``VerbatimExpression``. Contracts whose shape is computed rather
than written out therefore degrade to partial descriptions instead of being
evaluated.

Syntax errors are recorded on the returned ``ModelContractSource`` rather
than raised.
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterator
from pathlib import Path

from typedapi_tester.enums import EnumDeclarationKind
from typedapi_tester.models.model_contract_source import ModelContractSource
from typedapi_tester.models.model_literal_value import (
    ContractDescription,
    LiteralValue,
    VerbatimExpression,
)

logger = logging.getLogger(__name__)

# Name of the canonical contract declaration
CONTRACT_EXPORT_NAME = "Contract"

# Companion declarations checked by name, and the kinds that count for each
QUERY_SCHEMA_NAME = "QuerySchema"
RESPONSE_SCHEMA_NAME = "ResponseSchema"
RESPONSE_TYPE_NAME = "Response"

_AUXILIARY_DECLARATIONS: dict[str, frozenset[EnumDeclarationKind]] = {
    QUERY_SCHEMA_NAME: frozenset(
        {EnumDeclarationKind.VARIABLE, EnumDeclarationKind.CLASS}
    ),
    RESPONSE_SCHEMA_NAME: frozenset(
        {EnumDeclarationKind.VARIABLE, EnumDeclarationKind.CLASS}
    ),
    RESPONSE_TYPE_NAME: frozenset({EnumDeclarationKind.TYPE_ALIAS}),
}

# Annotation names that turn an annotated assignment into a type alias
_TYPE_ALIAS_ANNOTATIONS = frozenset({"TypeAlias"})


def parse_contract_module(
    location: Path, raw_text: str
) -> tuple[ast.Module | None, list[str]]:
    """Parse contract source, returning the tree or the recorded syntax errors."""
    try:
        return ast.parse(raw_text, filename=str(location)), []
    except SyntaxError as e:
        return None, [_format_syntax_error(e)]


def resolve_literal(node: ast.expr, source: str) -> LiteralValue:
    """Resolve an expression node to a literal value or its verbatim source."""
    match node:
        case ast.Constant(value=None):
            return None
        case ast.Constant(value=bool() | str() | int() | float() as value):
            return value
        case ast.UnaryOp(
            op=ast.USub() | ast.UAdd() as op,
            operand=ast.Constant(value=int() | float() as number),
        ) if not isinstance(number, bool):
            return -number if isinstance(op, ast.USub) else number
        case ast.Dict():
            return resolve_mapping(node, source)
        case ast.List(elts=elements) | ast.Tuple(elts=elements):
            return [resolve_literal(element, source) for element in elements]
        case _:
            return VerbatimExpression(source_text(node, source))


def resolve_mapping(node: ast.Dict, source: str) -> ContractDescription:
    """Resolve a dict display, keeping key insertion order.

    String keys are kept as-is and numeric keys become their decimal text, so
    ``{200: ...}``, ``{200.0: ...}`` and ``{"200": ...}`` describe the same
    status code.
    ``**other`` unpacking entries cannot be resolved statically and are
    skipped.
    """
    mapping: ContractDescription = {}
    for key, value in zip(node.keys, node.values, strict=True):
        if key is None:
            continue
        mapping[_resolve_key(key, source)] = resolve_literal(value, source)
    return mapping


def source_text(node: ast.AST, source: str) -> str:
    """Exact source text of ``node``, falling back to unparsing."""
    segment = ast.get_source_segment(source, node)
    if segment is None:
        return ast.unparse(node)
    return segment


def _resolve_key(key: ast.expr, source: str) -> str:
    match key:
        case ast.Constant(value=str() as text):
            return text
        case ast.Constant(value=float() as number) if number.is_integer():
            return str(int(number))
        case ast.Constant(value=int() | float() as number) if not isinstance(
            number, bool
        ):
            return str(number)
        case _:
            return source_text(key, source)


def _format_syntax_error(error: SyntaxError) -> str:
    location = ""
    if error.lineno is not None:
        location = f" (line {error.lineno}"
        if error.offset is not None:
            location += f", column {error.offset}"
        location += ")"
    return f"{error.msg}{location}"


def _is_type_alias_annotation(annotation: ast.expr) -> bool:
    match annotation:
        case ast.Name(id=name) | ast.Attribute(attr=name):
            return name in _TYPE_ALIAS_ANNOTATIONS
        case _:
            return False


def iter_declarations(
    tree: ast.Module,
) -> Iterator[tuple[str, ast.expr | None, EnumDeclarationKind]]:
    """Yield ``(name, value, kind)`` for each module-level declaration.

    Only plain-name targets count; tuple unpacking and attribute targets are
    not declarations of a module name.
    """
    for statement in tree.body:
        match statement:
            case ast.Assign(targets=targets, value=value):
                for target in targets:
                    if isinstance(target, ast.Name):
                        yield target.id, value, EnumDeclarationKind.VARIABLE
            case ast.AnnAssign(target=ast.Name(id=name), annotation=annotation):
                kind = (
                    EnumDeclarationKind.TYPE_ALIAS
                    if _is_type_alias_annotation(annotation)
                    else EnumDeclarationKind.VARIABLE
                )
                yield name, statement.value, kind
            case ast.TypeAlias(name=ast.Name(id=name), value=value):
                yield name, value, EnumDeclarationKind.TYPE_ALIAS
            case ast.ClassDef(name=name):
                yield name, None, EnumDeclarationKind.CLASS
            case _:
                continue


class ContractExtractor:
    """Builds ``ModelContractSource`` instances from contract source text.

    The extractor is stateless; the same instance can serve any number of
    concurrent calls.
    """

    def extract(
        self,
        location: Path,
        raw_text: str,
        tree: ast.Module | None = None,
    ) -> ModelContractSource:
        """Extract the contract description and companion declarations.

        Args:
            location: Absolute path of the contract file.
            raw_text: Source text of the contract file.
            tree: Already-parsed module for ``raw_text`` (from the program
                cache). Parsed on demand when omitted.

        Returns:
            ModelContractSource; ``contract`` is None when the module has no
            literal ``Contract`` declaration or could not be parsed.
        """
        syntax_errors: list[str] = []
        if tree is None:
            tree, syntax_errors = parse_contract_module(location, raw_text)

        if tree is None:
            logger.warning(
                "Contract source has syntax errors",
                extra={"contract_path": str(location), "errors": syntax_errors},
            )
            return ModelContractSource(
                location=location,
                content=raw_text,
                syntax_errors=tuple(syntax_errors),
            )

        contract: ContractDescription | None = None
        export_name: str | None = None
        auxiliary_names: set[str] = set()

        for name, value, kind in iter_declarations(tree):
            if name == CONTRACT_EXPORT_NAME and kind == EnumDeclarationKind.VARIABLE:
                # Last binding wins, as it would at import time
                export_name = name
                contract = (
                    resolve_mapping(value, raw_text)
                    if isinstance(value, ast.Dict)
                    else None
                )
            elif kind in _AUXILIARY_DECLARATIONS.get(name, frozenset()):
                auxiliary_names.add(name)

        logger.debug(
            "Extracted contract",
            extra={
                "contract_path": str(location),
                "export_found": export_name is not None,
                "literal_contract": contract is not None,
                "auxiliary_names": sorted(auxiliary_names),
            },
        )

        return ModelContractSource(
            location=location,
            content=raw_text,
            contract=contract,
            export_name=export_name,
            auxiliary_names=frozenset(auxiliary_names),
            tree=tree,
        )


__all__ = [
    "CONTRACT_EXPORT_NAME",
    "QUERY_SCHEMA_NAME",
    "RESPONSE_SCHEMA_NAME",
    "RESPONSE_TYPE_NAME",
    "ContractExtractor",
    "iter_declarations",
    "parse_contract_module",
    "resolve_literal",
    "resolve_mapping",
    "source_text",
]
