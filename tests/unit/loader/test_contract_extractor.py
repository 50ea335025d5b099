# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for AST-based contract extraction and literal resolution."""

from __future__ import annotations

import ast
import textwrap
from pathlib import Path

import pytest

from typedapi_tester.enums import EnumDeclarationKind
from typedapi_tester.loader import (
    ContractExtractor,
    iter_declarations,
    parse_contract_module,
    resolve_literal,
)
from typedapi_tester.models import VerbatimExpression

LOCATION = Path("/contracts/users.get.contract.py")


def _extract(source: str):
    return ContractExtractor().extract(LOCATION, textwrap.dedent(source))


def _resolve(expression: str) -> object:
    node = ast.parse(expression, mode="eval").body
    return resolve_literal(node, expression)


class TestResolveLiteral:
    """Tests for resolve_literal over expression node kinds."""

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("'get'", "get"),
            ("42", 42),
            ("1.5", 1.5),
            ("True", True),
            ("False", False),
            ("None", None),
            ("-3", -3),
            ("+2.5", 2.5),
        ],
    )
    def test_constants(self, expression: str, expected: object) -> None:
        """Constants and signed numbers resolve to native values."""
        value = _resolve(expression)
        assert value == expected
        assert type(value) is type(expected)

    def test_nested_containers(self) -> None:
        """Dicts, lists and tuples resolve recursively."""
        value = _resolve("{'tags': ['a', ('b', 1)], 'auth': {'on': True}}")
        assert value == {"tags": ["a", ["b", 1]], "auth": {"on": True}}

    @pytest.mark.parametrize(
        "expression",
        [
            "ParamsSchema",
            "schemas.User",
            "make_schema(strict=True)",
            "f'/users/{uid}'",
            "b'raw'",
            "...",
            "{1, 2}",
            "[x for x in y]",
            "lambda: None",
            "-value",
        ],
    )
    def test_non_literals_kept_verbatim(self, expression: str) -> None:
        """Anything else keeps its exact source text."""
        value = _resolve(expression)
        assert isinstance(value, VerbatimExpression)
        assert value == expression

    def test_dict_keys(self) -> None:
        """Numeric keys become decimal text; computed keys keep source text."""
        value = _resolve("{200: 'ok', '404': 'missing', KEY: 1, **extra}")
        assert value == {"200": "ok", "404": "missing", "KEY": 1}
        assert list(value) == ["200", "404", "KEY"]

    def test_integral_float_keys_match_integer_keys(self) -> None:
        value = _resolve("{200.0: 'ok', 201.5: 'odd'}")
        assert list(value) == ["200", "201.5"]


class TestParseContractModule:
    """Tests for parse_contract_module."""

    def test_syntax_error_recorded(self) -> None:
        """Syntax errors are returned, not raised."""
        tree, errors = parse_contract_module(LOCATION, "Contract = {\n")
        assert tree is None
        assert len(errors) == 1
        assert "line 1" in errors[0]

    def test_valid_source(self) -> None:
        """Valid source yields a tree and no errors."""
        tree, errors = parse_contract_module(LOCATION, "Contract = {}\n")
        assert isinstance(tree, ast.Module)
        assert errors == []


class TestIterDeclarations:
    """Tests for module-level declaration discovery."""

    def test_declaration_kinds(self) -> None:
        """Assignments, classes and both type alias spellings are classified."""
        tree = ast.parse(
            textwrap.dedent(
                """
                from typing import TypeAlias

                A = 1
                B: int = 2
                class C: ...
                type D = int
                E: TypeAlias = str
                F: typing.TypeAlias = str
                x, y = 1, 2
                obj.attr = 3
                def helper(): ...
                """
            )
        )
        declarations = {name: kind for name, _, kind in iter_declarations(tree)}
        assert declarations == {
            "A": EnumDeclarationKind.VARIABLE,
            "B": EnumDeclarationKind.VARIABLE,
            "C": EnumDeclarationKind.CLASS,
            "D": EnumDeclarationKind.TYPE_ALIAS,
            "E": EnumDeclarationKind.TYPE_ALIAS,
            "F": EnumDeclarationKind.TYPE_ALIAS,
        }

    def test_nested_statements_ignored(self) -> None:
        """Only top-level statements count."""
        tree = ast.parse("if True:\n    Contract = {}\n")
        assert list(iter_declarations(tree)) == []


class TestContractExtractor:
    """Tests for ContractExtractor.extract."""

    def test_extracts_contract_and_auxiliaries(
        self, fixture_contracts_dir: Path
    ) -> None:
        """The shared fixture contract is fully extracted."""
        location = fixture_contracts_dir / "user.get.contract.py"
        source = ContractExtractor().extract(
            location, location.read_text(encoding="utf-8")
        )

        assert source.has_contract
        assert source.is_parsed
        assert source.export_name == "Contract"
        contract = source.contract
        assert contract is not None
        assert contract["path"] == "/users/:userId"
        assert contract["method"] == "get"
        assert contract["tags"] == ["users"]
        assert isinstance(contract["params"], VerbatimExpression)
        assert list(contract["response"]) == ["200", "400", "404"]
        assert source.auxiliary_names == frozenset(
            {"QuerySchema", "ResponseSchema", "Response"}
        )

    def test_annotated_contract(self) -> None:
        """An annotated assignment to Contract counts."""
        source = _extract(
            """
            Contract: dict[str, object] = {"path": "/a", "method": "get"}
            """
        )
        assert source.contract == {"path": "/a", "method": "get"}

    def test_last_binding_wins(self) -> None:
        """A later Contract assignment replaces an earlier one."""
        source = _extract(
            """
            Contract = {"path": "/first"}
            Contract = {"path": "/second"}
            """
        )
        assert source.contract == {"path": "/second"}

    def test_non_literal_contract(self) -> None:
        """A computed Contract records the export but no description."""
        source = _extract("Contract = build_contract('/a')\n")
        assert source.export_name == "Contract"
        assert source.contract is None

    def test_missing_contract(self) -> None:
        """A module without Contract has no export and no description."""
        source = _extract("ParamsSchema = object\n")
        assert source.export_name is None
        assert source.contract is None
        assert source.syntax_errors == ()

    def test_response_alias_must_be_type_alias(self) -> None:
        """A plain Response assignment is not a type alias."""
        source = _extract(
            """
            Response = dict
            class QuerySchema: ...
            ResponseSchema = object
            Contract = {}
            """
        )
        assert not source.has_auxiliary("Response")
        assert source.has_auxiliary("QuerySchema")
        assert source.has_auxiliary("ResponseSchema")

    def test_syntax_errors_recorded(self, fixture_contracts_dir: Path) -> None:
        """Unparseable modules yield a source with syntax errors only."""
        location = fixture_contracts_dir / "broken.contract.py"
        source = ContractExtractor().extract(
            location, location.read_text(encoding="utf-8")
        )
        assert source.contract is None
        assert not source.is_parsed
        assert source.syntax_errors

    def test_uses_supplied_tree(self) -> None:
        """A cached tree is used instead of reparsing."""
        raw_text = 'Contract = {"path": "/cached"}\n'
        tree = ast.parse(raw_text)
        source = ContractExtractor().extract(LOCATION, raw_text, tree=tree)
        assert source.tree is tree
        assert source.contract == {"path": "/cached"}
