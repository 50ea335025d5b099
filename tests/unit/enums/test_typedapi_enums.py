# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for the TypedAPI enumerations."""

from __future__ import annotations

import pytest

from typedapi_tester.enums import (
    EnumDeclarationKind,
    EnumHttpMethod,
    EnumMockPayloadType,
    method_expects_body,
)


class TestEnumHttpMethod:
    """Test suite for EnumHttpMethod."""

    def test_values_in_declaration_order(self) -> None:
        """values() lists methods in the order used by error messages."""
        assert EnumHttpMethod.values() == ["get", "post", "put", "delete", "patch"]

    @pytest.mark.parametrize("method", ["get", "post", "put", "delete", "patch"])
    def test_is_valid_accepts_lowercase_methods(self, method: str) -> None:
        """Lowercase method names are valid."""
        assert EnumHttpMethod.is_valid(method)

    @pytest.mark.parametrize("method", ["GET", "head", "", None, 1, ["get"]])
    def test_is_valid_rejects_other_values(self, method: object) -> None:
        """Uppercase names, unknown methods and non-strings are invalid."""
        assert not EnumHttpMethod.is_valid(method)

    def test_expects_body(self) -> None:
        """Only POST, PUT and PATCH carry a body."""
        assert EnumHttpMethod.POST.expects_body()
        assert EnumHttpMethod.PUT.expects_body()
        assert EnumHttpMethod.PATCH.expects_body()
        assert not EnumHttpMethod.GET.expects_body()
        assert not EnumHttpMethod.DELETE.expects_body()

    def test_method_expects_body_tolerates_invalid_values(self) -> None:
        """method_expects_body returns False for anything not a method."""
        assert method_expects_body("post")
        assert not method_expects_body("POST")
        assert not method_expects_body(None)

    def test_str_returns_value(self) -> None:
        """str() yields the lowercase value."""
        assert str(EnumHttpMethod.DELETE) == "delete"


class TestEnumMockPayloadType:
    """Test suite for EnumMockPayloadType."""

    def test_labels(self) -> None:
        """Shape labels match the values consumers switch on."""
        assert EnumMockPayloadType.API_KEY_LIST.value == "Array<APIAuthKey>"
        assert EnumMockPayloadType.API_KEY.value == "APIAuthKey"
        assert EnumMockPayloadType.GENERIC.value == "generic"
        assert EnumMockPayloadType.ERROR.value == "error"

    def test_is_string_enum(self) -> None:
        """Members compare equal to their string values."""
        assert EnumMockPayloadType.GENERIC == "generic"


class TestEnumDeclarationKind:
    """Test suite for EnumDeclarationKind."""

    def test_members(self) -> None:
        """Three declaration kinds are distinguished."""
        assert {kind.name for kind in EnumDeclarationKind} == {
            "VARIABLE",
            "CLASS",
            "TYPE_ALIAS",
        }
