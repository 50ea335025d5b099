# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for TypedAPIAddon capability registration."""

from __future__ import annotations

from pathlib import Path

import pytest

from typedapi_tester.adapter import TypedAPIAdapter
from typedapi_tester.addon import ADAPTER_NAME, TypedAPIAddon
from typedapi_tester.enums import EnumMockPayloadType
from typedapi_tester.models import ModelTypedAPIAdapterConfig
from typedapi_tester.protocols import ProtocolCapabilityRegistry

EXPECTED_CAPABILITIES = [
    "validateContract",
    "validateRequestType",
    "validateResponseType",
    "createMockRequest",
    "validateRequestAgainstContract",
    "validateResponseAgainstContract",
    "generateTypes",
    "checkTypeExistence",
    "checkTypeProperty",
    "generateMockResponse",
]


@pytest.fixture
def addon(fixture_contracts_dir: Path) -> TypedAPIAddon:
    return TypedAPIAddon(
        ModelTypedAPIAdapterConfig(contracts_base_path=fixture_contracts_dir)
    )


class TestCapabilities:
    """Tests for the capability list."""

    def test_capability_names_in_order(self, addon: TypedAPIAddon) -> None:
        assert [c.name for c in addon.get_capabilities()] == EXPECTED_CAPABILITIES

    def test_capabilities_have_hints(self, addon: TypedAPIAddon) -> None:
        """Every capability carries descriptions and examples."""
        for capability in addon.get_capabilities():
            assert len(capability.descriptions) == 3
            assert len(capability.examples) == 3

    def test_get_capabilities_returns_copy(self, addon: TypedAPIAddon) -> None:
        capabilities = addon.get_capabilities()
        capabilities.clear()
        assert len(addon.get_capabilities()) == len(EXPECTED_CAPABILITIES)

    def test_get_adapter(self, addon: TypedAPIAddon) -> None:
        assert isinstance(addon.get_adapter(), TypedAPIAdapter)

    def test_metadata(self, addon: TypedAPIAddon) -> None:
        assert addon.name == "typedapi-tester-addon"
        assert addon.version == "1.0.0"


class TestRegistration:
    """Tests for register and register_capabilities."""

    def test_registry_double_satisfies_protocol(self, registry) -> None:
        assert isinstance(registry, ProtocolCapabilityRegistry)

    def test_adapter_registered_before_capabilities(
        self, addon: TypedAPIAddon, registry
    ) -> None:
        addon.register(registry)

        assert registry.adapters == {ADAPTER_NAME: addon.get_adapter()}
        assert registry.calls[0] == "adapter:typedapi"
        assert registry.calls[1:] == [
            f"capability:{name}" for name in EXPECTED_CAPABILITIES
        ]

    def test_register_capabilities_alias(self, addon: TypedAPIAddon, registry) -> None:
        addon.register_capabilities(registry)
        assert len(registry.capabilities) == len(EXPECTED_CAPABILITIES)


class TestHandlers:
    """Tests for capability handlers forwarding to the adapter."""

    @staticmethod
    def _handler(addon: TypedAPIAddon, name: str):
        return next(c for c in addon.get_capabilities() if c.name == name).handler

    @pytest.mark.asyncio
    async def test_validate_contract_handler(self, addon: TypedAPIAddon) -> None:
        result = await self._handler(addon, "validateContract")("user.get.contract.py")
        assert result.success is True

    @pytest.mark.asyncio
    async def test_response_handler_passes_status_code(
        self, addon: TypedAPIAddon
    ) -> None:
        handler = self._handler(addon, "validateResponseAgainstContract")
        result = await handler("user.get.contract.py", {"error": "x"}, 404)
        assert result.success is True
        assert result.details["status_code"] == 404

    @pytest.mark.asyncio
    async def test_mock_handler_passes_status_code(self, addon: TypedAPIAddon) -> None:
        handler = self._handler(addon, "generateMockResponse")
        result = await handler("admin.api-key.post.contract.py", 201)
        assert result.type == EnumMockPayloadType.API_KEY

    @pytest.mark.asyncio
    async def test_handlers_accept_textual_status_code(
        self, addon: TypedAPIAddon
    ) -> None:
        mock_handler = self._handler(addon, "generateMockResponse")
        mock = await mock_handler("admin.api-key.post.contract.py", "201")
        assert mock.type == EnumMockPayloadType.API_KEY

        response_handler = self._handler(addon, "validateResponseAgainstContract")
        result = await response_handler("user.get.contract.py", {"error": "x"}, "404")
        assert result.details["status_code"] == 404

    @pytest.mark.asyncio
    async def test_type_property_handler(self, addon: TypedAPIAddon) -> None:
        handler = self._handler(addon, "checkTypeProperty")
        assert await handler("user.get.contract.py", "UserSchema", "email") is True
