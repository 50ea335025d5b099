# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""TypedAPI Addon.

Packages the adapter's operations as capabilities for the host test
framework. Each capability carries natural-language descriptions and example
test steps the host matches against, plus an async handler that forwards to
the adapter.

Registration order is fixed: the adapter first (under ``typedapi``), then
every capability in declaration order.

Hosts may hand status codes over as text (``"201"``); handlers convert them
to ``int`` before calling the adapter.
"""

from __future__ import annotations

import logging
from pathlib import Path

from typedapi_tester.adapter import TypedAPIAdapter
from typedapi_tester.models import (
    ModelCapability,
    ModelGeneratedTypes,
    ModelMockResult,
    ModelTypedAPIAdapterConfig,
    ModelValidationResult,
)
from typedapi_tester.protocols import (
    ProtocolCapabilityRegistry,
    ProtocolSchemaChecker,
)

logger = logging.getLogger(__name__)

ADAPTER_NAME = "typedapi"


class TypedAPIAddon:
    """Capability bundle wrapping a ``TypedAPIAdapter``."""

    name = "typedapi-tester-addon"
    version = "1.0.0"
    description = "TypedAPI testing capabilities for contract-driven API tests"

    def __init__(
        self,
        config: ModelTypedAPIAdapterConfig | None = None,
        schema_checker: ProtocolSchemaChecker | None = None,
    ) -> None:
        self._adapter = TypedAPIAdapter(config, schema_checker)
        self._capabilities = self._build_capabilities()

    def register(self, registry: ProtocolCapabilityRegistry) -> None:
        """Register the adapter and every capability with ``registry``."""
        registry.register_adapter(ADAPTER_NAME, self._adapter)
        for capability in self._capabilities:
            registry.register_capability(capability)

        logger.info(
            "Registered TypedAPI addon",
            extra={
                "addon": self.name,
                "capability_count": len(self._capabilities),
            },
        )

    def register_capabilities(self, registry: ProtocolCapabilityRegistry) -> None:
        """Alias of ``register`` for hosts that call it by this name."""
        self.register(registry)

    def get_adapter(self) -> TypedAPIAdapter:
        return self._adapter

    def get_capabilities(self) -> list[ModelCapability]:
        """Capabilities in registration order (a copy)."""
        return list(self._capabilities)

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    async def _validate_contract(self, reference: str | Path) -> ModelValidationResult:
        return await self._adapter.validate_contract(reference)

    async def _validate_request_type(
        self, reference: str | Path
    ) -> ModelValidationResult:
        return await self._adapter.validate_request_type(reference)

    async def _validate_response_type(
        self, reference: str | Path
    ) -> ModelValidationResult:
        return await self._adapter.validate_response_type(reference)

    async def _create_mock_request(self, reference: str | Path) -> dict[str, object]:
        return await self._adapter.create_mock_request(reference)

    async def _validate_request_against_contract(
        self, reference: str | Path, request: object
    ) -> ModelValidationResult:
        return await self._adapter.validate_request_against_contract(reference, request)

    async def _validate_response_against_contract(
        self, reference: str | Path, response: object, status_code: int | str = 200
    ) -> ModelValidationResult:
        return await self._adapter.validate_response_against_contract(
            reference, response, int(status_code)
        )

    async def _generate_types(self, reference: str | Path) -> ModelGeneratedTypes:
        return await self._adapter.generate_types(reference)

    async def _check_type_existence(
        self, reference: str | Path, type_name: str
    ) -> bool:
        return await self._adapter.check_type_existence(reference, type_name)

    async def _check_type_property(
        self, reference: str | Path, type_name: str, property_name: str
    ) -> bool:
        return await self._adapter.check_type_property(
            reference, type_name, property_name
        )

    async def _generate_mock_response(
        self, reference: str | Path, status_code: int | str = 200
    ) -> ModelMockResult:
        return await self._adapter.generate_mock_response(reference, int(status_code))

    def _build_capabilities(self) -> list[ModelCapability]:
        return [
            # Contract validation
            ModelCapability(
                name="validateContract",
                descriptions=[
                    "Validates a TypedAPI contract against its schema",
                    "Checks if a contract definition is valid",
                    "Validates the structure and types in a contract",
                ],
                examples=[
                    "When I validate the user contract",
                    "Then the API contract should be valid",
                    "Given a valid TypedAPI contract",
                ],
                handler=self._validate_contract,
            ),
            ModelCapability(
                name="validateRequestType",
                descriptions=[
                    "Validates the request type in a TypedAPI contract",
                    "Checks that a request type definition is valid",
                    "Ensures request type matches path parameters",
                ],
                examples=[
                    "When I validate the request type",
                    "Then the request type should be valid",
                    "Then all path parameters should be in the request type",
                ],
                handler=self._validate_request_type,
            ),
            ModelCapability(
                name="validateResponseType",
                descriptions=[
                    "Validates the response type in a TypedAPI contract",
                    "Checks that a response type definition is valid",
                    "Ensures response type includes all required fields",
                ],
                examples=[
                    "When I validate the response type",
                    "Then the response type should be valid",
                    "Then the response type should include all required fields",
                ],
                handler=self._validate_response_type,
            ),
            # Request/response testing
            ModelCapability(
                name="createMockRequest",
                descriptions=[
                    "Creates a mock request based on a TypedAPI contract",
                    "Generates a sample request that conforms to the contract",
                    "Creates test data for API requests",
                ],
                examples=[
                    "When I create a mock request",
                    "Given I have a sample request",
                    "When I generate test data for the request",
                ],
                handler=self._create_mock_request,
            ),
            ModelCapability(
                name="validateRequestAgainstContract",
                descriptions=[
                    "Validates a request against a TypedAPI contract",
                    "Checks if a request object conforms to its contract",
                    "Verifies request data is valid according to the schema",
                ],
                examples=[
                    "When I validate the request against the contract",
                    "Then the request should be valid",
                    "When I check if the request matches the schema",
                ],
                handler=self._validate_request_against_contract,
            ),
            ModelCapability(
                name="validateResponseAgainstContract",
                descriptions=[
                    "Validates a response against a TypedAPI contract",
                    "Checks if a response object conforms to its contract",
                    "Verifies response data is valid according to the schema",
                ],
                examples=[
                    "When I validate the response against the contract",
                    "Then the response should be valid",
                    "When I check if the response matches the schema",
                ],
                handler=self._validate_response_against_contract,
            ),
            # Type checking
            ModelCapability(
                name="generateTypes",
                descriptions=[
                    "Generates type definitions from a TypedAPI contract",
                    "Creates type definitions based on a contract",
                    "Extracts types from a contract file",
                ],
                examples=[
                    "When I generate types for the contract",
                    "Then I should get valid type definitions",
                    "When I extract type definitions from the contract",
                ],
                handler=self._generate_types,
            ),
            ModelCapability(
                name="checkTypeExistence",
                descriptions=[
                    "Checks if a type exists in a TypedAPI contract",
                    "Verifies that a specific type is defined",
                    "Tests for the presence of a type definition",
                ],
                examples=[
                    'Then the contract should have a type named "UserRequest"',
                    "When I check if the type exists",
                    "Then the type should be defined in the contract",
                ],
                handler=self._check_type_existence,
            ),
            ModelCapability(
                name="checkTypeProperty",
                descriptions=[
                    "Checks if a property exists on a type in a TypedAPI contract",
                    "Verifies that a type has a specific property",
                    "Tests for the presence of a field in a type",
                ],
                examples=[
                    'Then the UserRequest type should have a "username" property',
                    "When I check if the property exists on the type",
                    "Then the type should have the required field",
                ],
                handler=self._check_type_property,
            ),
            # Mocks
            ModelCapability(
                name="generateMockResponse",
                descriptions=[
                    "Generates a mock response based on a TypedAPI contract",
                    "Creates sample response data that conforms to the contract",
                    "Generates test data for API responses",
                ],
                examples=[
                    "When I generate a mock response",
                    "Given I have a sample response",
                    "When I create test data for the response",
                ],
                handler=self._generate_mock_response,
            ),
        ]


__all__ = ["ADAPTER_NAME", "TypedAPIAddon"]
