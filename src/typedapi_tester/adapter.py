# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""TypedAPI Adapter.

Engine behind every TypedAPI operation. Resolves a contract reference, reads
and extracts the contract module, then delegates to the structural
validator, the payload matcher or the mock synthesizer.

The adapter owns the parsed-program cache: ``initialize()`` parses every
contract module directly inside the contracts root and keeps the trees keyed
by absolute path together with the text they were parsed from. A cached
tree is reused only while the file text is unchanged. The scan runs in a
worker thread so the event loop keeps serving other tasks. Reads of files
outside the cache are parsed on demand and never added to it;
re-initialization replaces the cache wholesale and ``cleanup()`` drops it.

Error boundary:
    Loader faults (``TypedAPIError``) never escape a validation operation;
    they become a failed ``ModelValidationResult`` with a single message such
    as ``Failed to validate contract: Contract file not found: ...``.
    ``generate_mock_response`` turns them into an error mock result. The
    placeholder operations (``create_mock_request``, ``generate_types``,
    ``check_type_existence``, ``check_type_property``) re-raise them wrapped
    in a new ``TypedAPIError``.

Usage:
    adapter = TypedAPIAdapter(ModelTypedAPIAdapterConfig(contracts_base_path="./contracts"))
    await adapter.initialize()
    result = await adapter.validate_contract("users.get.contract.py")
"""

from __future__ import annotations

import ast
import asyncio
import logging
from pathlib import Path

from typedapi_tester.errors import ModelContractErrorContext, TypedAPIError
from typedapi_tester.loader import ContractExtractor, ContractSourceLoader
from typedapi_tester.models import (
    ModelContractSource,
    ModelGeneratedTypes,
    ModelMockResult,
    ModelTypedAPIAdapterConfig,
    ModelValidationResult,
)
from typedapi_tester.models.model_mock_config import ModelMockConfig
from typedapi_tester.models.model_validation_config import ModelValidationConfig
from typedapi_tester.mocks import MockResponseSynthesizer
from typedapi_tester.protocols import ProtocolSchemaChecker
from typedapi_tester.validation import (
    ContractStructureValidator,
    PayloadMatcher,
)
from typedapi_tester.validation.contract_fields import contract_name_from_reference

logger = logging.getLogger(__name__)

GENERATED_TYPES_PLACEHOLDER = "# Generated types will go here"


class TypedAPIAdapter:
    """Contract introspection engine exposed to the host test framework.

    Args:
        config: Adapter configuration; defaults apply when omitted.
        schema_checker: Optional deep payload checker consulted by the
            request/response matcher.
    """

    def __init__(
        self,
        config: ModelTypedAPIAdapterConfig | None = None,
        schema_checker: ProtocolSchemaChecker | None = None,
    ) -> None:
        self._config = config if config is not None else ModelTypedAPIAdapterConfig()
        self._loader = ContractSourceLoader(self._config.contracts_base_path)
        self._extractor = ContractExtractor()
        self._validator = ContractStructureValidator(self._config.validation)
        self._matcher = PayloadMatcher(self._config.validation, schema_checker)
        self._synthesizer = MockResponseSynthesizer()
        self._programs: dict[Path, tuple[str, ast.Module]] | None = None

    @property
    def contracts_base_path(self) -> Path:
        """Directory relative contract references are resolved against."""
        return self._loader.base_path

    @property
    def validation(self) -> ModelValidationConfig:
        return self._config.validation

    @property
    def mock(self) -> ModelMockConfig:
        return self._config.mock

    @property
    def is_initialized(self) -> bool:
        """True while a parsed-program cache is held."""
        return self._programs is not None

    @property
    def cached_contracts(self) -> list[Path]:
        """Absolute paths held in the parsed-program cache."""
        return list(self._programs or {})

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def initialize(self) -> None:
        """Build the parsed-program cache from the contracts root.

        Safe to call repeatedly; each call rebuilds the cache. A missing
        contracts root is logged and leaves an empty cache.
        """
        logger.info(
            "Initializing TypedAPI adapter",
            extra={"contracts_base_path": str(self.contracts_base_path)},
        )
        if not self._loader.base_path_exists():
            logger.warning(
                "Contracts path does not exist or is not accessible",
                extra={"contracts_base_path": str(self.contracts_base_path)},
            )

        self._programs = await asyncio.to_thread(self._build_program_cache)

        logger.info(
            "TypedAPI adapter initialized",
            extra={
                "contracts_base_path": str(self.contracts_base_path),
                "cached_contracts": len(self._programs),
                "validation": self._config.validation.model_dump(),
                "mock_locale": self._config.mock.locale,
            },
        )

    async def cleanup(self) -> None:
        """Drop the parsed-program cache."""
        logger.info("Cleaning up TypedAPI adapter")
        self._programs = None

    def _build_program_cache(self) -> dict[Path, tuple[str, ast.Module]]:
        programs: dict[Path, tuple[str, ast.Module]] = {}
        files = self._loader.find_contract_files()
        if not files:
            logger.warning(
                "No contract modules found for parsing",
                extra={"contracts_base_path": str(self.contracts_base_path)},
            )
            return programs

        for location in files:
            try:
                raw_text = self._loader.read_text(location)
            except TypedAPIError as e:
                logger.warning(
                    "Skipping unreadable contract module",
                    extra={"contract_path": str(location), **e.structured_context()},
                )
                continue
            try:
                programs[location] = (
                    raw_text,
                    ast.parse(raw_text, filename=str(location)),
                )
            except SyntaxError as e:
                # Extraction records the syntax error when the file is read
                logger.debug(
                    "Contract module not cached due to syntax error",
                    extra={"contract_path": str(location), "error": str(e)},
                )

        logger.debug(
            "Parsed contract modules",
            extra={"count": len(programs), "files": [str(p) for p in programs]},
        )
        return programs

    # -------------------------------------------------------------------------
    # Contract reading
    # -------------------------------------------------------------------------

    async def _read_contract(self, reference: str | Path) -> ModelContractSource:
        """Resolve, read and extract a contract module.

        Raises:
            ContractNotFoundError: If the resolved file does not exist.
            ContractReadError: If the file cannot be read.
        """
        if self._programs is None:
            self._programs = await asyncio.to_thread(self._build_program_cache)

        location = self._loader.resolve(reference)
        raw_text = await self._loader.load(location)

        # A cached tree is only reused while the file text is unchanged
        tree = None
        cached = self._programs.get(location)
        if cached is not None and cached[0] == raw_text:
            tree = cached[1]
        return self._extractor.extract(location, raw_text, tree=tree)

    # -------------------------------------------------------------------------
    # Contract validation
    # -------------------------------------------------------------------------

    async def validate_contract(self, reference: str | Path) -> ModelValidationResult:
        """Validate the structure of a contract."""
        contract_name = contract_name_from_reference(reference)
        logger.info("Validating contract", extra={"contract_name": contract_name})
        try:
            source = await self._read_contract(reference)
        except TypedAPIError as e:
            return self._boundary_failure("Failed to validate contract", e, contract_name)
        return self._validator.validate_contract(source, contract_name)

    async def validate_request_type(
        self, reference: str | Path
    ) -> ModelValidationResult:
        """Validate the request side of a contract."""
        contract_name = contract_name_from_reference(reference)
        logger.info("Validating request type", extra={"contract_name": contract_name})
        try:
            source = await self._read_contract(reference)
        except TypedAPIError as e:
            return self._boundary_failure(
                "Failed to validate request type", e, contract_name
            )
        return self._validator.validate_request_type(source, contract_name)

    async def validate_response_type(
        self, reference: str | Path
    ) -> ModelValidationResult:
        """Validate the response side of a contract."""
        contract_name = contract_name_from_reference(reference)
        logger.info("Validating response type", extra={"contract_name": contract_name})
        try:
            source = await self._read_contract(reference)
        except TypedAPIError as e:
            return self._boundary_failure(
                "Failed to validate response type", e, contract_name
            )
        return self._validator.validate_response_type(source, contract_name)

    # -------------------------------------------------------------------------
    # Payload validation
    # -------------------------------------------------------------------------

    async def validate_request_against_contract(
        self, reference: str | Path, request: object
    ) -> ModelValidationResult:
        """Validate a concrete request (params/query/body) against a contract."""
        contract_name = contract_name_from_reference(reference)
        logger.info(
            "Validating request against contract",
            extra={"contract_name": contract_name},
        )
        try:
            source = await self._read_contract(reference)
        except TypedAPIError as e:
            return self._boundary_failure("Failed to validate request", e, contract_name)
        return self._matcher.validate_request(source, request, contract_name)

    async def validate_response_against_contract(
        self,
        reference: str | Path,
        response: object,
        status_code: int = 200,
    ) -> ModelValidationResult:
        """Validate a concrete response payload for ``status_code``."""
        contract_name = contract_name_from_reference(reference)
        logger.info(
            "Validating response against contract",
            extra={"contract_name": contract_name, "status_code": status_code},
        )
        try:
            source = await self._read_contract(reference)
        except TypedAPIError as e:
            return self._boundary_failure(
                "Failed to validate response", e, contract_name
            )
        return self._matcher.validate_response(
            source, response, contract_name, status_code
        )

    # -------------------------------------------------------------------------
    # Mocks
    # -------------------------------------------------------------------------

    async def generate_mock_response(
        self, reference: str | Path, status_code: int = 200
    ) -> ModelMockResult:
        """Synthesize a response payload for ``status_code``.

        Falls back to the first declared status code when ``status_code`` is
        not declared; returns an error result when nothing can be generated.
        """
        contract_name = contract_name_from_reference(reference)
        logger.info(
            "Generating mock response",
            extra={"contract_name": contract_name, "status_code": status_code},
        )
        try:
            source = await self._read_contract(reference)
        except TypedAPIError as e:
            logger.error(
                "Error generating mock response",
                extra={"contract_name": contract_name, **e.structured_context()},
            )
            return ModelMockResult.error()
        return self._synthesizer.generate(source.contract, contract_name, status_code)

    async def create_mock_request(self, reference: str | Path) -> dict[str, object]:
        """Placeholder: always returns an empty request.

        Raises:
            TypedAPIError: If the contract cannot be read.
        """
        logger.warning(
            "create_mock_request is not implemented; returning an empty request",
            extra={"contract_reference": str(reference)},
        )
        await self._read_placeholder(
            reference, "create_mock_request", "Failed to create mock request"
        )
        return {}

    # -------------------------------------------------------------------------
    # Type inspection placeholders
    # -------------------------------------------------------------------------

    async def generate_types(self, reference: str | Path) -> ModelGeneratedTypes:
        """Placeholder: returns fixed code and no type names.

        Raises:
            TypedAPIError: If the contract cannot be read.
        """
        logger.warning(
            "generate_types is not implemented; returning placeholder code",
            extra={"contract_reference": str(reference)},
        )
        source = await self._read_placeholder(
            reference, "generate_types", "Failed to generate types"
        )
        return ModelGeneratedTypes(
            code=GENERATED_TYPES_PLACEHOLDER,
            type_names=[],
            source_path=str(source.location),
        )

    async def check_type_existence(
        self, reference: str | Path, type_name: str
    ) -> bool:
        """Placeholder: always True once the contract can be read."""
        logger.warning(
            "check_type_existence is not implemented; reporting the type as present",
            extra={"contract_reference": str(reference), "type_name": type_name},
        )
        await self._read_placeholder(
            reference, "check_type_existence", "Failed to check type existence"
        )
        return True

    async def check_type_property(
        self, reference: str | Path, type_name: str, property_name: str
    ) -> bool:
        """Placeholder: always True once the contract can be read."""
        logger.warning(
            "check_type_property is not implemented; reporting the property as present",
            extra={
                "contract_reference": str(reference),
                "type_name": type_name,
                "property_name": property_name,
            },
        )
        await self._read_placeholder(
            reference, "check_type_property", "Failed to check type property"
        )
        return True

    async def _read_placeholder(
        self, reference: str | Path, operation: str, prefix: str
    ) -> ModelContractSource:
        try:
            return await self._read_contract(reference)
        except TypedAPIError as e:
            raise TypedAPIError(
                f"{prefix}: {e}",
                context=ModelContractErrorContext.with_correlation(
                    correlation_id=e.correlation_id,
                    operation=operation,
                    target_name=str(reference),
                ),
            ) from e

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _boundary_failure(
        self, prefix: str, error: TypedAPIError, contract_name: str
    ) -> ModelValidationResult:
        logger.warning(
            prefix,
            extra={"contract_name": contract_name, **error.structured_context()},
        )
        return ModelValidationResult.failure(
            f"{prefix}: {error}", details={"contract_name": contract_name}
        )


__all__ = ["GENERATED_TYPES_PLACEHOLDER", "TypedAPIAdapter"]
