# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Request/Response Payload Matcher.

Validates concrete request and response payloads against an extracted
contract description. This layer checks container shapes and required-key
presence only:

- Requests: params/query are objects, every ``:name`` placeholder in the
  contract path is supplied, body presence matches the method.
- Responses: the status code is declared, the payload is an object or
  array, and GET 200 / POST 201 payloads follow common conventions.

Deep shape checking against the schemas a contract references is delegated
to an optional ``ProtocolSchemaChecker``. The checker is only consulted when
``validation.validate_types`` is enabled and the contract holds a reference
for the payload part being checked.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from typedapi_tester.enums import EnumHttpMethod, method_expects_body
from typedapi_tester.models.model_contract_source import ModelContractSource
from typedapi_tester.models.model_literal_value import ContractDescription
from typedapi_tester.models.model_validation_config import ModelValidationConfig
from typedapi_tester.models.model_validation_result import ModelValidationResult
from typedapi_tester.protocols import ProtocolSchemaChecker
from typedapi_tester.validation.contract_fields import (
    extract_path_parameters,
    is_present,
    method_label,
)
from typedapi_tester.validation.contract_structure_validator import (
    missing_contract_result,
)

logger = logging.getLogger(__name__)

# Request parts a contract can reference a schema for
REQUEST_PARTS: tuple[str, ...] = ("params", "query", "body")

# Keys a GET 200 payload conventionally wraps its data in
COLLECTION_KEYS: tuple[str, ...] = ("data", "items", "results")

# Keys a POST 201 payload conventionally identifies the created resource with
IDENTIFIER_KEYS: tuple[str, ...] = ("id", "_id")


class PayloadMatcher:
    """Checks request and response payloads against a contract."""

    def __init__(
        self,
        config: ModelValidationConfig | None = None,
        schema_checker: ProtocolSchemaChecker | None = None,
    ) -> None:
        self._config = config if config is not None else ModelValidationConfig()
        self._schema_checker = schema_checker

    def validate_request(
        self,
        source: ModelContractSource,
        request: object,
        contract_name: str,
    ) -> ModelValidationResult:
        """Validate a request object split into params, query and body."""
        contract = source.contract
        if contract is None:
            return missing_contract_result(source, contract_name)

        method = contract.get("method")
        details: dict[str, object] = {
            "contract_name": contract_name,
            "path": str(source.location),
            "method": method,
            "api_path": contract.get("path"),
        }

        if not isinstance(request, Mapping):
            return ModelValidationResult.failure("Request must be an object", details)

        errors: list[str] = []
        warnings: list[str] = []
        params = request.get("params")
        query = request.get("query")
        body = request.get("body")

        if is_present(contract.get("params")) and is_present(params):
            if not isinstance(params, Mapping):
                errors.append("Path parameters must be an object")
            else:
                details["params_valid"] = True
                details["params_provided"] = list(params)

        if is_present(contract.get("query")) and is_present(query):
            if not isinstance(query, Mapping):
                errors.append("Query parameters must be an object")
            else:
                details["query_valid"] = True
                details["query_provided"] = list(query)

        if is_present(body):
            details["body_provided"] = True
            if method == EnumHttpMethod.GET.value:
                warnings.append("GET requests should not have a body")
        elif method_expects_body(method):
            warnings.append(f"{method_label(method)} request is missing a body")

        if self._config.validate_paths:
            path_errors, path_warnings = self._check_path_parameters(contract, params)
            errors.extend(path_errors)
            warnings.extend(path_warnings)

        errors.extend(self._check_request_schemas(contract, request))

        return ModelValidationResult.from_findings(errors, warnings, details)

    def validate_response(
        self,
        source: ModelContractSource,
        response: object,
        contract_name: str,
        status_code: int = 200,
    ) -> ModelValidationResult:
        """Validate a response payload for one declared status code."""
        contract = source.contract
        if contract is None:
            return missing_contract_result(source, contract_name)

        errors: list[str] = []
        warnings: list[str] = []
        method = contract.get("method")
        details: dict[str, object] = {
            "contract_name": contract_name,
            "path": str(source.location),
            "method": method,
            "status_code": status_code,
        }

        declared = contract.get("response")
        responses = declared if isinstance(declared, dict) else {}
        entry = responses.get(str(status_code))

        if not is_present(entry):
            message = f"Contract does not define a response for status code {status_code}"
            defined_status_codes = list(responses)
            if defined_status_codes:
                listed = ", ".join(defined_status_codes)
                message += f" (defined status codes: {listed})"
                details["defined_status_codes"] = defined_status_codes
                details["suggestions"] = (
                    f"Contract defines responses for status codes: {listed}"
                )
            errors.append(message)
            return ModelValidationResult.from_findings(errors, warnings, details)

        details["response_schema_exists"] = True

        if not is_present(response):
            errors.append(f"Response body is required for status code {status_code}")
        elif not isinstance(response, Mapping | list):
            errors.append("Response must be an object or array")
        else:
            details["response_provided"] = True
            warnings.extend(_conventional_payload_warnings(method, status_code, response))
            if isinstance(entry, dict):
                errors.extend(self._check_schema("response", entry.get("schema"), response))

        return ModelValidationResult.from_findings(errors, warnings, details)

    def _check_path_parameters(
        self,
        contract: ContractDescription,
        params: object,
    ) -> tuple[list[str], list[str]]:
        errors: list[str] = []
        warnings: list[str] = []
        path_params = extract_path_parameters(contract.get("path"))

        if path_params:
            if not is_present(params):
                errors.append(
                    f"Path contains parameters ({', '.join(path_params)}) "
                    "but no params object was provided"
                )
            else:
                supplied = params if isinstance(params, Mapping) else {}
                errors.extend(
                    f"Missing required path parameter: {name}"
                    for name in path_params
                    if name not in supplied
                )

        if not self._config.allow_extra_properties and isinstance(params, Mapping):
            warnings.extend(
                f"Unexpected path parameter: {key}"
                for key in params
                if key not in path_params
            )
        return errors, warnings

    def _check_request_schemas(
        self,
        contract: ContractDescription,
        request: Mapping[str, object],
    ) -> list[str]:
        errors: list[str] = []
        for part in REQUEST_PARTS:
            value = request.get(part)
            if is_present(value):
                errors.extend(self._check_schema(part, contract.get(part), value))
        return errors

    def _check_schema(self, part: str, reference: object, value: object) -> list[str]:
        if (
            self._schema_checker is None
            or not self._config.validate_types
            or not isinstance(reference, str)
            or not reference
        ):
            return []
        problems = self._schema_checker.check(reference, value)
        if problems:
            logger.debug(
                "Schema checker reported problems",
                extra={"part": part, "schema_reference": reference, "count": len(problems)},
            )
        return [f"{part}: {problem}" for problem in problems]


def _conventional_payload_warnings(
    method: object,
    status_code: int,
    response: Mapping[str, object] | list[object],
) -> list[str]:
    warnings: list[str] = []
    if status_code == 200 and method == EnumHttpMethod.GET.value:
        if isinstance(response, Mapping) and not any(
            response.get(key) for key in COLLECTION_KEYS
        ):
            warnings.append(
                'GET 200 responses typically include data in a "data", "items", '
                'or "results" property or as an array'
            )
    if status_code == 201 and method == EnumHttpMethod.POST.value:
        if isinstance(response, Mapping) and not any(
            response.get(key) for key in IDENTIFIER_KEYS
        ):
            warnings.append('Created resources typically include an "id" or "_id" property')
    return warnings


__all__ = [
    "COLLECTION_KEYS",
    "IDENTIFIER_KEYS",
    "REQUEST_PARTS",
    "PayloadMatcher",
]
