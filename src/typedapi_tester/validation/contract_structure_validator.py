# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Contract Structure Validator.

Rule engine over an extracted contract description. Every rule runs on every
call and findings are collected rather than short-circuited, so one call
reports every problem in the contract:

Contract rules (``validate_contract``), in order:
    1. Required fields: path, method, response
    2. Method is one of get, post, put, delete, patch
    3. Path starts with ``/``
    4. Response keys are HTTP status codes in [100, 599], at least one
    5. Authorization roles/scopes are a string or list of strings
    6. Authorization claims carry userClaimPath and routeParamName
    7. Path placeholders without a params schema (warning)

Request-type rules (``validate_request_type``) and response-type rules
(``validate_response_type``) add cross-checks against companion
declarations (``QuerySchema``, ``ResponseSchema``, the ``Response`` type
alias) and method conventions.

Usage:
    validator = ContractStructureValidator()
    result = validator.validate_contract(source, contract_name="users.get")
    if not result.success:
        for error in result.errors:
            print(error)
"""

from __future__ import annotations

import logging

from typedapi_tester.enums import EnumHttpMethod, method_expects_body
from typedapi_tester.loader.contract_extractor import (
    QUERY_SCHEMA_NAME,
    RESPONSE_SCHEMA_NAME,
    RESPONSE_TYPE_NAME,
)
from typedapi_tester.models.model_contract_source import ModelContractSource
from typedapi_tester.models.model_literal_value import ContractDescription
from typedapi_tester.models.model_validation_config import ModelValidationConfig
from typedapi_tester.models.model_validation_result import ModelValidationResult
from typedapi_tester.validation.contract_fields import (
    ERROR_STATUS_THRESHOLD,
    extract_path_parameters,
    is_present,
    is_valid_status_code,
    method_label,
    parse_status_code,
    response_status_codes,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = ("path", "method", "response")

REQUIRED_CLAIM_FIELDS: tuple[str, ...] = ("userClaimPath", "routeParamName")

DEFAULT_SUMMARY = "No summary provided"

MESSAGE_CONTRACT_NOT_FOUND = "Contract export not found in the file"
MESSAGE_CONTRACT_NOT_PARSED = (
    "Contract export not found in the file or could not parse source file"
)
MESSAGE_CONTRACT_NOT_LITERAL = (
    "Contract export is not a dict literal and cannot be read statically"
)


def missing_contract_result(
    source: ModelContractSource,
    contract_name: str,
    message: str = MESSAGE_CONTRACT_NOT_FOUND,
) -> ModelValidationResult:
    """Failed result for a source without a literal contract description."""
    errors = [
        MESSAGE_CONTRACT_NOT_LITERAL if source.export_name is not None else message
    ]
    errors.extend(
        f"Syntax error in contract source: {error}" for error in source.syntax_errors
    )
    return ModelValidationResult.from_findings(
        errors,
        details={"contract_name": contract_name, "path": str(source.location)},
    )


class ContractStructureValidator:
    """Structural and semantic rules over a contract description.

    The validator holds no per-call state; results are built fresh on every
    call, so validating an unchanged contract twice yields equal results.
    """

    def __init__(self, config: ModelValidationConfig | None = None) -> None:
        self._config = config if config is not None else ModelValidationConfig()

    def validate_contract(
        self,
        source: ModelContractSource,
        contract_name: str,
    ) -> ModelValidationResult:
        """Apply the contract rule set and summarize the contract."""
        contract = source.contract
        if contract is None:
            return missing_contract_result(source, contract_name)

        errors: list[str] = []
        warnings: list[str] = []

        errors.extend(self._check_required_fields(contract))
        errors.extend(self._check_method(contract))
        errors.extend(self._check_path(contract))
        errors.extend(self._check_response_status_codes(contract))
        errors.extend(self._check_authorization(contract))
        warnings.extend(self._check_path_parameters_declared(contract))

        logger.debug(
            "Validated contract structure",
            extra={
                "contract_name": contract_name,
                "error_count": len(errors),
                "warning_count": len(warnings),
            },
        )

        return ModelValidationResult.from_findings(
            errors,
            warnings,
            self._summarize(source, contract, contract_name),
        )

    def validate_request_type(
        self,
        source: ModelContractSource,
        contract_name: str,
    ) -> ModelValidationResult:
        """Check the request side of a contract: params, query and body."""
        contract = source.contract
        if contract is None:
            return missing_contract_result(
                source, contract_name, MESSAGE_CONTRACT_NOT_PARSED
            )

        errors: list[str] = []
        warnings: list[str] = []
        method = contract.get("method")
        details: dict[str, object] = {
            "contract_name": contract_name,
            "path": str(source.location),
            "method": method,
            "api_path": contract.get("path"),
        }

        path_params = (
            extract_path_parameters(contract.get("path"))
            if self._config.validate_paths
            else []
        )
        if path_params:
            details["path_params"] = path_params
            if not is_present(contract.get("params")):
                errors.append(
                    f"Path contains parameters ({', '.join(path_params)}) "
                    "but no params schema is defined"
                )
            else:
                details["has_params_schema"] = True

        if method == EnumHttpMethod.GET.value and is_present(contract.get("query")):
            details["has_query_schema"] = True
            if not source.has_auxiliary(QUERY_SCHEMA_NAME):
                warnings.append(
                    "Contract has a query parameter but QuerySchema is not exported"
                )

        if method_expects_body(method):
            if not is_present(contract.get("body")):
                warnings.append(
                    f"{method_label(method)} request typically requires a body schema"
                )
            else:
                details["has_body_schema"] = True

        return ModelValidationResult.from_findings(errors, warnings, details)

    def validate_response_type(
        self,
        source: ModelContractSource,
        contract_name: str,
    ) -> ModelValidationResult:
        """Check the response side of a contract against conventions."""
        contract = source.contract
        if contract is None:
            return missing_contract_result(
                source, contract_name, MESSAGE_CONTRACT_NOT_PARSED
            )

        errors: list[str] = []
        warnings: list[str] = []
        method = contract.get("method")
        details: dict[str, object] = {
            "contract_name": contract_name,
            "path": str(source.location),
            "method": method,
        }

        response = contract.get("response")
        if not isinstance(response, dict):
            errors.append("Response schema is required and must be an object")
        else:
            status_codes = list(response)
            details["response_status_codes"] = status_codes

            if not status_codes:
                errors.append("Response object must define at least one status code")

            if not source.has_auxiliary(RESPONSE_SCHEMA_NAME):
                warnings.append(
                    "ResponseSchema is not exported, which may make it difficult to reuse"
                )

            warnings.extend(self._check_conventional_status_codes(method, status_codes))

            if not _declares_error_status(status_codes):
                warnings.append("No error response status codes defined (4xx, 5xx)")

        if not source.has_auxiliary(RESPONSE_TYPE_NAME):
            warnings.append("Response type is not exported")

        return ModelValidationResult.from_findings(errors, warnings, details)

    # -------------------------------------------------------------------------
    # Contract rules
    # -------------------------------------------------------------------------

    def _check_required_fields(self, contract: ContractDescription) -> list[str]:
        return [
            f"Missing required field: {field}"
            for field in REQUIRED_FIELDS
            if not is_present(contract.get(field))
        ]

    def _check_method(self, contract: ContractDescription) -> list[str]:
        method = contract.get("method")
        if not is_present(method) or EnumHttpMethod.is_valid(method):
            return []
        return [
            f"Invalid method: {method}. Must be one of: "
            f"{', '.join(EnumHttpMethod.values())}"
        ]

    def _check_path(self, contract: ContractDescription) -> list[str]:
        api_path = contract.get("path")
        if not is_present(api_path):
            return []
        if isinstance(api_path, str) and api_path.startswith("/"):
            return []
        return [f"Invalid path: {api_path}. Must start with /"]

    def _check_response_status_codes(self, contract: ContractDescription) -> list[str]:
        response = contract.get("response")
        if not isinstance(response, dict):
            return []
        if not response:
            return ["Response object must have at least one status code"]
        return [
            f"Invalid status code in response: {key}. "
            "Must be a valid HTTP status code (100-599)"
            for key in response
            if not is_valid_status_code(key)
        ]

    def _check_authorization(self, contract: ContractDescription) -> list[str]:
        auth = contract.get("auth")
        if not isinstance(auth, dict):
            return []
        authorization = auth.get("authorization")
        if not isinstance(authorization, dict):
            return []

        errors: list[str] = []
        for field in ("roles", "scopes"):
            value = authorization.get(field)
            if is_present(value) and not _is_string_or_string_list(value):
                errors.append(
                    f"Authorization {field} must be a string or array of strings"
                )

        claims = authorization.get("claims")
        if not is_present(claims):
            return errors
        if not isinstance(claims, list):
            errors.append("Authorization claims must be an array")
            return errors

        for index, claim in enumerate(claims):
            fields = claim if isinstance(claim, dict) else {}
            for required in REQUIRED_CLAIM_FIELDS:
                if not fields.get(required):
                    errors.append(
                        f"Claim at index {index} is missing required field {required}"
                    )
        return errors

    def _check_path_parameters_declared(
        self, contract: ContractDescription
    ) -> list[str]:
        if not self._config.validate_paths:
            return []
        path_params = extract_path_parameters(contract.get("path"))
        if path_params and not is_present(contract.get("params")):
            return [
                f"Path contains parameters ({', '.join(path_params)}) "
                "but no params schema is defined"
            ]
        return []

    # -------------------------------------------------------------------------
    # Response-type conventions
    # -------------------------------------------------------------------------

    def _check_conventional_status_codes(
        self, method: object, status_codes: list[str]
    ) -> list[str]:
        declared = set(status_codes)
        match method:
            case "get" if "200" not in declared:
                return ["GET requests typically include a 200 response status"]
            case "post" if not declared & {"201", "200"}:
                return ["POST requests typically include a 201 or 200 response status"]
            case "put" | "patch" if "200" not in declared:
                return [
                    f"{method_label(method)} requests typically include a 200 response status"
                ]
            case "delete" if not declared & {"204", "200"}:
                return ["DELETE requests typically include a 204 or 200 response status"]
            case _:
                return []

    # -------------------------------------------------------------------------
    # Details
    # -------------------------------------------------------------------------

    def _summarize(
        self,
        source: ModelContractSource,
        contract: ContractDescription,
        contract_name: str,
    ) -> dict[str, object]:
        tags = contract.get("tags")
        if not is_present(tags):
            tag_list: list[object] = []
        elif isinstance(tags, list):
            tag_list = list(tags)
        else:
            tag_list = [tags]

        auth = contract.get("auth")
        requires_auth = (
            isinstance(auth, dict) and auth.get("requiresAuthentication") is True
        )

        return {
            "contract_name": contract_name,
            "path": str(source.location),
            "method": contract.get("method"),
            "api_path": contract.get("path"),
            "tags": tag_list,
            "summary": contract.get("summary") or DEFAULT_SUMMARY,
            "has_params": is_present(contract.get("params")),
            "has_query": is_present(contract.get("query")),
            "has_body": is_present(contract.get("body")),
            "response_statuses": response_status_codes(contract),
            "requires_auth": requires_auth,
        }


def _declares_error_status(status_codes: list[str]) -> bool:
    for key in status_codes:
        code = parse_status_code(key)
        if code is not None and code >= ERROR_STATUS_THRESHOLD:
            return True
    return False


def _is_string_or_string_list(value: object) -> bool:
    if isinstance(value, str):
        return True
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


__all__ = [
    "DEFAULT_SUMMARY",
    "MESSAGE_CONTRACT_NOT_FOUND",
    "MESSAGE_CONTRACT_NOT_LITERAL",
    "MESSAGE_CONTRACT_NOT_PARSED",
    "REQUIRED_FIELDS",
    "ContractStructureValidator",
    "missing_contract_result",
]
