# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Field helpers shared by the contract validators, matcher and mock synthesizer."""

from __future__ import annotations

import re
from pathlib import Path

from typedapi_tester.models.model_literal_value import ContractDescription

# Path placeholder token, e.g. ``:userId`` in ``/users/:userId``
PATH_PARAMETER_PATTERN = re.compile(r":[a-zA-Z0-9_]+")

_STATUS_CODE_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599

# Status codes at or above this value describe error responses
ERROR_STATUS_THRESHOLD = 400


def is_present(value: object) -> bool:
    """Presence test for contract and payload fields.

    ``None``, ``False``, zero and the empty string are absent. Containers
    count as present even when empty, so ``response: {}`` is declared (and
    reported as having no status codes) rather than missing.
    """
    if isinstance(value, dict | list):
        return True
    return bool(value)


def extract_path_parameters(api_path: object) -> list[str]:
    """Return placeholder names in ``api_path`` in order, without duplicates."""
    if not isinstance(api_path, str):
        return []
    names = (match[1:] for match in PATH_PARAMETER_PATTERN.findall(api_path))
    return list(dict.fromkeys(names))


def parse_status_code(key: str) -> int | None:
    """Parse a response key as an integer, or None if it is not one."""
    if not _STATUS_CODE_PATTERN.fullmatch(key):
        return None
    return int(key)


def is_valid_status_code(key: str) -> bool:
    """True if ``key`` parses as an integer HTTP status code in [100, 599]."""
    code = parse_status_code(key)
    return code is not None and MIN_STATUS_CODE <= code <= MAX_STATUS_CODE


def response_status_codes(contract: ContractDescription) -> list[str]:
    """Declared response status codes in declaration order."""
    response = contract.get("response")
    if not isinstance(response, dict):
        return []
    return list(response)


def contract_name_from_reference(reference: str | Path) -> str:
    """Base name of a contract reference without its extension."""
    return Path(reference).stem


def method_label(method: object) -> str:
    """Uppercase method name for messages."""
    return str(method).upper()


__all__ = [
    "ERROR_STATUS_THRESHOLD",
    "MAX_STATUS_CODE",
    "MIN_STATUS_CODE",
    "PATH_PARAMETER_PATTERN",
    "contract_name_from_reference",
    "extract_path_parameters",
    "is_present",
    "is_valid_status_code",
    "method_label",
    "parse_status_code",
    "response_status_codes",
]
