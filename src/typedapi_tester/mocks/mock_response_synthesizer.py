# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mock response synthesis from contract descriptions.

Payload shapes are chosen by case-sensitive substring checks on the
contract's base file name:

- ``api-key`` and ``get`` with status 200: a list of API key records
- ``api-key`` and ``post`` with status 201 or 200: a single API key record
- anything else: a generic ``{id, timestamp, success, message}`` payload

When the requested status code is not declared, the first declared status
code (declaration order) is used instead.

Randomness comes from a fresh ``random.Random`` per call. The configured
``mock.seed`` is not threaded into it, so repeated calls are not
reproducible even with a seed configured.
"""

from __future__ import annotations

import logging
import random
import string
from datetime import UTC, datetime, timedelta

from typedapi_tester.enums import EnumMockPayloadType
from typedapi_tester.models.model_literal_value import ContractDescription
from typedapi_tester.models.model_mock_result import ModelMockResult
from typedapi_tester.validation.contract_fields import (
    is_present,
    parse_status_code,
    response_status_codes,
)

logger = logging.getLogger(__name__)

API_KEY_MARKER = "api-key"

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 11
_HASH_LENGTH = 40


def generate_random_id(rng: random.Random) -> str:
    """Short lowercase alphanumeric identifier."""
    return "".join(rng.choices(_ID_ALPHABET, k=_ID_LENGTH))


def generate_random_hash(rng: random.Random) -> str:
    """40-character hexadecimal digest-like string."""
    return "".join(rng.choices("0123456789abcdef", k=_HASH_LENGTH))


def generate_truncated_key(rng: random.Random) -> str:
    """Display form of a secret key, e.g. ``a1b...x9z``."""
    prefix = "".join(rng.choices(_ID_ALPHABET, k=3))
    suffix = "".join(rng.choices(_ID_ALPHABET, k=3))
    return f"{prefix}...{suffix}"


def iso_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and ``Z`` suffix."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


class MockResponseSynthesizer:
    """Generates plausible response payloads for a contract.

    Stateless; the adapter keeps the mock configuration.
    """

    def generate(
        self,
        contract: ContractDescription | None,
        contract_name: str,
        status_code: int = 200,
    ) -> ModelMockResult:
        """Generate a mock payload for ``status_code``.

        Args:
            contract: Extracted contract description, None when the contract
                could not be extracted.
            contract_name: Base file name of the contract, used to select a
                payload shape.
            status_code: Requested response status code.

        Returns:
            ModelMockResult; ``success`` is False when the contract is
            missing or declares no usable status code.
        """
        if contract is None:
            return ModelMockResult.error()

        resolved = self._resolve_status_code(contract, contract_name, status_code)
        if resolved is None:
            return ModelMockResult.error()

        rng = random.Random()
        now = datetime.now(UTC)

        if API_KEY_MARKER in contract_name:
            if "get" in contract_name:
                if resolved == 200:
                    return ModelMockResult(
                        success=True,
                        data=[
                            self._api_key_record(
                                rng,
                                name="Test API Key 1",
                                permissions=["read", "write"],
                                usage_count=rng.randrange(1000),
                                created_at=now,
                                description="Generated test API key",
                            ),
                            self._api_key_record(
                                rng,
                                name="Test API Key 2",
                                permissions=["read"],
                                usage_count=rng.randrange(100),
                                created_at=now - timedelta(days=1),
                            ),
                        ],
                        type=EnumMockPayloadType.API_KEY_LIST,
                    )
            elif "post" in contract_name:
                if resolved in (201, 200):
                    return ModelMockResult(
                        success=True,
                        data=self._api_key_record(
                            rng,
                            name="New API Key",
                            permissions=["read", "write"],
                            usage_count=0,
                            created_at=now,
                        ),
                        type=EnumMockPayloadType.API_KEY,
                    )

        return ModelMockResult(
            success=True,
            data={
                "id": generate_random_id(rng),
                "timestamp": iso_timestamp(now),
                "success": True,
                "message": f"Mock response for {contract_name} with status {resolved}",
            },
            type=EnumMockPayloadType.GENERIC,
        )

    def _resolve_status_code(
        self,
        contract: ContractDescription,
        contract_name: str,
        status_code: int,
    ) -> int | None:
        """Requested code if declared, else the first declared code."""
        responses = contract.get("response")
        if isinstance(responses, dict) and is_present(responses.get(str(status_code))):
            return status_code

        logger.warning(
            "No response schema found for status code",
            extra={"contract_name": contract_name, "status_code": status_code},
        )
        declared = response_status_codes(contract)
        if not declared:
            return None

        # First declared wins; dicts keep declaration order
        alternative = parse_status_code(declared[0])
        if alternative is None:
            logger.warning(
                "First declared status code is not numeric",
                extra={"contract_name": contract_name, "status_code": declared[0]},
            )
            return None

        logger.info(
            "Using alternative status code",
            extra={"contract_name": contract_name, "status_code": alternative},
        )
        return alternative

    def _api_key_record(
        self,
        rng: random.Random,
        *,
        name: str,
        permissions: list[str],
        usage_count: int,
        created_at: datetime,
        description: str | None = None,
    ) -> dict[str, object]:
        record: dict[str, object] = {
            "id": f"apikey_{generate_random_id(rng)}",
            "name": name,
        }
        if description is not None:
            record["description"] = description
        record.update(
            {
                "uniqueIdentifier": generate_random_id(rng),
                "company": f"company_{generate_random_id(rng)}",
                "user": f"user_{generate_random_id(rng)}",
                "keyHash": generate_random_hash(rng),
                "truncatedKey": generate_truncated_key(rng),
                "status": "active",
                "permissions": list(permissions),
                "usageCount": usage_count,
                "createdAt": iso_timestamp(created_at),
            }
        )
        return record


__all__ = [
    "API_KEY_MARKER",
    "MockResponseSynthesizer",
    "generate_random_hash",
    "generate_random_id",
    "generate_truncated_key",
    "iso_timestamp",
]
