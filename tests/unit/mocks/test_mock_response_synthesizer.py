# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for MockResponseSynthesizer payload shapes and status fallback."""

from __future__ import annotations

import random
import re
from datetime import UTC, datetime

import pytest

from typedapi_tester.enums import EnumMockPayloadType
from typedapi_tester.mocks import MockResponseSynthesizer
from typedapi_tester.mocks.mock_response_synthesizer import (
    generate_random_hash,
    generate_random_id,
    generate_truncated_key,
    iso_timestamp,
)

ISO_TIMESTAMP = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z")

LIST_CONTRACT = {"path": "/keys", "method": "get", "response": {"200": {}, "401": {}}}
CREATE_CONTRACT = {"path": "/keys", "method": "post", "response": {"201": {}}}


@pytest.fixture
def synthesizer() -> MockResponseSynthesizer:
    return MockResponseSynthesizer()


class TestHelpers:
    """Tests for the random value helpers."""

    def test_random_id(self) -> None:
        value = generate_random_id(random.Random(1))
        assert re.fullmatch(r"[a-z0-9]{11}", value)

    def test_random_hash(self) -> None:
        assert re.fullmatch(r"[0-9a-f]{40}", generate_random_hash(random.Random(1)))

    def test_truncated_key(self) -> None:
        assert re.fullmatch(
            r"[a-z0-9]{3}\.\.\.[a-z0-9]{3}", generate_truncated_key(random.Random(1))
        )

    def test_iso_timestamp(self) -> None:
        moment = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
        assert iso_timestamp(moment) == "2025-01-02T03:04:05.678Z"


class TestApiKeyShapes:
    """Tests for API key payload shapes selected by contract name."""

    def test_api_key_list(self, synthesizer: MockResponseSynthesizer) -> None:
        """api-key + get at 200 yields a list of key records."""
        result = synthesizer.generate(LIST_CONTRACT, "admin.api-key.get.contract", 200)

        assert result.success is True
        assert result.type == EnumMockPayloadType.API_KEY_LIST
        assert isinstance(result.data, list)
        assert len(result.data) >= 1
        for record in result.data:
            assert record["id"].startswith("apikey_")
            assert record["status"] == "active"
            assert all(isinstance(p, str) for p in record["permissions"])
            assert ISO_TIMESTAMP.fullmatch(record["createdAt"])
            assert re.fullmatch(r"[0-9a-f]{40}", record["keyHash"])

    def test_api_key_create(self, synthesizer: MockResponseSynthesizer) -> None:
        """api-key + post at 201 yields a single fresh record."""
        result = synthesizer.generate(
            CREATE_CONTRACT, "admin.api-key.post.contract", 201
        )

        assert result.success is True
        assert result.type == EnumMockPayloadType.API_KEY
        assert isinstance(result.data, dict)
        assert result.data["name"] == "New API Key"
        assert result.data["usageCount"] == 0

    def test_api_key_get_non_200_is_generic(
        self, synthesizer: MockResponseSynthesizer
    ) -> None:
        """Other declared codes fall through to the generic shape."""
        result = synthesizer.generate(LIST_CONTRACT, "admin.api-key.get.contract", 401)
        assert result.type == EnumMockPayloadType.GENERIC

    def test_name_match_is_case_sensitive(
        self, synthesizer: MockResponseSynthesizer
    ) -> None:
        result = synthesizer.generate(LIST_CONTRACT, "Admin.API-KEY.GET", 200)
        assert result.type == EnumMockPayloadType.GENERIC


class TestGenericShape:
    """Tests for the generic fallback payload."""

    def test_generic_payload(self, synthesizer: MockResponseSynthesizer) -> None:
        result = synthesizer.generate(LIST_CONTRACT, "users.get.contract", 200)

        assert result.success is True
        assert result.type == EnumMockPayloadType.GENERIC
        assert set(result.data) == {"id", "timestamp", "success", "message"}
        assert result.data["success"] is True
        assert ISO_TIMESTAMP.fullmatch(result.data["timestamp"])
        assert result.data["message"] == (
            "Mock response for users.get.contract with status 200"
        )


class TestStatusFallback:
    """Tests for undeclared status codes and missing contracts."""

    def test_falls_back_to_first_declared(
        self, synthesizer: MockResponseSynthesizer
    ) -> None:
        """The first declared code replaces an undeclared one."""
        contract = {"response": {"404": {}, "200": {}}}
        result = synthesizer.generate(contract, "users.get.contract", 500)
        assert result.success is True
        assert result.data["message"].endswith("with status 404")

    def test_fallback_can_select_api_key_shape(
        self, synthesizer: MockResponseSynthesizer
    ) -> None:
        result = synthesizer.generate(
            CREATE_CONTRACT, "admin.api-key.post.contract", 200
        )
        assert result.type == EnumMockPayloadType.API_KEY

    def test_no_declared_codes(self, synthesizer: MockResponseSynthesizer) -> None:
        result = synthesizer.generate({"response": {}}, "users.get.contract", 200)
        assert result.success is False
        assert result.data is None
        assert result.type == EnumMockPayloadType.ERROR

    def test_missing_contract(self, synthesizer: MockResponseSynthesizer) -> None:
        result = synthesizer.generate(None, "users.get.contract", 200)
        assert result.type == EnumMockPayloadType.ERROR
