# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for typedapi_tester tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from typedapi_tester.adapter import TypedAPIAdapter
from typedapi_tester.models import ModelCapability, ModelTypedAPIAdapterConfig

FIXTURE_CONTRACTS = Path(__file__).parent / "fixtures" / "contracts"


# =============================================================================
# Contract Directories
# =============================================================================


@pytest.fixture
def fixture_contracts_dir() -> Path:
    """Shared fixture contracts under tests/fixtures/contracts."""
    return FIXTURE_CONTRACTS


@pytest.fixture
def contracts_dir(tmp_path: Path) -> Path:
    """Empty contracts root inside the test's temporary directory."""
    root = tmp_path / "contracts"
    root.mkdir()
    return root


@pytest.fixture
def write_contract(contracts_dir: Path) -> Callable[[str, str], Path]:
    """Write a contract module into ``contracts_dir`` and return its path."""

    def _write(file_name: str, source: str) -> Path:
        location = contracts_dir / file_name
        location.write_text(source, encoding="utf-8")
        return location

    return _write


@pytest.fixture
def fixture_adapter() -> TypedAPIAdapter:
    """Adapter rooted at the shared fixture contracts."""
    return TypedAPIAdapter(
        ModelTypedAPIAdapterConfig(contracts_base_path=FIXTURE_CONTRACTS)
    )


@pytest.fixture
def tmp_adapter(contracts_dir: Path) -> TypedAPIAdapter:
    """Adapter rooted at the temporary contracts directory."""
    return TypedAPIAdapter(
        ModelTypedAPIAdapterConfig(contracts_base_path=contracts_dir)
    )


# =============================================================================
# Registry Double
# =============================================================================


class RecordingRegistry:
    """In-memory capability registry recording registration order."""

    def __init__(self) -> None:
        self.adapters: dict[str, object] = {}
        self.capabilities: list[ModelCapability] = []
        self.calls: list[str] = []

    def register_adapter(self, name: str, adapter: object) -> None:
        self.adapters[name] = adapter
        self.calls.append(f"adapter:{name}")

    def register_capability(self, capability: ModelCapability) -> None:
        self.capabilities.append(capability)
        self.calls.append(f"capability:{capability.name}")


@pytest.fixture
def registry() -> RecordingRegistry:
    return RecordingRegistry()
