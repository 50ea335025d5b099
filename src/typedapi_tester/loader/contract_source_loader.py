# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Contract Source Loader.

Resolves contract references against the configured contracts root and reads
their raw text. Reads run in a worker thread so the event loop only suspends
at the file boundary.

The loader raises:
- ContractNotFoundError when the resolved file does not exist
- ContractReadError when the file cannot be read or is not valid UTF-8

Callers at the adapter boundary convert both into failed validation results.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from typedapi_tester.errors import (
    ContractNotFoundError,
    ContractReadError,
    ModelContractErrorContext,
)

logger = logging.getLogger(__name__)

# Suffix of contract modules picked up when building the program cache
CONTRACT_FILE_SUFFIX = ".py"


class ContractSourceLoader:
    """Resolves and reads contract files below a contracts root."""

    def __init__(self, contracts_base_path: str | Path) -> None:
        self._base_path = Path(contracts_base_path)

    @property
    def base_path(self) -> Path:
        """Configured contracts root as given (may be relative)."""
        return self._base_path

    def resolve(self, reference: str | Path) -> Path:
        """Resolve a contract reference to an absolute path.

        Absolute references are returned unchanged; relative references are
        joined with the contracts root.
        """
        path = Path(reference)
        if path.is_absolute():
            return path
        return (self._base_path / path).resolve()

    def base_path_exists(self) -> bool:
        """Return True if the contracts root is an accessible directory."""
        return self._base_path.is_dir()

    async def load(self, location: Path) -> str:
        """Read the raw text of a resolved contract file.

        Raises:
            ContractNotFoundError: If the file does not exist.
            ContractReadError: If the file cannot be read or decoded.
        """
        return await asyncio.to_thread(self.read_text, location)

    def read_text(self, location: Path) -> str:
        """Synchronous read used by ``load`` and by cache construction."""
        context = ModelContractErrorContext.with_correlation(
            operation="load_contract",
            target_name=str(location),
        )
        if not location.is_file():
            raise ContractNotFoundError(
                f"Contract file not found: {location}",
                context=context,
            )
        try:
            return location.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContractReadError(
                f"Failed to read contract file {location}: {e}",
                context=context,
            ) from e

    def find_contract_files(self) -> list[Path]:
        """List contract modules directly inside the contracts root.

        Package markers and private modules (``_``-prefixed) are skipped.
        A missing or unreadable root yields an empty list and a warning.
        """
        try:
            entries = sorted(self._base_path.iterdir())
        except OSError as e:
            logger.warning(
                "Failed to read contracts directory",
                extra={"contracts_path": str(self._base_path), "error": str(e)},
            )
            return []

        return [
            entry.resolve()
            for entry in entries
            if entry.suffix == CONTRACT_FILE_SUFFIX
            and not entry.name.startswith("_")
            and entry.is_file()
        ]


__all__ = ["CONTRACT_FILE_SUFFIX", "ContractSourceLoader"]
