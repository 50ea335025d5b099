# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mock payload synthesis."""

from typedapi_tester.mocks.mock_response_synthesizer import (
    API_KEY_MARKER,
    MockResponseSynthesizer,
)

__all__: list[str] = ["API_KEY_MARKER", "MockResponseSynthesizer"]
