# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""TypedAPI tester command-line interface."""

from typedapi_tester.cli.commands import cli

__all__: list[str] = ["cli"]
