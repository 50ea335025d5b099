# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
TypedAPI Tester CLI Commands.

Provides a command-line runner for validating contract modules and printing
mock payloads without a host test framework.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typedapi_tester.adapter import TypedAPIAdapter
from typedapi_tester.errors import TypedAPIError
from typedapi_tester.models import (
    ModelMockResult,
    ModelTypedAPIAdapterConfig,
    ModelValidationResult,
)

console = Console()


def _load_config(
    config_path: str | None, contracts_path: str | None
) -> ModelTypedAPIAdapterConfig:
    """Build adapter config from an optional YAML file and path override."""
    try:
        config = (
            ModelTypedAPIAdapterConfig.from_yaml(config_path)
            if config_path is not None
            else ModelTypedAPIAdapterConfig()
        )
    except TypedAPIError as e:
        raise click.ClickException(str(e)) from e

    if contracts_path is not None:
        config = config.model_copy(
            update={"contracts_base_path": Path(contracts_path)}
        )
    return config


@click.group()
def cli() -> None:
    """TypedAPI contract tester CLI."""


@cli.command("validate")
@click.argument("contract")
@click.option(
    "--contracts-path",
    default=None,
    help="Directory contract references are resolved against (default: ./contracts)",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="YAML adapter configuration file",
)
def validate_cmd(
    contract: str, contracts_path: str | None, config_path: str | None
) -> None:
    """Validate a contract, its request type and its response type."""
    config = _load_config(config_path, contracts_path)
    console.print(f"[bold blue]Validating contract {contract}...[/bold blue]")

    results = asyncio.run(_run_validations(config, contract))
    for name, result in results:
        _print_result(name, result)

    _print_summary(results[0][1])
    raise SystemExit(0 if all(result.success for _, result in results) else 1)


@cli.command("mock")
@click.argument("contract")
@click.option(
    "--status-code",
    default=200,
    show_default=True,
    type=int,
    help="Response status code to generate a payload for",
)
@click.option(
    "--contracts-path",
    default=None,
    help="Directory contract references are resolved against (default: ./contracts)",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="YAML adapter configuration file",
)
def mock_cmd(
    contract: str,
    status_code: int,
    contracts_path: str | None,
    config_path: str | None,
) -> None:
    """Print a mock response payload for a contract as JSON."""
    config = _load_config(config_path, contracts_path)

    async def _generate() -> ModelMockResult:
        adapter = TypedAPIAdapter(config)
        await adapter.initialize()
        try:
            return await adapter.generate_mock_response(contract, status_code)
        finally:
            await adapter.cleanup()

    result = asyncio.run(_generate())
    if not result.success:
        console.print(f"[bold red]Could not generate a mock for {contract}[/bold red]")
        raise SystemExit(1)

    console.print(f"[bold green]Mock ({result.type}):[/bold green]")
    console.print_json(json.dumps(result.data))
    raise SystemExit(0)


async def _run_validations(
    config: ModelTypedAPIAdapterConfig, contract: str
) -> list[tuple[str, ModelValidationResult]]:
    adapter = TypedAPIAdapter(config)
    await adapter.initialize()
    try:
        return [
            ("Contract", await adapter.validate_contract(contract)),
            ("Request type", await adapter.validate_request_type(contract)),
            ("Response type", await adapter.validate_response_type(contract)),
        ]
    finally:
        await adapter.cleanup()


def _print_result(name: str, result: ModelValidationResult) -> None:
    """Print validation result with rich formatting."""
    if result.success:
        console.print(f"[bold green]{name}: PASS[/bold green]")
    else:
        console.print(f"[bold red]{name}: FAIL[/bold red]")
        for error in result.errors:
            console.print(f"  [red]{escape(error)}[/red]")
    for warning in result.warnings:
        console.print(f"  [yellow]{escape(warning)}[/yellow]")


def _print_summary(result: ModelValidationResult) -> None:
    """Print the contract summary table when one is available."""
    if "api_path" not in result.details:
        return

    table = Table(title="Contract Summary")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for key in (
        "method",
        "api_path",
        "summary",
        "tags",
        "response_statuses",
        "requires_auth",
    ):
        value = result.details.get(key)
        if isinstance(value, list):
            value = ", ".join(str(item) for item in value)
        table.add_row(key, escape(str(value)))
    console.print(table)


if __name__ == "__main__":
    cli()
