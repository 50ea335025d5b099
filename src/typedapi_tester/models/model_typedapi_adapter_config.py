# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""TypedAPI Adapter Configuration Model.

Configuration accepted at adapter construction. Every field is optional;
camelCase keys (``contractsBasePath``, ``strictMode``, ...) are accepted next
to the snake_case field names so existing config files keep working.

Example YAML::

    contractsBasePath: ./contracts
    validation:
      strictMode: true
      validatePaths: true
    mock:
      locale: en-US
      seed: 42
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from typedapi_tester.errors import (
    ContractConfigurationError,
    ModelContractErrorContext,
)
from typedapi_tester.models.model_mock_config import ModelMockConfig
from typedapi_tester.models.model_validation_config import ModelValidationConfig

logger = logging.getLogger(__name__)


class ModelTypedAPIAdapterConfig(BaseModel):
    """Top-level adapter configuration."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    contracts_base_path: Path = Field(
        default=Path("./contracts"),
        alias="contractsBasePath",
        description="Directory relative contract references are resolved against",
    )
    validation: ModelValidationConfig = Field(
        default_factory=ModelValidationConfig,
        description="Validation options",
    )
    mock: ModelMockConfig = Field(
        default_factory=ModelMockConfig,
        description="Mock generation options",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> ModelTypedAPIAdapterConfig:
        """Load configuration from a YAML file.

        A relative ``contractsBasePath`` is resolved against the directory
        holding the config file. An empty file yields the defaults.

        Raises:
            ContractConfigurationError: If the file is missing, is not valid
                YAML, is not a mapping, or fails model validation.
        """
        config_path = Path(path)
        context = ModelContractErrorContext.with_correlation(
            operation="load_config",
            target_name=str(config_path),
        )

        if not config_path.is_file():
            raise ContractConfigurationError(
                f"Config file not found: {config_path}",
                context=context,
            )

        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ContractConfigurationError(
                f"Invalid YAML in config: {e}",
                context=context,
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ContractConfigurationError(
                f"Config must be a mapping, got {type(data).__name__}",
                context=context,
            )

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ContractConfigurationError(
                f"Invalid adapter configuration: {e}",
                context=context,
            ) from e

        if not config.contracts_base_path.is_absolute():
            config = config.model_copy(
                update={
                    "contracts_base_path": config_path.parent
                    / config.contracts_base_path
                }
            )

        logger.debug(
            "Loaded adapter config",
            extra={
                "config_path": str(config_path),
                "contracts_base_path": str(config.contracts_base_path),
            },
        )
        return config


__all__ = ["ModelTypedAPIAdapterConfig"]
