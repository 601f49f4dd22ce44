"""Configuration loading for Linguae.

This module loads YAML configuration files, validates them against the
Pydantic schema and builds sources and providers from the result.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigurationError
from ..placeholder import PlaceholderPattern
from ..provider import LinguaeProvider
from ..sources import (
    GlotPressSource,
    LinguaeSource,
    LokaliseSource,
    POEditorSource,
    TolgeeSource,
    TransifexSource,
    WeblateSource,
    ZanataSource,
    json_source,
)
from .schema import (
    GlotPressSourceConfig,
    JsonSourceConfig,
    LinguaeConfig,
    LokaliseSourceConfig,
    POEditorSourceConfig,
    SourceConfig,
    TolgeeSourceConfig,
    TransifexSourceConfig,
    WeblateSourceConfig,
    ZanataSourceConfig,
)

logger = logging.getLogger(__name__)


def load_config(config_path: Path | str) -> LinguaeConfig:
    """
    Load and validate configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        LinguaeConfig: Validated configuration object

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ConfigurationError: If the YAML is invalid, is not a mapping, or
            fails validation
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax in {config_path}: {e}", context=str(config_path)
        ) from e

    if not isinstance(raw_config_data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}",
            context=str(config_path),
        )

    try:
        config = LinguaeConfig.model_validate(raw_config_data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {config_path}: {e}", context=str(config_path)
        ) from e

    logger.info(f"Loaded configuration from {config_path}")
    return config


def create_source(config: SourceConfig) -> LinguaeSource:
    """Build the translation source described by ``config``."""
    match config:
        case JsonSourceConfig():
            if config.location.startswith(("http://", "https://")):
                return json_source(config.location, timeout=config.timeout)
            return json_source(Path(config.location))
        case TransifexSourceConfig():
            return TransifexSource(
                api_token=config.api_token,
                resource=config.resource,
                project=config.project,
                timeout=config.timeout,
            )
        case LokaliseSourceConfig():
            return LokaliseSource(
                api_token=config.api_token,
                project_id=config.project_id,
                platform=config.platform,
                timeout=config.timeout,
            )
        case POEditorSourceConfig():
            return POEditorSource(
                api_token=config.api_token,
                project_id=config.project_id,
                timeout=config.timeout,
            )
        case ZanataSourceConfig():
            return ZanataSource(
                base_url=config.base_url,
                username=config.username,
                api_key=config.api_key,
                project=config.project,
                version=config.version,
                document=config.document,
                timeout=config.timeout,
            )
        case WeblateSourceConfig():
            return WeblateSource(
                api_url=config.api_url,
                api_token=config.api_token,
                project=config.project,
                component=config.component,
                timeout=config.timeout,
            )
        case TolgeeSourceConfig():
            return TolgeeSource(
                api_key=config.api_key,
                project_id=config.project_id,
                base_url=config.base_url,
                timeout=config.timeout,
            )
        case GlotPressSourceConfig():
            return GlotPressSource(
                base_url=config.base_url,
                project=config.project,
                translation_set=config.translation_set,
                timeout=config.timeout,
            )


def create_provider(config: LinguaeConfig) -> LinguaeProvider:
    """Build a provider, its source and its placeholder pattern from ``config``."""
    source = create_source(config.source)
    pattern = PlaceholderPattern(config.placeholder.prefix, config.placeholder.suffix)
    logger.debug(
        f"Creating provider for {config.locale} with {type(source).__name__}"
    )
    return LinguaeProvider(
        source,
        locale=config.locale,
        pattern=pattern,
        strict=config.strict,
    )
