"""Configuration loading and provider construction."""

from .manager import create_provider, create_source, load_config
from .schema import LinguaeConfig, PlaceholderConfig, SourceConfig

__all__ = [
    "LinguaeConfig",
    "PlaceholderConfig",
    "SourceConfig",
    "create_provider",
    "create_source",
    "load_config",
]
