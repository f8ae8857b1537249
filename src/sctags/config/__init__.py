"""Config module exports."""

from sctags.config.loader import load_config
from sctags.config.models import (
    DiscoveryConfig,
    LoggingConfig,
    SctagsConfig,
    TagsConfig,
)

__all__ = [
    "load_config",
    "SctagsConfig",
    "DiscoveryConfig",
    "LoggingConfig",
    "TagsConfig",
]
