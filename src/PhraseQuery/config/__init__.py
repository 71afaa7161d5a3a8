from __future__ import annotations

"""Public configuration API for PhraseQuery."""

from PhraseQuery.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from PhraseQuery.config.backend import BackendConfig
from PhraseQuery.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "BackendConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
