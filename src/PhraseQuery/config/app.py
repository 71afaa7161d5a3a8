from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from PhraseQuery.config.backend import BackendConfig, check_backend, load_backend
from PhraseQuery.config.runtime import RuntimeConfig, check_runtime, load_runtime


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    backend: BackendConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    backend = load_backend(raw)

    check_runtime(runtime)
    check_backend(backend)

    return AppConfig(runtime=runtime, backend=backend)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_config_with_defaults(
    config_path: Path,
    default_path: Path = Path("config/default.yml"),
    *,
    defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: Override YAML file.
        default_path: Defaults YAML file.
        defaults_text: Defaults YAML content; read instead of ``default_path``
            when given.

    Returns:
        Parsed and validated configuration.
    """
    if defaults_text is None:
        base = parse_yaml(default_path.read_text(encoding="utf-8"))
        if config_path == default_path:
            return parse_config_dict(base)
    else:
        base = parse_yaml(defaults_text)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
