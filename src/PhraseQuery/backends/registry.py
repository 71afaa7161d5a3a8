"""Backend registry and builders."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PhraseQuery.backends.base import QueryBackend
    from PhraseQuery.config import BackendConfig

BackendBuilder = Callable[["BackendConfig | None"], "QueryBackend"]


def build_backend(backend_name: str, *, config: BackendConfig | None = None) -> QueryBackend:
    """Build a query backend from its registered name.

    Args:
        backend_name: Backend identifier, e.g. ``backend.name`` from config.
        config: Optional backend configuration (field name etc.).

    Returns:
        QueryBackend: Compiler for the given name.

    Raises:
        ValueError: If ``backend_name`` is not registered.
    """
    builder = _backend_builders().get(backend_name.strip().lower())
    if builder is None:
        raise ValueError(f"Unsupported backend: {backend_name} (expected one of {list(supported_backend_names())})")
    return builder(config)


def supported_backend_names() -> tuple[str, ...]:
    """Return backend names in registry order."""
    return tuple(_backend_builders().keys())


def _backend_builders() -> dict[str, BackendBuilder]:
    return {
        "neutral": _build_neutral_backend,
        "elasticsearch": _build_elasticsearch_backend,
    }


def _build_neutral_backend(config: BackendConfig | None) -> QueryBackend:
    del config
    from PhraseQuery.backends.neutral import NeutralBackend

    return NeutralBackend()


def _build_elasticsearch_backend(config: BackendConfig | None) -> QueryBackend:
    from PhraseQuery.backends.elasticsearch import ElasticsearchBackend

    if config is None:
        return ElasticsearchBackend()
    return ElasticsearchBackend(field=config.field)
