"""Backend compilers for parsed queries.

A backend turns a `Query` into the request body of a search engine. Nothing
here talks to the engine itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PhraseQuery.backends.base import QueryBackend
from PhraseQuery.backends.registry import build_backend, supported_backend_names

if TYPE_CHECKING:
    from PhraseQuery.config import AppConfig


def create_backend(config: AppConfig, backend_name: str | None = None) -> QueryBackend:
    """Create the backend selected in config.

    Args:
        config: Application configuration.
        backend_name: Optional name overriding ``backend.name``.

    Returns:
        Configured QueryBackend instance.
    """
    return build_backend(backend_name or config.backend.name, config=config.backend)


__all__ = [
    "QueryBackend",
    "build_backend",
    "create_backend",
    "supported_backend_names",
]
