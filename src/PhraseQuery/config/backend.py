"""Backend domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PhraseQuery.backends.registry import supported_backend_names
from PhraseQuery.config.common import expect_str, get_section

_ALLOWED_BACKENDS = frozenset(supported_backend_names())
_DEFAULT_BACKEND = "neutral"
_DEFAULT_FIELD = "text"


@dataclass(frozen=True, slots=True)
class BackendConfig:
    """Store which backend compiles queries and how.

    Attributes:
        name: Registered backend name.
        field: Document field clauses are matched against. Only used by
            field-addressed backends such as Elasticsearch.
    """

    name: str
    field: str


def load_backend(raw: Mapping[str, Any]) -> BackendConfig:
    """Load backend configuration from raw mapping.

    The ``backend`` section is optional; missing keys fall back to the
    neutral backend on field ``text``.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "backend", required=False)
    name = expect_str(section.get("name", _DEFAULT_BACKEND), "backend.name").strip().lower()
    field = expect_str(section.get("field", _DEFAULT_FIELD), "backend.field").strip()
    return BackendConfig(name=name, field=field)


def check_backend(config: BackendConfig) -> None:
    """Validate backend domain constraints.

    Raises:
        ValueError: If the backend is unknown or the field is empty.
    """
    if config.name not in _ALLOWED_BACKENDS:
        raise ValueError(f"backend.name has unknown backend: {config.name}")
    if not config.field:
        raise ValueError("backend.field must not be empty")
