"""Backend compiler protocol."""

from __future__ import annotations

from typing import Any, Protocol

from PhraseQuery.core.query import Query


class QueryBackend(Protocol):
    """Protocol for compiling a `Query` into a backend request body."""

    name: str

    def compile(self, query: Query) -> dict[str, Any]:
        """Compile the query into a JSON-serializable mapping."""
        raise NotImplementedError
