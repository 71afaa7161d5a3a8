"""Backend-neutral compiler.

Emits the role mapping produced by `Query.to_backend_query`, e.g.
``{"optional": [{"match": "hello"}], "excluded": [{"match_phrase": "a b"}]}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from PhraseQuery.core.query import Query


@dataclass(frozen=True, slots=True)
class NeutralBackend:
    name: str = "neutral"

    def compile(self, query: Query) -> dict[str, Any]:
        return query.to_backend_query()
