"""Command implementations for PhraseQuery CLI.

Holds the work behind each command, separated from click parameter handling
and output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from PhraseQuery.backends import QueryBackend
from PhraseQuery.core.query import Query
from PhraseQuery.parser import parse_query
from PhraseQuery.renderers import render_text
from PhraseQuery.utils.log import log


@dataclass(slots=True)
class ParseCommand:
    """Parse one query and log its buckets."""

    text: str

    def execute(self) -> Query:
        query = parse_query(self.text)
        log.info("Parsed %d clauses from %r", len(query), self.text)
        for line in render_text(query).splitlines():
            log.info(line)
        return query


@dataclass(slots=True)
class CompileCommand:
    """Parse one query and compile it for a backend.

    Returns the compiled body; printing is left to the caller.
    """

    text: str
    backend: QueryBackend

    def execute(self) -> dict[str, Any]:
        query = parse_query(self.text)
        compiled = self.backend.compile(query)
        log.debug("Compiled %d clauses with backend=%s", len(query), self.backend.name)
        return compiled
