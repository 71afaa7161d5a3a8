"""Elasticsearch query compiler.

Compiles a `Query` into the body of an Elasticsearch ``bool`` query.

Mapping
- optional -> should
- required -> must
- excluded -> must_not
- term     -> {"match": {<field>: term}}
- phrase   -> {"match_phrase": {<field>: phrase}}

Occurrence keys are emitted in the order should / must / must_not; empty ones
are left out. Elasticsearch treats ``should`` as scoring-only as soon as a
``must`` clause exists, which is exactly the "optional" role. A query with only
optional clauses gets ``minimum_should_match: 1`` so it still filters, and an
empty query becomes ``match_all``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from PhraseQuery.core.errors import UnknownClauseVariant
from PhraseQuery.core.query import Clause, Operator, PhraseClause, Query, TermClause


_OCCURRENCE: tuple[tuple[str, Operator], ...] = (
    ("should", Operator.OPTIONAL),
    ("must", Operator.REQUIRED),
    ("must_not", Operator.EXCLUDED),
)


def _leaf(field: str, clause: Clause) -> dict[str, Any]:
    if isinstance(clause, TermClause):
        return {"match": {field: clause.term}}
    if isinstance(clause, PhraseClause):
        return {"match_phrase": {field: clause.phrase}}
    raise UnknownClauseVariant(clause)


def compile_bool_query(query: Query, *, field: str) -> dict[str, Any]:
    """Compile a query into an Elasticsearch query body.

    Args:
        query: Parsed query.
        field: Document field every clause is matched against.

    Returns:
        ``{"bool": {...}}`` or ``{"match_all": {}}`` for an empty query.
    """
    if query.is_empty:
        return {"match_all": {}}

    body: dict[str, Any] = {}
    for occurrence, operator in _OCCURRENCE:
        clauses = query.bucket(operator)
        if clauses:
            body[occurrence] = [_leaf(field, c) for c in clauses]

    if query.optional_clauses and not query.required_clauses:
        body["minimum_should_match"] = 1
    return {"bool": body}


@dataclass(frozen=True, slots=True)
class ElasticsearchBackend:
    """Compile queries into Elasticsearch ``bool`` queries on one field."""

    field: str = "text"
    name: str = "elasticsearch"

    def compile(self, query: Query) -> dict[str, Any]:
        return compile_bool_query(query, field=self.field)
