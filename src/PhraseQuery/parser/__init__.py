"""Query text parsing pipeline.

`parse_query` is the usual entry point: text -> parse tree -> clauses ->
`Query`.
"""

from __future__ import annotations

from PhraseQuery.core.query import Query, aggregate
from PhraseQuery.parser.grammar import parse
from PhraseQuery.parser.transformer import transform
from PhraseQuery.utils.log import log


def parse_query(text: str) -> Query:
    """Parse query text into a grouped `Query`.

    Args:
        text: Raw query text, e.g. ``+urgent "quarterly report" -draft``.

    Returns:
        Query with optional/required/excluded buckets.

    Raises:
        ParseError: If the text is malformed.
    """
    clauses = transform(parse(text))
    query = aggregate(clauses)
    log.debug(
        "Parsed %d clauses: optional=%d required=%d excluded=%d",
        len(clauses),
        len(query.optional_clauses),
        len(query.required_clauses),
        len(query.excluded_clauses),
    )
    return query


__all__ = ["parse", "parse_query", "transform"]
