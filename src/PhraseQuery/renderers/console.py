"""Console text output renderers.

Renders a parsed `Query` into human-friendly text, one clause per line.
"""

from __future__ import annotations

from PhraseQuery.core.errors import UnknownClauseVariant
from PhraseQuery.core.query import OPERATOR_ORDER, Clause, PhraseClause, Query, TermClause


def _fmt_clause(clause: Clause) -> str:
    if isinstance(clause, TermClause):
        return f"term   {clause.term}"
    if isinstance(clause, PhraseClause):
        return f'phrase "{clause.phrase}"'
    raise UnknownClauseVariant(clause)


def render_text(query: Query) -> str:
    """Render query buckets into a text block.

    Args:
        query: Parsed query.

    Returns:
        A formatted string ready to be printed.
    """
    if query.is_empty:
        return "(empty query)\n"

    lines: list[str] = []
    for operator in OPERATOR_ORDER:
        clauses = query.bucket(operator)
        if not clauses:
            continue
        lines.append(f"{operator.value} ({len(clauses)}):")
        for idx, clause in enumerate(clauses, start=1):
            lines.append(f"  {idx}. {_fmt_clause(clause)}")
    return "\n".join(lines) + "\n"
