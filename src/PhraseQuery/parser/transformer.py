"""Turn parse trees into typed clauses."""

from __future__ import annotations

from lark import Token, Transformer, Tree, v_args
from lark.exceptions import VisitError

from PhraseQuery.core.errors import UnknownClauseVariant
from PhraseQuery.core.query import Clause, Operator, PhraseClause, TermClause


@v_args(inline=True)
class ClauseTransformer(Transformer):
    """Build `TermClause`/`PhraseClause` values from `clause` nodes.

    Stateless; a single instance can be shared.
    """

    def start(self, *clauses: Clause) -> list[Clause]:
        return list(clauses)

    def clause(self, operator: Token | None, body: Tree) -> Clause:
        op = Operator.from_symbol(None if operator is None else str(operator))
        if body.data == "term":
            return TermClause(op, str(body.children[0]))
        if body.data == "phrase":
            # Words are rejoined with single spaces; source spacing is not kept.
            return PhraseClause(op, " ".join(str(word) for word in body.children))
        raise UnknownClauseVariant(body)


_TRANSFORMER = ClauseTransformer()


def transform(tree: Tree) -> list[Clause]:
    """Convert a parse tree into clauses in source order.

    Args:
        tree: Tree returned by `PhraseQuery.parser.grammar.parse`.

    Returns:
        Ordered list of clauses.

    Raises:
        UnknownOperator: If a clause node carries an unexpected operator.
        UnknownClauseVariant: If a clause node is neither term nor phrase.
    """
    try:
        return _TRANSFORMER.transform(tree)
    except VisitError as e:
        raise e.orig_exc from e
