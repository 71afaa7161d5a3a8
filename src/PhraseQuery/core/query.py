from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from PhraseQuery.core.errors import UnknownClauseVariant, UnknownOperator


class Operator(str, Enum):
    """Role of a clause inside a query.

    - `OPTIONAL`: no prefix, the clause may match
    - `REQUIRED`: `+` prefix, the clause must match
    - `EXCLUDED`: `-` prefix, the clause must not match
    """

    OPTIONAL = "optional"
    REQUIRED = "required"
    EXCLUDED = "excluded"

    @classmethod
    def from_symbol(cls, symbol: str | None) -> Operator:
        """Resolve a prefix symbol into an operator.

        Args:
            symbol: `+`, `-`, or None when the clause has no prefix.

        Returns:
            The matching operator.

        Raises:
            UnknownOperator: If the symbol is anything else.
        """
        if symbol is None:
            return cls.OPTIONAL
        if symbol == "+":
            return cls.REQUIRED
        if symbol == "-":
            return cls.EXCLUDED
        raise UnknownOperator(symbol)


# Bucket emission order of `Query.to_backend_query`.
OPERATOR_ORDER: tuple[Operator, ...] = (Operator.OPTIONAL, Operator.REQUIRED, Operator.EXCLUDED)


@dataclass(frozen=True, slots=True)
class TermClause:
    """A single unquoted word."""

    operator: Operator
    term: str


@dataclass(frozen=True, slots=True)
class PhraseClause:
    """A quoted sequence of words, matched as one exact phrase."""

    operator: Operator
    phrase: str


Clause = TermClause | PhraseClause


@dataclass(frozen=True, slots=True)
class Query:
    """Parsed query with clauses grouped by role.

    Each bucket keeps the clauses in the order they were written. Build it
    with `Query.from_clauses` (or `aggregate`) rather than by hand.

    Attributes:
        optional_clauses: Clauses without prefix.
        required_clauses: Clauses prefixed with `+`.
        excluded_clauses: Clauses prefixed with `-`.
    """

    optional_clauses: tuple[Clause, ...] = ()
    required_clauses: tuple[Clause, ...] = ()
    excluded_clauses: tuple[Clause, ...] = ()

    @classmethod
    def from_clauses(cls, clauses: Iterable[Clause]) -> Query:
        """Partition an ordered clause sequence into role buckets.

        Args:
            clauses: Clauses in source order.

        Returns:
            Query whose buckets together hold every input clause exactly once.

        Raises:
            UnknownClauseVariant: If an item is not a term or phrase clause.
            UnknownOperator: If a clause carries something other than an Operator.
        """
        buckets: dict[Operator, list[Clause]] = {op: [] for op in OPERATOR_ORDER}
        for clause in clauses:
            if not isinstance(clause, (TermClause, PhraseClause)):
                raise UnknownClauseVariant(clause)
            bucket = buckets.get(clause.operator)
            if bucket is None:
                raise UnknownOperator(clause.operator)
            bucket.append(clause)
        return cls(
            optional_clauses=tuple(buckets[Operator.OPTIONAL]),
            required_clauses=tuple(buckets[Operator.REQUIRED]),
            excluded_clauses=tuple(buckets[Operator.EXCLUDED]),
        )

    def bucket(self, operator: Operator) -> tuple[Clause, ...]:
        """Return the clauses stored for one operator."""
        if operator is Operator.OPTIONAL:
            return self.optional_clauses
        if operator is Operator.REQUIRED:
            return self.required_clauses
        if operator is Operator.EXCLUDED:
            return self.excluded_clauses
        raise UnknownOperator(operator)

    @property
    def clauses(self) -> tuple[Clause, ...]:
        """All clauses, bucket by bucket in emission order."""
        return self.optional_clauses + self.required_clauses + self.excluded_clauses

    @property
    def is_empty(self) -> bool:
        return not (self.optional_clauses or self.required_clauses or self.excluded_clauses)

    def __len__(self) -> int:
        return len(self.optional_clauses) + len(self.required_clauses) + len(self.excluded_clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self.clauses)

    def to_backend_query(self) -> dict[str, list[dict[str, str]]]:
        """Convert into a backend-neutral role mapping.

        Empty buckets are left out. Keys always come in the order
        optional, required, excluded.

        Returns:
            Mapping like ``{"required": [{"match": "urgent"}]}``.
        """
        out: dict[str, list[dict[str, str]]] = {}
        for operator in OPERATOR_ORDER:
            clauses = self.bucket(operator)
            if clauses:
                out[operator.value] = [clause_to_leaf(c) for c in clauses]
        return out


def aggregate(clauses: Iterable[Clause]) -> Query:
    """Group ordered clauses into a `Query`."""
    return Query.from_clauses(clauses)


def clause_to_leaf(clause: Clause) -> dict[str, str]:
    """Map one clause to a backend-neutral leaf query.

    Raises:
        UnknownClauseVariant: If the clause is not a known variant.
    """
    if isinstance(clause, TermClause):
        return {"match": clause.term}
    if isinstance(clause, PhraseClause):
        return {"match_phrase": clause.phrase}
    raise UnknownClauseVariant(clause)
