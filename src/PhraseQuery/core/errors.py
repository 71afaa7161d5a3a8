"""Error types raised by the query language core."""

from __future__ import annotations


class QueryError(Exception):
    """Base class for PhraseQuery errors."""


class ParseError(QueryError, ValueError):
    """Raised when query text does not match the grammar.

    Attributes:
        text: The rejected query text.
        position: 0-based offset of the offending character, or None when the
            failure cannot be pinned to one place.
        reason: Short human-readable description of the failure.
    """

    def __init__(self, text: str, reason: str, position: int | None = None) -> None:
        self.text = text
        self.reason = reason
        self.position = position
        super().__init__(self._format())

    @property
    def fragment(self) -> str:
        """Return the input around ``position`` for diagnostics."""
        if self.position is None:
            return self.text
        start = max(0, self.position - 10)
        return self.text[start : self.position + 10]

    def _format(self) -> str:
        if self.position is None:
            return f"Invalid query: {self.reason}"
        return f"Invalid query: {self.reason} at position {self.position} (near {self.fragment!r})"


class UnknownOperator(QueryError):
    """Raised for an operator symbol the grammar should never produce."""

    def __init__(self, symbol: object) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown operator: {symbol!r}")


class UnknownClauseVariant(QueryError):
    """Raised when a clause is neither a term nor a phrase clause."""

    def __init__(self, clause: object) -> None:
        self.clause = clause
        super().__init__(f"Unknown clause type: {type(clause).__name__}: {clause!r}")
