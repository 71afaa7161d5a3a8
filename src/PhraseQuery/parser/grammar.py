"""Query text grammar.

Syntax
- `term`: a run of characters without whitespace or double quotes
- `"some words"`: a phrase, matched as one unit
- a `+` or `-` written directly in front of a term or phrase marks it as
  required or excluded; without prefix the clause is optional

Clauses are separated by optional whitespace. Outside a phrase a term may not
start with `+`/`-` (so `++foo` and `+ foo` are rejected) but may contain them
(`foo-bar`, `c++`). Words inside a phrase are taken as-is.
"""

from __future__ import annotations

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from PhraseQuery.core.errors import ParseError
from PhraseQuery.utils.log import log


_GRAMMAR = r"""
start: _WS? (clause _WS?)*

clause: [OPERATOR] (phrase | term)
term: TERM
phrase: _QUOTE _WS? (PHRASE_WORD _WS?)* _QUOTE

OPERATOR: "+" | "-"
TERM: /[^\s"+\-][^\s"]*/
PHRASE_WORD: /[^\s"]+/
_QUOTE: "\""
_WS: /\s+/
"""

_OPERATOR_CHARS = frozenset("+-")

_PARSER = Lark(_GRAMMAR, parser="lalr", lexer="contextual", maybe_placeholders=True)


def parse(text: str) -> Tree:
    """Parse query text into a lark parse tree.

    The tree root is `start`; each child is a `clause` node holding the
    operator token (or None) and a `term` or `phrase` node.

    Args:
        text: Raw query text.

    Returns:
        Parse tree with one `clause` child per clause, in source order.

    Raises:
        ParseError: If the text does not match the grammar.
    """
    try:
        return _PARSER.parse(text)
    except UnexpectedInput as e:
        error = _explain(text, e)
        log.debug("Rejected query %r: %s", text, error.reason)
        raise error from e


def _explain(text: str, error: UnexpectedInput) -> ParseError:
    """Turn a lark failure into a ParseError with a user-facing reason."""
    # Quotes cannot appear inside terms, so an odd count means one is unmatched.
    if text.count('"') % 2:
        return ParseError(text, "unterminated quote", text.rfind('"'))

    pos = getattr(error, "pos_in_stream", None)
    if not isinstance(pos, int) or pos < 0:
        pos = len(text)
    for candidate in (pos - 1, pos):
        if 0 <= candidate < len(text) and text[candidate] in _OPERATOR_CHARS:
            return ParseError(
                text,
                f"operator {text[candidate]!r} must be directly followed by a term or phrase",
                candidate,
            )
    return ParseError(text, "unexpected input", pos)
