"""Output renderers for parsed and compiled queries."""

from __future__ import annotations

from PhraseQuery.renderers.console import render_text
from PhraseQuery.renderers.json import render_json

__all__ = ["render_json", "render_text"]
