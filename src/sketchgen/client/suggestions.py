"""Parsing of comma-separated prompt suggestions."""
from __future__ import annotations

MAX_SUGGESTIONS = 6
MAX_SUGGESTION_LENGTH = 19

def parse_suggestions(text: str | None) -> list[str]:
    """
    Split a comma-separated suggestion string into short normalized tokens.

    Tokens are trimmed and lower-cased; empty tokens and tokens longer than
    MAX_SUGGESTION_LENGTH are dropped; at most MAX_SUGGESTIONS are kept, in
    source order.
    """
    if not text:
        return []
    tokens = (piece.strip().lower() for piece in text.strip().split(","))
    kept = [t for t in tokens if 0 < len(t) <= MAX_SUGGESTION_LENGTH]
    return kept[:MAX_SUGGESTIONS]
