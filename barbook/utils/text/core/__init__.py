"""Core text helpers."""

from .cleaning import (
    escape_html,
    format_price,
    is_non_empty,
    normalize_amount,
    normalize_search_term,
    score_match,
    split_words,
)

__all__ = [
    "escape_html",
    "format_price",
    "is_non_empty",
    "normalize_amount",
    "normalize_search_term",
    "score_match",
    "split_words",
]
