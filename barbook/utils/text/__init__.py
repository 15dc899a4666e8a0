"""Text utilities.

Public API is kept stable while implementation is organized under:
- core/      cleaning / formatting helpers
- matching/  fuzzy similarity and search
"""

from .core.cleaning import (
    escape_html,
    format_price,
    is_non_empty,
    normalize_amount,
    normalize_search_term,
    score_match,
    split_words,
)
from .matching import (
    FuzzyMatch,
    FuzzySearchOptions,
    fuzzy_search,
    fuzzy_search_multi,
    fuzzy_search_strings,
    is_fuzzy_match,
    levenshtein_distance,
    normalize_string,
    similarity,
)

__all__ = [
    # core
    "is_non_empty",
    "escape_html",
    "normalize_search_term",
    "split_words",
    "score_match",
    "format_price",
    "normalize_amount",
    # matching
    "FuzzyMatch",
    "FuzzySearchOptions",
    "normalize_string",
    "levenshtein_distance",
    "similarity",
    "fuzzy_search",
    "fuzzy_search_multi",
    "fuzzy_search_strings",
    "is_fuzzy_match",
]
