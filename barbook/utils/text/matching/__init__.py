"""Matching package."""

from .fuzzy import (
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
    "FuzzyMatch",
    "FuzzySearchOptions",
    "fuzzy_search",
    "fuzzy_search_multi",
    "fuzzy_search_strings",
    "is_fuzzy_match",
    "levenshtein_distance",
    "normalize_string",
    "similarity",
]
