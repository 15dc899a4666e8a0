"""Utilities package."""

from .resource_loader import load_catalog_defaults, load_yaml_resource
from .text import (
    FuzzyMatch,
    FuzzySearchOptions,
    escape_html,
    format_price,
    fuzzy_search,
    fuzzy_search_multi,
    fuzzy_search_strings,
    is_fuzzy_match,
    is_non_empty,
    normalize_amount,
    normalize_search_term,
    score_match,
    similarity,
    split_words,
)

__all__ = [
    # resources
    "load_yaml_resource",
    "load_catalog_defaults",
    # text
    "is_non_empty",
    "escape_html",
    "normalize_search_term",
    "split_words",
    "score_match",
    "format_price",
    "normalize_amount",
    # fuzzy
    "FuzzyMatch",
    "FuzzySearchOptions",
    "similarity",
    "fuzzy_search",
    "fuzzy_search_multi",
    "fuzzy_search_strings",
    "is_fuzzy_match",
]
