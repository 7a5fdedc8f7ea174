"""Rule algebra and the built-in rule library."""

from __future__ import annotations

from .choice import equals, not_equals, one_of
from .collection import max_items, min_items, unique
from .numeric import finite, max, min, multiple_of, negative, non_zero, positive, range, try_multiple_of
from .rule import Rule, all_of, any_of
from .string import (
    alpha_only,
    alphanumeric,
    ascii,
    contains,
    email,
    ends_with,
    len_chars,
    length,
    matches_regex,
    max_len,
    min_len,
    no_whitespace,
    non_blank,
    non_empty,
    numeric_string,
    starts_with,
    try_matches_regex,
    url,
)
from .temporal import after, age_range, before, future, past

__all__ = [
    "Rule",
    "after",
    "age_range",
    "all_of",
    "alpha_only",
    "alphanumeric",
    "any_of",
    "ascii",
    "before",
    "contains",
    "email",
    "ends_with",
    "equals",
    "finite",
    "future",
    "len_chars",
    "length",
    "matches_regex",
    "max",
    "max_items",
    "max_len",
    "min",
    "min_items",
    "min_len",
    "multiple_of",
    "negative",
    "no_whitespace",
    "non_blank",
    "non_empty",
    "non_zero",
    "not_equals",
    "numeric_string",
    "one_of",
    "past",
    "positive",
    "range",
    "starts_with",
    "try_matches_regex",
    "try_multiple_of",
    "unique",
    "url",
]
