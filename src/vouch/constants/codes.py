"""Stable violation codes and default messages for the built-in rules.

Codes are machine-stable discriminators and are never localized. Messages
are English defaults; callers override them per rule with ``with_message``.
"""

from __future__ import annotations

# string rules
INVALID_EMAIL: str = "invalid_email"
INVALID_URL: str = "invalid_url"
NON_EMPTY: str = "non_empty"
BLANK: str = "blank"
MIN_LENGTH: str = "min_length"
MAX_LENGTH: str = "max_length"
MIN_CHARS: str = "min_chars"
MAX_CHARS: str = "max_chars"
NOT_ALPHANUMERIC: str = "not_alphanumeric"
NOT_ALPHA: str = "not_alpha"
NOT_NUMERIC: str = "not_numeric"
NOT_ASCII: str = "not_ascii"
CONTAINS_WHITESPACE: str = "contains_whitespace"
MISSING_SUBSTRING: str = "missing_substring"
INVALID_PREFIX: str = "invalid_prefix"
INVALID_SUFFIX: str = "invalid_suffix"
PATTERN_MISMATCH: str = "pattern_mismatch"

# numeric rules
OUT_OF_RANGE: str = "out_of_range"
BELOW_MINIMUM: str = "below_minimum"
ABOVE_MAXIMUM: str = "above_maximum"
NOT_POSITIVE: str = "not_positive"
NOT_NEGATIVE: str = "not_negative"
ZERO_VALUE: str = "zero_value"
NOT_FINITE: str = "not_finite"
NOT_MULTIPLE: str = "not_multiple"

# collection rules
TOO_FEW_ITEMS: str = "too_few_items"
TOO_MANY_ITEMS: str = "too_many_items"
DUPLICATE_ITEMS: str = "duplicate_items"

# choice rules
NOT_EQUAL: str = "not_equal"
FORBIDDEN_VALUE: str = "forbidden_value"
NOT_IN_SET: str = "not_in_set"

# temporal rules
NOT_IN_PAST: str = "not_in_past"
NOT_IN_FUTURE: str = "not_in_future"
NOT_BEFORE: str = "not_before"
NOT_AFTER: str = "not_after"
AGE_OUT_OF_RANGE: str = "age_out_of_range"

# engine-level codes
NEGATED: str = "negated"
CUSTOM: str = "custom"
CROSS_FIELD_FAILED: str = "cross_field_validation_failed"
UNKNOWN_VARIANT: str = "unknown_variant"
INVALID_TYPE: str = "invalid_type"
REQUIRED: str = "required"

DEFAULT_NEGATED_MESSAGE: str = "Must not satisfy the rule"
DEFAULT_CUSTOM_MESSAGE: str = "Invalid value"
DEFAULT_CROSS_FIELD_MESSAGE: str = "Cross-field validation failed"
DEFAULT_UNKNOWN_VARIANT_MESSAGE: str = "Unknown variant"
DEFAULT_REQUIRED_MESSAGE: str = "Field is required"
