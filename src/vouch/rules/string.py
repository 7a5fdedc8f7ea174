"""String rules."""

from __future__ import annotations

import re

from vouch.constants.codes import (
    BLANK,
    CONTAINS_WHITESPACE,
    INVALID_EMAIL,
    INVALID_PREFIX,
    INVALID_SUFFIX,
    INVALID_URL,
    MAX_CHARS,
    MAX_LENGTH,
    MIN_CHARS,
    MIN_LENGTH,
    MISSING_SUBSTRING,
    NON_EMPTY,
    NOT_ALPHA,
    NOT_ALPHANUMERIC,
    NOT_ASCII,
    NOT_NUMERIC,
    PATTERN_MISMATCH,
)
from vouch.exceptions.rules import RuleConstructionError
from vouch.rules.rule import Rule

EMAIL_PATTERN: re.Pattern[str] = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
URL_PATTERN: re.Pattern[str] = re.compile(
    r"^https?://[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(\.[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*(/.*)?$"
)


def _check_length(kind: str, name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise RuleConstructionError(kind, f"'{name}' must be a non-negative integer, got {value!r}")


def _check_text(kind: str, name: str, value: str) -> None:
    if not isinstance(value, str):
        raise RuleConstructionError(kind, f"'{name}' must be a string, got {value!r}")


def email() -> Rule[str]:
    return Rule.predicate(
        lambda value: EMAIL_PATTERN.match(value) is not None,
        kind="email",
        catch_type_errors=True,
        code=INVALID_EMAIL,
        message="Invalid email format",
    )


def url() -> Rule[str]:
    """HTTP(S) URL with a syntactically valid host."""
    return Rule.predicate(
        lambda value: URL_PATTERN.match(value) is not None,
        kind="url",
        catch_type_errors=True,
        code=INVALID_URL,
        message="Invalid URL format",
    )


def non_empty() -> Rule[str]:
    return Rule.predicate(
        lambda value: len(value) > 0,
        kind="non_empty",
        catch_type_errors=True,
        code=NON_EMPTY,
        message="Must not be empty",
    )


def non_blank() -> Rule[str]:
    """Reject empty and whitespace-only strings."""
    return Rule.predicate(
        lambda value: value.strip() != "",
        kind="non_blank",
        catch_type_errors=True,
        code=BLANK,
        message="Must not be blank",
    )


def min_len(min: int) -> Rule[str]:
    """Minimum length; :func:`len_chars` also reports the actual count."""
    _check_length("min_len", "min", min)
    return Rule.predicate(
        lambda value: len(value) >= min,
        kind="min_len",
        catch_type_errors=True,
        code=MIN_LENGTH,
        message=f"Must be at least {min} characters",
        params={"min": min},
        meta={"min": min},
    )


def max_len(max: int) -> Rule[str]:
    _check_length("max_len", "max", max)
    return Rule.predicate(
        lambda value: len(value) <= max,
        kind="max_len",
        catch_type_errors=True,
        code=MAX_LENGTH,
        message=f"Must be at most {max} characters",
        params={"max": max},
        meta={"max": max},
    )


def length(min: int, max: int) -> Rule[str]:
    if min > max:
        raise RuleConstructionError("length", f"min ({min}) must not exceed max ({max})")
    return min_len(min).and_(max_len(max))


def len_chars(min: int, max: int) -> Rule[str]:
    """Length counted in characters (code points), reported with the actual count."""
    _check_length("len_chars", "min", min)
    _check_length("len_chars", "max", max)
    if min > max:
        raise RuleConstructionError("len_chars", f"min ({min}) must not exceed max ({max})")
    too_short = Rule.predicate(
        lambda value: len(value) >= min,
        kind="min_chars",
        catch_type_errors=True,
        code=MIN_CHARS,
        message=f"Must be at least {min} characters",
        params={"min": min},
        meta={"min": min},
        details=lambda value: {"actual": len(value)},
    )
    too_long = Rule.predicate(
        lambda value: len(value) <= max,
        kind="max_chars",
        catch_type_errors=True,
        code=MAX_CHARS,
        message=f"Must be at most {max} characters",
        params={"max": max},
        meta={"max": max},
        details=lambda value: {"actual": len(value)},
    )
    return too_short.and_(too_long)


def alphanumeric() -> Rule[str]:
    return Rule.predicate(
        lambda value: all(char.isalnum() for char in value),
        kind="alphanumeric",
        catch_type_errors=True,
        code=NOT_ALPHANUMERIC,
        message="Must contain only letters and numbers",
    )


def alpha_only() -> Rule[str]:
    return Rule.predicate(
        lambda value: all(char.isalpha() for char in value),
        kind="alpha_only",
        catch_type_errors=True,
        code=NOT_ALPHA,
        message="Must contain only letters",
    )


def numeric_string() -> Rule[str]:
    return Rule.predicate(
        lambda value: all(char.isnumeric() for char in value),
        kind="numeric_string",
        catch_type_errors=True,
        code=NOT_NUMERIC,
        message="Must contain only numbers",
    )


def ascii() -> Rule[str]:
    return Rule.predicate(
        lambda value: value.isascii(),
        kind="ascii",
        catch_type_errors=True,
        code=NOT_ASCII,
        message="Must contain only ASCII characters",
    )


def no_whitespace() -> Rule[str]:
    return Rule.predicate(
        lambda value: not any(char.isspace() for char in value),
        kind="no_whitespace",
        catch_type_errors=True,
        code=CONTAINS_WHITESPACE,
        message="Must not contain whitespace",
    )


def contains(substring: str) -> Rule[str]:
    _check_text("contains", "substring", substring)
    return Rule.predicate(
        lambda value: substring in value,
        kind="contains",
        catch_type_errors=True,
        code=MISSING_SUBSTRING,
        message=f"Must contain '{substring}'",
        params={"substring": substring},
        meta={"substring": substring},
    )


def starts_with(prefix: str) -> Rule[str]:
    _check_text("starts_with", "prefix", prefix)
    return Rule.predicate(
        lambda value: value.startswith(prefix),
        kind="starts_with",
        catch_type_errors=True,
        code=INVALID_PREFIX,
        message=f"Must start with '{prefix}'",
        params={"prefix": prefix},
        meta={"prefix": prefix},
    )


def ends_with(suffix: str) -> Rule[str]:
    _check_text("ends_with", "suffix", suffix)
    return Rule.predicate(
        lambda value: value.endswith(suffix),
        kind="ends_with",
        catch_type_errors=True,
        code=INVALID_SUFFIX,
        message=f"Must end with '{suffix}'",
        params={"suffix": suffix},
        meta={"suffix": suffix},
    )


def try_matches_regex(pattern: str) -> Rule[str] | RuleConstructionError:
    """Fallible constructor: return the construction error instead of raising.

    The pattern is compiled once, here, and searched (not fully matched)
    against each value; anchor it with ``^``/``$`` for whole-value matches.
    """
    if not isinstance(pattern, str):
        return RuleConstructionError("matches_regex", f"'pattern' must be a string, got {pattern!r}")
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        return RuleConstructionError("matches_regex", f"invalid pattern {pattern!r}: {exc}")
    return Rule.predicate(
        lambda value: compiled.search(value) is not None,
        kind="matches_regex",
        catch_type_errors=True,
        code=PATTERN_MISMATCH,
        message="Does not match required pattern",
        params={"pattern": pattern},
        meta={"pattern": pattern},
    )


def matches_regex(pattern: str) -> Rule[str]:
    result = try_matches_regex(pattern)
    if isinstance(result, RuleConstructionError):
        raise result
    return result
