"""Equality and membership rules."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from vouch.constants.codes import FORBIDDEN_VALUE, NOT_EQUAL, NOT_IN_SET
from vouch.exceptions.rules import RuleConstructionError
from vouch.rules.rule import Rule


def equals(expected: Any) -> Rule[Any]:
    return Rule.predicate(
        lambda value: value == expected,
        kind="equals",
        catch_type_errors=True,
        code=NOT_EQUAL,
        message=f"Must equal '{expected}'",
        params={"expected": expected},
        meta={"expected": expected},
    )


def not_equals(forbidden: Any) -> Rule[Any]:
    return Rule.predicate(
        lambda value: value != forbidden,
        kind="not_equals",
        catch_type_errors=True,
        code=FORBIDDEN_VALUE,
        message=f"Must not equal '{forbidden}'",
        params={"forbidden": forbidden},
        meta={"forbidden": forbidden},
    )


def one_of(allowed: Iterable[Any]) -> Rule[Any]:
    choices = tuple(allowed)
    if not choices:
        raise RuleConstructionError("one_of", "at least one allowed value is required")
    rendered = "[" + ", ".join(repr(choice) for choice in choices) + "]"
    return Rule.predicate(
        lambda value: value in choices,
        kind="one_of",
        catch_type_errors=True,
        code=NOT_IN_SET,
        message=f"Must be one of: {rendered}",
        params={"allowed": choices},
        meta={"allowed": rendered},
    )
