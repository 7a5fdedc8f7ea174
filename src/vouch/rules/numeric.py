"""Numeric rules.

Bounds are inclusive. Values are compared with the ordinary Python
operators, so ints, floats, Decimals and Fractions all work as long as the
bound and the value are comparable.
"""

from __future__ import annotations

import math
from numbers import Number
from typing import Any

from vouch.constants.codes import (
    ABOVE_MAXIMUM,
    BELOW_MINIMUM,
    NOT_FINITE,
    NOT_MULTIPLE,
    NOT_NEGATIVE,
    NOT_POSITIVE,
    OUT_OF_RANGE,
    ZERO_VALUE,
)
from vouch.exceptions.rules import RuleConstructionError
from vouch.rules.rule import Rule


def _check_bound(kind: str, name: str, value: Any) -> None:
    if isinstance(value, (bool, complex)) or not isinstance(value, Number):
        raise RuleConstructionError(kind, f"'{name}' must be a real number, got {value!r}")
    if isinstance(value, float) and math.isnan(value):
        raise RuleConstructionError(kind, f"'{name}' must not be NaN")


def range(min: Any, max: Any) -> Rule[Any]:
    _check_bound("range", "min", min)
    _check_bound("range", "max", max)
    try:
        inverted = min > max
    except TypeError as exc:
        raise RuleConstructionError("range", f"min ({min!r}) and max ({max!r}) are not comparable") from exc
    if inverted:
        raise RuleConstructionError("range", f"min ({min}) must not exceed max ({max})")
    return Rule.predicate(
        lambda value: min <= value <= max,
        kind="range",
        catch_type_errors=True,
        code=OUT_OF_RANGE,
        message=f"Must be between {min} and {max}",
        params={"min": min, "max": max},
        meta={"min": min, "max": max},
    )


def min(min: Any) -> Rule[Any]:
    _check_bound("min", "min", min)
    return Rule.predicate(
        lambda value: value >= min,
        kind="min",
        catch_type_errors=True,
        code=BELOW_MINIMUM,
        message=f"Must be at least {min}",
        params={"min": min},
        meta={"min": min},
    )


def max(max: Any) -> Rule[Any]:
    _check_bound("max", "max", max)
    return Rule.predicate(
        lambda value: value <= max,
        kind="max",
        catch_type_errors=True,
        code=ABOVE_MAXIMUM,
        message=f"Must be at most {max}",
        params={"max": max},
        meta={"max": max},
    )


def positive() -> Rule[Any]:
    return Rule.predicate(
        lambda value: value > 0,
        kind="positive",
        catch_type_errors=True,
        code=NOT_POSITIVE,
        message="Must be positive (greater than zero)",
    )


def negative() -> Rule[Any]:
    return Rule.predicate(
        lambda value: value < 0,
        kind="negative",
        catch_type_errors=True,
        code=NOT_NEGATIVE,
        message="Must be negative (less than zero)",
    )


def non_zero() -> Rule[Any]:
    return Rule.predicate(
        lambda value: value != 0,
        kind="non_zero",
        catch_type_errors=True,
        code=ZERO_VALUE,
        message="Must not be zero",
    )


def finite() -> Rule[Any]:
    """Reject NaN and infinities."""
    return Rule.predicate(
        lambda value: math.isfinite(value),
        kind="finite",
        catch_type_errors=True,
        code=NOT_FINITE,
        message="Must be a finite number",
    )


def try_multiple_of(divisor: Any) -> Rule[Any] | RuleConstructionError:
    """Fallible constructor: a zero divisor is returned as an error object."""
    if isinstance(divisor, bool) or not isinstance(divisor, Number):
        return RuleConstructionError("multiple_of", f"divisor must be a number, got {divisor!r}")
    if divisor == 0:
        return RuleConstructionError("multiple_of", "divisor must not be zero")
    return Rule.predicate(
        lambda value: value % divisor == 0,
        kind="multiple_of",
        catch_type_errors=True,
        code=NOT_MULTIPLE,
        message=f"Must be a multiple of {divisor}",
        params={"divisor": divisor},
        meta={"divisor": divisor},
    )


def multiple_of(divisor: Any) -> Rule[Any]:
    result = try_multiple_of(divisor)
    if isinstance(result, RuleConstructionError):
        raise result
    return result
