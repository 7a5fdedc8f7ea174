"""Date and time rules.

Rules that compare against "now" take an optional ``clock`` so results stay
reproducible in tests; by default they read the current UTC time on every
evaluation.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime

from vouch.constants.codes import AGE_OUT_OF_RANGE, NOT_AFTER, NOT_BEFORE, NOT_IN_FUTURE, NOT_IN_PAST
from vouch.exceptions.rules import RuleConstructionError
from vouch.rules.rule import Rule

type Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def _check_limit(kind: str, limit: date) -> None:
    if not isinstance(limit, date):
        raise RuleConstructionError(kind, f"'limit' must be a date or datetime, got {limit!r}")


def _check_years(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise RuleConstructionError("age_range", f"'{name}' must be a non-negative integer, got {value!r}")


def past(clock: Clock = utc_now) -> Rule[datetime]:
    return Rule.predicate(
        lambda value: value < clock(),
        kind="past",
        catch_type_errors=True,
        code=NOT_IN_PAST,
        message="Must be in the past",
    )


def future(clock: Clock = utc_now) -> Rule[datetime]:
    return Rule.predicate(
        lambda value: value > clock(),
        kind="future",
        catch_type_errors=True,
        code=NOT_IN_FUTURE,
        message="Must be in the future",
    )


def before(limit: datetime) -> Rule[datetime]:
    _check_limit("before", limit)
    return Rule.predicate(
        lambda value: value < limit,
        kind="before",
        catch_type_errors=True,
        code=NOT_BEFORE,
        message=f"Must be before {limit.isoformat()}",
        params={"limit": limit},
        meta={"limit": limit.isoformat()},
    )


def after(limit: datetime) -> Rule[datetime]:
    _check_limit("after", limit)
    return Rule.predicate(
        lambda value: value > limit,
        kind="after",
        catch_type_errors=True,
        code=NOT_AFTER,
        message=f"Must be after {limit.isoformat()}",
        params={"limit": limit},
        meta={"limit": limit.isoformat()},
    )


def age_on(birth_date: date, today: date) -> int:
    """Completed years between ``birth_date`` and ``today``."""
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def age_range(min: int, max: int, clock: Clock = utc_now) -> Rule[date]:
    """Age in completed years, computed from a birth date, within ``[min, max]``."""
    _check_years("min", min)
    _check_years("max", max)
    if min > max:
        raise RuleConstructionError("age_range", f"min ({min}) must not exceed max ({max})")

    def current_age(birth_date: date) -> int:
        return age_on(birth_date, clock().date())

    return Rule.predicate(
        lambda value: min <= current_age(value) <= max,
        kind="age_range",
        catch_type_errors=True,
        code=AGE_OUT_OF_RANGE,
        message=f"Age must be between {min} and {max} years",
        params={"min": min, "max": max},
        meta={"min": min, "max": max},
        details=lambda value: {"age": current_age(value)},
    )
