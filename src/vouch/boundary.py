"""Validation at the deserialization boundary.

Decoding (JSON, YAML, a web framework's body parser) stays with the caller;
the decoded value is validated before it is handed to domain code.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from vouch.exceptions.validation import ValidationError
from vouch.plan.model import ValidationPlan
from vouch.validation import check

type ErrorMapper = Callable[[ValidationError], Exception]


def validate_decoded[T](
    value: T,
    *,
    plan: ValidationPlan | None = None,
    error_mapper: ErrorMapper | None = None,
) -> T:
    """Return ``value`` unchanged when valid.

    Otherwise raise the ValidationError, or ``error_mapper(error)`` chained
    from it so frameworks can translate violations into their own responses.
    """
    err = check(value, plan)
    if not err:
        return value
    if error_mapper is None:
        raise err
    raise error_mapper(err) from err
