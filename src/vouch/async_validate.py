"""Asynchronous post-validation checks (uniqueness lookups and the like).

Async checks run only after synchronous validation passes. They receive an
:class:`AsyncValidationContext` carrying shared resources such as database
handles. A check that raises or times out is an infrastructure failure and
surfaces as :class:`AsyncCheckError`, not as a violation.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from vouch.exceptions.async_checks import AsyncCheckError
from vouch.exceptions.validation import ValidationError
from vouch.model.access import MISSING, read_field
from vouch.model.path import Path, PathLike
from vouch.plan.model import ValidationPlan
from vouch.validation import check

logger = logging.getLogger(__name__)


class AsyncValidationContext:
    """Immutable bag of named resources shared by async checks."""

    __slots__ = ("_resources",)

    def __init__(self, resources: Mapping[str, Any] | None = None) -> None:
        self._resources: Mapping[str, Any] = MappingProxyType(dict(resources or {}))

    def with_resource(self, key: str, resource: Any) -> AsyncValidationContext:
        """Return a new context that also carries ``resource`` under ``key``."""
        return AsyncValidationContext({**self._resources, key: resource})

    def get_resource[R](self, key: str, expected_type: type[R] | None = None) -> R | None:
        """Return the resource, or None when it is missing or of another type."""
        resource = self._resources.get(key)
        if resource is None:
            return None
        if expected_type is not None and not isinstance(resource, expected_type):
            return None
        return resource

    def __contains__(self, key: object) -> bool:
        return key in self._resources


type AsyncEvaluator[T] = Callable[[T, AsyncValidationContext], Awaitable[ValidationError | None]]


@dataclass(frozen=True)
class AsyncRule[T]:
    """An async evaluator with the rule contract: violations at the root path."""

    func: AsyncEvaluator[T] = field(repr=False)
    name: str = ""

    async def apply(self, value: T, ctx: AsyncValidationContext) -> ValidationError:
        result = await self.func(value, ctx)
        return ValidationError() if result is None else result


@dataclass(frozen=True)
class AsyncCheck:
    """Apply ``rule`` to the value ``getter`` reads from the instance."""

    path: Path
    getter: Callable[[Any], Any] = field(repr=False)
    rule: AsyncRule[Any]

    @classmethod
    def for_field(cls, name: str, rule: AsyncRule[Any]) -> AsyncCheck:
        """Check the record field ``name``; violations land under ``name``."""

        def getter(instance: Any) -> Any:
            value = read_field(instance, name)
            return None if value is MISSING else value

        return cls(Path.from_key(name), getter, rule)

    @classmethod
    def of(cls, path: PathLike, getter: Callable[[Any], Any], rule: AsyncRule[Any]) -> AsyncCheck:
        return cls(Path.coerce(path), getter, rule)


async def validate_async(
    instance: Any,
    checks: Iterable[AsyncCheck],
    ctx: AsyncValidationContext | None = None,
    *,
    plan: ValidationPlan | None = None,
    timeout: float | None = None,
) -> ValidationError:
    """Run synchronous validation, then the async checks concurrently.

    When synchronous validation reports anything, those violations are
    returned and no async check is started. Async violations are merged in
    the order the checks were given.
    """
    sync_errors = check(instance, plan)
    if sync_errors:
        return sync_errors

    context = ctx or AsyncValidationContext()
    pending = list(checks)
    tasks = [asyncio.ensure_future(_run_check(item, instance, context, timeout)) for item in pending]
    try:
        results = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise

    err = ValidationError()
    for item, result in zip(pending, results, strict=True):
        err.merge_prefixed(item.path, result)
    return err


async def _run_check(
    item: AsyncCheck,
    instance: Any,
    ctx: AsyncValidationContext,
    timeout: float | None,
) -> ValidationError:
    value = item.getter(instance)
    try:
        if timeout is None:
            return await item.rule.apply(value, ctx)
        return await asyncio.wait_for(item.rule.apply(value, ctx), timeout)
    except TimeoutError as exc:
        logger.warning("Async check timed out at %s after %ss", item.path or "<root>", timeout)
        raise AsyncCheckError(str(item.path), exc) from exc
    except Exception as exc:
        logger.warning("Async check failed at %s: %s", item.path or "<root>", exc)
        raise AsyncCheckError(str(item.path), exc) from exc
