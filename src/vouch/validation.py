"""Entry points for validating instances and single values."""

from __future__ import annotations

import functools
from typing import Any

from vouch.exceptions.spec import PlanError
from vouch.exceptions.validation import ValidationError
from vouch.model.path import PathLike
from vouch.plan.compiler import compile_plan
from vouch.plan.executor import execute
from vouch.plan.model import ValidationPlan
from vouch.rules.rule import Rule
from vouch.spec.declare import declared_name
from vouch.spec.model import TypeSpec
from vouch.spec.registry import SpecRegistry, default_registry


def spec_of(cls: type, registry: SpecRegistry = default_registry) -> TypeSpec:
    """Return the declared spec of ``cls``."""
    name = declared_name(cls)
    if name is None:
        raise PlanError(f"{cls.__qualname__} has no declared constraints; decorate it with @validated")
    return registry.get(name)


def plan_of(cls: type, registry: SpecRegistry = default_registry) -> ValidationPlan:
    """Compiled plan for ``cls``, built on first use and reused afterwards.

    Replacing a registered type invalidates every plan cached for that registry.
    """
    return _cached_plan(cls, registry, registry.generation)


@functools.cache
def _cached_plan(cls: type, registry: SpecRegistry, generation: int) -> ValidationPlan:
    return compile_plan(spec_of(cls, registry), registry)


def check(instance: Any, plan: ValidationPlan | None = None) -> ValidationError:
    """Collect every violation of ``instance``; an empty result means valid."""
    return execute(plan or plan_of(type(instance)), instance)


def validate(instance: Any, plan: ValidationPlan | None = None) -> None:
    """Raise ValidationError when ``instance`` violates any constraint."""
    check(instance, plan).raise_if_invalid()


def check_value[T](path: PathLike, value: T, rule: Rule[T]) -> ValidationError:
    """Apply ``rule`` to ``value`` and place its violations under ``path``."""
    return rule.apply(value).prefixed(path)


def validate_value[T](path: PathLike, value: T, rule: Rule[T]) -> None:
    """Raising form of :func:`check_value` for hand-written validators."""
    check_value(path, value, rule).raise_if_invalid()
