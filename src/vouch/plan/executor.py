"""Walk an instance with a ValidationPlan and collect violations.

Violations are reported in this order: for each field in declaration
order, the field's own rules, then its custom validators, then whatever its
structure contains (the present value, each element, the nested type);
after all fields, the type's struct-level checks. Paths are prefixed one
segment per level while unwinding.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from vouch.constants.codes import (
    DEFAULT_REQUIRED_MESSAGE,
    DEFAULT_UNKNOWN_VARIANT_MESSAGE,
    INVALID_TYPE,
    REQUIRED,
    UNKNOWN_VARIANT,
)
from vouch.exceptions.validation import ValidationError
from vouch.model.access import MISSING, is_absent, read_field
from vouch.model.path import IndexSegment, Path
from vouch.plan.model import (
    CheckPlan,
    FieldPlan,
    RuleStep,
    ShapePlan,
    Step,
    TypePlan,
    ValidationPlan,
    VariantPlan,
)


def execute(plan: ValidationPlan, instance: Any) -> ValidationError:
    """Validate ``instance`` against the plan's root type."""
    err = ValidationError()
    _run_type(plan, plan.root_plan, instance, err)
    return err


def _run_type(plan: ValidationPlan, type_plan: TypePlan, instance: Any, out: ValidationError) -> None:
    if type_plan.kind == "sum":
        _run_sum(plan, type_plan, instance, out)
        return
    _run_fields(plan, type_plan.fields, instance, out)
    _run_checks(type_plan.checks, instance, out)


def _run_fields(plan: ValidationPlan, fields: tuple[FieldPlan, ...], instance: Any, out: ValidationError) -> None:
    for field in fields:
        value = read_field(instance, field.key)
        child = ValidationError()
        _run_shape(plan, field.shape, None if value is MISSING else value, child)
        if child:
            out.merge_prefixed(field.path, child)


def _run_shape(plan: ValidationPlan, shape: ShapePlan, value: Any, out: ValidationError) -> None:
    if shape.kind == "optional":
        if is_absent(value):
            return
        _run_steps(shape.steps, value, out)
        _run_shape(plan, shape.inner, value, out)  # type: ignore[arg-type]
        return

    if is_absent(value):
        out.push(Path.root(), REQUIRED, DEFAULT_REQUIRED_MESSAGE)
        return

    _run_steps(shape.steps, value, out)

    if shape.kind == "collection":
        _run_elements(plan, shape.inner, value, out)  # type: ignore[arg-type]
    elif shape.kind == "nested":
        _run_type(plan, plan.type_plan(shape.target), value, out)  # type: ignore[arg-type]


def _run_steps(steps: tuple[Step, ...], value: Any, out: ValidationError) -> None:
    for step in steps:
        if isinstance(step, RuleStep):
            if step.when is not None and not step.when(value):
                continue
            out.extend(step.rule.apply(value))
        else:
            result = step.func(value)
            if result:
                out.extend(result)


def _run_elements(plan: ValidationPlan, inner: ShapePlan, value: Any, out: ValidationError) -> None:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        out.push(
            Path.root(),
            INVALID_TYPE,
            f"Expected a collection, got {type(value).__name__}",
            {"expected": "collection", "type": type(value).__name__},
        )
        return
    for index, item in enumerate(value):
        child = ValidationError()
        _run_shape(plan, inner, item, child)
        if child:
            out.merge_prefixed(IndexSegment(index), child)


def _run_checks(checks: tuple[CheckPlan, ...], instance: Any, out: ValidationError) -> None:
    for check in checks:
        if check.when is not None and not check.when(instance):
            continue
        if not check.predicate(instance):
            out.push(check.path, check.code, check.message)


def _run_sum(plan: ValidationPlan, type_plan: TypePlan, instance: Any, out: ValidationError) -> None:
    variant, payload, label = _select_variant(type_plan, instance)
    if variant is None:
        out.push(
            Path.root(),
            UNKNOWN_VARIANT,
            DEFAULT_UNKNOWN_VARIANT_MESSAGE,
            {"variant": label, "allowed": ", ".join(type_plan.variants)},
        )
        return
    _run_fields(plan, variant.fields, payload, out)
    _run_checks(variant.checks, payload, out)


def _select_variant(type_plan: TypePlan, instance: Any) -> tuple[VariantPlan | None, Any, str]:
    """Active variant, the value its fields are read from, and a label for errors."""
    if isinstance(instance, Mapping):
        tag = instance.get(type_plan.tag_key)
        variant = type_plan.variants.get(tag) if isinstance(tag, str) else None
        if variant is not None and variant.kind == "positional":
            return variant, instance.get(type_plan.payload_key), tag
        return variant, instance, str(tag)
    if isinstance(instance, str):
        return type_plan.variants.get(instance), instance, instance

    cls = type(instance)
    for variant in type_plan.variants.values():
        if variant.match is cls:
            return variant, instance, cls.__name__
    for variant in type_plan.variants.values():
        if variant.match is not None and isinstance(instance, variant.match):
            return variant, instance, cls.__name__

    label = instance.name if isinstance(instance, Enum) else cls.__name__
    return type_plan.variants.get(label), instance, label
