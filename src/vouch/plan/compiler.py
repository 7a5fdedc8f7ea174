"""Compiler: transform TypeSpecs into an executable ValidationPlan."""

from __future__ import annotations

import logging

from vouch.exceptions.spec import PlanError
from vouch.model.path import Path
from vouch.plan.model import (
    CheckPlan,
    CustomStep,
    FieldPlan,
    RuleStep,
    ShapePlan,
    Step,
    TypePlan,
    ValidationPlan,
    VariantPlan,
)
from vouch.spec.model import FieldSpec, Shape, StructCheck, TypeSpec
from vouch.spec.registry import SpecRegistry, default_registry

logger = logging.getLogger(__name__)


def compile_plan(spec: TypeSpec | str, registry: SpecRegistry = default_registry) -> ValidationPlan:
    """Compile ``spec`` and every type it references into one plan.

    Nested targets are resolved through ``registry``; an unknown target
    raises PlanError here rather than during validation.
    """
    root = spec if isinstance(spec, TypeSpec) else registry.get(spec)
    compiled: dict[str, TypePlan] = {}
    pending: list[TypeSpec] = [root]
    while pending:
        current = pending.pop()
        if current.name in compiled:
            continue
        type_plan, targets = _compile_type(current)
        compiled[current.name] = type_plan
        for target in targets:
            if target in compiled:
                continue
            if target == root.name:
                pending.append(root)
                continue
            try:
                pending.append(registry.get(target))
            except PlanError as exc:
                raise PlanError(f"type '{current.name}' references unknown type '{target}'") from exc

    logger.debug("Compiled validation plan: %s (%d types)", root.name, len(compiled))
    return ValidationPlan(root=root.name, types=compiled)


def _compile_type(spec: TypeSpec) -> tuple[TypePlan, list[str]]:
    targets: list[str] = []
    fields = _compile_fields(spec.fields, targets)
    variants: dict[str, VariantPlan] = {}
    for variant in spec.variants:
        variants[variant.name] = VariantPlan(
            name=variant.name,
            kind=variant.kind,
            fields=_compile_fields(variant.fields, targets),
            checks=_compile_checks(variant.checks),
            match=variant.match,
        )
    plan = TypePlan(
        name=spec.name,
        kind=spec.kind,
        fields=fields,
        checks=_compile_checks(spec.checks),
        variants=variants,
        tag_key=spec.tag_key,
        payload_key=spec.payload_key,
    )
    return plan, targets


def _compile_fields(fields: tuple[FieldSpec, ...], targets: list[str]) -> tuple[FieldPlan, ...]:
    return tuple(
        FieldPlan(key=spec.key, path=Path.from_key(spec.key), shape=_compile_shape(spec.shape, targets))
        for spec in fields
    )


def _compile_shape(shape: Shape, targets: list[str]) -> ShapePlan:
    steps: list[Step] = [RuleStep(application.rule, application.when) for application in shape.rules]
    steps.extend(CustomStep(custom.func, custom.name) for custom in shape.customs)
    inner = _compile_shape(shape.inner, targets) if shape.inner is not None else None
    if shape.target is not None:
        targets.append(shape.target)
    return ShapePlan(kind=shape.kind, steps=tuple(steps), inner=inner, target=shape.target)


def _compile_checks(checks: tuple[StructCheck, ...]) -> tuple[CheckPlan, ...]:
    return tuple(
        CheckPlan(predicate=check.predicate, code=check.code, message=check.message, path=check.path, when=check.when)
        for check in checks
    )
