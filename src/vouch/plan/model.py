"""Executable validation plans compiled from TypeSpecs."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from vouch.exceptions.spec import PlanError
from vouch.exceptions.validation import ValidationError
from vouch.model.path import Path
from vouch.rules.rule import Rule
from vouch.types.common import FieldKey, Predicate, ShapeKind, TypeKind, VariantKind


@dataclass(frozen=True)
class RuleStep:
    rule: Rule[Any]
    when: Predicate | None = None


@dataclass(frozen=True)
class CustomStep:
    func: Callable[[Any], ValidationError | None] = field(repr=False)
    name: str = ""


type Step = RuleStep | CustomStep


@dataclass(frozen=True)
class ShapePlan:
    """Steps for one level of a field value followed by its structural step."""

    kind: ShapeKind
    steps: tuple[Step, ...] = ()
    inner: ShapePlan | None = None
    target: str | None = None


@dataclass(frozen=True)
class FieldPlan:
    key: FieldKey
    path: Path
    shape: ShapePlan


@dataclass(frozen=True)
class CheckPlan:
    predicate: Predicate = field(repr=False)
    code: str
    message: str
    path: Path
    when: Predicate | None = field(default=None, repr=False)


@dataclass(frozen=True)
class VariantPlan:
    name: str
    kind: VariantKind
    fields: tuple[FieldPlan, ...] = ()
    checks: tuple[CheckPlan, ...] = ()
    match: type | None = None


@dataclass(frozen=True)
class TypePlan:
    """Compiled form of one type; variants are indexed by name."""

    name: str
    kind: TypeKind
    fields: tuple[FieldPlan, ...] = ()
    checks: tuple[CheckPlan, ...] = ()
    variants: Mapping[str, VariantPlan] = field(default_factory=dict)
    tag_key: str = ""
    payload_key: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.variants, MappingProxyType):
            object.__setattr__(self, "variants", MappingProxyType(dict(self.variants)))


@dataclass(frozen=True)
class ValidationPlan:
    """Compiled plans for a root type and every type it reaches."""

    root: str
    types: Mapping[str, TypePlan]

    def __post_init__(self) -> None:
        if not isinstance(self.types, MappingProxyType):
            object.__setattr__(self, "types", MappingProxyType(dict(self.types)))
        if self.root not in self.types:
            raise PlanError(f"plan has no entry for its root type '{self.root}'")

    @property
    def root_plan(self) -> TypePlan:
        return self.types[self.root]

    def type_plan(self, name: str) -> TypePlan:
        plan = self.types.get(name)
        if plan is None:
            raise PlanError(f"plan for '{self.root}' does not include type '{name}'")
        return plan
