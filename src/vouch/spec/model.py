"""In-memory specification (IR) of a type's declarative constraints.

A ``TypeSpec`` is built once per type, either from Python declarations
(:mod:`vouch.spec.declare`) or from a specification document
(:mod:`vouch.spec.loader`), and is immutable afterwards. The plan compiler
turns it into an executable :class:`~vouch.plan.model.ValidationPlan`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from vouch.constants.config import DEFAULT_CHECK_CODE, DEFAULT_CHECK_MESSAGE
from vouch.constants.spec_schema import DEFAULT_PAYLOAD_KEY, DEFAULT_TAG_KEY
from vouch.exceptions.spec import SpecCompileError
from vouch.exceptions.validation import ValidationError
from vouch.model.path import Path
from vouch.rules.rule import Rule
from vouch.types.common import FieldKey, Predicate, ShapeKind, TypeKind, VariantKind


@dataclass(frozen=True)
class RuleApplication:
    """A rule applied to a field value, optionally guarded by ``when(value)``."""

    rule: Rule[Any]
    when: Predicate | None = None

    def describe(self) -> dict[str, Any]:
        description = self.rule.describe()
        if self.when is not None:
            description["guarded"] = True
        return description


@dataclass(frozen=True)
class CustomValidator:
    """User function with the rule contract: value -> ValidationError (or None)."""

    func: Callable[[Any], ValidationError | None] = field(repr=False)
    name: str = ""


@dataclass(frozen=True)
class Shape:
    """How a field value is walked.

    ``rules`` and ``customs`` apply to the value at this level; ``inner`` is
    the element (collection) or present-value (optional) shape; ``target``
    names the nested type.
    """

    kind: ShapeKind = "scalar"
    rules: tuple[RuleApplication, ...] = ()
    customs: tuple[CustomValidator, ...] = ()
    inner: Shape | None = None
    target: str | None = None

    def __post_init__(self) -> None:
        if self.kind in ("optional", "collection") and self.inner is None:
            raise SpecCompileError(f"{self.kind} shape requires an inner shape")
        if self.kind in ("scalar", "nested") and self.inner is not None:
            raise SpecCompileError(f"{self.kind} shape must not have an inner shape")
        if self.kind == "nested" and not self.target:
            raise SpecCompileError("nested shape requires a target type name")
        if self.kind != "nested" and self.target is not None:
            raise SpecCompileError(f"{self.kind} shape must not name a target type")

    @classmethod
    def scalar(cls, *rules: Rule[Any] | RuleApplication) -> Shape:
        return cls("scalar", rules=_applications(rules))

    @classmethod
    def optional(cls, inner: Shape) -> Shape:
        return cls("optional", inner=inner)

    @classmethod
    def collection(cls, inner: Shape, *rules: Rule[Any] | RuleApplication) -> Shape:
        return cls("collection", rules=_applications(rules), inner=inner)

    @classmethod
    def nested(cls, target: str, *rules: Rule[Any] | RuleApplication) -> Shape:
        return cls("nested", rules=_applications(rules), target=target)

    def describe(self) -> dict[str, Any]:
        description: dict[str, Any] = {"shape": self.kind}
        if self.rules:
            description["rules"] = [application.describe() for application in self.rules]
        if self.customs:
            description["custom"] = [custom.name for custom in self.customs]
        if self.inner is not None:
            description["inner"] = self.inner.describe()
        if self.target is not None:
            description["type"] = self.target
        return description


@dataclass(frozen=True)
class FieldSpec:
    """A record field (``str`` key) or tuple-style position (``int`` key)."""

    key: FieldKey
    shape: Shape

    def describe(self) -> dict[str, Any]:
        return {"key": self.key, **self.shape.describe()}


@dataclass(frozen=True)
class StructCheck:
    """Cross-field invariant over the whole instance, run after field checks."""

    predicate: Predicate = field(repr=False)
    code: str = DEFAULT_CHECK_CODE
    message: str = DEFAULT_CHECK_MESSAGE
    when: Predicate | None = field(default=None, repr=False)
    path: Path = field(default_factory=Path.root)
    source: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path.coerce(self.path))

    def describe(self) -> dict[str, Any]:
        description: dict[str, Any] = {"code": self.code, "message": self.message, "path": str(self.path)}
        if self.source:
            description["check"] = self.source
        if self.when is not None:
            description["guarded"] = True
        return description


@dataclass(frozen=True)
class VariantSpec:
    """One case of a sum type."""

    name: str
    kind: VariantKind = "unit"
    fields: tuple[FieldSpec, ...] = ()
    checks: tuple[StructCheck, ...] = ()
    match: type | None = None

    def __post_init__(self) -> None:
        if self.kind == "unit" and (self.fields or self.checks):
            raise SpecCompileError(f"unit variant '{self.name}' cannot carry fields or checks")
        _check_keys(f"variant '{self.name}'", self.fields, positional=self.kind == "positional")

    def describe(self) -> dict[str, Any]:
        description: dict[str, Any] = {"name": self.name, "kind": self.kind}
        if self.fields:
            description["fields"] = [spec.describe() for spec in self.fields]
        if self.checks:
            description["checks"] = [check.describe() for check in self.checks]
        return description


@dataclass(frozen=True)
class TypeSpec:
    """Declarative constraint set for one record, tuple-style or sum type."""

    name: str
    kind: TypeKind = "record"
    fields: tuple[FieldSpec, ...] = ()
    variants: tuple[VariantSpec, ...] = ()
    checks: tuple[StructCheck, ...] = ()
    tag_key: str = DEFAULT_TAG_KEY
    payload_key: str = DEFAULT_PAYLOAD_KEY

    def __post_init__(self) -> None:
        if self.kind == "sum":
            if self.fields:
                raise SpecCompileError(f"sum type '{self.name}' declares fields; put them on its variants")
            if not self.variants:
                raise SpecCompileError(f"sum type '{self.name}' needs at least one variant")
            names = [variant.name for variant in self.variants]
            duplicates = sorted({name for name in names if names.count(name) > 1})
            if duplicates:
                raise SpecCompileError(f"sum type '{self.name}' has duplicate variants: {duplicates}")
        elif self.variants:
            raise SpecCompileError(f"{self.kind} type '{self.name}' cannot declare variants")
        _check_keys(f"type '{self.name}'", self.fields, positional=self.kind == "tuple")

    def field(self, key: FieldKey) -> FieldSpec:
        for spec in self.fields:
            if spec.key == key:
                return spec
        raise KeyError(key)

    def variant(self, name: str) -> VariantSpec:
        for variant in self.variants:
            if variant.name == name:
                return variant
        raise KeyError(name)

    def describe(self) -> dict[str, Any]:
        """Read-only projection used by schema and code generators."""
        description: dict[str, Any] = {"name": self.name, "kind": self.kind}
        if self.fields:
            description["fields"] = [spec.describe() for spec in self.fields]
        if self.variants:
            description["variants"] = [variant.describe() for variant in self.variants]
            description["tag"] = self.tag_key
        if self.checks:
            description["checks"] = [check.describe() for check in self.checks]
        return description


def _applications(rules: tuple[Rule[Any] | RuleApplication, ...]) -> tuple[RuleApplication, ...]:
    return tuple(rule if isinstance(rule, RuleApplication) else RuleApplication(rule) for rule in rules)


def _check_keys(owner: str, fields: tuple[FieldSpec, ...], *, positional: bool) -> None:
    seen: set[FieldKey] = set()
    for spec in fields:
        if positional and (isinstance(spec.key, bool) or not isinstance(spec.key, int) or spec.key < 0):
            raise SpecCompileError(f"{owner}: positional field keys must be non-negative ints, got {spec.key!r}")
        if not positional and (not isinstance(spec.key, str) or not spec.key):
            raise SpecCompileError(f"{owner}: field names must be non-empty strings, got {spec.key!r}")
        if spec.key in seen:
            raise SpecCompileError(f"{owner}: duplicate field {spec.key!r}")
        seen.add(spec.key)
