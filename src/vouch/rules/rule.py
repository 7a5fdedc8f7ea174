"""Composable, immutable validation rules.

A rule wraps an evaluator ``value -> ValidationError`` that reports
violations at the root path; the plan executor (or :meth:`Rule.map_path`)
relocates them under the field being validated. Rules are shared by
reference: combinators and customizations return new rules and never touch
the wrapped ones.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from vouch.constants.codes import CUSTOM, DEFAULT_NEGATED_MESSAGE, INVALID_TYPE, NEGATED
from vouch.constants.config import VALID_OR_POLICIES
from vouch.exceptions.rules import RuleConstructionError
from vouch.exceptions.validation import ValidationError
from vouch.model.path import Path, PathLike
from vouch.types.common import OrPolicy

type Evaluator[T] = Callable[[T], ValidationError]


@dataclass(frozen=True, eq=False)
class Rule[T]:
    """An immutable validation predicate over a single value.

    ``kind`` and ``params`` describe the rule for schema generators;
    ``code``/``message``/``meta`` hold caller customizations that are applied
    to every violation the rule reports.
    """

    evaluate: Evaluator[T] = field(repr=False)
    kind: str = CUSTOM
    params: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[Rule[Any], ...] = ()
    default_code: str | None = None
    code: str | None = None
    message: str | None = None
    meta: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.params, MappingProxyType):
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @classmethod
    def predicate(
        cls,
        test: Callable[[T], bool],
        *,
        kind: str,
        code: str,
        message: str,
        params: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
        details: Callable[[T], Mapping[str, Any]] | None = None,
        catch_type_errors: bool = False,
    ) -> Rule[T]:
        """Build a leaf rule that reports one violation when ``test`` is false.

        ``details`` computes value-dependent metadata (``actual`` counts and
        similar) only when the test fails. With ``catch_type_errors`` a
        ``TypeError`` from ``test`` is reported as ``invalid_type``; otherwise
        it propagates to the caller.
        """
        static_meta = dict(meta or {})

        def evaluate(value: T) -> ValidationError:
            try:
                passed = test(value)
            except TypeError:
                if not catch_type_errors:
                    raise
                return ValidationError.single(
                    Path.root(),
                    INVALID_TYPE,
                    f"Unsupported value type {type(value).__name__}",
                    {"rule": kind, "type": type(value).__name__},
                )
            if passed:
                return ValidationError()
            extra = static_meta if details is None else {**static_meta, **details(value)}
            return ValidationError.single(Path.root(), code, message, extra)

        return cls(evaluate, kind=kind, params=params or {}, default_code=code)

    @classmethod
    def custom(
        cls,
        func: Callable[[T], ValidationError | None],
        *,
        kind: str = CUSTOM,
        params: Mapping[str, Any] | None = None,
    ) -> Rule[T]:
        """Wrap a user callable; returning ``None`` means valid.

        Exceptions raised by ``func`` propagate unchanged.
        """

        def evaluate(value: T) -> ValidationError:
            result = func(value)
            return ValidationError() if result is None else result

        return cls(evaluate, kind=kind, params=params or {"function": callable_name(func)})

    @classmethod
    def accept(cls) -> Rule[Any]:
        """A rule that never reports anything."""
        return cls(lambda _value: ValidationError(), kind="accept")

    def apply(self, value: T) -> ValidationError:
        """Evaluate against ``value`` and apply code/message/meta customizations."""
        err = self.evaluate(value)
        if not err or (self.code is None and self.message is None and not self.meta):
            return err
        customized = ValidationError()
        for violation in err:
            if self.code is not None:
                violation = violation.with_code(self.code)
            if self.message is not None:
                violation = violation.with_message(self.message)
            for key, meta_value in self.meta:
                violation = violation.with_meta(key, meta_value)
            customized.append(violation)
        return customized

    def __call__(self, value: T) -> ValidationError:
        return self.apply(value)

    @property
    def effective_code(self) -> str | None:
        return self.code if self.code is not None else self.default_code

    def with_code(self, code: str) -> Rule[T]:
        return replace(self, code=code)

    def with_message(self, message: str) -> Rule[T]:
        return replace(self, message=message)

    def with_meta(self, key: str, value: Any) -> Rule[T]:
        """Attach metadata; a repeated key replaces the previous value."""
        kept = tuple((k, v) for k, v in self.meta if k != key)
        return replace(self, meta=kept + ((key, str(value)),))

    def and_(self, other: Rule[T]) -> Rule[T]:
        """Evaluate both rules and report all violations, ``self`` first."""

        def evaluate(value: T) -> ValidationError:
            err = ValidationError(self.apply(value))
            err.extend(other.apply(value))
            return err

        return Rule(evaluate, kind="and", children=(self, other))

    def or_(self, other: Rule[T], policy: OrPolicy = "last") -> Rule[T]:
        """Pass when either rule passes.

        When both fail, ``policy="last"`` reports only ``other``'s violations
        and ``policy="all"`` reports both, ``self`` first.
        """
        if policy not in VALID_OR_POLICIES:
            raise RuleConstructionError("or", f"policy must be one of {sorted(VALID_OR_POLICIES)}, got {policy!r}")

        def evaluate(value: T) -> ValidationError:
            first = self.apply(value)
            if not first:
                return first
            second = other.apply(value)
            if not second or policy == "last":
                return second
            return ValidationError([*first, *second])

        return Rule(evaluate, kind="or", params={"policy": policy}, children=(self, other))

    def not_(self, code: str = NEGATED, message: str = DEFAULT_NEGATED_MESSAGE) -> Rule[T]:
        """Invert the outcome: one violation when the wrapped rule passes."""

        def evaluate(value: T) -> ValidationError:
            if self.apply(value):
                return ValidationError()
            return ValidationError.single(Path.root(), code, message)

        return Rule(evaluate, kind="not", children=(self,), default_code=code)

    def when(self, predicate: Callable[[T], bool]) -> Rule[T]:
        """Only evaluate when ``predicate(value)`` is true."""

        def evaluate(value: T) -> ValidationError:
            if not predicate(value):
                return ValidationError()
            return self.apply(value)

        return Rule(evaluate, kind="when", children=(self,), default_code=self.effective_code)

    def map_path(self, prefix: PathLike) -> Rule[T]:
        """Relocate every reported violation under ``prefix``."""
        prefix_path = Path.coerce(prefix)

        def evaluate(value: T) -> ValidationError:
            return self.apply(value).prefixed(prefix_path)

        return Rule(
            evaluate,
            kind="map_path",
            params={"prefix": str(prefix_path)},
            children=(self,),
            default_code=self.effective_code,
        )

    def __and__(self, other: Rule[T]) -> Rule[T]:
        return self.and_(other)

    def __or__(self, other: Rule[T]) -> Rule[T]:
        return self.or_(other)

    def __invert__(self) -> Rule[T]:
        return self.not_()

    def describe(self) -> dict[str, Any]:
        """Read-only description for schema and code generators."""
        description: dict[str, Any] = {"kind": self.kind, "params": dict(self.params)}
        if self.effective_code is not None:
            description["code"] = self.effective_code
        if self.message is not None:
            description["message"] = self.message
        if self.meta:
            description["meta"] = dict(self.meta)
        if self.children:
            description["children"] = [child.describe() for child in self.children]
        return description


def all_of(*rules: Rule[Any]) -> Rule[Any]:
    """Combine rules with :meth:`Rule.and_`; no rules means always valid."""
    if not rules:
        return Rule.accept()
    return functools.reduce(Rule.and_, rules)


def any_of(*rules: Rule[Any], policy: OrPolicy = "last") -> Rule[Any]:
    """Combine rules with :meth:`Rule.or_` under one failure-reporting policy."""
    if not rules:
        raise RuleConstructionError("any_of", "at least one alternative is required")
    return functools.reduce(lambda left, right: left.or_(right, policy), rules)


def callable_name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or getattr(func, "__name__", None) or type(func).__name__
