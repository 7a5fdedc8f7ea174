"""Central registry of rule kinds addressable from specification documents.

Maps a rule kind name to its factory and the parameters it accepts. Only
registered kinds can be referenced declaratively. No eval, no dynamic
imports.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from vouch.exceptions.rules import RuleConstructionError
from vouch.rules import choice, collection, numeric, string, temporal
from vouch.rules.rule import Rule


@dataclass(frozen=True)
class RuleFactory:
    """A registered rule constructor and its parameter contract."""

    kind: str
    build: Callable[..., Rule[Any]]
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()

    @property
    def accepted(self) -> frozenset[str]:
        return frozenset(self.required) | frozenset(self.optional)

    def create(self, params: Mapping[str, Any]) -> Rule[Any]:
        """Build the rule, raising RuleConstructionError on bad parameters."""
        unknown = set(params) - self.accepted
        if unknown:
            raise RuleConstructionError(self.kind, f"unknown parameters: {sorted(unknown)}")
        missing = [name for name in self.required if name not in params]
        if missing:
            raise RuleConstructionError(self.kind, f"missing parameters: {missing}")
        return self.build(**params)


def _instant(kind: str, value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as exc:
        raise RuleConstructionError(kind, f"'limit' must be an ISO-8601 datetime, got {value!r}") from exc


def _before(limit: Any) -> Rule[Any]:
    return temporal.before(_instant("before", limit))


def _after(limit: Any) -> Rule[Any]:
    return temporal.after(_instant("after", limit))


def _one_of(values: Any) -> Rule[Any]:
    if isinstance(values, (str, bytes)) or not hasattr(values, "__iter__"):
        raise RuleConstructionError("one_of", f"'values' must be a list, got {values!r}")
    return choice.one_of(values)


_FACTORIES: tuple[RuleFactory, ...] = (
    RuleFactory("email", string.email),
    RuleFactory("url", string.url),
    RuleFactory("non_empty", string.non_empty),
    RuleFactory("non_blank", string.non_blank),
    RuleFactory("min_len", string.min_len, required=("min",)),
    RuleFactory("max_len", string.max_len, required=("max",)),
    RuleFactory("length", string.length, required=("min", "max")),
    RuleFactory("len_chars", string.len_chars, required=("min", "max")),
    RuleFactory("alphanumeric", string.alphanumeric),
    RuleFactory("alpha_only", string.alpha_only),
    RuleFactory("numeric_string", string.numeric_string),
    RuleFactory("ascii", string.ascii),
    RuleFactory("no_whitespace", string.no_whitespace),
    RuleFactory("contains", string.contains, required=("substring",)),
    RuleFactory("starts_with", string.starts_with, required=("prefix",)),
    RuleFactory("ends_with", string.ends_with, required=("suffix",)),
    RuleFactory("matches_regex", string.matches_regex, required=("pattern",)),
    RuleFactory("range", numeric.range, required=("min", "max")),
    RuleFactory("min", numeric.min, required=("min",)),
    RuleFactory("max", numeric.max, required=("max",)),
    RuleFactory("positive", numeric.positive),
    RuleFactory("negative", numeric.negative),
    RuleFactory("non_zero", numeric.non_zero),
    RuleFactory("finite", numeric.finite),
    RuleFactory("multiple_of", numeric.multiple_of, required=("divisor",)),
    RuleFactory("min_items", collection.min_items, required=("min",)),
    RuleFactory("max_items", collection.max_items, required=("max",)),
    RuleFactory("unique", collection.unique),
    RuleFactory("equals", choice.equals, required=("expected",)),
    RuleFactory("not_equals", choice.not_equals, required=("forbidden",)),
    RuleFactory("one_of", _one_of, required=("values",)),
    RuleFactory("past", temporal.past),
    RuleFactory("future", temporal.future),
    RuleFactory("before", _before, required=("limit",)),
    RuleFactory("after", _after, required=("limit",)),
    RuleFactory("age_range", temporal.age_range, required=("min", "max")),
)

RULE_REGISTRY: dict[str, RuleFactory] = {factory.kind: factory for factory in _FACTORIES}


def build_rule(kind: str, params: Mapping[str, Any] | None = None) -> Rule[Any]:
    """Build a registered rule by kind name."""
    factory = RULE_REGISTRY.get(kind)
    if factory is None:
        raise RuleConstructionError(kind, "rule kind is not registered")
    return factory.create(params or {})
