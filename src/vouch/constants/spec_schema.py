"""Allowed keys and enumerations for declarative specification documents."""

from __future__ import annotations

SPEC_VERSION: int = 1

ALLOWED_DOCUMENT_KEYS: frozenset[str] = frozenset({"version", "types"})
REQUIRED_DOCUMENT_KEYS: tuple[str, ...] = ("version", "types")

VALID_TYPE_KINDS: frozenset[str] = frozenset({"record", "tuple", "sum"})
ALLOWED_TYPE_KEYS: frozenset[str] = frozenset(
    {
        "kind",
        "fields",
        "variants",
        "checks",
        "tag",
        "payload",
    }
)

VALID_SHAPES: frozenset[str] = frozenset({"scalar", "optional", "collection", "nested"})
ALLOWED_FIELD_KEYS: frozenset[str] = frozenset({"name", "shape", "rules", "custom", "type", "inner", "each"})
ALLOWED_SHAPE_KEYS: frozenset[str] = ALLOWED_FIELD_KEYS - {"name"}

VALID_VARIANT_KINDS: frozenset[str] = frozenset({"unit", "positional", "named"})
ALLOWED_VARIANT_KEYS: frozenset[str] = frozenset({"name", "kind", "fields", "checks"})

ALLOWED_CHECK_KEYS: frozenset[str] = frozenset({"check", "code", "message", "path", "when"})
ALLOWED_PREDICATE_KEYS: frozenset[str] = frozenset({"field", "op", "other", "value"})

# Keys inside a rule's parameter mapping that customize the rule instead of
# being passed to its factory.
RULE_CUSTOMIZATION_KEYS: frozenset[str] = frozenset({"code", "message", "meta", "when"})

COMBINATOR_KINDS: frozenset[str] = frozenset({"all_of", "any_of", "not"})

DEFAULT_TAG_KEY: str = "type"
DEFAULT_PAYLOAD_KEY: str = "values"
