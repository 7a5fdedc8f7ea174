"""Shared type aliases for Vouch."""

from .common import (
    FieldKey,
    JsonObject,
    JsonValue,
    OrPolicy,
    Predicate,
    ShapeKind,
    TypeKind,
    VariantKind,
)

__all__ = [
    "FieldKey",
    "JsonObject",
    "JsonValue",
    "OrPolicy",
    "Predicate",
    "ShapeKind",
    "TypeKind",
    "VariantKind",
]
