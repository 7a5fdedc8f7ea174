"""Specification IR, declaration layer and document loader."""

from .declare import constrained, cross_check, declare_variants, each, validated
from .loader import load_spec_document, load_spec_file
from .model import CustomValidator, FieldSpec, RuleApplication, Shape, StructCheck, TypeSpec, VariantSpec
from .registry import SpecRegistry, default_registry

__all__ = [
    "CustomValidator",
    "FieldSpec",
    "RuleApplication",
    "Shape",
    "SpecRegistry",
    "StructCheck",
    "TypeSpec",
    "VariantSpec",
    "constrained",
    "cross_check",
    "declare_variants",
    "default_registry",
    "each",
    "load_spec_document",
    "load_spec_file",
    "validated",
]
