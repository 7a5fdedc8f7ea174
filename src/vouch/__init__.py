"""Vouch: declarative validation with structured, path-addressed violations."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from vouch.async_validate import AsyncCheck, AsyncRule, AsyncValidationContext, validate_async
from vouch.boundary import validate_decoded
from vouch.config import VouchConfig, load_config
from vouch.exceptions import (
    AsyncCheckError,
    ConfigError,
    PlanError,
    RuleConstructionError,
    SpecCompileError,
    SpecError,
    SpecSchemaError,
    ValidationError,
    VouchError,
)
from vouch.model import FieldSegment, IndexSegment, Path, Violation
from vouch.plan import ValidationPlan, compile_plan, execute
from vouch.rules import Rule, all_of, any_of
from vouch.spec import (
    SpecRegistry,
    TypeSpec,
    constrained,
    cross_check,
    declare_variants,
    default_registry,
    each,
    load_spec_document,
    load_spec_file,
    validated,
)
from vouch.validation import check, check_value, plan_of, spec_of, validate, validate_value

__all__ = [
    "AsyncCheck",
    "AsyncCheckError",
    "AsyncRule",
    "AsyncValidationContext",
    "ConfigError",
    "FieldSegment",
    "IndexSegment",
    "Path",
    "PlanError",
    "Rule",
    "RuleConstructionError",
    "SpecCompileError",
    "SpecError",
    "SpecRegistry",
    "SpecSchemaError",
    "TypeSpec",
    "ValidationError",
    "ValidationPlan",
    "Violation",
    "VouchConfig",
    "VouchError",
    "__version__",
    "all_of",
    "any_of",
    "check",
    "check_value",
    "compile_plan",
    "constrained",
    "cross_check",
    "declare_variants",
    "default_registry",
    "each",
    "execute",
    "load_config",
    "load_spec_document",
    "load_spec_file",
    "plan_of",
    "spec_of",
    "validate",
    "validate_async",
    "validate_decoded",
    "validate_value",
    "validated",
]

try:
    __version__ = version("vouch")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
