"""Plan compiler and executor."""

from .compiler import compile_plan
from .executor import execute
from .model import CheckPlan, CustomStep, FieldPlan, RuleStep, ShapePlan, TypePlan, ValidationPlan, VariantPlan

__all__ = [
    "CheckPlan",
    "CustomStep",
    "FieldPlan",
    "RuleStep",
    "ShapePlan",
    "TypePlan",
    "ValidationPlan",
    "VariantPlan",
    "compile_plan",
    "execute",
]
