"""Shared exception hierarchy for Vouch."""

from __future__ import annotations

from .async_checks import AsyncCheckError
from .base import VouchError
from .config import ConfigError
from .rules import RuleConstructionError
from .spec import PlanError, SpecCompileError, SpecError, SpecSchemaError
from .validation import ValidationError

__all__ = [
    "AsyncCheckError",
    "ConfigError",
    "PlanError",
    "RuleConstructionError",
    "SpecCompileError",
    "SpecError",
    "SpecSchemaError",
    "ValidationError",
    "VouchError",
]
