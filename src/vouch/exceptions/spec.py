"""Specification and plan exceptions."""

from __future__ import annotations

from vouch.exceptions.base import VouchError


class SpecError(VouchError):
    """Base class for specification errors."""


class SpecSchemaError(SpecError, ValueError):
    """Raised when a specification document violates the document schema."""


class SpecCompileError(SpecError):
    """Raised when a well-formed specification cannot be turned into rules."""


class PlanError(VouchError):
    """Raised when a validation plan is malformed (unknown type, missing variant)."""
