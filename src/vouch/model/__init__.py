"""Core data models for Vouch."""

from .path import FieldSegment, IndexSegment, Path, PathLike, PathSegment
from .violation import Violation

__all__ = [
    "FieldSegment",
    "IndexSegment",
    "Path",
    "PathLike",
    "PathSegment",
    "Violation",
]
