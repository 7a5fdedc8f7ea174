"""Uniform read access to fields of validated instances.

Instances may be objects (attribute access), mappings (key access) or
sequences (positional access). Tuple-style dataclasses are read by field
position.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any, Final


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def read_field(instance: Any, key: str | int) -> Any:
    """Return the value stored under ``key`` or ``MISSING`` when absent."""
    if isinstance(key, int):
        return _read_position(instance, key)
    if isinstance(instance, Mapping):
        return instance.get(key, MISSING)
    return getattr(instance, key, MISSING)


def is_absent(value: Any) -> bool:
    return value is MISSING or value is None


def _read_position(instance: Any, index: int) -> Any:
    if isinstance(instance, Mapping):
        if index in instance:
            return instance[index]
        return instance.get(str(index), MISSING)
    if dataclasses.is_dataclass(instance) and not isinstance(instance, type):
        fields = dataclasses.fields(instance)
        if index < len(fields):
            return getattr(instance, fields[index].name, MISSING)
        return MISSING
    if isinstance(instance, Sequence) and not isinstance(instance, (str, bytes)):
        if index < len(instance):
            return instance[index]
    return MISSING
