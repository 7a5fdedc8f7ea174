"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

type ShapeKind = Literal["scalar", "optional", "collection", "nested"]
type TypeKind = Literal["record", "tuple", "sum"]
type VariantKind = Literal["unit", "positional", "named"]
type OrPolicy = Literal["last", "all"]

type FieldKey = str | int
type Predicate = Callable[[Any], bool]

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]
