"""Ordered, mergeable collection of violations.

``ValidationError`` is both the value returned by every rule and plan (empty
means valid) and the exception raised by :func:`vouch.validate`, so callers
cannot ignore violations without choosing to.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from vouch.exceptions.base import VouchError
from vouch.model.path import Path, PathLike
from vouch.model.violation import Violation
from vouch.types.common import JsonObject


class ValidationError(VouchError):
    """Violations in the order their checks ran."""

    def __init__(self, violations: Iterable[Violation] = ()) -> None:
        self._violations: list[Violation] = list(violations)
        super().__init__()

    @classmethod
    def single(
        cls,
        path: PathLike,
        code: str,
        message: str,
        meta: Mapping[str, Any] | None = None,
    ) -> ValidationError:
        err = cls()
        err.push(path, code, message, meta)
        return err

    @property
    def violations(self) -> tuple[Violation, ...]:
        return tuple(self._violations)

    def push(
        self,
        path: PathLike,
        code: str,
        message: str,
        meta: Mapping[str, Any] | None = None,
    ) -> None:
        """Append a new violation built from its parts."""
        self._violations.append(Violation(path=Path.coerce(path), code=code, message=message, meta=meta or {}))

    def append(self, violation: Violation) -> None:
        self._violations.append(violation)

    def extend(self, other: Iterable[Violation]) -> None:
        """Append every violation of ``other`` unchanged, preserving order."""
        self._violations.extend(other)

    def merge_prefixed(self, prefix: PathLike, other: Iterable[Violation]) -> None:
        """Append ``other``'s violations relocated under ``prefix``.

        Only the prefix nodes are allocated; each original path is shared as
        the suffix of the new one.
        """
        prefix_path = Path.coerce(prefix)
        if prefix_path.is_root:
            self._violations.extend(other)
            return
        self._violations.extend(violation.with_prefix(prefix_path) for violation in other)

    def prefixed(self, prefix: PathLike) -> ValidationError:
        """Return a new collection with every path relocated under ``prefix``."""
        result = ValidationError()
        result.merge_prefixed(prefix, self._violations)
        return result

    def is_empty(self) -> bool:
        return not self._violations

    def raise_if_invalid(self) -> None:
        """Raise ``self`` when any violation was collected."""
        if self._violations:
            raise self

    def field_errors(self) -> dict[str, list[Violation]]:
        """Group violations by rendered path, keeping first-seen path order."""
        grouped: dict[str, list[Violation]] = {}
        for violation in self._violations:
            grouped.setdefault(str(violation.path), []).append(violation)
        return grouped

    def field_messages(self) -> dict[str, list[str]]:
        """Group messages by rendered path (field-keyed API responses)."""
        return {path: [v.message for v in items] for path, items in self.field_errors().items()}

    def map_messages(self, transform: Callable[[Violation], str]) -> ValidationError:
        """Rewrite every message; path, code and metadata are preserved."""
        return ValidationError(v.with_message(transform(v)) for v in self._violations)

    def filter(self, predicate: Callable[[Violation], bool]) -> ValidationError:
        """Keep only the violations matching ``predicate``, in order."""
        return ValidationError(v for v in self._violations if predicate(v))

    def codes(self) -> list[str]:
        return [v.code for v in self._violations]

    def to_list(self) -> list[JsonObject]:
        return [v.to_dict() for v in self._violations]

    @classmethod
    def from_list(cls, items: Iterable[Mapping[str, Any]]) -> ValidationError:
        return cls(Violation.from_dict(item) for item in items)

    def format(self) -> str:
        """Format as one ``[code] path message`` line per violation."""
        return "\n".join(format_violation(v) for v in self._violations)

    def __iter__(self) -> Iterator[Violation]:
        return iter(tuple(self._violations))

    def __len__(self) -> int:
        return len(self._violations)

    def __bool__(self) -> bool:
        return bool(self._violations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self._violations == other._violations

    # exceptions stay hashable by identity for traceback bookkeeping
    __hash__ = VouchError.__hash__

    def __str__(self) -> str:
        if not self._violations:
            return "No validation errors"
        if len(self._violations) == 1:
            return f"Validation error: {self._violations[0].message}"
        return f"Validation failed with {len(self._violations)} errors"

    def __repr__(self) -> str:
        return f"ValidationError({self._violations!r})"


def format_violation(violation: Violation) -> str:
    """Format a violation as a human-readable single line."""
    location = str(violation.path) or "<root>"
    return f"[{violation.code}] {location} {violation.message}"
