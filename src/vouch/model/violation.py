"""Single constraint failure with location, stable code and metadata."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from vouch.model.path import Path
from vouch.types.common import JsonObject


def _freeze_meta(meta: Mapping[str, Any] | None) -> Mapping[str, str]:
    if not meta:
        return MappingProxyType({})
    return MappingProxyType({str(key): str(value) for key, value in meta.items()})


@dataclass(frozen=True)
class Violation:
    """A reported constraint failure.

    ``code`` is a machine-stable discriminator; ``message`` is human text and
    may be overridden; ``meta`` holds key-unique string parameters such as
    ``min``/``max`` that clients use to render their own messages.
    """

    path: Path
    code: str
    message: str
    meta: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path.coerce(self.path))
        if not isinstance(self.meta, MappingProxyType):
            object.__setattr__(self, "meta", _freeze_meta(self.meta))

    def __hash__(self) -> int:
        return hash((self.path, self.code, self.message, tuple(sorted(self.meta.items()))))

    def with_prefix(self, prefix: Path) -> Violation:
        """Relocate under ``prefix``; the existing path is shared as the suffix."""
        if prefix.is_root:
            return self
        return replace(self, path=prefix.joined(self.path))

    def with_code(self, code: str) -> Violation:
        return replace(self, code=code)

    def with_message(self, message: str) -> Violation:
        return replace(self, message=message)

    def with_meta(self, key: str, value: Any) -> Violation:
        """Return a copy with ``key`` set; an existing value for ``key`` is replaced."""
        merged = dict(self.meta)
        merged[key] = str(value)
        return replace(self, meta=MappingProxyType(merged))

    def to_dict(self) -> JsonObject:
        """Serialize to the ``{path, code, message, meta}`` wire shape."""
        return {
            "path": str(self.path),
            "code": self.code,
            "message": self.message,
            "meta": dict(self.meta),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Violation:
        """Inverse of :meth:`to_dict`."""
        return cls(
            path=Path.parse(str(data.get("path", ""))),
            code=str(data["code"]),
            message=str(data.get("message", "")),
            meta=_freeze_meta(data.get("meta")),
        )
