"""Structured locations of violations inside a validated value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class FieldSegment:
    """A named record field."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IndexSegment:
    """A positional segment.

    ``positional=False`` is a collection index and renders as ``[i]``;
    ``positional=True`` is a tuple-style field position and renders like a
    field name (``0``, ``point.1``).
    """

    index: int
    positional: bool = False

    def __str__(self) -> str:
        if self.positional:
            return str(self.index)
        return f"[{self.index}]"


type PathSegment = FieldSegment | IndexSegment

type PathLike = Path | str | int | PathSegment | Iterable[PathSegment] | None


class Path:
    """Immutable, structurally comparable sequence of path segments.

    Stored as a persistent list: the first segment plus the rest of the path.
    Prepending a prefix allocates nodes for the prefix only and shares the
    existing path as its tail.
    """

    __slots__ = ("_head", "_tail", "_length")

    _ROOT: ClassVar[Path]

    _head: PathSegment | None
    _tail: Path | None
    _length: int

    def __init__(self, segments: Iterable[PathSegment] = ()) -> None:
        items = tuple(segments)
        if not items:
            object.__setattr__(self, "_head", None)
            object.__setattr__(self, "_tail", None)
            object.__setattr__(self, "_length", 0)
            return
        tail = Path._ROOT
        for segment in reversed(items[1:]):
            tail = Path._cons(segment, tail)
        object.__setattr__(self, "_head", items[0])
        object.__setattr__(self, "_tail", tail)
        object.__setattr__(self, "_length", tail._length + 1)

    @classmethod
    def _cons(cls, head: PathSegment, tail: Path) -> Path:
        node = object.__new__(cls)
        object.__setattr__(node, "_head", head)
        object.__setattr__(node, "_tail", tail)
        object.__setattr__(node, "_length", tail._length + 1)
        return node

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Path is immutable")

    @classmethod
    def root(cls) -> Path:
        """Return the empty path."""
        return cls._ROOT

    @classmethod
    def of(cls, *parts: str | int | PathSegment) -> Path:
        """Build a path from names (fields), ints (collection indices) or segments."""
        return cls(_segment_from_part(part) for part in parts)

    @classmethod
    def from_key(cls, key: str | int) -> Path:
        """Path of a record field: a name, or a tuple-style position for ints."""
        if isinstance(key, int):
            return cls._cons(IndexSegment(key, positional=True), cls._ROOT)
        return cls._cons(FieldSegment(key), cls._ROOT)

    @classmethod
    def coerce(cls, value: PathLike) -> Path:
        """Accept the forms callers commonly pass as a location."""
        if value is None:
            return cls._ROOT
        if isinstance(value, Path):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, int):
            return cls.from_key(value)
        if isinstance(value, (FieldSegment, IndexSegment)):
            return cls._cons(value, cls._ROOT)
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> Path:
        """Parse the canonical rendering (``booking.guests[0].email``)."""
        segments: list[PathSegment] = []
        current: list[str] = []
        i = 0
        while i < len(text):
            char = text[i]
            if char == ".":
                _flush_name(current, segments)
                i += 1
            elif char == "[":
                _flush_name(current, segments)
                end = text.find("]", i + 1)
                if end == -1:
                    end = len(text)
                token = text[i + 1 : end]
                if token.isdigit():
                    segments.append(IndexSegment(int(token)))
                elif token:
                    segments.append(FieldSegment(token))
                i = end + 1
            else:
                current.append(char)
                i += 1
        _flush_name(current, segments)
        return cls(segments)

    def prepend(self, segment: PathSegment) -> Path:
        """Return ``segment`` followed by this path."""
        return Path._cons(segment, self)

    def joined(self, suffix: Path) -> Path:
        """Return this path followed by ``suffix``; ``suffix`` is shared, not copied."""
        if self._length == 0:
            return suffix
        result = suffix
        for segment in reversed(self.segments):
            result = Path._cons(segment, result)
        return result

    def field(self, name: str) -> Path:
        return self.joined(Path._cons(FieldSegment(name), Path._ROOT))

    def index(self, idx: int) -> Path:
        return self.joined(Path._cons(IndexSegment(idx), Path._ROOT))

    def position(self, idx: int) -> Path:
        return self.joined(Path._cons(IndexSegment(idx, positional=True), Path._ROOT))

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return tuple(self)

    @property
    def is_root(self) -> bool:
        return self._length == 0

    def __iter__(self) -> Iterator[PathSegment]:
        node: Path | None = self
        while node is not None and node._head is not None:
            yield node._head
            node = node._tail

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Path):
            return NotImplemented
        return self._length == other._length and self.segments == other.segments

    def __hash__(self) -> int:
        return hash(self.segments)

    def __str__(self) -> str:
        parts: list[str] = []
        for position, segment in enumerate(self):
            if isinstance(segment, IndexSegment) and not segment.positional:
                parts.append(str(segment))
            else:
                if position > 0:
                    parts.append(".")
                parts.append(str(segment))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"


def _segment_from_part(part: str | int | PathSegment) -> PathSegment:
    if isinstance(part, (FieldSegment, IndexSegment)):
        return part
    if isinstance(part, bool):
        raise TypeError("path parts must be str, int or a segment")
    if isinstance(part, int):
        return IndexSegment(part)
    return FieldSegment(part)


def _flush_name(current: list[str], segments: list[PathSegment]) -> None:
    if not current:
        return
    token = "".join(current)
    current.clear()
    if token.isdigit():
        segments.append(IndexSegment(int(token), positional=True))
    else:
        segments.append(FieldSegment(token))


Path._ROOT = Path()
