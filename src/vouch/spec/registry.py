"""Name -> TypeSpec registry shared by the declaration layer and the loader."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Iterator

from vouch.exceptions.spec import PlanError, SpecCompileError
from vouch.spec.model import TypeSpec

logger = logging.getLogger(__name__)

type SpecResolver = Callable[[], TypeSpec]


class SpecRegistry:
    """Specs keyed by type name.

    Python declarations register a resolver that builds the spec on first
    use, so annotations may reference types defined later in the module.
    A resolved spec is cached and never rebuilt. Resolution is serialized so
    concurrent first lookups all see the same spec.

    ``generation`` increases whenever a registered name is replaced; plan
    caches key on it so a replacement is never served a stale plan.
    """

    def __init__(self, specs: Iterable[TypeSpec] = ()) -> None:
        self._specs: dict[str, TypeSpec] = {}
        self._resolvers: dict[str, SpecResolver] = {}
        self._lock = threading.RLock()
        self._generation = 0
        for spec in specs:
            self.register(spec)

    @property
    def generation(self) -> int:
        return self._generation

    def register(self, spec: TypeSpec, *, replace: bool = False) -> TypeSpec:
        """Add a spec; an existing name is an error unless ``replace`` is set."""
        with self._lock:
            self._claim(spec.name, replace=replace)
            self._specs[spec.name] = spec
        return spec

    def register_lazy(self, name: str, resolver: SpecResolver, *, replace: bool = False) -> None:
        with self._lock:
            self._claim(name, replace=replace)
            self._resolvers[name] = resolver

    def get(self, name: str) -> TypeSpec:
        spec = self._specs.get(name)
        if spec is not None:
            return spec
        with self._lock:
            spec = self._specs.get(name)
            if spec is not None:
                return spec
            resolver = self._resolvers.get(name)
            if resolver is None:
                raise PlanError(f"unknown type '{name}'")
            spec = resolver()
            if spec.name != name:
                raise SpecCompileError(f"resolver for '{name}' produced a spec named '{spec.name}'")
            self._specs[name] = spec
            self._resolvers.pop(name, None)
        logger.debug("Resolved declared type: %s (%d fields)", name, len(spec.fields))
        return spec

    def names(self) -> list[str]:
        with self._lock:
            return sorted({*self._specs, *self._resolvers})

    def __contains__(self, name: object) -> bool:
        return name in self._specs or name in self._resolvers

    def __iter__(self) -> Iterator[TypeSpec]:
        for name in self.names():
            yield self.get(name)

    def __len__(self) -> int:
        return len(self.names())

    def _claim(self, name: str, *, replace: bool) -> None:
        if name not in self:
            return
        if not replace:
            raise SpecCompileError(f"duplicate type name '{name}'")
        logger.info("Replacing registered type: %s", name)
        self._specs.pop(name, None)
        self._resolvers.pop(name, None)
        self._generation += 1


default_registry = SpecRegistry()
