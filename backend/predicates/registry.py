"""Registry Composer

Composes the base predicate set, the override set, the guard set and the
instance predicates into a single name -> predicate registry.

Composition order, last writer wins:
1. base predicates
2. overrides replace same-named entries
3. guards wrap whatever entry currently holds their name
4. instance predicates are added
"""
from __future__ import annotations

import threading
from typing import Any, Iterator, Mapping

from core.config import get_settings
from core.errors import AppError, Err, ErrorCode, Ok, PredicateError, Result, UnknownPredicate, from_exception
from core.logging import registry_logger

from .base import default_library
from .guards import Guard, default_guards
from .instance import default_instance_predicates
from .overrides import default_overrides
from .types import Predicate


class PredicateRegistry:
    """Name -> predicate mapping with a locked extension hook.

    Reads never take the lock: extend swaps in a new mapping, so a reader
    sees either the old or the new registry, never a partial one.
    """

    def __init__(self, predicates: Mapping[str, Predicate]):
        self._predicates: dict[str, Predicate] = dict(predicates)
        self._lock = threading.Lock()

    def has_predicate(self, name: str) -> bool:
        return name in self._predicates

    def get(self, name: str) -> Predicate:
        try:
            return self._predicates[name]
        except KeyError:
            registry_logger().warning("unknown_predicate", predicate=name)
            raise UnknownPredicate(name) from None

    def invoke(self, name: str, subject: Any, *params: Any, **options: Any) -> bool:
        """Call the predicate registered under name."""
        return self.get(name)(subject, *params, **options)

    def evaluate(self, name: str, subject: Any, *params: Any, **options: Any) -> Result[bool, AppError]:
        """Like invoke, but errors come back as Err instead of being raised."""
        try:
            return Ok(self.invoke(name, subject, *params, **options))
        except PredicateError as exc:
            return Err(exc.error)
        except (TypeError, ValueError) as exc:
            return from_exception(exc, code=ErrorCode.E2005_CONSTRAINT_VIOLATION,
                                  origin="predicate", predicate=name)

    def extend(self, name: str, fn: Predicate) -> None:
        """Add or replace a predicate. No signature validation."""
        with self._lock:
            replaced = name in self._predicates
            self._predicates = {**self._predicates, name: fn}
        registry_logger().info("predicate_extended", predicate=name, replaced=replaced)

    def names(self) -> list[str]:
        return sorted(self._predicates)

    def __contains__(self, name: object) -> bool:
        return name in self._predicates

    def __len__(self) -> int:
        return len(self._predicates)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __getattr__(self, name: str) -> Predicate:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._predicates[name]
        except KeyError:
            raise AttributeError(f"Predicate '{name}' is not registered") from None


def compose(
    base: Mapping[str, Predicate],
    overrides: Mapping[str, Predicate],
    guards: Mapping[str, Guard],
    instance_predicates: Mapping[str, Predicate],
    *,
    trace: bool | None = None,
) -> PredicateRegistry:
    """Compose a registry from its four layers.

    Raises:
        UnknownPredicate: a guard names a predicate neither the base nor the
            overrides define.
    """
    log = registry_logger()
    trace = get_settings().REGISTRY_TRACE if trace is None else trace
    resolved: dict[str, Predicate] = dict(base)

    def _resolve(name: str, fn: Predicate, stage: str) -> None:
        if trace:
            log.debug("predicate_resolved", predicate=name, stage=stage, replaced=name in resolved)
        resolved[name] = fn

    for name, fn in overrides.items():
        _resolve(name, fn, "override")

    for name, guard in guards.items():
        if name not in resolved:
            log.error("unknown_predicate", predicate=name, stage="guard")
            raise UnknownPredicate(name)
        _resolve(name, guard.wrap(resolved[name]), "guard")

    for name, fn in instance_predicates.items():
        _resolve(name, fn, "instance")

    log.info(
        "registry_composed",
        predicates=len(resolved),
        overrides=len(overrides),
        guards=len(guards),
    )
    return PredicateRegistry(resolved)


def build_default_registry(*, trace: bool | None = None) -> PredicateRegistry:
    """Fresh registry over the default base library."""
    library = default_library()
    return compose(
        library.predicates,
        default_overrides(library),
        default_guards(library),
        default_instance_predicates(),
        trace=trace,
    )
