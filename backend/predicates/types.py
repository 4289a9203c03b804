"""Shared predicate types: callables, signature tags, the base library bundle
and the record-like protocol used by instance predicates."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Protocol, runtime_checkable

Predicate = Callable[..., bool]


class Signature(Enum):
    """Shape of a guarded parameter."""
    ENUM = "enum"
    ENUM_LIST = "enum_list"  # scalar or list, every element checked
    OPTIONAL_NUMBER = "optional_number"


@dataclass(frozen=True, slots=True)
class PredicateLibrary:
    """A base predicate set plus the locale catalogs some guards need."""
    predicates: Mapping[str, Predicate]
    mobile_phone_locales: frozenset[str] = field(default_factory=frozenset)
    postal_code_locales: frozenset[str] = field(default_factory=frozenset)

    def __getitem__(self, name: str) -> Predicate:
        return self.predicates[name]

    def __contains__(self, name: object) -> bool:
        return name in self.predicates


@runtime_checkable
class RecordLike(Protocol):
    """Externally owned record exposing persisted vs. current field values."""
    is_new_record: bool

    def get_data_value(self, field: str) -> Any: ...

    def previous(self, field: str) -> Any: ...
