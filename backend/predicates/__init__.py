"""Predicate Registry

String predicates composed into one name -> predicate registry for
field-level validation code.

Usage:
    from predicates import build_default_registry

    registry = build_default_registry()
    registry.invoke("isISBN", "0306406152", 10)
    registry.isIPv4("10.0.0.1")
    registry.extend("isEven", lambda value: int(value) % 2 == 0)
"""
from .types import Predicate, PredicateLibrary, RecordLike, Signature
from .base import BASE_PREDICATES, default_library, parse_date
from .overrides import compile_pattern, default_overrides
from .guards import Guard, ParameterConstraint, default_guards
from .instance import default_instance_predicates, is_immutable
from .registry import PredicateRegistry, build_default_registry, compose

__all__ = [
    "Predicate",
    "PredicateLibrary",
    "RecordLike",
    "Signature",
    "BASE_PREDICATES",
    "default_library",
    "parse_date",
    "compile_pattern",
    "default_overrides",
    "Guard",
    "ParameterConstraint",
    "default_guards",
    "default_instance_predicates",
    "is_immutable",
    "PredicateRegistry",
    "build_default_registry",
    "compose",
]
