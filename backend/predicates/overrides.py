"""Override Set

Predicates that replace or alias base entries: legacy short names, regex
matching with JavaScript-style modifier letters, lenient numeric bounds and
the extra validators (notNull, isNull, isDate).

Aliases are bound to the injected library when the set is built, so a custom
base library flows through every alias.
"""
from __future__ import annotations

import math
import re
from functools import lru_cache
from typing import Any

from core.errors import MalformedPattern

from .base import parse_date
from .types import Predicate, PredicateLibrary

# JavaScript flag letters; g, u and y have no effect on a single match test
_MODIFIER_FLAGS: dict[str, int] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "g": 0,
    "u": 0,
    "y": 0,
}

_BLANK = re.compile(r"[\s\t\r\n]*")
_DECIMAL = re.compile(r"(?:-?(?:[0-9]+))?(?:\.[0-9]*)?(?:[eE][+-]?(?:[0-9]+))?")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def modifier_flags(modifiers: str | None) -> int:
    """Translate modifier letters into re flags."""
    flags = 0
    for letter in modifiers or "":
        if letter not in _MODIFIER_FLAGS:
            raise MalformedPattern(str(modifiers), f"unsupported modifier {letter!r}")
        flags |= _MODIFIER_FLAGS[letter]
    return flags


@lru_cache(maxsize=256)
def _compile(pattern: str, modifiers: str) -> re.Pattern:
    flags = modifier_flags(modifiers)
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise MalformedPattern(pattern, str(exc), cause=exc) from exc


def compile_pattern(pattern: Any, modifiers: str | None = None) -> re.Pattern:
    """Compile pattern text with modifiers; compiled patterns pass through unchanged."""
    if isinstance(pattern, re.Pattern):
        return pattern
    return _compile(str(pattern), modifiers or "")


def parse_float_prefix(value: Any) -> float:
    """Leading-float parse; NaN when no numeric prefix exists."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    match = _FLOAT_PREFIX.match(str(value))
    if match is None:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


# ============================================================================
# Library-independent Overrides
# ============================================================================

def not_empty(value: str) -> bool:
    return _BLANK.fullmatch(str(value)) is None


def regex(value: Any, pattern: Any, modifiers: str | None = None) -> bool:
    return compile_pattern(pattern, modifiers).search(str(value)) is not None


def not_regex(value: Any, pattern: Any, modifiers: str | None = None) -> bool:
    return not regex(value, pattern, modifiers)


def is_decimal(value: str) -> bool:
    return value != "" and _DECIMAL.fullmatch(str(value)) is not None


def minimum(value: Any, bound: Any) -> bool:
    number = parse_float_prefix(value)
    return math.isnan(number) or number >= parse_float_prefix(bound)


def maximum(value: Any, bound: Any) -> bool:
    number = parse_float_prefix(value)
    return math.isnan(number) or number <= parse_float_prefix(bound)


def contains(value: Any, element: Any) -> bool:
    return bool(element) and str(element) in str(value)


def not_contains(value: Any, element: Any) -> bool:
    return not contains(value, element)


def not_null(value: Any) -> bool:
    return value is not None


def is_date(value: Any) -> bool:
    return parse_date(value) is not None


# ============================================================================
# Override Set
# ============================================================================

def default_overrides(library: PredicateLibrary) -> dict[str, Predicate]:
    """Build the override set against the given base library."""

    def length(value: str, min_length: int | None = None, max_length: int | None = None) -> bool:
        return library["isLength"](value, min_length, max_length)

    def is_url(value: str) -> bool:
        return library["isURL"](value)

    def is_ipv4(value: str) -> bool:
        return library["isIP"](value, 4)

    def is_ipv6(value: str) -> bool:
        return library["isIP"](value, 6)

    def not_in(value: str, values: Any) -> bool:
        return not library["isIn"](value, values)

    return {
        "notEmpty": not_empty,
        "len": length,
        "isUrl": is_url,
        "isIPv4": is_ipv4,
        "isIPv6": is_ipv6,
        "notIn": not_in,
        "regex": regex,
        "notRegex": not_regex,
        "not": not_regex,
        "is": regex,
        "matches": regex,
        "isDecimal": is_decimal,
        "min": minimum,
        "max": maximum,
        "contains": contains,
        "notContains": not_contains,
        "notNull": not_null,
        "isNull": library["isEmpty"],
        "isDate": is_date,
    }
