"""Predicate Exceptions

Raised synchronously at the call boundary. Every exception wraps an AppError
so callers can log or serialize it the same way as a Result error.
"""
from __future__ import annotations

from typing import Any, Sequence

from .builders import invalid_parameter, malformed_pattern, unknown_predicate
from .types import AppError


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this when you need to raise an AppError in code that
    doesn't use the Result monad.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))


class PredicateError(AppErrorException):
    """A predicate call could not be evaluated (distinct from returning False)."""


class InvalidParameter(PredicateError, ValueError):
    """A guarded parameter fell outside its closed set of legal values."""

    def __init__(self, predicate: str, parameter: str, value: Any, legal_values: Sequence[Any]):
        self.predicate = predicate
        self.parameter = parameter
        self.value = value
        self.legal_values = tuple(legal_values)
        super().__init__(invalid_parameter(predicate, parameter, value, self.legal_values).error)


class UnknownPredicate(PredicateError, LookupError):
    """No implementation is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(unknown_predicate(name).error)


class MalformedPattern(PredicateError, ValueError):
    """Pattern text or modifier flags could not be compiled."""

    def __init__(self, pattern: str, reason: str, cause: Exception | None = None):
        self.pattern = pattern
        self.reason = reason
        super().__init__(malformed_pattern(pattern, reason, cause=cause).error)
