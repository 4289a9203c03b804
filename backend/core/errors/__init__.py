"""Error Handling System

Typed errors for the predicate registry, in two shapes that carry the same
AppError payload:

- Exceptions (InvalidParameter, UnknownPredicate, MalformedPattern) raised
  synchronously by guards, the registry and the pattern predicates.
- Result[T, AppError] for callers that prefer values over exceptions.

Usage:
    from core.errors import Ok, Err, InvalidParameter

    match registry.evaluate("isVAT", value, "FR"):
        case Ok(passed):
            ...
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    from_exception,
)

from .builders import (
    validation_error,
    invalid_parameter,
    unknown_predicate,
    malformed_pattern,
)

from .exceptions import (
    AppErrorException,
    PredicateError,
    InvalidParameter,
    UnknownPredicate,
    MalformedPattern,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "from_exception",
    # Builders
    "validation_error",
    "invalid_parameter",
    "unknown_predicate",
    "malformed_pattern",
    # Exceptions
    "AppErrorException",
    "PredicateError",
    "InvalidParameter",
    "UnknownPredicate",
    "MalformedPattern",
]
