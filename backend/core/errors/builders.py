"""Predicate Error Builders

Ergonomic constructors for the predicate-layer errors.
Each builder creates an AppError with appropriate code and context.
"""
from typing import Any, Sequence

from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    predicate: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"predicate": predicate, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def invalid_parameter(
    predicate: str,
    parameter: str,
    value: Any,
    legal_values: Sequence[Any],
    origin: str = "guard",
) -> Err[AppError]:
    shown = ", ".join(str(v) for v in legal_values)
    return validation_error(
        f"Invalid {parameter} {value!r} for '{predicate}'. Must be one of: {shown}",
        code=ErrorCode.E2030_INVALID_PARAMETER,
        predicate=predicate,
        origin=origin,
        parameter=parameter,
        value=repr(value),
        legal_values=list(legal_values),
    )


def unknown_predicate(name: str, origin: str = "registry") -> Err[AppError]:
    return validation_error(
        f"Predicate '{name}' is not registered",
        code=ErrorCode.E2031_UNKNOWN_PREDICATE,
        predicate=name,
        origin=origin,
    )


def malformed_pattern(
    pattern: str, reason: str, cause: Exception | None = None, origin: str = "regex"
) -> Err[AppError]:
    return validation_error(
        f"Malformed pattern {pattern!r}: {reason}",
        code=ErrorCode.E2032_MALFORMED_PATTERN,
        origin=origin,
        cause=cause,
        pattern=pattern,
    )
