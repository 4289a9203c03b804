"""Error Types

Error codes, the AppError payload shared by exceptions and results, and
the Ok/Err pair that keeps "could not evaluate" apart from a plain False.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Predicate error codes.

    E2xxx: the predicate call was rejected (bad name, parameter or pattern)
    E9xxx: anything the predicate layer did not anticipate
    """
    E2000_VALIDATION_GENERIC = 2000
    E2005_CONSTRAINT_VIOLATION = 2005
    E2030_INVALID_PARAMETER = 2030
    E2031_UNKNOWN_PREDICATE = 2031
    E2032_MALFORMED_PATTERN = 2032

    E9001_UNEXPECTED_ERROR = 9001

    @property
    def category(self) -> str:
        return "validation" if 2000 <= self.value < 3000 else "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was raised."""
    correlation_id: str = field(default_factory=lambda: uuid4().hex[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""  # guard, registry, regex, predicate


@dataclass(frozen=True, slots=True)
class AppError:
    """Typed error for a predicate call that could not be evaluated."""
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    @property
    def predicate(self) -> str | None:
        """Name of the predicate involved, when known."""
        return self.metadata.get("predicate")

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "category": self.code.category,
                "message": self.message,
                "origin": self.context.origin,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Evaluated result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Evaluation failed; wraps an AppError."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[Any], Any]) -> Err[E]:
        return self


Result = Union[Ok[T], Err[E]]


def from_exception(
    exc: Exception,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    message: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Wrap an unanticipated exception as Err, keeping it as the cause."""
    return Err(AppError(
        code=code,
        message=message or str(exc),
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=exc,
    ))
