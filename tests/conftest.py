"""
Pytest configuration and shared fixtures.

The backend/ source root is put on sys.path by the pytest `pythonpath`
setting in pyproject.toml, so tests import `core` and `predicates` directly.
"""

from dataclasses import dataclass, field
from typing import Any

import pytest

from core.logging import configure_logging
from predicates import PredicateLibrary, build_default_registry


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging():
    configure_logging(level="WARNING")


@pytest.fixture
def registry():
    """Fresh default registry."""
    return build_default_registry()


# ============================================================================
# Fake base library
# ============================================================================

class RecordingLibrary:
    """Base predicates that record every call and return a scripted result."""

    NAMES = (
        "isLength", "isURL", "isIP", "isIn", "isEmpty",
        "isISBN", "isLicensePlate", "isMobilePhone", "isPassportNumber",
        "isPostalCode", "isTaxID", "isVAT", "isEmail",
    )

    def __init__(self, result: bool = True):
        self.result = result
        self.calls: list[tuple[str, tuple, dict]] = []

    def _recorder(self, name: str):
        def predicate(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self.result
        return predicate

    def library(self) -> PredicateLibrary:
        return PredicateLibrary(
            predicates={name: self._recorder(name) for name in self.NAMES},
            mobile_phone_locales=frozenset({"en-GB", "de-DE", "en-US"}),
            postal_code_locales=frozenset({"US", "GB", "DE"}),
        )

    def calls_to(self, name: str) -> list[tuple[tuple, dict]]:
        return [(args, kwargs) for called, args, kwargs in self.calls if called == name]


@pytest.fixture
def recording():
    return RecordingLibrary()


# ============================================================================
# Record stub
# ============================================================================

@dataclass
class StubRecord:
    """Record exposing current and persisted field values."""
    is_new_record: bool = False
    current: dict[str, Any] = field(default_factory=dict)
    persisted: dict[str, Any] = field(default_factory=dict)

    def get_data_value(self, field_name: str) -> Any:
        return self.current.get(field_name)

    def previous(self, field_name: str) -> Any:
        return self.persisted.get(field_name)


@pytest.fixture
def make_record():
    return StubRecord
