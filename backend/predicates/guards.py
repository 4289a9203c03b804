"""Guard Set

Wrappers that check one parameter against a closed set of legal values
before delegating to the predicate they replace. An illegal value raises
InvalidParameter; it is never turned into a False result.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Any

from core.errors import InvalidParameter
from core.logging import guard_logger

from .types import Predicate, PredicateLibrary, Signature

LICENSE_PLATE_LOCALES = ("de-DE", "de-LI", "pt-PT", "sq-AL", "any")

PASSPORT_COUNTRY_CODES = (
    "AM", "AR", "AT", "AU", "BE", "BG", "BY", "CA", "CH",
    "CN", "CY", "CZ", "DE", "DK", "DZ", "EE", "ES", "FI",
    "FR", "GB", "GR", "HR", "HU", "IE", "IN", "IS", "IT",
    "JP", "KR", "LT", "LU", "LV", "MT", "NL", "PO", "PT",
    "RO", "RU", "SE", "SL", "SK", "TR", "UA", "US",
)

TAX_ID_LOCALES = (
    "bg-BG", "cs-CZ", "de-AT", "de-DE", "dk-DK", "el-CY",
    "el-GR", "en-GB", "en-IE", "en-US", "es-ES", "et-EE",
    "fi-FI", "fr-BE", "fr-FR", "fr-LU", "hr-HR", "hu-HU",
    "it-IT", "lb-LU", "lt-LT", "lv-LV", "mt-MT", "nl-BE",
    "nl-NL", "pl-PL", "pt-PT", "ro-RO", "sk-SK", "sl-SI", "sv-SE",
)

VAT_COUNTRY_CODES = ("GB", "IT")

ISBN_VERSIONS = (10, 13)


@dataclass(frozen=True, slots=True)
class ParameterConstraint:
    """Closed set of legal values for the first parameter after the subject."""
    parameter: str
    legal_values: tuple[Any, ...]
    signature: Signature = Signature.ENUM
    allow_absent: bool = False

    def accepts(self, value: Any) -> bool:
        if value is None:
            return self.allow_absent
        if self.signature is Signature.ENUM_LIST and isinstance(value, (list, tuple)):
            return all(self.accepts(item) for item in value)
        if self.signature is Signature.OPTIONAL_NUMBER and isinstance(value, bool):
            return False
        return value in self.legal_values

    def extract(self, params: tuple[Any, ...], options: dict[str, Any]) -> Any:
        if params:
            return params[0]
        return options.get(self.parameter)


@dataclass(frozen=True, slots=True)
class Guard:
    """Parameter check bound to the predicate name it guards."""
    name: str
    constraint: ParameterConstraint

    def check(self, value: Any) -> None:
        if self.constraint.accepts(value):
            return
        guard_logger().warning(
            "invalid_parameter",
            predicate=self.name,
            parameter=self.constraint.parameter,
            received=repr(value),
            legal_count=len(self.constraint.legal_values),
        )
        raise InvalidParameter(self.name, self.constraint.parameter, value, self.constraint.legal_values)

    def wrap(self, delegate: Predicate) -> Predicate:
        """Return a predicate that checks the parameter, then calls delegate."""

        @wraps(delegate)
        def guarded(subject: Any, *params: Any, **options: Any) -> bool:
            self.check(self.constraint.extract(params, options))
            return delegate(subject, *params, **options)

        guarded.guard = self
        return guarded


def default_guards(library: PredicateLibrary) -> dict[str, Guard]:
    """Build the guard set; locale catalogs come from the base library."""
    constraints = {
        "isISBN": ParameterConstraint("version", ISBN_VERSIONS, Signature.OPTIONAL_NUMBER, allow_absent=True),
        "isLicensePlate": ParameterConstraint("locale", LICENSE_PLATE_LOCALES, allow_absent=True),
        "isMobilePhone": ParameterConstraint(
            "locale", tuple(sorted(library.mobile_phone_locales)), Signature.ENUM_LIST, allow_absent=True
        ),
        "isPassportNumber": ParameterConstraint("country_code", PASSPORT_COUNTRY_CODES),
        "isPostalCode": ParameterConstraint("locale", tuple(sorted(library.postal_code_locales))),
        "isTaxID": ParameterConstraint("locale", TAX_ID_LOCALES),
        "isVAT": ParameterConstraint("country_code", VAT_COUNTRY_CODES),
    }
    return {name: Guard(name, constraint) for name, constraint in constraints.items()}
