"""Base Predicate Set

String predicates under their validator.js names. Checksums, phone metadata
and URL/e-mail grammars are delegated to python-stdnum, phonenumbers and
validators; the remaining format checks are compiled regexes.

Every predicate takes the subject first and returns a bool.
"""
from __future__ import annotations

import importlib
import json
import re
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from functools import lru_cache
from ipaddress import IPv4Address, IPv6Address, ip_address, ip_network
from types import ModuleType
from typing import Any, Mapping
from uuid import UUID as StdUUID

import phonenumbers
import validators
from stdnum import bic, ean, iban, imei, isbn, isin, issn, luhn

from .catalogs import (
    HASH_LENGTHS,
    IDENTITY_CARD_MODULES,
    LICENSE_PLATE_PATTERNS,
    MOBILE_PHONE_LOCALES,
    PASSPORT_PATTERNS,
    POSTAL_CODE_PATTERNS,
    TAX_ID_MODULES,
    VAT_MODULES,
)
from .types import Predicate, PredicateLibrary


@lru_cache(maxsize=None)
def _stdnum_module(path: str) -> ModuleType:
    return importlib.import_module(path)


def _options(options: Mapping[str, Any] | None, **defaults: Any) -> dict[str, Any]:
    return {**defaults, **(options or {})}


def _within(number: float, opts: Mapping[str, Any]) -> bool:
    """Apply validator.js style min/max/lt/gt bounds."""
    if opts.get("min") is not None and number < opts["min"]:
        return False
    if opts.get("max") is not None and number > opts["max"]:
        return False
    if opts.get("lt") is not None and number >= opts["lt"]:
        return False
    if opts.get("gt") is not None and number <= opts["gt"]:
        return False
    return True


# ============================================================================
# Dates
# ============================================================================

_DATE_FORMATS = (
    "%Y/%m/%d", "%Y/%m/%d %H:%M:%S", "%m/%d/%Y", "%m/%d/%Y %H:%M:%S",
    "%B %d, %Y", "%b %d, %Y", "%B %d %Y", "%b %d %Y", "%d %B %Y", "%d %b %Y",
    "%a %b %d %Y", "%a %b %d %Y %H:%M:%S",
)


def parse_date(value: Any) -> datetime | None:
    """Leniently parse ISO-8601, RFC 2822 and common textual dates."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _naive_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def _comparison_date(options: Any) -> datetime | None:
    if isinstance(options, Mapping):
        options = options.get("comparisonDate")
    if options is None:
        return datetime.now()
    return parse_date(options)


def is_after(value: str, options: Any = None) -> bool:
    subject, other = parse_date(value), _comparison_date(options)
    return bool(subject and other and _naive_utc(subject) > _naive_utc(other))


def is_before(value: str, options: Any = None) -> bool:
    subject, other = parse_date(value), _comparison_date(options)
    return bool(subject and other and _naive_utc(subject) < _naive_utc(other))


_ISO8601 = re.compile(
    r"([+-]?\d{4}(?!\d{2}\b))((-?)((0[1-9]|1[0-2])(\3([12]\d|0[1-9]|3[01]))?|W([0-4]\d|5[0-3])(-?[1-7])?"
    r"|(00[1-9]|0[1-9]\d|[12]\d{2}|3([0-5]\d|6[1-6])))([T\s]((([01]\d|2[0-3])((:?)[0-5]\d)?|24:?00)"
    r"([.,]\d+(?!:))?)?(\17[0-5]\d([.,]\d+)?)?([zZ]|([+-])([01]\d|2[0-3]):?([0-5]\d)?)?)?)?"
)
_CALENDAR_DATE = re.compile(r"([+-]?\d{4})-?(\d{2})-?(\d{2})(?!\d)")


def is_iso8601(value: str, options: Mapping[str, Any] | None = None) -> bool:
    """ISO-8601 shape check; with strict, calendar dates must also exist."""
    if _ISO8601.fullmatch(value) is None:
        return False
    if not _options(options, strict=False)["strict"]:
        return True
    calendar = _CALENDAR_DATE.match(value)
    if calendar is None:
        return True
    try:
        date(*(int(part) for part in calendar.groups()))
    except ValueError:
        return False
    return True


_RFC3339 = re.compile(
    r"\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])[Tt ]([01]\d|2[0-3]):[0-5]\d:([0-5]\d|60)"
    r"(\.\d+)?([Zz]|[+-]([01]\d|2[0-3]):[0-5]\d)"
)


def is_rfc3339(value: str) -> bool:
    return _RFC3339.fullmatch(value) is not None


# ============================================================================
# Strings and Text
# ============================================================================

def contains(value: str, seed: str, options: Mapping[str, Any] | None = None) -> bool:
    opts = _options(options, ignoreCase=False, minOccurrences=1)
    if opts["ignoreCase"]:
        value, seed = value.lower(), str(seed).lower()
    return value.count(str(seed)) >= opts["minOccurrences"]


def equals(value: str, comparison: str) -> bool:
    return value == comparison


def is_alpha(value: str, locale: str = "en-US") -> bool:
    if locale == "en-US":
        return re.fullmatch(r"[A-Za-z]+", value) is not None
    return value.isalpha()


def is_alphanumeric(value: str, locale: str = "en-US") -> bool:
    if locale == "en-US":
        return re.fullmatch(r"[0-9A-Za-z]+", value) is not None
    return value.isalnum()


def is_ascii(value: str) -> bool:
    return re.fullmatch(r"[\x00-\x7F]+", value) is not None


def is_empty(value: str, options: Mapping[str, Any] | None = None) -> bool:
    opts = _options(options, ignore_whitespace=False)
    return len(value.strip() if opts["ignore_whitespace"] else value) == 0


def is_length(value: str, options: Mapping[str, Any] | int | None = None, max_length: int | None = None) -> bool:
    """Character length within bounds; accepts an options mapping or (min, max)."""
    if isinstance(options, Mapping):
        minimum, maximum = options.get("min", 0), options.get("max")
    else:
        minimum, maximum = options or 0, max_length
    length = len(value)
    return length >= minimum and (maximum is None or length <= maximum)


def is_byte_length(value: str, options: Mapping[str, Any] | int | None = None, max_length: int | None = None) -> bool:
    if isinstance(options, Mapping):
        minimum, maximum = options.get("min", 0), options.get("max")
    else:
        minimum, maximum = options or 0, max_length
    length = len(value.encode("utf-8"))
    return length >= minimum and (maximum is None or length <= maximum)


def is_boolean(value: str, options: Mapping[str, Any] | None = None) -> bool:
    if _options(options, loose=False)["loose"]:
        return value.lower() in ("true", "false", "1", "0", "yes", "no")
    return value in ("true", "false", "1", "0")


def is_lowercase(value: str) -> bool:
    return value == value.lower()


def is_uppercase(value: str) -> bool:
    return value == value.upper()


def is_in(value: str, options: Any) -> bool:
    if isinstance(options, Mapping):
        return value in options
    if isinstance(options, (list, tuple, set, frozenset)):
        return value in [str(option) for option in options]
    if isinstance(options, str):
        return value in options
    return False


def is_whitelisted(value: str, chars: str) -> bool:
    return all(char in chars for char in value)


_FULL_WIDTH = re.compile(r"[^ -~｡-ﾟﾠ-ￜ￨-￮0-9a-zA-Z]")
_HALF_WIDTH = re.compile(r"[ -~｡-ﾟﾠ-ￜ￨-￮0-9a-zA-Z]")


def is_full_width(value: str) -> bool:
    return _FULL_WIDTH.search(value) is not None


def is_half_width(value: str) -> bool:
    return _HALF_WIDTH.search(value) is not None


def is_variable_width(value: str) -> bool:
    return is_full_width(value) and is_half_width(value)


def is_multibyte(value: str) -> bool:
    return re.search(r"[^\x00-\x7F]", value) is not None


def is_surrogate_pair(value: str) -> bool:
    # Decoded Python strings hold astral characters rather than UTF-16 pairs
    return any(ord(char) > 0xFFFF for char in value)


def is_locale(value: str) -> bool:
    return re.fullmatch(r"[A-Za-z]{2,3}([_-][A-Za-z]{4})?([_-]([A-Za-z]{2}|\d{3}))?", value) is not None


_SYMBOLS = re.compile(r"[-#!$@£%^&*()_+|~=`{}\[\]:\";'<>?,./\\ ]")


def is_strong_password(value: str, options: Mapping[str, Any] | None = None) -> bool:
    opts = _options(options, minLength=8, minLowercase=1, minUppercase=1, minNumbers=1, minSymbols=1)
    return (
        len(value) >= opts["minLength"]
        and sum(char.islower() for char in value) >= opts["minLowercase"]
        and sum(char.isupper() for char in value) >= opts["minUppercase"]
        and sum(char.isdigit() for char in value) >= opts["minNumbers"]
        and len(_SYMBOLS.findall(value)) >= opts["minSymbols"]
    )


# ============================================================================
# Numbers
# ============================================================================

def is_int(value: str, options: Mapping[str, Any] | None = None) -> bool:
    opts = _options(options, allow_leading_zeroes=True)
    pattern = r"[-+]?[0-9]+" if opts["allow_leading_zeroes"] else r"[-+]?(0|[1-9][0-9]*)"
    if re.fullmatch(pattern, value) is None:
        return False
    return _within(int(value), opts)


def is_float(value: str, options: Mapping[str, Any] | None = None) -> bool:
    if value in ("", ".", "-", "+"):
        return False
    if re.fullmatch(r"[-+]?([0-9]+)?(\.[0-9]*)?([eE][+-]?[0-9]+)?", value) is None:
        return False
    return _within(float(value), options or {})


def is_numeric(value: str, options: Mapping[str, Any] | None = None) -> bool:
    opts = _options(options, no_symbols=False)
    pattern = r"[0-9]+" if opts["no_symbols"] else r"[+-]?([0-9]*[.])?[0-9]+"
    return re.fullmatch(pattern, value) is not None


def is_divisible_by(value: str, number: Any) -> bool:
    try:
        return float(value) % float(number) == 0
    except (TypeError, ValueError, ZeroDivisionError):
        return False


def is_port(value: str) -> bool:
    return is_int(value, {"allow_leading_zeroes": False, "min": 0, "max": 65535})


def is_hexadecimal(value: str) -> bool:
    return re.fullmatch(r"(0x|0h)?[0-9A-F]+", value, re.IGNORECASE) is not None


def is_octal(value: str) -> bool:
    return re.fullmatch(r"(0o)?[0-7]+", value, re.IGNORECASE) is not None


def is_currency(value: str, options: Mapping[str, Any] | None = None) -> bool:
    opts = _options(
        options,
        symbol="$", require_symbol=False, allow_space_after_symbol=False, symbol_after_digits=False,
        allow_negatives=True, parens_for_negatives=False, negative_sign_before_digits=False,
        negative_sign_after_digits=False, allow_negative_sign_placeholder=False,
        thousands_separator=",", decimal_separator=".", allow_decimal=True, require_decimal=False,
        digits_after_decimal=[2], allow_space_after_digits=False,
    )
    decimal_digits = "|".join(rf"\d{{{digits}}}" for digits in opts["digits_after_decimal"])
    symbol = f"({re.escape(opts['symbol'])}){'' if opts['require_symbol'] else '?'}"
    negative = "-?"
    separator = re.escape(opts["thousands_separator"])
    whole = rf"(0|[1-9]\d*|[1-9]\d{{0,2}}({separator}\d{{3}})*)?"
    decimal = f"({re.escape(opts['decimal_separator'])}({decimal_digits})){'' if opts['require_decimal'] else '?'}"
    pattern = whole + (decimal if opts["allow_decimal"] or opts["require_decimal"] else "")

    if opts["allow_negatives"] and not opts["parens_for_negatives"]:
        if opts["negative_sign_after_digits"]:
            pattern += negative
        elif opts["negative_sign_before_digits"]:
            pattern = negative + pattern

    if opts["allow_negative_sign_placeholder"]:
        pattern = rf"( (?!\-))?{pattern}"
    elif opts["allow_space_after_symbol"]:
        pattern = f" ?{pattern}"
    elif opts["allow_space_after_digits"]:
        pattern += "( (?!$))?"

    pattern = pattern + symbol if opts["symbol_after_digits"] else symbol + pattern

    if opts["allow_negatives"]:
        if opts["parens_for_negatives"]:
            pattern = rf"(\({pattern}\)|{pattern})"
        elif not (opts["negative_sign_before_digits"] or opts["negative_sign_after_digits"]):
            pattern = negative + pattern

    return re.fullmatch(rf"(?!-? )(?=.*\d){pattern}", value) is not None


# ============================================================================
# Encodings and Identifiers
# ============================================================================

def is_base32(value: str) -> bool:
    return len(value) % 8 == 0 and re.fullmatch(r"[A-Z2-7]+=*", value) is not None


def is_base58(value: str) -> bool:
    return re.fullmatch(r"[A-HJ-NP-Za-km-z1-9]*", value) is not None


def is_base64(value: str, options: Mapping[str, Any] | None = None) -> bool:
    if _options(options, urlSafe=False)["urlSafe"]:
        return re.fullmatch(r"[A-Za-z0-9_-]+", value) is not None
    return re.fullmatch(
        r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})", value
    ) is not None


def is_data_uri(value: str) -> bool:
    return re.fullmatch(
        r"data:([a-z]+/[a-z0-9\-+._]+(;[a-z\-]+=[a-z0-9\-]+)*)?(;base64)?,[a-z0-9!$&',()*+;=\-._~:@/?%\s]*",
        value,
        re.IGNORECASE,
    ) is not None


def is_hash(value: str, algorithm: str) -> bool:
    length = HASH_LENGTHS.get(algorithm)
    return length is not None and re.fullmatch(rf"[a-fA-F0-9]{{{length}}}", value) is not None


def is_md5(value: str) -> bool:
    return is_hash(value, "md5")


def is_mongo_id(value: str) -> bool:
    return len(value) == 24 and is_hexadecimal(value)


def is_jwt(value: str) -> bool:
    parts = value.split(".")
    if not 2 <= len(parts) <= 3:
        return False
    return all(is_base64(part, {"urlSafe": True}) for part in parts)


def is_json(value: str, options: Mapping[str, Any] | None = None) -> bool:
    try:
        parsed = json.loads(value)
    except ValueError:
        return False
    if _options(options, allow_primitives=False)["allow_primitives"] and (
        parsed is None or parsed is True or parsed is False
    ):
        return True
    return isinstance(parsed, (dict, list))


def is_uuid(value: str, version: Any = "all") -> bool:
    if re.fullmatch(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", value, re.IGNORECASE) is None:
        return False
    if version in (None, "all"):
        return True
    return StdUUID(value).version == int(version)


def is_mime_type(value: str) -> bool:
    return re.fullmatch(
        r"(application|audio|font|image|message|model|multipart|text|video)/[a-zA-Z0-9.!#$&^_+\-]{1,100}"
        r"(;\s*[a-zA-Z0-9\-]+=(\"[^\"]*\"|[a-zA-Z0-9.\-_]+))*",
        value,
        re.IGNORECASE,
    ) is not None


def is_semver(value: str) -> bool:
    return re.fullmatch(
        r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
        r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
        r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
        value,
    ) is not None


def is_isrc(value: str) -> bool:
    return re.fullmatch(r"[A-Z]{2}[0-9A-Z]{3}\d{2}\d{5}", value) is not None


def is_magnet_uri(value: str) -> bool:
    return re.match(
        r"magnet:\?xt(?:\.1)?=urn:(?:aich|bitprint|btih|ed2k|ed2khash|kzhash|md5|sha1|tree:tiger):[a-z0-9]{32}(?:[a-z0-9]{8})?($|&)",
        value,
        re.IGNORECASE,
    ) is not None


def is_ethereum_address(value: str) -> bool:
    return re.fullmatch(r"0x[0-9a-f]{40}", value, re.IGNORECASE) is not None


def is_btc_address(value: str) -> bool:
    return bool(validators.btc_address(value))


# ============================================================================
# Colors
# ============================================================================

def is_hex_color(value: str) -> bool:
    return re.fullmatch(r"#?([0-9A-F]{3}|[0-9A-F]{4}|[0-9A-F]{6}|[0-9A-F]{8})", value, re.IGNORECASE) is not None


def is_hsl(value: str) -> bool:
    number = r"[+-]?(\d+(\.\d+)?|\.\d+)"
    return re.fullmatch(
        rf"hsla?\({number}(deg|grad|rad|turn)?(,{number}%){{2}}(,{number}%?)?\)",
        re.sub(r"\s", "", value),
        re.IGNORECASE,
    ) is not None


_CHANNEL = r"([0-9]|[1-9][0-9]|1[0-9][0-9]|2[0-4][0-9]|25[0-5])"
_PERCENT = r"([0-9]%|[1-9][0-9]%|100%)"
_ALPHA = r"(0?\.\d|1(\.0)?|0(\.0)?)"


def is_rgb_color(value: str, include_percent_values: bool = True) -> bool:
    patterns = [rf"rgb\(({_CHANNEL},){{2}}{_CHANNEL}\)", rf"rgba\(({_CHANNEL},){{3}}{_ALPHA}\)"]
    if include_percent_values:
        patterns += [rf"rgb\(({_PERCENT},){{2}}{_PERCENT}\)", rf"rgba\(({_PERCENT},){{3}}{_ALPHA}\)"]
    return any(re.fullmatch(pattern, value) for pattern in patterns)


# ============================================================================
# Network
# ============================================================================

def is_ip(value: str, version: Any = None) -> bool:
    version = str(version) if version not in (None, "") else ""
    try:
        if version == "4":
            IPv4Address(value)
        elif version == "6":
            IPv6Address(value)
        elif version == "":
            ip_address(value)
        else:
            return False
        return True
    except ValueError:
        return False


def is_ip_range(value: str, version: Any = None) -> bool:
    address, _, prefix = value.partition("/")
    if not prefix.isdigit() or (len(prefix) > 1 and prefix.startswith("0")):
        return False
    if not is_ip(address, version):
        return False
    try:
        ip_network(value, strict=False)
        return True
    except ValueError:
        return False


def is_url(value: str, options: Mapping[str, Any] | None = None) -> bool:
    opts = _options(options, protocols=["http", "https", "ftp"], require_protocol=False)
    scheme, separator, _ = value.partition("://")
    if not separator:
        if opts["require_protocol"]:
            return False
        value, scheme = f"http://{value}", "http"
    if scheme.lower() not in opts["protocols"]:
        return False
    return bool(validators.url(value))


def is_email(value: str) -> bool:
    return bool(validators.email(value))


def is_fqdn(value: str, options: Mapping[str, Any] | None = None) -> bool:
    opts = _options(options, require_tld=True, allow_underscores=False, allow_trailing_dot=False)
    if opts["allow_trailing_dot"] and value.endswith("."):
        value = value[:-1]
    parts = value.split(".")
    if opts["require_tld"]:
        if len(parts) < 2:
            return False
        if re.fullmatch(r"([a-z¡-￿]{2,}|xn[a-z0-9-]{2,})", parts[-1], re.IGNORECASE) is None:
            return False
    label = r"[a-z_¡-￿0-9-]+" if opts["allow_underscores"] else r"[a-z¡-￿0-9-]+"
    for part in parts:
        if not part or len(part) > 63 or part.startswith("-") or part.endswith("-"):
            return False
        if re.fullmatch(label, part, re.IGNORECASE) is None:
            return False
    return True


def is_mac_address(value: str) -> bool:
    return bool(validators.mac_address(value))


def is_lat_long(value: str, options: Mapping[str, Any] | None = None) -> bool:
    if "," not in value:
        return False
    lat, _, long = value.partition(",")
    if (lat.startswith("(") and not long.endswith(")")) or (long.endswith(")") and not lat.startswith("(")):
        return False
    if _options(options, checkDMS=False)["checkDMS"]:
        return (
            re.fullmatch(r"(([1-8]?\d)\D+([1-5]?\d|60)\D+([1-5]?\d|60)(\.\d+)?|90\D+0\D+0)\D+[NSns]?", lat) is not None
            and re.fullmatch(r"\s*([1-7]?\d{1,2}\D+([1-5]?\d|60)\D+([1-5]?\d|60)(\.\d+)?|180\D+0\D+0)\D+[EWew]?", long) is not None
        )
    return (
        re.fullmatch(r"\(?[+-]?(90(\.0+)?|[1-8]?\d(\.\d+)?)", lat) is not None
        and re.fullmatch(r"\s?[+-]?(180(\.0+)?|1[0-7]\d(\.\d+)?|\d{1,2}(\.\d+)?)\)?", long) is not None
    )


# ============================================================================
# Standard Numbers (python-stdnum)
# ============================================================================

def is_isbn(value: str, version: Any = None) -> bool:
    if not isbn.is_valid(value):
        return False
    if version in (None, ""):
        return True
    return isbn.isbn_type(value) == f"ISBN{int(version)}"


def is_issn(value: str, options: Mapping[str, Any] | None = None) -> bool:
    opts = _options(options, case_sensitive=False, require_hyphen=False)
    pattern = r"\d{4}-\d{3}[\dX]" if opts["require_hyphen"] else r"\d{4}-?\d{3}[\dX]"
    flags = 0 if opts["case_sensitive"] else re.IGNORECASE
    return re.fullmatch(pattern, value, flags) is not None and issn.is_valid(value.upper())


def is_iban(value: str) -> bool:
    return iban.is_valid(value)


def is_bic(value: str) -> bool:
    return bic.is_valid(value)


def is_ean(value: str) -> bool:
    return ean.is_valid(value)


def is_isin(value: str) -> bool:
    return isin.is_valid(value)


def is_imei(value: str, options: Mapping[str, Any] | None = None) -> bool:
    opts = options or {}
    allow_hyphens = opts.get("allow_hyphens", opts.get("allow_hypens", False))
    pattern = r"\d{2}-\d{6}-\d{6}-\d" if allow_hyphens else r"\d{15}"
    return re.fullmatch(pattern, value) is not None and imei.is_valid(value)


def is_credit_card(value: str) -> bool:
    digits = re.sub(r"[- ]", "", value)
    return re.fullmatch(r"\d{13,19}", digits) is not None and luhn.is_valid(digits)


def _is_lu_tax_id(value: str) -> bool:
    if re.fullmatch(r"\d{13}", value) is None:
        return False
    try:
        datetime.strptime(value[:8], "%Y%m%d")
    except ValueError:
        return False
    return True


def _is_hu_tax_id(value: str) -> bool:
    if re.fullmatch(r"8\d{9}", value) is None:
        return False
    checksum = sum(int(digit) * position for position, digit in enumerate(value[:9], start=1)) % 11
    return checksum == int(value[9])


_TAX_ID_CHECKS: dict[str, Predicate] = {
    "fr-LU": _is_lu_tax_id,
    "lb-LU": _is_lu_tax_id,
    "hu-HU": _is_hu_tax_id,
}


def is_tax_id(value: str, locale: str = "en-US") -> bool:
    if locale in _TAX_ID_CHECKS:
        return _TAX_ID_CHECKS[locale](value)
    if locale not in TAX_ID_MODULES:
        raise ValueError(f"Invalid locale '{locale}'")
    return _stdnum_module(TAX_ID_MODULES[locale]).is_valid(value)


def is_vat(value: str, country_code: str) -> bool:
    if country_code not in VAT_MODULES:
        raise ValueError(f"Invalid country code: '{country_code}'")
    return _stdnum_module(VAT_MODULES[country_code]).is_valid(value)


def is_identity_card(value: str, locale: str = "any") -> bool:
    if locale == "any":
        return any(_stdnum_module(path).is_valid(value) for path in IDENTITY_CARD_MODULES.values())
    if locale not in IDENTITY_CARD_MODULES:
        raise ValueError(f"Invalid locale '{locale}'")
    return _stdnum_module(IDENTITY_CARD_MODULES[locale]).is_valid(value)


# ============================================================================
# Locale Tables
# ============================================================================

def is_iso31661_alpha2(value: str) -> bool:
    return bool(validators.country_code(value.upper(), iso_format="alpha2"))


def is_iso31661_alpha3(value: str) -> bool:
    return bool(validators.country_code(value.upper(), iso_format="alpha3"))


def is_postal_code(value: str, locale: str) -> bool:
    if locale == "any":
        return any(pattern.fullmatch(value) for pattern in POSTAL_CODE_PATTERNS.values())
    if locale not in POSTAL_CODE_PATTERNS:
        raise ValueError(f"Invalid locale '{locale}'")
    return POSTAL_CODE_PATTERNS[locale].fullmatch(value) is not None


def is_passport_number(value: str, country_code: str) -> bool:
    pattern = PASSPORT_PATTERNS.get(str(country_code).upper())
    return pattern is not None and pattern.fullmatch(re.sub(r"\s", "", value).upper()) is not None


def is_license_plate(value: str, locale: str | None = None) -> bool:
    if locale in (None, "any"):
        return any(pattern.fullmatch(value) for pattern in LICENSE_PLATE_PATTERNS.values())
    if locale not in LICENSE_PLATE_PATTERNS:
        raise ValueError(f"Invalid locale '{locale}'")
    return LICENSE_PLATE_PATTERNS[locale].fullmatch(value) is not None


_MOBILE_TYPES = frozenset({
    phonenumbers.PhoneNumberType.MOBILE,
    phonenumbers.PhoneNumberType.FIXED_LINE_OR_MOBILE,
})


def _is_mobile_in_region(value: str, region: str) -> bool:
    try:
        number = phonenumbers.parse(value, region)
    except phonenumbers.NumberParseException:
        return False
    return (
        phonenumbers.is_valid_number_for_region(number, region)
        and phonenumbers.number_type(number) in _MOBILE_TYPES
    )


def is_mobile_phone(value: str, locale: Any = None, options: Mapping[str, Any] | None = None) -> bool:
    opts = options or {}
    if opts.get("strictMode", opts.get("strict_mode", False)) and not value.startswith("+"):
        return False
    if locale in (None, "any"):
        locales = list(MOBILE_PHONE_LOCALES)
    elif isinstance(locale, str):
        locales = [locale]
    else:
        locales = list(locale)
    for tag in locales:
        if tag not in MOBILE_PHONE_LOCALES:
            raise ValueError(f"Invalid locale '{tag}'")
    return any(_is_mobile_in_region(value, tag.rsplit("-", 1)[-1]) for tag in locales)


# ============================================================================
# Library
# ============================================================================

BASE_PREDICATES: dict[str, Predicate] = {
    "contains": contains,
    "equals": equals,
    "isAfter": is_after,
    "isAlpha": is_alpha,
    "isAlphanumeric": is_alphanumeric,
    "isAscii": is_ascii,
    "isBase32": is_base32,
    "isBase58": is_base58,
    "isBase64": is_base64,
    "isBefore": is_before,
    "isBIC": is_bic,
    "isBoolean": is_boolean,
    "isBtcAddress": is_btc_address,
    "isByteLength": is_byte_length,
    "isCreditCard": is_credit_card,
    "isCurrency": is_currency,
    "isDataURI": is_data_uri,
    "isDivisibleBy": is_divisible_by,
    "isEAN": is_ean,
    "isEmail": is_email,
    "isEmpty": is_empty,
    "isEthereumAddress": is_ethereum_address,
    "isFloat": is_float,
    "isFQDN": is_fqdn,
    "isFullWidth": is_full_width,
    "isHalfWidth": is_half_width,
    "isHash": is_hash,
    "isHexadecimal": is_hexadecimal,
    "isHexColor": is_hex_color,
    "isHSL": is_hsl,
    "isIBAN": is_iban,
    "isIdentityCard": is_identity_card,
    "isIMEI": is_imei,
    "isIn": is_in,
    "isInt": is_int,
    "isIP": is_ip,
    "isIPRange": is_ip_range,
    "isISBN": is_isbn,
    "isISIN": is_isin,
    "isISO31661Alpha2": is_iso31661_alpha2,
    "isISO31661Alpha3": is_iso31661_alpha3,
    "isISO8601": is_iso8601,
    "isISRC": is_isrc,
    "isISSN": is_issn,
    "isJSON": is_json,
    "isJWT": is_jwt,
    "isLatLong": is_lat_long,
    "isLength": is_length,
    "isLicensePlate": is_license_plate,
    "isLocale": is_locale,
    "isLowercase": is_lowercase,
    "isMACAddress": is_mac_address,
    "isMagnetURI": is_magnet_uri,
    "isMD5": is_md5,
    "isMimeType": is_mime_type,
    "isMobilePhone": is_mobile_phone,
    "isMongoId": is_mongo_id,
    "isMultibyte": is_multibyte,
    "isNumeric": is_numeric,
    "isOctal": is_octal,
    "isPassportNumber": is_passport_number,
    "isPort": is_port,
    "isPostalCode": is_postal_code,
    "isRFC3339": is_rfc3339,
    "isRgbColor": is_rgb_color,
    "isSemVer": is_semver,
    "isStrongPassword": is_strong_password,
    "isSurrogatePair": is_surrogate_pair,
    "isTaxID": is_tax_id,
    "isUppercase": is_uppercase,
    "isURL": is_url,
    "isUUID": is_uuid,
    "isVariableWidth": is_variable_width,
    "isVAT": is_vat,
    "isWhitelisted": is_whitelisted,
}


def default_library() -> PredicateLibrary:
    """Fresh copy of the base predicate set with its locale catalogs."""
    return PredicateLibrary(
        predicates=dict(BASE_PREDICATES),
        mobile_phone_locales=frozenset(MOBILE_PHONE_LOCALES),
        postal_code_locales=frozenset(POSTAL_CODE_PATTERNS),
    )
