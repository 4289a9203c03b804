"""Per-locale pattern tables and locale catalogs for the base predicates.

Keys are the locale or country tags callers pass as the predicate parameter.
"""
import re

# Postal codes, keyed by ISO 3166-1 alpha-2 country code
POSTAL_CODE_PATTERNS: dict[str, re.Pattern] = {
    "AD": re.compile(r"AD\d{3}"),
    "AT": re.compile(r"\d{4}"),
    "AU": re.compile(r"\d{4}"),
    "BE": re.compile(r"\d{4}"),
    "BG": re.compile(r"\d{4}"),
    "BR": re.compile(r"\d{5}-\d{3}"),
    "CA": re.compile(r"[ABCEGHJKLMNPRSTVXY]\d[ABCEGHJ-NPRSTV-Z][\s-]?\d[ABCEGHJ-NPRSTV-Z]\d", re.IGNORECASE),
    "CH": re.compile(r"\d{4}"),
    "CZ": re.compile(r"\d{3}\s?\d{2}"),
    "DE": re.compile(r"\d{5}"),
    "DK": re.compile(r"\d{4}"),
    "EE": re.compile(r"\d{5}"),
    "ES": re.compile(r"(5[0-2]|[0-4]\d)\d{3}"),
    "FI": re.compile(r"\d{5}"),
    "FR": re.compile(r"\d{2}\s?\d{3}"),
    "GB": re.compile(r"(gir\s?0aa|[a-z]{1,2}\d[\da-z]?\s?(\d[a-z]{2})?)", re.IGNORECASE),
    "GR": re.compile(r"\d{3}\s?\d{2}"),
    "HR": re.compile(r"[1-5]\d{4}"),
    "HU": re.compile(r"\d{4}"),
    "IE": re.compile(r"(?!.*o)[a-z]\d[\dw]\s\w{4}", re.IGNORECASE),
    "IL": re.compile(r"\d{5}|\d{7}"),
    "IN": re.compile(r"(?!10|29|35|54|55|65|66|86|87|88|89)[1-9]\d{5}"),
    "IS": re.compile(r"\d{3}"),
    "IT": re.compile(r"\d{5}"),
    "JP": re.compile(r"\d{3}-\d{4}"),
    "KR": re.compile(r"\d{5}|\d{6}"),
    "LI": re.compile(r"948[5-9]|949[0-7]"),
    "LT": re.compile(r"LT-\d{5}"),
    "LU": re.compile(r"\d{4}"),
    "LV": re.compile(r"LV-\d{4}"),
    "MT": re.compile(r"[A-Za-z]{3}\s?\d{4}"),
    "MX": re.compile(r"\d{5}"),
    "NL": re.compile(r"\d{4}\s?[a-z]{2}", re.IGNORECASE),
    "NO": re.compile(r"\d{4}"),
    "NZ": re.compile(r"\d{4}"),
    "PL": re.compile(r"\d{2}-\d{3}"),
    "PT": re.compile(r"\d{4}-\d{3}"),
    "RO": re.compile(r"\d{6}"),
    "RU": re.compile(r"\d{6}"),
    "SE": re.compile(r"[1-9]\d{2}\s?\d{2}"),
    "SG": re.compile(r"\d{6}"),
    "SI": re.compile(r"\d{4}"),
    "SK": re.compile(r"\d{3}\s?\d{2}"),
    "TW": re.compile(r"\d{3}(\d{2})?"),
    "UA": re.compile(r"\d{5}"),
    "US": re.compile(r"\d{5}(-\d{4})?"),
    "ZA": re.compile(r"\d{4}"),
}

# Passport numbers, matched after stripping whitespace and upper-casing
PASSPORT_PATTERNS: dict[str, re.Pattern] = {
    "AM": re.compile(r"[A-Z]{2}\d{7}"),
    "AR": re.compile(r"[A-Z]{3}\d{6}"),
    "AT": re.compile(r"[A-Z]\d{7}"),
    "AU": re.compile(r"[A-Z]\d{7}"),
    "BE": re.compile(r"[A-Z]{2}\d{6}"),
    "BG": re.compile(r"\d{9}"),
    "BY": re.compile(r"[A-Z]{2}\d{7}"),
    "CA": re.compile(r"[A-Z]{2}\d{6}"),
    "CH": re.compile(r"[A-Z]\d{7}"),
    "CN": re.compile(r"G\d{8}|E(?![IO])[A-Z0-9]\d{7}"),
    "CY": re.compile(r"[A-Z](\d{6}|\d{8})"),
    "CZ": re.compile(r"\d{8}"),
    "DE": re.compile(r"[CFGHJKLMNPRTVWXYZ0-9]{9}"),
    "DK": re.compile(r"\d{9}"),
    "DZ": re.compile(r"\d{9}"),
    "EE": re.compile(r"[A-Z]{1,2}\d{7}"),
    "ES": re.compile(r"[A-Z0-9]{2}[A-Z0-9]?\d{6}"),
    "FI": re.compile(r"[A-Z]{2}\d{7}"),
    "FR": re.compile(r"\d{2}[A-Z]{2}\d{5}"),
    "GB": re.compile(r"\d{9}"),
    "GR": re.compile(r"[A-Z]{2}\d{7}"),
    "HR": re.compile(r"\d{9}"),
    "HU": re.compile(r"[A-Z]{2}(\d{6}|\d{7})"),
    "IE": re.compile(r"[A-Z0-9]{2}\d{7}"),
    "IN": re.compile(r"[A-Z]-?\d{7}"),
    "IS": re.compile(r"A\d{7}"),
    "IT": re.compile(r"[A-Z0-9]{2}\d{7}"),
    "JP": re.compile(r"[A-Z]{2}\d{7}"),
    "KR": re.compile(r"[MS]\d{8}"),
    "LT": re.compile(r"[A-Z0-9]{8}"),
    "LU": re.compile(r"[A-Z0-9]{8}"),
    "LV": re.compile(r"[A-Z0-9]{2}\d{7}"),
    "MT": re.compile(r"\d{7}"),
    "NL": re.compile(r"[A-Z]{2}[A-Z0-9]{6}\d"),
    "PO": re.compile(r"[A-Z]{2}\d{7}"),
    "PT": re.compile(r"[A-Z]\d{6}"),
    "RO": re.compile(r"\d{8,9}"),
    "RU": re.compile(r"\d{9}"),
    "SE": re.compile(r"\d{8}"),
    "SL": re.compile(r"P[A-Z]\d{7}"),
    "SK": re.compile(r"[0-9A-Z]\d{7}"),
    "TR": re.compile(r"[A-Z]\d{8}"),
    "UA": re.compile(r"[A-Z]{2}\d{6}"),
    "US": re.compile(r"\d{9}"),
}

# German plates are matched structurally (district, letters, digits, E/H suffix)
LICENSE_PLATE_PATTERNS: dict[str, re.Pattern] = {
    "de-DE": re.compile(r"[A-ZÄÖÜ]{1,3}[- ]?[A-Z]{1,2}[- ]?\d{1,4}[EH]?"),
    "de-LI": re.compile(r"FL[- ]?\d{1,5}[UZ]?"),
    "pt-PT": re.compile(r"([A-Z]{2}|\d{2})[ \-·]?([A-Z]{2}|\d{2})[ \-·]?([A-Z]{2}|\d{2})"),
    "sq-AL": re.compile(r"[A-Z]{2}[- ]?((\d{3}[- ]?([A-Z]{2}|T))|(R[- ]?\d{3}))"),
}

# Mobile phone locales; the region part selects the phone number metadata
MOBILE_PHONE_LOCALES: tuple[str, ...] = (
    "ar-AE", "ar-EG", "ar-SA", "bg-BG", "cs-CZ", "da-DK", "de-AT", "de-CH",
    "de-DE", "de-LU", "el-GR", "en-AU", "en-CA", "en-GB", "en-HK", "en-IE",
    "en-IN", "en-KE", "en-NG", "en-NZ", "en-PH", "en-SG", "en-US", "en-ZA",
    "es-AR", "es-CL", "es-CO", "es-ES", "es-MX", "es-PE", "et-EE", "fi-FI",
    "fr-BE", "fr-CH", "fr-FR", "he-IL", "hr-HR", "hu-HU", "id-ID", "it-IT",
    "ja-JP", "ko-KR", "lt-LT", "lv-LV", "ms-MY", "mt-MT", "nb-NO", "nl-BE",
    "nl-NL", "pl-PL", "pt-BR", "pt-PT", "ro-RO", "ru-RU", "sk-SK", "sl-SI",
    "sv-SE", "th-TH", "tr-TR", "uk-UA", "vi-VN", "zh-CN", "zh-TW",
)

# Tax identification numbers: locale -> python-stdnum module
TAX_ID_MODULES: dict[str, str] = {
    "bg-BG": "stdnum.bg.egn",
    "cs-CZ": "stdnum.cz.rc",
    "de-AT": "stdnum.at.tin",
    "de-DE": "stdnum.de.idnr",
    "dk-DK": "stdnum.dk.cpr",
    "el-CY": "stdnum.cy.vat",
    "el-GR": "stdnum.gr.vat",
    "en-GB": "stdnum.gb.utr",
    "en-IE": "stdnum.ie.pps",
    "en-US": "stdnum.us.tin",
    "es-ES": "stdnum.es.nif",
    "et-EE": "stdnum.ee.ik",
    "fi-FI": "stdnum.fi.hetu",
    "fr-BE": "stdnum.be.nn",
    "fr-FR": "stdnum.fr.nif",
    "hr-HR": "stdnum.hr.oib",
    "it-IT": "stdnum.it.codicefiscale",
    "lt-LT": "stdnum.lt.asmens",
    "lv-LV": "stdnum.lv.pvn",
    "mt-MT": "stdnum.mt.vat",
    "nl-BE": "stdnum.be.nn",
    "nl-NL": "stdnum.nl.bsn",
    "pl-PL": "stdnum.pl.pesel",
    "pt-PT": "stdnum.pt.nif",
    "ro-RO": "stdnum.ro.cnp",
    "sk-SK": "stdnum.sk.rc",
    "sl-SI": "stdnum.si.ddv",
    "sv-SE": "stdnum.se.personnummer",
}

# VAT numbers: country code -> python-stdnum module
VAT_MODULES: dict[str, str] = {
    "GB": "stdnum.gb.vat",
    "IT": "stdnum.it.iva",
}

# National identity cards: locale -> python-stdnum module
IDENTITY_CARD_MODULES: dict[str, str] = {
    "ES": "stdnum.es.dni",
    "FI": "stdnum.fi.hetu",
    "IN": "stdnum.in_.aadhaar",
    "IT": "stdnum.it.codicefiscale",
    "NO": "stdnum.no.fodselsnummer",
    "he-IL": "stdnum.il.idnr",
    "zh-CN": "stdnum.cn.ric",
}

HASH_LENGTHS: dict[str, int] = {
    "md5": 32, "md4": 32, "sha1": 40, "sha256": 64, "sha384": 96, "sha512": 128,
    "ripemd128": 32, "ripemd160": 40, "tiger128": 32, "tiger160": 40, "tiger192": 48,
    "crc32": 8, "crc32b": 8,
}
