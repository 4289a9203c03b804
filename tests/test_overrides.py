"""Tests for the override set."""

import math
import re

import pytest

from core.errors import ErrorCode, MalformedPattern
from predicates.overrides import (
    compile_pattern,
    default_overrides,
    is_decimal,
    maximum,
    minimum,
    modifier_flags,
    not_empty,
    parse_float_prefix,
    regex,
)


class TestNotEmpty:
    """notEmpty rejects strings made only of whitespace."""

    @pytest.mark.parametrize("value", ["", "   ", "\t\r\n", " \n "])
    def test_blank_strings_fail(self, value):
        assert not_empty(value) is False

    @pytest.mark.parametrize("value", ["a", "  a  ", "0"])
    def test_any_visible_character_passes(self, value):
        assert not_empty(value) is True


class TestIsDecimal:
    """isDecimal accepts optional sign, fraction and exponent."""

    @pytest.mark.parametrize("value", ["1", "-1", "1.5", ".5", "1.", "1e10", "-2.5E-3"])
    def test_decimal_forms_pass(self, value):
        assert is_decimal(value) is True

    @pytest.mark.parametrize("value", ["", "abc", "1.2.3", "+1", "1e"])
    def test_non_decimals_fail(self, value):
        assert is_decimal(value) is False


class TestNumericBounds:
    """min/max parse a leading float and let non-numbers through."""

    def test_leading_float_prefix(self):
        assert parse_float_prefix("12.5kg") == 12.5
        assert parse_float_prefix("  -3") == -3.0
        assert math.isnan(parse_float_prefix("abc"))

    def test_min(self):
        assert minimum("10", 5) is True
        assert minimum("4", 5) is False
        assert minimum("5", 5) is True

    def test_max(self):
        assert maximum("10", 5) is False
        assert maximum("4.9", 5) is True

    def test_nan_passes_both_bounds(self):
        assert minimum("abc", 5) is True
        assert maximum("abc", 5) is True

    def test_non_numeric_bound_fails_numeric_subject(self):
        assert minimum("5", "abc") is False
        assert maximum("5", "abc") is False
        assert minimum("abc", "abc") is True

    def test_bound_read_as_leading_float(self):
        assert minimum("10", "5px") is True
        assert maximum("10", "5px") is False


class TestRegex:
    """regex compiles text patterns with JavaScript modifier letters."""

    def test_search_anywhere_in_subject(self):
        assert regex("hello world", "wor") is True
        assert regex("hello world", "^wor") is False

    def test_modifiers_map_to_flags(self):
        assert modifier_flags("im") == re.IGNORECASE | re.MULTILINE
        assert modifier_flags("gs") == re.DOTALL
        assert regex("HELLO", "hello", "i") is True
        assert regex("HELLO", "hello") is False

    def test_compiled_pattern_used_as_is(self):
        pattern = re.compile(r"\d+")
        assert compile_pattern(pattern, "i") is pattern
        assert regex("abc123", pattern) is True

    def test_subject_coerced_to_string(self):
        assert regex(12345, r"^\d+$") is True

    def test_unknown_modifier_is_malformed(self):
        with pytest.raises(MalformedPattern) as exc_info:
            regex("abc", "a", "x")
        assert exc_info.value.error.code == ErrorCode.E2032_MALFORMED_PATTERN

    def test_invalid_pattern_chains_re_error(self):
        with pytest.raises(MalformedPattern) as exc_info:
            regex("abc", "(unclosed")
        assert isinstance(exc_info.value.__cause__, re.error)


class TestDefaultOverrides:
    """Aliases delegate to the injected base library."""

    @pytest.fixture
    def overrides(self, recording):
        return default_overrides(recording.library())

    def test_len_delegates_to_is_length(self, overrides, recording):
        assert overrides["len"]("abc", 1, 5) is True
        assert recording.calls_to("isLength") == [(("abc", 1, 5), {})]

    def test_is_url_delegates_to_is_url(self, overrides, recording):
        overrides["isUrl"]("http://example.com")
        assert recording.calls_to("isURL") == [(("http://example.com",), {})]

    def test_ip_aliases_pass_version(self, overrides, recording):
        overrides["isIPv4"]("127.0.0.1")
        overrides["isIPv6"]("::1")
        assert recording.calls_to("isIP") == [(("127.0.0.1", 4), {}), (("::1", 6), {})]

    def test_not_in_negates_is_in(self, overrides, recording):
        assert overrides["notIn"]("a", ["a", "b"]) is False
        recording.result = False
        assert overrides["notIn"]("c", ["a", "b"]) is True

    def test_is_null_maps_to_is_empty(self, recording):
        library = recording.library()
        assert default_overrides(library)["isNull"] is library["isEmpty"]

    @pytest.mark.parametrize("subject,pattern", [("abc", "b"), ("abc", "z"), ("ABC", "^a")])
    def test_negated_regex_aliases_are_complements(self, overrides, subject, pattern):
        expected = overrides["regex"](subject, pattern, "")
        assert overrides["notRegex"](subject, pattern, "") is (not expected)
        assert overrides["not"](subject, pattern, "") is (not expected)
        assert overrides["is"](subject, pattern, "") is expected
        assert overrides["matches"](subject, pattern, "") is expected

    def test_contains_requires_non_empty_element(self, overrides):
        assert overrides["contains"]("abc", "b") is True
        assert overrides["contains"]("abc", "") is False
        assert overrides["contains"]("abc", None) is False
        assert overrides["notContains"]("abc", "") is True
        assert overrides["notContains"]("abc", "z") is True
        assert overrides["notContains"]("abc", "a") is False

    def test_contains_is_case_sensitive(self, overrides):
        assert overrides["contains"]("abc", "B") is False

    def test_not_null(self, overrides):
        assert overrides["notNull"]("") is True
        assert overrides["notNull"](0) is True
        assert overrides["notNull"](None) is False

    @pytest.mark.parametrize("value", ["2021-03-04", "2021-03-04T10:00:00Z", "Thu, 04 Mar 2021 10:00:00 +0000", "March 4, 2021"])
    def test_is_date_accepts_common_formats(self, overrides, value):
        assert overrides["isDate"](value) is True

    @pytest.mark.parametrize("value", ["", "not a date", "2021-13-45"])
    def test_is_date_rejects_garbage(self, overrides, value):
        assert overrides["isDate"](value) is False
