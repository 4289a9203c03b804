"""Tests for registry composition and the registry surface."""

import threading

import pytest

from core.errors import Err, ErrorCode, Ok, UnknownPredicate
from predicates import build_default_registry, compose, default_guards, default_overrides
from predicates.guards import Guard, ParameterConstraint


def _named(result, label):
    def predicate(*args, **kwargs):
        return result
    predicate.label = label
    return predicate


class TestCompose:
    """Layer order: base, overrides, guards, instance predicates."""

    def test_override_replaces_base_entry(self):
        registry = compose(
            {"contains": _named(False, "base")},
            {"contains": _named(True, "override")},
            {},
            {},
        )
        assert registry.get("contains").label == "override"

    def test_guard_wraps_override_not_base(self):
        base = _named(False, "base")
        override = _named(True, "override")
        guard = Guard("isVAT", ParameterConstraint("country_code", ("GB",)))
        registry = compose({"isVAT": base}, {"isVAT": override}, {"isVAT": guard}, {})
        assert registry.invoke("isVAT", "x", "GB") is True
        assert registry.get("isVAT").__wrapped__ is override

    def test_instance_predicates_come_last(self):
        registry = compose({"isImmutable": _named(False, "base")}, {}, {}, {"isImmutable": _named(True, "instance")})
        assert registry.get("isImmutable").label == "instance"

    def test_guard_without_delegate_fails_composition(self):
        guard = Guard("isVAT", ParameterConstraint("country_code", ("GB",)))
        with pytest.raises(UnknownPredicate) as exc_info:
            compose({}, {}, {"isVAT": guard}, {})
        assert exc_info.value.name == "isVAT"

    def test_inputs_are_not_mutated(self, recording):
        library = recording.library()
        base = dict(library.predicates)
        overrides = default_overrides(library)
        compose(base, overrides, default_guards(library), {}, trace=True)
        assert base == dict(library.predicates)

    def test_custom_library_flows_through_aliases(self, recording):
        library = recording.library()
        registry = compose(library.predicates, default_overrides(library), default_guards(library), {})
        registry.invoke("isIPv4", "10.0.0.1")
        assert recording.calls_to("isIP") == [(("10.0.0.1", 4), {})]


class TestDefaultRegistry:
    """The composed default registry."""

    def test_composition_is_idempotent(self):
        first, second = build_default_registry(), build_default_registry()
        assert first.names() == second.names()
        assert first is not second
        for name, subject, params in [
            ("isIPv4", "192.168.0.1", ()),
            ("isIPv6", "::1", ()),
            ("notEmpty", "  ", ()),
            ("isISBN", "0306406152", (10,)),
            ("isEmail", "someone@example.com", ()),
        ]:
            assert first.invoke(name, subject, *params) == second.invoke(name, subject, *params)

    def test_extension_does_not_leak_between_registries(self):
        first, second = build_default_registry(), build_default_registry()
        first.extend("isEven", lambda value: int(value) % 2 == 0)
        assert "isEven" in first
        assert "isEven" not in second

    def test_expected_names_registered(self, registry):
        for name in ("notEmpty", "len", "isUrl", "isIPv4", "isIPv6", "notIn", "regex", "notRegex",
                     "isDecimal", "min", "max", "not", "contains", "notContains", "is", "matches",
                     "isImmutable", "notNull", "isNull", "isDate", "isISBN", "isVAT", "isEmail"):
            assert registry.has_predicate(name), name

    def test_slug_is_not_registered(self, registry):
        assert not registry.has_predicate("isSlug")

    def test_contains_uses_override(self, registry):
        assert registry.invoke("contains", "abc", "") is False

    def test_vat_guard_over_base(self, registry):
        with pytest.raises(ValueError):
            registry.invoke("isVAT", "FR40303265045", "FR")

    def test_attribute_access(self, registry):
        assert registry.isIPv4("127.0.0.1") is True
        assert getattr(registry, "not")("abc", "z") is True
        with pytest.raises(AttributeError):
            registry.isNothing


class TestRegistrySurface:
    """invoke / evaluate / extend."""

    def test_unknown_predicate_raises(self, registry):
        with pytest.raises(UnknownPredicate) as exc_info:
            registry.invoke("isNothing", "x")
        assert exc_info.value.error.code == ErrorCode.E2031_UNKNOWN_PREDICATE
        assert isinstance(exc_info.value, LookupError)

    def test_extend_then_invoke(self, registry):
        registry.extend("isEven", lambda value: int(value) % 2 == 0)
        assert registry.has_predicate("isEven")
        assert registry.invoke("isEven", "4") is True
        assert registry.invoke("isEven", "3") is False

    def test_unknown_predicate_still_raises_after_extension(self, registry):
        def is_foo(value):
            return value.startswith("foo")

        registry.extend("isFoo", is_foo)
        for value in ("foo", "foobar", "bar", ""):
            assert registry.invoke("isFoo", value) == is_foo(value)
        with pytest.raises(UnknownPredicate):
            registry.invoke("isUnregisteredName", "foo")

    def test_extend_replaces_existing(self, registry):
        registry.extend("notEmpty", lambda value: True)
        assert registry.invoke("notEmpty", "") is True

    def test_len_and_names(self, registry):
        count = len(registry)
        registry.extend("isEven", lambda value: True)
        assert len(registry) == count + 1
        assert registry.names() == sorted(registry.names())
        assert list(registry) == registry.names()

    def test_concurrent_extend_keeps_every_entry(self, registry):
        count = len(registry)
        threads = [
            threading.Thread(target=registry.extend, args=(f"custom{i}", lambda value: True))
            for i in range(20)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(registry) == count + 20

    def test_evaluate_ok(self, registry):
        assert registry.evaluate("isIPv4", "10.0.0.1") == Ok(True)
        assert registry.evaluate("isIPv4", "nope") == Ok(False)

    def test_evaluate_invalid_parameter(self, registry):
        result = registry.evaluate("isVAT", "x", "FR")
        assert isinstance(result, Err)
        assert result.error.code == ErrorCode.E2030_INVALID_PARAMETER

    def test_evaluate_unknown_predicate(self, registry):
        result = registry.evaluate("isNothing", "x")
        assert result.is_err()
        assert result.unwrap_err().code == ErrorCode.E2031_UNKNOWN_PREDICATE

    def test_evaluate_base_value_error(self, registry):
        result = registry.evaluate("isIdentityCard", "x", "ZZ")
        assert result.is_err()
        assert result.unwrap_err().code == ErrorCode.E2005_CONSTRAINT_VIOLATION
