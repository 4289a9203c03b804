"""Tests for the immutability instance predicate."""

import pytest

from predicates import RecordLike, is_immutable


class TestIsImmutable:
    """isImmutable truth table."""

    @pytest.mark.parametrize(
        "is_new,current,persisted,expected",
        [
            (True, "a", "a", True),
            (True, "a", "b", True),
            (False, "a", "a", True),
            (False, "a", "b", False),
        ],
    )
    def test_truth_table(self, make_record, is_new, current, persisted, expected):
        record = make_record(is_new_record=is_new, current={"email": current}, persisted={"email": persisted})
        assert is_immutable(current, [], "email", record) is expected

    def test_reads_the_named_field(self, make_record):
        record = make_record(current={"email": "a", "name": "x"}, persisted={"email": "a", "name": "y"})
        assert is_immutable("a", [], "email", record) is True
        assert is_immutable("x", [], "name", record) is False

    def test_stub_satisfies_protocol(self, make_record):
        assert isinstance(make_record(), RecordLike)

    def test_registered_under_is_immutable(self, registry, make_record):
        record = make_record(current={"email": "a"}, persisted={"email": "b"})
        assert registry.invoke("isImmutable", "a", [], "email", record) is False
