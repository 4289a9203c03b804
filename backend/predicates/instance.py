"""Instance predicates: checks that read the record being validated."""
from __future__ import annotations

from typing import Any, Sequence

from .types import Predicate, RecordLike


def is_immutable(value: Any, validator_args: Sequence[Any], field: str, record: RecordLike) -> bool:
    """True for new records, or when the field still equals its persisted value."""
    return bool(record.is_new_record) or record.get_data_value(field) == record.previous(field)


def default_instance_predicates() -> dict[str, Predicate]:
    return {"isImmutable": is_immutable}
