from __future__ import annotations
import numbers
from typing import Any, Callable, List, Mapping, TypeVar, Union

from .errors import FieldError
from .records import RecordShape

T = TypeVar("T")
A = TypeVar("A")
Aggregate = Callable[[A, str, T], None]
Number = Union[int, float]

def accumulate(records: Mapping[str, T], aggregator: A, aggregate: Aggregate) -> int:
    """
    Call `aggregate(aggregator, rec_id, record)` once per record, in mapping order.
    The aggregator is owned by the caller and mutated in place; returns the number
    of records visited.
    """
    n = 0
    for rec_id, rec in records.items():
        aggregate(aggregator, rec_id, rec)
        n += 1
    return n

def require_field(shape: RecordShape, field_name: str) -> None:
    if not shape.has_field(field_name):
        raise FieldError(f"{shape.record_type.__name__} has no field {field_name!r}", field_name)

def numeric_values(shape: RecordShape, records: Mapping[str, Any], field_name: str) -> List[Number]:
    require_field(shape, field_name)
    values: List[Number] = []
    for rec_id, rec in records.items():
        v = shape.get_field(rec, field_name)
        # bool is an int subclass but never a quantity
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise FieldError(
                f"field {field_name!r} of record {rec_id!r} is not numeric: {v!r}", field_name
            )
        values.append(v)
    return values

def total(values: List[Number]) -> Number:
    return sum(values, 0)
