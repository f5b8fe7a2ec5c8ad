from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, Mapping, Tuple, TypeVar

from .errors import FieldError
from .records import RecordShape

T = TypeVar("T")
Where = Callable[[T], bool]

def normalize(value: Any) -> str:
    """Text form used by field-equality filters: default rendering, trimmed, lowercased."""
    return str(value).strip().lower()

def check_filter_fields(shape: RecordShape, filters: Mapping[str, Any]) -> None:
    """
    Every filter key must be a field of the record shape (exact, case-sensitive name).
    """
    unknown = [k for k in filters if not shape.has_field(k)]
    if unknown:
        raise FieldError(
            f"{shape.record_type.__name__} has no field(s): {', '.join(map(repr, unknown))}",
            unknown[0],
        )

def matches_filter(shape: RecordShape, record: Any, filters: Mapping[str, Any]) -> bool:
    for name, target in filters.items():
        if normalize(shape.get_field(record, name)) != normalize(target):
            return False
    return True

def filter_where(items: Iterable[Tuple[str, T]], where: Where) -> Dict[str, T]:
    """Keep the (id, record) pairs whose record satisfies `where`, preserving order."""
    return {rec_id: rec for rec_id, rec in items if where(rec)}

def filter_fields(shape: RecordShape, items: Iterable[Tuple[str, T]], filters: Mapping[str, Any]) -> Dict[str, T]:
    return {rec_id: rec for rec_id, rec in items if matches_filter(shape, rec, filters)}
