from __future__ import annotations
import dataclasses
import threading
from typing import Any, Dict, Tuple, Type

from .errors import FieldError

class RecordShape:
    """
    Field-accessor capability for one record type.

    Record types are dataclasses; the shape is computed once per type and
    gives the engine everything it needs to know about a record without
    poking at arbitrary attributes: table name, field names, named field
    access, payload conversion and reconstruction.
    """
    _cache: Dict[type, "RecordShape"] = {}
    _cache_lock = threading.Lock()

    def __init__(self, record_type: Type[Any]) -> None:
        if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
            raise TypeError(f"record types must be dataclasses, got {record_type!r}")
        self.record_type = record_type
        self.table = record_type.__name__.lower()
        self.field_names: Tuple[str, ...] = tuple(
            f.name for f in dataclasses.fields(record_type) if f.init
        )

    @classmethod
    def of(cls, value: Any) -> "RecordShape":
        """Shape for a record instance or a record type."""
        record_type = value if isinstance(value, type) else type(value)
        with cls._cache_lock:
            shape = cls._cache.get(record_type)
            if shape is None:
                shape = cls(record_type)
                cls._cache[record_type] = shape
        return shape

    def has_field(self, name: str) -> bool:
        return name in self.field_names

    def get_field(self, record: Any, name: str) -> Any:
        if not self.has_field(name):
            raise FieldError(f"{self.record_type.__name__} has no field {name!r}", name)
        return getattr(record, name)

    def to_data(self, record: Any) -> Dict[str, Any]:
        """Payload for the envelope's Data member, in field declaration order."""
        if type(record) is not self.record_type:
            raise TypeError(f"expected {self.record_type.__name__}, got {type(record).__name__}")
        return {name: _plain(getattr(record, name)) for name in self.field_names}

    def from_data(self, data: Dict[str, Any], zero: Any) -> Any:
        """
        Rebuild a record from a decoded payload. Fields missing from the payload
        keep the zero value's content; keys the type does not declare are dropped.
        """
        known = {k: v for k, v in data.items() if k in self.field_names}
        return dataclasses.replace(zero, **known)

def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value
