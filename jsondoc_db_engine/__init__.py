"""Embedded document store: one JSON file per record, one directory per record type."""
from __future__ import annotations

from .codec import decode, encode
from .database import Database
from .errors import ConfigError, DecodeError, DocDBError, FieldError, StoreIOError
from .paths import RECORD_SUFFIX, resolve_path
from .records import RecordShape
from .trace import Tracer, trace_printer

__all__ = [
    "Database",
    "RecordShape",
    "Tracer",
    "trace_printer",
    "resolve_path",
    "RECORD_SUFFIX",
    "encode",
    "decode",
    "DocDBError",
    "StoreIOError",
    "DecodeError",
    "FieldError",
    "ConfigError",
]
