from __future__ import annotations
from typing import Optional


class DocDBError(Exception):
    """Base class for every error raised by the document engine."""


class StoreIOError(DocDBError, OSError):
    """
    A table directory could not be created or listed, or a record file could
    not be written or removed.
    """
    def __init__(self, msg: str, path: Optional[str] = None) -> None:
        super().__init__(msg)
        self.path = path


class DecodeError(DocDBError, ValueError):
    """A record file does not hold a well-formed {Id, Data} envelope."""
    def __init__(self, msg: str, path: Optional[str] = None) -> None:
        super().__init__(msg)
        self.path = path


class FieldError(DocDBError, LookupError):
    """A filter or sum names a field the record shape lacks, or a non-numeric one."""
    def __init__(self, msg: str, field: Optional[str] = None) -> None:
        super().__init__(msg)
        self.field = field


class ConfigError(DocDBError, ValueError):
    pass
