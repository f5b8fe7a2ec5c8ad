from __future__ import annotations
import os

RECORD_SUFFIX = ".json"


def resolve_path(table_name: str, *overrides: str) -> str:
    """
    Table directory for `table_name`, given up to two overrides (prefix, suffix):

      resolve_path("person")                    -> "./person/"
      resolve_path("person", "data")            -> "./data/person/"
      resolve_path("person", "data", "people")  -> "./data/people/"
      resolve_path("person", "/tmp", "")        -> "/tmp/"

    The suffix replaces the table name, an empty suffix places records directly
    under the prefix. Overrides past the second are ignored. No I/O.
    """
    prefix = overrides[0] if len(overrides) > 0 else ""
    suffix = overrides[1] if len(overrides) > 1 else table_name
    if prefix and suffix:
        joined = prefix.rstrip(os.sep) + os.sep + suffix.lstrip(os.sep)
    else:
        joined = prefix or suffix
    cleaned = os.path.normpath(joined) if joined else os.curdir
    if cleaned == os.curdir:
        return os.curdir + os.sep
    if not os.path.isabs(cleaned) and cleaned.split(os.sep, 1)[0] != os.pardir:
        cleaned = os.curdir + os.sep + cleaned
    return cleaned.rstrip(os.sep) + os.sep


def record_path(table_dir: str, rec_id: str) -> str:
    return os.path.join(table_dir, rec_id + RECORD_SUFFIX)


def strip_suffix(name: str) -> str | None:
    """Record id for a directory entry name, or None if it is not a record file."""
    if not name.endswith(RECORD_SUFFIX):
        return None
    return name[: -len(RECORD_SUFFIX)]
