from __future__ import annotations
import os
import tempfile
import threading
from typing import Any, Dict, List, Optional, Union

from .codec import decode, encode
from .errors import StoreIOError
from .paths import record_path, strip_suffix

class FileStorage:
    """
    Low-level record file I/O: one `<id>.json` envelope per record inside a
    table directory.

    Every primitive runs under the instance lock, so within a process no two
    of them interleave on the same storage. There is no cross-process locking.
    Relative table directories are anchored at `root` (the working directory
    when unset).
    """
    def __init__(self, root: Optional[str] = None, indent: Union[str, int, None] = "\t") -> None:
        self.root = root
        self.indent = indent
        self._lock = threading.Lock()

    def locate(self, table_dir: str) -> str:
        if self.root is None or os.path.isabs(table_dir):
            return table_dir
        return os.path.join(self.root, table_dir)

    def write(self, table_dir: str, rec_id: str, payload: Dict[str, Any]) -> str:
        """Create the table directory if needed and (over)write the record file."""
        data = encode(rec_id, payload, indent=self.indent)
        path = record_path(self.locate(table_dir), rec_id)
        with self._lock:
            try:
                os.makedirs(self.locate(table_dir), exist_ok=True)
            except OSError as e:
                raise StoreIOError(f"cannot create table directory: {e}", table_dir) from e
            self._replace(path, data)
        return path

    def read(self, table_dir: str, rec_id: str) -> Optional[Dict[str, Any]]:
        """Decoded payload, or None when the record file does not exist."""
        path = record_path(self.locate(table_dir), rec_id)
        with self._lock:
            try:
                with open(path, "rb") as f:
                    raw = f.read()
            except FileNotFoundError:
                return None
            except OSError as e:
                raise StoreIOError(f"cannot read record file: {e}", path) from e
        _id, data = decode(raw, path)
        return data

    def exists(self, table_dir: str, rec_id: str) -> bool:
        path = record_path(self.locate(table_dir), rec_id)
        with self._lock:
            return os.path.isfile(path)

    def list_ids(self, table_dir: str) -> List[str]:
        """Ids of all record files in the table, in directory listing order."""
        table = self.locate(table_dir)
        ids: List[str] = []
        with self._lock:
            try:
                with os.scandir(table) as it:
                    for entry in it:
                        rec_id = strip_suffix(entry.name)
                        if rec_id is not None and entry.is_file():
                            ids.append(rec_id)
            except OSError as e:
                raise StoreIOError(f"cannot list table directory: {e}", table_dir) from e
        return ids

    def remove(self, table_dir: str, rec_id: str) -> str:
        path = record_path(self.locate(table_dir), rec_id)
        with self._lock:
            try:
                os.remove(path)
            except OSError as e:
                raise StoreIOError(f"cannot remove record file: {e}", path) from e
        return path

    def _replace(self, path: str, data: bytes) -> None:
        # Write next to the target and swap it in, so readers never see a half-written file.
        directory = os.path.dirname(path) or os.curdir
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".tmp-", suffix=".part", dir=directory)
        except OSError as e:
            raise StoreIOError(f"cannot write record file: {e}", path) from e
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, path)
        except OSError as e:
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            raise StoreIOError(f"cannot write record file: {e}", path) from e
