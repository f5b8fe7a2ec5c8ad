from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, TypeVar, Union

from .aggregate import Aggregate, Number, accumulate, numeric_values, require_field, total
from .paths import resolve_path
from .query import Where, check_filter_fields, filter_fields, filter_where
from .records import RecordShape
from .storage import FileStorage
from .trace import TraceSink, Tracer

T = TypeVar("T")
A = TypeVar("A")

class Database:
    """
    Document store keeping one JSON file per record, in a directory per record type.

    Every operation takes a representative record value ("zero") whose type
    picks the table, and up to two location overrides, prefix and suffix:

        db.insert("p0926", Person("James", 33, False))          # ./person/p0926.json
        db.insert("w1132", Person("Joerg", 22, True), "data")   # ./data/person/w1132.json
        db.select("q9823", Person(), "data", "people")           # ./data/people/q9823.json

    Nothing is cached: each call reads the files as they are at call time.
    """
    def __init__(
        self,
        root: Optional[str] = None,
        *,
        on_trace: Optional[TraceSink] = None,
        indent: Union[str, int, None] = "\t",
    ) -> None:
        self.root = root
        self._fs = FileStorage(root, indent=indent)
        self._trace = Tracer(on_trace)

    def table_path(self, zero: Any, *location: str) -> str:
        """Table directory for zero's record type under the given location."""
        return resolve_path(RecordShape.of(zero).table, *location)

    # ----- Document store -----

    def insert(self, rec_id: str, value: Any, *location: str) -> None:
        """Write (or overwrite) a record; the table directory is created on demand."""
        shape = RecordShape.of(value)
        table = resolve_path(shape.table, *location)
        path = self._fs.write(table, rec_id, shape.to_data(value))
        self._trace.emit("insert", path, id=rec_id)

    def select(self, rec_id: str, zero: T, *location: str) -> T:
        """
        Read one record. A missing record is a soft miss: `zero` comes back
        unchanged and the miss is only traced.
        """
        rec = self._read(rec_id, zero, location)
        if rec is None:
            return zero
        return rec

    def get(self, rec_id: str, zero: T, *location: str) -> Optional[T]:
        """Like select(), but None on a miss, so absence is distinguishable from zero."""
        return self._read(rec_id, zero, location)

    def exists(self, rec_id: str, zero: Any, *location: str) -> bool:
        table = self.table_path(zero, *location)
        return self._fs.exists(table, rec_id)

    def select_ids(self, zero: Any, *location: str) -> List[str]:
        """Ids of all records in the table, in directory order."""
        table = self.table_path(zero, *location)
        ids = self._fs.list_ids(table)
        self._trace.emit("select_ids", table, ids=ids)
        return ids

    def delete(self, rec_id: str, zero: Any, *location: str) -> None:
        """Remove one record; a missing record raises StoreIOError."""
        table = self.table_path(zero, *location)
        path = self._fs.remove(table, rec_id)
        self._trace.emit("delete", path, id=rec_id)

    def _read(self, rec_id: str, zero: T, location: tuple) -> Optional[T]:
        shape = RecordShape.of(zero)
        table = resolve_path(shape.table, *location)
        data = self._fs.read(table, rec_id)
        if data is None:
            self._trace.emit("miss", f"record {rec_id!r} not found in {table}", id=rec_id)
            return None
        self._trace.emit("select", table, id=rec_id)
        return shape.from_data(data, zero)

    # ----- Scan -----

    def select_all(self, zero: T, *location: str) -> Dict[str, T]:
        """
        Every record of the table, keyed by id. Not atomic: a record removed
        after the listing shows up as `zero`.
        """
        docs: Dict[str, T] = {}
        for rec_id in self.select_ids(zero, *location):
            docs[rec_id] = self.select(rec_id, zero, *location)
        self._trace.emit("select_all", self.table_path(zero, *location), ids=list(docs))
        return docs

    # ----- Query -----

    def select_where(self, zero: T, where: Where, *location: str) -> Dict[str, T]:
        """
        SELECT * FROM <table> WHERE where(record):

            db.select_where(Person(), lambda p: p.sex and p.age == 55)
        """
        docs = filter_where(self.select_all(zero, *location).items(), where)
        self._trace.emit("select_where", "", ids=list(docs))
        return docs

    def select_id_where(self, zero: Any, where: Where, *location: str) -> List[str]:
        ids = list(self.select_where(zero, where, *location))
        self._trace.emit("select_id_where", "", ids=ids)
        return ids

    def select_filter(self, zero: T, filters: Mapping[str, Any], *location: str) -> Dict[str, T]:
        """
        Field-equality filter: {"Name": "jonas", "Sex": True} keeps records whose
        fields render to the same trimmed, lowercased text. Unknown field names
        raise FieldError before any file is read.
        """
        shape = RecordShape.of(zero)
        check_filter_fields(shape, filters)
        docs = filter_fields(shape, self.select_all(zero, *location).items(), filters)
        self._trace.emit("select_filter", "", filters=dict(filters), ids=list(docs))
        return docs

    # ----- Aggregation -----

    def select_where_aggreg(
        self, zero: T, where: Where, aggregator: A, aggregate: Aggregate, *location: str
    ) -> Dict[str, T]:
        """
        Filtered scan that also feeds each surviving record to
        `aggregate(aggregator, rec_id, record)`; the caller reads the
        aggregator afterwards:

            legs = {"count": 0, "sum": 0}
            def add(acc, _id, a):
                acc["count"] += 1
                acc["sum"] += a.legs
            db.select_where_aggreg(Animal(), has_beak, legs, add, "prefix")
        """
        docs = self.select_where(zero, where, *location)
        accumulate(docs, aggregator, aggregate)
        self._trace.emit("select_where_aggreg", "", ids=list(docs), aggregator=aggregator)
        return docs

    def select_aggreg(self, zero: T, aggregator: A, aggregate: Aggregate, *location: str) -> Dict[str, T]:
        docs = self.select_all(zero, *location)
        accumulate(docs, aggregator, aggregate)
        self._trace.emit("select_aggreg", "", ids=list(docs), aggregator=aggregator)
        return docs

    def count_where_aggreg(
        self, zero: Any, where: Where, aggregator: A, aggregate: Aggregate, *location: str
    ) -> int:
        n = accumulate(self.select_where(zero, where, *location), aggregator, aggregate)
        self._trace.emit("count_where_aggreg", "", count=n, aggregator=aggregator)
        return n

    def count_aggreg(self, zero: Any, aggregator: A, aggregate: Aggregate, *location: str) -> int:
        n = accumulate(self.select_all(zero, *location), aggregator, aggregate)
        self._trace.emit("count_aggreg", "", count=n, aggregator=aggregator)
        return n

    def count_where(self, zero: Any, where: Where, *location: str) -> int:
        n = len(self.select_where(zero, where, *location))
        self._trace.emit("count_where", "", count=n)
        return n

    def count(self, zero: Any, *location: str) -> int:
        n = len(self.select_all(zero, *location))
        self._trace.emit("count", "", count=n)
        return n

    def sum(self, zero: Any, field_name: str, *location: str) -> Number:
        """Sum of a numeric field over the whole table; FieldError if absent or non-numeric."""
        shape = RecordShape.of(zero)
        require_field(shape, field_name)
        values = numeric_values(shape, self.select_all(zero, *location), field_name)
        result = total(values)
        self._trace.emit("sum", field_name, values=values, sum=result)
        return result

    def sum_where(self, zero: Any, field_name: str, where: Where, *location: str) -> Number:
        shape = RecordShape.of(zero)
        require_field(shape, field_name)
        values = numeric_values(shape, self.select_where(zero, where, *location), field_name)
        result = total(values)
        self._trace.emit("sum_where", field_name, values=values, sum=result)
        return result
