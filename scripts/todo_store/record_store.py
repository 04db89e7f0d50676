"""An ordered collection of TodoRecords persisted under one key of a key/value store."""

from __future__ import annotations

import json
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

from pydantic import ValidationError

from utils import conf
from utils.log import todo_log

from .key_value import KeyValueStore
from .todo_record import TodoRecord, normalize_id, stored_id

_EMPTY_COLLECTION = "[]"


class CorruptCollectionError(ValueError):
    """The stored value is not a JSON array of record objects."""


class InvalidRecordError(ValueError):
    """Record data or a record id failed validation."""


@dataclass
class IdGenerator:
    """Millisecond-timestamp ids that never repeat.

    When the clock has not moved since the last id (or lags behind ids already
    in the collection) the next id is bumped past the highest one seen.
    """

    clock: Callable[[], float] = time.time
    _last: int = field(default=0, init=False, repr=False)

    def next_id(self, existing: Iterable[int] = ()) -> int:
        floor = max(self._last, max(existing, default=0)) + 1
        new_id = max(int(self.clock() * 1000), floor)
        self._last = new_id
        return new_id


@dataclass
class RecordStore:
    """CRUD access to one named collection in a key/value store.

    The whole collection is stored as a single JSON array string under
    ``name``. Every operation reads that value fresh; every mutation writes the
    full array back before returning, so callers can rely on the effect being
    committed once the call returns.

    Constructing a store is the *open* step: an absent (or empty) value is
    initialised to an empty collection, an existing one is loaded and checked
    but never reset.

    Entries are kept as the dicts they were stored as. Only the data passed to
    ``save`` is validated; entries a mutation does not touch are written back
    exactly as read.
    """

    name: str
    kv: KeyValueStore
    id_generator: IdGenerator = field(default_factory=IdGenerator)

    def __post_init__(self):
        if not self.kv.get(self.name):
            self.kv.set(self.name, _EMPTY_COLLECTION)
            todo_log(f"Store '{self.name}': initialised empty collection")
        entries = self._load()
        todo_log(f"Store '{self.name}': opened with {len(entries)} record(s)")

    @classmethod
    def open(cls, name: str = conf.DEFAULT_COLLECTION,
             kv: KeyValueStore | None = None) -> RecordStore:
        """Open *name* in *kv*, defaulting to the JSON file under ``TODO_HOME``."""
        if kv is None:
            from json_key_val import JsonKeyVal
            kv = JsonKeyVal(conf.get_store_file())
            todo_log(f"Store '{name}': using key/value file {kv.file_path}")
        return cls(name=name, kv=kv)

    # -- Queries --

    def find(self, query: Mapping[str, Any]) -> list[TodoRecord]:
        """Records where every field in *query* is present and equal, in stored order.

        Example::

            store.find({"completed": True})
        """
        query = dict(query)
        records = _wrap(self._load())
        return [r for r in records if r.matches(query)]

    def find_all(self) -> list[TodoRecord]:
        """The entire collection."""
        return _wrap(self._load())

    def get(self, record_id: Any) -> TodoRecord | None:
        """Look up the first record with *record_id*."""
        entries = self._load()
        index = self._index_of(entries, self._normalize(record_id))
        if index is None:
            return None
        return TodoRecord.from_stored(entries[index])

    # -- Mutations --

    def save(self, data: Mapping[str, Any] | TodoRecord,
             record_id: Any = None) -> list[TodoRecord]:
        """Create a record, or update the record with *record_id*.

        Update (``record_id`` truthy): each field in *data* overwrites the
        matching field of the first record with that id; other fields are kept.
        Returns the full collection. An unknown id changes nothing.

        Create (``record_id`` falsy): *data* becomes a new record with a fresh
        id, appended to the collection. Returns a one-element list holding the
        new record.
        """
        entries = self._load()
        payload = self._payload(data)

        if record_id:
            target = self._normalize(record_id)
            index = self._index_of(entries, target)
            if index is None:
                todo_log(f"Store '{self.name}': update skipped, no record {target}")
                return _wrap(entries)
            entries[index] = {**entries[index], **self._validate(payload)}
            self._write(entries)
            todo_log(f"Store '{self.name}': updated record {target} ({', '.join(payload)})")
            return _wrap(entries)

        payload.pop("id", None)
        entry = self._validate(payload)
        entry["id"] = self.id_generator.next_id(
            i for i in map(stored_id, entries) if i is not None
        )
        entries.append(entry)
        self._write(entries)
        todo_log(f"Store '{self.name}': created record {entry['id']}")
        return [TodoRecord.from_stored(entry)]

    def remove(self, record_id: Any) -> list[TodoRecord]:
        """Remove the first record with *record_id*. Returns what remains."""
        entries = self._load()
        target = self._normalize(record_id)
        index = self._index_of(entries, target)
        if index is None:
            todo_log(f"Store '{self.name}': remove skipped, no record {target}")
            return _wrap(entries)
        del entries[index]
        self._write(entries)
        todo_log(f"Store '{self.name}': removed record {target}")
        return _wrap(entries)

    def drop(self) -> list[TodoRecord]:
        """Replace the collection with an empty one."""
        self.kv.set(self.name, _EMPTY_COLLECTION)
        todo_log(f"Store '{self.name}': dropped all records")
        return []

    # -- Collection access --

    def __iter__(self) -> Iterator[TodoRecord]:
        return iter(self.find_all())

    def __len__(self) -> int:
        return len(self._load())

    # -- Internals --

    def _load(self) -> list[dict[str, Any]]:
        raw = self.kv.get(self.name)
        if not raw:
            return []
        try:
            entries = json.loads(raw)
        except json.JSONDecodeError as exc:
            todo_log(f"Store '{self.name}': stored value is not JSON")
            raise CorruptCollectionError(
                f"Collection {self.name!r} does not hold valid JSON"
            ) from exc
        if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
            todo_log(f"Store '{self.name}': stored value is not an array of objects")
            raise CorruptCollectionError(
                f"Collection {self.name!r} is not a JSON array of records"
            )
        return entries

    def _write(self, entries: list[dict[str, Any]]) -> None:
        self.kv.set(self.name, json.dumps(entries, ensure_ascii=False))

    @staticmethod
    def _index_of(entries: list[dict[str, Any]], record_id: int) -> int | None:
        for index, entry in enumerate(entries):
            if stored_id(entry) == record_id:
                return index
        return None

    @staticmethod
    def _normalize(record_id: Any) -> int:
        try:
            return normalize_id(record_id)
        except ValueError as exc:
            raise InvalidRecordError(str(exc)) from exc

    @staticmethod
    def _validate(payload: dict[str, Any]) -> dict[str, Any]:
        try:
            return TodoRecord.validate_fields(payload)
        except ValidationError as exc:
            raise InvalidRecordError(f"Invalid record data: {exc}") from exc

    @staticmethod
    def _payload(data: Mapping[str, Any] | TodoRecord) -> dict[str, Any]:
        if isinstance(data, TodoRecord):
            return data.to_dict()
        if isinstance(data, Mapping):
            return dict(data)
        raise TypeError(f"Record data must be a mapping or TodoRecord, got {type(data).__name__}")


def _wrap(entries: list[dict[str, Any]]) -> list[TodoRecord]:
    return [TodoRecord.from_stored(entry) for entry in entries]
