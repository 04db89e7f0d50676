"""Key/value backed storage for todo records."""

from .key_value import KeyValueStore, MemoryKeyVal
from .record_store import CorruptCollectionError, IdGenerator, InvalidRecordError, RecordStore
from .todo_record import TodoRecord, normalize_id
