"""
In-memory record store shared by the booking repository, room inventory
and guest directory.

Records are pydantic models keyed by a uuid4 string id. Reads hand out
copies so callers can never mutate the stored record behind the store's
back; writes go through `create` / `update` / `delete` only. Every
operation runs under the store's lock.
"""

import threading
import uuid
from typing import Any, Callable, Generic, Iterable, Mapping, Optional, TypeVar

from pydantic import BaseModel

from frontdesk.core.logging import get_logger

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class InMemoryStore(Generic[RecordT]):
    record_type: type[RecordT]
    record_name = "record"

    def __init__(self, records: Iterable[RecordT] = ()):
        self._lock = threading.RLock()
        self._records: dict[str, RecordT] = {}
        for record in records:
            self._records[record.id] = record.model_copy(deep=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    def create(self, data: Mapping[str, Any]) -> str:
        """Store a new record under a fresh id and return the id."""
        record_id = str(uuid.uuid4())
        record = self.record_type(**{**data, "id": record_id})
        with self._lock:
            self._records[record_id] = record
        logger.debug(f"{self.record_name}_stored", record_id=record_id)
        return record_id

    def update(self, record_id: str, **fields: Any) -> bool:
        """
        Shallow-merge fields into an existing record.
        Returns False if the id is unknown. Field values are not re-validated.
        """
        fields.pop("id", None)
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return False
            self._records[record_id] = record.model_copy(update=fields)
        return True

    def delete(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        with self._lock:
            record = self._records.get(record_id)
            return record.model_copy(deep=True) if record is not None else None

    def list_all(self) -> list[RecordT]:
        return self.filter(lambda record: True)

    def filter(self, predicate: Callable[[RecordT], bool]) -> list[RecordT]:
        """Snapshot of matching records in insertion order."""
        with self._lock:
            return [r.model_copy(deep=True) for r in self._records.values() if predicate(r)]
