"""Shared in-memory collection used by the store implementations."""

import re
from typing import Generic, TypeVar

from pydantic import BaseModel

from signcrm.core.exceptions import DuplicateRecordError

M = TypeVar("M", bound=BaseModel)

_SUFFIX_RE = re.compile(r"-(\d+)$")


class InMemoryCollection(Generic[M]):
    """
    Ordered id -> record mapping.

    Records are copied on the way in and out so a caller holding a
    returned object cannot change stored state without saving it.
    """

    def __init__(self, prefix: str) -> None:
        self._prefix = prefix
        self._records: dict[str, M] = {}
        self._sequence = 0

    def next_id(self) -> str:
        self._sequence += 1
        return f"{self._prefix}-{self._sequence}"

    def _track(self, record_id: str) -> None:
        # keep generated ids clear of seeded ones
        match = _SUFFIX_RE.search(record_id)
        if match and record_id.startswith(f"{self._prefix}-"):
            self._sequence = max(self._sequence, int(match.group(1)))

    def add(self, record: M, *, first: bool = False) -> M:
        """Store a new record, assigning the next id when it has none.

        Raises:
            DuplicateRecordError: The record's id is already stored.
        """
        record_id = getattr(record, "id", None) or self.next_id()
        if record_id in self._records:
            raise DuplicateRecordError(record_id)
        self._track(record_id)
        stored = record.model_copy(update={"id": record_id}, deep=True)
        if first:
            self._records = {record_id: stored, **self._records}
        else:
            self._records[record_id] = stored
        return stored.model_copy(deep=True)

    def get(self, record_id: str) -> M | None:
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record is not None else None

    def contains(self, record_id: str | None) -> bool:
        return record_id is not None and record_id in self._records

    def replace(self, record_id: str, record: M) -> M:
        self._records[record_id] = record.model_copy(deep=True)
        return record.model_copy(deep=True)

    def remove(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    def values(self) -> list[M]:
        return [r.model_copy(deep=True) for r in self._records.values()]

    def __len__(self) -> int:
        return len(self._records)
