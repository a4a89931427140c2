from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from ..db.storage import JsonRecordFile
from ..models import QARecord

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 5


class RecentQAStore:
    """Keeps the most recent chat exchanges, newest first, mirrored to disk."""

    def __init__(self, storage: JsonRecordFile[QARecord], capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._storage = storage
        self._capacity = capacity
        self._records: List[QARecord] = []
        self._next_id = 1
        self._lock = asyncio.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def next_id(self) -> int:
        return self._next_id

    async def load(self) -> None:
        records = await asyncio.to_thread(self._storage.load)
        async with self._lock:
            # ids seen in an over-long file stay burned even though the tail is dropped
            self._next_id = max((record.id for record in records), default=0) + 1
            self._records = records[: self._capacity]
        if len(records) > self._capacity:
            logger.warning(
                "Recent history file held %d records; keeping the newest %d",
                len(records),
                self._capacity,
            )

    async def insert(self, record: QARecord) -> QARecord:
        async with self._lock:
            stored = record.model_copy(update={"id": self._next_id})
            self._next_id += 1
            self._records.insert(0, stored)
            del self._records[self._capacity :]
            await asyncio.to_thread(self._storage.save, list(self._records))
        return stored

    async def find(self, record_id: int) -> Optional[QARecord]:
        async with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
        return None

    async def list_records(self) -> List[QARecord]:
        async with self._lock:
            return list(self._records)


__all__ = ["DEFAULT_CAPACITY", "RecentQAStore"]
