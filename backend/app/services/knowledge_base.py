from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import List, Optional

from ..db.storage import JsonRecordFile
from ..models import KnowledgeItem


def parse_tags(raw: Optional[str]) -> List[str]:
    """Split a comma separated tag string into trimmed, unique tags."""
    if not raw:
        return []
    tags: List[str] = []
    for piece in raw.split(","):
        tag = piece.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


class KnowledgeStore:
    """Append-ordered collection of promoted answers, mirrored to disk."""

    def __init__(self, storage: JsonRecordFile[KnowledgeItem]) -> None:
        self._storage = storage
        self._items: List[KnowledgeItem] = []
        self._next_id = 1
        self._lock = asyncio.Lock()

    @property
    def next_id(self) -> int:
        return self._next_id

    async def load(self) -> None:
        items = await asyncio.to_thread(self._storage.load)
        async with self._lock:
            self._items = items
            self._next_id = max((item.id for item in items), default=0) + 1

    async def insert(self, title: str, content: str, model: str, tags_raw: Optional[str] = "") -> KnowledgeItem:
        tags = parse_tags(tags_raw)
        async with self._lock:
            item = KnowledgeItem(
                id=self._next_id,
                title=title,
                content=content,
                model=model,
                timestamp=datetime.now(timezone.utc),
                tags=tags,
            )
            self._next_id += 1
            self._items.append(item)
            await asyncio.to_thread(self._storage.save, list(self._items))
        return item

    async def delete(self, item_id: int) -> bool:
        async with self._lock:
            for index, item in enumerate(self._items):
                if item.id == item_id:
                    del self._items[index]
                    await asyncio.to_thread(self._storage.save, list(self._items))
                    return True
        return False

    async def list_items(self, tag: Optional[str] = None) -> List[KnowledgeItem]:
        wanted = tag.strip().casefold() if tag else ""
        async with self._lock:
            if not wanted:
                return list(self._items)
            return [
                item
                for item in self._items
                if wanted in {existing.casefold() for existing in item.tags}
            ]


__all__ = ["KnowledgeStore", "parse_tags"]
