from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..models import KnowledgeItem, QARecord
from .knowledge_base import KnowledgeStore
from .llm import Completer
from .qa_history import RecentQAStore

logger = logging.getLogger(__name__)


class InvalidRequest(ValueError):
    """Raised for input that is rejected before touching any store."""


class AssistantService:
    """Coordinates chat requests, the recent history and the knowledge base."""

    def __init__(
        self,
        recent: RecentQAStore,
        knowledge: KnowledgeStore,
        complete: Completer,
        *,
        default_model: str,
        available_models: Optional[List[str]] = None,
    ) -> None:
        self.recent = recent
        self.knowledge = knowledge
        self._complete = complete
        self.default_model = default_model
        self._available_models = list(available_models or [default_model])

    def available_models(self) -> List[str]:
        return list(self._available_models)

    async def load(self) -> None:
        await self.knowledge.load()
        await self.recent.load()

    async def chat(self, message: str, model: Optional[str] = None) -> QARecord:
        if not message:
            raise InvalidRequest("Message cannot be empty")
        resolved_model = (model or "").strip() or self.default_model

        # UpstreamError propagates untouched; nothing is recorded on failure.
        answer = await self._complete(message, resolved_model)

        record = QARecord(
            question=message,
            answer=answer,
            model=resolved_model,
            timestamp=datetime.now(timezone.utc),
        )
        stored = await self.recent.insert(record)
        logger.debug("Recorded exchange %d using model '%s'", stored.id, resolved_model)
        return stored

    async def recent_records(self) -> List[QARecord]:
        return await self.recent.list_records()

    async def promote(self, record_id: int, title: str, tags: Optional[str] = "") -> Optional[KnowledgeItem]:
        if not title:
            raise InvalidRequest("Title cannot be empty")
        source = await self.recent.find(record_id)
        if source is None:
            return None
        return await self.knowledge.insert(title, source.answer, source.model, tags)

    async def knowledge_items(self, tag: Optional[str] = None) -> List[KnowledgeItem]:
        return await self.knowledge.list_items(tag)

    async def delete_knowledge(self, item_id: int) -> bool:
        return await self.knowledge.delete(item_id)


__all__ = ["AssistantService", "InvalidRequest"]
