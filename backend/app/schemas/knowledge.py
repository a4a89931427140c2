from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..models import KnowledgeItem


class AddToKnowledgeRequest(BaseModel):
    record_id: int
    title: str = Field(..., min_length=1)
    tags: str = ""


class AddToKnowledgeResponse(BaseModel):
    message: str
    item: KnowledgeItem


class KnowledgeListResponse(BaseModel):
    knowledge_base: List[KnowledgeItem] = Field(default_factory=list)


class MessageResponse(BaseModel):
    message: str


__all__ = [
    "AddToKnowledgeRequest",
    "AddToKnowledgeResponse",
    "KnowledgeListResponse",
    "MessageResponse",
]
