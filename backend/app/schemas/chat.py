from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import QARecord


class ChatRequest(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    message: str = Field(..., min_length=1)
    model: Optional[str] = None


class ChatResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    response: str
    model: str


class ModelsResponse(BaseModel):
    default: str
    available: List[str] = Field(default_factory=list)


class RecentQAsResponse(BaseModel):
    recent_qas: List[QARecord] = Field(default_factory=list)


__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ModelsResponse",
    "RecentQAsResponse",
]
