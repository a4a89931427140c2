from .chat import ChatRequest, ChatResponse, ModelsResponse, RecentQAsResponse
from .knowledge import (
    AddToKnowledgeRequest,
    AddToKnowledgeResponse,
    KnowledgeListResponse,
    MessageResponse,
)

__all__ = [
    "AddToKnowledgeRequest",
    "AddToKnowledgeResponse",
    "ChatRequest",
    "ChatResponse",
    "KnowledgeListResponse",
    "MessageResponse",
    "ModelsResponse",
    "RecentQAsResponse",
]
