from .assistant import AssistantService, InvalidRequest
from .knowledge_base import KnowledgeStore, parse_tags
from .llm import ChatCompletionClient, Completer, UpstreamError
from .qa_history import RecentQAStore

__all__ = [
    "AssistantService",
    "ChatCompletionClient",
    "Completer",
    "InvalidRequest",
    "KnowledgeStore",
    "RecentQAStore",
    "UpstreamError",
    "parse_tags",
]
