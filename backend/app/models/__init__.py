from .knowledge_item import KnowledgeItem
from .qa_record import QARecord

__all__ = [
    "KnowledgeItem",
    "QARecord",
]
