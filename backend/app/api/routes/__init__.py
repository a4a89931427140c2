from __future__ import annotations

from . import chat, knowledge

__all__ = [
    "chat",
    "knowledge",
]
