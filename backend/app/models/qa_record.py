from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class QARecord(BaseModel):
    """One completed chat exchange kept in the recent history."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    id: int = 0
    question: str
    answer: str
    model: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
