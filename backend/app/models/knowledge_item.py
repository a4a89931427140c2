from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class KnowledgeItem(BaseModel):
    """A curated answer promoted from the recent history."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    id: int
    title: str
    content: str
    model: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags_as_empty(cls, value):
        # older files store an untagged item as null
        if value is None:
            return []
        return value
