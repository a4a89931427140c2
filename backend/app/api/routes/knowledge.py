from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...schemas import (
    AddToKnowledgeRequest,
    AddToKnowledgeResponse,
    KnowledgeListResponse,
    MessageResponse,
)
from ...services.assistant import AssistantService, InvalidRequest
from ..deps import get_assistant

router = APIRouter(prefix="/api/knowledge", tags=["knowledge"])


@router.post("/add", response_model=AddToKnowledgeResponse)
async def add_to_knowledge(
    payload: AddToKnowledgeRequest, assistant: AssistantService = Depends(get_assistant)
):
    try:
        item = await assistant.promote(payload.record_id, payload.title, payload.tags)
    except InvalidRequest as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA record not found.")
    return AddToKnowledgeResponse(message="Added to knowledge base.", item=item)


@router.get("", response_model=KnowledgeListResponse)
async def list_knowledge(
    tag: Optional[str] = Query(default=None),
    assistant: AssistantService = Depends(get_assistant),
):
    return KnowledgeListResponse(knowledge_base=await assistant.knowledge_items(tag))


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_knowledge(item_id: int, assistant: AssistantService = Depends(get_assistant)):
    if not await assistant.delete_knowledge(item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Knowledge item not found.")
    return MessageResponse(message="Knowledge item deleted.")


__all__ = [
    "router",
]
