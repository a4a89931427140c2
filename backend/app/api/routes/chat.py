from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas import ChatRequest, ChatResponse, ModelsResponse, RecentQAsResponse
from ...services.assistant import AssistantService, InvalidRequest
from ...services.llm import UpstreamError
from ..deps import get_assistant

router = APIRouter(prefix="/api", tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(payload: ChatRequest, assistant: AssistantService = Depends(get_assistant)):
    try:
        record = await assistant.chat(payload.message, payload.model)
    except InvalidRequest as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except UpstreamError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    return ChatResponse(response=record.answer, model=record.model)


@router.get("/models", response_model=ModelsResponse)
async def list_models(assistant: AssistantService = Depends(get_assistant)):
    return ModelsResponse(default=assistant.default_model, available=assistant.available_models())


@router.get("/recent", response_model=RecentQAsResponse)
async def list_recent(assistant: AssistantService = Depends(get_assistant)):
    return RecentQAsResponse(recent_qas=await assistant.recent_records())


__all__ = [
    "router",
]
