from __future__ import annotations

from fastapi import Request

from ..services.assistant import AssistantService


def get_assistant(request: Request) -> AssistantService:
    return request.app.state.assistant


__all__ = ["get_assistant"]
