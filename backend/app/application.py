from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import register_routes
from .core.settings import Settings, get_settings
from .db.storage import JsonRecordFile
from .lifecycle import lifespan
from .models import KnowledgeItem, QARecord
from .services.assistant import AssistantService
from .services.knowledge_base import KnowledgeStore
from .services.llm import ChatCompletionClient, Completer
from .services.qa_history import RecentQAStore


def build_assistant(settings: Settings, completer: Optional[Completer] = None) -> AssistantService:
    if completer is None:
        completer = ChatCompletionClient.from_settings(settings).complete
    recent = RecentQAStore(
        JsonRecordFile(settings.recent_qas_file, QARecord),
        capacity=settings.recent_capacity,
    )
    knowledge = KnowledgeStore(JsonRecordFile(settings.knowledge_file, KnowledgeItem))
    return AssistantService(
        recent,
        knowledge,
        completer,
        default_model=settings.default_model,
        available_models=settings.available_models,
    )


def create_app(settings: Optional[Settings] = None, completer: Optional[Completer] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="QA Knowledge Backend", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.assistant = build_assistant(settings, completer)

    register_routes(app)

    return app
