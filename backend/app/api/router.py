from __future__ import annotations

from fastapi import FastAPI

from .routes import chat, knowledge


def register_routes(app: FastAPI) -> None:
    app.include_router(chat.router)
    app.include_router(knowledge.router)
