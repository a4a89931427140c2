from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Tuple

import pytest
from fastapi.testclient import TestClient

from ..application import create_app
from ..core.settings import Settings
from ..services.llm import UpstreamError


class FakeCompleter:
    """Stands in for the chat-completion endpoint and records its calls."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    async def __call__(self, message: str, model: str) -> str:
        self.calls.append((message, model))
        if message == "boom":
            raise UpstreamError("upstream unavailable")
        if message == "silence":
            return ""
        return f"{model} answer to: {message}"


@pytest.fixture
def completer() -> FakeCompleter:
    return FakeCompleter()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        default_model="test-model",
        available_models=["test-model", "other-model"],
        data_dir=tmp_path / "data",
    )


@pytest.fixture
def client(settings: Settings, completer: FakeCompleter) -> Iterator[TestClient]:
    app = create_app(settings, completer=completer)
    with TestClient(app) as test_client:
        yield test_client
