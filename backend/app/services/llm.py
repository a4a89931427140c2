from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from ..core.settings import DEFAULT_SYSTEM_PROMPT, Settings

logger = logging.getLogger(__name__)

Completer = Callable[[str, str], Awaitable[str]]


class UpstreamError(RuntimeError):
    """Raised when the chat-completion endpoint cannot produce an answer."""


def _content_to_text(content: Any) -> str:
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return str(content)


class ChatCompletionClient:
    """Sends single-turn prompts to an OpenAI compatible chat endpoint."""

    def __init__(
        self,
        base_url: Optional[str],
        api_key: Optional[str],
        *,
        timeout: float = 60.0,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self.system_prompt = system_prompt

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatCompletionClient":
        return cls(
            settings.api_base_url,
            settings.api_key,
            timeout=settings.request_timeout,
            system_prompt=settings.system_prompt,
        )

    def _create_llm(self, model: str) -> ChatOpenAI:
        return ChatOpenAI(
            model=model,
            base_url=self.base_url,
            api_key=self.api_key,
            timeout=self.timeout,
            max_retries=0,
        )

    async def complete(self, message: str, model: str) -> str:
        try:
            # a missing API key surfaces here rather than at startup
            llm = self._create_llm(model)
            reply = await llm.ainvoke(
                [
                    SystemMessage(content=self.system_prompt),
                    HumanMessage(content=message),
                ]
            )
        except Exception as exc:  # pragma: no cover - network dependent
            logger.warning("Chat completion with model '%s' failed: %s", model, exc)
            raise UpstreamError(str(exc)) from exc
        return _content_to_text(reply.content)


__all__ = ["ChatCompletionClient", "Completer", "DEFAULT_SYSTEM_PROMPT", "UpstreamError"]
