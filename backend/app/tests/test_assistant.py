from __future__ import annotations

import asyncio
import json
from typing import List

import pytest

from ..application import build_assistant
from ..core.settings import Settings
from ..models import QARecord
from ..services.assistant import AssistantService, InvalidRequest
from ..services.llm import UpstreamError


def make_assistant(settings: Settings, completer) -> AssistantService:
    return build_assistant(settings, completer)


def test_chat_records_and_persists_exchange(settings, completer) -> None:
    async def scenario() -> None:
        assistant = make_assistant(settings, completer)
        await assistant.load()
        record = await assistant.chat("hello", "other-model")

        assert record.id == 1
        assert record.answer == "other-model answer to: hello"
        assert record.model == "other-model"
        assert await assistant.recent_records() == [record]

    asyncio.run(scenario())

    saved = json.loads(settings.recent_qas_file.read_text(encoding="utf-8"))
    assert saved[0]["question"] == "hello"


def test_chat_substitutes_default_model(settings, completer) -> None:
    async def scenario() -> None:
        assistant = make_assistant(settings, completer)
        record = await assistant.chat("hello")
        assert record.model == "test-model"

    asyncio.run(scenario())
    assert completer.calls == [("hello", "test-model")]


def test_empty_message_is_rejected_before_upstream_call(settings, completer) -> None:
    assistant = make_assistant(settings, completer)

    with pytest.raises(InvalidRequest):
        asyncio.run(assistant.chat(""))
    assert completer.calls == []
    assert not settings.recent_qas_file.exists()


def test_upstream_failure_leaves_stores_untouched(settings, completer) -> None:
    async def scenario() -> None:
        assistant = make_assistant(settings, completer)
        with pytest.raises(UpstreamError, match="upstream unavailable"):
            await assistant.chat("boom")
        assert await assistant.recent_records() == []
        assert assistant.recent.next_id == 1

    asyncio.run(scenario())
    assert not settings.recent_qas_file.exists()


def test_empty_upstream_answer_is_recorded(settings, completer) -> None:
    async def scenario() -> None:
        assistant = make_assistant(settings, completer)
        record = await assistant.chat("silence")
        assert record.answer == ""

    asyncio.run(scenario())


def test_promote_evicted_record_is_not_found(settings, completer) -> None:
    async def scenario() -> None:
        assistant = make_assistant(settings, completer)
        for count in range(6):
            await assistant.chat(f"question {count}")

        assert await assistant.promote(1, "Too late", "") is None
        assert await assistant.knowledge_items() == []

    asyncio.run(scenario())
    assert not settings.knowledge_file.exists()


def test_promote_requires_title(settings, completer) -> None:
    async def scenario() -> None:
        assistant = make_assistant(settings, completer)
        await assistant.chat("question")
        with pytest.raises(InvalidRequest):
            await assistant.promote(1, "", "a")
        assert await assistant.knowledge_items() == []

        item = await assistant.promote(1, "  ", "a")
        assert item is not None and item.title == "  "

    asyncio.run(scenario())


def test_knowledge_item_is_a_copy_of_the_answer(settings, completer) -> None:
    async def scenario() -> None:
        assistant = make_assistant(settings, completer)
        source = await assistant.chat("keep me")
        item = await assistant.promote(source.id, "Kept", "x")
        assert item is not None

        for count in range(5):
            await assistant.chat(f"newer {count}")
        assert await assistant.recent.find(source.id) is None

        (stored,) = await assistant.knowledge_items()
        assert stored.content == source.answer
        assert stored.model == source.model
        assert stored.timestamp >= source.timestamp

    asyncio.run(scenario())


def test_full_promotion_lifecycle(settings, completer) -> None:
    async def scenario() -> None:
        assistant = make_assistant(settings, completer)
        for count in range(1, 7):
            await assistant.chat(f"question {count}")

        assert [record.id for record in await assistant.recent_records()] == [6, 5, 4, 3, 2]

        newest = await assistant.recent.find(6)
        item = await assistant.promote(6, "T", "a,b")
        assert item is not None
        assert item.content == newest.answer
        assert item.tags == ["a", "b"]
        assert await assistant.knowledge_items() == [item]

        assert await assistant.delete_knowledge(item.id) is True
        assert await assistant.knowledge_items() == []
        assert await assistant.delete_knowledge(item.id) is False

    asyncio.run(scenario())


def test_state_is_restored_on_startup(settings, completer) -> None:
    async def scenario() -> None:
        first = make_assistant(settings, completer)
        for count in range(3):
            await first.chat(f"question {count}")
        await first.promote(3, "Saved", "tag")

        second = make_assistant(settings, completer)
        await second.load()
        assert [record.id for record in await second.recent_records()] == [3, 2, 1]
        assert [item.title for item in await second.knowledge_items()] == ["Saved"]

        record = await second.chat("after restart")
        assert record.id == 4
        item = await second.promote(4, "Second", "")
        assert item is not None and item.id == 2

    asyncio.run(scenario())


def test_concurrent_chats_get_unique_ids_and_consistent_file(settings, completer) -> None:
    async def scenario() -> List[QARecord]:
        assistant = make_assistant(settings, completer)
        records = await asyncio.gather(*(assistant.chat(f"question {count}") for count in range(8)))

        assert sorted(record.id for record in records) == list(range(1, 9))
        recent = await assistant.recent_records()
        assert [record.id for record in recent] == [8, 7, 6, 5, 4]
        return recent

    recent = asyncio.run(scenario())

    saved = json.loads(settings.recent_qas_file.read_text(encoding="utf-8"))
    assert len(saved) <= 5
    assert [entry["id"] for entry in saved] == [record.id for record in recent]
