"""Tests for the section editor."""

from __future__ import annotations

import asyncio

import pytest

from conftest import FakeProvider
from docsagent.agents.editor import SectionEditor
from docsagent.errors import InvalidEditResponse, MissingDocumentContext, NoDocumentContext
from docsagent.llm.gateway import CompletionGateway
from docsagent.memory.in_memory import InMemoryConversationStore

HISTORY = [
    {"role": "user", "content": "Write a report on remote work"},
    {"role": "assistant", "content": "Generated outline for 'Remote Work'. Sections: intro: Introduction"},
]


def _edit(provider: FakeProvider, memory: InMemoryConversationStore, *, document_id: str | None = "doc-1", history=HISTORY):
    editor = SectionEditor(CompletionGateway(provider), memory)
    return asyncio.run(editor.edit_section("make the intro shorter", "report", document_id, history, user_id="u1"))


def test_edit_without_history_never_calls_provider() -> None:
    """It should refuse to edit before any completion when memory is empty."""

    provider = FakeProvider()

    with pytest.raises(NoDocumentContext):
        _edit(provider, InMemoryConversationStore(), history=[])
    assert provider.calls == 0


def test_edit_without_document_id_fails() -> None:
    """It should require a document id."""

    provider = FakeProvider()

    with pytest.raises(MissingDocumentContext):
        _edit(provider, InMemoryConversationStore(), document_id=None)
    assert provider.calls == 0


def test_edit_returns_replacement_and_records_digest() -> None:
    """It should return the replacement blocks and store only a short digest."""

    provider = FakeProvider(
        [
            {
                "target_section_id": "intro",
                "blocks": [
                    {"block_id": "intro_b1", "type": "paragraph", "content": "Short intro."},
                    {"block_id": "intro_b2", "type": "paragraph", "content": "Second line."},
                ],
            }
        ]
    )
    memory = InMemoryConversationStore()

    edit = _edit(provider, memory)

    assert edit.target_section_id == "intro"
    assert [b["block_id"] for b in edit.blocks] == ["intro_b1", "intro_b2"]
    req = provider.requests[0]
    assert req.schema_name == "section_edit"
    assert [m.role for m in req.messages] == ["system", "user", "assistant", "user"]
    history = asyncio.run(memory.get_history("doc-1", "u1"))
    assert history == [{"role": "assistant", "content": "Edited section 'intro'. Replaced with 2 blocks."}]


@pytest.mark.parametrize(
    "payload",
    [
        {"target_section_id": "", "blocks": [{"block_id": "x", "type": "paragraph", "content": "x"}]},
        {"target_section_id": "intro", "blocks": []},
        {"blocks": [{"block_id": "x", "type": "paragraph", "content": "x"}]},
        ["intro"],
    ],
)
def test_edit_rejects_incomplete_response(payload: object) -> None:
    """It should raise InvalidEditResponse and leave memory alone."""

    memory = InMemoryConversationStore()

    with pytest.raises(InvalidEditResponse):
        _edit(FakeProvider([payload]), memory)
    assert asyncio.run(memory.get_history("doc-1", "u1")) == []
