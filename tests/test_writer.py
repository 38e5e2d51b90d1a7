"""Tests for the section writer and its prompts."""

from __future__ import annotations

import asyncio

from conftest import FakeProvider, make_section
from docsagent.agents.base import DocContext
from docsagent.agents.writer import SectionWriter
from docsagent.llm.gateway import CompletionGateway
from docsagent.models.outline import SectionDescriptor
from docsagent.prompts import FIRST_SECTION_SENTINEL, style_for_format, writer_system_prompt

SECTION = SectionDescriptor(
    section_id="methods",
    title="Methods",
    type="body",
    depth=1,
    description="How the study was run.",
)


def _generate(provider: FakeProvider, prior_summary: str = "", doc_format: str = "thesis"):
    writer = SectionWriter(CompletionGateway(provider))
    ctx = DocContext(title="On Sleep", format=doc_format)
    return asyncio.run(writer.generate(SECTION, ctx, prior_summary))


def test_writer_first_section_uses_sentinel() -> None:
    """It should tell the model it is writing the first section when there is no summary."""

    provider = FakeProvider([make_section("methods")])

    _generate(provider)

    system = provider.requests[0].messages[0].content
    assert system.endswith(FIRST_SECTION_SENTINEL)
    assert "Academic, formal, first_line_indent, JUSTIFIED alignment, Times New Roman." in system
    assert '"methods_b1"' in system


def test_writer_includes_prior_summary_and_no_history() -> None:
    """It should carry the rolling summary in the system prompt and send no history."""

    provider = FakeProvider([make_section("methods")])

    _generate(provider, prior_summary="[Intro]: Sleep matters...")

    req = provider.requests[0]
    assert [m.role for m in req.messages] == ["system", "user"]
    assert req.messages[0].content.endswith("[Intro]: Sleep matters...")
    assert FIRST_SECTION_SENTINEL not in req.messages[0].content
    assert req.strict is False
    assert req.schema_name == "section_content"
    assert "Section ID: methods" in req.messages[1].content


def test_writer_returns_blocks_with_section_identity() -> None:
    """It should return the outline's id and title with the generated blocks."""

    provider = FakeProvider([make_section("methods", "We sampled 40 people.", "Each slept 8h.")])

    result = _generate(provider)

    assert result.section_id == "methods"
    assert result.title == "Methods"
    assert [b["block_id"] for b in result.blocks] == ["methods_b1", "methods_b2"]


def test_writer_accepts_empty_sections() -> None:
    """It should return an empty section rather than fail when no blocks came back."""

    provider = FakeProvider([{"section_id": "methods", "blocks": []}, {"section_id": "methods"}])

    assert _generate(provider).blocks == []
    assert _generate(provider).blocks == []


def test_writer_keeps_off_shape_blocks() -> None:
    """It should keep blocks that fail validation and drop only non-objects."""

    payload = {
        "section_id": "methods",
        "blocks": [
            {"block_id": "methods_b1", "type": "paragraph", "content": "ok", "cells": []},
            {"block_id": "methods_b1", "type": "mystery"},
            "stray text",
        ],
    }

    result = _generate(FakeProvider([payload]))

    assert len(result.blocks) == 2


def test_style_falls_back_to_general() -> None:
    """It should use the general style for unknown formats."""

    assert style_for_format("unknown") == style_for_format("general")
    prompt = writer_system_prompt(title="T", doc_format="meeting_notes", section_id="a", prior_summary="")
    assert "MEETING_NOTES" in prompt
    assert "Concise, action-oriented" in prompt
