"""Shared fixtures and fakes."""

from __future__ import annotations

import json
from typing import Any

import pytest

from docsagent.agents.editor import SectionEditor
from docsagent.agents.planner import OutlinePlanner
from docsagent.agents.single_shot import SingleShotGenerator
from docsagent.agents.writer import SectionWriter
from docsagent.jobs.registry import JobRegistry
from docsagent.llm.client import CompletionRequest
from docsagent.llm.gateway import CompletionGateway
from docsagent.memory.in_memory import InMemoryConversationStore
from docsagent.orchestrator.pacing import FixedDelayPacer
from docsagent.orchestrator.runner import IterativeOrchestrator
from docsagent.service import DocumentService


class FakeProvider:
    """Scripted completion provider that records every request it receives.

    Each scripted response is either a string (returned as the raw completion), a dict/list
    (returned JSON-encoded), an exception instance (raised) or a callable taking the request.
    """

    def __init__(self, responses: list[Any] | None = None) -> None:
        self.responses = list(responses or [])
        self.requests: list[CompletionRequest] = []

    def complete(self, request: CompletionRequest) -> str:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"unexpected completion request: {request.schema_name}")
        response = self.responses.pop(0)
        if callable(response):
            response = response(request)
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, str):
            return response
        return json.dumps(response)

    @property
    def calls(self) -> int:
        return len(self.requests)


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class SleepRecorder:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def make_outline(n: int = 8, *, title: str = "Remote Work Report", doc_format: str = "report") -> dict[str, Any]:
    types = ["intro"] + ["body"] * max(n - 2, 0) + (["conclusion"] if n > 1 else [])
    return {
        "title": title,
        "format": doc_format,
        "page_setup": {
            "page_size": "LETTER",
            "orientation": "portrait",
            "margin_top_inches": 1,
            "margin_bottom_inches": 1,
            "margin_left_inches": 1,
            "margin_right_inches": 1,
            "columns": 1,
        },
        "default_style": {
            "font_family": "Arial",
            "font_size_pt": 11,
            "line_spacing": 1.15,
            "text_color": "#000000",
            "paragraph_spacing_after_pt": 10,
        },
        "options": {
            "include_table_of_contents": True,
            "include_page_numbers": True,
            "page_number_alignment": "CENTER",
            "include_header": False,
            "header_text": None,
            "include_footer": False,
            "footer_text": None,
        },
        "sections": [
            {
                "section_id": f"s{i + 1}",
                "title": f"Section {i + 1}",
                "type": types[i],
                "depth": 1,
                "description": f"What section {i + 1} covers.",
            }
            for i in range(n)
        ],
    }


def make_section(section_id: str, *texts: str) -> dict[str, Any]:
    blocks: list[dict[str, Any]] = [
        {"block_id": f"{section_id}_b{i + 1}", "type": "paragraph", "content": text}
        for i, text in enumerate(texts or (f"Body of {section_id}.",))
    ]
    return {"section_id": section_id, "blocks": blocks}


def section_for_request(request: CompletionRequest) -> dict[str, Any]:
    """Build a section response for whatever section id the writer asked for."""

    user = request.messages[-1].content
    section_id = user.rsplit("Section ID: ", 1)[-1].strip()
    return make_section(section_id)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


def build_service(provider: FakeProvider) -> DocumentService:
    """Service wired to ``provider`` with in-process memory and no pacing delays."""

    gateway = CompletionGateway(provider)
    memory = InMemoryConversationStore()
    orchestrator = IterativeOrchestrator(
        OutlinePlanner(gateway),
        SectionWriter(gateway),
        JobRegistry(),
        pacer=FixedDelayPacer(sleep=SleepRecorder()),
    )
    return DocumentService(orchestrator, SingleShotGenerator(gateway), SectionEditor(gateway, memory), memory)
