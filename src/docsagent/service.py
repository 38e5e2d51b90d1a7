"""Request handling.

Routes a generation request to the right path (single-shot, batch iterative, job-based
iterative or section edit) and keeps the per-document conversation memory up to date.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Literal, Union

from pydantic import BaseModel, Field

from docsagent.agents.editor import SectionEditor
from docsagent.agents.single_shot import SingleShotGenerator
from docsagent.config import Settings
from docsagent.events import ContentType, GenerationEvent
from docsagent.llm.client import LLMClient
from docsagent.llm.gateway import CompletionGateway
from docsagent.logging import get_logger
from docsagent.memory import ConversationMemory, build_memory
from docsagent.models.responses import (
    CreateOperation,
    DocumentResponse,
    IterativeDocument,
    IterativeStart,
    SectionEdit,
    SectionPull,
)
from docsagent.orchestrator.runner import IterativeOrchestrator
from docsagent.schemas.iterative import is_iterative_type

logger = get_logger(__name__)

GenerateMode = Literal["auto", "single", "iterative", "iterative_job", "edit"]

GenerateResult = Union[DocumentResponse, IterativeDocument, IterativeStart, SectionEdit]


class GenerateRequest(BaseModel):
    prompt: str = Field(min_length=1)
    doc_type: str = "general"
    document_id: str | None = None
    user_id: str = "anonymous"
    mode: GenerateMode = "auto"


class DocumentService:
    """Entry point shared by the HTTP layer and the CLI."""

    def __init__(
        self,
        orchestrator: IterativeOrchestrator,
        single_shot: SingleShotGenerator,
        editor: SectionEditor,
        memory: ConversationMemory,
    ) -> None:
        self.orchestrator = orchestrator
        self.single_shot = single_shot
        self.editor = editor
        self.memory = memory

    @classmethod
    def from_settings(cls, settings: Settings, *, gateway: CompletionGateway | None = None) -> DocumentService:
        if gateway is None:
            gateway = CompletionGateway(LLMClient(settings))
        memory = build_memory(settings)
        return cls(
            orchestrator=IterativeOrchestrator.from_settings(gateway, settings),
            single_shot=SingleShotGenerator(gateway, max_tokens=settings.max_completion_tokens),
            editor=SectionEditor(gateway, memory, max_tokens=settings.max_completion_tokens),
            memory=memory,
        )

    @staticmethod
    def resolve_mode(request: GenerateRequest) -> GenerateMode:
        if request.mode != "auto":
            return request.mode
        return "iterative_job" if is_iterative_type(request.doc_type) else "single"

    async def generate(self, request: GenerateRequest) -> GenerateResult:
        """Run one generation request.

        Raises:
            DocsAgentError: Any failure of the chosen path, unchanged.
        """

        mode = self.resolve_mode(request)
        logger.info("Generate request: mode=%s doc_type=%s", mode, request.doc_type)
        if mode == "edit":
            return await self.edit(request)

        history = await self._open_turn(request)
        result: GenerateResult
        if mode == "single":
            result = await self.single_shot.generate(request.prompt, request.doc_type, history)
        elif mode == "iterative":
            result = await self.orchestrator.generate_document(request.prompt, request.doc_type, history)
        else:
            result = await self.orchestrator.start_job(request.prompt, request.doc_type, history)

        if request.document_id:
            await self.memory.append(request.document_id, request.user_id, "assistant", digest(result))
        return result

    async def generate_stream(self, request: GenerateRequest) -> AsyncIterator[GenerationEvent]:
        """Batch iterative generation as a stream of progress events.

        Memory is kept the same way as :meth:`generate` in ``iterative`` mode, so a document
        produced here can be edited afterwards. ``request.mode`` is ignored.
        """

        logger.info("Stream request: doc_type=%s", request.doc_type)
        history = await self._open_turn(request)
        async for ev in self.orchestrator.generate_document_stream(request.prompt, request.doc_type, history):
            if ev.content_type == ContentType.DOCUMENT_DONE and request.document_id:
                document = IterativeDocument.model_validate(ev.data)
                await self.memory.append(request.document_id, request.user_id, "assistant", digest(document))
            yield ev

    async def edit(self, request: GenerateRequest) -> SectionEdit:
        """Rewrite one section of a document generated earlier under ``request.document_id``.

        Nothing is written to memory when the document id or its history is missing.
        """

        history: list[dict[str, str]] = []
        if request.document_id:
            history = await self.memory.get_history(request.document_id, request.user_id)
        document_id = self.editor.require_context(request.document_id, history)
        await self.memory.append(document_id, request.user_id, "user", request.prompt)
        return await self.editor.edit_section(
            request.prompt,
            request.doc_type,
            document_id,
            history,
            user_id=request.user_id,
        )

    async def _open_turn(self, request: GenerateRequest) -> list[dict[str, str]]:
        # History is read before the new user turn lands.
        if not request.document_id:
            return []
        history = await self.memory.get_history(request.document_id, request.user_id)
        await self.memory.append(request.document_id, request.user_id, "user", request.prompt)
        return history

    async def fetch_section(self, job_id: str, index: int) -> SectionPull:
        return await self.orchestrator.fetch_section(job_id, index)

    async def clear_memory(self, document_id: str, user_id: str) -> None:
        await self.memory.clear(document_id, user_id)
        logger.info("Cleared conversation memory for document %s", document_id)


def digest(result: GenerateResult) -> str:
    """Short assistant turn recorded in memory instead of the full response."""

    if isinstance(result, (IterativeDocument, IterativeStart)):
        if isinstance(result, IterativeStart):
            entries = [f"{m.section_id}: {m.title}" for m in result.sections_meta]
        else:
            entries = [f"{s.section_id}: {s.title}" for s in result.sections]
        return f"Generated outline for '{result.document.title}'. Sections: " + "; ".join(entries)
    if isinstance(result, CreateOperation):
        return f"Performed create operation. Document title: '{result.document.title}'."
    return f"Performed {result.operation} operation."
