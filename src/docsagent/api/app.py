"""FastAPI app with generation, SSE streaming and section pull endpoints."""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, Field

from docsagent.config import load_settings
from docsagent.errors import (
    DocsAgentError,
    InvalidEditResponse,
    JobNotFound,
    MalformedCompletion,
    MissingDocumentContext,
    NoDocumentContext,
    PlanningFailed,
    ProviderError,
    SectionIndexNotFound,
)
from docsagent.logging import configure_logging, get_logger
from docsagent.models.responses import SectionEdit, SectionPull
from docsagent.service import DocumentService, GenerateRequest

_STATUS_BY_ERROR: tuple[tuple[type[DocsAgentError], int], ...] = (
    (JobNotFound, 404),
    (SectionIndexNotFound, 404),
    (NoDocumentContext, 400),
    (MissingDocumentContext, 400),
    (PlanningFailed, 502),
    (MalformedCompletion, 502),
    (InvalidEditResponse, 502),
    (ProviderError, 502),
)


class EditRequest(BaseModel):
    """Section edit request."""

    prompt: str = Field(min_length=1)
    doc_type: str = "general"
    document_id: str | None = None
    user_id: str = "anonymous"


def status_for(exc: DocsAgentError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500


def create_app(service: DocumentService | None = None) -> FastAPI:
    """Create FastAPI app."""

    if service is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        service = DocumentService.from_settings(settings)
    logger = get_logger(__name__)

    app = FastAPI(title="docsagent", version="0.1.0")

    @app.exception_handler(DocsAgentError)
    async def docsagent_error(_: Request, exc: DocsAgentError) -> JSONResponse:
        status = status_for(exc)
        logger.warning("Request failed with %s (%d): %s", type(exc).__name__, status, exc)
        return JSONResponse(status_code=status, content={"error": type(exc).__name__, "detail": str(exc)})

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/generate")
    async def generate(req: GenerateRequest) -> dict:
        result = await service.generate(req)
        return result.model_dump(mode="json")

    @app.post("/generate/stream")
    async def generate_stream(req: GenerateRequest) -> StreamingResponse:
        logger.info("API stream requested", extra={"prompt_len": len(req.prompt)})

        async def gen() -> AsyncGenerator[bytes, None]:
            async for ev in service.generate_stream(req):
                payload = json.dumps(ev.model_dump(mode="json"), ensure_ascii=False)
                yield f"data: {payload}\n\n".encode("utf-8")

        return StreamingResponse(gen(), media_type="text/event-stream")

    @app.get("/section/{job_id}/{index}")
    async def section(job_id: str, index: int) -> SectionPull:
        return await service.fetch_section(job_id, index)

    @app.post("/edit")
    async def edit(req: EditRequest) -> SectionEdit:
        return await service.edit(
            GenerateRequest(
                prompt=req.prompt,
                doc_type=req.doc_type,
                document_id=req.document_id,
                user_id=req.user_id,
                mode="edit",
            )
        )

    @app.delete("/memory/{document_id}")
    async def clear_memory(document_id: str, user_id: str = "anonymous") -> dict[str, str]:
        await service.clear_memory(document_id, user_id)
        return {"status": "cleared"}

    return app
