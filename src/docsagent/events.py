"""Event model used for streaming batch generation.

A batch run yields a sequence of events as it moves through planning and the sections, so an
HTTP client can show progress over SSE instead of waiting for the whole document.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class ContentType(str, Enum):
    """Semantic types within event streams."""

    OUTLINE_READY = "outline_ready"
    SECTION_START = "section_start"
    SECTION_DONE = "section_done"
    DOCUMENT_DONE = "document_done"


class GenerationEvent(BaseModel):
    """A single event in a batch run."""

    run_id: str
    seq: int = Field(ge=1)
    ts: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    content_type: ContentType
    data: dict = Field(default_factory=dict)
