"""Response structures produced by the generation paths.

The single-shot wire format keeps four nullable sibling payloads (``document``, ``patch``,
``insert``, ``append``) next to an ``operation`` tag, because strict provider schemas need an
object root with every property required. Inside the application that shape is converted to
:data:`DocumentResponse`, a tagged union where each variant carries only its own payload.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from docsagent.models.outline import DefaultStyle, DocumentMeta, DocumentOptions, PageSetup, SectionType

RawBlock = dict[str, Any]


class SectionResult(BaseModel):
    """Generated content for one outline section."""

    section_id: str
    title: str
    blocks: list[RawBlock] = Field(default_factory=list)


class SectionMeta(BaseModel):
    """Manifest entry returned when a job starts; no content yet."""

    index: int
    section_id: str
    title: str
    type: SectionType


class IterativeDocument(BaseModel):
    """Batch (all sections at once) response."""

    mode: Literal["iterative"] = "iterative"
    operation: Literal["create"] = "create"
    document: DocumentMeta
    sections: list[SectionResult]


class IterativeStart(BaseModel):
    """Job-based response: outline metadata plus a section manifest."""

    mode: Literal["iterative_start"] = "iterative_start"
    job_id: str
    document: DocumentMeta
    sections_meta: list[SectionMeta]


class SectionPull(BaseModel):
    """One pulled section of a job."""

    section_id: str
    title: str
    index: int
    total: int
    blocks: list[RawBlock] = Field(default_factory=list)


class SectionEdit(BaseModel):
    """Replacement content for one addressable section."""

    target_section_id: str
    blocks: list[RawBlock]


# ---------------------------------------------------------------------------
# Single-shot operations
# ---------------------------------------------------------------------------


class CreatedDocument(BaseModel):
    title: str = ""
    # Single-shot formats are wider than outline formats (resume, cover_letter, ...).
    format: str = "custom"
    page_setup: PageSetup = Field(default_factory=PageSetup)
    default_style: DefaultStyle = Field(default_factory=DefaultStyle)
    options: DocumentOptions = Field(default_factory=DocumentOptions)
    blocks: list[RawBlock] = Field(default_factory=list)


class PatchPayload(BaseModel):
    target_block_id: str
    action: Literal["replace", "expand", "summarize", "rewrite"] = "replace"
    blocks: list[RawBlock] = Field(default_factory=list)


class InsertPayload(BaseModel):
    target_block_id: str
    position: Literal["before", "after"]
    blocks: list[RawBlock] = Field(default_factory=list)


class AppendPayload(BaseModel):
    blocks: list[RawBlock] = Field(default_factory=list)


class CreateOperation(BaseModel):
    operation: Literal["create"] = "create"
    document: CreatedDocument


class PatchOperation(BaseModel):
    operation: Literal["patch"] = "patch"
    patch: PatchPayload


class InsertOperation(BaseModel):
    operation: Literal["insert"] = "insert"
    insert: InsertPayload


class AppendOperation(BaseModel):
    operation: Literal["append"] = "append"
    append: AppendPayload


DocumentResponse = Annotated[
    Union[CreateOperation, PatchOperation, InsertOperation, AppendOperation],
    Field(discriminator="operation"),
]

_PAYLOAD_KEYS: dict[str, str] = {
    "create": "document",
    "patch": "patch",
    "insert": "insert",
    "append": "append",
}

_DOCUMENT_RESPONSE_ADAPTER: TypeAdapter[DocumentResponse] = TypeAdapter(DocumentResponse)


def to_document_response(wire: dict[str, Any]) -> DocumentResponse:
    """Convert the nullable-siblings wire form into the tagged union.

    Only the payload named by ``operation`` is kept; the other siblings are dropped whatever
    they contain.

    Raises:
        pydantic.ValidationError: Unknown operation or an unusable payload.
    """

    operation = wire.get("operation")
    key = _PAYLOAD_KEYS.get(operation) if isinstance(operation, str) else None
    data: dict[str, Any] = {"operation": operation}
    if key is not None:
        data[key] = wire.get(key)
    return _DOCUMENT_RESPONSE_ADAPTER.validate_python(data)
