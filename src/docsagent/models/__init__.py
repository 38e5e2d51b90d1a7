"""Pydantic models used across the project."""

from __future__ import annotations

from docsagent.models.blocks import BLOCK_TYPES, Block, parse_block
from docsagent.models.outline import (
    DefaultStyle,
    DocFormat,
    DocumentMeta,
    DocumentOptions,
    Outline,
    PageSetup,
    SectionDescriptor,
    SectionType,
)
from docsagent.models.responses import (
    AppendOperation,
    CreateOperation,
    DocumentResponse,
    InsertOperation,
    IterativeDocument,
    IterativeStart,
    PatchOperation,
    SectionEdit,
    SectionMeta,
    SectionPull,
    SectionResult,
    to_document_response,
)

__all__ = [
    "AppendOperation",
    "BLOCK_TYPES",
    "Block",
    "CreateOperation",
    "DefaultStyle",
    "DocFormat",
    "DocumentMeta",
    "DocumentOptions",
    "DocumentResponse",
    "InsertOperation",
    "IterativeDocument",
    "IterativeStart",
    "Outline",
    "PageSetup",
    "PatchOperation",
    "SectionDescriptor",
    "SectionEdit",
    "SectionMeta",
    "SectionPull",
    "SectionResult",
    "SectionType",
    "parse_block",
    "to_document_response",
]
