"""Schemas for long-form generation.

Phase 1 returns an outline (strict). Phase 2 returns the blocks of one section (non-strict,
because block variants carry per-variant optional fields). Section edits reuse the section
block encoding.
"""

from __future__ import annotations

from typing import Any

from docsagent.schemas.blocks import section_block_schema

OUTLINE_FORMATS: tuple[str, ...] = (
    "report",
    "article",
    "thesis",
    "research_paper",
    "proposal",
    "meeting_notes",
    "legal",
    "technical_docs",
    "case_study",
    "white_paper",
    "policy",
    "general",
)

SECTION_TYPES: tuple[str, ...] = ("intro", "body", "conclusion", "appendix", "abstract", "references")

# Short-form types (resume, cover letters, ...) are generated in a single call.
ITERATIVE_DOC_TYPES: frozenset[str] = frozenset(
    {
        "report",
        "article",
        "thesis",
        "research_paper",
        "proposal",
        "meeting_notes",
        "legal",
        "technical_docs",
        "case_study",
        "white_paper",
        "policy",
    }
)


def is_iterative_type(doc_type: str) -> bool:
    return doc_type in ITERATIVE_DOC_TYPES


def page_setup_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "page_size": {"type": "string", "enum": ["A4", "LETTER"]},
            "orientation": {"type": "string", "enum": ["portrait", "landscape"]},
            "margin_top_inches": {"type": "number"},
            "margin_bottom_inches": {"type": "number"},
            "margin_left_inches": {"type": "number"},
            "margin_right_inches": {"type": "number"},
            "columns": {"type": "integer"},
        },
        "required": [
            "page_size",
            "orientation",
            "margin_top_inches",
            "margin_bottom_inches",
            "margin_left_inches",
            "margin_right_inches",
            "columns",
        ],
        "additionalProperties": False,
    }


def default_style_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "font_family": {"type": "string"},
            "font_size_pt": {"type": "number"},
            "line_spacing": {"type": "number"},
            "text_color": {"type": "string"},
            "paragraph_spacing_after_pt": {"type": "number"},
        },
        "required": [
            "font_family",
            "font_size_pt",
            "line_spacing",
            "text_color",
            "paragraph_spacing_after_pt",
        ],
        "additionalProperties": False,
    }


def options_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "include_table_of_contents": {"type": "boolean"},
            "include_page_numbers": {"type": "boolean"},
            "page_number_alignment": {"type": "string", "enum": ["LEFT", "CENTER", "RIGHT"]},
            "include_header": {"type": "boolean"},
            "header_text": {"type": ["string", "null"]},
            "include_footer": {"type": "boolean"},
            "footer_text": {"type": ["string", "null"]},
        },
        "required": [
            "include_table_of_contents",
            "include_page_numbers",
            "page_number_alignment",
            "include_header",
            "header_text",
            "include_footer",
            "footer_text",
        ],
        "additionalProperties": False,
    }


def build_outline_schema(min_sections: int = 8, max_sections: int = 12) -> dict[str, Any]:
    """Fresh outline schema pinning the section count range."""

    return {
        "type": "object",
        "properties": {
            "title": {"type": "string"},
            "format": {"type": "string", "enum": list(OUTLINE_FORMATS)},
            "page_setup": page_setup_schema(),
            "default_style": default_style_schema(),
            "options": options_schema(),
            "sections": {
                "type": "array",
                "minItems": min_sections,
                "maxItems": max_sections,
                "items": {
                    "type": "object",
                    "properties": {
                        "section_id": {"type": "string"},
                        "title": {"type": "string"},
                        "type": {"type": "string", "enum": list(SECTION_TYPES)},
                        "depth": {"type": "integer", "enum": [1, 2, 3]},
                        "description": {"type": "string"},
                    },
                    "required": ["section_id", "title", "type", "depth", "description"],
                    "additionalProperties": False,
                },
            },
        },
        "required": ["title", "format", "page_setup", "default_style", "options", "sections"],
        "additionalProperties": False,
    }


def build_section_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "section_id": {"type": "string"},
            "blocks": {"type": "array", "items": section_block_schema()},
        },
        "required": ["section_id", "blocks"],
        "additionalProperties": False,
    }


def build_section_edit_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "target_section_id": {"type": "string"},
            "blocks": {"type": "array", "minItems": 1, "items": section_block_schema()},
        },
        "required": ["target_section_id", "blocks"],
        "additionalProperties": False,
    }


OUTLINE_SCHEMA: dict[str, Any] = build_outline_schema()
SECTION_SCHEMA: dict[str, Any] = build_section_schema()
SECTION_EDIT_SCHEMA: dict[str, Any] = build_section_edit_schema()
