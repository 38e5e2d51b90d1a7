"""Single-shot response schema and per-document-type specialization.

The wire schema has an ``operation`` tag plus four nullable siblings; exactly one sibling is
expected to be non-null. :func:`docsagent.models.responses.to_document_response` turns that
into a proper tagged union once the response is back.
"""

from __future__ import annotations

import copy
from typing import Any

from docsagent.schemas.blocks import strict_block_schema
from docsagent.schemas.iterative import default_style_schema, options_schema, page_setup_schema

OPERATIONS: tuple[str, ...] = ("create", "patch", "insert", "append")

DOCUMENT_FORMATS: tuple[str, ...] = (
    "article",
    "report",
    "essay",
    "thesis",
    "resume",
    "cover_letter",
    "proposal",
    "meeting_notes",
    "readme",
    "letter",
    "research_paper",
    "blog_post",
    "custom",
)

# Doc types whose requested name is not itself a document format.
_FORMAT_ALIASES: dict[str, str] = {"technical_docs": "report"}


def _nullable(schema: dict[str, Any]) -> dict[str, Any]:
    return {"anyOf": [schema, {"type": "null"}]}


def _blocks() -> dict[str, Any]:
    return {"type": "array", "items": strict_block_schema()}


def _object(properties: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties),
        "additionalProperties": False,
    }


def build_response_schema() -> dict[str, Any]:
    """Fresh copy of the base single-shot response schema."""

    document = _object(
        {
            "title": {"type": "string"},
            "format": {"type": "string", "enum": list(DOCUMENT_FORMATS)},
            "page_setup": page_setup_schema(),
            "default_style": default_style_schema(),
            "options": options_schema(),
            "blocks": _blocks(),
        }
    )
    patch = _object(
        {
            "target_block_id": {"type": "string"},
            "action": {"type": "string", "enum": ["replace", "expand", "summarize", "rewrite"]},
            "blocks": _blocks(),
        }
    )
    insert = _object(
        {
            "target_block_id": {"type": "string"},
            "position": {"type": "string", "enum": ["before", "after"]},
            "blocks": _blocks(),
        }
    )
    append = _object({"blocks": _blocks()})

    return _object(
        {
            "operation": {"type": "string", "enum": list(OPERATIONS)},
            "document": _nullable(document),
            "patch": _nullable(patch),
            "insert": _nullable(insert),
            "append": _nullable(append),
        }
    )


RESPONSE_JSON_SCHEMA: dict[str, Any] = build_response_schema()


def _document_properties(schema: dict[str, Any]) -> dict[str, Any]:
    return schema["properties"]["document"]["anyOf"][0]["properties"]


def specialize(base: dict[str, Any], doc_type: str) -> dict[str, Any]:
    """Narrow the base response schema for one document type.

    The base schema is never modified; the narrowed schema is a deep copy.

    Args:
        base: A response schema shaped like :data:`RESPONSE_JSON_SCHEMA`.
        doc_type: Requested document type.

    Returns:
        The specialized schema.
    """

    schema = copy.deepcopy(base)
    doc_props = _document_properties(schema)

    if doc_type != "general":
        # Single-value enum rather than const; some strict modes only accept enum.
        doc_props["format"] = {"type": "string", "enum": [_FORMAT_ALIASES.get(doc_type, doc_type)]}

    page_props = doc_props["page_setup"]["properties"]
    option_props = doc_props["options"]["properties"]
    if doc_type in ("report", "research_paper"):
        option_props["include_table_of_contents"] = {"type": "boolean", "enum": [True]}
    elif doc_type == "thesis":
        page_props["page_size"] = {"type": "string", "enum": ["A4"]}
        option_props["include_page_numbers"] = {"type": "boolean", "enum": [True]}
    elif doc_type == "resume":
        option_props["include_table_of_contents"] = {"type": "boolean", "enum": [False]}

    return schema


def get_json_schema_for_type(doc_type: str) -> dict[str, Any]:
    """Specialized response schema for ``doc_type``."""

    return specialize(RESPONSE_JSON_SCHEMA, doc_type)
