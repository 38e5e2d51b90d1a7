"""JSON schemas for content blocks.

Two encodings are kept:

* ``SECTION_BLOCK_SCHEMA`` has one alternative per block type with only that type's fields
  and per-variant optional fields. It is used with ``strict: false``.
* ``STRICT_BLOCK_SCHEMA`` is the reduced set of alternatives that survives strict mode, where
  every listed property must also be required.
"""

from __future__ import annotations

from typing import Any

_STRING: dict[str, Any] = {"type": "string"}
_NUMBER: dict[str, Any] = {"type": "number"}
_INTEGER: dict[str, Any] = {"type": "integer"}
_BOOLEAN: dict[str, Any] = {"type": "boolean"}
_NULLABLE_STRING: dict[str, Any] = {"type": ["string", "null"]}
_ALIGNMENT: dict[str, Any] = {"type": "string", "enum": ["LEFT", "CENTER", "RIGHT"]}
_TEXT_ALIGNMENT: dict[str, Any] = {"type": "string", "enum": ["LEFT", "CENTER", "RIGHT", "JUSTIFIED"]}

_LIST_ITEM: dict[str, Any] = {
    "type": "object",
    "properties": {
        "content": _STRING,
        "indent_level": {"type": "integer", "enum": [0, 1, 2]},
        "bold": _BOOLEAN,
        "italic": _BOOLEAN,
    },
    "required": ["content", "indent_level"],
    "additionalProperties": False,
}

_TABLE_CELL: dict[str, Any] = {
    "type": "object",
    "properties": {
        "content": _STRING,
        "bold": _BOOLEAN,
        "italic": _BOOLEAN,
        "alignment": _ALIGNMENT,
        "colspan": _INTEGER,
        "rowspan": _INTEGER,
    },
    "required": ["content"],
    "additionalProperties": False,
}


def _variant(block_type: str, properties: dict[str, Any], required: list[str]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "block_id": _STRING,
            "type": {"type": "string", "enum": [block_type]},
            **properties,
        },
        "required": ["block_id", "type", *required],
        "additionalProperties": False,
    }


def _text_style() -> dict[str, Any]:
    return {
        "font_size_pt": _NUMBER,
        "font_color": _STRING,
        "bold": _BOOLEAN,
        "italic": _BOOLEAN,
        "alignment": _TEXT_ALIGNMENT,
    }


def _leaf_variants() -> list[dict[str, Any]]:
    return [
        _variant("main_heading", {"content": _STRING, **_text_style()}, ["content"]),
        _variant(
            "sub_heading",
            {"content": _STRING, "level": {"type": "integer", "enum": [1, 2, 3]}, **_text_style()},
            ["content", "level"],
        ),
        _variant(
            "paragraph",
            {"content": _STRING, "first_line_indent": _BOOLEAN, **_text_style()},
            ["content"],
        ),
        _variant(
            "bullet_list",
            {"items": {"type": "array", "items": _LIST_ITEM}},
            ["items"],
        ),
        _variant(
            "numbered_list",
            {
                "items": {"type": "array", "items": _LIST_ITEM},
                "numbering_style": {
                    "type": "string",
                    "enum": ["DECIMAL", "ALPHA_LOWER", "ALPHA_UPPER", "ROMAN_LOWER", "ROMAN_UPPER"],
                },
            },
            ["items"],
        ),
        _variant(
            "table",
            {
                "caption": _NULLABLE_STRING,
                "has_header_row": _BOOLEAN,
                "cells": {"type": "array", "items": {"type": "array", "items": _TABLE_CELL}},
            },
            ["cells"],
        ),
        _variant(
            "callout",
            {
                "content": _STRING,
                "style": {
                    "type": "string",
                    "enum": ["info", "warning", "tip", "important", "success", "quote", "danger"],
                },
                "title": _NULLABLE_STRING,
                "icon": _NULLABLE_STRING,
            },
            ["content", "style"],
        ),
        _variant(
            "code_block",
            {"content": _STRING, "language": _NULLABLE_STRING, "caption": _NULLABLE_STRING},
            ["content"],
        ),
        _variant("blockquote", {"content": _STRING, "attribution": _NULLABLE_STRING}, ["content"]),
        _variant(
            "image",
            {
                "alt_text": _STRING,
                "url": _NULLABLE_STRING,
                "caption": _NULLABLE_STRING,
                "width_percent": _NUMBER,
                "alignment": _ALIGNMENT,
            },
            ["alt_text"],
        ),
        _variant(
            "horizontal_rule",
            {"style": {"type": "string", "enum": ["solid", "dashed", "dotted", "double"]}},
            [],
        ),
        _variant("page_break", {}, []),
        _variant("spacer", {"height_pt": _NUMBER}, []),
        _variant(
            "table_of_contents",
            {"title": _STRING, "include_levels": {"type": "array", "items": _INTEGER}},
            [],
        ),
        _variant(
            "equation",
            {"content": _STRING, "display_mode": _BOOLEAN, "caption": _NULLABLE_STRING},
            ["content"],
        ),
        _variant(
            "key_value",
            {
                "layout": {"type": "string", "enum": ["vertical", "horizontal", "two_column"]},
                "items": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {"key": _STRING, "value": _STRING, "key_bold": _BOOLEAN},
                        "required": ["key", "value"],
                        "additionalProperties": False,
                    },
                },
            },
            ["items"],
        ),
        _variant("footnote", {"footnote_id": _STRING, "content": _STRING}, ["footnote_id", "content"]),
        _variant(
            "citation",
            {
                "citation_style": {
                    "type": "string",
                    "enum": ["APA", "MLA", "Chicago", "Harvard", "IEEE", "inline"],
                },
                "heading": _NULLABLE_STRING,
                "entries": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {"id": _STRING, "content": _STRING},
                        "required": ["id", "content"],
                        "additionalProperties": False,
                    },
                },
            },
            ["entries"],
        ),
    ]


def _columns_variant(leaves: list[dict[str, Any]]) -> dict[str, Any]:
    # Columns never nest, so their inner blocks are drawn from the leaf variants only.
    return _variant(
        "columns",
        {
            "num_columns": {"type": "integer", "enum": [2, 3]},
            "columns_content": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "column_index": _INTEGER,
                        "blocks": {"type": "array", "items": {"anyOf": leaves}},
                    },
                    "required": ["column_index", "blocks"],
                    "additionalProperties": False,
                },
            },
        },
        ["columns_content"],
    )


def section_block_schema() -> dict[str, Any]:
    """Fresh non-strict block schema with one alternative per block type."""

    leaves = _leaf_variants()
    return {"anyOf": [*leaves, _columns_variant(_leaf_variants())]}


def strict_block_schema() -> dict[str, Any]:
    """Fresh strict-mode block schema.

    Strict mode requires every property to be required, so text-like blocks share one shape
    with every style field present, and only tables, lists and callouts keep their own shape.
    """

    return {
        "anyOf": [
            {
                "type": "object",
                "properties": {
                    "block_id": _STRING,
                    "type": {
                        "type": "string",
                        "enum": [
                            "main_heading",
                            "sub_heading",
                            "paragraph",
                            "code_block",
                            "blockquote",
                            "horizontal_rule",
                            "page_break",
                            "spacer",
                        ],
                    },
                    "content": _STRING,
                    "level": _INTEGER,
                    "font_size_pt": _NUMBER,
                    "font_color": _STRING,
                    "bold": _BOOLEAN,
                    "italic": _BOOLEAN,
                    "alignment": _TEXT_ALIGNMENT,
                },
                "required": [
                    "block_id",
                    "type",
                    "content",
                    "level",
                    "font_size_pt",
                    "font_color",
                    "bold",
                    "italic",
                    "alignment",
                ],
                "additionalProperties": False,
            },
            {
                "type": "object",
                "properties": {
                    "block_id": _STRING,
                    "type": {"type": "string", "enum": ["table"]},
                    "cells": {
                        "type": "array",
                        "items": {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {"content": _STRING, "bold": _BOOLEAN},
                                "required": ["content", "bold"],
                                "additionalProperties": False,
                            },
                        },
                    },
                },
                "required": ["block_id", "type", "cells"],
                "additionalProperties": False,
            },
            {
                "type": "object",
                "properties": {
                    "block_id": _STRING,
                    "type": {"type": "string", "enum": ["bullet_list", "numbered_list"]},
                    "items": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {"content": _STRING, "indent_level": _INTEGER},
                            "required": ["content", "indent_level"],
                            "additionalProperties": False,
                        },
                    },
                },
                "required": ["block_id", "type", "items"],
                "additionalProperties": False,
            },
            {
                "type": "object",
                "properties": {
                    "block_id": _STRING,
                    "type": {"type": "string", "enum": ["callout"]},
                    "content": _STRING,
                    "style": {"type": "string", "enum": ["info", "warning", "success", "danger"]},
                    "title": _NULLABLE_STRING,
                    "icon": _NULLABLE_STRING,
                },
                "required": ["block_id", "type", "content", "style", "title", "icon"],
                "additionalProperties": False,
            },
        ]
    }
