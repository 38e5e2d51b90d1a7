"""Tests for post-response validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from docsagent.models.blocks import ColumnsBlock, ParagraphBlock, parse_block
from docsagent.validation import find_duplicate_block_ids, validate_blocks, validate_llm_response


def _p(block_id: str, text: str = "text") -> dict:
    return {"block_id": block_id, "type": "paragraph", "content": text}


def test_duplicate_block_id_reported_once_with_both_paths() -> None:
    """It should report one error per duplicated id, naming every location."""

    payload = {
        "operation": "create",
        "document": {"title": "T", "blocks": [_p("b1"), _p("b2"), _p("b1")]},
    }

    report = validate_llm_response(payload)

    dupes = [e for e in report.errors if e.startswith("Duplicate")]
    assert dupes == ["Duplicate block_id 'b1' at document.blocks[0], document.blocks[2]"]


def test_duplicates_inside_columns_are_found() -> None:
    """It should descend into column containers when checking ids."""

    blocks = [
        _p("b1"),
        {
            "block_id": "cols",
            "type": "columns",
            "columns_content": [
                {"column_index": 0, "blocks": [_p("b2")]},
                {"column_index": 1, "blocks": [_p("b1")]},
            ],
        },
    ]

    dupes = find_duplicate_block_ids(blocks)

    assert dupes == {"b1": ["blocks[0]", "blocks[1].columns_content[1].blocks[0]"]}


def test_missing_and_unknown_fields_are_reported() -> None:
    """It should flag missing ids, missing types and unknown types."""

    report = validate_blocks(
        [
            {"type": "paragraph", "content": "x"},
            {"block_id": "b2"},
            {"block_id": "b3", "type": "marquee"},
            "loose",
        ]
    )

    assert not report.valid
    assert "Block at blocks[0] missing block_id" in report.errors
    assert "Block b2 missing type" in report.errors
    assert "Block b3 has invalid type: marquee" in report.errors
    assert "Block at blocks[3] is not an object" in report.errors


def test_shape_checks_are_opt_in() -> None:
    """It should only check variant fields when asked to."""

    block = {"block_id": "b1", "type": "paragraph", "content": "x", "cells": []}

    assert validate_blocks([block]).valid
    assert not validate_blocks([block], check_shapes=True).valid


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"document": None}, "Missing required field: operation"),
        ({"operation": "delete"}, "Invalid operation: delete"),
        ({"operation": "create", "document": None}, "Missing document object for create operation"),
        ({"operation": "create", "document": {"blocks": []}}, "Document must have at least one block"),
        ({"operation": "patch", "patch": {"blocks": [_p("b1")]}}, "Missing patch.target_block_id"),
        (
            {"operation": "insert", "insert": {"target_block_id": "b1", "blocks": [_p("b9")]}},
            "Missing insert.position (before | after)",
        ),
        ({"operation": "append", "append": {"blocks": []}}, "Append must include blocks"),
    ],
)
def test_operation_payload_checks(payload: dict, expected: str) -> None:
    """It should check that each operation carries its required fields."""

    assert expected in validate_llm_response(payload).errors


def test_valid_patch_passes() -> None:
    """It should accept a complete patch."""

    payload = {
        "operation": "patch",
        "document": None,
        "patch": {"target_block_id": "b3", "action": "rewrite", "blocks": [_p("b3")]},
        "insert": None,
        "append": None,
    }

    assert validate_llm_response(payload).valid


def test_parse_block_is_closed() -> None:
    """It should select the variant by type and reject foreign fields."""

    assert isinstance(parse_block(_p("b1")), ParagraphBlock)
    nested = parse_block(
        {
            "block_id": "c",
            "type": "columns",
            "columns_content": [{"column_index": 0, "blocks": [_p("b1")]}],
        }
    )
    assert isinstance(nested, ColumnsBlock)
    assert isinstance(nested.columns_content[0].blocks[0], ParagraphBlock)

    with pytest.raises(ValidationError):
        parse_block({"block_id": "b1", "type": "paragraph", "content": "x", "language": "py"})
    with pytest.raises(ValidationError):
        parse_block({"block_id": "b1", "type": "nonsense"})
