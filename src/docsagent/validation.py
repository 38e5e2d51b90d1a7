"""Post-response validation.

Schema-constrained generation already shapes the output; these checks run afterwards as a
second line. Callers log the errors as warnings and keep going with the data they have.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from docsagent.models.blocks import BLOCK_TYPES, parse_block
from docsagent.schemas.document import OPERATIONS


@dataclass(frozen=True)
class ValidationReport:
    errors: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def log_warnings(self, logger: logging.Logger, what: str) -> None:
        if self.errors:
            logger.warning("%s validation errors: %s", what, self.errors)


def iter_blocks(blocks: Any, path: str = "blocks") -> Iterator[tuple[str, Any]]:
    """Yield ``(path, block)`` for every block, descending into ``columns`` containers."""

    if not isinstance(blocks, list):
        return
    for i, block in enumerate(blocks):
        block_path = f"{path}[{i}]"
        yield block_path, block
        if isinstance(block, dict) and block.get("type") == "columns":
            for j, column in enumerate(block.get("columns_content") or []):
                if isinstance(column, dict):
                    yield from iter_blocks(column.get("blocks"), f"{block_path}.columns_content[{j}].blocks")


def find_duplicate_block_ids(blocks: Any, path: str = "blocks") -> dict[str, list[str]]:
    """Map every block id used more than once to all the paths it appears at."""

    seen: dict[str, list[str]] = {}
    for block_path, block in iter_blocks(blocks, path):
        if isinstance(block, dict) and isinstance(block.get("block_id"), str):
            seen.setdefault(block["block_id"], []).append(block_path)
    return {block_id: paths for block_id, paths in seen.items() if len(paths) > 1}


def validate_blocks(blocks: Any, *, path: str = "blocks", check_shapes: bool = False) -> ValidationReport:
    """Check block ids and types.

    Args:
        blocks: Raw block list.
        path: Path prefix used in error messages.
        check_shapes: Also validate each block against its typed variant (foreign or
            missing fields). Only meaningful for output generated with the per-variant schema.
    """

    errors: list[str] = []
    for block_path, block in iter_blocks(blocks, path):
        if not isinstance(block, dict):
            errors.append(f"Block at {block_path} is not an object")
            continue
        block_id = block.get("block_id")
        label = block_id if isinstance(block_id, str) and block_id else block_path
        if not isinstance(block_id, str) or not block_id:
            errors.append(f"Block at {block_path} missing block_id")
        block_type = block.get("type")
        if not block_type:
            errors.append(f"Block {label} missing type")
        elif block_type not in BLOCK_TYPES:
            errors.append(f"Block {label} has invalid type: {block_type}")
        elif check_shapes and block_type != "columns":
            try:
                parse_block(block)
            except ValidationError as exc:
                errors.append(f"Block {label} does not match {block_type}: {exc.error_count()} field error(s)")

    for block_id, paths in find_duplicate_block_ids(blocks, path).items():
        errors.append(f"Duplicate block_id '{block_id}' at {', '.join(paths)}")

    return ValidationReport(errors)


def _blocks_for(payload: dict[str, Any]) -> tuple[str, Any]:
    operation = payload.get("operation")
    key = "document" if operation == "create" else operation
    container = payload.get(key) if isinstance(key, str) else None
    if not isinstance(container, dict):
        return f"{key}.blocks", None
    return f"{key}.blocks", container.get("blocks")


def validate_llm_response(payload: Any) -> ValidationReport:
    """Validate a single-shot response in its wire form.

    Checks that the operation is known, that the operation's payload carries what it needs,
    that every block id is unique (including inside columns) and that every block type is
    known.
    """

    if not isinstance(payload, dict):
        return ValidationReport([f"Response is not an object: {type(payload).__name__}"])

    errors: list[str] = []
    operation = payload.get("operation")
    if not operation:
        errors.append("Missing required field: operation")
    elif operation not in OPERATIONS:
        errors.append(f"Invalid operation: {operation}")

    if operation == "create":
        document = payload.get("document")
        if not isinstance(document, dict):
            errors.append("Missing document object for create operation")
        elif not document.get("blocks"):
            errors.append("Document must have at least one block")
    elif operation in ("patch", "insert"):
        body = payload.get(operation)
        body = body if isinstance(body, dict) else {}
        if not body.get("target_block_id"):
            errors.append(f"Missing {operation}.target_block_id")
        if operation == "insert" and not body.get("position"):
            errors.append("Missing insert.position (before | after)")
        if not body.get("blocks"):
            errors.append(f"{operation.capitalize()} must include blocks")
    elif operation == "append":
        body = payload.get("append")
        if not isinstance(body, dict) or not body.get("blocks"):
            errors.append("Append must include blocks")

    if operation in OPERATIONS:
        path, blocks = _blocks_for(payload)
        errors.extend(validate_blocks(blocks, path=path).errors)

    return ValidationReport(errors)


def section_ids_are_unique(section_ids: Sequence[str]) -> bool:
    return len(set(section_ids)) == len(section_ids)
