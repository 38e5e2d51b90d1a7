"""JSON schemas sent to the completion provider."""

from __future__ import annotations

from docsagent.schemas.document import (
    OPERATIONS,
    RESPONSE_JSON_SCHEMA,
    build_response_schema,
    get_json_schema_for_type,
    specialize,
)
from docsagent.schemas.iterative import (
    ITERATIVE_DOC_TYPES,
    OUTLINE_SCHEMA,
    SECTION_EDIT_SCHEMA,
    SECTION_SCHEMA,
    build_outline_schema,
    is_iterative_type,
)

__all__ = [
    "ITERATIVE_DOC_TYPES",
    "OPERATIONS",
    "OUTLINE_SCHEMA",
    "RESPONSE_JSON_SCHEMA",
    "SECTION_EDIT_SCHEMA",
    "SECTION_SCHEMA",
    "build_outline_schema",
    "build_response_schema",
    "get_json_schema_for_type",
    "is_iterative_type",
    "specialize",
]
