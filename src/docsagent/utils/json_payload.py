"""JSON payload extraction for completion responses.

Schema-constrained completions should already be bare JSON, but some OpenAI-compatible
providers still wrap the object in a markdown fence. Only that wrapper is tolerated; any other
prose around the payload is treated as a malformed completion.
"""

from __future__ import annotations

import json
import re
from typing import Any

from docsagent.logging import get_logger

logger = get_logger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(?P<body>.*?)\n?```$", re.DOTALL | re.IGNORECASE)


def strip_code_fence(text: str) -> str:
    """Return the inside of a surrounding ```json ... ``` fence, or the text unchanged."""

    cleaned = text.strip()
    m = _FENCE_RE.match(cleaned)
    if m:
        logger.debug("strip_code_fence: unwrapped fenced JSON payload")
        return m.group("body").strip()
    return cleaned


def parse_json_payload(text: str) -> Any:
    """Parse a completion payload.

    Args:
        text: Raw assistant content.

    Returns:
        The decoded JSON value.

    Raises:
        ValueError: If the content is empty or is not valid JSON
            (``json.JSONDecodeError`` is a ``ValueError``).
    """

    if not text or not text.strip():
        raise ValueError("empty completion content")
    return json.loads(strip_code_fence(text))
