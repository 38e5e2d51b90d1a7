"""ID utilities."""

from __future__ import annotations

import uuid


def new_job_id() -> str:
    """Return a globally unique, opaque job id."""

    return uuid.uuid4().hex


def section_block_prefix(section_id: str) -> str:
    """Prefix that scopes block ids to one section (``intro_b1``, ``intro_b2``, ...)."""

    return f"{section_id}_b"
