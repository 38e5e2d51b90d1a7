"""Conversation memory interface.

Memory is an append-only log of turns keyed by ``(document_id, user_id)``. It is partitioned
per user so two people working on the same document never see each other's turns.
"""

from __future__ import annotations

from typing import Literal, Protocol

from pydantic import BaseModel

TurnRole = Literal["user", "assistant"]


class ConversationTurn(BaseModel):
    role: TurnRole
    content: str


class ConversationMemory(Protocol):
    """Keyed conversation log."""

    async def get_history(self, document_id: str, user_id: str) -> list[dict[str, str]]:
        """Return prior turns, oldest first, as ``{"role", "content"}`` dicts."""
        ...

    async def append(self, document_id: str, user_id: str, role: TurnRole, content: str) -> None: ...

    async def clear(self, document_id: str, user_id: str) -> None: ...


def tail(turns: list[dict[str, str]], max_turns: int) -> list[dict[str, str]]:
    """Keep the last ``max_turns`` turns (0 keeps everything)."""

    if max_turns <= 0:
        return turns
    return turns[-max_turns:]
