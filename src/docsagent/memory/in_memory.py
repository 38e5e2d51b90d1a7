"""Process-local conversation memory."""

from __future__ import annotations

from docsagent.logging import get_logger
from docsagent.memory.base import ConversationTurn, TurnRole, tail

logger = get_logger(__name__)


class InMemoryConversationStore:
    """Conversation memory held in a dict; lost on restart.

    Construct one per process and inject it; there is no module-level instance.
    """

    def __init__(self, *, max_turns: int = 0) -> None:
        self._max_turns = max_turns
        self._turns: dict[tuple[str, str], list[ConversationTurn]] = {}

    async def get_history(self, document_id: str, user_id: str) -> list[dict[str, str]]:
        turns = [t.model_dump() for t in self._turns.get((document_id, user_id), [])]
        return tail(turns, self._max_turns)

    async def append(self, document_id: str, user_id: str, role: TurnRole, content: str) -> None:
        turn = ConversationTurn(role=role, content=content)
        self._turns.setdefault((document_id, user_id), []).append(turn)

    async def clear(self, document_id: str, user_id: str) -> None:
        self._turns.pop((document_id, user_id), None)
        logger.info("Cleared chat history for document %s", document_id)
