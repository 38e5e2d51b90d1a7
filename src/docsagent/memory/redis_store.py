"""Redis-backed conversation memory.

Each ``(document, user)`` pair is one Redis list of JSON turns. Writes only ever ``RPUSH``, so
concurrent appends to the same key interleave without corrupting each other. The blocking
client calls run in a worker thread to keep the event loop free.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field

import redis

from docsagent.logging import get_logger
from docsagent.memory.base import ConversationTurn, TurnRole, tail

logger = get_logger(__name__)


@dataclass
class RedisConversationStore:
    """Append-only conversation log stored in Redis lists."""

    redis_url: str
    key_prefix: str
    ttl_seconds: int = 60 * 60 * 24 * 7
    max_turns: int = 0
    client: redis.Redis | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = redis.Redis.from_url(self.redis_url, decode_responses=True)

    def _key(self, document_id: str, user_id: str) -> str:
        return f"{self.key_prefix}:chat:{document_id}:{user_id}"

    def _read(self, key: str) -> list[dict[str, str]]:
        lines = self.client.lrange(key, 0, -1)
        turns: list[dict[str, str]] = []
        for line in lines:
            turns.append(ConversationTurn.model_validate_json(line).model_dump())
        return turns

    def _write(self, key: str, line: str) -> None:
        pipe = self.client.pipeline()
        pipe.rpush(key, line)
        pipe.expire(key, self.ttl_seconds)
        pipe.execute()

    async def get_history(self, document_id: str, user_id: str) -> list[dict[str, str]]:
        turns = await asyncio.to_thread(self._read, self._key(document_id, user_id))
        return tail(turns, self.max_turns)

    async def append(self, document_id: str, user_id: str, role: TurnRole, content: str) -> None:
        line = json.dumps(ConversationTurn(role=role, content=content).model_dump(), ensure_ascii=False)
        await asyncio.to_thread(self._write, self._key(document_id, user_id), line)

    async def clear(self, document_id: str, user_id: str) -> None:
        await asyncio.to_thread(self.client.delete, self._key(document_id, user_id))
        logger.info("Cleared chat history for document %s", document_id)
