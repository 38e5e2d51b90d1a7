"""Conversation memory backends."""

from __future__ import annotations

from docsagent.config import Settings
from docsagent.memory.base import ConversationMemory, ConversationTurn
from docsagent.memory.in_memory import InMemoryConversationStore
from docsagent.memory.redis_store import RedisConversationStore


def build_memory(settings: Settings) -> ConversationMemory:
    """Create the configured conversation memory backend."""

    if settings.memory_backend == "redis":
        return RedisConversationStore(
            redis_url=settings.redis_url,
            key_prefix=settings.redis_key_prefix,
            ttl_seconds=settings.memory_ttl_s,
            max_turns=settings.history_max_turns,
        )
    return InMemoryConversationStore(max_turns=settings.history_max_turns)


__all__ = [
    "ConversationMemory",
    "ConversationTurn",
    "InMemoryConversationStore",
    "RedisConversationStore",
    "build_memory",
]
