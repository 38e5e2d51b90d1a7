"""Completion provider and gateway."""

from __future__ import annotations

from docsagent.llm.client import ChatMessage, CompletionProvider, CompletionRequest, LLMClient
from docsagent.llm.gateway import CompletionGateway

__all__ = [
    "ChatMessage",
    "CompletionGateway",
    "CompletionProvider",
    "CompletionRequest",
    "LLMClient",
]
