"""Base agent interfaces."""

from __future__ import annotations

from dataclasses import dataclass

from docsagent.llm.gateway import CompletionGateway


@dataclass(frozen=True)
class DocContext:
    """Document-level context every section writer sees."""

    title: str
    format: str


class BaseAgent:
    """Base class for docsagent agents."""

    def __init__(self, gateway: CompletionGateway, *, max_tokens: int) -> None:
        self._gateway = gateway
        self._max_tokens = max_tokens
