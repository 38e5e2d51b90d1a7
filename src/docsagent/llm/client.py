"""OpenAI-compatible completion provider.

This wraps the `openai` Python SDK and exposes one schema-constrained chat completion call.
Groq and other OpenAI-compatible endpoints are reached through `openai_base_url`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Iterable, Literal, Mapping, Protocol, Sequence

import openai
from openai import OpenAI

from docsagent.config import Settings
from docsagent.errors import ProviderError
from docsagent.logging import get_logger

logger = get_logger(__name__)

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    """A chat message."""

    role: Role
    content: str


@dataclass(frozen=True)
class CompletionRequest:
    """One schema-constrained completion request."""

    messages: Sequence[ChatMessage]
    json_schema: Mapping[str, Any]
    schema_name: str
    strict: bool
    max_tokens: int

    def response_format(self) -> dict[str, Any]:
        return {
            "type": "json_schema",
            "json_schema": {
                "name": self.schema_name,
                "strict": self.strict,
                "schema": dict(self.json_schema),
            },
        }


class CompletionProvider(Protocol):
    """Anything that can turn a :class:`CompletionRequest` into raw assistant text."""

    def complete(self, request: CompletionRequest) -> str: ...


class LLMClient:
    """Completion provider using the OpenAI-compatible Chat Completions API."""

    def __init__(self, settings: Settings, *, client: OpenAI | None = None) -> None:
        self._settings = settings
        if client is not None:
            self._client = client
            return
        if not settings.openai_api_key:
            raise ValueError(
                "Missing DOCSAGENT_OPENAI_API_KEY. "
                "Set it in environment variables or a .env file."
            )

        self._client = OpenAI(api_key=settings.openai_api_key, base_url=settings.openai_base_url)

    def complete(self, request: CompletionRequest) -> str:
        """Run one completion.

        Args:
            request: Messages, response schema and token budget.

        Returns:
            Assistant message content ("" when the provider returned no content).

        Raises:
            ProviderError: On transport, auth or rate-limit failures.
        """

        payload: list[dict[str, str]] = [{"role": m.role, "content": m.content} for m in request.messages]
        started = time.monotonic()
        try:
            resp = self._client.chat.completions.create(
                model=self._settings.openai_model,
                messages=payload,
                response_format=request.response_format(),
                max_completion_tokens=request.max_tokens,
                timeout=self._settings.openai_timeout_s,
            )
        except openai.OpenAIError as exc:
            logger.warning(
                "Provider call failed",
                extra={"schema": request.schema_name, "error": type(exc).__name__},
            )
            raise ProviderError(f"{type(exc).__name__}: {exc}") from exc

        logger.debug(
            "Provider call done in %.2fs",
            time.monotonic() - started,
            extra={"schema": request.schema_name, "model": self._settings.openai_model},
        )
        if not resp.choices:
            return ""
        choice = resp.choices[0]
        if not choice.message or choice.message.content is None:
            return ""
        return choice.message.content

    @staticmethod
    def format_messages(messages: Iterable[Mapping[str, Any]]) -> list[ChatMessage]:
        """Convert plain dict messages (e.g. conversation turns) to ChatMessage."""

        out: list[ChatMessage] = []
        for m in messages:
            out.append(ChatMessage(role=m["role"], content=m["content"]))
        return out
