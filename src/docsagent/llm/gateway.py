"""Completion gateway.

The gateway is the only component that talks to the completion provider. It builds the
message sequence (system, history, user), asks for a schema-constrained response and decodes
the JSON. It does not validate semantics and it never retries: the caller decides what a
failure means.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Mapping, Sequence

from docsagent.errors import MalformedCompletion
from docsagent.llm.client import ChatMessage, CompletionProvider, CompletionRequest, LLMClient
from docsagent.logging import get_logger
from docsagent.utils.json_payload import parse_json_payload

logger = get_logger(__name__)


class CompletionGateway:
    """Schema-constrained request/response boundary around a completion provider."""

    def __init__(self, provider: CompletionProvider) -> None:
        self._provider = provider

    @staticmethod
    def build_messages(
        system: str,
        history: Sequence[Mapping[str, Any]],
        user_message: str,
    ) -> list[ChatMessage]:
        """System message first, then prior turns in order, then the new user message."""

        messages = [ChatMessage(role="system", content=system)]
        messages.extend(LLMClient.format_messages(history))
        messages.append(ChatMessage(role="user", content=user_message))
        return messages

    async def request(
        self,
        system: str,
        history: Sequence[Mapping[str, Any]],
        user_message: str,
        schema: Mapping[str, Any],
        *,
        schema_name: str,
        strict: bool,
        max_tokens: int,
    ) -> Any:
        """Request a schema-constrained completion and decode it.

        Args:
            system: Role and behavioral contract for the model.
            history: Prior conversation turns (``{"role", "content"}`` mappings).
            user_message: The final user message.
            schema: JSON schema the provider must conform to.
            schema_name: Name reported to the provider.
            strict: Provider strict mode. Strict schemas must list every property as required.
            max_tokens: Completion token budget.

        Returns:
            The decoded JSON value.

        Raises:
            MalformedCompletion: Empty or non-JSON content.
            ProviderError: Propagated unchanged from the provider.
        """

        completion = CompletionRequest(
            messages=self.build_messages(system, history, user_message),
            json_schema=schema,
            schema_name=schema_name,
            strict=strict,
            max_tokens=max_tokens,
        )
        started = time.monotonic()
        raw = await asyncio.to_thread(self._provider.complete, completion)
        logger.info(
            "Completion %s received (%d chars, %.2fs)",
            schema_name,
            len(raw or ""),
            time.monotonic() - started,
        )

        try:
            return parse_json_payload(raw)
        except ValueError as exc:
            logger.warning("Completion %s is not valid JSON: %s", schema_name, exc)
            raise MalformedCompletion(
                f"{schema_name}: provider returned malformed content ({exc})",
                raw=raw,
            ) from exc
