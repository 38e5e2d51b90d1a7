"""Single-call generation for short documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from docsagent.agents.base import BaseAgent
from docsagent.errors import MalformedCompletion
from docsagent.llm.gateway import CompletionGateway
from docsagent.logging import get_logger
from docsagent.models.responses import DocumentResponse, to_document_response
from docsagent.prompts import DOCUMENT_SYSTEM_PROMPT, single_shot_user_prompt
from docsagent.schemas.document import get_json_schema_for_type
from docsagent.validation import validate_llm_response

logger = get_logger(__name__)


class SingleShotGenerator(BaseAgent):
    def __init__(self, gateway: CompletionGateway, *, max_tokens: int = 16384) -> None:
        super().__init__(gateway, max_tokens=max_tokens)

    async def generate(
        self,
        prompt: str,
        doc_type: str,
        history: Sequence[Mapping[str, Any]] = (),
    ) -> DocumentResponse:
        """Generate a whole document (or one edit operation) in one completion.

        Validation problems are logged and the response is returned as generated. Only a
        response whose operation payload cannot be read at all is an error.

        Raises:
            MalformedCompletion: Non-JSON content, or no readable operation payload.
        """

        raw = await self._gateway.request(
            DOCUMENT_SYSTEM_PROMPT,
            history,
            single_shot_user_prompt(doc_type, prompt),
            get_json_schema_for_type(doc_type),
            schema_name="document_response",
            strict=True,
            max_tokens=self._max_tokens,
        )

        validate_llm_response(raw).log_warnings(logger, "LLM response")
        if not isinstance(raw, dict):
            raise MalformedCompletion("document_response: expected a JSON object")
        try:
            return to_document_response(raw)
        except ValidationError as exc:
            raise MalformedCompletion(f"document_response: unreadable {raw.get('operation')!r} payload") from exc
